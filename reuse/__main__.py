""" Main application entry point

 `python -m reuse`

"""

import uvicorn

from reuse.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "reuse.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
