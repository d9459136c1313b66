"""
Logging setup and request logging middleware.
Every request gets an id (X-Request-Id) and one access log line.
"""

import logging
import time
import uuid

from fastapi import Request

logger = logging.getLogger("reuse.access")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging. basicConfig is a no-op once handlers exist, so repeat calls only adjust the level."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())


async def request_logging_middleware(request: Request, call_next):
    request.state.request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers["X-Request-Id"] = request.state.request_id
        return response
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms) request_id=%s",
            request.method,
            request.url.path,
            status_code,
            elapsed_ms,
            request.state.request_id,
        )
