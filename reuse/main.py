"""
FastAPI application entry point.
Mounts routes, CORS, request logging, error handlers and Prometheus metrics.
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app
from starlette.exceptions import HTTPException as StarletteHTTPException

from reuse import __version__
from reuse.api.router import api_router
from reuse.config import get_settings
from reuse.core.errors import (
    ReUseError,
    http_exception_handler,
    request_validation_handler,
    reuse_error_handler,
    unhandled_exception_handler,
)
from reuse.core.logging import configure_logging, request_logging_middleware


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="ReUse: list items to donate, trade or sell.",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_logging_middleware)

    app.add_exception_handler(ReUseError, reuse_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Prometheus metrics at /metrics
    app.mount("/metrics", make_asgi_app())

    app.include_router(api_router)
    return app


app = create_app()
