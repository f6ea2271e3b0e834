"""
HTTP middleware: CORS, security headers and access logging.

The access log line mimics the classic ``:method :url :status
:res[content-length] - :response-time ms`` format so existing log
parsing keeps working.
"""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .errors import catch_unexpected_errors
from .logging_config import ACCESS_LOGGER_NAME

access_logger = logging.getLogger(ACCESS_LOGGER_NAME)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
}


def setup_middleware(app: FastAPI) -> None:
    """Register all middleware on ``app``.

    Starlette runs middleware in reverse registration order, so the
    access logger added last sees the final status and headers, and
    the error catcher added first sits closest to the routers.
    """
    app.middleware("http")(catch_unexpected_errors)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            "%s %s %s %s - %.3f ms",
            request.method,
            request.url.path,
            response.status_code,
            response.headers.get("content-length", "-"),
            elapsed_ms,
        )
        return response
