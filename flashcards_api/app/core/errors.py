"""
Application errors and their translation to HTTP responses.

Services raise subclasses of ``FlashcardsError`` for conditions the
client caused (bad credentials, duplicate email).  Anything else that
escapes a handler is treated as a server fault.  All of them end up as
plain text responses, produced by the handlers registered in
``register_exception_handlers`` or, for server faults, by the
``catch_unexpected_errors`` middleware.  The routers stay free of
try/except blocks.
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "server error"


class FlashcardsError(Exception):
    """Base class for errors reported back to the client."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "bad request"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class AuthenticationError(FlashcardsError):
    # Same text for unknown email and wrong password.
    message = "email or password is incorrect"


class EmailInUseError(FlashcardsError):
    message = "email is already in use"


class EmptyCardUpdateError(FlashcardsError):
    message = "no card fields to update"


def _describe_validation_error(exc: RequestValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "invalid request: " + "; ".join(problems)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the plain text error handlers on ``app``."""

    @app.exception_handler(FlashcardsError)
    async def flashcards_error_handler(request: Request, exc: FlashcardsError) -> PlainTextResponse:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
        return PlainTextResponse(_describe_validation_error(exc), status_code=status.HTTP_400_BAD_REQUEST)


async def catch_unexpected_errors(request: Request, call_next) -> Response:
    """HTTP middleware turning any escaped exception into ``server error``.

    It is registered inside the security header and access log
    middleware, so 500 responses get the same headers and log line as
    every other response.
    """
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return PlainTextResponse(SERVER_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
