"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class SwapiError(Exception):
    """Base exception for a failed SWAPI fetch."""

    def __init__(self, message: str, endpoint: str):
        super().__init__(message)
        self.endpoint = endpoint


class HttpStatusError(SwapiError):
    def __init__(self, endpoint: str, upstream_status: int):
        super().__init__(f"Request failed with status code {upstream_status}", endpoint)
        self.upstream_status = upstream_status


class RequestTimeoutError(SwapiError):
    def __init__(self, endpoint: str):
        super().__init__(f"Request timeout for {endpoint}", endpoint)


class TransportError(SwapiError):
    def __init__(self, endpoint: str, reason: str):
        super().__init__(f"Network error for {endpoint}: {reason}", endpoint)


class ParseError(SwapiError):
    def __init__(self, endpoint: str, reason: str):
        super().__init__(f"Invalid JSON from {endpoint}: {reason}", endpoint)


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(_request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
