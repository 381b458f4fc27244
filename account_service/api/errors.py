"""Error rendering and response headers shared by every endpoint."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from account_service.api.body import DecodeError
from account_service.schemas.user import ErrorResponse

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

INTERNAL_ERROR = "Internal server error"


def error_response(status_code: int, error: str) -> JSONResponse:
    """Build a ``{"success": false, "error": ...}`` response."""
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=error).model_dump())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTPException details in the service's error shape."""
    return error_response(exc.status_code, str(exc.detail))


async def decode_error_handler(request: Request, exc: DecodeError) -> JSONResponse:
    """Malformed bodies are the client's fault."""
    logger.info("Rejected malformed body on %s %s", request.method, request.url.path)
    return error_response(400, str(exc))


async def add_cors_headers(request: Request, call_next):
    """Stamp permissive CORS headers on every response."""
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


def setup_error_handling(app: FastAPI) -> None:
    """Register the error handlers and header middleware on ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(DecodeError, decode_error_handler)
    app.middleware("http")(add_cors_headers)
