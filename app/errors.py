# app/errors.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("product_api.errors")

NOT_FOUND_MESSAGE = "Product not found"
VALIDATION_MESSAGE = "Name & numeric price are required"
UNAUTHORIZED_MESSAGE = "Unauthorized – invalid or missing API key"
INVALID_JSON_MESSAGE = "Invalid JSON body"


# ---------------------------
# Error taxonomy
# ---------------------------
class ApiError(Exception):
    """Base for every error the formatter knows how to render.

    Anything that is not an ``ApiError`` is treated as unclassified and
    rendered as a 500 without exposing its message.
    """

    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class Unauthorized(ApiError):
    status_code = 401
    message = UNAUTHORIZED_MESSAGE


class ValidationFailed(ApiError):
    status_code = 400
    message = VALIDATION_MESSAGE


class NotFound(ApiError):
    status_code = 404
    message = NOT_FOUND_MESSAGE


# ---------------------------
# Formatter
# ---------------------------
def render_error(exc: Exception, request: Optional[Request] = None) -> JSONResponse:
    """The only place that writes an error body."""
    where = f"{request.method} {request.url.path}" if request is not None else "-"
    headers = None

    if isinstance(exc, ApiError):
        status, message = exc.status_code, exc.message
        logger.warning("%s -> %d %s: %s", where, status, type(exc).__name__, message)
    elif isinstance(exc, StarletteHTTPException):
        status, message = exc.status_code, str(exc.detail)
        # e.g. Allow on a 405
        headers = exc.headers
        logger.warning("%s -> %d HTTPException: %s", where, status, message)
    else:
        status, message = 500, ApiError.message
        logger.error("%s -> 500 unhandled %r", where, exc, exc_info=exc)

    return JSONResponse(status_code=status, content={"error": message}, headers=headers)


async def _api_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return render_error(exc, request)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # FastAPI reports undecodable JSON as a validation error too
    if any(err.get("type") == "json_invalid" for err in exc.errors()):
        return render_error(ValidationFailed(INVALID_JSON_MESSAGE), request)
    return render_error(ValidationFailed(), request)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(StarletteHTTPException, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
