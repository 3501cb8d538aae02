"""
Error handling middleware and exception handlers.
Centralizes error handling and response formatting.

Every error response uses the ``ErrorResponse`` envelope
(``{"error": ..., "message": ...}``) and is passed through credential
redaction before it leaves the process.
"""
import logging
import traceback
from http import HTTPStatus
from typing import Callable, List, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from postgrest import APIError as PostgrestError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from homeo_chat.config.settings import Settings
from homeo_chat.exceptions import (
    CompletionError,
    CompletionTimeoutError,
    DuplicateUserError,
    StoreError,
    StoreNotConfiguredError,
)
from homeo_chat.utils import redact

logger = logging.getLogger(__name__)


def _settings_for(request: Request) -> Optional[Settings]:
    return getattr(request.app.state, "settings", None)


def _secrets_for(request: Request) -> List[str]:
    settings = _settings_for(request)
    return settings.secret_values() if settings else []


def error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details=None,
) -> JSONResponse:
    """Build a redacted ``ErrorResponse`` body."""
    content = {
        "error": error,
        "message": redact(message, _secrets_for(request)),
    }
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed payloads are client errors (400)."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    logger.warning(
        "Validation error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "errors": errors,
        },
    )
    fields = sorted(
        {err["loc"][1] for err in errors if len(err["loc"]) > 1 and isinstance(err["loc"][1], str)}
    )
    if any(err["type"] == "json_invalid" for err in errors):
        message = "Invalid JSON body"
    elif "messages" in fields:
        message = "Messages array required"
    elif fields:
        message = f"Invalid or missing fields: {', '.join(fields)}"
    else:
        message = "Invalid request body"
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Bad Request",
        message,
        details=errors,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap ``HTTPException`` details in the standard envelope."""
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        error = str(exc.detail["error"])
        message = str(exc.detail.get("message", error))
    else:
        error = HTTPStatus(exc.status_code).phrase
        message = str(exc.detail)
    response = error_response(request, exc.status_code, error, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def completion_exception_handler(request: Request, exc: CompletionError) -> JSONResponse:
    """Upstream failures: 504 on timeout, 500 otherwise."""
    if isinstance(exc, CompletionTimeoutError):
        return error_response(
            request,
            status.HTTP_504_GATEWAY_TIMEOUT,
            "Chat request timed out",
            "The language model did not respond in time. Please try again.",
        )
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Chat request failed",
        str(exc) or type(exc).__name__,
    )


async def store_exception_handler(request: Request, exc: StoreError) -> JSONResponse:
    if isinstance(exc, DuplicateUserError):
        return error_response(request, status.HTTP_409_CONFLICT, "Conflict", str(exc))
    logger.error(
        "Store error",
        extra={"path": request.url.path, "method": request.method, "error": str(exc)},
    )
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Database Error",
        "A database error occurred. Please try again later.",
    )


async def store_not_configured_handler(request: Request, exc: StoreNotConfiguredError) -> JSONResponse:
    return error_response(
        request,
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Service Unavailable",
        str(exc),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers for domain and validation errors."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(CompletionError, completion_exception_handler)
    app.add_exception_handler(StoreError, store_exception_handler)
    app.add_exception_handler(StoreNotConfiguredError, store_not_configured_handler)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Fallback for anything the exception handlers did not turn into a response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            response = await call_next(request)
            return response

        except PostgrestError as e:
            logger.error(
                "Supabase API error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error": str(e),
                    "code": getattr(e, "code", None),
                },
                exc_info=True,
            )
            return error_response(
                request,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Database Error",
                "A database error occurred. Please try again later.",
            )

        except Exception as e:
            tb_str = traceback.format_exc()
            settings = _settings_for(request)
            # Unknown deployments are treated as production
            is_production = settings.is_production if settings else True

            logger.error(
                "Unhandled error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error": redact(str(e), _secrets_for(request)),
                    "error_type": type(e).__name__,
                    "traceback": None if is_production else redact(tb_str, _secrets_for(request)),
                },
                exc_info=True,
            )

            # Don't expose internal errors in production
            if is_production:
                message = "An internal error occurred. Please try again later."
            else:
                message = f"{type(e).__name__}: {str(e)}"

            return error_response(
                request,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Internal Server Error",
                message,
            )
