"""
Request size limit middleware.
Rejects JSON bodies above the configured size before they are parsed.
"""
import logging
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Middleware returning 413 for request bodies larger than ``max_bytes``."""

    def __init__(self, app, max_bytes: int = 1024 * 1024):
        super().__init__(app)
        self.max_bytes = max_bytes

    def _too_large(self, request: Request, size: int) -> JSONResponse:
        logger.warning(
            f"Rejected {request.method} {request.url.path}: body of {size} bytes exceeds {self.max_bytes}"
        )
        return JSONResponse(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            content={
                "error": "Payload Too Large",
                "message": f"Request body must not exceed {self.max_bytes} bytes",
            },
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method not in ("POST", "PUT", "PATCH"):
            return await call_next(request)

        content_length = request.headers.get("content-length")
        if content_length is not None:
            try:
                declared = int(content_length)
            except ValueError:
                return JSONResponse(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    content={"error": "Bad Request", "message": "Invalid Content-Length header"},
                )
            if declared > self.max_bytes:
                return self._too_large(request, declared)
        else:
            # Chunked upload: read it once, downstream handlers get the cached body
            body = await request.body()
            if len(body) > self.max_bytes:
                return self._too_large(request, len(body))

        return await call_next(request)
