import hmac
import logging
from datetime import datetime, timezone
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from .errors import Unauthorized, render_error

access_logger = logging.getLogger("product_api.access")


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """Logs ``[timestamp] METHOD path?query`` for every request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        access_logger.info("[%s] %s %s", _utc_timestamp(), request.method, target)
        return await call_next(request)


class ErrorFormatterMiddleware(BaseHTTPMiddleware):
    """Renders anything that escapes the routes and inner middleware."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return render_error(exc, request)


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Rejects requests under ``prefix`` that lack the shared secret.

    With no configured key nothing under the prefix is reachable.
    """

    def __init__(self, app: ASGIApp, *, api_key: Optional[str], prefix: str = "/api", header: str = "x-api-key"):
        super().__init__(app)
        self.api_key = api_key or None
        self.prefix = prefix.rstrip("/")
        self.header = header

    def _protects(self, path: str) -> bool:
        return path == self.prefix or path.startswith(self.prefix + "/")

    def _accepts(self, provided: Optional[str]) -> bool:
        if not provided or self.api_key is None:
            return False
        return hmac.compare_digest(provided.encode("utf-8"), self.api_key.encode("utf-8"))

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if self._protects(request.url.path) and not self._accepts(request.headers.get(self.header)):
            raise Unauthorized()
        return await call_next(request)
