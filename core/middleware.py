"""
Request tagging and response headers for the directory API.
"""
import time
import uuid
import logging
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from core.context import resolve_locale

logger = logging.getLogger(__name__)

# Object paths are unique per upload
UPLOAD_CACHE_CONTROL = "public, max-age=31536000, immutable"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and its display language, then log the outcome.

    Error handlers read ``request.state.locale``, which is set even for
    requests that never reach a route.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        locale = resolve_locale(request.query_params.get("lang"), request.headers.get("accept-language"))
        viewer = "signed-in" if request.headers.get("authorization", "").lower().startswith("bearer ") else "anonymous"
        request.state.request_id = request_id
        request.state.locale = locale

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"{request_id} {request.method} {request.url.path} failed after "
                f"{(time.perf_counter() - started) * 1000:.1f}ms: {str(e)}"
            )
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request_id} {request.method} {request.url.path} -> {response.status_code} "
            f"[{locale}, {viewer}] {elapsed_ms:.1f}ms"
        )
        response.headers["X-Request-ID"] = request_id
        response.headers["Content-Language"] = locale
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Headers for JSON responses and user-uploaded images."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)

        # Uploaded files must never be sniffed into HTML or scripts
        response.headers["X-Content-Type-Options"] = "nosniff"
        if request.url.path.startswith("/uploads/"):
            response.headers["Cache-Control"] = UPLOAD_CACHE_CONTROL
        else:
            response.headers["X-Frame-Options"] = "DENY"
            response.headers["Cache-Control"] = "no-store"
        return response
