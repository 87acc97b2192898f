"""
Security Headers Middleware

Hardening headers for a JSON-only API consumed by the mobile client.
"""
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from core.config import settings


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Adds security headers to all responses.

    - X-Content-Type-Options: no MIME sniffing
    - X-Frame-Options / frame-ancestors: never framed
    - Referrer-Policy: no referrer leaves the API
    - Strict-Transport-Security: production only
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"

        if not settings.DEBUG:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
            # Responses are JSON; nothing should ever load from them
            response.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none'"

        return response
