"""Security middleware for the listing application."""
from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from happyhour.core.config import get_settings

# The listing page loads its stylesheet and locate.js from /static only;
# venue booking links navigate away and need no CSP allowance.
_PRODUCTION_CSP = [
    "default-src 'self'",
    "script-src 'self'",
    "style-src 'self'",
    "img-src 'self' data: https:",
    "connect-src 'self'",
    "frame-ancestors 'none'",
    "base-uri 'self'",
    "form-action 'self'",
]

_DEVELOPMENT_CSP = [
    "default-src 'self'",
    "script-src 'self' 'unsafe-inline'",  # ad-hoc debugging snippets in templates
    "style-src 'self' 'unsafe-inline'",
    "img-src 'self' data: https:",
    "connect-src 'self'",
    "frame-ancestors 'none'",
]

# locate.js needs the Geolocation API; nothing else on the page uses a device feature.
_PERMISSIONS = [
    "geolocation=(self)",
    "microphone=()",
    "camera=()",
    "payment=()",
    "usb=()",
]


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Add security headers to every response, static files and 404s included.

    The listing is read-only and never embedded, so framing is denied outright.
    Geolocation stays enabled for same-origin scripts because the page asks
    the browser for the viewer's position once per visit.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        settings = get_settings()

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"

        if settings.environment == "production":
            # Browsers only share a precise position over HTTPS
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains; preload"

        csp_directives = _DEVELOPMENT_CSP if settings.environment == "development" else _PRODUCTION_CSP
        response.headers["Content-Security-Policy"] = "; ".join(csp_directives)

        # Booking sites see our origin, never the viewer's lat/lon query string
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        response.headers["Permissions-Policy"] = ", ".join(_PERMISSIONS)

        return response


__all__ = ["SecurityHeadersMiddleware"]
