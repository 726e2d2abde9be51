"""Middleware for the FastAPI application."""
from __future__ import annotations

from happyhour.middleware.security import SecurityHeadersMiddleware

__all__ = ["SecurityHeadersMiddleware"]
