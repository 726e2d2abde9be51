from __future__ import annotations

from datetime import datetime

from .config import get_settings


def get_now() -> datetime:
    """Current wall-clock time in the configured venue timezone."""
    return datetime.now(get_settings().tzinfo)


__all__ = ["get_now"]
