from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from happyhour.schemas.venues import Item


def top_savings(items: Iterable[Item]) -> float:
    """
    Largest positive saving across items with a known regular price.

    Items without a regular price contribute nothing, and a venue whose
    savings are all zero or negative reports 0.

    Examples:
        >>> top_savings([Item(name="Lager", hh=5, reg=8), Item(name="Wings", hh=7, reg=12)])
        5.0
    """
    best = 0.0
    for item in items:
        savings = item.savings
        if savings is not None and savings > best:
            best = savings
    return best


def round_money(amount: float) -> Decimal:
    return Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def format_money(amount: float) -> str:
    """Format an amount as dollars with two decimals, e.g. ``$5.00``."""
    return f"${round_money(amount)}"


__all__ = ["format_money", "round_money", "top_savings"]
