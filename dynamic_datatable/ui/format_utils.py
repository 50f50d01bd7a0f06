"""Reusable formatting helpers for cell rendering.

This module is *pure* (no Rich imports) so it can be unit-tested
independently. ``plain_text`` lives in ``schema`` next to ``get_field``
so the pipeline never imports the ui package; it is re-exported here.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

from dynamic_datatable.schema import plain_text

__all__ = ["plain_text", "format_money", "page_summary"]

_CENTS = Decimal("0.01")


def _to_decimal(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def format_money(value: Any, symbol: str = "$", placeholder: str = "") -> str:
    """Format a value as currency: ``$1,234.50``, ``-$5.00``.

    Numeric strings are accepted. Anything that does not read as a finite
    number is returned in its plain string form. Amounts of any magnitude
    are formatted in full.
    """
    amount = _to_decimal(value)
    if amount is None:
        return plain_text(value, placeholder)

    with localcontext() as ctx:
        # every integer digit plus two cent digits must fit the precision
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        cents = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        sign = "-" if cents < 0 else ""
        return f"{sign}{symbol}{abs(cents):,.2f}"


def page_summary(start: int, end: int, total: int) -> str:
    """Footer line shown under a page of rows."""
    return f"Showing {start} to {end} of {total} entries"
