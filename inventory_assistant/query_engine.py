"""Deterministic answers computed straight from the inventory snapshot.

Every function here is pure: it reads the caller's items, never mutates them, and
never talks to the completion service. Numbers go through ``safe_number`` so a
dirty row degrades to 0 instead of failing the request.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Callable, Dict, Optional, Sequence

from .intent_classifier import Intent
from .locale_loader import LocalePack
from .models import InventoryItem
from .utils import DEFAULT_CURRENCY_GLYPHS, format_quantity, round_half_up, safe_number

CENTS = Decimal("0.01")
# Wide enough to quantize any finite float without InvalidOperation.
CENTS_CONTEXT = Context(prec=400)

ReplyFn = Callable[[LocalePack, Optional[Sequence[InventoryItem]]], str]


def _number(locale: LocalePack, value: Any) -> float:
    return safe_number(value, DEFAULT_CURRENCY_GLYPHS + (locale.currency_symbol,))


def _display(value: Any) -> str:
    return "" if value is None else str(value)


def low_stock_reply(locale: LocalePack, inventory: Optional[Sequence[InventoryItem]] = None) -> str:
    """Purpose: List every item whose stock is below its minimum, one per line.
    Inputs/Outputs: Inputs are the locale and the snapshot; output is reply text.
    Side Effects / State: None.
    Dependencies: safe_number, format_quantity, locale reply templates.
    Failure Modes: None; malformed numbers count as 0.
    If Removed: Low-stock questions fall through to the model and lose exactness.
    Testing Notes: Inclusion iff stock < minStock, input order kept, "none" sentence.
    """
    # Keep input order; the rendered stock is the normalized value.
    low = [
        item
        for item in (inventory or [])
        if _number(locale, item.stock) < _number(locale, item.min_stock)
    ]
    if not low:
        return locale.replies["low_stock_none"]
    template = locale.replies["low_stock_line"]
    return "\n".join(
        template.format(
            code=_display(item.code),
            name=_display(item.name),
            stock=format_quantity(_number(locale, item.stock)),
        )
        for item in low
    )


def total_value_reply(locale: LocalePack, inventory: Optional[Sequence[InventoryItem]] = None) -> str:
    """Sum of price * stock over all items, rounded half up to two decimals."""
    total = sum(_number(locale, item.price) * _number(locale, item.stock) for item in (inventory or []))
    if total == 0:
        total = 0.0  # avoid "-0.00"
    amount = Decimal(total).quantize(CENTS, rounding=ROUND_HALF_UP, context=CENTS_CONTEXT)
    return locale.replies["total_value"].format(currency=locale.currency_symbol, total=str(amount))


def total_stock_reply(locale: LocalePack, inventory: Optional[Sequence[InventoryItem]] = None) -> str:
    """Total units on hand, rounded to the nearest whole unit."""
    units = sum(_number(locale, item.stock) for item in (inventory or []))
    return locale.replies["total_stock"].format(units=round_half_up(units))


def distinct_items_reply(locale: LocalePack, inventory: Optional[Sequence[InventoryItem]] = None) -> str:
    # Rows are counted as supplied; duplicate codes are not merged.
    return locale.replies["distinct_items"].format(count=len(inventory or []))


DETERMINISTIC_REPLIES: Dict[Intent, ReplyFn] = {
    Intent.LOW_STOCK: low_stock_reply,
    Intent.TOTAL_VALUE: total_value_reply,
    Intent.TOTAL_STOCK: total_stock_reply,
    Intent.DISTINCT_COUNT: distinct_items_reply,
}
