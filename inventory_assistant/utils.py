import math
import re
from decimal import Decimal
from typing import Any, Iterable

DEFAULT_CURRENCY_GLYPHS = ("€",)

LEADING_FLOAT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
WHITESPACE_RE = re.compile(r"\s+")


def safe_number(value: Any, currency_glyphs: Iterable[str] = DEFAULT_CURRENCY_GLYPHS) -> float:
    """Purpose: Coerce loosely formatted numeric input into a finite float.
    Inputs/Outputs: Input is any value (number, string, None, ...); output is a float.
    Side Effects / State: None; pure function.
    Dependencies: Uses LEADING_FLOAT_RE; called by every deterministic calculator.
    Failure Modes: None; malformed, missing, or non-finite input returns 0.0.
    If Removed: Low-stock and total calculations crash on dirty inventory rows.
    Testing Notes: "€ 1.234,5" style strings, None, "abc", "12abc" and idempotence.
    """
    # Numbers pass through; everything else is cleaned and prefix-parsed.
    if value is None:
        return 0.0
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        try:
            number = float(value)
        except (OverflowError, ValueError):
            return 0.0
        return number if math.isfinite(number) else 0.0

    cleaned = str(value)
    for glyph in currency_glyphs:
        cleaned = cleaned.replace(glyph, "")
    cleaned = WHITESPACE_RE.sub("", cleaned).replace(",", ".", 1)
    match = LEADING_FLOAT_RE.match(cleaned)
    if not match:
        return 0.0
    number = float(match.group(0))
    return number if math.isfinite(number) else 0.0


def format_quantity(value: float) -> str:
    """Render a normalized number without a trailing ".0" for whole values."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def round_half_up(value: float) -> int:
    # Halves round towards +inf, so 2.5 -> 3 and -2.5 -> -2.
    return int(math.floor(value + 0.5))


def normalize_message(text: Any) -> str:
    """Lowercase a raw user message for rule matching; None becomes ""."""
    if text is None:
        return ""
    return str(text).lower()
