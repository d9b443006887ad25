"""Number helpers — parsing, precision, rounding and compact formatting. No engine imports."""

from __future__ import annotations

import math
import re
from decimal import ROUND_FLOOR, Decimal

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_HALF = Decimal("0.5")


def is_number(text: str) -> bool:
    return _NUMBER_RE.fullmatch(text) is not None


def parse_number(text: str) -> float:
    """Parse one numeric field. Anything that is not a plain decimal literal is NaN."""
    if not is_number(text):
        return math.nan
    return float(text)


def decimal_places(value: float) -> int:
    """Fraction digits in the shortest decimal form of ``value``.

    1.5 → 1, 100.0 → 0, 1e-05 → 5. Non-finite values have none.
    """
    if not math.isfinite(value):
        return 0
    exponent = Decimal(repr(value)).normalize().as_tuple().exponent
    return max(0, -int(exponent))


def to_decimal(value: float) -> Decimal:
    """Exact decimal of the shortest repr, so 1.15 stays 1.15 and not 1.149999..."""
    return Decimal(repr(value))


def round_decimal(value: Decimal) -> Decimal:
    """Round half towards +inf, like JavaScript's Math.round."""
    return (value + _HALF).to_integral_value(rounding=ROUND_FLOOR)


def round_half_up(value: float, scale: int = 1) -> float:
    """round(value * scale) with halves going towards +inf, computed exactly."""
    if not math.isfinite(value):
        return value
    return float(round_decimal(to_decimal(value) * scale))


def format_number(value: float) -> str:
    """Shortest path-data spelling: no trailing .0, no leading zero before the point."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value):
        return str(int(value))
    text = format(Decimal(repr(value)), "f").rstrip("0")
    if text.startswith("0."):
        return text[1:]
    if text.startswith("-0."):
        return "-" + text[2:]
    return text


def multiply_exact(value: float, factor: int) -> float:
    """value * factor on the shortest decimal form (1.1 * 100 == 110, not 110.00000000000001)."""
    if not math.isfinite(value):
        return value * factor
    return float(Decimal(repr(value)) * factor)
