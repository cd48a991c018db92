"""Fixed-point rendering of the figures shown in reports.

Ties round away from zero, so 12.25 renders as ``12.3`` and 0.125 as
``0.13``. Python's format spec rounds ties to even and would give ``12.2``
and ``0.12`` for the same readings.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def format_fixed(value: float, places: int) -> str:
    """Render ``value`` with exactly ``places`` decimals."""

    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = abs(rounded)
    return str(rounded)


def round_half_up(value: float) -> int:
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))
