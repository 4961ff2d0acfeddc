import math
from decimal import Decimal, ROUND_HALF_UP

UNIT = Decimal("1")


def to_cents(x: float) -> int:
    """
    Scale a monetary value to whole cents, ties away from zero.
    x must be finite; callers validate amounts first.
    """
    return int(Decimal(repr(x * 100)).quantize(UNIT, rounding=ROUND_HALF_UP))


def round2(x: float) -> float:
    """
    Round to 2 decimal places so repeated additions never drift.

    round2(0.125) -> 0.13, round2(-0.125) -> -0.13
    NaN and infinities come back unchanged.
    """
    if not math.isfinite(x):
        return x
    return to_cents(x) / 100
