"""Layout/pricing calculator: how many stickers fit per row, and their price.

Stickers are packed in simple rows across the vinyl roll in the orientation
they were entered; no rotation or nesting is attempted.
"""

import math

from models import AREA_UNIT_MM2, ROLL_WIDTH_MM, LayoutResult


def parse_number(value) -> float | None:
    """Parse a user-entered number. Returns None unless it is finite."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_quantity(value) -> int | None:
    """Parse a requested quantity. Only positive whole numbers are accepted."""
    number = parse_number(value)
    if number is None or number <= 0 or not number.is_integer():
        return None
    return int(number)


def compute(width, height, vinyl_cost, roll_width: float = ROLL_WIDTH_MM) -> LayoutResult:
    """Price one sticker of *width* x *height* mm cut from a roll *roll_width* wide.

    Bad input is an expected outcome and yields ``LayoutResult.invalid()``:
    non-numeric or non-positive dimensions, a sticker wider than the roll,
    a vinyl cost that is not a non-negative number, or sizes so extreme that
    the row count or price overflows.

    The unit price is left unrounded; money is only rounded for display.
    """
    w = parse_number(width)
    h = parse_number(height)
    cost = parse_number(vinyl_cost)
    if w is None or h is None or w <= 0 or h <= 0:
        return LayoutResult.invalid()
    if w > roll_width:
        return LayoutResult.invalid()
    if cost is None or cost < 0:
        return LayoutResult.invalid()

    per_row = roll_width / w
    unit_price = (w * h / AREA_UNIT_MM2) * cost
    # Extreme but finite inputs can still overflow
    if not math.isfinite(per_row) or not math.isfinite(unit_price):
        return LayoutResult.invalid()

    stickers_per_row = math.floor(per_row)
    return LayoutResult(valid=True, unit_price=unit_price, stickers_per_row=stickers_per_row)
