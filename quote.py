"""Quote aggregator: prices every sticker line and rolls up the totals.

Bad input never raises here. Each unusable line becomes an invalid marker
in the quote and the remaining lines are priced as normal.
"""

import logging
from collections.abc import Iterable

from calculator import compute, parse_number, parse_quantity
from models import (
    MIN_ORDER_AMOUNT, ROLL_WIDTH_MM,
    LineStatus, Quote, QuoteLineItem, SettingsRecord, StickerSpec,
)

logger = logging.getLogger(__name__)


def _price_line(spec: StickerSpec, vinyl_cost, roll_width: float) -> QuoteLineItem:
    layout = compute(spec.width, spec.height, vinyl_cost, roll_width=roll_width)
    if not layout.valid:
        return QuoteLineItem(spec=spec, status=LineStatus.INVALID_DIMENSIONS)

    quantity = parse_quantity(spec.quantity)
    if quantity is None:
        return QuoteLineItem(spec=spec, status=LineStatus.INVALID_QUANTITY)

    # You always pay for whole rows
    rows_needed = -(-quantity // layout.stickers_per_row)
    total_units = rows_needed * layout.stickers_per_row
    if total_units <= 0:
        return QuoteLineItem(spec=spec, status=LineStatus.INVALID_QUANTITY)

    return QuoteLineItem(
        spec=spec,
        unit_price=layout.unit_price,
        stickers_per_row=layout.stickers_per_row,
        quantity=quantity,
        rows_needed=rows_needed,
        total_units_produced=total_units,
        line_total_excl_vat=layout.unit_price * total_units,
    )


def build_quote(specs: Iterable[StickerSpec], settings: SettingsRecord,
                min_order_amount: float = MIN_ORDER_AMOUNT,
                roll_width: float = ROLL_WIDTH_MM) -> Quote:
    """Build a quote for *specs* (in order) using *settings*.

    VAT is applied once to the summed exclusive total rather than per line.
    *min_order_amount* is attached as-is; it is up to the renderer to warn.
    """
    line_items = []
    total_excl_vat = 0.0
    for spec in specs:
        item = _price_line(spec, settings.vinyl_cost, roll_width)
        line_items.append(item)
        total_excl_vat += item.line_total_excl_vat

    vat_rate = parse_number(settings.vat_rate)
    if vat_rate is None:
        vat_rate = 0.0
    total_incl_vat = total_excl_vat * (1 + vat_rate / 100)

    logger.debug("Quote: %d lines (%d invalid), %.4f excl VAT",
                 len(line_items), sum(not i.is_valid for i in line_items), total_excl_vat)

    return Quote(
        material=settings.material,
        rounded_corners=settings.rounded_corners,
        include_vat=settings.include_vat,
        vat_rate=vat_rate,
        min_order_amount=min_order_amount,
        line_items=tuple(line_items),
        total_excl_vat=total_excl_vat,
        total_incl_vat=total_incl_vat,
    )


def build_quote_from_settings(settings: SettingsRecord, **kwargs) -> Quote:
    """Quote the sticker list stored in *settings* (session restore)."""
    return build_quote(settings.stickers, settings, **kwargs)
