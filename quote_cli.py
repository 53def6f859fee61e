#!/usr/bin/env python3
"""Command-line sticker quote. No GUI window.

Each sticker is given as WIDTHxHEIGHT:QUANTITY in millimetres.

Usage:
    python quote_cli.py 100x50:10 80x80:25
    python quote_cli.py 100x50:10 --include-vat --vat 15
    python quote_cli.py 100x50:10 --pdf quote.pdf     # also export a PDF
"""

import argparse
import logging
import os
import sys

from formatter import quote_to_text
from models import (
    DEFAULT_VAT_RATE, DEFAULT_VINYL_COST, MIN_ORDER_AMOUNT, ROLL_WIDTH_MM,
    SettingsRecord, StickerSpec,
)
from quote import build_quote


def parse_sticker_arg(text: str) -> StickerSpec:
    """Split ``WxH:Q`` into raw fields. Validation is left to the calculator."""
    size, _, quantity = text.partition(":")
    width, _, height = size.lower().partition("x")
    return StickerSpec(width=width, height=height, quantity=quantity)


def export_pdf(quote, path: str) -> int:
    """Render *quote* to *path* using an offscreen Qt application."""
    os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')
    from PySide6.QtGui import QGuiApplication

    from document import QuoteDocument

    app = QGuiApplication.instance() or QGuiApplication([])  # noqa: F841
    return QuoteDocument(quote).render(path)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Quote vinyl sticker jobs")
    parser.add_argument("stickers", nargs="*", metavar="WxH:Q",
                        help="Sticker width x height (mm) and quantity")
    parser.add_argument("--vinyl-cost", type=float, default=DEFAULT_VINYL_COST,
                        help=f"Vinyl cost per cm^2 (default {DEFAULT_VINYL_COST})")
    parser.add_argument("--vat", type=float, default=DEFAULT_VAT_RATE,
                        help=f"VAT rate in percent (default {DEFAULT_VAT_RATE:g})")
    parser.add_argument("--include-vat", action="store_true", help="Show VAT-inclusive totals")
    parser.add_argument("--material", default="unspecified")
    parser.add_argument("--rounded-corners", action="store_true")
    parser.add_argument("--roll-width", type=float, default=ROLL_WIDTH_MM,
                        help=f"Roll width in mm (default {ROLL_WIDTH_MM})")
    parser.add_argument("--min-order", type=float, default=MIN_ORDER_AMOUNT,
                        help=f"Minimum order amount (default {MIN_ORDER_AMOUNT:g})")
    parser.add_argument("--pdf", default=None, help="Also write the quote to this PDF")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    settings = SettingsRecord(
        vinyl_cost=args.vinyl_cost,
        vat_rate=args.vat,
        include_vat=args.include_vat,
        material=args.material,
        rounded_corners=args.rounded_corners,
        stickers=tuple(parse_sticker_arg(s) for s in args.stickers),
    )
    quote = build_quote(settings.stickers, settings,
                        min_order_amount=args.min_order, roll_width=args.roll_width)
    print(quote_to_text(quote))

    if args.pdf:
        pages = export_pdf(quote, args.pdf)
        print(f"\nWrote {args.pdf} ({pages} page{'s' if pages != 1 else ''})")

    return 0 if len(quote.valid_items) == len(quote.line_items) else 1


if __name__ == "__main__":
    sys.exit(main())
