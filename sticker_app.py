#!/usr/bin/env python3
"""Sticker Quote - price vinyl sticker jobs by the row and export quotes."""

import argparse
import logging
import sys

from calculator import compute, parse_number, parse_quantity
from controller import MainWindow, StickerApp
from document import ExportError, QuoteDocument
from formatter import quote_to_html, quote_to_text
from models import (
    CURRENCY_SYMBOL, DEFAULT_VAT_RATE, DEFAULT_VINYL_COST, MIN_ORDER_AMOUNT, ROLL_WIDTH_MM,
    LayoutResult, LineStatus, Quote, QuoteLineItem, SettingsRecord, StickerSpec,
)
from quote import build_quote
from storage import SettingsStore

__all__ = [
    "CURRENCY_SYMBOL", "DEFAULT_VAT_RATE", "DEFAULT_VINYL_COST", "MIN_ORDER_AMOUNT",
    "ROLL_WIDTH_MM", "ExportError", "LayoutResult", "LineStatus", "MainWindow", "Quote",
    "QuoteDocument", "QuoteLineItem", "SettingsRecord", "SettingsStore", "StickerApp",
    "StickerSpec", "build_quote", "compute", "parse_number", "parse_quantity",
    "quote_to_html", "quote_to_text", "main",
]


# === Entry Point ===

def main():
    parser = argparse.ArgumentParser(description="Sticker Quote")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--settings", default=None, help="Settings file to use")
    args = parser.parse_args()

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    app = StickerApp(sys.argv)
    window = MainWindow(SettingsStore(args.settings))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
