"""Quote document: renders a Quote to an A4 PDF via QPdfWriter.

All layout positions are in millimetres from the top-left of the page and
converted to device pixels at draw time, so font point sizes stay true.
"""

import logging

from PySide6.QtCore import QMarginsF, QPointF, QRectF
from PySide6.QtGui import (
    QColor, QFont, QFontMetricsF, QImage, QPageLayout, QPageSize, QPainter, QPdfWriter, QPen,
)

from branding import load_logo
from formatter import describe_item, format_money, minimum_order_warning
from models import COMPANY_ADDRESS, COMPANY_EMAIL, COMPANY_NAME, FOOTER_LINES, Quote

logger = logging.getLogger(__name__)

PAGE_WIDTH_MM = 210
PAGE_HEIGHT_MM = 297
LEFT = 14
RIGHT = 196
CENTER = 105
COL_UNIT_PRICE = 120   # Right edges of the numeric columns
COL_QUANTITY = 155
DESCRIPTION_WIDTH = 90
LINE_HEIGHT = 5
RESOLUTION = 300

DANGER_COLOR = QColor(220, 53, 69)
RULE_COLOR = QColor(200, 200, 200)


class ExportError(Exception):
    """The document could not be written."""


class QuoteDocument:
    """Paginated PDF rendering of a single Quote.

    Line items break onto a new page when less than 40 mm remains; the
    totals block needs 50 mm. The footer is drawn on every page.
    """

    def __init__(self, quote: Quote, logo: bytes | None = None):
        self.quote = quote
        self.logo = logo
        self.page_count = 0
        self.footer_count = 0
        self.vat_drawn = False
        self.warning_drawn = False
        self._painter: QPainter | None = None
        self._writer: QPdfWriter | None = None
        self._k = RESOLUTION / 25.4

    # ------------------------------------------------------------------ #
    #  Public API                                                         #
    # ------------------------------------------------------------------ #

    def render(self, path: str) -> int:
        """Write the PDF to *path* and return the number of pages."""
        writer = QPdfWriter(path)
        writer.setResolution(RESOLUTION)
        writer.setPageSize(QPageSize(QPageSize.PageSizeId.A4))
        writer.setPageMargins(QMarginsF(0, 0, 0, 0), QPageLayout.Unit.Millimeter)
        writer.setTitle("Quote")
        writer.setCreator(COMPANY_NAME)

        painter = QPainter()
        if not painter.begin(writer):
            raise ExportError(f"Could not write {path}")
        self._painter = painter
        self._writer = writer
        self.page_count = 1
        self.footer_count = 0
        self.vat_drawn = False
        self.warning_drawn = False
        try:
            self._paint()
        finally:
            painter.end()
            self._painter = None
            self._writer = None
        logger.debug("Exported quote to %s (%d pages)", path, self.page_count)
        return self.page_count

    # ------------------------------------------------------------------ #
    #  Drawing helpers                                                    #
    # ------------------------------------------------------------------ #

    def _mm(self, v: float) -> float:
        return v * self._k

    def _set_font(self, size: float, bold: bool = False):
        font = QFont("Helvetica")
        font.setPointSizeF(size)
        font.setBold(bold)
        self._painter.setFont(font)

    def _set_color(self, color: QColor):
        self._painter.setPen(QPen(color))

    def _metrics(self) -> QFontMetricsF:
        return QFontMetricsF(self._painter.font(), self._painter.device())

    def _text(self, x: float, y: float, text: str, align: str = "left"):
        """Draw *text* with its baseline at *y*; *x* is the left, right or center edge."""
        width = self._metrics().horizontalAdvance(text)
        px = self._mm(x)
        if align == "right":
            px -= width
        elif align == "center":
            px -= width / 2
        self._painter.drawText(QPointF(px, self._mm(y)), text)

    def _line(self, x1: float, y1: float, x2: float, y2: float):
        self._painter.setPen(QPen(RULE_COLOR, self._mm(0.2)))
        self._painter.drawLine(QPointF(self._mm(x1), self._mm(y1)),
                               QPointF(self._mm(x2), self._mm(y2)))

    def _wrap(self, text: str, width: float) -> list[str]:
        """Greedy word wrap to *width* mm in the current font."""
        fm = self._metrics()
        limit = self._mm(width)
        lines: list[str] = []
        current = ""
        for word in text.split():
            candidate = f"{current} {word}" if current else word
            if current and fm.horizontalAdvance(candidate) > limit:
                lines.append(current)
                current = word
            else:
                current = candidate
        if current or not lines:
            lines.append(current)
        return lines

    @staticmethod
    def _fit_rect(cell: QRectF, src_w: float, src_h: float) -> QRectF:
        """Return the largest rect with src aspect ratio that fits inside cell, left-aligned."""
        if src_w <= 0 or src_h <= 0:
            return cell
        src_aspect = src_w / src_h
        cell_aspect = cell.width() / cell.height() if cell.height() > 0 else 1
        if src_aspect > cell_aspect:
            w = cell.width()
            h = w / src_aspect
        else:
            h = cell.height()
            w = h * src_aspect
        return QRectF(cell.x(), cell.y() + (cell.height() - h) / 2, w, h)

    # ------------------------------------------------------------------ #
    #  Page sections                                                      #
    # ------------------------------------------------------------------ #

    def _footer(self):
        self._set_font(8)
        self._set_color(QColor(150, 150, 150))
        self._text(CENTER, PAGE_HEIGHT_MM - 15, FOOTER_LINES[0], "center")
        self._text(CENTER, PAGE_HEIGHT_MM - 10, FOOTER_LINES[1], "center")
        self.footer_count += 1

    def _page_break(self, top: float) -> float:
        self._footer()
        if not self._writer.newPage():
            raise ExportError("Could not start a new page")
        self.page_count += 1
        return top

    def _header(self):
        logo = self.logo if self.logo is not None else load_logo()
        img = QImage.fromData(logo)
        if not img.isNull():
            cell = QRectF(self._mm(LEFT), self._mm(12), self._mm(50), self._mm(15))
            self._painter.drawImage(self._fit_rect(cell, img.width(), img.height()), img)

        self._set_color(QColor(0, 0, 0))
        self._set_font(18, bold=True)
        self._text(RIGHT, 20, "QUOTE", "right")

        self._set_font(10)
        self._text(RIGHT, 28, COMPANY_NAME, "right")
        self._text(RIGHT, 32, COMPANY_ADDRESS, "right")
        self._text(RIGHT, 36, COMPANY_EMAIL, "right")

    def _paint(self):
        quote = self.quote
        self._header()

        y = 55
        self._set_font(12, bold=True)
        self._text(LEFT, y, "Quote Details")
        y += 8
        self._line(LEFT, y, RIGHT, y)
        y += 10

        self._set_color(QColor(0, 0, 0))
        self._set_font(10)
        self._text(LEFT, y, f"Material: {quote.material}")
        y += 6
        if quote.rounded_corners:
            self._text(LEFT, y, "Options: Cutline with rounded Corners")
            y += 6
        y += 10

        # Table header
        self._set_font(10, bold=True)
        self._text(LEFT, y, "Description")
        self._text(COL_UNIT_PRICE, y, "Unit Price", "right")
        self._text(COL_QUANTITY, y, "Quantity", "right")
        self._text(RIGHT, y, "Total", "right")
        y += 4
        self._line(LEFT, y, RIGHT, y)
        y += 8

        for i, item in enumerate(quote.line_items):
            if y > PAGE_HEIGHT_MM - 40:
                y = self._page_break(20)
            self._set_color(QColor(0, 0, 0))
            self._set_font(10)
            lines = self._wrap(describe_item(item, i), DESCRIPTION_WIDTH)
            for n, line in enumerate(lines):
                self._text(LEFT, y + n * LINE_HEIGHT, line)
            if item.is_valid:
                self._text(COL_UNIT_PRICE, y, format_money(item.unit_price), "right")
                self._text(COL_QUANTITY, y, str(item.total_units_produced), "right")
                self._text(RIGHT, y, format_money(item.line_total_excl_vat), "right")
            y += len(lines) * LINE_HEIGHT + 8

        if y > PAGE_HEIGHT_MM - 50:
            y = self._page_break(30)
        y += 5
        self._line(COL_UNIT_PRICE, y, RIGHT, y)
        y += 8

        self._set_color(QColor(0, 0, 0))
        self._set_font(10, bold=True)
        self._text(COL_QUANTITY, y, "Subtotal", "right")
        self._text(RIGHT, y, format_money(quote.total_excl_vat), "right")
        y += 7

        if quote.include_vat:
            self._set_font(10)
            self._text(COL_QUANTITY, y, f"VAT ({quote.vat_rate:g}%)", "right")
            self._text(RIGHT, y, format_money(quote.vat_amount), "right")
            y += 7

            self._set_font(10, bold=True)
            self._text(COL_QUANTITY, y, "Total", "right")
            self._text(RIGHT, y, format_money(quote.total_incl_vat), "right")
            y += 7
            self.vat_drawn = True

        if quote.below_minimum:
            self._set_font(9)
            self._set_color(DANGER_COLOR)
            self._text(LEFT, y + 10, minimum_order_warning(quote))
            self.warning_drawn = True

        self._footer()
