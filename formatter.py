"""Quote formatter: plain text (clipboard) and HTML (results view).

Everything is rendered from the numeric fields of the Quote; nothing is
ever parsed back out of formatted text.
"""

import html

from models import CURRENCY_SYMBOL, Quote, QuoteLineItem

DANGER_COLOR = "#dc3545"


def format_money(amount: float) -> str:
    """Two-decimal display rounding, e.g. ``R12.50``."""
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def _fmt_dim(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def size_label(item: QuoteLineItem) -> str:
    return f"{_fmt_dim(item.spec.width)}x{_fmt_dim(item.spec.height)}mm"


def describe_item(item: QuoteLineItem, index: int) -> str:
    """First description line for *item*; *index* is zero-based."""
    if not item.is_valid:
        return f"Sticker {index + 1} ({size_label(item)}): {item.status.value}"
    return (f"{size_label(item)} - {format_money(item.unit_price)} excl VAT per sticker "
            f"({item.stickers_per_row} stickers per row)")


def item_lines(item: QuoteLineItem, index: int, quote: Quote) -> list[str]:
    lines = [describe_item(item, index)]
    if not item.is_valid:
        return lines
    lines.append(f"{item.rows_needed} rows - {item.total_units_produced} stickers")
    lines.append(f"{format_money(item.line_total_excl_vat)} Excl VAT")
    if quote.include_vat:
        # Display only; quote totals apply VAT once to the summed subtotal
        incl = item.line_total_excl_vat * (1 + quote.vat_rate / 100)
        lines.append(f"Incl VAT: {format_money(incl)}")
    return lines


def minimum_order_warning(quote: Quote) -> str:
    return f"Minimum order amount of {format_money(quote.min_order_amount)} excl. VAT applies."


def _header_lines(quote: Quote) -> list[str]:
    lines = [f"Material: {quote.material}"]
    if quote.rounded_corners:
        lines.append("Options: Cutline with rounded Corners")
    return lines


def _total_lines(quote: Quote) -> list[str]:
    lines = [f"Subtotal: {format_money(quote.total_excl_vat)} Excl VAT"]
    if quote.include_vat:
        lines.append(f"VAT ({quote.vat_rate:g}%): {format_money(quote.vat_amount)}")
        lines.append(f"Total: {format_money(quote.total_incl_vat)} Incl VAT")
    return lines


def quote_to_text(quote: Quote) -> str:
    """Plain-text quote suitable for the clipboard."""
    blocks = ["\n".join(_header_lines(quote))]
    for i, item in enumerate(quote.line_items):
        blocks.append("\n".join(item_lines(item, i, quote)))
    blocks.append("\n".join(_total_lines(quote)))
    if quote.below_minimum:
        blocks.append(minimum_order_warning(quote))
    return "\n\n".join(blocks)


def quote_to_html(quote: Quote) -> str:
    """HTML quote for the on-screen results view."""
    def block(lines, css_class):
        body = "<br>".join(html.escape(line) for line in lines)
        return f'<p class="{css_class}">{body}</p>'

    parts = [block(_header_lines(quote), "quote-header")]
    for i, item in enumerate(quote.line_items):
        parts.append(block(item_lines(item, i, quote),
                           "quote-item" if item.is_valid else "quote-item invalid"))
    parts.append(f"<p class=\"quote-totals\"><b>"
                 f"{'<br>'.join(html.escape(line) for line in _total_lines(quote))}</b></p>")
    if quote.below_minimum:
        parts.append(f'<p style="color: {DANGER_COLOR};">'
                     f'{html.escape(minimum_order_warning(quote))}</p>')
    return "\n".join(parts)
