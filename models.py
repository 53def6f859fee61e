"""Data model classes and constants for the Sticker Quote tool.

All dimensions are in millimetres; prices are in a single fixed currency.
"""

import enum
from dataclasses import dataclass, field


# === Constants ===
CURRENCY_SYMBOL = "R"
ROLL_WIDTH_MM = 600            # Width of the vinyl roll stickers are cut across
AREA_UNIT_MM2 = 100            # Vinyl is priced per cm^2
DEFAULT_VINYL_COST = 0.05      # Currency per cm^2
DEFAULT_VAT_RATE = 15.0        # Percent
MIN_ORDER_AMOUNT = 500.0       # Excl. VAT

RECALC_DELAY_MS = 300          # Debounce for auto-recalculation

QUOTE_PDF_FILTER = "PDF Files (*.pdf)"
DEFAULT_PDF_NAME = "StickerKing-Quote.pdf"

MATERIALS = [
    "unspecified",
    "Gloss Vinyl",
    "Matte Vinyl",
    "Clear Vinyl",
    "Reflective Vinyl",
]

COMPANY_NAME = "Sticker King Pty (Ltd)"
COMPANY_ADDRESS = "123 Vinyl Lane, Print City"
COMPANY_EMAIL = "sales@stickerking.co.za"
FOOTER_LINES = [
    "Thank you for your business!",
    "Sticker King | www.stickerking.co.za | sales@stickerking.co.za",
]


# === Data Model ===

@dataclass(frozen=True)
class StickerSpec:
    """One requested sticker line, exactly as entered (unvalidated)."""
    width: object = ""
    height: object = ""
    quantity: object = ""


@dataclass(frozen=True)
class SettingsRecord:
    """User preferences plus the sticker list, persisted wholesale."""
    vinyl_cost: float = DEFAULT_VINYL_COST
    vat_rate: float = DEFAULT_VAT_RATE
    include_vat: bool = False
    material: str = "unspecified"
    rounded_corners: bool = False
    dark_mode: bool = False
    stickers: tuple[StickerSpec, ...] = ()

    def __getattr__(self, name):
        # Backward compat for old pickled records that may lack new fields
        defaults = {
            'vinyl_cost': DEFAULT_VINYL_COST,
            'vat_rate': DEFAULT_VAT_RATE,
            'include_vat': False,
            'material': "unspecified",
            'rounded_corners': False,
            'dark_mode': False,
            'stickers': (),
        }
        if name in defaults:
            return defaults[name]
        raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")


@dataclass(frozen=True)
class LayoutResult:
    """How one sticker packs across the roll, and what it costs."""
    valid: bool
    unit_price: float = 0.0
    stickers_per_row: int = 0

    @classmethod
    def invalid(cls) -> "LayoutResult":
        return cls(valid=False)


class LineStatus(enum.Enum):
    OK = "ok"
    INVALID_DIMENSIONS = "Invalid dimensions"
    INVALID_QUANTITY = "Invalid quantity"


@dataclass(frozen=True)
class QuoteLineItem:
    """A priced sticker line, or an invalid marker carrying the original spec.

    Invalid items keep every numeric field at zero so they never contribute
    to totals.
    """
    spec: StickerSpec
    status: LineStatus = LineStatus.OK
    unit_price: float = 0.0
    stickers_per_row: int = 0
    quantity: int | None = None       # Parsed requested quantity
    rows_needed: int = 0
    total_units_produced: int = 0     # Always whole rows, >= quantity
    line_total_excl_vat: float = 0.0

    @property
    def is_valid(self) -> bool:
        return self.status is LineStatus.OK


@dataclass(frozen=True)
class Quote:
    """Complete quote. Recomputed on every calculation, never mutated."""
    material: str = "unspecified"
    rounded_corners: bool = False
    include_vat: bool = False
    vat_rate: float = DEFAULT_VAT_RATE
    min_order_amount: float = MIN_ORDER_AMOUNT
    line_items: tuple[QuoteLineItem, ...] = field(default_factory=tuple)
    total_excl_vat: float = 0.0
    total_incl_vat: float = 0.0

    @property
    def vat_amount(self) -> float:
        return self.total_incl_vat - self.total_excl_vat

    @property
    def below_minimum(self) -> bool:
        """True when a renderer should warn about the minimum order amount."""
        return self.total_excl_vat < self.min_order_amount

    @property
    def valid_items(self) -> list[QuoteLineItem]:
        return [item for item in self.line_items if item.is_valid]
