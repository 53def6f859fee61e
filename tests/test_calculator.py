"""Unit tests for the layout/pricing calculator."""
import math

import pytest

from sticker_app import LayoutResult, compute, parse_number, parse_quantity, ROLL_WIDTH_MM


class TestParseNumber:
    """User-entered numbers are parsed leniently but must be finite."""

    @pytest.mark.parametrize("raw, expected", [
        ("100", 100.0), (" 42.5 ", 42.5), (7, 7.0), (3.25, 3.25), ("1e2", 100.0),
    ])
    def test_numeric_values(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "abc", "12mm", None, "nan", "inf", True])
    def test_rejects_non_numbers(self, raw):
        assert parse_number(raw) is None


class TestParseQuantity:

    @pytest.mark.parametrize("raw, expected", [("10", 10), (10, 10), ("10.0", 10), (1, 1)])
    def test_positive_whole_numbers(self, raw, expected):
        assert parse_quantity(raw) == expected

    @pytest.mark.parametrize("raw", ["0", 0, "-3", "2.5", "", "ten", None])
    def test_rejects_everything_else(self, raw):
        assert parse_quantity(raw) is None


class TestValidLayouts:
    """Positive dimensions no wider than the roll always produce a layout."""

    def test_reference_example(self):
        result = compute(100, 50, 0.5, roll_width=600)
        assert result.valid
        assert result.stickers_per_row == 6

    def test_unit_price_from_area(self):
        # 100 x 50 mm = 50 cm^2 at 0.5 per cm^2
        result = compute("100", "50", "0.5")
        assert result.unit_price == pytest.approx(25.0)

    def test_unit_price_not_rounded(self):
        result = compute(33.3, 10, 0.0123)
        assert result.unit_price == (33.3 * 10 / 100) * 0.0123

    @pytest.mark.parametrize("width", [0.5, 1, 7, 99.9, 150, 299, 300, 301, 599.99, 600])
    def test_stickers_per_row_is_floor(self, width):
        result = compute(width, 20, 0.1)
        assert result.valid
        assert result.stickers_per_row == math.floor(ROLL_WIDTH_MM / width)
        assert result.stickers_per_row >= 1

    def test_full_roll_width_fits_once(self):
        assert compute(600, 10, 0.1).stickers_per_row == 1

    def test_orientation_is_kept(self):
        """A tall narrow sticker is not rotated to pack differently."""
        assert compute(50, 100, 0.1).stickers_per_row == 12
        assert compute(100, 50, 0.1).stickers_per_row == 6

    def test_custom_roll_width(self):
        assert compute(100, 50, 0.1, roll_width=1000).stickers_per_row == 10

    def test_zero_cost_is_free_but_valid(self):
        result = compute(100, 50, 0)
        assert result.valid
        assert result.unit_price == 0


class TestInvalidLayouts:
    """Bad dimensions are data, not errors."""

    def test_wider_than_roll(self):
        assert not compute(700, 50, 0.5, roll_width=600).valid
        assert not compute(700, 1, 0.5).valid

    @pytest.mark.parametrize("width, height", [
        (0, 50), (100, 0), (-10, 50), (100, -1), ("", "50"), ("abc", "50"),
        ("100", "x"), (None, 50), ("nan", 10), (float("inf"), 10),
        ("1e-310", "10"), ("100", "1e308"),
    ])
    def test_bad_dimensions(self, width, height):
        result = compute(width, height, 0.5)
        assert result == LayoutResult.invalid()
        assert result.stickers_per_row == 0

    @pytest.mark.parametrize("cost", [-1, "abc", None, float("nan")])
    def test_bad_vinyl_cost(self, cost):
        assert not compute(100, 50, cost).valid


class TestPurity:

    def test_repeated_calls_identical(self):
        a = compute("123.4", "56.7", 0.0375)
        b = compute("123.4", "56.7", 0.0375)
        assert a == b
        assert a.unit_price.hex() == b.unit_price.hex()
