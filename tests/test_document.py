"""Tests for PDF quote export and the header logo."""
import io
import os

import pytest
from PIL import Image

from sticker_app import ExportError, QuoteDocument, SettingsRecord, StickerSpec, build_quote
from branding import load_logo, make_logo


def _quote(n_items, **settings):
    defaults = dict(vinyl_cost=0.5, vat_rate=15.0)
    defaults.update(settings)
    specs = [StickerSpec(str(20 + i), "30", str(10 + i)) for i in range(n_items)]
    return build_quote(specs, SettingsRecord(**defaults))


class TestBranding:

    def test_drawn_logo(self):
        img = make_logo()
        assert img.size == (1000, 300)
        assert img.mode == 'RGBA'

    def test_missing_file_falls_back(self, tmp_path):
        data = load_logo(str(tmp_path / "missing.png"))
        assert Image.open(io.BytesIO(data)).size == (1000, 300)

    def test_loads_file_as_png(self, logo_png):
        img = Image.open(io.BytesIO(load_logo(logo_png)))
        assert img.format == 'PNG'
        assert img.size == (200, 60)

    def test_unreadable_file_falls_back(self, tmp_path):
        bad = tmp_path / "Logo.png"
        bad.write_bytes(b"not an image")
        img = Image.open(io.BytesIO(load_logo(str(bad))))
        assert img.size == (1000, 300)


class TestPdfRender:
    """Render quotes to PDF via QPdfWriter."""

    def test_render_single_page(self, qapp, tmp_path):
        path = str(tmp_path / "quote.pdf")
        doc = QuoteDocument(_quote(3, include_vat=True, rounded_corners=True))
        pages = doc.render(path)

        assert pages == 1
        assert doc.footer_count == 1
        assert os.path.getsize(path) > 0
        with open(path, "rb") as f:
            assert f.read(5) == b"%PDF-"

    def test_render_empty_quote(self, qapp, tmp_path):
        path = str(tmp_path / "empty.pdf")
        assert QuoteDocument(_quote(0)).render(path) == 1
        assert os.path.getsize(path) > 0

    def test_long_quote_paginates(self, qapp, tmp_path):
        """Every row takes at least 13 mm, so 40 rows can't fit on one A4 page."""
        path = str(tmp_path / "long.pdf")
        doc = QuoteDocument(_quote(40))
        pages = doc.render(path)
        assert pages >= 2
        assert doc.footer_count == pages

    def test_more_items_never_fewer_pages(self, qapp, tmp_path):
        counts = [QuoteDocument(_quote(n)).render(str(tmp_path / f"q{n}.pdf"))
                  for n in (1, 20, 60)]
        assert counts == sorted(counts)

    def test_invalid_items_rendered(self, qapp, tmp_path):
        quote = build_quote([StickerSpec("700", "10", "1"), StickerSpec("100", "50", "6")],
                            SettingsRecord(vinyl_cost=0.5))
        assert QuoteDocument(quote).render(str(tmp_path / "mixed.pdf")) == 1

    def test_warning_below_minimum(self, qapp, tmp_path):
        quote = _quote(1)
        assert quote.below_minimum
        doc = QuoteDocument(quote)
        doc.render(str(tmp_path / "small.pdf"))
        assert doc.warning_drawn

    def test_no_warning_above_minimum(self, qapp, tmp_path):
        quote = build_quote([StickerSpec("100", "50", "600")], SettingsRecord(vinyl_cost=0.5))
        assert quote.total_excl_vat == pytest.approx(15000.0)
        doc = QuoteDocument(quote)
        doc.render(str(tmp_path / "large.pdf"))
        assert not doc.warning_drawn

    @pytest.mark.parametrize("include_vat", [True, False])
    def test_vat_lines_follow_setting(self, qapp, tmp_path, include_vat):
        doc = QuoteDocument(_quote(2, include_vat=include_vat))
        doc.render(str(tmp_path / "vat.pdf"))
        assert doc.vat_drawn is include_vat

    def test_render_resets_flags(self, qapp, tmp_path):
        doc = QuoteDocument(_quote(1, include_vat=True))
        doc.render(str(tmp_path / "a.pdf"))
        doc.quote = build_quote([StickerSpec("100", "50", "600")], SettingsRecord(vinyl_cost=0.5))
        doc.render(str(tmp_path / "b.pdf"))
        assert not doc.vat_drawn
        assert not doc.warning_drawn

    def test_custom_logo(self, qapp, tmp_path, logo_png):
        doc = QuoteDocument(_quote(2), logo=load_logo(logo_png))
        assert doc.render(str(tmp_path / "logo.pdf")) == 1

    def test_unwritable_path_raises(self, qapp, tmp_path):
        path = str(tmp_path / "no" / "such" / "dir" / "quote.pdf")
        with pytest.raises(ExportError):
            QuoteDocument(_quote(1)).render(path)

    def test_render_does_not_change_quote(self, qapp, tmp_path):
        quote = _quote(5)
        before = build_quote([item.spec for item in quote.line_items],
                             SettingsRecord(vinyl_cost=0.5, vat_rate=15.0))
        QuoteDocument(quote).render(str(tmp_path / "q.pdf"))
        assert quote == before
