"""Shared pytest fixtures for Sticker Quote tests."""
import os

os.environ['QT_QPA_PLATFORM'] = 'offscreen'  # must be set before QApplication import

import io
import pytest
from PIL import Image, ImageDraw

from models import SettingsRecord, StickerSpec


@pytest.fixture(scope='session')
def qapp():
    """Create a single QApplication for all tests."""
    from sticker_app import StickerApp
    app = StickerApp([])
    yield app


@pytest.fixture
def settings():
    """Settings with round numbers: 0.5 per cm^2, 15% VAT."""
    return SettingsRecord(vinyl_cost=0.5, vat_rate=15.0, material="Gloss Vinyl")


@pytest.fixture
def sample_specs():
    """A mix of valid sticker lines, as the UI would supply them (strings)."""
    return [
        StickerSpec("100", "50", "10"),
        StickerSpec("80", "80", "25"),
        StickerSpec("600", "20", "3"),
        StickerSpec("35.5", "35.5", "100"),
    ]


@pytest.fixture
def settings_path(tmp_path):
    return str(tmp_path / "settings.pickle")


@pytest.fixture
def logo_png(tmp_path):
    """A small logo file on disk."""
    img = Image.new('RGB', (200, 60), 'white')
    draw = ImageDraw.Draw(img)
    draw.rounded_rectangle([5, 5, 55, 55], radius=8, fill='red')
    path = tmp_path / "Logo.png"
    buf = io.BytesIO()
    img.save(buf, format='PNG')
    path.write_bytes(buf.getvalue())
    return str(path)
