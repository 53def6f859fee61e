"""Logo for the quote document header.

Loads ``Logo.png`` next to this module when present; otherwise draws a
simple wordmark with Pillow so exports always carry a header image.
"""

import io
import logging
import os

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)

LOGO_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "Logo.png")

# Logo is drawn 50 x 15 mm in the document; keep the same aspect
LOGO_SIZE = (1000, 300)
BADGE_COLOR = (231, 76, 60, 255)
TEXT_COLOR = (40, 40, 40, 255)


def _to_png(img: Image.Image) -> bytes:
    """Normalize to RGBA PNG bytes."""
    img = img.convert("RGBA")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def make_logo(text: str = "Sticker King") -> Image.Image:
    """Wordmark: a rounded sticker badge followed by the company name."""
    w, h = LOGO_SIZE
    img = Image.new('RGBA', (w, h), (255, 255, 255, 0))
    draw = ImageDraw.Draw(img)

    pad = h // 10
    draw.rounded_rectangle([pad, pad, h - pad, h - pad], radius=h // 6, fill=BADGE_COLOR)
    # Peeled corner
    draw.polygon([(h - pad - h // 4, h - pad), (h - pad, h - pad - h // 4), (h - pad, h - pad)],
                 fill=(255, 255, 255, 255))

    try:
        font = ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf", h // 3)
    except (OSError, IOError):
        font = ImageFont.load_default()
    bbox = draw.textbbox((0, 0), text, font=font)
    th = bbox[3] - bbox[1]
    draw.text((h + pad, (h - th) // 2 - bbox[1]), text, fill=TEXT_COLOR, font=font)
    return img


def load_logo(path: str | None = None) -> bytes:
    """Return logo PNG bytes from *path* (default ``Logo.png``), or a drawn wordmark."""
    path = path or LOGO_PATH
    if os.path.exists(path):
        try:
            img = Image.open(path)
            img.load()
            return _to_png(img)
        except Exception as e:
            logger.warning("Could not read logo %s: %s", path, e)
    return _to_png(make_logo())
