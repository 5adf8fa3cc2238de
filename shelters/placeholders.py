"""Generate placeholder photos for dogs registered without one.

The image is a flat colored square carrying the dog's initials. The color
is derived from the name, so the same dog always gets the same color.
"""

from __future__ import annotations

import hashlib
import io
import logging
import uuid

from django.core.files.base import ContentFile
from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)

PLACEHOLDER_SIZE = 400
PLACEHOLDER_DIR = 'placeholders'

# Muted backgrounds that keep white text readable
PALETTE = [
    (110, 114, 118),
    (94, 129, 172),
    (136, 110, 150),
    (163, 120, 86),
    (96, 138, 110),
    (150, 96, 100),
]


FONT_NAMES = ("DejaVuSans-Bold.ttf", "DejaVuSans.ttf")


def initials_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    # Pillow also searches the system font directories for bare file names
    for font_name in FONT_NAMES:
        try:
            return ImageFont.truetype(font_name, size=size)
        except OSError:
            continue
    return ImageFont.load_default()


def dog_initials(name: str | None) -> str:
    """Up to two initials from the dog's name, e.g. 'Sir Barksalot' -> 'SB'."""
    words = [w for w in (name or '').split() if w[:1].isalnum()]
    if not words:
        return '?'
    return ''.join(w[0] for w in words[:2]).upper()


def placeholder_color(name: str | None) -> tuple[int, int, int]:
    digest = hashlib.sha1((name or '').strip().lower().encode('utf-8')).digest()
    return PALETTE[digest[0] % len(PALETTE)]


def render_placeholder(name: str | None) -> bytes:
    """Render the placeholder JPEG for ``name`` and return its bytes."""
    size = PLACEHOLDER_SIZE
    img = Image.new("RGB", (size, size), placeholder_color(name))
    draw = ImageDraw.Draw(img)
    draw.rectangle([0, 0, size - 1, size - 1], outline=(140, 144, 148))

    text = dog_initials(name)
    font = initials_font(size // 3)
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    tx = (size - (right - left)) / 2 - left
    ty = (size - (bottom - top)) / 2 - top
    draw.text((tx, ty), text, font=font, fill=(255, 255, 255))

    buf = io.BytesIO()
    img.save(buf, format="JPEG", quality=88, optimize=True)
    return buf.getvalue()


def attach_placeholder_photo(dog) -> str:
    """Generate a placeholder for ``dog``, store it, and save the dog.

    Returns the stored file name relative to ``MEDIA_ROOT``.
    """
    filename = f"{PLACEHOLDER_DIR}/{uuid.uuid4().hex}.jpg"
    try:
        dog.photo.save(filename, ContentFile(render_placeholder(dog.name)), save=True)
    except OSError:
        logger.exception("Failed to save placeholder photo for dog %s", dog.pk)
        raise
    logger.info("Generated placeholder photo %s for '%s'", dog.photo.name, dog.name)
    return dog.photo.name


def is_placeholder(name: str | None) -> bool:
    return bool(name) and name.startswith(f"dogs/{PLACEHOLDER_DIR}/")


def delete_placeholder(storage, name: str | None) -> bool:
    """Remove a generated placeholder file; uploaded photos are left alone."""
    if not is_placeholder(name):
        return False
    storage.delete(name)
    logger.info("Removed placeholder photo %s", name)
    return True
