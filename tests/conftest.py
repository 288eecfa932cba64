"""Shared pytest fixtures for the ninepatch test suite.

Fixtures:
    make_ninepatch: Factory building a PIL RGBA nine-patch with border markers
    png_bytes: Encode a PIL image as PNG bytes
    decode_png: Decode PNG bytes back into an RGBA PIL image
    u32: Pack an int as a 4-byte little-endian wire argument
    gradient: Fill function giving every content pixel a distinct color
"""

import io
import struct

import pytest
from PIL import Image

MARKER = (0, 0, 0, 255)
TRANSPARENT = (255, 255, 255, 0)
WHITE = (255, 255, 255, 255)


def gradient_color(x, y):
    """Distinct opaque color per (x, y), never equal to the marker."""
    return (10 + x * 20, 10 + y * 20, 200, 255)


@pytest.fixture
def gradient():
    return gradient_color


@pytest.fixture
def make_ninepatch():
    """Factory: make_ninepatch(w, h, top=..., left=..., bottom=..., right=...).

    Marker coordinates are border indices (the x of a top/bottom marker, the y
    of a left/right marker). ``fill`` is a color or a callable taking source
    coordinates (x, y) of interior pixels.
    """
    def _make(width, height, top=(), left=(), bottom=(), right=(), fill=WHITE, border=TRANSPARENT):
        img = Image.new("RGBA", (width, height), border)
        for y in range(1, height - 1):
            for x in range(1, width - 1):
                img.putpixel((x, y), fill(x, y) if callable(fill) else fill)
        for x in top:
            img.putpixel((x, 0), MARKER)
        for y in left:
            img.putpixel((0, y), MARKER)
        for x in bottom:
            img.putpixel((x, height - 1), MARKER)
        for y in right:
            img.putpixel((width - 1, y), MARKER)
        return img

    return _make


@pytest.fixture
def png_bytes():
    def _encode(img):
        buffer = io.BytesIO()
        img.save(buffer, format="PNG")
        return buffer.getvalue()

    return _encode


@pytest.fixture
def decode_png():
    def _decode(data):
        with Image.open(io.BytesIO(data)) as img:
            return img.convert("RGBA")

    return _decode


@pytest.fixture
def u32():
    return lambda value: struct.pack("<I", value)
