"""Unit tests for ninepatch.services.extract_service."""

import pytest

from ninepatch.models.bitmap import Bitmap
from ninepatch.models.errors import InvalidImage
from ninepatch.services.extract_service import ContentExtractor


class TestContentExtractor:
    """Tests for ContentExtractor.extract."""

    def test_border_removed(self, make_ninepatch, gradient):
        src = Bitmap.from_image(make_ninepatch(6, 5, top=(2,), right=(3,), fill=gradient))
        content = ContentExtractor().extract(src)
        assert content.size == (4, 3)
        for y in range(3):
            for x in range(4):
                assert content.pixel(x, y) == src.pixel(x + 1, y + 1)

    def test_minimal_source_gives_single_pixel(self, make_ninepatch):
        content = ContentExtractor().extract(Bitmap.from_image(make_ninepatch(3, 3)))
        assert content.size == (1, 1)
        assert content.pixel(0, 0) == (255, 255, 255, 255)

    def test_result_does_not_alias_source(self, make_ninepatch):
        src = Bitmap.from_image(make_ninepatch(4, 4))
        content = ContentExtractor().extract(src)
        assert content.pixels.base is None

    def test_too_small_is_invalid_image(self):
        with pytest.raises(InvalidImage):
            ContentExtractor().extract(Bitmap.blank(2, 4))
