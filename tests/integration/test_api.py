"""Integration tests for the byte-level entry points in ninepatch.api.

Images are built with PIL, encoded to PNG, passed through the boundary
functions and decoded again.
"""

import logging
import struct

import pytest

from ninepatch.api import nine_patch, nine_patch_content_info

pytestmark = pytest.mark.integration

TRANSPARENT = (255, 255, 255, 0)


class TestNinePatch:
    """Tests for nine_patch()."""

    def test_basic_resize(self, make_ninepatch, png_bytes, decode_png, u32):
        """5x5 source with one top and one left marker scaled to 10x8."""
        img = make_ninepatch(5, 5, top=(1,), left=(1,), border=TRANSPARENT)
        result = nine_patch(png_bytes(img), u32(10), u32(8))
        assert result, "resize should succeed"
        assert decode_png(result).size == (10, 8)

    def test_target_too_small_returns_empty(self, make_ninepatch, png_bytes, u32):
        img = make_ninepatch(5, 5, top=(2,), left=(2,), border=(255, 255, 255, 255))
        assert nine_patch(png_bytes(img), u32(1), u32(1)) == b""

    @pytest.mark.parametrize("target", [(3, 3), (4, 3), (3, 9), (17, 12)])
    def test_any_admissible_target(self, make_ninepatch, png_bytes, decode_png, u32, target):
        img = make_ninepatch(7, 7, top=(2, 3), left=(2, 3))  # minimum 3x3
        result = nine_patch(png_bytes(img), u32(target[0]), u32(target[1]))
        assert decode_png(result).size == target

    @pytest.mark.parametrize("target", [(2, 3), (3, 2), (0, 0)])
    def test_any_target_below_minimum(self, make_ninepatch, png_bytes, u32, target):
        img = make_ninepatch(7, 7, top=(2, 3), left=(2, 3))
        assert nine_patch(png_bytes(img), u32(target[0]), u32(target[1])) == b""

    def test_minimum_size_without_markers_is_unscaled_copy(self, make_ninepatch, png_bytes, decode_png, u32, gradient):
        img = make_ninepatch(6, 5, fill=gradient)
        result = decode_png(nine_patch(png_bytes(img), u32(4), u32(3)))
        assert result.size == (4, 3)
        for y in range(3):
            for x in range(4):
                assert result.getpixel((x, y)) == img.getpixel((x + 1, y + 1))

    def test_zero_area_result_returns_empty(self, make_ninepatch, png_bytes, u32):
        """Everything stretches, so 0x0 is admissible but cannot be encoded."""
        img = make_ninepatch(5, 5, top=(1, 2, 3), left=(1, 2, 3))
        assert nine_patch(png_bytes(img), u32(0), u32(0)) == b""

    def test_undecodable_input_logged(self, u32, caplog):
        with caplog.at_level(logging.ERROR, logger="ninepatch.api"):
            assert nine_patch(b"definitely not a png", u32(4), u32(4)) == b""
        assert "Nine-patch error: Invalid image" in caplog.text

    def test_short_dimension_argument(self, make_ninepatch, png_bytes, u32, caplog):
        with caplog.at_level(logging.ERROR, logger="ninepatch.api"):
            assert nine_patch(png_bytes(make_ninepatch(5, 5)), b"\x04\x00", u32(4)) == b""
        assert "Invalid format" in caplog.text

    def test_source_smaller_than_3x3(self, png_bytes, u32, caplog):
        from PIL import Image

        with caplog.at_level(logging.ERROR, logger="ninepatch.api"):
            assert nine_patch(png_bytes(Image.new("RGBA", (2, 2))), u32(4), u32(4)) == b""
        assert "Image too small" in caplog.text

    def test_too_small_logged_with_sizes(self, make_ninepatch, png_bytes, u32, caplog):
        img = make_ninepatch(7, 7, top=(2, 3), left=(2, 3))
        with caplog.at_level(logging.ERROR, logger="ninepatch.api"):
            nine_patch(png_bytes(img), u32(1), u32(1))
        assert "Target size 1x1 is smaller than minimum 3x3" in caplog.text

    def test_huge_target_returns_empty_and_logs(self, make_ninepatch, png_bytes, u32, caplog):
        img = make_ninepatch(5, 5, top=(1,), left=(1,))
        with caplog.at_level(logging.ERROR, logger="ninepatch.api"):
            assert nine_patch(png_bytes(img), u32(0xFFFFFFFF), u32(0xFFFFFFFF)) == b""
        assert "Nine-patch error: Invalid format" in caplog.text

    def test_corrupted_input_never_raises(self, make_ninepatch, png_bytes, u32):
        data = png_bytes(make_ninepatch(9, 9, top=(4,), left=(4,)))
        for pos in range(8, len(data)):
            corrupted = data[:pos] + bytes([data[pos] ^ 0xFF]) + data[pos + 1:]
            result = nine_patch(corrupted, u32(12), u32(12))
            assert isinstance(result, bytes), f"byte {pos}"


class TestNinePatchContentInfo:
    """Tests for nine_patch_content_info()."""

    def test_content_rectangle(self, make_ninepatch, png_bytes):
        img = make_ninepatch(7, 7, top=(2, 3), left=(2, 3), bottom=(2, 3, 4, 5), right=(2, 3, 4))
        result = nine_patch_content_info(png_bytes(img))
        assert len(result) == 24
        assert struct.unpack("<6I", result) == (1, 1, 0, 1, 3, 3)

    def test_no_markers(self, make_ninepatch, png_bytes):
        """No padding restriction and the whole content is fixed."""
        result = nine_patch_content_info(png_bytes(make_ninepatch(6, 5)))
        assert struct.unpack("<6I", result) == (0, 0, 0, 0, 4, 3)

    def test_failure_returns_empty_and_logs(self, caplog):
        with caplog.at_level(logging.ERROR, logger="ninepatch.api"):
            assert nine_patch_content_info(b"") == b""
        assert "Nine-patch content info error" in caplog.text

    def test_corrupted_input_never_raises(self, make_ninepatch, png_bytes):
        data = png_bytes(make_ninepatch(9, 9, top=(4,), left=(4,), bottom=(3, 4, 5), right=(3, 4, 5)))
        for pos in range(8, len(data)):
            corrupted = data[:pos] + bytes([data[pos] ^ 0xFF]) + data[pos + 1:]
            result = nine_patch_content_info(corrupted)
            assert result == b"" or len(result) == 24, f"byte {pos}"
