"""Unit tests for ninepatch.models.patch_model and ninepatch.models.errors."""

import struct

import pytest

from ninepatch.models.errors import InvalidFormat, InvalidImage, NinePatchError, TargetTooSmall
from ninepatch.models.patch_model import (
    ContentInfo,
    ContentInfoResult,
    Rect,
    ResizeRequest,
    StretchInfo,
)


class TestResizeRequest:
    """Tests for ResizeRequest.from_wire."""

    def test_little_endian_dimensions(self, u32):
        request = ResizeRequest.from_wire(b"img", u32(10), u32(0x01020304))
        assert request.image_bytes == b"img"
        assert request.target_width == 10
        assert request.target_height == 0x01020304

    def test_extra_bytes_ignored(self):
        request = ResizeRequest.from_wire(b"", b"\x05\x00\x00\x00\xff", b"\x06\x00\x00\x00")
        assert (request.target_width, request.target_height) == (5, 6)

    @pytest.mark.parametrize("width", [b"", b"\x01", b"\x01\x00\x00"])
    def test_short_argument_rejected(self, width, u32):
        with pytest.raises(InvalidFormat):
            ResizeRequest.from_wire(b"", width, u32(1))


class TestContentInfoResult:
    """Tests for the 24-byte metadata record."""

    def test_to_bytes_field_order(self):
        result = ContentInfoResult(1, 2, 3, 4, 5, 6)
        data = result.to_bytes()
        assert len(data) == 24
        assert struct.unpack("<6I", data) == (1, 2, 3, 4, 5, 6)

    def test_from_bytes(self):
        data = struct.pack("<6I", 6, 5, 4, 3, 2, 1)
        assert ContentInfoResult.from_bytes(data) == ContentInfoResult(6, 5, 4, 3, 2, 1)

    def test_from_bytes_wrong_length(self):
        with pytest.raises(InvalidFormat):
            ContentInfoResult.from_bytes(b"\x00" * 23)

    def test_from_parts(self):
        content = ContentInfo(content_left=1, content_top=2, content_right=3, content_bottom=4)
        stretch = StretchInfo(1, 2, 3, 4, 1, 3, 3, 5)
        result = ContentInfoResult.from_parts(content, stretch)
        assert (result.min_width, result.min_height) == (3, 7)
        assert result.content_bottom == 4


class TestGeometry:
    """Tests for StretchInfo/Rect derived values."""

    def test_stretch_info_properties(self):
        info = StretchInfo(
            left_fixed=1, right_fixed=2, top_fixed=0, bottom_fixed=3,
            stretch_left=1, stretch_right=4, stretch_top=0, stretch_bottom=2,
        )
        assert (info.min_width, info.min_height) == (3, 3)
        assert (info.stretch_width, info.stretch_height) == (3, 2)

    def test_rect(self):
        rect = Rect(2, 3, 4, 0)
        assert (rect.right, rect.bottom) == (6, 3)
        assert rect.is_empty
        assert not Rect(0, 0, 1, 1).is_empty


class TestErrors:
    """Tests for the error taxonomy."""

    @pytest.mark.parametrize(
        "cls, prefix",
        [
            (InvalidImage, "Invalid image: "),
            (TargetTooSmall, "Target size too small: "),
            (InvalidFormat, "Invalid format: "),
        ],
    )
    def test_message_prefix(self, cls, prefix):
        err = cls("details")
        assert isinstance(err, NinePatchError)
        assert str(err) == prefix + "details"
        assert err.detail == "details"
