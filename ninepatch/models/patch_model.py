"""Модели данных nine-patch: разметка рамки, области сетки 3×3, запросы и ответы.

Принципы:
- SRP: только структуры данных и простые производные величины.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

import struct
from dataclasses import dataclass

from ninepatch.config import CONTENT_INFO_FORMAT, WIRE_U32_SIZE
from ninepatch.models.errors import InvalidFormat


@dataclass(frozen=True)
class StretchInfo:
    """Растягиваемые полосы и размеры фиксированных областей (в координатах контента).

    Полосы полуоткрытые: `[stretch_left, stretch_right)` по горизонтали и
    `[stretch_top, stretch_bottom)` по вертикали.
    """
    left_fixed: int
    right_fixed: int
    top_fixed: int
    bottom_fixed: int
    stretch_left: int
    stretch_right: int
    stretch_top: int
    stretch_bottom: int

    @property
    def min_width(self) -> int:
        return self.left_fixed + self.right_fixed

    @property
    def min_height(self) -> int:
        return self.top_fixed + self.bottom_fixed

    @property
    def stretch_width(self) -> int:
        return self.stretch_right - self.stretch_left

    @property
    def stretch_height(self) -> int:
        return self.stretch_bottom - self.stretch_top


@dataclass(frozen=True)
class ContentInfo:
    """Отступы «безопасной» области контента.

    `content_left`/`content_top` отсчитываются от левого/верхнего края,
    `content_right`/`content_bottom` от противоположного края внутрь.
    """
    content_left: int
    content_top: int
    content_right: int
    content_bottom: int


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class PatchRegion:
    """Ячейка сетки 3×3: откуда берём (контент) и куда кладём (результат).

    Fields:
        name: Например "top_left" или "center".
        source: Прямоугольник в координатах контента.
        destination: Прямоугольник в координатах результата.
        stretch_x: Ячейка масштабируется по горизонтали.
        stretch_y: Ячейка масштабируется по вертикали.
    """
    name: str
    source: Rect
    destination: Rect
    stretch_x: bool
    stretch_y: bool

    @property
    def is_fixed(self) -> bool:
        return not (self.stretch_x or self.stretch_y)


@dataclass(frozen=True)
class PatchInfo:
    """Всё, что известно о разметке исходного изображения (для предпросмотра)."""
    source_width: int
    source_height: int
    stretch: StretchInfo
    content: ContentInfo

    @property
    def content_width(self) -> int:
        return self.source_width - 2

    @property
    def content_height(self) -> int:
        return self.source_height - 2


def _read_u32(raw: bytes, name: str) -> int:
    if len(raw) < WIRE_U32_SIZE:
        raise InvalidFormat(f"{name} must be {WIRE_U32_SIZE} little-endian bytes, got {len(raw)}")
    return int.from_bytes(raw[:WIRE_U32_SIZE], "little", signed=False)


@dataclass(frozen=True)
class ResizeRequest:
    image_bytes: bytes
    target_width: int
    target_height: int

    @classmethod
    def from_wire(cls, image_bytes: bytes, width: bytes, height: bytes) -> ResizeRequest:
        """Разбирает аргументы границы: ширина и высота как u32 little-endian.

        Raises:
            InvalidFormat: если аргумент короче 4 байт (лишние байты игнорируются).
        """
        return cls(
            image_bytes=bytes(image_bytes),
            target_width=_read_u32(bytes(width), "width"),
            target_height=_read_u32(bytes(height), "height"),
        )


@dataclass(frozen=True)
class ContentInfoResult:
    """Ответ операции метаданных: отступы контента и минимальный размер."""
    content_left: int
    content_top: int
    content_right: int
    content_bottom: int
    min_width: int
    min_height: int

    @classmethod
    def from_parts(cls, content: ContentInfo, stretch: StretchInfo) -> ContentInfoResult:
        return cls(
            content_left=content.content_left,
            content_top=content.content_top,
            content_right=content.content_right,
            content_bottom=content.content_bottom,
            min_width=stretch.min_width,
            min_height=stretch.min_height,
        )

    def to_bytes(self) -> bytes:
        """24 байта: шесть u32 little-endian в порядке полей."""
        return struct.pack(
            CONTENT_INFO_FORMAT,
            self.content_left,
            self.content_top,
            self.content_right,
            self.content_bottom,
            self.min_width,
            self.min_height,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> ContentInfoResult:
        try:
            values = struct.unpack(CONTENT_INFO_FORMAT, data)
        except struct.error as exc:
            raise InvalidFormat(f"content info record must be 24 bytes, got {len(data)}") from exc
        return cls(*values)
