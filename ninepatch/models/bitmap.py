"""Растровое изображение RGBA, с которым работают все сервисы.

Принципы:
- SRP: только хранение пикселей и простые выборки, без алгоритмов nine-patch.
- Чистый код: неизменяемость (`frozen=True`, буфер только для чтения); любое
  преобразование возвращает новый `Bitmap` со своим буфером.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from PIL import Image


@dataclass(frozen=True, eq=False)
class Bitmap:
    """Сетка пикселей RGBA, построчно, начало координат слева сверху.

    Fields:
        pixels: Массив `uint8` формы (height, width, 4), только для чтения.
    """
    pixels: np.ndarray

    def __post_init__(self) -> None:
        arr = np.array(self.pixels, dtype=np.uint8, copy=True)
        if arr.ndim != 3 or arr.shape[2] != 4:
            raise ValueError(f"expected an (H, W, 4) array, got shape {arr.shape}")
        arr.setflags(write=False)
        object.__setattr__(self, "pixels", arr)

    # ---- Constructors ----
    @classmethod
    def blank(cls, width: int, height: int) -> Bitmap:
        """Прозрачное изображение (0, 0, 0, 0) заданного размера."""
        if width < 0 or height < 0:
            raise ValueError(f"negative bitmap size {width}x{height}")
        return cls(np.zeros((height, width, 4), dtype=np.uint8))

    @classmethod
    def from_image(cls, image: Image.Image) -> Bitmap:
        """Создаёт `Bitmap` из изображения PIL любого режима (приводится к RGBA)."""
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        return cls(np.asarray(rgba, dtype=np.uint8))

    def to_image(self) -> Image.Image:
        """Возвращает копию в виде `PIL.Image.Image` (RGBA)."""
        # (H, W, 4) uint8 maps to RGBA
        return Image.fromarray(np.array(self.pixels, dtype=np.uint8))

    # ---- Geometry ----
    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    # ---- Access ----
    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Пиксель (x, y) как кортеж RGBA."""
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} bitmap")
        r, g, b, a = (int(c) for c in self.pixels[y, x])
        return r, g, b, a

    def row(self, y: int) -> np.ndarray:
        """Строка `y` как массив (width, 4)."""
        return self.pixels[y, :, :]

    def column(self, x: int) -> np.ndarray:
        """Столбец `x` как массив (height, 4)."""
        return self.pixels[:, x, :]

    def crop(self, x: int, y: int, width: int, height: int) -> Bitmap:
        """Копия прямоугольника; часть за пределами изображения отбрасывается."""
        x0 = min(max(x, 0), self.width)
        y0 = min(max(y, 0), self.height)
        x1 = min(max(x + width, x0), self.width)
        y1 = min(max(y + height, y0), self.height)
        return Bitmap(self.pixels[y0:y1, x0:x1, :])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.pixels, other.pixels)

    def __repr__(self) -> str:
        return f"Bitmap({self.width}x{self.height})"
