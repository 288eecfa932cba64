from __future__ import annotations

from ninepatch.config import BORDER, MIN_SOURCE_SIZE
from ninepatch.models.bitmap import Bitmap
from ninepatch.models.errors import InvalidImage


class ContentExtractor:
    def extract(self, bitmap: Bitmap) -> Bitmap:
        """
        Снимает рамку разметки в 1 px: пиксель (x, y) результата равен
        пикселю (x+1, y+1) источника. Возвращает новый `Bitmap` (W-2)×(H-2).
        """
        if bitmap.width < MIN_SOURCE_SIZE or bitmap.height < MIN_SOURCE_SIZE:
            raise InvalidImage(f"Image too small for nine-patch: {bitmap.width}x{bitmap.height}")
        return bitmap.crop(
            BORDER,
            BORDER,
            bitmap.width - 2 * BORDER,
            bitmap.height - 2 * BORDER,
        )
