"""Разбор разметки рамки nine-patch.

Верхняя строка и левый столбец задают растягиваемые полосы (`BorderParser`),
нижняя строка и правый столбец задают отступы контента (`ContentInfoParser`).
Оба парсера используют один примитив `scan_marker_span`; различается только
результат при отсутствии маркеров.
"""
from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from ninepatch.config import BORDER, MARKER_COLOR, MIN_SOURCE_SIZE
from ninepatch.models.bitmap import Bitmap
from ninepatch.models.errors import InvalidImage
from ninepatch.models.patch_model import ContentInfo, StretchInfo

logger = logging.getLogger(__name__)

SCAN_STRETCH = "stretch"
SCAN_CONTENT = "content"

_MARKER = np.array(MARKER_COLOR, dtype=np.uint8)


def scan_marker_span(line: np.ndarray, kind: str = SCAN_STRETCH) -> Tuple[int, int]:
    """Ищет полосу маркеров в строке/столбце рамки.

    Угловые пиксели (первый и последний) не просматриваются. Найденная полоса
    возвращается в координатах контента как полуоткрытый интервал
    `[первый маркер, последний маркер + 1)`; разрывы между маркерами
    поглощаются.

    Args:
        line: Пиксели рамки, массив (length, 4).
        kind: `SCAN_STRETCH` или `SCAN_CONTENT`, определяет ответ без маркеров.

    Returns:
        `(start, end)`. Без маркеров: `(content_length, content_length)` для
        растяжения (ничего не тянется) и `(0, content_length)` для контента
        (вся область).
    """
    if kind not in (SCAN_STRETCH, SCAN_CONTENT):
        raise ValueError(f"unknown scan kind: {kind!r}")

    content_length = max(0, int(line.shape[0]) - 2 * BORDER)
    # inner[i] is border pixel i + 1, so its index is already in content space
    inner = line[BORDER:BORDER + content_length]
    hits = np.flatnonzero(np.all(inner == _MARKER, axis=1))

    if hits.size:
        return int(hits[0]), int(hits[-1]) + 1
    if kind == SCAN_STRETCH:
        return content_length, content_length
    return 0, content_length


def _check_source_size(bitmap: Bitmap) -> None:
    if bitmap.width < MIN_SOURCE_SIZE or bitmap.height < MIN_SOURCE_SIZE:
        raise InvalidImage(
            f"Image too small for nine-patch: {bitmap.width}x{bitmap.height} "
            f"(need at least {MIN_SOURCE_SIZE}x{MIN_SOURCE_SIZE})"
        )


class BorderParser:
    def parse(self, bitmap: Bitmap) -> StretchInfo:
        """Читает растягиваемые полосы из верхней строки и левого столбца.

        Raises:
            InvalidImage: если изображение меньше 3×3.
        """
        _check_source_size(bitmap)

        stretch_left, stretch_right = scan_marker_span(bitmap.row(0), SCAN_STRETCH)
        stretch_top, stretch_bottom = scan_marker_span(bitmap.column(0), SCAN_STRETCH)

        content_width = bitmap.width - 2 * BORDER
        content_height = bitmap.height - 2 * BORDER

        info = StretchInfo(
            left_fixed=stretch_left,
            right_fixed=content_width - stretch_right,
            top_fixed=stretch_top,
            bottom_fixed=content_height - stretch_bottom,
            stretch_left=stretch_left,
            stretch_right=stretch_right,
            stretch_top=stretch_top,
            stretch_bottom=stretch_bottom,
        )
        logger.debug("Stretch info for %dx%d source: %s", bitmap.width, bitmap.height, info)
        return info


class ContentInfoParser:
    def parse(self, bitmap: Bitmap) -> ContentInfo:
        """Читает область контента из нижней строки и правого столбца.

        Правый и нижний отступы пересчитываются в расстояние от своего края.

        Raises:
            InvalidImage: если изображение меньше 3×3.
        """
        _check_source_size(bitmap)

        content_left, raw_right = scan_marker_span(bitmap.row(bitmap.height - 1), SCAN_CONTENT)
        content_top, raw_bottom = scan_marker_span(bitmap.column(bitmap.width - 1), SCAN_CONTENT)

        content_width = bitmap.width - 2 * BORDER
        content_height = bitmap.height - 2 * BORDER

        info = ContentInfo(
            content_left=content_left,
            content_top=content_top,
            content_right=content_width - raw_right,
            content_bottom=content_height - raw_bottom,
        )
        logger.debug("Content info for %dx%d source: %s", bitmap.width, bitmap.height, info)
        return info
