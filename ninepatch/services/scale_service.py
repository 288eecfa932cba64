from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from ninepatch.config import MAX_TARGET_PIXELS
from ninepatch.models.bitmap import Bitmap
from ninepatch.models.errors import InvalidFormat, TargetTooSmall
from ninepatch.models.patch_model import PatchRegion, Rect, StretchInfo

logger = logging.getLogger(__name__)

_ROW_NAMES = ("top", "middle", "bottom")
_COL_NAMES = ("left", "center", "right")


def resize_nearest(bitmap: Bitmap, width: int, height: int) -> Bitmap:
    """
    Масштабирование методом ближайшего соседа.
    Пиксель (x, y) результата берётся из (floor(x*src_w/w), floor(y*src_h/h)),
    координаты ограничены src_w-1 / src_h-1.
    """
    if width <= 0 or height <= 0:
        return Bitmap.blank(max(0, width), max(0, height))
    src_w, src_h = bitmap.size
    if src_w == 0 or src_h == 0:
        raise ValueError(f"cannot resize an empty {src_w}x{src_h} bitmap to {width}x{height}")

    xs = np.minimum(np.arange(width, dtype=np.int64) * src_w // width, src_w - 1)
    ys = np.minimum(np.arange(height, dtype=np.int64) * src_h // height, src_h - 1)
    return Bitmap(bitmap.pixels[ys[:, None], xs[None, :]])


def _cell_name(row: int, col: int) -> str:
    if row == 1 and col == 1:
        return "center"
    if row == 1:
        return f"{_COL_NAMES[col]}_edge"
    if col == 1:
        return f"{_ROW_NAMES[row]}_edge"
    return f"{_ROW_NAMES[row]}_{_COL_NAMES[col]}"


class PatchScaler:
    def __init__(self, max_pixels: Optional[int] = MAX_TARGET_PIXELS) -> None:
        self._max_pixels = max_pixels

    # ---------- Разбиение на сетку 3×3 ----------
    def plan(self, stretch: StretchInfo, target_width: int, target_height: int) -> List[PatchRegion]:
        """
        Строит девять ячеек: источник в координатах контента и место в результате.
        Прямоугольники назначения покрывают результат без пропусков и наложений,
        в том числе при вырожденных (нулевых) полосах растяжения.
        """
        self._check_target(stretch, target_width, target_height)
        extra_width = target_width - stretch.min_width
        extra_height = target_height - stretch.min_height

        # (start, length) per band: fixed, stretch, fixed
        src_cols = (
            (0, stretch.left_fixed),
            (stretch.stretch_left, stretch.stretch_width),
            (stretch.stretch_right, stretch.right_fixed),
        )
        src_rows = (
            (0, stretch.top_fixed),
            (stretch.stretch_top, stretch.stretch_height),
            (stretch.stretch_bottom, stretch.bottom_fixed),
        )
        dst_cols = (
            (0, stretch.left_fixed),
            (stretch.left_fixed, extra_width),
            (stretch.left_fixed + extra_width, stretch.right_fixed),
        )
        dst_rows = (
            (0, stretch.top_fixed),
            (stretch.top_fixed, extra_height),
            (stretch.top_fixed + extra_height, stretch.bottom_fixed),
        )

        regions: List[PatchRegion] = []
        for r in range(3):
            for c in range(3):
                regions.append(
                    PatchRegion(
                        name=_cell_name(r, c),
                        source=Rect(src_cols[c][0], src_rows[r][0], src_cols[c][1], src_rows[r][1]),
                        destination=Rect(dst_cols[c][0], dst_rows[r][0], dst_cols[c][1], dst_rows[r][1]),
                        stretch_x=(c == 1),
                        stretch_y=(r == 1),
                    )
                )
        return regions

    # ---------- Масштабирование и сборка ----------
    def scale(self, content: Bitmap, stretch: StretchInfo, target_width: int, target_height: int) -> Bitmap:
        """
        Собирает результат target_width×target_height:
        - углы копируются без изменений;
        - верхняя/нижняя кромки тянутся по ширине, левая/правая по высоте;
        - центр тянется в обе стороны.
        Ячейка с пустым источником ничего не рисует (остаётся прозрачной).

        Raises:
            TargetTooSmall: если цель меньше суммы фиксированных областей.
            InvalidFormat: если результат слишком велик для выделения памяти.
        """
        expected = (stretch.stretch_right + stretch.right_fixed, stretch.stretch_bottom + stretch.bottom_fixed)
        if content.size != expected:
            raise ValueError(f"content is {content.width}x{content.height}, stretch info describes {expected[0]}x{expected[1]}")

        regions = self.plan(stretch, target_width, target_height)
        try:
            canvas = np.zeros((target_height, target_width, 4), dtype=np.uint8)
        except (MemoryError, ValueError) as exc:
            raise InvalidFormat(f"Cannot allocate {target_width}x{target_height} result: {exc}") from exc

        for region in regions:
            dst = region.destination
            if dst.is_empty or region.source.is_empty:
                continue
            src = content.crop(region.source.x, region.source.y, region.source.width, region.source.height)
            if not region.is_fixed:
                src = resize_nearest(src, dst.width, dst.height)
            canvas[dst.y:dst.bottom, dst.x:dst.right] = src.pixels

        logger.debug(
            "Scaled %dx%d content to %dx%d",
            content.width, content.height, target_width, target_height,
        )
        return Bitmap(canvas)

    # ---------- Вспомогательные функции ----------
    def min_size(self, stretch: StretchInfo) -> Tuple[int, int]:
        """Минимальный допустимый размер результата (сумма фиксированных областей)."""
        return stretch.min_width, stretch.min_height

    def _check_target(self, stretch: StretchInfo, target_width: int, target_height: int) -> None:
        min_w, min_h = self.min_size(stretch)
        if target_width < min_w or target_height < min_h:
            raise TargetTooSmall(
                f"Target size {target_width}x{target_height} is smaller than minimum {min_w}x{min_h}"
            )
        if self._max_pixels is not None and target_width * target_height > self._max_pixels:
            raise InvalidFormat(
                f"Target size {target_width}x{target_height} exceeds the limit of {self._max_pixels} pixels"
            )
