"""Модель файла изображения, открытого в приложении предпросмотра.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image

from ninepatch.models.bitmap import Bitmap


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        raw_bytes: Содержимое файла как есть (вход для операций nine-patch).
        pil_image: Загруженное изображение PIL (RGBA).
        bitmap: То же изображение в виде `Bitmap`.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL исходного файла, например "P" или "RGBA".
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    raw_bytes: bytes
    pil_image: Image.Image
    bitmap: Bitmap
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]
