"""Конвейер nine-patch: декодирование, разбор рамки, масштабирование, кодирование.

Принципы:
- SRP: только оркестрация; алгоритмы живут в отдельных сервисах.
- DIP: зависимости передаются в конструктор, по умолчанию создаются стандартные.
"""
from __future__ import annotations

import logging
from typing import Optional

from ninepatch.models.bitmap import Bitmap
from ninepatch.models.patch_model import ContentInfoResult, PatchInfo
from ninepatch.services.border_service import BorderParser, ContentInfoParser
from ninepatch.services.extract_service import ContentExtractor
from ninepatch.services.image_service import ImageService
from ninepatch.services.scale_service import PatchScaler

logger = logging.getLogger(__name__)


class NinePatchService:
    """Структурированный интерфейс поверх отдельных шагов.

    Экземпляр не хранит состояния между вызовами, поэтому один сервис можно
    использовать из нескольких потоков.
    """

    def __init__(
        self,
        image_service: Optional[ImageService] = None,
        border_parser: Optional[BorderParser] = None,
        content_parser: Optional[ContentInfoParser] = None,
        extractor: Optional[ContentExtractor] = None,
        scaler: Optional[PatchScaler] = None,
    ) -> None:
        self._image_service = image_service or ImageService()
        self._border_parser = border_parser or BorderParser()
        self._content_parser = content_parser or ContentInfoParser()
        self._extractor = extractor or ContentExtractor()
        self._scaler = scaler or PatchScaler()

    def render(self, bitmap: Bitmap, target_width: int, target_height: int) -> Bitmap:
        """Масштабирует декодированный nine-patch (с рамкой) до заданного размера.

        Raises:
            InvalidImage: если изображение меньше 3×3.
            TargetTooSmall: если цель меньше минимального размера.
        """
        stretch = self._border_parser.parse(bitmap)
        # fail before copying the content
        self._scaler.plan(stretch, target_width, target_height)
        content = self._extractor.extract(bitmap)
        return self._scaler.scale(content, stretch, target_width, target_height)

    def resize(self, image_bytes: bytes, target_width: int, target_height: int) -> bytes:
        """Байты изображения → PNG размером target_width×target_height."""
        bitmap = self._image_service.decode(image_bytes)
        logger.debug(
            "Resizing %dx%d nine-patch to %dx%d",
            bitmap.width, bitmap.height, target_width, target_height,
        )
        result = self.render(bitmap, target_width, target_height)
        return self._image_service.encode(result)

    def inspect(self, bitmap: Bitmap) -> PatchInfo:
        """Разметка рамки целиком: полосы растяжения и область контента."""
        return PatchInfo(
            source_width=bitmap.width,
            source_height=bitmap.height,
            stretch=self._border_parser.parse(bitmap),
            content=self._content_parser.parse(bitmap),
        )

    def content_info(self, image_bytes: bytes) -> ContentInfoResult:
        """Отступы контента и минимальный размер для байтов изображения."""
        bitmap = self._image_service.decode(image_bytes)
        info = self.inspect(bitmap)
        return ContentInfoResult.from_parts(info.content, info.stretch)
