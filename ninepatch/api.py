"""Точки входа с байтовыми аргументами для внешнего хоста.

Адаптер только переводит байты в структуры `ninepatch.models.patch_model` и
обратно. Ошибки наружу не передаются: результат пустой, текст в логе.
"""
from __future__ import annotations

import logging

from ninepatch.models.errors import NinePatchError
from ninepatch.models.patch_model import ResizeRequest
from ninepatch.services.ninepatch_service import NinePatchService

logger = logging.getLogger(__name__)

_service = NinePatchService()


def nine_patch(image_bytes: bytes, width: bytes, height: bytes) -> bytes:
    """Масштабирует nine-patch; `width`/`height` это u32 little-endian.

    Returns:
        PNG ровно width×height или `b""` при любой ошибке.
    """
    try:
        request = ResizeRequest.from_wire(image_bytes, width, height)
        return _service.resize(request.image_bytes, request.target_width, request.target_height)
    except NinePatchError as exc:
        logger.error("Nine-patch error: %s", exc)
        return b""


def nine_patch_content_info(image_bytes: bytes) -> bytes:
    """24 байта: content_left, content_top, content_right, content_bottom,
    min_width, min_height (u32 little-endian), или `b""` при ошибке.
    """
    try:
        return _service.content_info(bytes(image_bytes)).to_bytes()
    except NinePatchError as exc:
        logger.error("Nine-patch content info error: %s", exc)
        return b""
