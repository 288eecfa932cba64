"""Общие настройки пакета и настройка логирования.

Значения собраны в одном месте, чтобы сервисы, адаптер границы и приложение
предпросмотра использовали одни и те же константы.
"""
from __future__ import annotations

import logging
import os
from typing import Optional, Tuple

from PIL import Image

# Nine-patch border format
MARKER_COLOR: Tuple[int, int, int, int] = (0, 0, 0, 255)
BORDER = 1
MIN_SOURCE_SIZE = 3

# Codec / wire format
OUTPUT_FORMAT = "PNG"
WIRE_U32_SIZE = 4
CONTENT_INFO_FORMAT = "<6I"
# same ceiling Pillow applies when decoding; None disables the check
MAX_TARGET_PIXELS: Optional[int] = Image.MAX_IMAGE_PIXELS

# Logging
LOG_LEVEL = os.environ.get("NINEPATCH_LOG_LEVEL", "WARNING")
LOG_FILE: Optional[str] = os.environ.get("NINEPATCH_LOG_FILE") or None

# Preview app
DEFAULT_TARGET_SIZE: Tuple[int, int] = (256, 128)
MIN_ZOOM_PERCENT = 10
MAX_ZOOM_PERCENT = 800

logger = logging.getLogger(__name__)


def configure_logging(level: str = LOG_LEVEL, log_file: Optional[str] = LOG_FILE) -> None:
    """Настраивает логирование приложения.

    Библиотека сама логирование не настраивает; вызывать при старте
    приложения (так делает `ninepatch.main`).

    Args:
        level: Уровень ('DEBUG', 'INFO', 'WARNING', 'ERROR').
        log_file: Путь к файлу лога. Если None, только stderr.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    # avoid duplicate handlers on repeated calls
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger("PIL").setLevel(logging.WARNING)

    logger.info("Logging configured: level=%s, file=%s", level, log_file or "stderr")
