"""Кодек изображений: байты ↔ `Bitmap`, загрузка и сохранение файлов.

Принципы:
- SRP: класс отвечает только за декодирование/кодирование через PIL.
- OCP: новые источники (стрим, URL) можно добавить отдельными методами.
- LSP/ISP: возвращает `Bitmap`/`ImageData` с предсказуемыми полями; интерфейс узкий.
"""
from __future__ import annotations

import io
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from ninepatch.config import OUTPUT_FORMAT
from ninepatch.models.bitmap import Bitmap
from ninepatch.models.errors import InvalidFormat, InvalidImage
from ninepatch.models.image_model import ImageData


class ImageService:
    def decode(self, data: bytes) -> Bitmap:
        """Декодирует изображение любого поддерживаемого PIL формата в RGBA.

        Raises:
            InvalidImage: если байты не распознаны как изображение.
        """
        try:
            with Image.open(io.BytesIO(data)) as pil_image:
                pil_image.load()
                return Bitmap.from_image(pil_image)
        except (UnidentifiedImageError, OSError, EOFError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
            raise InvalidImage(f"Failed to load image: {exc}") from exc

    def encode(self, bitmap: Bitmap) -> bytes:
        """Кодирует `Bitmap` в PNG.

        Raises:
            InvalidFormat: если кодирование не удалось (в т.ч. изображение нулевой площади).
        """
        if bitmap.width == 0 or bitmap.height == 0:
            raise InvalidFormat(f"Failed to encode {OUTPUT_FORMAT}: empty {bitmap.width}x{bitmap.height} image")
        buffer = io.BytesIO()
        try:
            bitmap.to_image().save(buffer, format=OUTPUT_FORMAT)
        except (OSError, ValueError, MemoryError) as exc:
            raise InvalidFormat(f"Failed to encode {OUTPUT_FORMAT}: {exc}") from exc
        return buffer.getvalue()

    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c исходными байтами, `PIL.Image.Image` (в режиме RGBA),
            `Bitmap`, размерами, режимом и размером файла.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            InvalidImage: если файл не распознан как изображение.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        raw_bytes = path.read_bytes()
        try:
            with Image.open(io.BytesIO(raw_bytes)) as opened:
                mode = opened.mode
                pil_image = opened.convert("RGBA")
        except (UnidentifiedImageError, OSError, EOFError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
            raise InvalidImage(f"Файл не является изображением: {path}") from exc

        width, height = pil_image.size
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        return ImageData(
            path=path,
            raw_bytes=raw_bytes,
            pil_image=pil_image,
            bitmap=Bitmap.from_image(pil_image),
            width=width,
            height=height,
            mode=mode,
            size_bytes=size_bytes,
        )

    def save_image(self, bitmap: Bitmap, file_path: str | Path) -> Path:
        """Сохраняет `Bitmap` в PNG-файл и возвращает путь."""
        path = Path(file_path)
        path.write_bytes(self.encode(bitmap))
        return path
