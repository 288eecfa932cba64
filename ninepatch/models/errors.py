"""Иерархия ошибок обработки nine-patch.

Все ошибки синхронные и не повторяются: на границе (`ninepatch.api`) любая из
них превращается в пустой результат, а текст уходит только в лог.
"""
from __future__ import annotations


class NinePatchError(Exception):
    """Базовая ошибка; `str()` даёт "<вид>: <подробности>"."""

    kind = "Nine-patch error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.kind}: {self.detail}"


class InvalidImage(NinePatchError):
    """Изображение не декодируется или меньше 3×3."""

    kind = "Invalid image"


class TargetTooSmall(NinePatchError):
    """Запрошенный размер меньше суммы фиксированных областей."""

    kind = "Target size too small"


class InvalidFormat(NinePatchError):
    """Ошибка кодирования результата или некорректные аргументы границы."""

    kind = "Invalid format"
