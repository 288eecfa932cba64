"""Боковая панель: открытие файла, информация, разметка nine-patch, целевой размер.

Принципы:
- SRP: управляет только UI параметров, не содержит алгоритмов.
- ISP: выдаёт параметры через компактные методы `get_*`, события через `on_*`.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk

from ninepatch.config import DEFAULT_TARGET_SIZE
from ninepatch.models.image_model import ImageData
from ninepatch.models.patch_model import PatchInfo


def _rgba_to_hex(rgba: Tuple[int, int, int, int]) -> str:
    """Преобразует RGBA в HEX (без альфа)."""
    r, g, b, _a = rgba
    return f"#{r:02X}{g:02X}{b:02X}"


class Sidebar(ctk.CTkFrame):
    """Панель инструментов с блоками: файл, информация, nine-patch, размер, курсор."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_apply_size: Optional[Callable[[], None]] = None
        self.on_save_result: Optional[Callable[[], None]] = None
        self.on_use_min_size: Optional[Callable[[], None]] = None

        bold = ctk.CTkFont(size=16, weight="bold")

        self._title = ctk.CTkLabel(self, text="Инструменты", font=bold)
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Открыть nine-patch…", command=self._emit_open_file)
        self._open_btn.grid(row=1, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=bold)
        self._info_title.grid(row=2, column=0, padx=8, pady=(8, 4), sticky="w")

        self._path_val = ctk.StringVar(value="—")
        self._size_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._mode_val = ctk.StringVar(value="—")
        for row, var in enumerate((self._path_val, self._size_val, self._dims_val, self._mode_val), start=3):
            label = ctk.CTkLabel(self, textvariable=var, wraplength=250, anchor="w", justify="left")
            label.grid(row=row, column=0, padx=8, pady=(0, 2), sticky="ew")

        # Nine-patch section
        self._patch_title = ctk.CTkLabel(self, text="Разметка", font=bold)
        self._patch_title.grid(row=7, column=0, padx=8, pady=(8, 4), sticky="w")

        self._stretch_x_val = ctk.StringVar(value="—")
        self._stretch_y_val = ctk.StringVar(value="—")
        self._padding_val = ctk.StringVar(value="—")
        self._min_size_val = ctk.StringVar(value="—")
        for row, var in enumerate(
            (self._stretch_x_val, self._stretch_y_val, self._padding_val, self._min_size_val), start=8
        ):
            label = ctk.CTkLabel(self, textvariable=var, wraplength=250, anchor="w", justify="left")
            label.grid(row=row, column=0, padx=8, pady=(0, 2), sticky="ew")

        # Target size section
        self._target_title = ctk.CTkLabel(self, text="Целевой размер", font=bold)
        self._target_title.grid(row=12, column=0, padx=8, pady=(12, 4), sticky="w")

        size_row = ctk.CTkFrame(self, fg_color="transparent")
        size_row.grid(row=13, column=0, padx=8, pady=(0, 4), sticky="ew")
        self._width_val = ctk.StringVar(value=str(DEFAULT_TARGET_SIZE[0]))
        self._height_val = ctk.StringVar(value=str(DEFAULT_TARGET_SIZE[1]))
        self._width_entry = ctk.CTkEntry(size_row, textvariable=self._width_val, width=80)
        self._times_label = ctk.CTkLabel(size_row, text="×")
        self._height_entry = ctk.CTkEntry(size_row, textvariable=self._height_val, width=80)
        self._width_entry.grid(row=0, column=0, padx=(0, 4))
        self._times_label.grid(row=0, column=1, padx=4)
        self._height_entry.grid(row=0, column=2, padx=(4, 0))
        self._width_entry.bind("<Return>", self._on_size_commit)
        self._height_entry.bind("<Return>", self._on_size_commit)

        self._apply_btn = ctk.CTkButton(self, text="Применить", command=self._emit_apply_size)
        self._apply_btn.grid(row=14, column=0, padx=8, pady=(4, 2), sticky="ew")
        self._min_btn = ctk.CTkButton(self, text="Минимальный размер", command=self._emit_use_min_size)
        self._min_btn.grid(row=15, column=0, padx=8, pady=(2, 2), sticky="ew")
        self._save_btn = ctk.CTkButton(self, text="Сохранить результат…", command=self._emit_save_result)
        self._save_btn.grid(row=16, column=0, padx=8, pady=(2, 8), sticky="ew")

        self._status_val = ctk.StringVar(value="")
        self._status = ctk.CTkLabel(self, textvariable=self._status_val, wraplength=250, anchor="w", justify="left")
        self._status.grid(row=17, column=0, padx=8, pady=(0, 8), sticky="ew")

        # Cursor section
        self._cursor_title = ctk.CTkLabel(self, text="Курсор", font=bold)
        self._cursor_title.grid(row=18, column=0, padx=8, pady=(8, 4), sticky="w")

        self._cursor_xy_val = ctk.StringVar(value="—")
        self._cursor_rgba_val = ctk.StringVar(value="—")
        self._cursor_hex_val = ctk.StringVar(value="—")
        for row, var in enumerate((self._cursor_xy_val, self._cursor_rgba_val, self._cursor_hex_val), start=19):
            label = ctk.CTkLabel(self, textvariable=var, anchor="w", justify="left")
            label.grid(row=row, column=0, padx=8, pady=(0, 2), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def set_image_info(self, image_data: ImageData) -> None:
        """Отображает метаданные загруженного изображения."""
        self._path_val.set(str(image_data.path))
        self._size_val.set(self._format_size(image_data.size_bytes))
        self._dims_val.set(f"{image_data.width} × {image_data.height} px")
        self._mode_val.set(image_data.mode)

    def set_patch_info(self, info: Optional[PatchInfo]) -> None:
        """Показывает разметку рамки; None очищает блок."""
        if info is None:
            for var in (self._stretch_x_val, self._stretch_y_val, self._padding_val, self._min_size_val):
                var.set("—")
            return
        s, c = info.stretch, info.content
        self._stretch_x_val.set(self._format_span("По ширине", s.stretch_left, s.stretch_right))
        self._stretch_y_val.set(self._format_span("По высоте", s.stretch_top, s.stretch_bottom))
        self._padding_val.set(
            f"Отступы контента: L{c.content_left} T{c.content_top} R{c.content_right} B{c.content_bottom}"
        )
        self._min_size_val.set(
            f"Контент: {info.content_width}×{info.content_height}, минимум: {s.min_width}×{s.min_height}"
        )

    def set_target_size(self, width: int, height: int) -> None:
        self._width_val.set(str(width))
        self._height_val.set(str(height))

    def get_target_size(self) -> Tuple[int, int]:
        """Возвращает (ширина, высота) из полей ввода.

        Raises:
            ValueError: если значение не целое неотрицательное число.
        """
        width = int(self._width_val.get().strip())
        height = int(self._height_val.get().strip())
        if width < 0 or height < 0:
            raise ValueError("размер не может быть отрицательным")
        return width, height

    def set_status(self, text: str, is_error: bool = False) -> None:
        self._status_val.set(text)
        self._status.configure(text_color=("#B3261E", "#F2B8B5") if is_error else ("gray10", "gray90"))

    def update_cursor_info(self, x: Optional[int], y: Optional[int], rgba: Optional[Tuple[int, int, int, int]]) -> None:
        if x is None or y is None or rgba is None:
            self._cursor_xy_val.set("—")
            self._cursor_rgba_val.set("—")
            self._cursor_hex_val.set("—")
            return
        self._cursor_xy_val.set(f"({x}, {y})")
        r, g, b, a = rgba
        self._cursor_rgba_val.set(f"RGBA: {r}, {g}, {b}, {a}")
        self._cursor_hex_val.set(f"HEX: {_rgba_to_hex(rgba)}")

    # ---- Events ----
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()

    def _emit_apply_size(self) -> None:
        if self.on_apply_size:
            self.on_apply_size()

    def _emit_use_min_size(self) -> None:
        if self.on_use_min_size:
            self.on_use_min_size()

    def _emit_save_result(self) -> None:
        if self.on_save_result:
            self.on_save_result()

    def _on_size_commit(self, _event: object) -> None:
        self._emit_apply_size()

    # ---- Helpers ----
    def _format_span(self, label: str, start: int, end: int) -> str:
        if start == end:
            return f"{label}: не растягивается"
        return f"{label}: [{start}, {end})"

    def _format_size(self, size_bytes: Optional[int]) -> str:
        if size_bytes is None:
            return "—"
        thresholds = [("Б", 1024), ("КБ", 1024**2), ("МБ", 1024**3)]
        for label, limit in thresholds:
            if size_bytes < limit:
                if label == "Б":
                    return f"{size_bytes} {label}"
                value = size_bytes / (limit // 1024)
                return f"{value:.1f} {label}"
        value = size_bytes / (1024**3)
        return f"{value:.1f} ГБ"
