"""Контроллер приложения предпросмотра: оркестрация UI и сервисов nine-patch.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики обработки изображений).
- DIP: зависит от сервисов как от ролей; конкретные реализации инкапсулированы.
Clean Code:
- Обработчики компактны; тяжёлая логика вынесена в сервисы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from tkinter import filedialog, TclError
from typing import Optional, Tuple

import customtkinter as ctk

from ninepatch.models.bitmap import Bitmap
from ninepatch.models.errors import NinePatchError
from ninepatch.models.image_model import ImageData
from ninepatch.models.patch_model import PatchInfo
from ninepatch.services.image_service import ImageService
from ninepatch.services.ninepatch_service import NinePatchService
from ninepatch.ui.bottom_bar import BottomBar
from ninepatch.ui.image_viewer import ImageViewer
from ninepatch.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Загрузка nine-patch через `ImageService` и разбор рамки через `NinePatchService`.
    - Масштабирование до размера из сайдбара и сохранение результата.
    - Синхронизация состояния зума и режима сравнения.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk

    _image_service: ImageService = field(default_factory=ImageService)
    _ninepatch_service: NinePatchService = field(default_factory=NinePatchService)
    _current_image: Optional[ImageData] = None
    _patch_info: Optional[PatchInfo] = None
    _result: Optional[Bitmap] = None

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами.

        Компоненты UI ничего не знают друг о друге, общаются через контроллер.
        """
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_apply_size = self._handle_apply_size
        self.sidebar.on_use_min_size = self._handle_use_min_size
        self.sidebar.on_save_result = self._handle_save_result

        self.viewer.on_cursor_move = self._handle_cursor_move
        self.viewer.on_zoom_change = self._handle_viewer_zoom_changed

        self.bottom.on_zoom_change = self._handle_zoom_change
        self.bottom.on_zoom_preset = self._handle_zoom_change
        self.bottom.on_zoom_fit = self._handle_zoom_fit
        self.bottom.on_compare_mode_change = self._handle_compare_mode_change

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        try:
            file_path = filedialog.askopenfilename(
                title="Выберите nine-patch",
                filetypes=(
                    ("Nine-patch", "*.9.png *.png"),
                    ("Images", "*.png *.gif *.bmp *.tiff *.webp"),
                    ("All files", "*.*"),
                ),
            )
        except TclError:
            # Silent fail if dialog cannot open
            return

        if not file_path:
            return

        try:
            image_data = self._image_service.load_image(file_path)
            patch_info = self._ninepatch_service.inspect(image_data.bitmap)
        except (OSError, NinePatchError) as exc:
            logger.error("Cannot open %s: %s", file_path, exc)
            self.sidebar.set_status(str(exc), is_error=True)
            return

        self._current_image = image_data
        self._patch_info = patch_info
        self._result = None

        self.viewer.set_source_image(image_data.pil_image)
        self.sidebar.set_image_info(image_data)
        self.sidebar.set_patch_info(patch_info)
        self._render()
        self._handle_zoom_fit()

    def _handle_apply_size(self) -> None:
        self._render()

    def _handle_use_min_size(self) -> None:
        if self._patch_info is None:
            return
        stretch = self._patch_info.stretch
        self.sidebar.set_target_size(stretch.min_width, stretch.min_height)
        self._render()

    def _handle_save_result(self) -> None:
        if self._result is None:
            self.sidebar.set_status("Нет результата для сохранения", is_error=True)
            return
        try:
            file_path = filedialog.asksaveasfilename(
                title="Сохранить результат",
                defaultextension=".png",
                filetypes=(("PNG", "*.png"),),
            )
        except TclError:
            return
        if not file_path:
            return
        try:
            saved = self._image_service.save_image(self._result, file_path)
        except (OSError, NinePatchError) as exc:
            logger.error("Cannot save %s: %s", file_path, exc)
            self.sidebar.set_status(str(exc), is_error=True)
            return
        self.sidebar.set_status(f"Сохранено: {saved}")

    def _handle_cursor_move(self, x: Optional[int], y: Optional[int], rgba: Optional[Tuple[int, int, int, int]]) -> None:
        self.sidebar.update_cursor_info(x, y, rgba)

    def _handle_zoom_change(self, zoom_percent: int) -> None:
        self.viewer.set_zoom_percent(zoom_percent)

    def _handle_viewer_zoom_changed(self, zoom_percent: int) -> None:
        # Sync bottom slider when user zooms with mouse wheel
        self.bottom.set_zoom_percent(zoom_percent)

    def _handle_zoom_fit(self) -> None:
        self.viewer.set_zoom_to_fit()
        self.bottom.set_zoom_percent(self.viewer.get_zoom_percent())

    def _handle_compare_mode_change(self, mode: str) -> None:
        self.viewer.set_compare_mode(mode)

    # ---- Helpers ----
    def _render(self) -> None:
        """Масштабирует текущий nine-patch до размера из сайдбара.

        Ошибки показываются в строке состояния; исходное изображение не меняется.
        """
        if self._current_image is None:
            return
        try:
            width, height = self.sidebar.get_target_size()
        except ValueError:
            self.sidebar.set_status("Размер должен быть целым неотрицательным числом", is_error=True)
            return

        try:
            result = self._ninepatch_service.render(self._current_image.bitmap, width, height)
        except NinePatchError as exc:
            logger.warning("Render failed: %s", exc)
            self._result = None
            self.viewer.set_result_image(None)
            self.sidebar.set_status(str(exc), is_error=True)
            return

        self._result = result
        self.viewer.set_result_image(result.to_image() if result.width and result.height else None)
        self.sidebar.set_status(f"Результат: {result.width}×{result.height}")
