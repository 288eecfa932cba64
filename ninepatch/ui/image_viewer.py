"""Виджет просмотра: исходный nine-patch и результат, масштаб, панорамирование, 2-up.

Принципы:
- SRP: отвечает только за представление и интеракции с изображением.
- Чистый код: чёткое разделение публичного API и внутренних обработчиков событий.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk

from ninepatch.config import MAX_ZOOM_PERCENT, MIN_ZOOM_PERCENT

_GAP = 16
_MIN_SCALE = MIN_ZOOM_PERCENT / 100.0
_MAX_SCALE = MAX_ZOOM_PERCENT / 100.0


def _clamp_scale(value: float) -> float:
    return max(_MIN_SCALE, min(_MAX_SCALE, value))


class ImageViewer(ctk.CTkFrame):
    """Канва с режимами «только результат» и side-by-side (источник | результат)."""
    def __init__(self, master: ctk.CTk | tk.Misc, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=0, column=0, sticky="nsew")

        self._source_image: Optional[Image.Image] = None
        self._result_image: Optional[Image.Image] = None
        # keep references, Tk drops images that are garbage collected
        self._tk_images: list[ImageTk.PhotoImage] = []

        self._scale_factor: float = 1.0
        self._fit_scale_factor: float = 1.0
        self._image_top_left: Optional[Tuple[int, int]] = None

        # panning state
        self._is_panning: bool = False
        self._pan_start_canvas_xy: Optional[Tuple[int, int]] = None
        self._pan_start_top_left: Optional[Tuple[int, int]] = None

        self.on_cursor_move: Optional[Callable[[Optional[int], Optional[int], Optional[Tuple[int, int, int, int]]], None]] = None
        self.on_zoom_change: Optional[Callable[[int], None]] = None

        # compare modes: "off" | "side_by_side"
        self._compare_mode: str = "off"
        self._hold_source_active: bool = False

        self._canvas.bind("<Configure>", self._on_canvas_resize)
        self._canvas.bind("<Motion>", self._on_mouse_move)
        self._canvas.bind("<Leave>", self._on_mouse_leave)

        # Mouse wheel zoom (cross-platform)
        self._canvas.bind("<MouseWheel>", self._on_mouse_wheel)      # Windows/macOS
        self._canvas.bind("<Button-4>", self._on_mouse_wheel_linux)  # Linux scroll up
        self._canvas.bind("<Button-5>", self._on_mouse_wheel_linux)  # Linux scroll down

        self._canvas.bind("<ButtonPress-1>", self._on_pan_start)
        self._canvas.bind("<B1-Motion>", self._on_pan_move)
        self._canvas.bind("<ButtonRelease-1>", self._on_pan_end)

        # Hold space to preview the source
        self._canvas.bind("<KeyPress-space>", self._on_space_down)
        self._canvas.bind("<KeyRelease-space>", self._on_space_up)

    # ---- Public API ----
    def set_source_image(self, image: Image.Image) -> None:
        """Устанавливает исходный nine-patch и сбрасывает результат, зум и панорамирование."""
        self._source_image = image if image.mode == "RGBA" else image.convert("RGBA")
        self._result_image = None
        self._compute_fit_scale()
        self._scale_factor = self._fit_scale_factor
        self._image_top_left = None
        self._render_image()

    def set_result_image(self, image: Optional[Image.Image]) -> None:
        """Устанавливает результат масштабирования (может быть None) и перерисовывает."""
        self._result_image = image
        self._image_top_left = None
        self._render_image()

    def set_zoom_to_fit(self) -> None:
        """Масштабирует так, чтобы видимое содержимое целиком помещалось."""
        self._compute_fit_scale()
        self._scale_factor = self._fit_scale_factor
        self._image_top_left = None
        self._render_image()

    def set_zoom_percent(self, zoom_percent: int) -> None:
        self._scale_factor = _clamp_scale(zoom_percent / 100.0)
        self._render_image()

    def get_zoom_percent(self) -> int:
        return int(round(self._scale_factor * 100))

    def set_compare_mode(self, mode: str) -> None:
        """Устанавливает режим сравнения: 'Нет' | '2-up'."""
        mapping = {"Нет": "off", "2-up": "side_by_side"}
        self._compare_mode = mapping.get(mode, "off")
        self._image_top_left = None
        self._render_image()

    # ---- Internals ----
    def _visible_images(self) -> list[Image.Image]:
        """Изображения, которые сейчас рисуются, слева направо."""
        if self._source_image is None:
            return []
        if self._result_image is None or self._hold_source_active:
            return [self._source_image]
        if self._compare_mode == "side_by_side":
            return [self._source_image, self._result_image]
        return [self._result_image]

    def _scaled_size(self, image: Image.Image) -> Tuple[int, int]:
        w, h = image.size
        return max(1, int(w * self._scale_factor)), max(1, int(h * self._scale_factor))

    def _content_size(self, images: list[Image.Image], scale: float) -> Tuple[int, int]:
        if not images:
            return 0, 0
        widths = [max(1, int(img.width * scale)) for img in images]
        heights = [max(1, int(img.height * scale)) for img in images]
        return sum(widths) + _GAP * (len(images) - 1), max(heights)

    def _on_canvas_resize(self, _event: tk.Event) -> None:
        if self._source_image is None:
            return
        self._compute_fit_scale()
        self._render_image()

    def _render_image(self) -> None:
        self._canvas.delete("all")
        self._tk_images = []
        images = self._visible_images()
        if not images:
            return

        canvas_w = int(self._canvas.winfo_width())
        canvas_h = int(self._canvas.winfo_height())
        content_w, content_h = self._content_size(images, self._scale_factor)

        # compute allowed top-left range
        if content_w <= canvas_w:
            min_x = max_x = (canvas_w - content_w) // 2
        else:
            min_x = canvas_w - content_w
            max_x = 0
        if content_h <= canvas_h:
            min_y = max_y = (canvas_h - content_h) // 2
        else:
            min_y = canvas_h - content_h
            max_y = 0

        if self._image_top_left is None:
            self._image_top_left = (min_x if content_w <= canvas_w else 0, min_y if content_h <= canvas_h else 0)
        else:
            ox, oy = self._image_top_left
            self._image_top_left = (max(min_x, min(max_x, ox)), max(min_y, min(max_y, oy)))

        x, y = self._image_top_left
        for image in images:
            scaled = image.resize(self._scaled_size(image), Image.Resampling.NEAREST)
            tk_image = ImageTk.PhotoImage(scaled)
            self._tk_images.append(tk_image)
            self._canvas.create_image(x, y, image=tk_image, anchor="nw")
            x += scaled.width + _GAP

    def _compute_fit_scale(self) -> None:
        images = self._visible_images()
        if not images:
            self._fit_scale_factor = 1.0
            return
        canvas_w = max(1, int(self._canvas.winfo_width()))
        canvas_h = max(1, int(self._canvas.winfo_height()))
        content_w, content_h = self._content_size(images, 1.0)
        if content_w == 0 or content_h == 0:
            self._fit_scale_factor = 1.0
            return
        self._fit_scale_factor = _clamp_scale(min(canvas_w / content_w, canvas_h / content_h))

    def _on_mouse_move(self, event: tk.Event) -> None:
        if self.on_cursor_move is None:
            return
        hit = self._canvas_to_image_coords(event.x, event.y)
        if hit is None:
            self.on_cursor_move(None, None, None)
            return
        image, img_x, img_y = hit
        self.on_cursor_move(img_x, img_y, image.getpixel((img_x, img_y)))

    def _on_mouse_leave(self, _event: tk.Event) -> None:
        if self.on_cursor_move:
            self.on_cursor_move(None, None, None)

    def _canvas_to_image_coords(self, cx: int, cy: int) -> Optional[Tuple[Image.Image, int, int]]:
        if self._image_top_left is None:
            return None
        ox, oy = self._image_top_left
        left = ox
        for image in self._visible_images():
            scaled_w, scaled_h = self._scaled_size(image)
            dx = cx - left
            dy = cy - oy
            if 0 <= dx < scaled_w and 0 <= dy < scaled_h:
                x = int(dx / self._scale_factor)
                y = int(dy / self._scale_factor)
                if 0 <= x < image.width and 0 <= y < image.height:
                    return image, x, y
                return None
            left += scaled_w + _GAP
        return None

    def _get_canvas_bg(self) -> str:
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"

    # ---- Mouse wheel zoom ----
    def _on_mouse_wheel(self, event: tk.Event) -> None:
        if self._source_image is None or event.delta == 0:
            return
        factor = 1.1 if event.delta > 0 else 1.0 / 1.1
        self._zoom_at_point(event.x, event.y, factor)

    def _on_mouse_wheel_linux(self, event: tk.Event) -> None:
        # On X11, Button-4 is up, Button-5 is down
        if self._source_image is None:
            return
        factor = 1.1 if getattr(event, "num", None) == 4 else 1.0 / 1.1
        self._zoom_at_point(event.x, event.y, factor)

    def _zoom_at_point(self, cx: int, cy: int, factor: float) -> None:
        # anchor zoom under cursor
        if self._image_top_left is None:
            return
        old_scale = self._scale_factor
        new_scale = _clamp_scale(old_scale * factor)
        if abs(new_scale - old_scale) < 1e-6:
            return

        ox, oy = self._image_top_left
        ix = (cx - ox) / old_scale
        iy = (cy - oy) / old_scale

        self._scale_factor = new_scale
        self._image_top_left = (int(round(cx - ix * new_scale)), int(round(cy - iy * new_scale)))
        self._render_image()

        if self.on_zoom_change:
            self.on_zoom_change(self.get_zoom_percent())

    # ---- Panning ----
    def _on_pan_start(self, event: tk.Event) -> None:
        if self._image_top_left is None:
            return
        self._canvas.focus_set()
        self._is_panning = True
        self._pan_start_canvas_xy = (event.x, event.y)
        self._pan_start_top_left = self._image_top_left

    def _on_pan_move(self, event: tk.Event) -> None:
        if not self._is_panning or self._pan_start_canvas_xy is None or self._pan_start_top_left is None:
            return
        sx, sy = self._pan_start_canvas_xy
        ox, oy = self._pan_start_top_left
        self._image_top_left = (ox + event.x - sx, oy + event.y - sy)
        self._render_image()

    def _on_pan_end(self, _event: tk.Event) -> None:
        self._is_panning = False
        self._pan_start_canvas_xy = None
        self._pan_start_top_left = None

    def _on_space_down(self, _event: tk.Event) -> None:
        if self._compare_mode == "off" and not self._hold_source_active:
            self._hold_source_active = True
            self._render_image()

    def _on_space_up(self, _event: tk.Event) -> None:
        if self._hold_source_active:
            self._hold_source_active = False
            self._render_image()
