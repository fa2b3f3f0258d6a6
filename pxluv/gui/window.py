"""A titled panel that shows a zoomable, scrollable image."""

from __future__ import annotations

from typing import Callable, Tuple

import pygame
from PIL import Image

from pxluv.gui.widgets import (
    BLACK,
    DEFAULT_PADDING,
    GRAY,
    HEADER_HEIGHT,
    FrameInput,
    Rect,
    Vec,
    clipped,
    draw_border_full,
    draw_text,
    int_rect,
    rect_contains,
    to_surface,
)

Shade = Callable[[Image.Image], Image.Image]

_BASE_ZOOM_SPEED = 40.0
_TITLE_SIZE = 18


class ViewWindow:
    """A panel with a header bar and an image view that can be zoomed and panned."""

    def __init__(self, title: str, bounds: Rect, shade: Shade) -> None:
        self.title = title
        x, y, w, h = (float(value) for value in bounds)
        self.bounds: Rect = (x, y, w, h)
        self.render_bounds: Rect = (x, y + HEADER_HEIGHT, w, h - HEADER_HEIGHT)
        rx, ry, rw, rh = self.render_bounds
        self.center: Vec = (rx + rw / 2, ry + rh / 2)
        self.zoom = 7.0
        self.shade = shade
        self.scroll_offset: Vec = (0.0, 0.0)

    def zoomed_vector(self, v: Vec) -> Vec:
        return (v[0] * self.zoom, v[1] * self.zoom)

    def zoomed_rect(self, rect: Rect) -> Rect:
        x, y = self.zoomed_vector((rect[0], rect[1]))
        w, h = self.zoomed_vector((rect[2], rect[3]))
        return (x, y, w, h)

    def keep_in_bounds(self, texture_size: Tuple[int, int]) -> None:
        """Clamp the scroll offset to half the zoomed texture width on both axes."""
        limit = texture_size[0] * self.zoom / 2
        sx, sy = self.scroll_offset
        self.scroll_offset = (min(max(sx, -limit), limit), min(max(sy, -limit), limit))

    def _handle_input(self, frame_input: FrameInput) -> None:
        if not rect_contains(self.render_bounds, frame_input.mouse_position):
            return
        zoom_amount = frame_input.wheel * frame_input.frame_time * self.zoom * _BASE_ZOOM_SPEED
        if abs(zoom_amount) > 1e-6:
            previous = self.zoom
            self.zoom += zoom_amount
            factor = self.zoom / previous
            self.scroll_offset = (self.scroll_offset[0] * factor, self.scroll_offset[1] * factor)
        self.zoom = max(self.zoom, 1.0)
        if frame_input.middle_down:
            dx, dy = frame_input.mouse_delta
            self.scroll_offset = (self.scroll_offset[0] + dx, self.scroll_offset[1] + dy)

    def update(self, surface: pygame.Surface, image: Image.Image, frame_input: FrameInput) -> None:
        """Apply zoom and pan input, then draw the panel and the shaded image."""
        self._handle_input(frame_input)
        self.keep_in_bounds(image.size)

        with clipped(surface, self.bounds):
            surface.fill(BLACK, int_rect(self.bounds))

            width, height = image.size
            vx, vy, vw, vh = self.zoomed_rect((0, 0, width, height))
            vx += self.center[0] - vw / 2 + self.scroll_offset[0]
            vy += self.center[1] - vh / 2 + self.scroll_offset[1]
            size = (int(vw), int(vh))
            if size[0] > 0 and size[1] > 0:
                shaded = to_surface(self.shade(image))
                surface.blit(pygame.transform.scale(shaded, size), (int(vx), int(vy)))

            x, y, w, _ = self.bounds
            header = (x, y, w, HEADER_HEIGHT)
            pygame.draw.rect(surface, GRAY, int_rect(header))
            draw_border_full(surface, header)
            draw_text(surface, self.title, (x + DEFAULT_PADDING, y + DEFAULT_PADDING), _TITLE_SIZE, BLACK)
            draw_border_full(surface, self.render_bounds)