"""An image panel on which quads are selected, moved and drawn."""

from __future__ import annotations

import enum
from typing import Optional, Sequence, Tuple

import pygame
from PIL import Image

from pxluv.geometry import Quad, TexCoord, point_in_triangle
from pxluv.gui.widgets import (
    DEFAULT_PADDING,
    HEADER_HEIGHT,
    Color,
    FrameInput,
    Rect,
    Vec,
    ask_open_image,
    button,
    clipped,
    int_rect,
    rect_contains,
)
from pxluv.gui.window import Shade, ViewWindow
from pxluv.poly_list import EditParams, PolyList

COLOR_NORMAL: Color = (0, 240, 0, 255)
COLOR_NORMAL_BG: Color = (100, 240, 100, 100)
COLOR_SELECTED: Color = (0, 0, 240, 255)
COLOR_SELECTED_BG: Color = (100, 100, 240, 100)
COLOR_CURRENT_COORD: Color = (255, 255, 0, 255)

_MAX_ACCEPT_DISTANCE = 0.05
_MIN_NEW_QUAD_AREA = 0.005


class EditMode(enum.Enum):
    """Which pair of a coordinate the window edits."""

    XY = "xy"
    UV = "uv"


class ColorLayer(enum.Enum):
    FG = "fg"
    BG = "bg"


def item_color(layer: ColorLayer, selected: bool) -> Color:
    """Outline or fill colour of a quad, depending on whether it is selected."""
    if layer is ColorLayer.FG:
        return COLOR_SELECTED if selected else COLOR_NORMAL
    return COLOR_SELECTED_BG if selected else COLOR_NORMAL_BG


def _blend_overlay(surface: pygame.Surface, box: pygame.Rect, draw) -> None:
    box = box.clip(surface.get_clip())
    if box.width <= 0 or box.height <= 0:
        return
    overlay = pygame.Surface(box.size, pygame.SRCALPHA)
    draw(overlay, box.topleft)
    surface.blit(overlay, box.topleft)


def _fill_polygon(surface: pygame.Surface, points: Sequence[Vec], color: Color) -> None:
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    left, top = int(min(xs)), int(min(ys))
    box = pygame.Rect(left, top, int(max(xs)) - left + 1, int(max(ys)) - top + 1)

    def draw(overlay, origin):
        shifted = [(x - origin[0], y - origin[1]) for x, y in points]
        pygame.draw.polygon(overlay, color, shifted)

    _blend_overlay(surface, box, draw)


def _fill_rect(surface: pygame.Surface, rect: Rect, color: Color) -> None:
    box = int_rect(rect)

    def draw(overlay, origin):
        overlay.fill(color, box.move(-origin[0], -origin[1]))

    _blend_overlay(surface, box, draw)


class EditWindow:
    """An image view that edits either the model (xy) or texture (uv) side of quads."""

    def __init__(self, title: str, bounds: Rect, shade: Shade, mode: EditMode) -> None:
        self.base = ViewWindow(title, bounds, shade)
        self.mode = mode
        self.add_poly_mode = False
        self.poly_begin: Vec = (0.0, 0.0)

    def typed_coordinates(self, coord: TexCoord) -> Vec:
        return coord.xy() if self.mode is EditMode.XY else coord.uv()

    def set_typed_coordinates(self, coord: TexCoord, v: Vec) -> None:
        if self.mode is EditMode.XY:
            coord.x, coord.y = v
        else:
            coord.u, coord.v = v

    def to_screen(self, v: Vec, texture_size: Tuple[int, int]) -> Vec:
        """Map a normalised coordinate to a screen position."""
        zx, zy = self.base.zoomed_vector((v[0] - 0.5, v[1] - 0.5))
        cx, cy = self.base.center
        sx, sy = self.base.scroll_offset
        return (zx * texture_size[0] + cx + sx, zy * texture_size[1] + cy + sy)

    def to_coord(self, v: Vec, texture_size: Tuple[int, int]) -> Vec:
        """Map a screen position back to a normalised coordinate."""
        cx, cy = self.base.center
        sx, sy = self.base.scroll_offset
        zoom = self.base.zoom
        return (
            (v[0] - cx - sx) / (texture_size[0] * zoom) + 0.5,
            (v[1] - cy - sy) / (texture_size[1] * zoom) + 0.5,
        )

    def _open_button_rect(self) -> Rect:
        x, y, w, _ = self.base.bounds
        side = HEADER_HEIGHT - DEFAULT_PADDING * 2
        return (x + w - HEADER_HEIGHT + DEFAULT_PADDING, y + DEFAULT_PADDING, side, side)

    def update(
        self,
        surface: pygame.Surface,
        image: Image.Image,
        poly_list: PolyList,
        edit_params: EditParams,
        frame_input: FrameInput,
    ) -> Optional[str]:
        """Draw and handle one frame; return the path of an image chosen to load, if any."""
        base = self.base
        base.update(surface, image, frame_input)
        texture_size = image.size
        mouse_coord = self.to_coord(frame_input.mouse_position, texture_size)

        with clipped(surface, base.bounds):
            mouse_in_bounds = rect_contains(base.render_bounds, frame_input.mouse_position)
            if mouse_in_bounds and frame_input.left_pressed:
                edit_params.clear()

            if button(surface, self._open_button_rect(), "...", frame_input):
                path = ask_open_image()
                if path:
                    return path

            for quad in poly_list:
                if not quad.hidden:
                    self._update_quad(
                        surface, quad, edit_params, frame_input, texture_size, mouse_in_bounds, mouse_coord
                    )

            if mouse_in_bounds and edit_params.current_quad is None:
                self._update_new_quad(surface, poly_list, frame_input, texture_size, mouse_coord)
        return None

    def _update_quad(
        self,
        surface: pygame.Surface,
        quad: Quad,
        edit_params: EditParams,
        frame_input: FrameInput,
        texture_size: Tuple[int, int],
        mouse_in_bounds: bool,
        mouse_coord: Vec,
    ) -> None:
        selected = edit_params.current_quad is quad
        fg = item_color(ColorLayer.FG, selected)
        bg = item_color(ColorLayer.BG, selected)

        for tri in quad.to_tris():
            points = [self.to_screen(self.typed_coordinates(c), texture_size) for c in (tri.c0, tri.c1, tri.c2)]
            if (
                frame_input.left_pressed
                and not self.add_poly_mode
                and point_in_triangle(frame_input.mouse_position, *points)
            ):
                edit_params.current_quad = quad
            _fill_polygon(surface, points, bg)
            pygame.draw.polygon(surface, fg, points, 1)

        coords = quad.coords()
        for coord in coords:
            px, py = self.to_screen(self.typed_coordinates(coord), texture_size)
            color = COLOR_CURRENT_COORD if edit_params.current_coord is coord else fg
            pygame.draw.rect(surface, color, int_rect((px - 3, py - 3, 6, 6)))

        if not mouse_in_bounds or edit_params.current_quad is not quad:
            return

        zoom = self.base.zoom
        dx, dy = frame_input.mouse_delta
        move = (dx / (texture_size[0] * zoom), dy / (texture_size[1] * zoom))

        max_accept = _MAX_ACCEPT_DISTANCE / zoom
        near = []
        for coord in coords:
            cx, cy = self.typed_coordinates(coord)
            distance = (cx - mouse_coord[0]) ** 2 + (cy - mouse_coord[1]) ** 2
            if distance < max_accept:
                near.append((distance, coord))
        closest = min(near, key=lambda item: item[0])[1] if near else None

        if frame_input.left_pressed:
            edit_params.current_coord = closest

        if frame_input.left_down and move != (0.0, 0.0):
            targets = (edit_params.current_coord,) if edit_params.current_coord is not None else coords
            for coord in targets:
                x, y = self.typed_coordinates(coord)
                self.set_typed_coordinates(coord, (x + move[0], y + move[1]))

    def _update_new_quad(
        self,
        surface: pygame.Surface,
        poly_list: PolyList,
        frame_input: FrameInput,
        texture_size: Tuple[int, int],
        mouse_coord: Vec,
    ) -> None:
        if not self.add_poly_mode:
            if frame_input.left_pressed:
                self.add_poly_mode = True
                self.poly_begin = mouse_coord
            return

        (x0, y0), (x1, y1) = self.poly_begin, mouse_coord
        min_x, max_x = min(x0, x1), max(x0, x1)
        min_y, max_y = min(y0, y1), max(y0, y1)

        if not frame_input.left_down:
            self.add_poly_mode = False
            if (max_x - min_x) * (max_y - min_y) > _MIN_NEW_QUAD_AREA / self.base.zoom:
                poly_list.add(
                    Quad.from_points((min_x, min_y), (max_x, min_y), (max_x, max_y), (min_x, max_y))
                )

        left, top = self.to_screen((min_x, min_y), texture_size)
        right, bottom = self.to_screen((max_x, max_y), texture_size)
        _fill_rect(surface, (left, top, right - left, bottom - top), COLOR_SELECTED_BG)