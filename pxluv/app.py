"""The main window: model, texture and result views, the quad list and the top bar."""

from __future__ import annotations

import argparse
from typing import Optional, Tuple

import pygame
from PIL import Image

from pxluv.assets import (
    default_model_image,
    default_texture_image,
    log,
    shade_textured,
    shade_uv_textured,
)
from pxluv.file_io import Exporter, ExportError
from pxluv.finalizer import finalize
from pxluv.gui.edit_window import EditMode, EditWindow
from pxluv.gui.list_editor import ListEditor
from pxluv.gui.top_bar import top_bar
from pxluv.gui.widgets import HEADER_HEIGHT, WHITE, FrameInput
from pxluv.gui.window import ViewWindow
from pxluv.poly_list import EditParams, PolyList
from pxluv.geometry import Quad

WINDOW_SIZE = (1200, 900)
TITLE = "PXLUV"
_FPS = 60


def _load_image(path: str) -> Optional[Image.Image]:
    try:
        with Image.open(path) as image:
            return image.convert("RGBA")
    except (OSError, ValueError) as exc:
        log("Could not load image '%s': %s", path, exc)
        return None


class App:
    """All editor state and the per-frame layout of the four panels."""

    def __init__(self) -> None:
        log("Initializing.")
        log("Loading default textures.")
        self.model_image: Image.Image = default_model_image()
        self.texture_image: Image.Image = default_texture_image()

        self.poly_list = PolyList()
        self.poly_list.add(Quad.from_points((0, 0), (0.5, 0), (0.5, 0.5), (0, 0.5)))
        self.poly_list.add(Quad.from_points((0.0, 0.5), (0.5, 0.5), (0.5, 0.7), (0.0, 0.7)))
        self.edit_params = EditParams()
        self.exporter = Exporter()

        x, y = 0.0, float(HEADER_HEIGHT)
        width, height = float(WINDOW_SIZE[0]), float(WINDOW_SIZE[1] - HEADER_HEIGHT)
        half_w, half_h = width / 2, height / 2

        self.model_window = EditWindow("Model", (x, y, half_w, half_h), shade_textured, EditMode.XY)
        self.texture_window = EditWindow(
            "Texture", (x + half_w, y, half_w, half_h), shade_textured, EditMode.UV
        )
        self.result_window = ViewWindow(
            "Result",
            (x, y + half_h, half_w, half_h),
            lambda image: shade_uv_textured(image, self.texture_image),
        )
        self.list_editor = ListEditor((x + half_w, y + half_h, half_w, half_h))

        self._baked: Optional[Image.Image] = None
        self._baked_key: Optional[Tuple] = None

    def _bake(self) -> Image.Image:
        coords = tuple(
            (coord.x, coord.y, coord.u, coord.v) for quad in self.poly_list for coord in quad.coords()
        )
        if (
            self._baked is None
            or self._baked_key is None
            or self._baked_key[0] is not self.model_image
            or self._baked_key[1] != coords
        ):
            self._baked = finalize(self.model_image, self.poly_list)
            self._baked_key = (self.model_image, coords)
        return self._baked

    def _export(self, path: str) -> None:
        try:
            self.exporter.export(path)
        except ExportError as exc:
            log("%s", exc)

    def frame(self, surface: pygame.Surface, frame_input: FrameInput) -> None:
        """Handle input and draw one frame onto ``surface``."""
        surface.fill(WHITE)

        path = self.model_window.update(
            surface, self.model_image, self.poly_list, self.edit_params, frame_input
        )
        if path:
            loaded = _load_image(path)
            if loaded is not None:
                self.model_image = loaded

        path = self.texture_window.update(
            surface, self.texture_image, self.poly_list, self.edit_params, frame_input
        )
        if path:
            loaded = _load_image(path)
            if loaded is not None:
                self.texture_image = loaded

        baked = self._bake()
        self.exporter.texture = baked

        self.result_window.update(surface, baked, frame_input)
        self.list_editor.update(surface, self.poly_list, self.edit_params, frame_input)
        top_bar(surface, self._export, frame_input)


def main(argv=None) -> int:
    """Open the editor window and run until it is closed."""
    argparse.ArgumentParser(prog="pxluv", description="Edit UV mappings of pixel images.").parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        app = App()
        clock = pygame.time.Clock()
        previous = tuple(float(v) for v in pygame.mouse.get_pos())
        frame_time = 0.0
        while not pygame.event.get(pygame.QUIT):
            frame_input = FrameInput.from_pygame(previous, frame_time)
            pygame.event.clear()
            previous = frame_input.mouse_position
            app.frame(screen, frame_input)
            pygame.display.flip()
            frame_time = clock.tick(_FPS) / 1000.0
    finally:
        pygame.quit()
    return 0