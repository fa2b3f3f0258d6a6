"""The bar across the top of the main window holding the export button."""

from __future__ import annotations

from typing import Callable, Optional

import pygame

from pxluv.gui.widgets import (
    DEFAULT_PADDING,
    GRAY,
    HEADER_HEIGHT,
    FrameInput,
    ask_save_path,
    button,
    clipped,
    draw_border_full,
    int_rect,
)

BAR_WIDTH = 1200
_BUTTON_WIDTH = 100


def top_bar(
    surface: pygame.Surface, export: Callable[[str], None], frame_input: FrameInput
) -> Optional[str]:
    """Draw the bar; on an Export click ask for a path and pass it to ``export``.

    Returns the chosen path, or None when nothing was exported.
    """
    bounds = (0, 0, BAR_WIDTH, HEADER_HEIGHT)
    with clipped(surface, bounds):
        surface.fill(GRAY, int_rect(bounds))
        draw_border_full(surface, bounds)
        rect = (
            DEFAULT_PADDING,
            DEFAULT_PADDING,
            _BUTTON_WIDTH,
            HEADER_HEIGHT - DEFAULT_PADDING * 2,
        )
        if button(surface, rect, "Export", frame_input):
            path = ask_save_path()
            if path:
                export(path)
                return path
    return None