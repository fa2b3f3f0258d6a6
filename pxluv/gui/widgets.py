"""Shared layout constants, drawing helpers, immediate-mode widgets and file dialogs."""

from __future__ import annotations

import functools
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import pygame
from PIL import Image

Rect = Tuple[float, float, float, float]
Vec = Tuple[float, float]
Color = Tuple[int, int, int, int]

HEADER_HEIGHT = 30
DEFAULT_PADDING = 6

BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)
GRAY: Color = (130, 130, 130, 255)
LIGHTGRAY: Color = (200, 200, 200, 255)
DARKGRAY: Color = (80, 80, 80, 255)

_TEXT_SIZE = 10
_CHECKBOX_TEXT_PADDING = 4

# (border, base, text) for each interaction state.
_STYLE = {
    "normal": ((0x33, 0x33, 0x33, 255), (0xAA, 0xAA, 0xAA, 255), (0, 0, 0, 255)),
    "focused": ((0xAA, 0xAA, 0xAA, 255), (0xDD, 0xDD, 0xDD, 255), (0, 0, 0, 255)),
    "pressed": ((0x22, 0xAA, 0xAA, 255), (0x22, 0xDD, 0xDD, 255), (0, 0, 0, 255)),
}


@dataclass(frozen=True)
class FrameInput:
    """Mouse state for a single frame."""

    mouse_position: Vec = (0.0, 0.0)
    mouse_delta: Vec = (0.0, 0.0)
    wheel: float = 0.0
    left_pressed: bool = False
    left_released: bool = False
    left_down: bool = False
    middle_down: bool = False
    frame_time: float = 0.0

    @classmethod
    def from_pygame(cls, previous_position: Vec, frame_time: float) -> "FrameInput":
        """Collect this frame's mouse events and state from pygame."""
        left_pressed = left_released = False
        wheel = 0.0
        events = pygame.event.get(
            (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEWHEEL)
        )
        for event in events:
            if event.type == pygame.MOUSEWHEEL:
                wheel += event.y
            elif event.button == 1:
                if event.type == pygame.MOUSEBUTTONDOWN:
                    left_pressed = True
                else:
                    left_released = True
        x, y = pygame.mouse.get_pos()
        left, middle, _ = pygame.mouse.get_pressed(3)
        return cls(
            mouse_position=(float(x), float(y)),
            mouse_delta=(x - previous_position[0], y - previous_position[1]),
            wheel=wheel,
            left_pressed=left_pressed,
            left_released=left_released,
            left_down=bool(left),
            middle_down=bool(middle),
            frame_time=frame_time,
        )


def rect_contains(rect: Rect, point: Vec) -> bool:
    """True if ``point`` lies in ``rect``, left/top edges included, right/bottom excluded."""
    x, y, w, h = rect
    return x <= point[0] < x + w and y <= point[1] < y + h


def int_rect(rect: Rect) -> pygame.Rect:
    x, y, w, h = rect
    return pygame.Rect(int(x), int(y), int(w), int(h))


@contextmanager
def clipped(surface: pygame.Surface, rect: Rect) -> Iterator[pygame.Surface]:
    """Restrict drawing on ``surface`` to ``rect`` for the duration of the block."""
    previous = surface.get_clip()
    surface.set_clip(int_rect(rect))
    try:
        yield surface
    finally:
        surface.set_clip(previous)


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def draw_text(surface: pygame.Surface, text: str, position: Vec, size: int, color: Color) -> None:
    rendered = _font(size).render(text, True, color[:3])
    surface.blit(rendered, (int(position[0]), int(position[1])))


def to_surface(image: Image.Image) -> pygame.Surface:
    """Convert a PIL image into an RGBA pygame surface."""
    rgba = image.convert("RGBA")
    return pygame.image.frombuffer(rgba.tobytes(), rgba.size, "RGBA")


def draw_border(surface: pygame.Surface, bounds: Rect, inset: int, length: int, color: Color) -> None:
    """Outline a rectangle inset from ``bounds`` and shortened by ``length``."""
    x, y, w, h = bounds
    pygame.draw.rect(surface, color, int_rect((x + inset, y + inset, w - length, h - length)), 1)


def draw_border_full(surface: pygame.Surface, bounds: Rect) -> None:
    """The bevelled frame drawn around every panel."""
    draw_border(surface, bounds, 1, 5, LIGHTGRAY)
    draw_border(surface, bounds, 2, 5, GRAY)
    draw_border(surface, bounds, 3, 5, GRAY)
    draw_border(surface, bounds, 4, 5, DARKGRAY)


def _state(rect: Rect, frame_input: FrameInput) -> Tuple[bool, str]:
    hovered = rect_contains(rect, frame_input.mouse_position)
    if hovered and frame_input.left_down:
        return hovered, "pressed"
    return hovered, "focused" if hovered else "normal"


def button(surface: pygame.Surface, rect: Rect, label: str, frame_input: FrameInput) -> bool:
    """Draw a push button; return True when it is clicked this frame."""
    hovered, state = _state(rect, frame_input)
    border, base, text = _STYLE[state]
    area = int_rect(rect)
    pygame.draw.rect(surface, base, area)
    pygame.draw.rect(surface, border, area, 1)
    if label:
        rendered = _font(_TEXT_SIZE * 2).render(label, True, text[:3])
        surface.blit(rendered, rendered.get_rect(center=area.center))
    return hovered and frame_input.left_released


def checkbox(
    surface: pygame.Surface, rect: Rect, label: str, checked: bool, frame_input: FrameInput
) -> bool:
    """Draw a check box with a label to its right; return the possibly toggled state."""
    hovered, state = _state(rect, frame_input)
    if hovered and frame_input.left_released:
        checked = not checked
    border, _, text = _STYLE[state]
    area = int_rect(rect)
    pygame.draw.rect(surface, border, area, 1)
    if checked:
        pygame.draw.rect(surface, text, area.inflate(-4, -4))
    if label:
        rendered = _font(_TEXT_SIZE * 2).render(label, True, text[:3])
        position = rendered.get_rect(midleft=(area.right + _CHECKBOX_TEXT_PADDING, area.centery))
        surface.blit(rendered, position)
    return checked


@contextmanager
def _hidden_root():
    import tkinter

    root = tkinter.Tk()
    root.withdraw()
    try:
        yield root
    finally:
        root.destroy()


def ask_open_image() -> Optional[str]:
    """Ask the user for an image to load; None if the dialog is cancelled."""
    from tkinter import filedialog

    with _hidden_root() as root:
        path = filedialog.askopenfilename(
            parent=root,
            title="Load image",
            initialdir="../",
            filetypes=[("Select an image", "*.png *.bmp *.jpeg")],
        )
    return path or None


def ask_save_path() -> Optional[str]:
    """Ask the user where to export the image; None if the dialog is cancelled."""
    from tkinter import filedialog

    with _hidden_root() as root:
        path = filedialog.asksaveasfilename(
            parent=root,
            title="Export file",
            initialdir="..",
            initialfile="uvd.png",
            filetypes=[("image", "*.png")],
        )
    return path or None