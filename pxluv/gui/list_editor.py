"""A panel listing the quads, with controls to hide or delete the selected one."""

from __future__ import annotations

from typing import List

import pygame

from pxluv.geometry import Quad
from pxluv.gui.widgets import (
    BLACK,
    DEFAULT_PADDING,
    GRAY,
    FrameInput,
    Rect,
    button,
    checkbox,
    clipped,
    draw_border_full,
    draw_text,
    int_rect,
    rect_contains,
)
from pxluv.poly_list import EditParams, PolyList

LIST_WIDTH = 100
ITEM_HEIGHT = 28
ITEM_SPACING = 2
BUTTON_HEIGHT = 30

_TEXT_SIZE = 20
_LIST_BORDER = (0x33, 0x33, 0x33, 255)
_LIST_BASE = (0xAA, 0xAA, 0xAA, 255)
_ITEM_FOCUSED = ((0xAA, 0xAA, 0xAA, 255), (0xDD, 0xDD, 0xDD, 255))
_ITEM_SELECTED = ((0x22, 0xAA, 0xAA, 255), (0x22, 0xDD, 0xDD, 255))
_DISABLED = ((0x88, 0x88, 0x88, 255), (0xBB, 0xBB, 0xBB, 255), (0x77, 0x77, 0x77, 255))


class ListEditor:
    """Lists the quads as "Poly n" entries and edits the selected one."""

    def __init__(self, bounds: Rect) -> None:
        self.bounds: Rect = tuple(float(value) for value in bounds)
        self.scroll_index = 0

    def list_rect(self) -> Rect:
        x, y, _, h = self.bounds
        return (x + DEFAULT_PADDING, y + DEFAULT_PADDING, LIST_WIDTH, h - DEFAULT_PADDING * 2)

    def visible_count(self) -> int:
        """How many entries fit in the list at once."""
        height = self.list_rect()[3]
        return max(int((height - ITEM_SPACING) // (ITEM_HEIGHT + ITEM_SPACING)), 1)

    def item_rect(self, index: int) -> Rect:
        """Screen rectangle of entry ``index`` given the current scroll position."""
        lx, ly, lw, _ = self.list_rect()
        row = index - self.scroll_index
        return (
            lx + ITEM_SPACING,
            ly + ITEM_SPACING + row * (ITEM_HEIGHT + ITEM_SPACING),
            lw - ITEM_SPACING * 2,
            ITEM_HEIGHT,
        )

    def delete_rect(self) -> Rect:
        x, y, _, _ = self.bounds
        return (x + LIST_WIDTH + DEFAULT_PADDING, y + DEFAULT_PADDING, LIST_WIDTH, BUTTON_HEIGHT)

    def hide_rect(self) -> Rect:
        x, y, _, _ = self.bounds
        side = BUTTON_HEIGHT - DEFAULT_PADDING * 2
        return (
            x + LIST_WIDTH + DEFAULT_PADDING * 2,
            y + DEFAULT_PADDING * 2 + BUTTON_HEIGHT,
            side,
            side,
        )

    def _scroll(self, count: int, frame_input: FrameInput) -> None:
        if frame_input.wheel and rect_contains(self.list_rect(), frame_input.mouse_position):
            self.scroll_index -= int(frame_input.wheel)
        limit = max(count - self.visible_count(), 0)
        self.scroll_index = min(max(self.scroll_index, 0), limit)

    def _list_view(
        self, surface: pygame.Surface, count: int, selected: int, frame_input: FrameInput
    ) -> int:
        self._scroll(count, frame_input)
        area = int_rect(self.list_rect())
        pygame.draw.rect(surface, _LIST_BASE, area)
        pygame.draw.rect(surface, _LIST_BORDER, area, 1)

        result = selected
        last = min(count, self.scroll_index + self.visible_count())
        for index in range(self.scroll_index, last):
            rect = self.item_rect(index)
            hovered = rect_contains(rect, frame_input.mouse_position)
            if hovered and frame_input.left_released:
                result = -1 if result == index else index
            if index == result:
                style = _ITEM_SELECTED
            elif hovered:
                style = _ITEM_FOCUSED
            else:
                style = None
            if style is not None:
                border, base = style
                pygame.draw.rect(surface, base, int_rect(rect))
                pygame.draw.rect(surface, border, int_rect(rect), 1)
            text_y = rect[1] + (ITEM_HEIGHT - _TEXT_SIZE * 0.7) / 2
            draw_text(surface, f"Poly {index}", (rect[0] + 4, text_y), _TEXT_SIZE, BLACK)
        return result

    def _disabled_button(self, surface: pygame.Surface, rect: Rect, label: str) -> None:
        border, base, text = _DISABLED
        area = int_rect(rect)
        pygame.draw.rect(surface, base, area)
        pygame.draw.rect(surface, border, area, 1)
        draw_text(surface, label, (rect[0] + 4, rect[1] + (rect[3] - _TEXT_SIZE * 0.7) / 2), _TEXT_SIZE, text)

    def update(
        self,
        surface: pygame.Surface,
        poly_list: PolyList,
        edit_params: EditParams,
        frame_input: FrameInput,
    ) -> None:
        """Draw the panel and apply this frame's selection, hide and delete actions."""
        with clipped(surface, self.bounds):
            surface.fill(GRAY, int_rect(self.bounds))
            draw_border_full(surface, self.bounds)

            quads: List[Quad] = list(poly_list)
            selected = -1
            if edit_params.current_quad is not None:
                try:
                    selected = poly_list.index_of(edit_params.current_quad)
                except ValueError:
                    selected = -1

            chosen = self._list_view(surface, len(quads), selected, frame_input)
            if chosen != selected:
                edit_params.current_coord = None
                edit_params.current_quad = quads[chosen] if chosen >= 0 else None
            selected = chosen

            quad = edit_params.current_quad
            if selected < 0 or quad is None:
                return

            quad.hidden = checkbox(surface, self.hide_rect(), "Hide", quad.hidden, frame_input)

            if quad.hidden:
                self._disabled_button(surface, self.delete_rect(), "Delete")
            elif button(surface, self.delete_rect(), "Delete", frame_input):
                edit_params.current_coord = None
                poly_list.remove_index(selected)
                selected -= 1
                edit_params.current_quad = quads[selected] if selected >= 0 else None