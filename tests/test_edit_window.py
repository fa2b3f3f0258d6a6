import pygame
import pytest
from PIL import Image

from pxluv.assets import shade_textured
from pxluv.geometry import Quad, TexCoord
from pxluv.gui.edit_window import (
    COLOR_NORMAL,
    COLOR_NORMAL_BG,
    COLOR_SELECTED,
    COLOR_SELECTED_BG,
    ColorLayer,
    EditMode,
    EditWindow,
    item_color,
)
from pxluv.gui.widgets import FrameInput
from pxluv.poly_list import EditParams, PolyList

BOUNDS = (0, 0, 600, 435)
SIZE = (16, 16)


def _setup(mode=EditMode.XY):
    window = EditWindow("Model", BOUNDS, shade_textured, mode)
    surface = pygame.Surface((600, 435))
    image = Image.new("RGBA", SIZE, (255, 255, 255, 255))
    return window, surface, image


def _quad():
    return Quad.from_points((0.3, 0.3), (0.7, 0.3), (0.7, 0.7), (0.3, 0.7))


def test_item_color():
    assert item_color(ColorLayer.FG, False) == COLOR_NORMAL
    assert item_color(ColorLayer.FG, True) == COLOR_SELECTED
    assert item_color(ColorLayer.BG, False) == COLOR_NORMAL_BG
    assert item_color(ColorLayer.BG, True) == COLOR_SELECTED_BG


def test_initial_state():
    window, _, _ = _setup()
    assert window.add_poly_mode is False
    assert window.poly_begin == (0.0, 0.0)
    assert window.base.zoom == 7.0


def test_typed_coordinates_by_mode():
    coord = TexCoord(1.0, 2.0, 3.0, 4.0)
    xy, _, _ = _setup(EditMode.XY)
    uv, _, _ = _setup(EditMode.UV)
    assert xy.typed_coordinates(coord) == (1.0, 2.0)
    assert uv.typed_coordinates(coord) == (3.0, 4.0)


def test_set_typed_coordinates_touches_only_its_pair():
    coord = TexCoord(1.0, 2.0, 3.0, 4.0)
    uv, _, _ = _setup(EditMode.UV)
    uv.set_typed_coordinates(coord, (5.0, 6.0))
    assert coord.uv() == (5.0, 6.0)
    assert coord.xy() == (1.0, 2.0)


@pytest.mark.parametrize("point", [(0.0, 0.0), (0.25, 0.8), (1.0, 1.0), (-0.3, 2.0)])
def test_screen_round_trip(point):
    window, _, _ = _setup()
    window.base.scroll_offset = (4.0, -3.0)
    window.base.zoom = 2.5
    back = window.to_coord(window.to_screen(point, SIZE), SIZE)
    assert back == pytest.approx(point)


def test_middle_of_texture_maps_to_center():
    window, _, _ = _setup()
    cx, cy = window.base.center
    assert window.to_screen((0.5, 0.5), SIZE) == pytest.approx((cx, cy))


def test_click_inside_quad_selects_it():
    window, surface, image = _setup()
    polys, params = PolyList(), EditParams()
    quad = _quad()
    polys.add(quad)
    mouse = window.to_screen((0.4, 0.4), SIZE)
    result = window.update(surface, image, polys, params, FrameInput(mouse_position=mouse, left_pressed=True, left_down=True))
    assert result is None
    assert params.current_quad is quad
    assert window.add_poly_mode is False


def test_click_near_corner_selects_coordinate():
    window, surface, image = _setup()
    polys, params = PolyList(), EditParams()
    quad = _quad()
    polys.add(quad)
    mouse = window.to_screen((0.68, 0.31), SIZE)
    window.update(surface, image, polys, params, FrameInput(mouse_position=mouse, left_pressed=True, left_down=True))
    assert params.current_quad is quad
    assert params.current_coord is quad.c1


def test_hidden_quad_is_not_selectable():
    window, surface, image = _setup()
    polys, params = PolyList(), EditParams()
    quad = _quad()
    quad.hidden = True
    polys.add(quad)
    mouse = window.to_screen((0.4, 0.4), SIZE)
    window.update(surface, image, polys, params, FrameInput(mouse_position=mouse, left_pressed=True, left_down=True))
    assert params.current_quad is None
    assert window.add_poly_mode is True


def test_drag_on_empty_space_adds_quad():
    window, surface, image = _setup()
    polys, params = PolyList(), EditParams()
    start = window.to_screen((0.1, 0.1), SIZE)
    end = window.to_screen((0.9, 0.6), SIZE)
    window.update(surface, image, polys, params, FrameInput(mouse_position=start, left_pressed=True, left_down=True))
    assert window.add_poly_mode is True
    assert len(polys) == 0
    window.update(surface, image, polys, params, FrameInput(mouse_position=end))
    assert window.add_poly_mode is False
    assert len(polys) == 1
    added = polys[0]
    assert added.c0.xy() == pytest.approx((0.1, 0.1))
    assert added.c2.xy() == pytest.approx((0.9, 0.6))
    assert added.c1.uv() == pytest.approx((0.9, 0.1))
    assert added.hidden is False


def test_tiny_drag_adds_nothing():
    window, surface, image = _setup()
    polys, params = PolyList(), EditParams()
    start = window.to_screen((0.5, 0.5), SIZE)
    end = window.to_screen((0.501, 0.501), SIZE)
    window.update(surface, image, polys, params, FrameInput(mouse_position=start, left_pressed=True, left_down=True))
    window.update(surface, image, polys, params, FrameInput(mouse_position=end))
    assert len(polys) == 0
    assert window.add_poly_mode is False


def test_dragging_selected_quad_moves_all_uv_coords():
    window, surface, image = _setup(EditMode.UV)
    polys, params = PolyList(), EditParams()
    quad = _quad()
    polys.add(quad)
    params.current_quad = quad
    before_uv = [c.uv() for c in quad.coords()]
    before_xy = [c.xy() for c in quad.coords()]
    mouse = window.to_screen((0.5, 0.5), SIZE)
    window.update(surface, image, polys, params, FrameInput(mouse_position=mouse, mouse_delta=(10.0, 0.0), left_down=True))
    shifts = [(a[0] - b[0], a[1] - b[1]) for a, b in zip((c.uv() for c in quad.coords()), before_uv)]
    assert all(dx > 0 for dx, _ in shifts)
    assert all(dx == pytest.approx(shifts[0][0]) for dx, _ in shifts)
    assert all(dy == pytest.approx(0.0) for _, dy in shifts)
    assert [c.xy() for c in quad.coords()] == before_xy


def test_dragging_current_coord_moves_only_it():
    window, surface, image = _setup()
    polys, params = PolyList(), EditParams()
    quad = _quad()
    polys.add(quad)
    params.current_quad = quad
    params.current_coord = quad.c2
    before = [c.xy() for c in quad.coords()]
    mouse = window.to_screen((0.5, 0.5), SIZE)
    window.update(surface, image, polys, params, FrameInput(mouse_position=mouse, mouse_delta=(0.0, 5.0), left_down=True))
    after = [c.xy() for c in quad.coords()]
    assert after[0] == before[0] and after[1] == before[1] and after[3] == before[3]
    assert after[2][0] == before[2][0]
    assert after[2][1] > before[2][1]