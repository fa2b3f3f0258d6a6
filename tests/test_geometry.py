import pytest

from pxluv.geometry import Quad, TexCoord, Triangle, point_in_triangle


def _triangle(a, b, c):
    return Triangle(TexCoord.from_point(a), TexCoord.from_point(b), TexCoord.from_point(c))


def test_from_point_sets_position_and_texture_position():
    coord = TexCoord.from_point((0.25, 0.75))
    assert coord.xy() == (0.25, 0.75)
    assert coord.uv() == coord.xy()


def test_quad_from_points_keeps_order_and_is_visible():
    points = [(0, 0), (0.5, 0), (0.5, 0.5), (0, 0.5)]
    quad = Quad.from_points(*points)
    assert [c.xy() for c in quad.coords()] == points
    assert quad.hidden is False


def test_to_tris_shares_corners_along_diagonal():
    quad = Quad.from_points((0, 0), (1, 0), (1, 1), (0, 1))
    first, second = quad.to_tris()
    assert (first.c0, first.c1, first.c2) == (quad.c0, quad.c3, quad.c1)
    assert (second.c0, second.c1, second.c2) == (quad.c1, quad.c3, quad.c2)
    assert first.c1 is second.c1


def test_barycentric_of_vertices_is_unit_weight():
    tri = _triangle((0, 0), (2, 0), (0, 3))
    assert tri.barycentric((0, 0)) == pytest.approx((1, 0, 0))
    assert tri.barycentric((2, 0)) == pytest.approx((0, 1, 0))
    assert tri.barycentric((0, 3)) == pytest.approx((0, 0, 1))


def test_barycentric_weights_sum_to_one():
    tri = _triangle((0.1, 0.2), (0.9, 0.3), (0.4, 0.8))
    assert sum(tri.barycentric((0.45, 0.4))) == pytest.approx(1.0)


def test_degenerate_triangle_gives_negative_weights():
    tri = _triangle((0, 0), (1, 1), (2, 2))
    assert tri.barycentric((0.5, 0.5)) == (-1.0, -1.0, -1.0)


def test_barycentric_round_trip_when_uv_equals_xy():
    tri = _triangle((0.1, 0.2), (0.9, 0.3), (0.4, 0.8))
    point = (0.45, 0.4)
    assert tri.from_barycentric(tri.barycentric(point)) == pytest.approx(point)


def test_from_barycentric_uses_texture_positions():
    tri = _triangle((0, 0), (1, 0), (0, 1))
    tri.c0.u, tri.c0.v = 0.3, 0.6
    assert tri.from_barycentric((1.0, 0.0, 0.0)) == pytest.approx((0.3, 0.6))


def test_point_in_triangle_is_strict():
    a, b, c = (0, 0), (1, 0), (0, 1)
    assert point_in_triangle((0.2, 0.2), a, b, c)
    assert not point_in_triangle((0, 0), a, b, c)
    assert not point_in_triangle((0.5, 0.5), a, b, c)
    assert not point_in_triangle((1, 1), a, b, c)


def test_point_in_degenerate_triangle_is_false():
    assert not point_in_triangle((0.5, 0.5), (0, 0), (1, 1), (2, 2))


def test_contains_uses_model_positions_not_uv():
    tri = _triangle((0, 0), (1, 0), (0, 1))
    for coord in (tri.c0, tri.c1, tri.c2):
        coord.u, coord.v = coord.u + 5, coord.v + 5
    assert tri.contains((0.2, 0.2))
    assert not tri.contains((5.2, 5.2))