"""Texture coordinates, triangles and quads used for UV mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Point = Tuple[float, float]
Barycentric = Tuple[float, float, float]

DEGENERATE: Barycentric = (-1.0, -1.0, -1.0)


def point_in_triangle(p: Point, a: Point, b: Point, c: Point) -> bool:
    """Return True if ``p`` lies strictly inside the triangle ``a``, ``b``, ``c``."""
    denom = (b[1] - c[1]) * (a[0] - c[0]) + (c[0] - b[0]) * (a[1] - c[1])
    if denom == 0:
        return False
    alpha = ((b[1] - c[1]) * (p[0] - c[0]) + (c[0] - b[0]) * (p[1] - c[1])) / denom
    beta = ((c[1] - a[1]) * (p[0] - c[0]) + (a[0] - c[0]) * (p[1] - c[1])) / denom
    gamma = 1.0 - alpha - beta
    return alpha > 0 and beta > 0 and gamma > 0


@dataclass(eq=False)
class TexCoord:
    """A vertex with a model position (x, y) and a texture position (u, v)."""

    x: float
    y: float
    u: float
    v: float

    @classmethod
    def from_point(cls, point: Point) -> "TexCoord":
        """Create a coordinate whose position and texture position are both ``point``."""
        x, y = point
        return cls(x, y, x, y)

    def xy(self) -> Point:
        return (self.x, self.y)

    def uv(self) -> Point:
        return (self.u, self.v)


@dataclass
class Triangle:
    """Three texture coordinates forming a triangle in model space."""

    c0: TexCoord
    c1: TexCoord
    c2: TexCoord

    def barycentric(self, p: Point) -> Barycentric:
        """Barycentric weights of ``p`` relative to the model positions.

        A degenerate triangle yields ``(-1, -1, -1)``.
        """
        x0, y0 = self.c0.xy()
        x1, y1 = self.c1.xy()
        x2, y2 = self.c2.xy()

        v0 = (x1 - x0, y1 - y0)
        v1 = (x2 - x0, y2 - y0)
        v2 = (p[0] - x0, p[1] - y0)

        d00 = v0[0] * v0[0] + v0[1] * v0[1]
        d01 = v0[0] * v1[0] + v0[1] * v1[1]
        d11 = v1[0] * v1[0] + v1[1] * v1[1]
        d20 = v2[0] * v0[0] + v2[1] * v0[1]
        d21 = v2[0] * v1[0] + v2[1] * v1[1]

        denom = d00 * d11 - d01 * d01
        if denom == 0:
            return DEGENERATE

        v = (d11 * d20 - d01 * d21) / denom
        w = (d00 * d21 - d01 * d20) / denom
        return (1.0 - v - w, v, w)

    def from_barycentric(self, bary: Barycentric) -> Point:
        """Texture position interpolated with the given barycentric weights."""
        a, b, c = bary
        corners = (self.c0.uv(), self.c1.uv(), self.c2.uv())
        weights = (a, b, c)
        return (
            sum(weight * uv[0] for weight, uv in zip(weights, corners)),
            sum(weight * uv[1] for weight, uv in zip(weights, corners)),
        )

    def contains(self, p: Point) -> bool:
        """True if ``p`` lies strictly inside the triangle's model positions."""
        return point_in_triangle(p, self.c0.xy(), self.c1.xy(), self.c2.xy())


@dataclass(eq=False)
class Quad:
    """Four texture coordinates; may be hidden from the editors."""

    c0: TexCoord
    c1: TexCoord
    c2: TexCoord
    c3: TexCoord
    hidden: bool = False

    @classmethod
    def from_points(cls, v0: Point, v1: Point, v2: Point, v3: Point) -> "Quad":
        """Create a visible quad whose texture positions equal its model positions."""
        return cls(*(TexCoord.from_point(v) for v in (v0, v1, v2, v3)))

    def to_tris(self) -> Tuple[Triangle, Triangle]:
        """Split into two triangles sharing the c1-c3 diagonal."""
        return (
            Triangle(self.c0, self.c3, self.c1),
            Triangle(self.c1, self.c3, self.c2),
        )

    def coords(self) -> Tuple[TexCoord, TexCoord, TexCoord, TexCoord]:
        return (self.c0, self.c1, self.c2, self.c3)