"""Bake the quad mapping into an image whose pixels encode UV positions."""

from __future__ import annotations

from typing import Iterable

from PIL import Image

from pxluv.assets import BLANK, WHITE
from pxluv.geometry import Quad


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def _to_channel(value: float) -> int:
    return int(_clamp(value) * 255)


def finalize(original: Image.Image, quads: Iterable[Quad]) -> Image.Image:
    """Map every opaque pixel of ``original`` through the first quad covering it.

    Covered pixels store the mapped UV in red and green and keep their alpha;
    uncovered opaque pixels become white; transparent pixels stay transparent.
    """
    source = original.convert("RGBA")
    width, height = source.size
    triangles = [tri for quad in quads for tri in quad.to_tris()]

    result = Image.new("RGBA", source.size, BLANK)
    src = source.load()
    dst = result.load()

    for y in range(height):
        for x in range(width):
            alpha = src[x, y][3]
            if alpha == 0:
                continue
            point = (_clamp((x + 0.5) / width), _clamp((y + 0.5) / height))
            tri = next((t for t in triangles if t.contains(point)), None)
            if tri is None:
                dst[x, y] = WHITE
            else:
                u, v = tri.from_barycentric(tri.barycentric(point))
                dst[x, y] = (_to_channel(u), _to_channel(v), 0, alpha)
    return result