"""Logging, default images and the software shaders used for display."""

from __future__ import annotations

import math
import random
import sys

from PIL import Image

TEXTURE_SIZE = 16

WHITE = (255, 255, 255, 255)
BLANK = (0, 0, 0, 0)
GREEN = (0, 228, 48, 255)
BLUE = (0, 121, 241, 255)
PURPLE = (200, 122, 255, 255)

_OCTAVES = 6
_LACUNARITY = 2.0
_GAIN = 0.5

_permutation = list(range(256))
random.Random(0).shuffle(_permutation)
_PERM = _permutation * 2
_GRADIENTS = ((1, 1), (-1, 1), (1, -1), (-1, -1), (1, 0), (-1, 0), (0, 1), (0, -1))


def log(text: str, *args) -> None:
    """Print a tagged message, formatting ``text`` with ``args`` printf-style."""
    message = text % args if args else text
    print(f"[pxLUV]: {message}", file=sys.stdout)


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _gradient(hashed: int, dx: float, dy: float) -> float:
    gx, gy = _GRADIENTS[hashed & 7]
    return gx * dx + gy * dy


def _noise(x: float, y: float) -> float:
    xi, yi = math.floor(x), math.floor(y)
    xf, yf = x - xi, y - yi
    cx, cy = xi & 255, yi & 255
    aa = _PERM[_PERM[cx] + cy]
    ab = _PERM[_PERM[cx] + cy + 1]
    ba = _PERM[_PERM[cx + 1] + cy]
    bb = _PERM[_PERM[cx + 1] + cy + 1]
    u, v = _fade(xf), _fade(yf)
    bottom = _lerp(_gradient(aa, xf, yf), _gradient(ba, xf - 1, yf), u)
    top = _lerp(_gradient(ab, xf, yf - 1), _gradient(bb, xf - 1, yf - 1), u)
    return _lerp(bottom, top, v)


def _fbm(x: float, y: float) -> float:
    total, frequency, amplitude = 0.0, 1.0, 1.0
    for _ in range(_OCTAVES):
        total += _noise(x * frequency, y * frequency) * amplitude
        frequency *= _LACUNARITY
        amplitude *= _GAIN
    return total


def perlin_noise_image(
    width: int, height: int, offset_x: float, offset_y: float, scale: float
) -> Image.Image:
    """Opaque grayscale fractal noise as an RGBA image."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    aspect = width / height
    image = Image.new("RGBA", (width, height))
    pixels = image.load()
    for y in range(height):
        for x in range(width):
            nx = (x + offset_x) * (scale / width)
            ny = (y + offset_y) * (scale / height)
            if width > height:
                nx *= aspect
            else:
                ny /= aspect
            value = min(max((_fbm(nx, ny) + 1.0) / 2.0, 0.0), 1.0)
            intensity = int(value * 255)
            pixels[x, y] = (intensity, intensity, intensity, 255)
    return image


def default_model_image() -> Image.Image:
    """A transparent square with its lower-left triangle filled white."""
    image = Image.new("RGBA", (TEXTURE_SIZE, TEXTURE_SIZE), BLANK)
    pixels = image.load()
    for y in range(TEXTURE_SIZE):
        for x in range(y):
            pixels[x, y] = WHITE
    return image


def default_texture_image() -> Image.Image:
    """Noise in the top-left quarter, solid colours in the other three."""
    image = perlin_noise_image(TEXTURE_SIZE, TEXTURE_SIZE, 0, 0, 1.0)
    pixels = image.load()
    half = TEXTURE_SIZE // 2
    for y in range(TEXTURE_SIZE):
        for x in range(TEXTURE_SIZE):
            if y >= half:
                pixels[x, y] = GREEN if x >= half else BLUE
            elif x >= half:
                pixels[x, y] = PURPLE
    return image


def shade_white(image: Image.Image) -> Image.Image:
    """Mostly opaque pixels become white, the rest transparent."""
    result = image.convert("RGBA")
    result.putdata([WHITE if a / 255 + 0.5 >= 1 else BLANK for _, _, _, a in result.getdata()])
    return result


def shade_textured(image: Image.Image) -> Image.Image:
    """The image unchanged, as an RGBA copy."""
    return image.convert("RGBA")


def shade_uv_textured(image: Image.Image, texture: Image.Image) -> Image.Image:
    """Sample ``texture`` at the (red, green) UV stored in each pixel of ``image``."""
    result = image.convert("RGBA")
    source = texture.convert("RGBA")
    texels = source.load()
    tw, th = source.size

    def sample(pixel):
        r, g, _, a = pixel
        if a / 255 < 0.01:
            return BLANK
        tx = math.floor(r / 255 * tw) % tw
        ty = math.floor(g / 255 * th) % th
        return texels[tx, ty]

    result.putdata([sample(pixel) for pixel in result.getdata()])
    return result