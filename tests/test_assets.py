import pytest
from PIL import Image

from pxluv.assets import (
    TEXTURE_SIZE,
    default_model_image,
    default_texture_image,
    log,
    perlin_noise_image,
    shade_textured,
    shade_uv_textured,
    shade_white,
)


def test_log_prefixes_and_formats(capsys):
    log("Loading %d items from %s.", 3, "disk")
    assert capsys.readouterr().out == "[pxLUV]: Loading 3 items from disk.\n"


def test_log_without_args_keeps_percent(capsys):
    log("100% done")
    assert capsys.readouterr().out == "[pxLUV]: 100% done\n"


def test_perlin_noise_is_deterministic_gray_and_opaque():
    first = perlin_noise_image(8, 8, 0, 0, 1.0)
    second = perlin_noise_image(8, 8, 0, 0, 1.0)
    assert list(first.getdata()) == list(second.getdata())
    assert all(r == g == b and a == 255 for r, g, b, a in first.getdata())
    assert len(set(first.getdata())) > 1


def test_perlin_noise_rejects_empty_size():
    with pytest.raises(ValueError):
        perlin_noise_image(0, 4, 0, 0, 1.0)


def test_default_model_is_lower_triangle():
    image = default_model_image()
    assert image.size == (TEXTURE_SIZE, TEXTURE_SIZE)
    pixels = image.load()
    assert pixels[0, 1] == (255, 255, 255, 255)
    assert pixels[1, 0][3] == 0
    assert all(pixels[i, i][3] == 0 for i in range(TEXTURE_SIZE))


def test_default_texture_quadrants_are_solid_and_distinct():
    image = default_texture_image()
    pixels = image.load()
    half = TEXTURE_SIZE // 2
    assert pixels[half, half] == pixels[TEXTURE_SIZE - 1, TEXTURE_SIZE - 1]
    assert pixels[0, half] == pixels[half - 1, TEXTURE_SIZE - 1]
    assert pixels[half, 0] == pixels[TEXTURE_SIZE - 1, half - 1]
    corners = {pixels[half, half], pixels[0, half], pixels[half, 0]}
    assert len(corners) == 3
    r, g, b, a = pixels[1, 1]
    assert r == g == b and a == 255


def test_shade_white_thresholds_alpha():
    image = Image.new("RGBA", (2, 1))
    image.putpixel((0, 0), (10, 20, 30, 200))
    image.putpixel((1, 0), (10, 20, 30, 50))
    shaded = shade_white(image)
    assert shaded.getpixel((0, 0)) == (255, 255, 255, 255)
    assert shaded.getpixel((1, 0))[3] == 0


def test_shade_textured_copies():
    image = default_model_image()
    shaded = shade_textured(image)
    assert shaded is not image
    assert list(shaded.getdata()) == list(image.getdata())


def test_shade_uv_textured_samples_texture():
    texture = Image.new("RGBA", (2, 2))
    texture.putpixel((0, 0), (1, 0, 0, 255))
    texture.putpixel((1, 1), (2, 0, 0, 255))
    uv = Image.new("RGBA", (3, 1))
    uv.putpixel((0, 0), (0, 0, 0, 255))
    uv.putpixel((1, 0), (200, 200, 0, 255))
    uv.putpixel((2, 0), (200, 200, 0, 0))
    shaded = shade_uv_textured(uv, texture)
    assert shaded.getpixel((0, 0)) == texture.getpixel((0, 0))
    assert shaded.getpixel((1, 0)) == texture.getpixel((1, 1))
    assert shaded.getpixel((2, 0))[3] == 0