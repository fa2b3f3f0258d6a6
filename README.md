# pxluv

pxluv is a small editor for pixel-art UV mapping. You work with two sprites:
a *model* and a *texture*. You draw quads over the model, then drag their
corners in texture space. pxluv bakes a UV image from this. Every opaque model
pixel covered by a quad stores the texture coordinate it maps to: U in the red
channel, V in the green channel, with the pixel's own alpha kept. Opaque pixels
that no quad covers become white. Transparent pixels stay transparent. You can
export the UV image and use it as a lookup texture in your own renderer.

## Installation

```
pip install .
```

The editor uses pygame for its window. It uses Pillow for images and the
standard library's tkinter for the open and save dialogs.

## Running

```
pxluv
```

This opens a 1200×900 window titled "PXLUV" with a top bar and four panels.
At start-up the model is a 16×16 sprite whose lower-left triangle is white.
The texture is a 16×16 image with noise in its top-left quarter and purple,
blue and green in the other three quarters. Two quads are already placed.

- **Model** shows the model sprite with the quads drawn over it. It edits their XY positions.
- **Texture** shows the texture sprite with the same quads. It edits their UV positions.
- **Result** shows the baked UV image drawn through the texture, so each model pixel takes the texture colour it maps to.
- **List** shows the quads as "Poly 0", "Poly 1", … The selected quad has a *Hide* check box and a *Delete* button. *Delete* is disabled while the quad is hidden.

### Controls

- **Left click** on a quad in the Model or Texture panel selects it. Clicking near one of its corners also picks that corner.
- **Left drag** moves the picked corner. If no corner is picked, it moves the whole quad.
- **Left drag on empty space** draws a new rectangular quad. Rectangles that are too small are dropped.
- **Mouse wheel** zooms the panel under the cursor, or scrolls the quad list.
- **Middle drag** pans the panel under the cursor.
- **Clicking an entry in the list** selects that quad. Clicking the selected entry again deselects it.
- The **"..."** button in the Model or Texture header opens a dialog and loads an image (PNG, BMP or JPEG) into that panel.
- **Export** in the top bar opens a save dialog and writes the UV image. The file type follows the extension you give; PNG is offered.

## Using it as a library

The geometry and baking parts work without a window:

```python
from pxluv.assets import default_model_image, default_texture_image, shade_uv_textured
from pxluv.file_io import Exporter
from pxluv.finalizer import finalize
from pxluv.geometry import Quad
from pxluv.poly_list import PolyList

quads = PolyList()
quads.add(Quad.from_points((0, 0), (0.5, 0), (0.5, 0.5), (0, 0.5)))

uv_image = finalize(default_model_image(), quads)
preview = shade_uv_textured(uv_image, default_texture_image())

Exporter(uv_image).export("uv.png")
```

- `pxluv.geometry` provides `TexCoord`, `Triangle` (with `barycentric`, `from_barycentric` and `contains`), `Quad` and `point_in_triangle`.
- `pxluv.poly_list` provides `PolyList`, an ordered list of quads matched by identity. `remove_index` raises `IndexError` and `index_of` raises `ValueError`. It also provides `EditParams`, which holds the current selection.
- `pxluv.finalizer.finalize(original, quads)` bakes the UV image. Each pixel uses the first triangle that contains its centre.
- `pxluv.assets` holds the default images, `perlin_noise_image`, and the shading functions `shade_white`, `shade_textured` and `shade_uv_textured`.
- `pxluv.file_io.Exporter.export` raises `ExportError` when no image is set or the file cannot be written.

## What it does not do

pxluv keeps the quads only in memory. There is no way to save or reload a set
of quads, so closing the window discards them. Only the baked UV image can be
written to disk.