[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pxluv"
version = "0.1.0"
description = "Pixel-art UV mapping editor: draw quads over a model sprite, map them onto a texture and export a UV lookup image"
requires-python = ">=3.10"
keywords = ["pixel-art", "uv-mapping", "sprite", "texture", "editor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]
dependencies = [
    "pillow",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pxluv = "pxluv.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pxluv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
