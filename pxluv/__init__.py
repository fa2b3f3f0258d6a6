"""Pixel-art UV mapping: quad geometry, UV baking, image export and an interactive editor."""

__version__ = "0.1.0"