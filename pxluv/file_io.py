"""Saving the baked UV image to disk."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from PIL import Image


class ExportError(Exception):
    """Raised when the UV image cannot be exported."""


@dataclass
class Exporter:
    """Holds the most recently baked image and writes it out on request."""

    texture: Optional[Image.Image] = None

    def export(self, destination_path) -> None:
        """Write the texture to ``destination_path``, format chosen by extension."""
        if self.texture is None:
            raise ExportError("No texture to be saved")
        try:
            self.texture.save(destination_path)
        except (OSError, ValueError) as exc:
            raise ExportError("Could not save uv texture.") from exc