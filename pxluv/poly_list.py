"""The ordered list of quads being edited and the current selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from pxluv.geometry import Quad, TexCoord


class PolyList:
    """Ordered collection of quads, identified by object identity."""

    def __init__(self) -> None:
        self._quads: List[Quad] = []

    def add(self, quad: Quad) -> None:
        self._quads.append(quad)

    def remove_index(self, index: int) -> None:
        """Remove the quad at ``index``; raise IndexError if there is none."""
        if not 0 <= index < len(self._quads):
            raise IndexError(f"Couldn't delete index {index}, it is not in list.")
        del self._quads[index]

    def index_of(self, quad: Quad) -> int:
        """Position of this very quad object; raise ValueError if absent."""
        for index, candidate in enumerate(self._quads):
            if candidate is quad:
                return index
        raise ValueError("quad is not in list")

    def __len__(self) -> int:
        return len(self._quads)

    def __iter__(self) -> Iterator[Quad]:
        return iter(self._quads)

    def __getitem__(self, index: int) -> Quad:
        return self._quads[index]


@dataclass
class EditParams:
    """The coordinate and quad currently selected in the editors."""

    current_coord: Optional[TexCoord] = None
    current_quad: Optional[Quad] = None

    def clear(self) -> None:
        self.current_coord = None
        self.current_quad = None