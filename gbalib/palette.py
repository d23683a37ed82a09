"""Bounded, insertion-ordered palette of 15-bit colors."""
from __future__ import annotations

from typing import Dict, List

from .errors import PaletteOverflow

PALETTE_SIZES = (16, 256)


class Palette:
    """Deduplicating color table sized for a GBA palette bank.

    One slot is always left free, so at most ``max_colors - 1`` entries are
    ever used. The first inserted color (the colorkey) ends up at index 0.
    """

    def __init__(self, max_colors: int) -> None:
        if max_colors not in PALETTE_SIZES:
            raise ValueError(f"Palette must be 16 or 256 colors, got {max_colors}")
        self.max_colors = max_colors
        self.colors: List[int] = []
        self._index: Dict[int, int] = {}

    def __len__(self) -> int:
        return len(self.colors)

    @property
    def used(self) -> int:
        return len(self.colors)

    def insert(self, color: int) -> int:
        """Return the index of ``color``, adding it if it is new."""
        index = self._index.get(color)
        if index is not None:
            return index
        if len(self.colors) >= self.max_colors - 1:
            raise PaletteOverflow(self.max_colors)
        self.colors.append(color)
        index = len(self.colors) - 1
        self._index[color] = index
        return index

    def table(self) -> List[int]:
        """All ``max_colors`` slots, unused ones zero-filled."""
        return self.colors + [0] * (self.max_colors - len(self.colors))
