"""Pixel ordering for linear and 8x8 tiled output."""
from __future__ import annotations

from typing import Optional, Tuple

from .errors import UnsupportedDimensions

TILE_SIZE = 8


class TraversalCursor:
    """Single-pass walk over every (row, col) of a ``width`` x ``height`` image.

    Linear mode is plain row-major order. Tiled mode walks 8x8 tiles left to
    right, top to bottom, and each tile row-major, which is the layout GBA
    tile modes expect in VRAM.
    """

    def __init__(self, width: int, height: int, tiled: bool = False) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
        if tiled and (width % TILE_SIZE or height % TILE_SIZE):
            raise UnsupportedDimensions(width, height)
        self.width = width
        self.height = height
        self.tiled = tiled
        self.row = 0
        self.col = 0
        # offsets inside the current tile (0-7)
        self.tile_row = 0
        self.tile_col = 0

    @property
    def done(self) -> bool:
        return self.row >= self.height

    def advance(self) -> Optional[Tuple[int, int]]:
        """Return the next position, or None once every pixel was visited."""
        if self.done:
            return None
        position = (self.row, self.col)
        if self.tiled:
            self._step_tiled()
        else:
            self.col += 1
            if self.col >= self.width:
                self.row += 1
                self.col = 0
        return position

    def _step_tiled(self) -> None:
        self.col += 1
        self.tile_col += 1
        if self.tile_col < TILE_SIZE:
            return
        # end of a row inside the tile: drop to the next one
        self.row += 1
        self.tile_row += 1
        self.col -= TILE_SIZE
        self.tile_col = 0
        if self.tile_row >= TILE_SIZE:
            # tile finished, move right to the next tile
            self.row -= TILE_SIZE
            self.tile_row = 0
            self.col += TILE_SIZE
        if self.col >= self.width:
            # tile row finished, wrap to the first tile of the next one
            self.col = 0
            self.tile_row = 0
            self.row += TILE_SIZE

    def __iter__(self) -> 'TraversalCursor':
        return self

    def __next__(self) -> Tuple[int, int]:
        position = self.advance()
        if position is None:
            raise StopIteration
        return position
