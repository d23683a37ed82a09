"""Decoded image access on top of Pillow."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image

from .errors import UnsupportedImageFormat

_CHANNELS = {'RGB': 3, 'RGBA': 4}


@dataclass(frozen=True, eq=False)
class SourceImage:
    """Row-major RGB(A) pixel buffer of shape (height, width, channels)."""

    pixels: np.ndarray

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] not in (3, 4):
            channels = self.pixels.shape[2] if self.pixels.ndim == 3 else 1
            raise UnsupportedImageFormat(f"{channels} channels")
        if self.pixels.dtype != np.uint8:
            raise UnsupportedImageFormat(f"{self.pixels.dtype} samples (expected uint8)")
        if self.pixels.shape[0] == 0 or self.pixels.shape[1] == 0:
            raise ValueError('Image has no pixels')
        # private read-only copy; the caller's array is left untouched
        pixels = self.pixels.copy()
        pixels.setflags(write=False)
        object.__setattr__(self, 'pixels', pixels)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def channels(self) -> int:
        return int(self.pixels.shape[2])

    def pixel_at(self, row: int, col: int) -> Tuple[int, ...]:
        return tuple(int(v) for v in self.pixels[row, col])

    @classmethod
    def from_pil(cls, img: Image.Image, force_rgb: bool = False) -> 'SourceImage':
        if img.mode not in _CHANNELS:
            if not force_rgb:
                raise UnsupportedImageFormat(img.mode)
            img = img.convert('RGBA')
        return cls(np.array(img, dtype=np.uint8))


def load_image(path: Union[str, Path], force_rgb: bool = False) -> SourceImage:
    with Image.open(path) as img:
        img.load()
        return SourceImage.from_pil(img, force_rgb=force_rgb)
