"""15-bit GBA color helpers.

The GBA stores colors as ``0bBBBBBGGGGGRRRRR``: five bits per channel with red
in the low bits. Converting from 8-8-8 RGB simply drops the low three bits of
each channel.
"""
from __future__ import annotations

import re
from typing import Tuple

import numpy as np
import webcolors

from .errors import InvalidColorKey

DEFAULT_COLORKEY = '#ff00ff'

_HEX24 = re.compile(r'#[0-9a-fA-F]{6}')


def quantize(r: int, g: int, b: int) -> int:
    """Pack an 8-bit RGB triple into a 15-bit BGR555 value."""
    return ((b >> 3) << 10) | ((g >> 3) << 5) | (r >> 3)


def quantize_array(pixels: np.ndarray) -> np.ndarray:
    """Vectorised :func:`quantize` over an (..., 3+) uint8 array."""
    px = pixels.astype(np.uint16)
    return ((px[..., 2] >> 3) << 10) | ((px[..., 1] >> 3) << 5) | (px[..., 0] >> 3)


def expand(color):
    """Convert 15-bit values back to 8-bit RGB, replicating the top bits.

    Works on a plain int or elementwise on a numpy array of packed colors.
    """
    r = color & 0x1F
    g = (color >> 5) & 0x1F
    b = (color >> 10) & 0x1F
    return ((r << 3) | (r >> 2), (g << 3) | (g >> 2), (b << 3) | (b >> 2))


def parse_colorkey(value: str) -> Tuple[int, int, int]:
    """Parse ``#RRGGBB`` or a CSS3 color name into an RGB tuple."""
    if not isinstance(value, str):
        raise InvalidColorKey(repr(value))
    text = value.strip()
    if _HEX24.fullmatch(text):
        return (int(text[1:3], 16), int(text[3:5], 16), int(text[5:7], 16))
    if text.startswith('#'):
        raise InvalidColorKey(value)
    try:
        rgb = webcolors.name_to_rgb(text.lower())
    except ValueError:
        raise InvalidColorKey(value) from None
    return (rgb.red, rgb.green, rgb.blue)


def colorkey_to_15(value: str) -> int:
    return quantize(*parse_colorkey(value))
