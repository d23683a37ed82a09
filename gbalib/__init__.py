"""Shared library modules for converting images to GBA data."""
from .color import DEFAULT_COLORKEY, parse_colorkey, quantize
from .convert import ConversionResult, convert_image, write_header
from .errors import (
    ConversionError,
    InvalidColorKey,
    PaletteOverflow,
    UnsupportedDimensions,
    UnsupportedImageFormat,
)
from .palette import Palette
from .source import SourceImage, load_image
from .traversal import TraversalCursor

__all__ = [
    'DEFAULT_COLORKEY', 'parse_colorkey', 'quantize',
    'ConversionResult', 'convert_image', 'write_header',
    'ConversionError', 'InvalidColorKey', 'PaletteOverflow',
    'UnsupportedDimensions', 'UnsupportedImageFormat',
    'Palette', 'SourceImage', 'load_image', 'TraversalCursor',
]
