"""Exceptions raised while converting an image to GBA data."""
from __future__ import annotations


class ConversionError(Exception):
    """Base class for every fatal conversion failure."""


class PaletteOverflow(ConversionError):
    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Too many colors in image for a {capacity} color palette!")


class InvalidColorKey(ConversionError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid colorkey {value!r} (expected #RRGGBB or a CSS3 color name)")


class UnsupportedDimensions(ConversionError):
    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Tiled output needs width and height to be multiples of 8, got {width}x{height}"
        )


class UnsupportedImageFormat(ConversionError):
    def __init__(self, mode) -> None:
        self.mode = mode
        super().__init__(f"Image is not in the RGB or RGBA format (got {mode})")
