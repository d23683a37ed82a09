"""Preview rendering of the 15-bit reduced image."""
from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from .color import expand, quantize_array
from .source import SourceImage


def reduce_to_15bit(image: SourceImage) -> Image.Image:
    """Return an RGB image showing how ``image`` looks after 5-5-5 truncation."""
    channels = expand(quantize_array(image.pixels))
    rgb = np.stack(channels, axis=-1).astype(np.uint8)
    return Image.fromarray(rgb)


def build_preview(image: SourceImage, path: Union[str, Path, None]) -> None:
    if not path:
        return
    reduce_to_15bit(image).save(path)
    print(f"Preview image saved to {path}")
