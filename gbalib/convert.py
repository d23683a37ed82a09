"""Image to GBA data conversion pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .color import DEFAULT_COLORKEY, colorkey_to_15, quantize
from .emitter import render_header, symbol_name
from .palette import Palette
from .source import SourceImage
from .traversal import TraversalCursor


@dataclass
class ConversionResult:
    width: int
    height: int
    values: List[int]
    palette: Optional[Palette] = None

    @property
    def indexed(self) -> bool:
        return self.palette is not None

    @property
    def pixel_count(self) -> int:
        return len(self.values)

    @property
    def unique_colors(self) -> int:
        if self.palette is not None:
            return len(self.palette)
        return len(set(self.values))

    def render(self, name: str) -> str:
        return render_header(self.values, self.width, self.height, name, self.palette)


def convert_image(
    image: SourceImage,
    *,
    palette_size: Optional[int] = None,
    tileize: bool = False,
    colorkey: str = DEFAULT_COLORKEY,
) -> ConversionResult:
    """Walk ``image`` and produce 15-bit colors or palette indices.

    ``palette_size`` of None selects direct color output; otherwise it must
    be 16 or 256 and the colorkey takes palette slot 0.
    """
    key = colorkey_to_15(colorkey)
    cursor = TraversalCursor(image.width, image.height, tiled=tileize)

    palette: Optional[Palette] = None
    if palette_size is not None:
        palette = Palette(palette_size)
        palette.insert(key)

    pixels = image.pixels
    values: List[int] = []
    for row, col in cursor:
        r, g, b = (int(v) for v in pixels[row, col, :3])
        color = quantize(r, g, b)
        if palette is not None:
            values.append(palette.insert(color))
        else:
            values.append(color)

    return ConversionResult(image.width, image.height, values, palette)


def write_header(result: ConversionResult, output_path: Union[str, Path], name: Optional[str] = None) -> Path:
    """Render ``result`` and write it to ``output_path``."""
    output_path = Path(output_path)
    if name is None:
        name = symbol_name(output_path.stem)
    text = result.render(name)
    with open(output_path, 'w') as fh:
        fh.write(text)
    return output_path
