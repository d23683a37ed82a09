"""C header emission for converted image data.

Output layout matches the classic png2gba tool so existing projects can drop
the generated headers in unchanged::

    /* name.h
     * generated by png2gba */

    #define name_width 240
    #define name_height 160

    const unsigned short name_data [] = {
        0x001F, 0x001F, ...
"""
from __future__ import annotations

import io
import re
from typing import Iterable, Optional, Sequence, TextIO

from .palette import Palette

VALUES_PER_LINE = 8
PALETTE_VALUES_PER_LINE = 9
INDENT = '    '


def symbol_name(stem: str) -> str:
    """Turn a file stem into a usable C identifier."""
    name = re.sub(r'\W', '_', stem, flags=re.ASCII)
    if not name:
        return 'image'
    if name[0].isdigit():
        name = '_' + name
    return name


class StreamEmitter:
    def __init__(self, out: TextIO, name: str) -> None:
        self.out = out
        self.name = name

    def write_preamble(self, width: int, height: int, indexed: bool) -> None:
        out = self.out
        out.write(f"/* {self.name}.h\n * generated by png2gba */\n\n")
        out.write(f"#define {self.name}_width {width}\n")
        out.write(f"#define {self.name}_height {height}\n\n")
        ctype = 'unsigned char' if indexed else 'unsigned short'
        out.write(f"const {ctype} {self.name}_data [] = {{\n")

    def write_pixels(self, values: Iterable[int], indexed: bool) -> None:
        """Write the pixel stream, eight literals per line."""
        fmt = '0x{:02X}' if indexed else '0x{:04X}'
        on_line = 0
        for value in values:
            if on_line == 0:
                self.out.write(INDENT)
            self.out.write(fmt.format(value))
            self.out.write(', ')
            on_line += 1
            if on_line >= VALUES_PER_LINE:
                self.out.write('\n')
                on_line = 0
        self.out.write('\n};\n\n')

    def write_palette(self, palette: Palette) -> None:
        """Write every palette slot, nine per line, unused slots as zero."""
        out = self.out
        table = palette.table()
        last = len(table) - 1
        out.write(f"const unsigned short {self.name}_palette [] = {{\n")
        on_line = 0
        for i, color in enumerate(table):
            if on_line == 0:
                out.write(INDENT)
            out.write(f"0x{color:04x}")
            if i != last:
                out.write(', ')
            on_line += 1
            if on_line >= PALETTE_VALUES_PER_LINE:
                out.write('\n')
                on_line = 0
        out.write('\n};\n\n')


def render_header(
    values: Sequence[int],
    width: int,
    height: int,
    name: str,
    palette: Optional[Palette] = None,
) -> str:
    """Render a complete header to a string."""
    buf = io.StringIO()
    emitter = StreamEmitter(buf, name)
    indexed = palette is not None
    emitter.write_preamble(width, height, indexed)
    emitter.write_pixels(values, indexed)
    if palette is not None:
        emitter.write_palette(palette)
    return buf.getvalue()
