from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional

from gbalib.config import DEFAULTS_FILE, load_defaults, resolve_options
from gbalib.convert import convert_image, write_header
from gbalib.emitter import symbol_name
from gbalib.errors import ConversionError
from gbalib.palette import PALETTE_SIZES
from gbalib.preview import build_preview
from gbalib.source import load_image

ANSI_RESET = '\033[0m'
ANSI_RED = '\033[91m'
ANSI_GREEN = '\033[92m'

# Sentinel used to detect whether optional CLI parameters were explicitly provided
ARG_UNSET = object()


class SingleValueAction(argparse.Action):
    """Prevent options that should appear only once from being repeated."""

    def __call__(self, parser, namespace, values, option_string=None):
        current = getattr(namespace, self.dest, ARG_UNSET)
        if current is not ARG_UNSET:
            flag = option_string or self.option_strings[-1]
            raise argparse.ArgumentError(self, f"{flag} may be provided at most once.")
        setattr(namespace, self.dest, values)


def _color_enabled(stream) -> bool:
    return stream.isatty() and os.getenv('NO_COLOR') is None


def report_error(message: str) -> None:
    if _color_enabled(sys.stderr):
        message = f"{ANSI_RED}{message}{ANSI_RESET}"
    print(message, file=sys.stderr)


def resolve_output_path(input_path: Path, output: Optional[str]) -> Path:
    if not output:
        return input_path.with_suffix('.h')
    output_path = Path(os.path.expanduser(output))
    if output_path.is_dir():
        return output_path / f"{input_path.stem}.h"
    parent = output_path.parent
    if not parent.exists():
        report_error(f'Error: Output directory does not exist: {parent}')
        raise SystemExit(1)
    return output_path


def run_convert(args) -> None:
    input_path = Path(os.path.expanduser(args.input))
    if not input_path.is_file():
        report_error(f"Error: Can not open {input_path} for reading!")
        raise SystemExit(1)

    config_path = Path(os.path.expanduser(args.config)) if args.config else DEFAULTS_FILE
    defaults = load_defaults(config_path)
    cli_values = {
        'palette': args.palette,
        'tileize': args.tileize,
        'colorkey': None if args.colorkey is ARG_UNSET else args.colorkey,
        'force_rgb': args.force_rgb,
    }
    try:
        options = resolve_options(cli_values, defaults)
        options.validate()
    except (ValueError, ConversionError) as e:
        report_error(f"Error: {e}")
        raise SystemExit(1)

    output_path = resolve_output_path(input_path, args.output)
    name = symbol_name(args.name or output_path.stem)
    mode = f"{options.palette} color palette" if options.palette else 'direct color'
    layout = 'tiled' if options.tileize else 'linear'

    if args.dry_run:
        print(f"[DRY] {input_path} -> {output_path} ({mode}, {layout}, symbol {name})")
        return

    try:
        image = load_image(input_path, force_rgb=options.force_rgb)
        result = convert_image(
            image,
            palette_size=options.palette,
            tileize=options.tileize,
            colorkey=options.colorkey,
        )
    except ConversionError as e:
        report_error(f"Error: {e}")
        raise SystemExit(1)
    except OSError as e:
        report_error(f"Error: Could not read image {input_path}: {e}")
        raise SystemExit(1)

    try:
        write_header(result, output_path, name)
        if args.preview is not None:
            preview_path = Path(os.path.expanduser(args.preview)) if args.preview else output_path.with_name(f"{output_path.stem}_preview.png")
            build_preview(image, preview_path)
    except (OSError, ValueError) as e:
        report_error(f"Error: Could not write output: {e}")
        raise SystemExit(1)

    done = f"Header written to {output_path}"
    if _color_enabled(sys.stdout):
        done = f"{ANSI_GREEN}{done}{ANSI_RESET}"
    print(done)
    if result.indexed:
        print(f"  {result.pixel_count} pixels, {result.unique_colors}/{options.palette - 1} palette colors used ({layout})")
    else:
        print(f"  {result.pixel_count} pixels, {result.unique_colors} unique colors ({layout})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='png2gba', description='Convert images into C headers for the GBA')
    subparsers = parser.add_subparsers(dest='command', required=True)

    convert = subparsers.add_parser('convert', help='Convert an image to a C header of pixel data')
    convert.set_defaults(func=run_convert)
    convert.add_argument('input', help='Path to input image')
    convert.add_argument('-o', '--output', help='Output header path or directory (default: input name with .h)')
    convert.add_argument('-p', '--palette', nargs='?', type=int, const=256, choices=PALETTE_SIZES,
                         help='Emit palette indices with a 16 or 256 color palette (bare -p means 256; '
                              'place a bare -p after the input path)')
    convert.add_argument('--direct', dest='palette', action='store_const', const=0,
                         help='Emit direct 15-bit colors, overriding a palette from the defaults file')
    convert.add_argument('-t', '--tileize', action=argparse.BooleanOptionalAction, default=None,
                         help='Order pixels in 8x8 tiles (dimensions must be multiples of 8)')
    convert.add_argument('-c', '--colorkey', default=ARG_UNSET, action=SingleValueAction,
                         help='Transparent color stored at palette index 0, #RRGGBB or a CSS3 name (default: #ff00ff)')
    convert.add_argument('--name', help='C symbol prefix (default: output file name)')
    convert.add_argument('--preview', nargs='?', const='',
                         help='Save a PNG of the 15-bit reduced image. With no value, writes next to the header')
    convert.add_argument('--force-rgb', action=argparse.BooleanOptionalAction, default=None,
                         help='Convert palette or grayscale inputs to RGBA instead of rejecting them')
    convert.add_argument('--config', help=f'Path to defaults JSON (default: {DEFAULTS_FILE})')
    convert.add_argument('--dry-run', action='store_true', help='Print planned actions without writing files')

    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()


if __name__ == '__main__':
    main()
