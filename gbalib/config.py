"""Conversion options and the optional JSON defaults file."""
from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .color import DEFAULT_COLORKEY, parse_colorkey
from .palette import PALETTE_SIZES

DEFAULTS_FILE = Path.home() / '.png2gba.json'

_KNOWN_KEYS = ('colorkey', 'palette', 'tileize', 'force_rgb')


@dataclass
class ConvertOptions:
    palette: Optional[int] = None
    tileize: bool = False
    colorkey: str = DEFAULT_COLORKEY
    force_rgb: bool = False

    def __post_init__(self) -> None:
        if self.palette is not None and self.palette not in PALETTE_SIZES:
            raise ValueError(f"Palette must be 16 or 256 colors, got {self.palette}")

    def validate(self) -> None:
        """Fail early on a bad colorkey, before any image is decoded."""
        parse_colorkey(self.colorkey)


def load_defaults(path: Path) -> dict:
    """Read saved defaults; a missing or broken file yields ``{}``."""
    if not path.exists():
        return {}
    try:
        with path.open('r') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Warning: ignoring defaults file {path}: {e}", file=sys.stderr)
        return {}
    if not isinstance(data, dict):
        print(f"Warning: ignoring defaults file {path}: expected a JSON object", file=sys.stderr)
        return {}
    unknown = set(data) - set(_KNOWN_KEYS)
    if unknown:
        print(f"Warning: ignored unknown defaults keys: {', '.join(sorted(unknown))}", file=sys.stderr)
    return {k: data[k] for k in _KNOWN_KEYS if k in data}


def resolve_options(cli: dict, defaults: dict) -> ConvertOptions:
    """Merge CLI values over file defaults. ``None`` in ``cli`` means unset."""
    merged = dict(defaults)
    merged.update({k: v for k, v in cli.items() if v is not None})
    palette = merged.get('palette')
    if palette is not None and (isinstance(palette, bool) or not isinstance(palette, int)):
        raise ValueError(f"Palette must be 16 or 256 colors, got {palette!r}")
    return ConvertOptions(
        # 0 selects direct color
        palette=palette or None,
        tileize=bool(merged.get('tileize', False)),
        colorkey=str(merged.get('colorkey', DEFAULT_COLORKEY)),
        force_rgb=bool(merged.get('force_rgb', False)),
    )
