from __future__ import annotations

import pytest
from PIL import Image

from gbalib.source import SourceImage


def solid(width: int, height: int, rgb=(255, 0, 0), mode: str = 'RGB') -> SourceImage:
    fill = tuple(rgb) if mode == 'RGB' else tuple(rgb) + (255,)
    return SourceImage.from_pil(Image.new(mode, (width, height), fill))


@pytest.fixture
def red_2x2() -> SourceImage:
    return solid(2, 2)


@pytest.fixture
def red_png(tmp_path):
    path = tmp_path / 'red.png'
    Image.new('RGB', (2, 2), (255, 0, 0)).save(path)
    return path


@pytest.fixture
def no_defaults(tmp_path):
    return str(tmp_path / 'missing-defaults.json')
