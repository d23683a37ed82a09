import numpy as np
import pytest
from PIL import Image

from gbalib.errors import UnsupportedImageFormat
from gbalib.source import SourceImage, load_image


def test_dimensions_and_pixel_access():
    img = Image.new('RGB', (3, 2), (0, 0, 0))
    img.putpixel((2, 1), (1, 2, 3))
    image = SourceImage.from_pil(img)
    assert (image.width, image.height, image.channels) == (3, 2, 3)
    assert (image.width, image.height) == (3, 2)
    assert image.pixel_at(1, 2) == (1, 2, 3)
    assert image.pixel_at(0, 0) == (0, 0, 0)


def test_buffer_is_read_only():
    image = SourceImage.from_pil(Image.new('RGB', (2, 2)))
    with pytest.raises(ValueError):
        image.pixels[0, 0, 0] = 1


@pytest.mark.parametrize('mode', ['L', 'P', 'LA', '1'])
def test_rejects_non_rgb_modes(mode):
    with pytest.raises(UnsupportedImageFormat) as excinfo:
        SourceImage.from_pil(Image.new(mode, (2, 2)))
    assert excinfo.value.mode == mode


def test_force_rgb_converts_palette_images():
    img = Image.new('P', (2, 2))
    image = SourceImage.from_pil(img, force_rgb=True)
    assert image.channels == 4


def test_rejects_bad_channel_count():
    with pytest.raises(UnsupportedImageFormat):
        SourceImage(np.zeros((2, 2, 2), dtype=np.uint8))
    with pytest.raises(UnsupportedImageFormat):
        SourceImage(np.zeros((2, 2), dtype=np.uint8))


def test_load_image_from_disk(tmp_path):
    path = tmp_path / 'in.png'
    Image.new('RGBA', (4, 1), (9, 9, 9, 9)).save(path)
    image = load_image(path)
    assert (image.width, image.height) == (4, 1)
    assert image.pixel_at(0, 3) == (9, 9, 9, 9)


@pytest.mark.parametrize('dtype', [np.int64, np.uint16, np.float32])
def test_rejects_non_byte_samples(dtype):
    pixels = np.zeros((2, 2, 3), dtype=dtype)
    pixels[0, 0, 0] = 256
    with pytest.raises(UnsupportedImageFormat):
        SourceImage(pixels)


def test_callers_array_stays_writable():
    pixels = np.zeros((2, 2, 3), dtype=np.uint8)
    image = SourceImage(pixels)
    pixels[0, 0, 0] = 1
    assert image.pixel_at(0, 0) == (0, 0, 0)
    assert not image.pixels.flags.writeable
