import numpy as np
import pytest
from PIL import Image

from uextract.core.image_exporter import (
    ImageExporter,
    PillowImageDecoder,
    get_extension_for_format,
    normalize_texture_format,
)
from uextract.core.objects import LoadedObject
from uextract.errors import DecodeError, EncodeError
from conftest import data_object, texture


@pytest.mark.parametrize("name, expected", [
    ("PNG", "png"),
    ("Jpeg", "jpeg"),
    ("jpg", "jpeg"),
    (" webp ", "webp"),
    ("tif", "tiff"),
])
def test_normalize_texture_format(name, expected):
    assert normalize_texture_format(name) == expected


def test_normalize_rejects_unknown_format():
    with pytest.raises(ValueError, match="Unsupported texture format"):
        normalize_texture_format("dds")


def test_extension_is_lowercased_format_name():
    assert get_extension_for_format("PNG") == ".png"
    assert get_extension_for_format("jpg") == ".jpeg"


def test_decoder_supports_only_textures():
    decoder = PillowImageDecoder()
    assert decoder.supports(texture())
    assert not decoder.supports(data_object())


def test_decoder_returns_rgba_array():
    pixels = PillowImageDecoder().decode(texture(size=(5, 3)))
    assert pixels.shape == (3, 5, 4)
    assert pixels.dtype == np.uint8
    assert tuple(pixels[0, 0]) == (255, 0, 0, 255)


def test_decoder_rejects_missing_data():
    with pytest.raises(DecodeError, match="no pixel data"):
        PillowImageDecoder().decode(LoadedObject(kind="Texture2D", name="Empty"))


def test_decoder_rejects_garbage():
    obj = LoadedObject(kind="Texture2D", name="Garbage", data=b"not an image")
    with pytest.raises(DecodeError):
        PillowImageDecoder().decode(obj)


@pytest.mark.parametrize("texture_format, pil_format", [
    ("png", "PNG"),
    ("jpeg", "JPEG"),
    ("webp", "WEBP"),
    ("bmp", "BMP"),
])
def test_export_writes_requested_format(tmp_path, texture_format, pil_format):
    path = tmp_path / f"Icon{get_extension_for_format(texture_format)}"
    ImageExporter(PillowImageDecoder()).export(texture(size=(8, 6)), path, texture_format)
    with Image.open(path) as img:
        assert img.format == pil_format
        assert img.size == (8, 6)


def test_encode_rejects_bad_pixel_buffer():
    exporter = ImageExporter(PillowImageDecoder())
    with pytest.raises(EncodeError):
        exporter.encode(np.zeros((2, 2, 7), dtype=np.uint8), "png")


def test_encode_rejects_unknown_format():
    exporter = ImageExporter(PillowImageDecoder())
    with pytest.raises(EncodeError):
        exporter.encode(np.zeros((2, 2, 4), dtype=np.uint8), "dds")


def test_export_does_not_write_on_decode_failure(tmp_path):
    path = tmp_path / "Broken.png"
    obj = LoadedObject(kind="Texture2D", name="Broken", data=b"junk")
    with pytest.raises(DecodeError):
        ImageExporter(PillowImageDecoder()).export(obj, path, "png")
    assert not path.exists()
