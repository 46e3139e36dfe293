#!/usr/bin/env python3
"""
Texture decoding and image export.
"""

import io
from abc import ABC, abstractmethod
from pathlib import Path

import numpy as np
from PIL import Image

from ..errors import DecodeError, EncodeError
from .objects import TEXTURE_KIND

# Canonical format name -> Pillow format
TEXTURE_FORMATS = {
    'png': 'PNG',
    'jpeg': 'JPEG',
    'webp': 'WEBP',
    'bmp': 'BMP',
    'gif': 'GIF',
    'ico': 'ICO',
    'tiff': 'TIFF',
}

FORMAT_ALIASES = {
    'jpg': 'jpeg',
    'tif': 'tiff',
}

# Formats that cannot store an alpha channel
OPAQUE_FORMATS = {'JPEG', 'BMP'}

DEFAULT_QUALITY = 90


def normalize_texture_format(name):
    """
    Return the canonical texture format name for user input.

    Raises:
        ValueError: If the format is not supported
    """
    key = name.strip().lower()
    key = FORMAT_ALIASES.get(key, key)
    if key not in TEXTURE_FORMATS:
        raise ValueError(f"Unsupported texture format: {name}. Supported formats are: {', '.join(TEXTURE_FORMATS)}")
    return key


def get_extension_for_format(texture_format):
    """Get the output file extension for a texture format."""
    return '.' + normalize_texture_format(texture_format)


class ImageDecoder(ABC):
    """Turns an image-bearing object into raw pixels."""

    @abstractmethod
    def supports(self, obj):
        """Whether obj is of a kind that can be decoded to pixels."""

    @abstractmethod
    def decode(self, obj):
        """Return the pixels of obj as a (height, width, 4) uint8 array."""


class PillowImageDecoder(ImageDecoder):
    """Decodes Texture2D objects whose data is a file Pillow can open."""

    IMAGE_KINDS = frozenset({TEXTURE_KIND})

    def supports(self, obj):
        return obj.kind in self.IMAGE_KINDS

    def decode(self, obj):
        if not obj.data:
            raise DecodeError(f"{obj.kind} {obj.name} has no pixel data", name=obj.name)
        try:
            with Image.open(io.BytesIO(obj.data)) as img:
                img.load()
                return np.array(img.convert('RGBA'), dtype=np.uint8)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise DecodeError(f"Could not decode {obj.kind} {obj.name}: {e}", name=obj.name) from e


class ImageExporter:
    """Decodes an object and writes it as an encoded image file."""

    def __init__(self, decoder, quality=DEFAULT_QUALITY):
        self.decoder = decoder
        self.quality = quality

    def supports(self, obj):
        return self.decoder.supports(obj)

    def encode(self, pixels, texture_format):
        """
        Encode a pixel array to image bytes.

        Raises:
            EncodeError: If the array or format is rejected
        """
        try:
            pil_format = TEXTURE_FORMATS[normalize_texture_format(texture_format)]
        except ValueError as e:
            raise EncodeError(str(e), format=texture_format) from e

        try:
            img = Image.fromarray(np.asarray(pixels, dtype=np.uint8))
            if pil_format in OPAQUE_FORMATS and img.mode != 'RGB':
                img = img.convert('RGB')
            buffer = io.BytesIO()
            img.save(buffer, format=pil_format, quality=self.quality)
        except (OSError, ValueError, TypeError, KeyError) as e:
            raise EncodeError(f"Could not encode image as {pil_format}: {e}", format=texture_format) from e
        return buffer.getvalue()

    def export(self, obj, path, texture_format):
        """
        Decode obj and write it to path in texture_format.

        Raises:
            DecodeError: If obj cannot produce pixel data
            EncodeError: If the pixels cannot be encoded
        """
        pixels = self.decoder.decode(obj)
        encoded = self.encode(pixels, texture_format)
        Path(path).write_bytes(encoded)
        return len(encoded)
