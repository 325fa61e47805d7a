from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Final


class PixelFormat(IntEnum):
    """In-memory pixel layouts understood by the BMP builder."""
    OTHER = 0     # Anything else (16-bit, float, YCbCr...), not packable
    GRAY8 = 1     # 1 byte/pixel intensity
    INDEXED8 = 2  # 1 byte/pixel index into a color table
    RGBA32 = 3    # 4 bytes/pixel, alpha-premultiplied
    NRGBA32 = 4   # 4 bytes/pixel, straight alpha


class ImageFormat(IntEnum):
    """File formats selected by extension."""
    JPEG = 0
    PNG = 1
    GIF = 2
    TIFF = 3
    BMP = 4


EXTENSIONS: Final[dict[str, ImageFormat]] = {
    ".jpg": ImageFormat.JPEG,
    ".jpeg": ImageFormat.JPEG,
    ".png": ImageFormat.PNG,
    ".gif": ImageFormat.GIF,
    ".tif": ImageFormat.TIFF,
    ".tiff": ImageFormat.TIFF,
    ".bmp": ImageFormat.BMP,
}

# Pillow plugin names, used when encoding to a stream
PIL_FORMAT_NAMES: Final[dict[ImageFormat, str]] = {
    ImageFormat.JPEG: "JPEG",
    ImageFormat.PNG: "PNG",
    ImageFormat.GIF: "GIF",
    ImageFormat.TIFF: "TIFF",
    ImageFormat.BMP: "BMP",
}

BYTES_PER_PIXEL: Final[dict[PixelFormat, int]] = {
    PixelFormat.GRAY8: 1,
    PixelFormat.INDEXED8: 1,
    PixelFormat.RGBA32: 4,
    PixelFormat.NRGBA32: 4,
}


def get_image_format(path: str | Path) -> ImageFormat | None:
    """Get the file format for a path's extension, if known."""
    return EXTENSIONS.get(Path(path).suffix.lower())
