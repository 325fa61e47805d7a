"""Data models for imgo."""

from .enums import (
    BYTES_PER_PIXEL,
    EXTENSIONS,
    ImageFormat,
    PixelFormat,
    get_image_format,
)
from .header import HEADER_SIZE, PALETTE_SIZE, BmpHeader
from .options import SaveOptions
from .raster import RasterImage

__all__ = [
    "BmpHeader",
    "BYTES_PER_PIXEL",
    "EXTENSIONS",
    "HEADER_SIZE",
    "ImageFormat",
    "PALETTE_SIZE",
    "PixelFormat",
    "RasterImage",
    "SaveOptions",
    "get_image_format",
]
