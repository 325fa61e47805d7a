"""BMP file header (14 bytes) + BITMAPINFOHEADER (40 bytes)."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Final

from ..exceptions import BmpHeaderError

SIGNATURE: Final = b"BM"
FILE_HEADER_SIZE: Final = 14
DIB_HEADER_SIZE: Final = 40
HEADER_SIZE: Final = FILE_HEADER_SIZE + DIB_HEADER_SIZE
PALETTE_SIZE: Final = 256 * 4

# Little-endian, no padding between fields
_HEADER_STRUCT: Final = struct.Struct("<2sIHHIIIIHHIIIIII")


def _check_u16(name: str, value: int) -> None:
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"{name} out of range: {value} (must be 0-65535)")


def _check_u32(name: str, value: int) -> None:
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"{name} out of range: {value} (must fit in uint32)")


@dataclass(frozen=True, slots=True)
class BmpHeader:
    """Classic 54-byte BMP header.

    Layout (little-endian):
        [sig:2][file_size:4][reserved:2+2][pixel_offset:4]
        [dib_size:4][width:4][height:4][planes:2][bpp:2][compression:4]
        [image_size:4][x_ppm:4][y_ppm:4][colors_used:4][colors_important:4]
    """

    file_size: int
    pixel_offset: int
    width: int
    height: int
    bits_per_pixel: int
    image_size: int
    signature: bytes = SIGNATURE
    reserved1: int = 0
    reserved2: int = 0
    dib_header_size: int = DIB_HEADER_SIZE
    color_planes: int = 1
    compression: int = 0
    x_pixels_per_meter: int = 0
    y_pixels_per_meter: int = 0
    colors_used: int = 0
    colors_important: int = 0

    def __post_init__(self) -> None:
        if len(self.signature) != 2:
            raise ValueError(f"signature must be 2 bytes, got {len(self.signature)}")
        for name in ("reserved1", "reserved2", "color_planes", "bits_per_pixel"):
            _check_u16(name, getattr(self, name))
        for name in (
            "file_size", "pixel_offset", "dib_header_size", "width", "height",
            "compression", "image_size", "x_pixels_per_meter",
            "y_pixels_per_meter", "colors_used", "colors_important",
        ):
            _check_u32(name, getattr(self, name))

    @property
    def has_palette(self) -> bool:
        """True when a 1024-byte color table follows the header."""
        return self.bits_per_pixel == 8

    def to_bytes(self) -> bytes:
        """Serialize to exactly 54 bytes."""
        return _HEADER_STRUCT.pack(
            self.signature,
            self.file_size,
            self.reserved1,
            self.reserved2,
            self.pixel_offset,
            self.dib_header_size,
            self.width,
            self.height,
            self.color_planes,
            self.bits_per_pixel,
            self.compression,
            self.image_size,
            self.x_pixels_per_meter,
            self.y_pixels_per_meter,
            self.colors_used,
            self.colors_important,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> BmpHeader:
        """Parse the first 54 bytes of a BMP file.

        Raises:
            BmpHeaderError: If data is short, unsigned, or not a 40-byte DIB header
        """
        if len(data) < HEADER_SIZE:
            raise BmpHeaderError(
                f"Header too short: {len(data)} bytes (need {HEADER_SIZE})"
            )

        (
            signature, file_size, reserved1, reserved2, pixel_offset,
            dib_header_size, width, height, color_planes, bits_per_pixel,
            compression, image_size, x_ppm, y_ppm, colors_used, colors_important,
        ) = _HEADER_STRUCT.unpack_from(data)

        if signature != SIGNATURE:
            raise BmpHeaderError(f"Bad signature: {signature!r}")
        if dib_header_size != DIB_HEADER_SIZE:
            raise BmpHeaderError(
                f"Unsupported DIB header size: {dib_header_size} (expected {DIB_HEADER_SIZE})"
            )

        return cls(
            file_size=file_size,
            pixel_offset=pixel_offset,
            width=width,
            height=height,
            bits_per_pixel=bits_per_pixel,
            image_size=image_size,
            signature=signature,
            reserved1=reserved1,
            reserved2=reserved2,
            dib_header_size=dib_header_size,
            color_planes=color_planes,
            compression=compression,
            x_pixels_per_meter=x_ppm,
            y_pixels_per_meter=y_ppm,
            colors_used=colors_used,
            colors_important=colors_important,
        )
