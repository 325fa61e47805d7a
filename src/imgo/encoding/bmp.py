"""BMP header and pixel-buffer construction."""

from __future__ import annotations

import io
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import BinaryIO, Final

import numpy as np

from ..exceptions import NegativeBoundsError, UnsupportedFormatError
from ..models.enums import PixelFormat
from ..models.header import HEADER_SIZE, BmpHeader
from ..models.raster import RasterImage

_LOGGER = logging.getLogger(__name__)

_U32_MASK: Final = 0xFFFFFFFF


def _ceil4(n: int) -> int:
    return (n + 3) & ~3


def _gray_palette() -> bytes:
    ramp = np.arange(256, dtype=np.uint8)
    table = np.empty((256, 4), dtype=np.uint8)
    table[:, 0] = ramp  # B
    table[:, 1] = ramp  # G
    table[:, 2] = ramp  # R
    table[:, 3] = 0xFF
    return table.tobytes()


_GRAY_PALETTE: Final = _gray_palette()


def _indexed_palette(colors: Sequence[tuple[int, ...]]) -> bytes:
    """Build a 256-entry BGRA table; unused entries stay (0, 0, 0, 0).

    Source alpha is dropped, not premultiplied: (255, 0, 0, 128) is stored
    as full red with alpha 255.
    """
    table = np.zeros((256, 4), dtype=np.uint8)
    for i, color in enumerate(colors[:256]):
        r, g, b = color[0], color[1], color[2]
        table[i] = (b & 0xFF, g & 0xFF, r & 0xFF, 0xFF)
    return table.tobytes()


@dataclass(frozen=True)
class EncodedBitmap:
    """Everything a writer needs: header, palette, and pixel rows.

    ``stride`` is the distance between rows in ``pix``; ``row_stride`` is
    the padded row size the header declares. They only agree for repacked
    output.
    """

    pix: memoryview
    stride: int
    row_stride: int
    header: BmpHeader
    palette: bytes = b""

    @property
    def is_supported(self) -> bool:
        """False when the source has pixels but no packable layout."""
        if self.header.width == 0 or self.header.height == 0:
            return True
        return len(self.pix) > 0


def encode_img(image: RasterImage, repack: bool = False) -> EncodedBitmap:
    """Compute the BMP header, palette, and pixel buffer for a raster.

    By default the returned ``pix`` is a zero-copy view of ``image.pix``
    with the source's own stride and channel order. For opaque RGBA
    sources this means the header declares 24 bpp while the bytes are
    still 4 per pixel. Pass ``repack=True`` to get rows copied into the
    declared layout (BGR/BGRA, padded to ``row_stride``).

    Args:
        image: Source raster
        repack: Copy pixels into the layout the header declares

    Returns:
        EncodedBitmap; ``pix`` is empty for zero-area or OTHER sources

    Raises:
        NegativeBoundsError: If the image reports negative width or height
    """
    width, height = image.width, image.height
    if width < 0 or height < 0:
        raise NegativeBoundsError(f"imgo: negative bounds {width}x{height}")

    pixel_format = image.pixel_format
    palette = b""

    if pixel_format == PixelFormat.GRAY8:
        row_stride = _ceil4(width)
        bits_per_pixel = 8
        palette = _GRAY_PALETTE
    elif pixel_format == PixelFormat.INDEXED8:
        row_stride = _ceil4(width)
        bits_per_pixel = 8
        palette = _indexed_palette(image.palette)
    elif pixel_format in (PixelFormat.RGBA32, PixelFormat.NRGBA32):
        if image.is_opaque():
            row_stride = _ceil4(3 * width)
            bits_per_pixel = 24
        else:
            row_stride = 4 * width
            bits_per_pixel = 32
    else:
        # Size a hypothetical 24-bit encoding so callers can still report it
        row_stride = _ceil4(3 * width)
        bits_per_pixel = 24

    pixel_offset = HEADER_SIZE + len(palette)
    # Size fields wrap at 32 bits; oversized images still get a header
    image_size = (height * row_stride) & _U32_MASK
    header = BmpHeader(
        file_size=(pixel_offset + image_size) & _U32_MASK,
        pixel_offset=pixel_offset,
        width=width,
        height=height,
        bits_per_pixel=bits_per_pixel,
        image_size=image_size,
    )

    _LOGGER.debug(
        "BMP geometry for %s %dx%d: %d bpp, row_stride=%d, image_size=%d",
        pixel_format.name,
        width,
        height,
        bits_per_pixel,
        row_stride,
        image_size,
    )

    if width == 0 or height == 0:
        return EncodedBitmap(memoryview(b""), 0, row_stride, header, palette)

    if pixel_format == PixelFormat.OTHER:
        _LOGGER.debug("No BMP pixel layout for %s, returning empty buffer", pixel_format.name)
        return EncodedBitmap(memoryview(b""), 0, row_stride, header, palette)

    if repack:
        packed = _repack(image, bits_per_pixel, row_stride)
        return EncodedBitmap(memoryview(packed), row_stride, row_stride, header, palette)

    return EncodedBitmap(memoryview(image.pix), image.stride, row_stride, header, palette)


def _repack(image: RasterImage, bits_per_pixel: int, row_stride: int) -> bytes:
    """Copy rows into BMP channel order, padded to row_stride. Rows stay top-down."""
    rows = image.rows()
    height, width = image.height, image.width

    if bits_per_pixel == 8:
        packed = rows
    else:
        px = rows.reshape(height, width, 4)
        if bits_per_pixel == 24:
            packed = px[..., 2::-1].reshape(height, width * 3)  # RGBA -> BGR
        else:
            packed = px[..., [2, 1, 0, 3]].reshape(height, width * 4)  # RGBA -> BGRA

    output = np.zeros((height, row_stride), dtype=np.uint8)
    output[:, :packed.shape[1]] = packed
    return output.tobytes()


def convert_to_rgba(image: RasterImage) -> RasterImage:
    """View a raster's pixel buffer as RGBA32 without copying.

    The bytes are reinterpreted as-is, so the result only holds real RGBA
    data when the source is already RGBA32/NRGBA32. Gray, indexed, and
    OTHER sources produce a raster whose buffer does not match its format.
    """
    encoded = encode_img(image)
    return RasterImage(
        width=image.width,
        height=image.height,
        pixel_format=PixelFormat.RGBA32,
        pix=encoded.pix,
        stride=encoded.stride,
    )


def write_bmp(stream: BinaryIO, image: RasterImage) -> int:
    """Write a complete BMP file (header, palette, bottom-up rows) to a stream.

    Returns:
        Number of bytes written

    Raises:
        NegativeBoundsError: If the image reports negative bounds
        UnsupportedFormatError: If the raster has no packable layout
    """
    encoded = encode_img(image, repack=True)
    if not encoded.is_supported:
        raise UnsupportedFormatError(
            f"Cannot pack {image.pixel_format.name} raster as BMP"
        )

    written = stream.write(encoded.header.to_bytes())
    written += stream.write(encoded.palette)

    # BMP stores the bottom row first
    row_stride = encoded.row_stride
    for y in range(encoded.header.height - 1, -1, -1):
        written += stream.write(encoded.pix[y * row_stride:(y + 1) * row_stride])

    _LOGGER.debug("Wrote BMP: %d bytes", written)
    return written


def encode_bmp(image: RasterImage) -> bytes:
    """Encode a raster to BMP file bytes."""
    buffer = io.BytesIO()
    write_bmp(buffer, image)
    return buffer.getvalue()
