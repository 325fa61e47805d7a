"""In-memory raster model consumed by the BMP builder."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
from PIL import Image

from ..exceptions import UnsupportedFormatError
from .enums import BYTES_PER_PIXEL, PixelFormat

# Pillow mode <-> pixel format. RGBA in Pillow is straight alpha, RGBa premultiplied.
_MODE_TO_FORMAT: dict[str, PixelFormat] = {
    "L": PixelFormat.GRAY8,
    "P": PixelFormat.INDEXED8,
    "RGBA": PixelFormat.NRGBA32,
    "RGBa": PixelFormat.RGBA32,
}
_FORMAT_TO_MODE: dict[PixelFormat, str] = {v: k for k, v in _MODE_TO_FORMAT.items()}


@dataclass
class RasterImage:
    """A 2D pixel grid backed by a flat byte buffer.

    Rows start every ``stride`` bytes in ``pix``; a row may carry padding
    past ``width * bytes_per_pixel``. ``palette`` holds RGB or RGBA tuples
    and is only meaningful for INDEXED8. ``opaque`` overrides the alpha scan
    done by :meth:`is_opaque` when set.
    """

    width: int
    height: int
    pixel_format: PixelFormat
    pix: bytes | bytearray | memoryview = b""
    stride: int = 0
    palette: Sequence[tuple[int, ...]] = field(default_factory=tuple)
    opaque: bool | None = None

    @classmethod
    def from_pil(cls, image: Image.Image) -> RasterImage:
        """Snapshot a Pillow image into a raster.

        Modes without a builder layout are tagged OTHER; their bytes are
        kept but never packed.
        """
        width, height = image.size
        pixel_format = _MODE_TO_FORMAT.get(image.mode, PixelFormat.OTHER)
        pix = image.tobytes()

        if pixel_format == PixelFormat.OTHER:
            stride = len(pix) // height if height else 0
        else:
            stride = width * BYTES_PER_PIXEL[pixel_format]

        palette: list[tuple[int, ...]] = []
        if pixel_format == PixelFormat.INDEXED8:
            raw = image.getpalette("RGB") or []
            palette = [
                (raw[i], raw[i + 1], raw[i + 2], 0xFF)
                for i in range(0, len(raw) - 2, 3)
            ]

        return cls(
            width=width,
            height=height,
            pixel_format=pixel_format,
            pix=pix,
            stride=stride,
            palette=tuple(palette),
        )

    def to_pil(self) -> Image.Image:
        """Build a Pillow image from the raster's rows."""
        mode = _FORMAT_TO_MODE.get(self.pixel_format)
        if mode is None:
            raise UnsupportedFormatError(
                f"Cannot convert {self.pixel_format.name} raster to a Pillow image"
            )

        if self.width == 0 or self.height == 0:
            image = Image.new(mode, (self.width, self.height))
        else:
            image = Image.frombytes(
                mode, (self.width, self.height), bytes(self.pix), "raw", mode, self.stride
            )

        if self.pixel_format == PixelFormat.INDEXED8 and self.palette:
            flat: list[int] = []
            for color in self.palette[:256]:
                flat.extend(c & 0xFF for c in color[:3])
            image.putpalette(flat)

        return image

    @property
    def bytes_per_pixel(self) -> int:
        """Bytes per pixel in ``pix`` (0 for OTHER)."""
        return BYTES_PER_PIXEL.get(self.pixel_format, 0)

    def rows(self) -> np.ndarray:
        """Zero-copy (height, width * bytes_per_pixel) view of the pixel rows.

        Raises:
            UnsupportedFormatError: For OTHER rasters
            ValueError: If ``pix`` is too short for the declared geometry
        """
        if self.pixel_format == PixelFormat.OTHER:
            raise UnsupportedFormatError("OTHER rasters have no known row layout")

        row_bytes = self.width * self.bytes_per_pixel
        if self.width <= 0 or self.height <= 0:
            return np.zeros((max(self.height, 0), max(row_bytes, 0)), dtype=np.uint8)

        buf = np.frombuffer(self.pix, dtype=np.uint8)
        needed = (self.height - 1) * self.stride + row_bytes
        if buf.size < needed:
            raise ValueError(
                f"Pixel buffer too short: {buf.size} bytes (need {needed})"
            )

        return np.lib.stride_tricks.as_strided(
            buf,
            shape=(self.height, row_bytes),
            strides=(self.stride, 1),
            writeable=False,
        )

    def is_opaque(self) -> bool:
        """Check whether every pixel has full alpha.

        Only 4-byte formats carry alpha; everything else reports opaque.
        """
        if self.opaque is not None:
            return self.opaque
        if self.pixel_format not in (PixelFormat.RGBA32, PixelFormat.NRGBA32):
            return True

        alpha = self.rows().reshape(max(self.height, 0), max(self.width, 0), 4)[..., 3]
        return bool(np.all(alpha == 0xFF))
