"""Shared fixtures for imgo unit tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from imgo.models.enums import PixelFormat
from imgo.models.raster import RasterImage


@pytest.fixture
def gray_2x2() -> RasterImage:
    """Opaque 2x2 gray image: 0, 64 / 128, 255."""
    return RasterImage(
        width=2,
        height=2,
        pixel_format=PixelFormat.GRAY8,
        pix=bytearray([0, 64, 128, 255]),
        stride=2,
    )


@pytest.fixture
def make_rgba() -> Callable[..., RasterImage]:
    """Factory for 4-byte rasters from a flat list of (r, g, b, a) pixels."""

    def _make(
        width: int,
        height: int,
        pixels: Sequence[tuple[int, int, int, int]],
        pixel_format: PixelFormat = PixelFormat.NRGBA32,
    ) -> RasterImage:
        pix = bytearray()
        for pixel in pixels:
            pix.extend(pixel)
        return RasterImage(
            width=width,
            height=height,
            pixel_format=pixel_format,
            pix=pix,
            stride=width * 4,
        )

    return _make
