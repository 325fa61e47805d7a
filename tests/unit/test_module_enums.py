"""Test enum values and extension lookup."""

import pytest

from imgo.models.enums import (
    BYTES_PER_PIXEL,
    EXTENSIONS,
    ImageFormat,
    PixelFormat,
    get_image_format,
)


class TestPixelFormat:

    def test_values(self):
        assert PixelFormat.OTHER == 0
        assert PixelFormat.GRAY8 == 1
        assert PixelFormat.INDEXED8 == 2
        assert PixelFormat.RGBA32 == 3
        assert PixelFormat.NRGBA32 == 4

    def test_bytes_per_pixel(self):
        assert BYTES_PER_PIXEL[PixelFormat.GRAY8] == 1
        assert BYTES_PER_PIXEL[PixelFormat.NRGBA32] == 4
        assert PixelFormat.OTHER not in BYTES_PER_PIXEL


class TestGetImageFormat:

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("a.jpg", ImageFormat.JPEG),
            ("a.JPEG", ImageFormat.JPEG),
            ("dir.v2/a.png", ImageFormat.PNG),
            ("a.gif", ImageFormat.GIF),
            ("a.tif", ImageFormat.TIFF),
            ("a.Bmp", ImageFormat.BMP),
        ],
    )
    def test_known(self, path, expected):
        assert get_image_format(path) == expected

    @pytest.mark.parametrize("path", ["a.webp", "a", "a.png.bak"])
    def test_unknown(self, path):
        assert get_image_format(path) is None

    def test_every_format_has_an_extension(self):
        assert set(EXTENSIONS.values()) == set(ImageFormat)
