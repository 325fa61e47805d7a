"""Test RasterImage construction and row access."""

from __future__ import annotations

import pytest
from PIL import Image

from imgo.exceptions import UnsupportedFormatError
from imgo.models.enums import PixelFormat
from imgo.models.raster import RasterImage


class TestFromPil:
    """Test Pillow mode mapping."""

    @pytest.mark.parametrize(
        ("mode", "expected", "stride"),
        [
            ("L", PixelFormat.GRAY8, 3),
            ("P", PixelFormat.INDEXED8, 3),
            ("RGBA", PixelFormat.NRGBA32, 12),
            ("RGB", PixelFormat.OTHER, 9),
            ("I;16", PixelFormat.OTHER, 6),
        ],
    )
    def test_mode_mapping(self, mode, expected, stride):
        raster = RasterImage.from_pil(Image.new(mode, (3, 2)))

        assert raster.pixel_format == expected
        assert (raster.width, raster.height) == (3, 2)
        assert raster.stride == stride

    def test_palette_entries_get_full_alpha(self):
        image = Image.new("P", (1, 1))
        image.putpalette([255, 0, 0, 0, 255, 0])

        raster = RasterImage.from_pil(image)

        assert raster.palette[0] == (255, 0, 0, 255)
        assert raster.palette[1] == (0, 255, 0, 255)

    def test_pixel_bytes_are_row_major(self):
        image = Image.new("L", (2, 2))
        image.putpixel((1, 0), 7)
        image.putpixel((0, 1), 9)

        assert bytes(RasterImage.from_pil(image).pix) == bytes([0, 7, 9, 0])


class TestRows:
    """Test strided row views."""

    def test_rows_skip_padding(self):
        raster = RasterImage(2, 2, PixelFormat.GRAY8, bytes([1, 2, 0, 3, 4, 0]), 3)

        assert raster.rows().tolist() == [[1, 2], [3, 4]]

    def test_rows_reject_short_buffer(self):
        raster = RasterImage(2, 2, PixelFormat.GRAY8, bytes([1, 2, 3]), 2)

        with pytest.raises(ValueError, match="too short"):
            raster.rows()

    def test_rows_unavailable_for_other(self):
        with pytest.raises(UnsupportedFormatError):
            RasterImage(1, 1, PixelFormat.OTHER, bytes(3), 3).rows()


class TestOpacity:
    """Test the alpha scan."""

    def test_full_alpha_is_opaque(self):
        raster = RasterImage(2, 1, PixelFormat.NRGBA32, bytes([9, 9, 9, 255] * 2), 8)
        assert raster.is_opaque()

    def test_single_translucent_pixel(self):
        raster = RasterImage(
            2, 1, PixelFormat.RGBA32, bytes([9, 9, 9, 255, 9, 9, 9, 254]), 8,
        )
        assert not raster.is_opaque()

    def test_padding_bytes_are_ignored(self):
        """Stride padding with zero bytes must not count as alpha."""
        raster = RasterImage(1, 2, PixelFormat.NRGBA32, bytes([1, 1, 1, 255, 0, 0, 0, 0] * 2), 8)
        assert raster.is_opaque()

    def test_gray_is_always_opaque(self, gray_2x2):
        assert gray_2x2.is_opaque()


class TestToPil:
    """Test conversion back to Pillow."""

    def test_rgba_round_trip(self):
        source = Image.new("RGBA", (2, 1), (10, 20, 30, 40))

        image = RasterImage.from_pil(source).to_pil()

        assert image.mode == "RGBA"
        assert image.getpixel((1, 0)) == (10, 20, 30, 40)

    def test_strided_gray(self):
        raster = RasterImage(2, 2, PixelFormat.GRAY8, bytes([1, 2, 0, 3, 4, 0]), 3)

        image = raster.to_pil()

        assert [image.getpixel((x, y)) for y in range(2) for x in range(2)] == [1, 2, 3, 4]

    def test_indexed_keeps_palette(self):
        raster = RasterImage(
            1, 1, PixelFormat.INDEXED8, bytes([1]), 1, palette=((0, 0, 0), (5, 6, 7)),
        )

        assert raster.to_pil().convert("RGB").getpixel((0, 0)) == (5, 6, 7)

    def test_other_raises(self):
        with pytest.raises(UnsupportedFormatError, match="OTHER"):
            RasterImage(1, 1, PixelFormat.OTHER).to_pil()
