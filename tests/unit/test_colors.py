"""Test black-pixel classification."""

from __future__ import annotations

import pytest
from PIL import Image

from imgo.colors import BLACK, is_black, to_string


class TestIsBlack:

    @pytest.mark.parametrize("color", [0, (0, 0, 0), (0, 0, 0, 255), BLACK])
    def test_black(self, color):
        assert is_black(color)

    @pytest.mark.parametrize("color", [1, (0, 0, 1), (0, 0, 0, 0), (255, 255, 255, 255)])
    def test_not_black(self, color):
        assert not is_black(color)

    def test_custom_reference(self):
        assert is_black((10, 10, 10), reference=10)
        assert not is_black(BLACK, reference=(10, 10, 10))

    def test_bad_color_raises(self):
        with pytest.raises(ValueError, match="Expected gray"):
            is_black((1, 2))


class TestToString:

    def test_renders_rows(self):
        image = Image.new("RGB", (3, 2), (255, 255, 255))
        image.putpixel((0, 0), (0, 0, 0))
        image.putpixel((2, 1), (0, 0, 0))

        assert to_string(image) == ".OO\nOO.\n"

    def test_transparent_black_is_not_black(self):
        image = Image.new("RGBA", (1, 1), (0, 0, 0, 0))
        assert to_string(image) == "O\n"

    def test_gray_image(self):
        image = Image.new("L", (2, 1), 0)
        assert to_string(image) == "..\n"
