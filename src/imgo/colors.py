"""Black/foreground pixel classification."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

import numpy as np
from PIL import Image

BLACK: Final[tuple[int, int, int, int]] = (0, 0, 0, 255)

Color = int | Sequence[int]


def _as_rgba(color: Color) -> tuple[int, int, int, int]:
    """Normalize a gray value, RGB triple, or RGBA quadruple. Missing alpha is 255."""
    if isinstance(color, int):
        return (color, color, color, 0xFF)
    if len(color) == 3:
        r, g, b = color
        return (r, g, b, 0xFF)
    if len(color) == 4:
        r, g, b, a = color
        return (r, g, b, a)
    raise ValueError(f"Expected gray, RGB or RGBA color, got {color!r}")


def is_black(color: Color, reference: Color = BLACK) -> bool:
    """Check whether a color equals the reference black."""
    return _as_rgba(color) == _as_rgba(reference)


def to_string(image: Image.Image, reference: Color = BLACK) -> str:
    """Render an image as text: '.' for black pixels, 'O' otherwise, one line per row."""
    pixels = np.array(image.convert("RGBA"))
    mask = np.all(pixels == np.array(_as_rgba(reference), dtype=np.uint8), axis=-1)
    return "".join(
        "".join("." if black else "O" for black in row) + "\n"
        for row in mask
    )
