"""Encoder settings passed to save/encode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_JPEG_QUALITY: Final = 75
DEFAULT_PNG_COMPRESS_LEVEL: Final = 6


@dataclass(frozen=True, slots=True)
class SaveOptions:
    """Per-format encoder knobs.

    Only the fields relevant to the chosen format are used; BMP and GIF
    take none.
    """

    jpeg_quality: int = DEFAULT_JPEG_QUALITY
    png_compress_level: int = DEFAULT_PNG_COMPRESS_LEVEL
    tiff_compression: str | None = None

    def __post_init__(self) -> None:
        if not 1 <= self.jpeg_quality <= 100:
            raise ValueError(
                f"jpeg_quality out of range: {self.jpeg_quality} (must be 1-100)"
            )
        if not 0 <= self.png_compress_level <= 9:
            raise ValueError(
                f"png_compress_level out of range: {self.png_compress_level} (must be 0-9)"
            )
