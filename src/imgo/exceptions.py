"""Exceptions raised by imgo."""

from __future__ import annotations


class ImgoError(Exception):
    """Base exception for all imgo errors."""


class NegativeBoundsError(ImgoError):
    """Source image reports a negative width or height."""


class UnsupportedFormatError(ImgoError):
    """Image or file format cannot be encoded."""


class ImageDecodeError(ImgoError):
    """Image bytes could not be decoded."""


class BmpHeaderError(ImgoError):
    """BMP header bytes are malformed."""
