"""Image file and byte I/O, dispatched by file extension."""

from __future__ import annotations

import base64
import binascii
import io
import logging
from pathlib import Path
from typing import BinaryIO, Final

from PIL import Image, UnidentifiedImageError

from ..exceptions import ImageDecodeError, UnsupportedFormatError
from ..models.enums import PIL_FORMAT_NAMES, ImageFormat, PixelFormat, get_image_format
from ..models.options import SaveOptions
from ..models.raster import RasterImage
from .bmp import write_bmp

_LOGGER = logging.getLogger(__name__)

# Pillow modes that collapse to 8-bit gray rather than RGB(A)
_GRAY_MODES: Final = frozenset({"1", "I", "I;16", "I;16L", "I;16B", "F"})


def _to_raster(image: Image.Image) -> RasterImage:
    """Snapshot an image, converting modes the BMP builder cannot pack."""
    raster = RasterImage.from_pil(image)
    if raster.pixel_format != PixelFormat.OTHER:
        return raster

    target = "L" if image.mode in _GRAY_MODES else "RGBA"
    _LOGGER.debug("Converting %s image to %s for BMP", image.mode, target)
    return RasterImage.from_pil(image.convert(target))


def _write(
    stream: BinaryIO,
    image: Image.Image,
    fmt: ImageFormat,
    options: SaveOptions | None,
) -> None:
    options = options or SaveOptions()

    if fmt == ImageFormat.BMP:
        write_bmp(stream, _to_raster(image))
        return

    params: dict[str, object] = {}
    if fmt == ImageFormat.JPEG:
        if image.mode not in ("L", "RGB"):
            image = image.convert("L" if image.mode in _GRAY_MODES else "RGB")
        params["quality"] = options.jpeg_quality
    elif fmt == ImageFormat.PNG:
        params["compress_level"] = options.png_compress_level
    elif fmt == ImageFormat.TIFF and options.tiff_compression:
        params["compression"] = options.tiff_compression

    image.save(stream, format=PIL_FORMAT_NAMES[fmt], **params)


def _format_for_path(path: str | Path) -> ImageFormat:
    fmt = get_image_format(path)
    if fmt is None:
        raise UnsupportedFormatError(
            f"Unsupported image extension: {Path(path).suffix or '(none)'!r}"
        )
    return fmt


def decode(data: bytes, fmt: ImageFormat | None = None) -> Image.Image:
    """Decode image bytes.

    Args:
        data: Encoded image
        fmt: Restrict decoding to this format; None sniffs the content

    Returns:
        Fully loaded Pillow image

    Raises:
        ImageDecodeError: If the bytes are not a decodable image
    """
    formats = [PIL_FORMAT_NAMES[fmt]] if fmt is not None else None
    try:
        image = Image.open(io.BytesIO(data), formats=formats)
        image.load()
    except (UnidentifiedImageError, OSError, SyntaxError) as err:
        raise ImageDecodeError(f"Cannot decode image: {err}") from err
    return image


def encode(
    image: Image.Image,
    fmt: ImageFormat = ImageFormat.PNG,
    options: SaveOptions | None = None,
) -> bytes:
    """Encode an image to bytes in the given format."""
    buffer = io.BytesIO()
    _write(buffer, image, fmt, options)
    return buffer.getvalue()


def read(path: str | Path) -> Image.Image:
    """Read an image file, picking the decoder from its extension.

    Unknown extensions fall back to content sniffing. Filesystem errors
    propagate unchanged.
    """
    with open(path, "rb") as fh:
        data = fh.read()
    fmt = get_image_format(path)
    _LOGGER.debug("Reading %s (%d bytes) as %s", path, len(data), fmt.name if fmt else "auto")
    return decode(data, fmt)


def read_png(path: str | Path) -> Image.Image:
    """Read a PNG file regardless of its extension."""
    with open(path, "rb") as fh:
        return decode(fh.read(), ImageFormat.PNG)


def save(
    path: str | Path,
    image: Image.Image,
    options: SaveOptions | None = None,
) -> None:
    """Save an image, picking the encoder from the path's extension.

    Raises:
        UnsupportedFormatError: If the extension is not a known format
    """
    fmt = _format_for_path(path)
    _LOGGER.info("Saving %dx%d %s image to %s as %s", *image.size, image.mode, path, fmt.name)
    with open(path, "wb") as fh:
        _write(fh, image, fmt, options)


def save_to_png(path: str | Path, image: Image.Image, options: SaveOptions | None = None) -> None:
    """Save as PNG regardless of the path's extension."""
    with open(path, "wb") as fh:
        _write(fh, image, ImageFormat.PNG, options)


def save_to_jpeg(path: str | Path, image: Image.Image, options: SaveOptions | None = None) -> None:
    """Save as JPEG regardless of the path's extension."""
    with open(path, "wb") as fh:
        _write(fh, image, ImageFormat.JPEG, options)


def to_base64(
    image: Image.Image,
    fmt: ImageFormat = ImageFormat.PNG,
    options: SaveOptions | None = None,
) -> str:
    """Encode an image and return it as a base64 string."""
    return base64.b64encode(encode(image, fmt, options)).decode("ascii")


def from_base64(text: str | bytes) -> Image.Image:
    """Decode a base64 string into an image.

    Whitespace (e.g. MIME line wrapping) is ignored.

    Raises:
        ImageDecodeError: If the text is not valid base64 or not an image
    """
    if isinstance(text, str):
        text = "".join(text.split())
    else:
        text = b"".join(text.split())
    try:
        data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as err:
        raise ImageDecodeError(f"Invalid base64 image data: {err}") from err
    return decode(data)


def get_size(path: str | Path) -> tuple[int, int]:
    """Read (width, height) from the file header without decoding pixels."""
    try:
        with Image.open(path) as image:
            return image.size
    except UnidentifiedImageError as err:
        raise ImageDecodeError(f"Cannot identify image {path}: {err}") from err
