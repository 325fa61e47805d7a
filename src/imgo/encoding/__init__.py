"""Image encoding and file I/O."""

from .bmp import EncodedBitmap, convert_to_rgba, encode_bmp, encode_img, write_bmp
from .codecs import (
    decode,
    encode,
    from_base64,
    get_size,
    read,
    read_png,
    save,
    save_to_jpeg,
    save_to_png,
    to_base64,
)

__all__ = [
    "EncodedBitmap",
    "encode_img",
    "convert_to_rgba",
    "write_bmp",
    "encode_bmp",
    "read",
    "read_png",
    "save",
    "save_to_png",
    "save_to_jpeg",
    "decode",
    "encode",
    "to_base64",
    "from_base64",
    "get_size",
]
