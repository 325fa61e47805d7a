"""imgo: image file helpers and a zero-copy BMP packer.

  Thin layer over Pillow for reading, writing and transcoding images,
  plus a BMP header/pixel-buffer builder that works on raw rasters.
  """

from .colors import BLACK, is_black, to_string
from .encoding import (
    EncodedBitmap,
    convert_to_rgba,
    decode,
    encode,
    encode_bmp,
    encode_img,
    from_base64,
    get_size,
    read,
    read_png,
    save,
    save_to_jpeg,
    save_to_png,
    to_base64,
    write_bmp,
)
from .exceptions import (
    BmpHeaderError,
    ImageDecodeError,
    ImgoError,
    NegativeBoundsError,
    UnsupportedFormatError,
)
from .files import destroy, modified_time, rename
from .models import (
    BmpHeader,
    ImageFormat,
    PixelFormat,
    RasterImage,
    SaveOptions,
    get_image_format,
)

__version__ = "0.1.0"

__all__ = [
    # BMP builder
    "encode_img",
    "convert_to_rgba",
    "write_bmp",
    "encode_bmp",
    "EncodedBitmap",
    # Codecs
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
    # Exceptions
    "ImgoError",
    "NegativeBoundsError",
    "UnsupportedFormatError",
    "ImageDecodeError",
    "BmpHeaderError",
    # Models
    "BmpHeader",
    "RasterImage",
    "SaveOptions",
    # Enums
    "PixelFormat",
    "ImageFormat",
    "get_image_format",
    # Utilities
    "BLACK",
    "is_black",
    "to_string",
    "modified_time",
    "rename",
    "destroy",
]
