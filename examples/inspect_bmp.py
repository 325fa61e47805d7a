"""Show the BMP geometry imgo derives for an image and optionally write it.

Usage:
    uv run python examples/inspect_bmp.py photo.png
    uv run python examples/inspect_bmp.py photo.png --out photo.bmp
"""

from __future__ import annotations

import argparse
import logging

from imgo import RasterImage, encode_img, read, save


def _print_geometry(path: str, raster: RasterImage) -> None:
    """Print header fields and whether the pixels are packable."""
    encoded = encode_img(raster)
    header = encoded.header
    print(
        f"{path}: {header.width}x{header.height} format={raster.pixel_format.name} "
        f"bpp={header.bits_per_pixel} row_stride={encoded.row_stride} "
        f"image_size={header.image_size} file_size={header.file_size} "
        f"palette={'yes' if header.has_palette else 'no'}"
    )
    if not encoded.is_supported:
        print("  pixels: not packable as-is (will be converted on save)")
    elif header.bits_per_pixel == 24 and raster.bytes_per_pixel == 4:
        print("  pixels: 4 bytes/pixel source, repacked to BGR on save")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Inspect the BMP header imgo would write for an image."
    )
    parser.add_argument("path", help="Image to inspect (any format Pillow reads).")
    parser.add_argument("--out", help="Also save the image to this path (format by extension).")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    image = read(args.path)
    _print_geometry(args.path, RasterImage.from_pil(image))

    if args.out:
        save(args.out, image)
        print(f"Wrote {args.out}")


if __name__ == "__main__":
    main()
