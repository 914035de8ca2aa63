"""Command-line interface for skindds"""
import sys
import argparse
import logging
import time
import os
from typing import List, Optional

import imageio.v3 as iio
import numpy as np

from .dds import DDS
from .encoder import DDSEncoder
from .errors import DDSError, UnsupportedFormat


def _to_rgba(image: np.ndarray) -> np.ndarray:
    """Expand a grayscale, gray+alpha, RGB or RGBA image to uint8 (height, width, 4)"""
    if image.dtype == np.uint16:
        image = (image >> 8).astype(np.uint8)
    elif image.dtype != np.uint8:
        raise ValueError(f"Unsupported image sample type {image.dtype}, expected 8 or 16 bits")

    if image.ndim == 2:
        image = image[:, :, np.newaxis]
    if image.shape[2] in (1, 2):
        # L or LA
        image = image[:, :, [0, 0, 0] + list(range(1, image.shape[2]))]
    if image.shape[2] == 3:
        alpha = np.full(image.shape[:2] + (1,), 255, dtype=np.uint8)
        image = np.concatenate([image, alpha], axis=2)
    return np.ascontiguousarray(image[:, :, :4])


def decode_file(input_path: str, output_path: Optional[str]) -> bool:
    """Print the DDS report and optionally write the decoded image; False if writing failed"""
    with open(input_path, 'rb') as f:
        data = f.read()

    dds = DDS.from_bytes(data)
    print(dds)

    if output_path:
        print(f"\nConverting to image...")

        start_decompress = time.perf_counter()
        image_array = dds.to_image()
        decompress_time = time.perf_counter() - start_decompress

        start_save = time.perf_counter()
        try:
            iio.imwrite(output_path, image_array)
        except Exception as e:
            print(f"Error converting to image: {e}")
            return False
        save_time = time.perf_counter() - start_save

        print(f"Saved to: {output_path}")
        print(f"Image size: {image_array.shape[1]}x{image_array.shape[0]}")
        print(f"Decompression time: {decompress_time*1000:.2f} ms")
        print(f"Save time: {save_time*1000:.2f} ms")

    return True


def encode_file(input_path: str, output_path: Optional[str]) -> None:
    """Read an image with imageio and optionally write it as an uncompressed DDS"""
    image_array = _to_rgba(iio.imread(input_path))
    height, width = image_array.shape[:2]
    print(f"Image size: {width}x{height}")

    if output_path:
        start_encode = time.perf_counter()
        data = DDSEncoder().encode(width, height, image_array)
        encode_time = time.perf_counter() - start_encode

        with open(output_path, 'wb') as f:
            f.write(data)

        print(f"Saved to: {output_path} ({len(data)} bytes, BGRA 32-bit)")
        print(f"Encode time: {encode_time*1000:.2f} ms")


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line interface for skindds"""
    parser = argparse.ArgumentParser(
        description='Decode block-compressed DDS textures and write uncompressed DDS files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  skindds skin.dds                  # Display DDS file info
  skindds skin.dds -o skin.png      # Decode to PNG
  skindds skin.png -o skin.dds      # Encode to uncompressed BGRA DDS
        """
    )

    parser.add_argument('input', help='Input file path (.dds to decode, any image to encode)')
    parser.add_argument('-o', '--output', help='Output file path (e.g., output.png or output.dds)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    try:
        if os.path.splitext(args.input)[1].lower() == '.dds':
            if not decode_file(args.input, args.output):
                return 1
        else:
            encode_file(args.input, args.output)
    except FileNotFoundError:
        print(f"Error: File '{args.input}' not found")
        return 1
    except UnsupportedFormat as e:
        print(f"Cannot convert to image: {e}")
        return 1
    except DDSError as e:
        print(f"Error parsing DDS file: {e}")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
