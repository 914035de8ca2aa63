"""Uncompressed DDS writer"""
import logging

import numpy as np

from .enums import DDPF, DDSCAPS, DDSD
from .headers import DDS_HEADER, DDS_MAGIC

logger = logging.getLogger(__name__)

# RGBA input -> BGRA output
_BGRA_ORDER = [2, 1, 0, 3]


def _as_pixels(rgba, width: int, height: int) -> np.ndarray:
    """Coerce an RGBA buffer to a flat uint8 array of width*height*4 bytes"""
    if isinstance(rgba, np.ndarray):
        if rgba.dtype != np.uint8:
            raise ValueError(f"Expected uint8 RGBA samples, got {rgba.dtype}")
        pixels = rgba.reshape(-1)
    elif isinstance(rgba, (bytes, bytearray, memoryview)):
        pixels = np.frombuffer(rgba, dtype=np.uint8)
    else:
        pixels = np.asarray(rgba, dtype=np.uint8).reshape(-1)

    expected = width * height * 4
    if pixels.size != expected:
        raise ValueError(
            f"Expected {expected} bytes of RGBA data for {width}x{height}, got {pixels.size}"
        )
    return pixels


class DDSEncoder:
    """Writes 32-bit BGRA (A8R8G8B8) DDS files with a single mipmap level"""

    @staticmethod
    def build_header(width: int, height: int) -> DDS_HEADER:
        header = DDS_HEADER()
        header.dwFlags = DDSD.CAPS | DDSD.HEIGHT | DDSD.WIDTH | DDSD.PIXELFORMAT
        header.dwHeight = height
        header.dwWidth = width
        header.dwPitchOrLinearSize = width * 4

        header.ddspf.dwFlags = DDPF.RGB | DDPF.ALPHAPIXELS
        header.ddspf.dwFourCC = 0
        header.ddspf.dwRGBBitCount = 32
        header.ddspf.dwRBitMask = 0x00FF0000
        header.ddspf.dwGBitMask = 0x0000FF00
        header.ddspf.dwBBitMask = 0x000000FF
        header.ddspf.dwABitMask = 0xFF000000

        header.dwCaps = DDSCAPS.TEXTURE
        return header

    def encode(self, width: int, height: int, rgba) -> bytes:
        """
        Encode RGBA8 pixels as an uncompressed DDS file

        Args:
            width: Image width in pixels
            height: Image height in pixels
            rgba: width*height*4 bytes, RGBA, row-major and top-down. Accepts
                bytes-like objects, sequences of ints or numpy arrays

        Returns:
            128-byte header followed by the pixels in B, G, R, A order
        """
        pixels = _as_pixels(rgba, width, height)
        body = pixels.reshape(-1, 4)[:, _BGRA_ORDER].tobytes()

        header = self.build_header(width, height)
        output = DDS_MAGIC.to_bytes(4, 'little') + header.to_bytes() + body

        logger.debug("Encoded %dx%d BGRA DDS, %d bytes", width, height, len(output))
        return output

    def encode_image(self, image) -> bytes:
        """Encode anything with ``width``, ``height`` and RGBA ``data`` (e.g. DecodedImage)"""
        return self.encode(image.width, image.height, image.data)


def encode(width: int, height: int, rgba) -> bytes:
    """Encode RGBA8 pixels as an uncompressed 32-bit BGRA DDS file"""
    return DDSEncoder().encode(width, height, rgba)
