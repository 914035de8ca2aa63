"""BC1 (DXT1) texture decompressor"""
import numpy as np

from .base import TextureDecompressor
from .common import decode_color_block


class BC1Decompressor(TextureDecompressor):
    """
    BC1 (DXT1) texture decompressor

    BC1 stores 4x4 pixel blocks in 8 bytes each:
    - 2 bytes: color0 (RGB565)
    - 2 bytes: color1 (RGB565)
    - 4 bytes: 16 2-bit indices (one per pixel)

    Blocks with color0 <= color1 are in punch-through mode: index 2 is the
    midpoint and index 3 is transparent black.
    """
    block_size = 8

    def decode_blocks(self, blocks: np.ndarray) -> np.ndarray:
        return decode_color_block(blocks, 0, punch_through=True)
