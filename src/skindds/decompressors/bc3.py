"""BC3 (DXT5) texture decompressor"""
import numpy as np

from .base import TextureDecompressor
from .common import decode_color_block, decode_gradient_block


class BC3Decompressor(TextureDecompressor):
    """
    BC3 (DXT5) texture decompressor

    BC3 stores 4x4 pixel blocks in 16 bytes each:
    - 1 byte: alpha0 endpoint
    - 1 byte: alpha1 endpoint
    - 6 bytes: 16 3-bit alpha indices (48 bits total)
    - 8 bytes: BC1 color block, always in four-color mode
    """
    block_size = 16

    def decode_blocks(self, blocks: np.ndarray) -> np.ndarray:
        texels = decode_color_block(blocks, 8, punch_through=False)
        texels[:, :, 3] = decode_gradient_block(blocks, 0)
        return texels
