"""BC4 texture decompressor"""
import numpy as np

from .base import TextureDecompressor
from .common import decode_gradient_block


class BC4Decompressor(TextureDecompressor):
    """
    BC4 texture decompressor

    BC4 stores a single interpolated channel in 8-byte blocks laid out like
    the BC3 alpha block. The value is written to R, G and B with alpha 255.
    """
    block_size = 8

    def decode_blocks(self, blocks: np.ndarray) -> np.ndarray:
        values = decode_gradient_block(blocks, 0)

        texels = np.empty((blocks.shape[0], 16, 4), dtype=np.int64)
        texels[:, :, 0] = values
        texels[:, :, 1] = values
        texels[:, :, 2] = values
        texels[:, :, 3] = 255

        return texels
