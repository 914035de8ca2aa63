"""BC5 texture decompressor"""
import numpy as np

from .base import TextureDecompressor
from .common import decode_gradient_block


class BC5Decompressor(TextureDecompressor):
    """
    BC5 texture decompressor

    BC5 is two BC4 blocks side by side (16 bytes per 4x4 block), typically
    the X and Y of a tangent-space normal map:
    - 8 bytes: red channel
    - 8 bytes: green channel

    Blue is 0 and alpha is 255.
    """
    block_size = 16

    def decode_blocks(self, blocks: np.ndarray) -> np.ndarray:
        texels = np.zeros((blocks.shape[0], 16, 4), dtype=np.int64)
        texels[:, :, 0] = decode_gradient_block(blocks, 0)
        texels[:, :, 1] = decode_gradient_block(blocks, 8)
        texels[:, :, 3] = 255

        return texels
