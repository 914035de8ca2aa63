"""BC2 (DXT3) texture decompressor"""
import numpy as np

from .base import TextureDecompressor
from .common import decode_color_block, read_uint

_NIBBLE_SHIFTS = np.arange(8, dtype=np.int64) * 4


class BC2Decompressor(TextureDecompressor):
    """
    BC2 (DXT3) texture decompressor

    BC2 stores 4x4 pixel blocks in 16 bytes each:
    - 8 bytes: explicit alpha, one u16 per row, 4 bits per pixel with the
      leftmost pixel in the lowest nibble
    - 8 bytes: BC1 color block, always in four-color mode
    """
    block_size = 16

    def decode_blocks(self, blocks: np.ndarray) -> np.ndarray:
        texels = decode_color_block(blocks, 8, punch_through=False)

        # Rows 0-1 and rows 2-3, eight nibbles each
        upper = (read_uint(blocks, 0, 4)[:, None] >> _NIBBLE_SHIFTS) & 0xF
        lower = (read_uint(blocks, 4, 4)[:, None] >> _NIBBLE_SHIFTS) & 0xF
        texels[:, :, 3] = np.concatenate([upper, lower], axis=1) * 17

        return texels
