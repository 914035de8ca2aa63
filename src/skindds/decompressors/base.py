"""Base class for block decompression"""
from abc import ABC, abstractmethod

import numpy as np
from numba import jit

from ..errors import TruncatedData


@jit(nopython=True, cache=True)
def _scatter_blocks_jit(texels, output, blocks_x, width, height):
    """Copy decoded 4x4 tiles into the image, dropping texels past the edges"""
    num_blocks = texels.shape[0]
    for block_idx in range(num_blocks):
        x_start = (block_idx % blocks_x) * 4
        y_start = (block_idx // blocks_x) * 4

        for pixel_idx in range(16):
            out_y = y_start + pixel_idx // 4
            out_x = x_start + pixel_idx % 4

            if out_y < height and out_x < width:
                output[out_y, out_x, 0] = texels[block_idx, pixel_idx, 0]
                output[out_y, out_x, 1] = texels[block_idx, pixel_idx, 1]
                output[out_y, out_x, 2] = texels[block_idx, pixel_idx, 2]
                output[out_y, out_x, 3] = texels[block_idx, pixel_idx, 3]


class TextureDecompressor(ABC):
    """Base class for 4x4 block decompressors

    Subclasses set ``block_size`` and turn an array of raw blocks into
    sixteen RGBA texels per block; tiling and edge clipping live here.
    """
    block_size: int = 0

    @abstractmethod
    def decode_blocks(self, blocks: np.ndarray) -> np.ndarray:
        """
        Decode raw blocks to texels

        Args:
            blocks: uint8 array of shape (num_blocks, block_size)

        Returns:
            uint8 array of shape (num_blocks, 16, 4), texels in raster order
            within each tile, RGBA
        """

    def decompress(self, data: bytes, width: int, height: int) -> np.ndarray:
        """
        Decompress texture data to RGBA8

        Args:
            data: Block data, starting at the first block
            width: Texture width in pixels
            height: Texture height in pixels

        Returns:
            numpy array of shape (height, width, 4) with dtype uint8 (RGBA)

        Raises:
            TruncatedData: data holds fewer blocks than the image needs
        """
        blocks_x = (width + 3) // 4
        blocks_y = (height + 3) // 4
        num_blocks = blocks_x * blocks_y
        size = num_blocks * self.block_size

        if len(data) < size:
            raise TruncatedData(f"{blocks_x}x{blocks_y} blocks", size, len(data))

        output = np.zeros((height, width, 4), dtype=np.uint8)
        if num_blocks == 0:
            return output

        blocks = np.frombuffer(data, dtype=np.uint8, count=size).reshape(num_blocks, self.block_size)
        texels = np.ascontiguousarray(self.decode_blocks(blocks), dtype=np.uint8)

        _scatter_blocks_jit(texels, output, blocks_x, width, height)

        return output
