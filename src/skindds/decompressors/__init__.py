"""Texture decompressor implementations"""
from ..enums import BlockFormat
from .base import TextureDecompressor
from .bc1 import BC1Decompressor
from .bc2 import BC2Decompressor
from .bc3 import BC3Decompressor
from .bc4 import BC4Decompressor
from .bc5 import BC5Decompressor

DECOMPRESSORS = {
    BlockFormat.DXT1: BC1Decompressor,
    BlockFormat.DXT3: BC2Decompressor,
    BlockFormat.DXT5: BC3Decompressor,
    BlockFormat.BC4: BC4Decompressor,
    BlockFormat.BC5: BC5Decompressor,
}


def get_decompressor(block_format: BlockFormat) -> TextureDecompressor:
    """Return a decompressor instance for ``block_format``"""
    return DECOMPRESSORS[block_format]()


__all__ = [
    'TextureDecompressor',
    'BC1Decompressor',
    'BC2Decompressor',
    'BC3Decompressor',
    'BC4Decompressor',
    'BC5Decompressor',
    'DECOMPRESSORS',
    'get_decompressor',
]
