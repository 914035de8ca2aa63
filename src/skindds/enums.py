"""DDS enumerations and flags"""
from enum import Enum, IntEnum, IntFlag


class DDSD(IntFlag):
    """DDS header flags (dwFlags)"""
    CAPS = 0x1
    HEIGHT = 0x2
    WIDTH = 0x4
    PITCH = 0x8
    PIXELFORMAT = 0x1000
    MIPMAPCOUNT = 0x20000
    LINEARSIZE = 0x80000
    DEPTH = 0x800000


class DDPF(IntFlag):
    """DDS pixel format flags (ddspf.dwFlags)"""
    ALPHAPIXELS = 0x1
    ALPHA = 0x2
    FOURCC = 0x4
    PALETTEINDEXED8 = 0x20
    RGB = 0x40
    YUV = 0x200
    LUMINANCE = 0x20000
    BUMPDUDV = 0x80000


class DDSCAPS(IntFlag):
    """DDS surface caps (dwCaps)"""
    COMPLEX = 0x8
    TEXTURE = 0x1000
    MIPMAP = 0x400000


class FourCC(IntEnum):
    """FourCC codes, stored little-endian ("DXT1" reads as 0x31545844)"""
    DXT1 = 0x31545844
    DXT3 = 0x33545844
    DXT5 = 0x35545844
    DX10 = 0x30315844


class DXGI_FORMAT(IntEnum):
    """DXGI format codes the DX10 header can name for block-compressed data"""
    UNKNOWN = 0
    BC1_TYPELESS = 70
    BC1_UNORM = 71
    BC1_UNORM_SRGB = 72
    BC2_TYPELESS = 73
    BC2_UNORM = 74
    BC2_UNORM_SRGB = 75
    BC3_TYPELESS = 76
    BC3_UNORM = 77
    BC3_UNORM_SRGB = 78
    BC4_TYPELESS = 79
    BC4_UNORM = 80
    BC4_SNORM = 81
    BC5_TYPELESS = 82
    BC5_UNORM = 83
    BC5_SNORM = 84
    B8G8R8A8_UNORM = 87
    BC6H_TYPELESS = 94
    BC6H_UF16 = 95
    BC6H_SF16 = 96
    BC7_TYPELESS = 97
    BC7_UNORM = 98
    BC7_UNORM_SRGB = 99


class BlockFormat(Enum):
    """Block-compressed formats this package can decode"""
    DXT1 = 'DXT1'
    DXT3 = 'DXT3'
    DXT5 = 'DXT5'
    BC4 = 'BC4'
    BC5 = 'BC5'

    @property
    def block_size(self) -> int:
        """Bytes consumed per 4x4 tile"""
        if self in (BlockFormat.DXT1, BlockFormat.BC4):
            return 8
        return 16
