"""DDS header structures and the header parser"""
import logging
import struct
from dataclasses import dataclass
from typing import List

from .enums import DDPF, DDSD, DDSCAPS, BlockFormat, DXGI_FORMAT, FourCC
from .errors import (
    BC7_GUIDANCE,
    InvalidContainer,
    UnsupportedDxgiFormat,
    UnsupportedFormat,
    UnsupportedFourCC,
    UnsupportedPixelFormat,
)
from .reader import ByteReader

logger = logging.getLogger(__name__)

DDS_MAGIC = 0x20534444  # "DDS "
HEADER_SIZE = 124
DX10_HEADER_SIZE = 20
DATA_OFFSET = 4 + HEADER_SIZE  # 128
DX10_DATA_OFFSET = DATA_OFFSET + DX10_HEADER_SIZE  # 148

_FOURCC_FORMATS = {
    FourCC.DXT1: BlockFormat.DXT1,
    FourCC.DXT3: BlockFormat.DXT3,
    FourCC.DXT5: BlockFormat.DXT5,
}

_DXGI_FORMATS = {
    DXGI_FORMAT.BC1_UNORM: BlockFormat.DXT1,
    DXGI_FORMAT.BC1_UNORM_SRGB: BlockFormat.DXT1,
    DXGI_FORMAT.BC2_UNORM: BlockFormat.DXT3,
    DXGI_FORMAT.BC2_UNORM_SRGB: BlockFormat.DXT3,
    DXGI_FORMAT.BC3_UNORM: BlockFormat.DXT5,
    DXGI_FORMAT.BC3_UNORM_SRGB: BlockFormat.DXT5,
    DXGI_FORMAT.BC4_UNORM: BlockFormat.BC4,
    DXGI_FORMAT.BC5_UNORM: BlockFormat.BC5,
}

_BC7_FORMATS = (DXGI_FORMAT.BC7_UNORM, DXGI_FORMAT.BC7_UNORM_SRGB)


class DDS_PIXELFORMAT:
    """DDS Pixel Format structure (32 bytes)"""
    def __init__(self) -> None:
        self.dwSize: int = 32  # Size of structure (always 32)
        self.dwFlags: DDPF = DDPF(0)  # Which members are valid
        self.dwFourCC: int = 0  # FourCC code when DDPF.FOURCC is set
        self.dwRGBBitCount: int = 0  # Bits per pixel for uncompressed data
        self.dwRBitMask: int = 0
        self.dwGBitMask: int = 0
        self.dwBBitMask: int = 0
        self.dwABitMask: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DDS_PIXELFORMAT':
        """Read DDS_PIXELFORMAT from 32 bytes of data"""
        if len(data) < 32:
            raise ValueError(f"Expected 32 bytes for DDS_PIXELFORMAT, got {len(data)}")

        pixelformat = cls()
        values = struct.unpack('<8I', data[:32])
        pixelformat.dwSize = values[0]
        pixelformat.dwFlags = DDPF(values[1])
        pixelformat.dwFourCC = values[2]
        pixelformat.dwRGBBitCount = values[3]
        pixelformat.dwRBitMask = values[4]
        pixelformat.dwGBitMask = values[5]
        pixelformat.dwBBitMask = values[6]
        pixelformat.dwABitMask = values[7]

        return pixelformat

    def to_bytes(self) -> bytes:
        """Serialize to 32 bytes"""
        return struct.pack(
            '<8I',
            self.dwSize,
            int(self.dwFlags),
            self.dwFourCC,
            self.dwRGBBitCount,
            self.dwRBitMask,
            self.dwGBitMask,
            self.dwBBitMask,
            self.dwABitMask,
        )


class DDS_HEADER:
    """DDS Header structure (124 bytes, follows the 4-byte magic)"""
    def __init__(self) -> None:
        self.dwSize: int = HEADER_SIZE
        self.dwFlags: DDSD = DDSD(0)
        self.dwHeight: int = 0
        self.dwWidth: int = 0
        self.dwPitchOrLinearSize: int = 0
        self.dwDepth: int = 0
        self.dwMipMapCount: int = 0
        self.dwReserved1: List[int] = [0] * 11
        self.ddspf: DDS_PIXELFORMAT = DDS_PIXELFORMAT()
        self.dwCaps: DDSCAPS = DDSCAPS(0)
        self.dwCaps2: int = 0
        self.dwCaps3: int = 0
        self.dwCaps4: int = 0
        self.dwReserved2: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DDS_HEADER':
        """Read DDS_HEADER from 124 bytes of data"""
        if len(data) < HEADER_SIZE:
            raise ValueError(f"Expected {HEADER_SIZE} bytes for DDS_HEADER, got {len(data)}")

        header = cls()

        # 7 DWORDs + 11 reserved DWORDs
        values = struct.unpack('<18I', data[:72])
        header.dwSize = values[0]
        header.dwFlags = DDSD(values[1])
        header.dwHeight = values[2]
        header.dwWidth = values[3]
        header.dwPitchOrLinearSize = values[4]
        header.dwDepth = values[5]
        header.dwMipMapCount = values[6]
        header.dwReserved1 = list(values[7:18])

        header.ddspf = DDS_PIXELFORMAT.from_bytes(data[72:104])

        caps = struct.unpack('<5I', data[104:124])
        header.dwCaps = DDSCAPS(caps[0])
        header.dwCaps2 = caps[1]
        header.dwCaps3 = caps[2]
        header.dwCaps4 = caps[3]
        header.dwReserved2 = caps[4]

        return header

    def to_bytes(self) -> bytes:
        """Serialize to 124 bytes"""
        return b''.join((
            struct.pack(
                '<7I',
                self.dwSize,
                int(self.dwFlags),
                self.dwHeight,
                self.dwWidth,
                self.dwPitchOrLinearSize,
                self.dwDepth,
                self.dwMipMapCount,
            ),
            struct.pack('<11I', *self.dwReserved1),
            self.ddspf.to_bytes(),
            struct.pack(
                '<5I',
                int(self.dwCaps),
                self.dwCaps2,
                self.dwCaps3,
                self.dwCaps4,
                self.dwReserved2,
            ),
        ))


class DDS_HEADER_DXT10:
    """DDS DX10 Extended Header structure (20 bytes)"""
    def __init__(self) -> None:
        self.dxgiFormat: int = DXGI_FORMAT.UNKNOWN  # Raw code, may be outside DXGI_FORMAT
        self.resourceDimension: int = 0
        self.miscFlag: int = 0
        self.arraySize: int = 0
        self.miscFlags2: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DDS_HEADER_DXT10':
        """Read DDS_HEADER_DXT10 from 20 bytes of data"""
        if len(data) < DX10_HEADER_SIZE:
            raise ValueError(f"Expected {DX10_HEADER_SIZE} bytes for DDS_HEADER_DXT10, got {len(data)}")

        header10 = cls()
        values = struct.unpack('<5I', data[:DX10_HEADER_SIZE])
        header10.dxgiFormat = values[0]
        header10.resourceDimension = values[1]
        header10.miscFlag = values[2]
        header10.arraySize = values[3]
        header10.miscFlags2 = values[4]

        return header10

    def format_name(self) -> str:
        try:
            return DXGI_FORMAT(self.dxgiFormat).name
        except ValueError:
            return f"DXGI {self.dxgiFormat}"


@dataclass(frozen=True)
class DDSHeader:
    """What the block decoders need from a parsed DDS header"""
    width: int
    height: int
    mipmap_count: int
    format: BlockFormat
    data_offset: int

    @property
    def blocks_x(self) -> int:
        return (self.width + 3) // 4

    @property
    def blocks_y(self) -> int:
        return (self.height + 3) // 4

    @property
    def data_size(self) -> int:
        """Bytes of block data in the top mipmap level"""
        return self.blocks_x * self.blocks_y * self.format.block_size


def _resolve_dxgi(code: int) -> BlockFormat:
    if code in _DXGI_FORMATS:
        return _DXGI_FORMATS[code]
    if code in _BC7_FORMATS:
        raise UnsupportedFormat('BC7', BC7_GUIDANCE)
    raise UnsupportedDxgiFormat(code)


def parse_header(data: bytes) -> DDSHeader:
    """
    Parse the fixed DDS header and resolve the block format.

    Fields are read at their absolute file offsets (height at 12, width at
    16, flags at 20, mipmap count at 28, pixel format flags at 80, FourCC
    at 84, DXGI format at 128).

    Args:
        data: The whole DDS file, or at least its headers

    Returns:
        DDSHeader with the block format and the offset of the first block

    Raises:
        InvalidContainer: Magic is not "DDS "
        TruncatedData: Data ends inside a header field
        UnsupportedPixelFormat: Pixel format has no FourCC
        UnsupportedFourCC: FourCC is not DXT1, DXT3, DXT5 or DX10
        UnsupportedFormat: DX10 header names BC7
        UnsupportedDxgiFormat: DX10 header names another unsupported format
    """
    reader = ByteReader(data)

    # Anything shorter than the magic is not a DDS file
    magic = bytes(reader.data[:4])
    if magic != DDS_MAGIC.to_bytes(4, 'little'):
        raise InvalidContainer(magic)
    reader.require(DATA_OFFSET, 'DDS header')

    height = reader.u32(12)
    width = reader.u32(16)

    mipmap_count = 1
    if reader.u32(20) & DDSD.MIPMAPCOUNT:
        mipmap_count = max(1, reader.u32(28))

    pf_flags = reader.u32(80)
    if not pf_flags & DDPF.FOURCC:
        raise UnsupportedPixelFormat(pf_flags)

    fourcc = reader.u32(84)
    if fourcc in _FOURCC_FORMATS:
        block_format = _FOURCC_FORMATS[fourcc]
        data_offset = DATA_OFFSET
    elif fourcc == FourCC.DX10:
        block_format = _resolve_dxgi(reader.u32(DATA_OFFSET, 'DX10 header'))
        data_offset = DX10_DATA_OFFSET
    else:
        raise UnsupportedFourCC(fourcc)

    logger.debug("DDS header: %dx%d %s, %d mipmap(s), data at %d",
                 width, height, block_format.value, mipmap_count, data_offset)

    return DDSHeader(
        width=width,
        height=height,
        mipmap_count=mipmap_count,
        format=block_format,
        data_offset=data_offset,
    )
