"""Main DDS file handler"""
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .enums import DDSCAPS, DDSD, FourCC
from .errors import fourcc_to_str
from .headers import (
    DATA_OFFSET,
    DDS_HEADER,
    DDS_HEADER_DXT10,
    DX10_HEADER_SIZE,
    DDSHeader,
    parse_header,
)
from .decompressors import get_decompressor
from .reader import ByteReader

logger = logging.getLogger(__name__)


def _format_flags(value: int, flag_enum) -> str:
    """
    Format an integer flag value as a list of flag names separated by ' | '.

    Args:
        value: The integer flag value
        flag_enum: The IntFlag enum class to use for decoding

    Returns:
        String with flag names separated by ' | ', or '0' if no flags are set
    """
    value = int(value)
    if value == 0:
        return '0'

    flags = [flag.name for flag in flag_enum if value & flag]
    unknown = value & ~sum(int(flag) for flag in flag_enum)
    if unknown:
        flags.append(f'0x{unknown:X}')

    return ' | '.join(flags)


@dataclass
class DecodedImage:
    """Decoded RGBA8 pixels, row-major and top-down"""
    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise ValueError(
                f"Expected {expected} bytes of RGBA data for "
                f"{self.width}x{self.height}, got {len(self.data)}"
            )

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> 'DecodedImage':
        """Build from a (height, width, 4) uint8 array"""
        height, width = pixels.shape[:2]
        return cls(width, height, np.ascontiguousarray(pixels, dtype=np.uint8).tobytes())

    def to_array(self) -> np.ndarray:
        """Return the pixels as a (height, width, 4) uint8 array"""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, 4)


class DDS:
    """Block-compressed DirectDraw Surface, top mipmap level only"""
    def __init__(self, info: DDSHeader) -> None:
        self.info: DDSHeader = info
        self.header: DDS_HEADER = DDS_HEADER()
        self.header10: Optional[DDS_HEADER_DXT10] = None
        self.data: bytes = b''  # Block data of the top mipmap level

    def __str__(self) -> str:
        """Return debug string representation of DDS file"""
        lines = ["DDS File Information:"]
        lines.append(f"  Dimensions: {self.info.width}x{self.info.height}")
        lines.append(f"  Mipmap Levels: {self.info.mipmap_count}")
        lines.append(f"  Flags: {_format_flags(self.header.dwFlags, DDSD)}")

        if self.header10:
            lines.append(f"  Format: DX10")
            lines.append(f"    DXGI Format: {self.header10.format_name()} ({self.header10.dxgiFormat})")
        else:
            lines.append(f"  Format: FourCC '{fourcc_to_str(self.header.ddspf.dwFourCC)}'")

        lines.append(f"  Block Format: {self.info.format.value} ({self.info.format.block_size} bytes per block)")
        lines.append(f"  Data Offset: {self.info.data_offset}")
        lines.append(f"  Caps: {_format_flags(self.header.dwCaps, DDSCAPS)}")
        lines.append(f"  Data Size: {len(self.data)} bytes")

        return "\n".join(lines)

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DDS':
        """
        Read DDS from bytes

        Raises:
            DDSError: The header is invalid or unsupported, or the data is
                too short for the top mipmap level
        """
        info = parse_header(data)
        reader = ByteReader(data)

        dds = cls(info)
        dds.header = DDS_HEADER.from_bytes(reader.bytes_at(4, DATA_OFFSET - 4, 'DDS header'))
        if dds.header.ddspf.dwFourCC == FourCC.DX10:
            dds.header10 = DDS_HEADER_DXT10.from_bytes(
                reader.bytes_at(DATA_OFFSET, DX10_HEADER_SIZE, 'DX10 header'))

        size = info.data_size
        dds.data = reader.bytes_at(info.data_offset, size, f'{info.format.value} block data')

        return dds

    @property
    def width(self) -> int:
        return self.info.width

    @property
    def height(self) -> int:
        return self.info.height

    def to_image(self) -> np.ndarray:
        """
        Decompress the top mipmap level

        Returns:
            numpy array of shape (height, width, 4) with dtype uint8 (RGBA)

            Can be saved with imageio:
            - imageio.imwrite('output.png', array)
        """
        decompressor = get_decompressor(self.info.format)
        logger.debug("Decoding %dx%d %s with %s",
                     self.info.width, self.info.height, self.info.format.value,
                     type(decompressor).__name__)
        return decompressor.decompress(self.data, self.info.width, self.info.height)

    def decode(self) -> DecodedImage:
        """Decompress the top mipmap level to a DecodedImage"""
        return DecodedImage.from_array(self.to_image())


def decode(data: bytes) -> DecodedImage:
    """
    Decode a block-compressed DDS file to RGBA8

    Args:
        data: Raw DDS file contents

    Returns:
        DecodedImage whose data is width*height*4 bytes, RGBA, top-down
    """
    return DDS.from_bytes(data).decode()
