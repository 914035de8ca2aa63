"""Bounds-checked little-endian reads from a byte buffer"""
import struct

from .errors import TruncatedData


class ByteReader:
    """Read fixed-width little-endian fields at absolute offsets.

    Every read checks the buffer length first and raises TruncatedData
    instead of struct.error or a silently short slice.
    """

    def __init__(self, data: bytes) -> None:
        self.data = memoryview(data).cast('B')

    def __len__(self) -> int:
        return len(self.data)

    def require(self, end: int, what: str) -> None:
        """Ensure at least ``end`` bytes are available"""
        if end > len(self.data):
            raise TruncatedData(what, end, len(self.data))

    def u32(self, offset: int, what: str = 'uint32') -> int:
        self.require(offset + 4, what)
        return struct.unpack_from('<I', self.data, offset)[0]

    def bytes_at(self, offset: int, size: int, what: str = 'data') -> bytes:
        self.require(offset + size, what)
        return bytes(self.data[offset:offset + size])
