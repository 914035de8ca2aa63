import struct

import pytest

DDPF_FOURCC = 0x4
DDSD_MIPMAPCOUNT = 0x20000


def build_header(*, fourcc=b"DXT1", width=4, height=4, pf_flags=DDPF_FOURCC,
                 flags=0x1007, mip_flags=0, mipmap_count=0, dxgi_format=None,
                 magic=b"DDS "):
    """Build a DDS header, plus a DX10 extension when ``dxgi_format`` is given

    The mipmap-count flag is read from the word at offset 20 (the pitch
    slot), so ``mip_flags`` fills that word and ``flags`` fills offset 8.
    """
    header = bytearray(magic)
    header += struct.pack("<I", 124)  # dwSize
    header += struct.pack("<6I", flags, height, width, mip_flags, 0, mipmap_count)
    header += struct.pack("<11I", *([0] * 11))  # reserved1
    if isinstance(fourcc, bytes):
        header += struct.pack("<II4s5I", 32, pf_flags, fourcc, 0, 0, 0, 0, 0)
    else:
        header += struct.pack("<8I", 32, pf_flags, fourcc, 0, 0, 0, 0, 0)
    header += struct.pack("<5I", 0x1000, 0, 0, 0, 0)  # caps and reserved2
    assert len(header) == 128
    if dxgi_format is not None:
        header += struct.pack("<5I", dxgi_format, 3, 0, 1, 0)
    return bytes(header)


def color_block(c0, c1, indices):
    """8-byte BC1 color block"""
    return struct.pack("<HHI", c0, c1, indices)


def gradient_block(v0, v1, indices):
    """8-byte BC4 block; ``indices`` lists sixteen 3-bit indices in raster order"""
    bits = 0
    for i, index in enumerate(indices):
        bits |= index << (3 * i)
    return bytes([v0, v1]) + bits.to_bytes(6, "little")


def uniform_indices(index, bits=2):
    """Index word selecting ``index`` for all sixteen texels"""
    word = 0
    for i in range(16):
        word |= index << (bits * i)
    return word


@pytest.fixture
def make_dds():
    """Factory for a complete DDS file: header followed by raw block bytes"""
    def _make(blocks, **header_kwargs):
        return build_header(**header_kwargs) + bytes(blocks)
    return _make
