"""Tests for the uncompressed DDS writer."""

import struct

import numpy as np
import pytest

from skindds import (
    DDSEncoder,
    DecodedImage,
    UnsupportedPixelFormat,
    encode,
    parse_header,
)
from skindds.headers import DDS_HEADER


def test_single_pixel_is_swapped_to_bgra():
    data = encode(1, 1, [10, 20, 30, 40])
    assert len(data) == 132
    assert list(data[-4:]) == [30, 20, 10, 40]


def test_header_fields():
    data = encode(3, 2, bytes(3 * 2 * 4))

    assert data[:4] == b"DDS "
    assert struct.unpack_from("<I", data, 4)[0] == 124
    assert struct.unpack_from("<I", data, 8)[0] == 0x1 | 0x2 | 0x4 | 0x1000
    assert struct.unpack_from("<I", data, 12)[0] == 2  # height
    assert struct.unpack_from("<I", data, 16)[0] == 3  # width
    assert struct.unpack_from("<I", data, 20)[0] == 12  # pitch

    # Pixel format
    assert struct.unpack_from("<4I", data, 76) == (32, 0x41, 0, 32)
    assert struct.unpack_from("<4I", data, 92) == (0x00FF0000, 0x0000FF00, 0x000000FF, 0xFF000000)

    assert struct.unpack_from("<I", data, 108)[0] == 0x1000
    # mipmap count and the DX10 slot stay empty
    assert struct.unpack_from("<I", data, 28)[0] == 0
    assert len(data) == 128 + 3 * 2 * 4


def test_read_back():
    rng = np.random.default_rng(1234)
    pixels = rng.integers(0, 256, size=(5, 7, 4), dtype=np.uint8)

    data = encode(7, 5, pixels.tobytes())

    header = DDS_HEADER.from_bytes(data[4:128])
    assert (header.dwWidth, header.dwHeight) == (7, 5)

    body = np.frombuffer(data[128:], dtype=np.uint8).reshape(5, 7, 4)
    assert (body[:, :, [2, 1, 0, 3]] == pixels).all()


@pytest.mark.parametrize("make_input", [
    bytes,
    bytearray,
    list,
    lambda values: np.array(values, dtype=np.uint8).reshape(2, 1, 4),
])
def test_input_types(make_input):
    values = [1, 2, 3, 4, 5, 6, 7, 8]
    data = encode(1, 2, make_input(values))
    assert list(data[128:]) == [3, 2, 1, 4, 7, 6, 5, 8]


def test_wrong_buffer_size():
    with pytest.raises(ValueError, match="Expected 16 bytes"):
        encode(2, 2, bytes(12))


def test_wider_samples_are_rejected():
    # 0x0100 would wrap to 0 if cast to uint8
    with pytest.raises(ValueError, match="uint16"):
        encode(1, 1, np.full(4, 0x0100, dtype=np.uint16))


def test_empty_image():
    assert len(encode(0, 0, b"")) == 128


def test_encode_image():
    image = DecodedImage(1, 1, bytes([10, 20, 30, 40]))
    data = DDSEncoder().encode_image(image)
    assert data == encode(1, 1, [10, 20, 30, 40])


def test_output_is_not_block_compressed():
    # The decoder only reads FourCC payloads, so it refuses its own writer's output
    with pytest.raises(UnsupportedPixelFormat):
        parse_header(encode(4, 4, bytes(64)))
