"""Endpoint, palette and index helpers shared by the BCn decompressors

All helpers work on every block at once: ``blocks`` is a uint8 array of
shape (num_blocks, block_size) and results carry num_blocks as their first
axis. Arithmetic is done in int64 so interpolation never wraps.
"""
import numpy as np

_COLOR_SHIFTS = np.arange(16, dtype=np.int64) * 2
_GRADIENT_SHIFTS = np.arange(16, dtype=np.int64) * 3


def read_uint(blocks: np.ndarray, offset: int, size: int) -> np.ndarray:
    """Little-endian unsigned integer of ``size`` bytes at ``offset`` in each block"""
    value = np.zeros(blocks.shape[0], dtype=np.int64)
    for i in range(size):
        value |= blocks[:, offset + i].astype(np.int64) << (8 * i)
    return value


def unpack_rgb565(packed: np.ndarray) -> np.ndarray:
    """
    Expand RGB565 colors to 8 bits per channel

    Each channel is shifted to the top of the byte and its high bits are
    replicated into the low bits, so 0x1F and 0x3F expand to 255.

    Returns:
        int64 array of shape (n, 3)
    """
    # A plain shift would stop at 248 for a full channel; replication reaches 255
    r = ((packed >> 11) & 0x1F) << 3
    r |= r >> 5
    g = ((packed >> 5) & 0x3F) << 2
    g |= g >> 6
    b = (packed & 0x1F) << 3
    b |= b >> 5
    return np.stack([r, g, b], axis=-1)


def color_palette(c0: np.ndarray, c1: np.ndarray, punch_through: bool) -> np.ndarray:
    """
    Build the 4-entry RGBA palette of each color block

    Four-color mode interpolates at thirds. With ``punch_through`` (BC1
    only), blocks whose c0 <= c1 use the midpoint for entry 2 and
    transparent black for entry 3.

    Args:
        c0: Packed RGB565 endpoint 0 of each block
        c1: Packed RGB565 endpoint 1 of each block
        punch_through: Honor the c0 <= c1 three-color mode

    Returns:
        int64 array of shape (n, 4, 4)
    """
    e0 = unpack_rgb565(c0)
    e1 = unpack_rgb565(c1)

    palette = np.empty((c0.shape[0], 4, 4), dtype=np.int64)
    palette[:, 0, :3] = e0
    palette[:, 1, :3] = e1
    palette[:, 2, :3] = (2 * e0 + e1) // 3
    palette[:, 3, :3] = (e0 + 2 * e1) // 3
    palette[:, :, 3] = 255

    if punch_through:
        three_color = c0 <= c1
        palette[three_color, 2, :3] = (e0[three_color] + e1[three_color]) // 2
        palette[three_color, 3, :] = 0

    return palette


def decode_color_block(blocks: np.ndarray, offset: int, punch_through: bool) -> np.ndarray:
    """
    Decode the 8-byte color block at ``offset`` in each block

    Layout: c0 (u16), c1 (u16), 16 2-bit indices (u32), first texel in the
    lowest bits.

    Returns:
        int64 array of shape (n, 16, 4), RGBA per texel
    """
    c0 = read_uint(blocks, offset, 2)
    c1 = read_uint(blocks, offset + 2, 2)
    palette = color_palette(c0, c1, punch_through)

    indices = (read_uint(blocks, offset + 4, 4)[:, None] >> _COLOR_SHIFTS) & 0x3
    return np.take_along_axis(palette, indices[:, :, None], axis=1)


def gradient_palette(v0: np.ndarray, v1: np.ndarray) -> np.ndarray:
    """
    Build the 8-entry palette of each BC3 alpha / BC4 block

    When v0 > v1 entries 2-7 step linearly in sevenths. Otherwise entries
    2-5 step in fifths and entries 6 and 7 are fixed at 0 and 255.

    Returns:
        int64 array of shape (n, 8)
    """
    eight_value_mode = v0 > v1

    palette = np.empty((v0.shape[0], 8), dtype=np.int64)
    palette[:, 0] = v0
    palette[:, 1] = v1
    for i in range(2, 8):
        sevenths = ((8 - i) * v0 + (i - 1) * v1) // 7
        if i < 6:
            fifths = ((6 - i) * v0 + (i - 1) * v1) // 5
        else:
            fifths = 0 if i == 6 else 255
        palette[:, i] = np.where(eight_value_mode, sevenths, fifths)

    return palette


def decode_gradient_block(blocks: np.ndarray, offset: int) -> np.ndarray:
    """
    Decode the 8-byte gradient block at ``offset`` in each block

    Layout: v0 (u8), v1 (u8), 16 3-bit indices (48 bits little-endian),
    first texel in the lowest bits.

    Returns:
        int64 array of shape (n, 16)
    """
    v0 = blocks[:, offset].astype(np.int64)
    v1 = blocks[:, offset + 1].astype(np.int64)
    palette = gradient_palette(v0, v1)

    indices = (read_uint(blocks, offset + 2, 6)[:, None] >> _GRADIENT_SHIFTS) & 0x7
    return np.take_along_axis(palette, indices, axis=1)
