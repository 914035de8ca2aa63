"""Errors raised while reading DDS data

Every error is a ValueError so that callers which already treat malformed
input as a ValueError keep working.
"""

BC7_GUIDANCE = (
    "The file uses BC7 compression, which cannot be decoded here. "
    "Convert the texture to DXT5 (BC3) with an external tool such as "
    "Paint.NET or Photoshop and import it again."
)


def fourcc_to_str(code: int) -> str:
    """Render a FourCC code as its four ASCII characters when printable"""
    raw = (code & 0xFFFFFFFF).to_bytes(4, 'little')
    if all(0x20 <= b < 0x7F for b in raw):
        return raw.decode('ascii')
    return f'0x{code:08X}'


class DDSError(ValueError):
    """Base class for DDS decoding errors"""


class InvalidContainer(DDSError):
    """The data does not start with the "DDS " magic"""

    def __init__(self, magic: bytes) -> None:
        self.magic = magic
        super().__init__(f"Invalid DDS magic number: {magic!r}")


class TruncatedData(DDSError):
    """A field or the block stream lies past the end of the data"""

    def __init__(self, what: str, needed: int, available: int) -> None:
        self.what = what
        self.needed = needed
        self.available = available
        super().__init__(
            f"Not enough data for {what}: need {needed} bytes, "
            f"only {available} available"
        )


class UnsupportedPixelFormat(DDSError):
    """The pixel format is not FourCC-tagged (raw RGB, luminance, paletted...)"""

    def __init__(self, flags: int) -> None:
        self.flags = flags
        super().__init__(
            f"Only compressed (FourCC) DDS files are supported, "
            f"pixel format flags are 0x{flags:X}"
        )


class UnsupportedFourCC(DDSError):
    """The FourCC is present but is not DXT1, DXT3, DXT5 or DX10"""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Unsupported FourCC: {fourcc_to_str(code)} (0x{code:08X})")


class UnsupportedFormat(DDSError):
    """A recognised texture format that this package refuses to decode

    Raised directly for BC7, with ``guidance`` explaining how to re-encode
    the texture.
    """

    def __init__(self, format_name: str, guidance: str = '') -> None:
        self.format_name = format_name
        self.guidance = guidance
        message = f"Unsupported texture format: {format_name}"
        if guidance:
            message = f"{message}\n\n{guidance}"
        super().__init__(message)


class UnsupportedDxgiFormat(UnsupportedFormat):
    """The DX10 header names a DXGI format with no decoder"""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"DXGI format {code}")
