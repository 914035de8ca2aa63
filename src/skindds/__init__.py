"""skindds - DDS texture decoder (BC1-BC5) and uncompressed DDS writer"""

__version__ = "0.1.0"

# Main entry points
from .dds import DDS, DecodedImage, decode
from .encoder import DDSEncoder, encode

# Header structures
from .headers import (
    DDS_HEADER,
    DDS_HEADER_DXT10,
    DDS_PIXELFORMAT,
    DDSHeader,
    parse_header,
)

# Enumerations and flags
from .enums import (
    DDSD,
    DDPF,
    DDSCAPS,
    FourCC,
    DXGI_FORMAT,
    BlockFormat,
)

# Errors
from .errors import (
    DDSError,
    InvalidContainer,
    TruncatedData,
    UnsupportedPixelFormat,
    UnsupportedFourCC,
    UnsupportedFormat,
    UnsupportedDxgiFormat,
)

# CLI entry point
from .cli import main

__all__ = [
    '__version__',
    'DDS',
    'DecodedImage',
    'decode',
    'DDSEncoder',
    'encode',
    'DDS_HEADER',
    'DDS_HEADER_DXT10',
    'DDS_PIXELFORMAT',
    'DDSHeader',
    'parse_header',
    'DDSD',
    'DDPF',
    'DDSCAPS',
    'FourCC',
    'DXGI_FORMAT',
    'BlockFormat',
    'DDSError',
    'InvalidContainer',
    'TruncatedData',
    'UnsupportedPixelFormat',
    'UnsupportedFourCC',
    'UnsupportedFormat',
    'UnsupportedDxgiFormat',
    'main',
]
