"""Tests for DDS header parsing."""

import pytest

from skindds import (
    BlockFormat,
    DDSError,
    InvalidContainer,
    TruncatedData,
    UnsupportedDxgiFormat,
    UnsupportedFormat,
    UnsupportedFourCC,
    UnsupportedPixelFormat,
    parse_header,
)
from skindds.headers import DDS_HEADER

from conftest import DDSD_MIPMAPCOUNT, build_header


class TestLegacyFourCC:
    @pytest.mark.parametrize("fourcc, expected", [
        (b"DXT1", BlockFormat.DXT1),
        (b"DXT3", BlockFormat.DXT3),
        (b"DXT5", BlockFormat.DXT5),
    ])
    def test_format_and_offset(self, fourcc, expected):
        header = parse_header(build_header(fourcc=fourcc))
        assert header.format is expected
        assert header.data_offset == 128

    def test_numeric_fourcc_matches_ascii(self):
        header = parse_header(build_header(fourcc=0x35545844))
        assert header.format is BlockFormat.DXT5

    def test_width_and_height(self):
        header = parse_header(build_header(width=512, height=256))
        assert header.width == 512
        assert header.height == 256

    def test_block_counts(self):
        header = parse_header(build_header(fourcc=b"DXT5", width=6, height=10))
        assert (header.blocks_x, header.blocks_y) == (2, 3)
        assert header.data_size == 2 * 3 * 16


class TestMipmapCount:
    def test_flag_absent_ignores_field(self):
        header = parse_header(build_header(mip_flags=0, mipmap_count=9))
        assert header.mipmap_count == 1

    def test_flag_present_reads_field(self):
        header = parse_header(build_header(mip_flags=DDSD_MIPMAPCOUNT, mipmap_count=9))
        assert header.mipmap_count == 9

    def test_zero_is_clamped_to_one(self):
        header = parse_header(build_header(mip_flags=DDSD_MIPMAPCOUNT, mipmap_count=0))
        assert header.mipmap_count == 1

    def test_flag_word_at_offset_8_is_not_consulted(self):
        header = parse_header(build_header(flags=0x1007 | DDSD_MIPMAPCOUNT, mip_flags=0, mipmap_count=9))
        assert header.mipmap_count == 1


class TestDX10:
    @pytest.mark.parametrize("dxgi_format, expected", [
        (71, BlockFormat.DXT1),
        (72, BlockFormat.DXT1),
        (74, BlockFormat.DXT3),
        (75, BlockFormat.DXT3),
        (77, BlockFormat.DXT5),
        (78, BlockFormat.DXT5),
        (80, BlockFormat.BC4),
        (83, BlockFormat.BC5),
    ])
    def test_dxgi_mapping(self, dxgi_format, expected):
        header = parse_header(build_header(fourcc=b"DX10", dxgi_format=dxgi_format))
        assert header.format is expected
        assert header.data_offset == 148

    def test_only_dxgi_code_is_required(self):
        data = build_header(fourcc=b"DX10", dxgi_format=80)[:132]
        assert parse_header(data).data_offset == 148

    @pytest.mark.parametrize("dxgi_format", [98, 99])
    def test_bc7_has_its_own_error(self, dxgi_format):
        with pytest.raises(UnsupportedFormat) as excinfo:
            parse_header(build_header(fourcc=b"DX10", dxgi_format=dxgi_format))

        assert not isinstance(excinfo.value, UnsupportedDxgiFormat)
        assert excinfo.value.format_name == "BC7"
        assert "DXT5" in excinfo.value.guidance
        assert "BC3" in str(excinfo.value)

    @pytest.mark.parametrize("dxgi_format", [28, 81, 84, 95, 1234])
    def test_other_dxgi_formats(self, dxgi_format):
        with pytest.raises(UnsupportedDxgiFormat) as excinfo:
            parse_header(build_header(fourcc=b"DX10", dxgi_format=dxgi_format))
        assert excinfo.value.code == dxgi_format
        assert isinstance(excinfo.value, UnsupportedFormat)

    def test_missing_extension(self):
        with pytest.raises(TruncatedData):
            parse_header(build_header(fourcc=b"DX10"))


class TestRejections:
    def test_bad_magic(self):
        with pytest.raises(InvalidContainer):
            parse_header(build_header(magic=b"PNG "))

    def test_not_a_dds_at_all(self):
        with pytest.raises(InvalidContainer):
            parse_header(b"\x89PNG\r\n\x1a\n" + bytes(200))

    def test_uncompressed_pixel_format(self):
        # DDPF_RGB | DDPF_ALPHAPIXELS
        with pytest.raises(UnsupportedPixelFormat) as excinfo:
            parse_header(build_header(fourcc=0, pf_flags=0x41))
        assert excinfo.value.flags == 0x41

    def test_unknown_fourcc(self):
        with pytest.raises(UnsupportedFourCC) as excinfo:
            parse_header(build_header(fourcc=b"ATI2"))
        assert excinfo.value.code == 0x32495441
        assert "ATI2" in str(excinfo.value)

    def test_truncated_header(self):
        with pytest.raises(TruncatedData) as excinfo:
            parse_header(build_header()[:100])
        assert excinfo.value.available == 100

    @pytest.mark.parametrize("data", [b"", b"PNG", b"DD"])
    def test_shorter_than_magic(self, data):
        with pytest.raises(InvalidContainer):
            parse_header(data)

    def test_magic_only(self):
        with pytest.raises(TruncatedData):
            parse_header(b"DDS ")

    def test_errors_are_value_errors(self):
        for error in (InvalidContainer, TruncatedData, UnsupportedPixelFormat,
                      UnsupportedFourCC, UnsupportedFormat, UnsupportedDxgiFormat):
            assert issubclass(error, DDSError)
            assert issubclass(error, ValueError)


class TestHeaderStruct:
    def test_round_trip(self):
        data = build_header(fourcc=b"DXT5", width=64, height=32)
        header = DDS_HEADER.from_bytes(data[4:128])
        assert header.dwWidth == 64
        assert header.dwHeight == 32
        assert header.ddspf.dwFourCC == 0x35545844
        assert header.to_bytes() == data[4:128]

    def test_short_data(self):
        with pytest.raises(ValueError, match="Expected 124 bytes"):
            DDS_HEADER.from_bytes(bytes(64))
