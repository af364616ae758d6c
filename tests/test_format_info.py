"""Tests for format and version information."""

import pytest

from pyqr.errors import InvalidOption
from pyqr.format_info import (
    format_bits, format_positions, read_format_info, version_bits, write_format_info,
    write_version_info,
)
from pyqr.matrix import Module, build_function_matrix
from pyqr.tables import ErrorCorrectionLevel as ECL

# Published format strings for level L, masks 0-7
FORMAT_STRINGS_L = [
    "111011111000100", "111001011110011", "111110110101010", "111100010011101",
    "110011000101111", "110001100011000", "110110001000001", "110100101110110",
]


def test_format_bits_level_l():
    """Format words for level L match the published strings."""
    for mask, expected in enumerate(FORMAT_STRINGS_L):
        assert f"{format_bits(ECL.L, mask):015b}" == expected


def test_format_bits_mask_zero_per_level():
    """Mask 0 format words for M, Q and H."""
    assert f"{format_bits(ECL.M, 0):015b}" == "101010000010010"
    assert f"{format_bits(ECL.Q, 0):015b}" == "011010101011111"
    assert f"{format_bits(ECL.H, 0):015b}" == "001011010001001"


def test_version_bits():
    """Version words for versions 7, 8 and 40."""
    assert version_bits(7) == 0x07C94
    assert version_bits(8) == 0x085BC
    assert version_bits(40) == 0x28C69


def test_version_bits_rejects_small_versions():
    """Versions below 7 carry no version information."""
    with pytest.raises(InvalidOption):
        version_bits(6)


def test_format_positions_cover_reserved_strips():
    """Both copies have 15 distinct reserved cells, none on the timing pattern."""
    m = build_function_matrix(1)
    for positions in format_positions(len(m)):
        assert len(set(positions)) == 15
        assert (6, 8) not in positions and (8, 6) not in positions
        for r, c in positions:
            assert m[r][c].is_reserved


@pytest.mark.parametrize("ecl", list(ECL))
def test_write_then_read_format_info(ecl):
    """Both copies decode back to the level and mask written."""
    m = build_function_matrix(3)
    for mask in range(8):
        write_format_info(m, ecl, mask)
        assert read_format_info(m, 0) == (ecl, mask)
        assert read_format_info(m, 1) == (ecl, mask)


def test_read_format_info_corrects_single_error():
    """A flipped format module is still decoded correctly."""
    m = build_function_matrix(1)
    write_format_info(m, ECL.Q, 5)
    m[8][0] = Module.RESERVED_LIGHT if m[8][0].is_dark else Module.RESERVED_DARK
    assert read_format_info(m) == (ECL.Q, 5)


def test_write_version_info_both_blocks():
    """Both version blocks are written, transposed, bit 0 nearest the corner."""
    m = build_function_matrix(7)
    write_version_info(m, 7)
    size = len(m)
    bits = version_bits(7)
    for i in range(18):
        a, b = size - 11 + i % 3, i // 3
        assert m[b][a].is_dark == bool(bits >> i & 1)
        assert m[a][b].is_dark == bool(bits >> i & 1)
        assert m[b][a].is_reserved


def test_write_version_info_noop_below_7():
    """Nothing is written for versions 1-6."""
    m = build_function_matrix(6)
    write_version_info(m, 6)
    assert m[0][len(m) - 11] is Module.UNSET
