"""
Static ISO/IEC 18004 tables.

Everything here is computed once at import time and never mutated afterwards:
error-correction levels, segment modes, per-version block structure,
alignment pattern centres and the generator/mask constants.
"""

from enum import Enum
from functools import total_ordering
from typing import NamedTuple

# GF(256) primitive polynomial x^8 + x^4 + x^3 + x^2 + 1
GF_PRIMITIVE = 0x11D

# BCH generators and XOR masks for format and version information
FORMAT_GENERATOR = 0x537
FORMAT_MASK = 0x5412
VERSION_GENERATOR = 0x1F25

# Alternating pad codewords, 11101100 and 00010001
PAD_BYTES = (0xEC, 0x11)

MIN_VERSION = 1
MAX_VERSION = 40


@total_ordering
class ErrorCorrectionLevel(Enum):
    """Error-correction level, ordered from weakest (L) to strongest (H)."""

    L = (0, 0b01)
    M = (1, 0b00)
    Q = (2, 0b11)
    H = (3, 0b10)

    def __init__(self, ordinal: int, format_bits: int):
        self.ordinal = ordinal
        self.format_bits = format_bits

    def __lt__(self, other):
        if not isinstance(other, ErrorCorrectionLevel):
            return NotImplemented
        return self.ordinal < other.ordinal


class Mode(Enum):
    """Segment mode: 4-bit indicator and count-indicator widths per version tier."""

    NUMERIC = (0b0001, (10, 12, 14))
    ALPHANUMERIC = (0b0010, (9, 11, 13))
    BYTE = (0b0100, (8, 16, 16))

    def __init__(self, indicator: int, count_bits: tuple):
        self.indicator = indicator
        self.count_bits = count_bits

    def char_count_bits(self, version: int) -> int:
        """
        Width of the character-count indicator for this mode.

        @param version: QR code version (1-40)
        @return: Number of bits (tiers 1-9, 10-26, 27-40)
        """
        if version <= 9:
            return self.count_bits[0]
        if version <= 26:
            return self.count_bits[1]
        return self.count_bits[2]


# Error-correction codewords per block, indexed by version - 1
EC_CODEWORDS_PER_BLOCK = {
    ErrorCorrectionLevel.L: (
        7, 10, 15, 20, 26, 18, 20, 24, 30, 18, 20, 24, 26, 30, 22, 24, 28, 30, 28, 28,
        28, 28, 30, 30, 26, 28, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30),
    ErrorCorrectionLevel.M: (
        10, 16, 26, 18, 24, 16, 18, 22, 22, 26, 30, 22, 22, 24, 24, 28, 28, 26, 26, 26,
        26, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28),
    ErrorCorrectionLevel.Q: (
        13, 22, 18, 26, 18, 24, 18, 22, 20, 24, 28, 26, 24, 20, 30, 24, 28, 28, 26, 30,
        28, 30, 30, 30, 30, 28, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30),
    ErrorCorrectionLevel.H: (
        17, 28, 22, 16, 22, 28, 26, 26, 24, 28, 24, 28, 22, 24, 24, 30, 28, 28, 26, 28,
        30, 24, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30),
}

# Number of error-correction blocks, indexed by version - 1
NUM_EC_BLOCKS = {
    ErrorCorrectionLevel.L: (
        1, 1, 1, 1, 1, 2, 2, 2, 2, 4, 4, 4, 4, 4, 6, 6, 6, 6, 7, 8,
        8, 9, 9, 10, 12, 12, 12, 13, 14, 15, 16, 17, 18, 19, 19, 20, 21, 22, 24, 25),
    ErrorCorrectionLevel.M: (
        1, 1, 1, 2, 2, 4, 4, 4, 5, 5, 5, 8, 9, 9, 10, 10, 11, 13, 14, 16,
        17, 17, 18, 20, 21, 23, 25, 26, 28, 29, 31, 33, 35, 37, 38, 40, 43, 45, 47, 49),
    ErrorCorrectionLevel.Q: (
        1, 1, 2, 2, 4, 4, 6, 6, 8, 8, 8, 10, 12, 16, 12, 17, 16, 18, 21, 20,
        23, 23, 25, 27, 29, 34, 34, 35, 38, 40, 43, 45, 48, 51, 53, 56, 59, 62, 65, 68),
    ErrorCorrectionLevel.H: (
        1, 1, 2, 4, 4, 4, 5, 6, 8, 8, 11, 11, 16, 16, 18, 16, 19, 21, 25, 25,
        25, 34, 30, 32, 35, 37, 40, 42, 45, 48, 51, 54, 57, 60, 63, 66, 70, 74, 77, 81),
}

# Alignment pattern centre coordinates (rows and columns), Annex E
ALIGNMENT_CENTRES = {
    1: (),
    2: (6, 18), 3: (6, 22), 4: (6, 26), 5: (6, 30), 6: (6, 34),
    7: (6, 22, 38), 8: (6, 24, 42), 9: (6, 26, 46), 10: (6, 28, 50),
    11: (6, 30, 54), 12: (6, 32, 58), 13: (6, 34, 62),
    14: (6, 26, 46, 66), 15: (6, 26, 48, 70), 16: (6, 26, 50, 74),
    17: (6, 30, 54, 78), 18: (6, 30, 56, 82), 19: (6, 30, 58, 86),
    20: (6, 34, 62, 90),
    21: (6, 28, 50, 72, 94), 22: (6, 26, 50, 74, 98), 23: (6, 30, 54, 78, 102),
    24: (6, 28, 54, 80, 106), 25: (6, 32, 58, 84, 110), 26: (6, 30, 58, 86, 114),
    27: (6, 34, 62, 90, 118),
    28: (6, 26, 50, 74, 98, 122), 29: (6, 30, 54, 78, 102, 126),
    30: (6, 26, 52, 78, 104, 130), 31: (6, 30, 56, 82, 108, 134),
    32: (6, 34, 60, 86, 112, 138), 33: (6, 30, 58, 86, 114, 142),
    34: (6, 34, 62, 90, 118, 146),
    35: (6, 30, 54, 78, 102, 126, 150), 36: (6, 24, 50, 76, 102, 128, 154),
    37: (6, 28, 54, 80, 106, 132, 158), 38: (6, 32, 58, 84, 110, 136, 162),
    39: (6, 26, 54, 82, 110, 138, 166), 40: (6, 30, 58, 86, 114, 142, 170),
}


class BlockStructure(NamedTuple):
    """Block layout of one (version, error-correction level) combination."""

    group1_blocks: int
    group2_blocks: int
    group1_data: int
    group2_data: int
    ec_per_block: int

    @property
    def num_blocks(self) -> int:
        return self.group1_blocks + self.group2_blocks

    @property
    def data_codewords(self) -> int:
        return self.group1_blocks * self.group1_data + self.group2_blocks * self.group2_data

    @property
    def ec_codewords(self) -> int:
        return self.num_blocks * self.ec_per_block


def symbol_size(version: int) -> int:
    """
    Side length of the module grid.

    @param version: QR code version (1-40)
    @return: 17 + 4 * version
    """
    return 17 + 4 * version


def num_raw_data_modules(version: int) -> int:
    """
    Count the modules left for codewords once every function pattern is drawn.

    @param version: QR code version (1-40)
    @return: Number of data modules, including remainder bits
    """
    result = (16 * version + 128) * version + 64
    if version >= 2:
        num_align = version // 7 + 2
        result -= (25 * num_align - 10) * num_align - 55
        if version >= 7:
            result -= 36
    return result


def _build_block_structures():
    structures = {}
    for version in range(MIN_VERSION, MAX_VERSION + 1):
        total = num_raw_data_modules(version) // 8
        for ecl in ErrorCorrectionLevel:
            blocks = NUM_EC_BLOCKS[ecl][version - 1]
            ec_len = EC_CODEWORDS_PER_BLOCK[ecl][version - 1]
            group2 = total % blocks
            group1 = blocks - group2
            short_data = total // blocks - ec_len
            structures[version, ecl] = BlockStructure(
                group1, group2, short_data, short_data + 1, ec_len)
    return structures


BLOCK_STRUCTURES = _build_block_structures()


def block_structure(version: int, ecl: ErrorCorrectionLevel) -> BlockStructure:
    """
    Look up the block layout for a version and error-correction level.

    @param version: QR code version (1-40)
    @param ecl: Error-correction level
    @return: BlockStructure tuple
    """
    return BLOCK_STRUCTURES[version, ecl]
