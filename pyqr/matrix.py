"""
Module grid construction: finder, separator, timing and alignment patterns,
reserved format/version areas and the dark module.
"""

from enum import Enum
from typing import List

from .tables import ALIGNMENT_CENTRES, symbol_size


class Module(Enum):
    UNSET = 0
    LIGHT = 1
    DARK = 2
    RESERVED_LIGHT = 3
    RESERVED_DARK = 4

    @property
    def is_dark(self) -> bool:
        return self is Module.DARK or self is Module.RESERVED_DARK

    @property
    def is_reserved(self) -> bool:
        return self is Module.RESERVED_LIGHT or self is Module.RESERVED_DARK

    @classmethod
    def data(cls, dark) -> "Module":
        return cls.DARK if dark else cls.LIGHT

    @classmethod
    def reserved(cls, dark) -> "Module":
        return cls.RESERVED_DARK if dark else cls.RESERVED_LIGHT


Matrix = List[List[Module]]

FINDER_PATTERN = [
    [1, 1, 1, 1, 1, 1, 1],
    [1, 0, 0, 0, 0, 0, 1],
    [1, 0, 1, 1, 1, 0, 1],
    [1, 0, 1, 1, 1, 0, 1],
    [1, 0, 1, 1, 1, 0, 1],
    [1, 0, 0, 0, 0, 0, 1],
    [1, 1, 1, 1, 1, 1, 1],
]

ALIGNMENT_PATTERN = [
    [1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1],
    [1, 0, 1, 0, 1],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
]


def initialise_matrix(size: int) -> Matrix:
    """
    Create an empty QR code matrix with every module UNSET.

    @param size: Dimension of square matrix (size x size)
    @return: 2D list representing an empty grid
    """
    return [[Module.UNSET] * size for _ in range(size)]


def copy_matrix(m: Matrix) -> Matrix:
    return [row[:] for row in m]


def reserve(m, r, c, dark=False):
    m[r][c] = Module.reserved(dark)


def place_finder_pattern(m, r, c):
    """
    Insert a 7x7 finder pattern and its light separator.

    The separator is the 1-module border around the pattern that lies inside
    the grid, making an 8x8 reserved region in each corner.

    @param m: QR code matrix
    @param r: Top-left row of the 7x7 pattern
    @param c: Top-left column of the 7x7 pattern
    """
    size = len(m)
    for dr in range(-1, 8):
        for dc in range(-1, 8):
            nr, nc = r + dr, c + dc
            if 0 <= nr < size and 0 <= nc < size:
                inside = 0 <= dr < 7 and 0 <= dc < 7
                reserve(m, nr, nc, inside and FINDER_PATTERN[dr][dc])


def place_timing_patterns(m):
    """Timing patterns on row 6 and column 6, dark at even indices."""
    size = len(m)
    for i in range(8, size - 8):
        for (r, c) in [(6, i), (i, 6)]:
            if not m[r][c].is_reserved:
                reserve(m, r, c, i % 2 == 0)


def place_alignment_pattern(m, r, c):
    """
    Insert a 5x5 alignment pattern centred on (r, c).

    @param m: QR code matrix
    @param r: Centre row coordinate
    @param c: Centre column coordinate
    """
    for dr in range(-2, 3):
        for dc in range(-2, 3):
            reserve(m, r + dr, c + dc, ALIGNMENT_PATTERN[dr + 2][dc + 2])


def alignment_positions(version: int):
    """
    Centres of all alignment patterns for a version.

    Every pair from the centre table is used except the three that would
    overlap a finder pattern.
    """
    centres = ALIGNMENT_CENTRES[version]
    if not centres:
        return []
    first, last = centres[0], centres[-1]
    skipped = {(first, first), (first, last), (last, first)}
    return [(r, c) for r in centres for c in centres if (r, c) not in skipped]


def reserve_format_areas(m):
    """Reserve the two 15-module format information strips."""
    size = len(m)
    for i in range(9):
        if i != 6:
            reserve(m, 8, i)
            reserve(m, i, 8)
    for i in range(8):
        reserve(m, 8, size - 1 - i)
    for i in range(7):
        reserve(m, size - 1 - i, 8)


def reserve_version_areas(m):
    """Reserve the two 6x3 version information blocks (version 7 and up)."""
    size = len(m)
    for i in range(6):
        for j in range(3):
            reserve(m, i, size - 11 + j)
            reserve(m, size - 11 + j, i)


def build_function_matrix(version: int) -> Matrix:
    """
    Build the pre-data matrix for a version with every function module reserved.

    @param version: QR code version (1-40)
    @return: Matrix of UNSET and reserved modules
    """
    size = symbol_size(version)
    m = initialise_matrix(size)
    for (r, c) in [(0, 0), (0, size - 7), (size - 7, 0)]:
        place_finder_pattern(m, r, c)
    place_timing_patterns(m)
    for (r, c) in alignment_positions(version):
        place_alignment_pattern(m, r, c)
    reserve_format_areas(m)
    if version >= 7:
        reserve_version_areas(m)
    # Dark module
    reserve(m, 4 * version + 9, 8, True)
    return m
