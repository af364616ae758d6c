"""
Format and version information.

The 15-bit format word carries the error-correction level and mask pattern,
protected by a BCH(15,5) code. Versions 7 and up also carry an 18-bit
BCH(18,6) version word.
"""

from typing import List, Tuple

from .errors import InvalidOption
from .matrix import Matrix, Module
from .tables import FORMAT_GENERATOR, FORMAT_MASK, VERSION_GENERATOR, ErrorCorrectionLevel


def _bch_remainder(value: int, generator: int) -> int:
    degree = generator.bit_length() - 1
    rem = value << degree
    for shift in range(rem.bit_length() - 1, degree - 1, -1):
        if rem >> shift & 1:
            rem ^= generator << (shift - degree)
    return rem


def format_bits(ecl: ErrorCorrectionLevel, mask: int) -> int:
    """
    Compute the masked 15-bit format word.

    @param ecl: Error-correction level
    @param mask: Mask pattern (0-7)
    @return: Format word, bit 14 first in reading order
    """
    data = ecl.format_bits << 3 | mask
    return (data << 10 | _bch_remainder(data, FORMAT_GENERATOR)) ^ FORMAT_MASK


def version_bits(version: int) -> int:
    """
    Compute the 18-bit version word (6 version bits + 12 BCH bits).

    @param version: QR code version (7-40)
    """
    if not 7 <= version <= 40:
        raise InvalidOption("version", version, "version information exists for 7-40 only")
    return version << 12 | _bch_remainder(version, VERSION_GENERATOR)


def format_positions(size: int) -> Tuple[List[Tuple[int, int]], List[Tuple[int, int]]]:
    """
    Cells of both format copies, indexed by bit number (0 = least significant).

    @param size: Side length of the grid
    @return: (first copy around the top-left finder, second copy split
             between the top-right and bottom-left finders)
    """
    first = ([(i, 8) for i in range(6)]
             + [(7, 8), (8, 8), (8, 7)]
             + [(8, 14 - i) for i in range(9, 15)])
    second = ([(8, size - 1 - i) for i in range(8)]
              + [(size - 15 + i, 8) for i in range(8, 15)])
    return first, second


def write_format_info(m: Matrix, ecl: ErrorCorrectionLevel, mask: int):
    """
    Encode format information in both reserved format strips.

    @param m: QR code matrix
    @param ecl: Error-correction level
    @param mask: Mask pattern (0-7)
    """
    bits = format_bits(ecl, mask)
    for positions in format_positions(len(m)):
        for i, (r, c) in enumerate(positions):
            m[r][c] = Module.reserved(bits >> i & 1)


def write_version_info(m: Matrix, version: int):
    """
    Encode version information in both 6x3 blocks (no-op below version 7).

    @param m: QR code matrix
    @param version: QR code version
    """
    if version < 7:
        return
    bits = version_bits(version)
    size = len(m)
    for i in range(18):
        dark = bits >> i & 1
        a, b = size - 11 + i % 3, i // 3
        m[b][a] = Module.reserved(dark)
        m[a][b] = Module.reserved(dark)


def read_format_info(m: Matrix, copy: int = 0) -> Tuple[ErrorCorrectionLevel, int]:
    """
    Decode a format copy back to (error-correction level, mask).

    The read word is matched to the nearest valid format word.

    @param m: Finished matrix
    @param copy: 0 for the top-left copy, 1 for the split copy
    """
    positions = format_positions(len(m))[copy]
    word = 0
    for i, (r, c) in enumerate(positions):
        if m[r][c].is_dark:
            word |= 1 << i
    candidates = [(ecl, mask) for ecl in ErrorCorrectionLevel for mask in range(8)]
    return min(candidates, key=lambda pair: bin(format_bits(*pair) ^ word).count("1"))
