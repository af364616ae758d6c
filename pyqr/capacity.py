"""
Capacity planning: choose the smallest version that holds a segment.
"""

import logging

from .errors import DataTooLong
from .segment import Segment
from .tables import ErrorCorrectionLevel, Mode, block_structure, num_raw_data_modules

logger = logging.getLogger(__name__)

MODE_INDICATOR_BITS = 4


def total_codewords(version: int) -> int:
    """Total codewords (data + error correction) of a version."""
    return num_raw_data_modules(version) // 8


def ec_codewords_total(version: int, ecl: ErrorCorrectionLevel) -> int:
    """Error-correction codewords across all blocks."""
    return block_structure(version, ecl).ec_codewords


def data_codewords(version: int, ecl: ErrorCorrectionLevel) -> int:
    """
    Data codewords available at a version and error-correction level.

    @param version: QR code version (1-40)
    @param ecl: Error-correction level
    @return: total_codewords(version) - ec_codewords_total(version, ecl)
    """
    return total_codewords(version) - ec_codewords_total(version, ecl)


def char_count_bits(mode: Mode, version: int) -> int:
    """Width of the character-count indicator for a mode at a version."""
    return mode.char_count_bits(version)


def segment_bit_length(segment: Segment, version: int):
    """
    Bits taken by mode indicator, count indicator and payload.

    @param segment: Encoded segment
    @param version: Candidate version
    @return: Bit length, or None if the character count overflows its indicator
    """
    count_bits = char_count_bits(segment.mode, version)
    if segment.num_chars >= 1 << count_bits:
        return None
    return MODE_INDICATOR_BITS + count_bits + len(segment.bits)


def choose_version(segment: Segment, ecl: ErrorCorrectionLevel,
                   min_version: int, max_version: int) -> int:
    """
    Find the smallest version in [min_version, max_version] whose capacity fits.

    The terminator is not counted: it is truncated when space runs out.

    @param segment: Encoded segment
    @param ecl: Error-correction level
    @param min_version: Lowest version to try
    @param max_version: Highest version to try
    @return: Chosen version
    @raise DataTooLong: No version in range is large enough
    """
    required = None
    for version in range(min_version, max_version + 1):
        used_bits = segment_bit_length(segment, version)
        capacity = data_codewords(version, ecl)
        if used_bits is None:
            continue
        required = (used_bits + 7) // 8
        if required <= capacity:
            logger.debug(f"Version {version}-{ecl.name} fits {required}/{capacity} data codewords")
            return version
    if required is None:
        # the count indicator overflowed everywhere; report the payload alone
        required = (MODE_INDICATOR_BITS + len(segment.bits) + 7) // 8
    raise DataTooLong(required, data_codewords(max_version, ecl))
