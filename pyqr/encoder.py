"""
QR code encoding pipeline.

text -> segment -> version -> data codewords -> interleaved codewords ->
function matrix -> data placement -> mask selection -> finished symbol.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from . import config
from .bitstream import build_data_codewords
from .capacity import choose_version
from .errors import InvalidOption
from .format_info import write_version_info
from .interleave import build_codeword_bits
from .masking import MASK_PATTERNS, choose_mask
from .matrix import build_function_matrix
from .placement import place_data
from .segment import make_segment
from .tables import MAX_VERSION, MIN_VERSION, ErrorCorrectionLevel, Mode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QRCode:
    """
    A finished QR code symbol, ready for any renderer.

    @param version: Version (1-40)
    @param ec_level: Error-correction level
    @param mask: Applied mask pattern (0-7)
    @param mode: Segment mode used for the text
    @param modules: size x size grid, True for dark
    """

    version: int
    ec_level: ErrorCorrectionLevel
    mask: int
    mode: Mode
    modules: Tuple[Tuple[bool, ...], ...]

    @property
    def size(self) -> int:
        return len(self.modules)

    def is_dark(self, row: int, col: int) -> bool:
        return self.modules[row][col]

    @property
    def dark_count(self) -> int:
        return sum(sum(row) for row in self.modules)


def parse_ec_level(value: Union[str, ErrorCorrectionLevel]) -> ErrorCorrectionLevel:
    if isinstance(value, ErrorCorrectionLevel):
        return value
    if isinstance(value, str):
        try:
            return ErrorCorrectionLevel[value.strip().upper()]
        except KeyError:
            pass
    raise InvalidOption("ec_level", value, "expected one of L, M, Q, H")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_options(ec_level, min_version, max_version, mask):
    """
    Check encode options and normalise the error-correction level.

    @return: (ErrorCorrectionLevel, min_version, max_version, mask)
    @raise InvalidOption: Any option out of range
    """
    ecl = parse_ec_level(ec_level)
    for name, value in (("min_version", min_version), ("max_version", max_version)):
        if not _is_int(value) or not MIN_VERSION <= value <= MAX_VERSION:
            raise InvalidOption(name, value, f"expected {MIN_VERSION}-{MAX_VERSION}")
    if min_version > max_version:
        raise InvalidOption("min_version", min_version, f"greater than max_version {max_version}")
    if mask is not None and (not _is_int(mask) or not 0 <= mask < len(MASK_PATTERNS)):
        raise InvalidOption("mask", mask, "expected 0-7 or None")
    return ecl, min_version, max_version, mask


def encode(text: str,
           ec_level: Union[str, ErrorCorrectionLevel] = config.DEFAULT_EC_LEVEL,
           min_version: int = config.MIN_VERSION,
           max_version: int = config.MAX_VERSION,
           mask: Optional[int] = config.DEFAULT_MASK) -> QRCode:
    """
    Encode text as a QR code symbol.

    @param text: Text to encode
    @param ec_level: Error-correction level, L/M/Q/H
    @param min_version: Smallest version to consider
    @param max_version: Largest version to consider
    @param mask: Mask pattern to use, or None to pick the lowest penalty
    @return: Finished QRCode
    @raise InvalidOption: Bad option value
    @raise DataTooLong: Text does not fit in max_version
    """
    ecl, min_version, max_version, mask = validate_options(ec_level, min_version, max_version, mask)

    segment = make_segment(text)
    logger.debug(f"Encoding {segment.num_chars} characters in {segment.mode.name} mode")
    version = choose_version(segment, ecl, min_version, max_version)

    data = build_data_codewords(segment, version, ecl)
    bits = build_codeword_bits(data, version, ecl)

    base = build_function_matrix(version)
    write_version_info(base, version)
    leftover = place_data(base, bits)
    assert leftover == 0, "data bits did not fill the symbol"

    best = choose_mask(base, ecl, mask)
    logger.debug(f"Encoded version {version}-{ecl.name} with mask {best.mask}")
    modules = tuple(tuple(module.is_dark for module in row) for row in best.modules)
    return QRCode(version, ecl, best.mask, segment.mode, modules)
