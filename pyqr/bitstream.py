"""
Data bitstream assembly.

Builds the complete data codeword sequence following ISO/IEC 18004: mode
indicator, character-count indicator, payload, terminator and padding.
"""

from .capacity import char_count_bits, data_codewords
from .segment import Segment
from .tables import PAD_BYTES, ErrorCorrectionLevel


def make_data_bitstream(segment: Segment, version: int, ecl: ErrorCorrectionLevel) -> str:
    """
    Construct the padded data bitstream for one version and error-correction level.

    @param segment: Encoded segment
    @param version: Chosen version
    @param ecl: Error-correction level
    @return: Bit string of exactly data_codewords(version, ecl) * 8 bits
    """
    max_data_cw = data_codewords(version, ecl)
    max_bits = max_data_cw * 8
    count_bits = char_count_bits(segment.mode, version)
    bitstream = (f"{segment.mode.indicator:04b}"
                 + f"{segment.num_chars:0{count_bits}b}"
                 + segment.bits)
    assert len(bitstream) <= max_bits, "segment exceeds the planned capacity"
    # Terminator
    bitstream += "0" * min(4, max_bits - len(bitstream))
    bitstream += "0" * (-len(bitstream) % 8)
    pads = [f"{b:08b}" for b in PAD_BYTES]
    i = 0
    while len(bitstream) < max_bits:
        bitstream += pads[i % 2]
        i += 1
    assert len(bitstream) == max_bits
    return bitstream


def build_data_codewords(segment: Segment, version: int, ecl: ErrorCorrectionLevel) -> bytes:
    """
    Split the data bitstream into codewords.

    @param segment: Encoded segment
    @param version: Chosen version
    @param ecl: Error-correction level
    @return: data_codewords(version, ecl) bytes
    """
    bitstream = make_data_bitstream(segment, version, ecl)
    return bytes(int(bitstream[i:i + 8], 2) for i in range(0, len(bitstream), 8))
