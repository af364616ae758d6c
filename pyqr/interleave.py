"""
Block splitting, per-block error correction and codeword interleaving.
"""

from typing import List, NamedTuple, Sequence

from . import reed_solomon
from .tables import ErrorCorrectionLevel, block_structure, num_raw_data_modules


class CodewordBlock(NamedTuple):
    data: bytes
    error_correction: bytes


def split_blocks(data: Sequence[int], version: int, ecl: ErrorCorrectionLevel) -> List[CodewordBlock]:
    """
    Split data codewords into group 1 (short) then group 2 (long) blocks.

    @param data: All data codewords, in order
    @param version: QR code version
    @param ecl: Error-correction level
    @return: Blocks with their error-correction codewords
    """
    structure = block_structure(version, ecl)
    if len(data) != structure.data_codewords:
        raise ValueError(
            f"Expected {structure.data_codewords} data codewords, got {len(data)}")
    generator = reed_solomon.generator_polynomial(structure.ec_per_block)
    lengths = ([structure.group1_data] * structure.group1_blocks
               + [structure.group2_data] * structure.group2_blocks)
    blocks = []
    offset = 0
    for length in lengths:
        chunk = bytes(data[offset:offset + length])
        offset += length
        ec = reed_solomon.compute_remainder(chunk, generator)
        blocks.append(CodewordBlock(chunk, bytes(ec)))
    return blocks


def interleave(blocks: Sequence[CodewordBlock]) -> bytes:
    """
    Interleave data codewords column-wise across blocks, then EC codewords.

    Shorter data blocks stop contributing once exhausted.
    """
    result = bytearray()
    longest = max(len(block.data) for block in blocks)
    for i in range(longest):
        for block in blocks:
            if i < len(block.data):
                result.append(block.data[i])
    for i in range(len(blocks[0].error_correction)):
        for block in blocks:
            result.append(block.error_correction[i])
    return bytes(result)


def to_bits(codewords: Sequence[int]) -> List[int]:
    """Convert codewords to a list of bits, most significant bit first."""
    return [(cw >> shift) & 1 for cw in codewords for shift in range(7, -1, -1)]


def remainder_bits(version: int) -> int:
    """Zero bits left over after the last codeword (0, 3, 4 or 7)."""
    return num_raw_data_modules(version) % 8


def build_codeword_bits(data: Sequence[int], version: int, ecl: ErrorCorrectionLevel) -> List[int]:
    """
    Produce the final bit sequence to place in the symbol.

    @param data: Data codewords from the bitstream builder
    @param version: QR code version
    @param ecl: Error-correction level
    @return: Interleaved codeword bits followed by the remainder bits
    """
    codewords = interleave(split_blocks(data, version, ecl))
    return to_bits(codewords) + [0] * remainder_bits(version)
