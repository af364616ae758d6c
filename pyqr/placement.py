"""
Data placement along the zigzag path.
"""

import logging
from typing import Sequence

from .matrix import Matrix, Module

logger = logging.getLogger(__name__)

TIMING_COLUMN = 6


class ZigzagCursor:
    """
    Iterate over every (row, column) of the grid in codeword placement order.

    Columns are visited in pairs from the right edge, right column first
    within each row. The first pair runs bottom to top, and the direction
    flips for every following pair. The timing column is skipped by shifting
    the pairs left of it one column over. Iteration stops once the column
    drops below zero.

    @param size: Side length of the grid
    """

    def __init__(self, size: int):
        self.size = size
        self.column = size - 1  # right column of the current pair
        self.upward = True
        self.step = 0  # position within the current pair, 0 .. 2 * size - 1

    def __iter__(self):
        return self

    def __next__(self):
        if self.column < 0:
            raise StopIteration
        vertical, side = divmod(self.step, 2)
        row = self.size - 1 - vertical if self.upward else vertical
        position = (row, self.column - side)
        self.step += 1
        if self.step == 2 * self.size:
            self.advance()
        return position

    def advance(self):
        """Move to the next column pair and flip direction."""
        self.step = 0
        self.upward = not self.upward
        self.column -= 2
        if self.column == TIMING_COLUMN:
            self.column -= 1


def place_data(m: Matrix, bits: Sequence[int]) -> int:
    """
    Map the codeword bits into the matrix along the zigzag path.

    Reserved modules are skipped without consuming a bit.

    @param m: Matrix from build_function_matrix(), modified in place
    @param bits: Interleaved codeword bits, including remainder bits
    @return: Number of modules left without a bit and filled light (0 for valid input)
    """
    bit_idx = 0
    leftover = 0
    for r, c in ZigzagCursor(len(m)):
        if m[r][c] is not Module.UNSET:
            continue
        if bit_idx < len(bits):
            m[r][c] = Module.data(bits[bit_idx])
            bit_idx += 1
        else:
            m[r][c] = Module.LIGHT
            leftover += 1
    if leftover:
        logger.warning(f"Bit stream exhausted: filled {leftover} modules light")
    if bit_idx < len(bits):
        logger.warning(f"{len(bits) - bit_idx} bits did not fit in the matrix")
    return leftover
