"""
Mask patterns and penalty scoring.

Each mask is applied to a fresh copy of the unmasked matrix, so candidates
never share state. Reserved modules are never masked.
"""

import logging
import re
from itertools import groupby
from typing import Callable, List, NamedTuple, Optional, Sequence

from .format_info import write_format_info
from .matrix import Matrix, Module, copy_matrix
from .tables import ErrorCorrectionLevel

logger = logging.getLogger(__name__)

MASK_PATTERNS: Sequence[Callable[[int, int], bool]] = (
    lambda r, c: (r + c) % 2 == 0,
    lambda r, c: r % 2 == 0,
    lambda r, c: c % 3 == 0,
    lambda r, c: (r + c) % 3 == 0,
    lambda r, c: (r // 2 + c // 3) % 2 == 0,
    lambda r, c: (r * c) % 2 + (r * c) % 3 == 0,
    lambda r, c: ((r * c) % 2 + (r * c) % 3) % 2 == 0,
    lambda r, c: ((r + c) % 2 + (r * c) % 3) % 2 == 0,
)

PENALTY_RUN = 3
PENALTY_BLOCK = 3
PENALTY_FINDER_LIKE = 40
PENALTY_BALANCE = 10

# 1:1:3:1:1 finder-like pattern with 4 light modules on either side
FINDER_LIKE = re.compile(r"(?=10111010000|00001011101)")


class MaskCandidate(NamedTuple):
    mask: int
    penalty: int
    modules: Matrix


def apply_mask(m: Matrix, mask_id: int) -> Matrix:
    """
    Return a copy of the matrix with a mask pattern applied to data modules.

    @param m: Unmasked QR code matrix
    @param mask_id: Numeric identifier for mask pattern (0-7)
    @return: New masked matrix
    """
    condition = MASK_PATTERNS[mask_id]
    masked = copy_matrix(m)
    for r, row in enumerate(masked):
        for c, module in enumerate(row):
            if not module.is_reserved and condition(r, c):
                row[c] = Module.LIGHT if module is Module.DARK else Module.DARK
    return masked


def dark_grid(m: Matrix) -> List[List[bool]]:
    return [[module.is_dark for module in row] for row in m]


def _lines(grid):
    yield from grid
    yield from zip(*grid)


def penalty_runs(grid) -> int:
    """Rule 1: each maximal run of 5 or more same-coloured modules in a row or column."""
    score = 0
    for line in _lines(grid):
        for _, run in groupby(line):
            length = sum(1 for _ in run)
            if length >= 5:
                score += PENALTY_RUN + (length - 5)
    return score


def penalty_blocks(grid) -> int:
    """Rule 2: each 2x2 block of one colour, overlapping blocks counted separately."""
    score = 0
    for upper, lower in zip(grid, grid[1:]):
        for c in range(len(upper) - 1):
            if upper[c] == upper[c + 1] == lower[c] == lower[c + 1]:
                score += PENALTY_BLOCK
    return score


def penalty_finder_like(grid) -> int:
    """Rule 3: each 1011101 pattern with a 4-module light run on one side."""
    score = 0
    for line in _lines(grid):
        text = "".join("1" if dark else "0" for dark in line)
        score += PENALTY_FINDER_LIKE * sum(1 for _ in FINDER_LIKE.finditer(text))
    return score


def penalty_balance(grid) -> int:
    """Rule 4: 10 points per full 5% step away from a 50% dark ratio."""
    total = sum(len(row) for row in grid)
    dark = sum(sum(row) for row in grid)
    k = abs(100 * dark - 50 * total) // (5 * total)
    return PENALTY_BALANCE * k


def score_penalty(m: Matrix) -> int:
    """
    Calculate the penalty score of a matrix per ISO/IEC 18004 evaluation rules.

    Evaluation rules:
    1. Consecutive modules in row/column
    2. 2x2 blocks of same colour
    3. Finder-like patterns
    4. Dark/light module balance

    @param m: QR code matrix to evaluate
    @return: Calculated penalty score (lower is better)
    """
    grid = dark_grid(m)
    return (penalty_runs(grid) + penalty_blocks(grid)
            + penalty_finder_like(grid) + penalty_balance(grid))


def make_candidate(base: Matrix, ecl: ErrorCorrectionLevel, mask_id: int, score=True) -> MaskCandidate:
    """
    Mask a copy of the base matrix and stamp its format information.

    @param base: Unmasked matrix with data placed
    @param ecl: Error-correction level
    @param mask_id: Mask pattern (0-7)
    @param score: Compute the penalty (otherwise it is 0)
    """
    modules = apply_mask(base, mask_id)
    write_format_info(modules, ecl, mask_id)
    return MaskCandidate(mask_id, score_penalty(modules) if score else 0, modules)


def evaluate_masks(base: Matrix, ecl: ErrorCorrectionLevel, mask: Optional[int] = None) -> List[MaskCandidate]:
    """
    Build the mask candidates for a matrix.

    @param base: Unmasked matrix with data placed
    @param ecl: Error-correction level
    @param mask: Pinned mask, or None for all 8
    @return: One candidate per mask evaluated, in mask order
    """
    if mask is not None:
        return [make_candidate(base, ecl, mask, score=False)]
    return [make_candidate(base, ecl, mask_id) for mask_id in range(len(MASK_PATTERNS))]


def choose_mask(base: Matrix, ecl: ErrorCorrectionLevel, mask: Optional[int] = None) -> MaskCandidate:
    """
    Select the lowest-penalty candidate, ties going to the lowest mask index.

    @param base: Unmasked matrix with data placed
    @param ecl: Error-correction level
    @param mask: Pinned mask used unconditionally, or None
    @return: Winning candidate
    """
    candidates = evaluate_masks(base, ecl, mask)
    best = min(candidates, key=lambda cand: (cand.penalty, cand.mask))
    if mask is None:
        logger.debug(f"Selected mask {best.mask} (penalty {best.penalty})")
    return best
