"""Tests for function pattern placement."""

from pyqr.matrix import Module, alignment_positions, build_function_matrix
from pyqr.tables import num_raw_data_modules, symbol_size

FINDER_WITH_SEPARATOR = [
    [1, 1, 1, 1, 1, 1, 1, 0],
    [1, 0, 0, 0, 0, 0, 1, 0],
    [1, 0, 1, 1, 1, 0, 1, 0],
    [1, 0, 1, 1, 1, 0, 1, 0],
    [1, 0, 1, 1, 1, 0, 1, 0],
    [1, 0, 0, 0, 0, 0, 1, 0],
    [1, 1, 1, 1, 1, 1, 1, 0],
    [0, 0, 0, 0, 0, 0, 0, 0],
]


def _count(m, state):
    return sum(row.count(state) for row in m)


def test_grid_size():
    """Side length is 17 + 4 * version."""
    for version in (1, 2, 7, 40):
        m = build_function_matrix(version)
        assert len(m) == symbol_size(version)
        assert all(len(row) == len(m) for row in m)


def test_unset_modules_match_data_capacity():
    """Every version leaves exactly the raw data modules unset."""
    for version in range(1, 41):
        m = build_function_matrix(version)
        assert _count(m, Module.UNSET) == num_raw_data_modules(version)


def test_only_unset_or_reserved_modules():
    """The function matrix has no plain light/dark modules."""
    m = build_function_matrix(8)
    assert _count(m, Module.LIGHT) == 0
    assert _count(m, Module.DARK) == 0


def test_finder_corners():
    """All three corners hold a finder pattern with its separator."""
    m = build_function_matrix(3)
    size = len(m)
    for r in range(8):
        for c in range(8):
            expected = bool(FINDER_WITH_SEPARATOR[r][c])
            assert m[r][c].is_dark == expected
            assert m[r][size - 1 - c].is_dark == expected
            assert m[size - 1 - r][c].is_dark == expected
            assert m[r][c].is_reserved


def test_timing_patterns_alternate():
    """Timing modules are dark at even indices."""
    m = build_function_matrix(5)
    for i in range(8, len(m) - 8):
        assert m[6][i].is_dark == (i % 2 == 0)
        assert m[i][6].is_dark == (i % 2 == 0)


def test_dark_module():
    """The fixed dark module sits at (4 * version + 9, 8)."""
    for version in (1, 7, 40):
        m = build_function_matrix(version)
        assert m[4 * version + 9][8] is Module.RESERVED_DARK


def test_alignment_positions_skip_finders():
    """Version 7 has six alignment patterns, none overlapping the finders."""
    assert alignment_positions(1) == []
    assert alignment_positions(2) == [(18, 18)]
    positions = alignment_positions(7)
    assert len(positions) == 6
    assert (6, 6) not in positions
    assert (6, 22) in positions


def test_alignment_pattern_shape():
    """Alignment pattern: dark ring, light ring, dark centre."""
    m = build_function_matrix(2)
    for dr in range(-2, 3):
        for dc in range(-2, 3):
            ring = max(abs(dr), abs(dc))
            assert m[18 + dr][18 + dc].is_dark == (ring != 1)
            assert m[18 + dr][18 + dc].is_reserved


def test_version_areas_reserved_from_version_7():
    """Version blocks are reserved only from version 7 on."""
    small = build_function_matrix(6)
    assert small[0][len(small) - 11] is Module.UNSET
    large = build_function_matrix(7)
    size = len(large)
    assert large[0][size - 11].is_reserved
    assert large[size - 11][5].is_reserved
