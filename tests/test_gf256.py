"""Tests for GF(256) arithmetic."""

import pytest

from pyqr import gf256


def test_exp_table_wraps_at_255():
    """alpha^255 should equal alpha^0 = 1."""
    assert gf256.exp(0) == 1
    assert gf256.exp(255) == 1
    assert gf256.exp(1) == 2


def test_reduction_by_primitive_polynomial():
    """alpha^8 should reduce to 0x1D under 0x11D."""
    assert gf256.exp(8) == 0x1D
    assert gf256.multiply(2, 128) == 0x1D


def test_multiply_by_zero_is_zero():
    """Multiplying by zero should give zero."""
    assert gf256.multiply(0, 123) == 0
    assert gf256.multiply(77, 0) == 0


def test_log_and_exp_are_inverse():
    """log(exp(i)) should be i for every exponent."""
    for i in range(255):
        assert gf256.log(gf256.exp(i)) == i


def test_log_of_zero_is_rejected():
    """log(0) should raise."""
    with pytest.raises(ValueError):
        gf256.log(0)


def test_multiply_is_commutative_and_has_inverses():
    """Every non-zero element should have a multiplicative inverse."""
    for a in range(1, 256):
        inverse = gf256.exp(255 - gf256.log(a))
        assert gf256.multiply(a, inverse) == 1
        assert gf256.multiply(a, 3) == gf256.multiply(3, a)


def test_poly_multiply():
    """(x + 1)(x + 2) should equal x^2 + 3x + 2."""
    assert gf256.poly_multiply([1, 1], [1, 2]) == [1, 3, 2]


def test_poly_divide_recovers_factor():
    """Dividing a product by one factor should give the other and no remainder."""
    p = [1, 7, 19]
    q = [1, 200, 45, 3]
    quotient, remainder = gf256.poly_divide(gf256.poly_multiply(p, q), q)
    assert quotient == p
    assert remainder == [0, 0, 0]


def test_poly_divide_short_dividend():
    """A dividend of lower degree than the divisor is its own remainder."""
    quotient, remainder = gf256.poly_divide([5], [1, 2, 3])
    assert quotient == [0]
    assert remainder == [0, 5]
