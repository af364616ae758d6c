"""
Galois field GF(2^8) arithmetic.

Uses the QR primitive polynomial x^8 + x^4 + x^3 + x^2 + 1 (0x11D) with
generator alpha = 2. The exp/log tables are built once at import and are
read-only afterwards, so they can be shared by any number of encodes.

Polynomials are lists of coefficients, highest degree first.
"""

from typing import List, Sequence, Tuple

from .tables import GF_PRIMITIVE


def _multiply_no_table(a: int, b: int) -> int:
    """
    Multiply two field elements by shift-and-add with polynomial reduction.

    @param a: Field element (0-255)
    @param b: Field element (0-255)
    @return: Product in GF(256)
    """
    result = 0
    while b:
        if b & 1:
            result ^= a
        b >>= 1
        a <<= 1
        if a & 0x100:
            a ^= GF_PRIMITIVE
    return result


def _build_tables():
    exp = [0] * 512
    log = [0] * 256
    x = 1
    for i in range(255):
        exp[i] = x
        exp[i + 255] = x  # doubled so log sums need no modulo
        log[x] = i
        x = _multiply_no_table(x, 2)
    return tuple(exp), tuple(log)


EXP_TABLE, LOG_TABLE = _build_tables()


def exp(power: int) -> int:
    """Return alpha ** power."""
    return EXP_TABLE[power % 255]


def log(value: int) -> int:
    """Return the discrete logarithm of a non-zero element."""
    if value == 0:
        raise ValueError("log(0) is undefined in GF(256)")
    return LOG_TABLE[value]


def multiply(a: int, b: int) -> int:
    """
    Multiply two field elements using the log tables.

    @param a: Field element (0-255)
    @param b: Field element (0-255)
    @return: 0 if either operand is 0, else exp[log a + log b]
    """
    if a == 0 or b == 0:
        return 0
    return EXP_TABLE[LOG_TABLE[a] + LOG_TABLE[b]]


def poly_multiply(p: Sequence[int], q: Sequence[int]) -> List[int]:
    """Multiply two polynomials over GF(256)."""
    result = [0] * (len(p) + len(q) - 1)
    for i, a in enumerate(p):
        for j, b in enumerate(q):
            result[i + j] ^= multiply(a, b)
    return result


def poly_divide(dividend: Sequence[int], divisor: Sequence[int]) -> Tuple[List[int], List[int]]:
    """
    Synthetic division of two polynomials over GF(256).

    @param dividend: Coefficients, highest degree first
    @param divisor: Coefficients, highest degree first, leading term non-zero
    @return: (quotient, remainder), remainder has len(divisor) - 1 terms
    """
    if not divisor or divisor[0] == 0:
        raise ValueError("Divisor must have a non-zero leading coefficient")
    degree = len(divisor) - 1
    work = list(dividend)
    lead_log = LOG_TABLE[divisor[0]]
    for i in range(len(work) - degree):
        coef = work[i]
        if coef == 0:
            continue
        if lead_log:
            coef = EXP_TABLE[(LOG_TABLE[coef] - lead_log) % 255]
            work[i] = coef
        for j in range(1, len(divisor)):
            work[i + j] ^= multiply(divisor[j], coef)
    split = len(work) - degree
    if split <= 0:
        return [0], [0] * (degree - len(work)) + work
    return work[:split], work[split:]
