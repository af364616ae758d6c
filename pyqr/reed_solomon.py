"""
Reed-Solomon error-correction codewords over GF(256).
"""

from functools import lru_cache
from typing import List, Sequence, Tuple

from . import gf256


@lru_cache(maxsize=None)
def _generator(degree: int) -> Tuple[int, ...]:
    gen = [1]
    for i in range(degree):
        # (x - alpha^i) == (x + alpha^i) in characteristic 2
        gen = gf256.poly_multiply(gen, [1, gf256.exp(i)])
    return tuple(gen)


def generator_polynomial(degree: int) -> List[int]:
    """
    Build the generator polynomial (x - a^0)(x - a^1)...(x - a^(degree-1)).

    Results are cached by degree, since they depend on nothing else.

    @param degree: Number of error-correction codewords (1-255)
    @return: degree + 1 coefficients, highest degree first, leading 1
    """
    if not 1 <= degree <= 255:
        raise ValueError(f"Generator degree out of range: {degree}")
    return list(_generator(degree))


def compute_remainder(data: Sequence[int], generator: Sequence[int]) -> List[int]:
    """
    Divide the message polynomial, shifted by the generator degree, by the generator.

    @param data: Data codewords of one block
    @param generator: Generator polynomial from generator_polynomial()
    @return: len(generator) - 1 error-correction codewords
    """
    degree = len(generator) - 1
    result = list(data) + [0] * degree
    for i in range(len(data)):
        coef = result[i]
        if coef:
            for j in range(1, len(generator)):
                result[i + j] ^= gf256.multiply(generator[j], coef)
    return result[len(data):]


def ec_codewords(data: Sequence[int], degree: int) -> List[int]:
    """
    Generate the error-correction codewords for one block.

    @param data: Data codewords
    @param degree: Number of error-correction codewords
    @return: List of error-correction codewords
    """
    return compute_remainder(data, generator_polynomial(degree))
