"""
Modular arithmetic used by the discrete log solver.

Two flavours of inverse are provided: a native one for moduli that fit in a
machine word, and an arbitrary precision one backed by gmpy2 for the CRT
products, which can grow past 64 bits.
"""

from dataclasses import dataclass
from typing import Callable, Optional

import gmpy2

NATIVE_BITS = 64


def pow_mod(base, exponent, modulus):
    """
    Computes base^exponent mod modulus by square-and-multiply.
    A modulus of 1 is the degenerate group and always gives 0.
    """
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if modulus == 1:
        return 0

    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result


def inverse_mod(a, m):
    """
    Extended Euclid inverse of a modulo m, or None when gcd(a, m) != 1.
    """
    if m < 1:
        raise ValueError(f"modulus must be positive, got {m}")

    old_r, r = a % m, m
    old_s, s = 1, 0
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s

    if old_r != 1:
        return None
    return old_s % m


def inverse_mod_big(a, m):
    """Same contract as inverse_mod, over gmpy2 integers of any size."""
    if m < 1:
        raise ValueError(f"modulus must be positive, got {m}")
    try:
        return int(gmpy2.invert(gmpy2.mpz(a), gmpy2.mpz(m)))
    except ZeroDivisionError:
        return None


@dataclass(frozen=True)
class Arithmetic:
    """A named inverse routine together with the largest modulus it handles."""
    name: str
    inverse: Callable[[int, int], Optional[int]]
    max_modulus: Optional[int] = None

    def fits(self, modulus: int) -> bool:
        return self.max_modulus is None or modulus <= self.max_modulus


NATIVE = Arithmetic("native", inverse_mod, (1 << NATIVE_BITS) - 1)
BIG = Arithmetic("big", inverse_mod_big)


def select_arithmetic(modulus_bound: int) -> Arithmetic:
    """Picks the native routine when every modulus stays within a machine word."""
    if NATIVE.fits(modulus_bound):
        return NATIVE
    return BIG
