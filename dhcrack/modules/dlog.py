import logging
import math
from dataclasses import dataclass

import gmpy2

from .arith import inverse_mod, pow_mod, select_arithmetic
from .crt import crt
from .factor import factorize

logger = logging.getLogger(__name__)

# Largest prime-power subgroup we are willing to run BSGS on. The baby-step
# table holds about sqrt(order) entries, so this caps it near 1 << 24.
DEFAULT_MAX_SUBGROUP_ORDER = 1 << 48


@dataclass(frozen=True)
class Subproblem:
    """Discrete log g_i^x = h_i (mod p) inside the subgroup of order prime_power."""
    prime: int
    exponent: int
    g_i: int
    h_i: int

    @property
    def prime_power(self):
        return self.prime ** self.exponent


def _ceil_sqrt(n):
    if n <= 0:
        return 0
    return int(gmpy2.isqrt(n - 1)) + 1


class DLogSolver:
    """
    Solver for the Discrete Logarithm Problem (DLP) in modular arithmetic.
    Target: g^x = h (mod p), where p - 1 is smooth.

    Pohlig-Hellman splits the problem into one subproblem per prime-power
    factor of p - 1, solves each with BSGS and recombines with the CRT.
    Every answer is checked against g^x = h before it is returned.
    """
    def __init__(self, max_subgroup_order=DEFAULT_MAX_SUBGROUP_ORDER):
        self.max_subgroup_order = max_subgroup_order

    def bsgs(self, g, h, p, order):
        """
        Baby-step giant-step for g^x = h (mod p) with x in [0, order).
        g must have order dividing `order`. Returns None when nothing verifies.
        """
        if order < 1:
            raise ValueError(f"subgroup order must be positive, got {order}")

        # x = i*m + j  =>  g^j = h * (g^-m)^i
        m = _ceil_sqrt(order) + 1

        # Baby steps: g^j. A repeated value keeps the later j.
        table = {}
        curr = 1 % p
        for j in range(m):
            table[curr] = j
            curr = (curr * g) % p

        factor = inverse_mod(pow_mod(g, m, p), p)
        if factor is None:
            logger.debug("[-] g^%d has no inverse modulo %d", m, p)
            return None

        # Giant steps
        gamma = h
        for i in range(m):
            j = table.get(gamma)
            if j is not None:
                x = (i * m + j) % order
                if pow_mod(g, x, p) == h:
                    return x
            gamma = (gamma * factor) % p

        return None

    def subproblems(self, g, h, p):
        """
        Reduces g^x = h (mod p) to one Subproblem per prime-power factor of p - 1.
        Returns None if some factor is too large for BSGS.
        """
        order = p - 1
        bound = int(gmpy2.isqrt(self.max_subgroup_order)) + 1
        factors = factorize(order, bound=bound)
        logger.debug("[*] Factorization of p-1: %s",
                     " * ".join(f"{q}^{e}" for q, e in factors))

        result = []
        for prime, exp in factors:
            prime_power = prime ** exp
            if prime_power > self.max_subgroup_order:
                logger.warning("[-] Subgroup of order %d is too large for BSGS, "
                               "p-1 is not smooth enough", prime_power)
                return None
            cofactor = order // prime_power
            result.append(Subproblem(prime, exp,
                                     pow_mod(g, cofactor, p),
                                     pow_mod(h, cofactor, p)))
        return result

    def solve(self, g, h, p):
        """
        Pohlig-Hellman. Returns the verified exponent x in [0, p-1), or None.
        """
        logger.info("[*] Attempting DLog solve: %d^x = %d (mod %d)", g, h, p)
        if p < 2:
            raise ValueError(f"modulus must be at least 2, got {p}")

        subs = self.subproblems(g, h, p)
        if subs is None:
            return None

        residues = []
        moduli = []
        for sub in subs:
            x_i = self.bsgs(sub.g_i, sub.h_i, p, sub.prime_power)
            if x_i is None:
                logger.info("[-] No solution modulo %d^%d", sub.prime, sub.exponent)
                return None
            logger.debug("[*] Partial solution: x = %d (mod %d)", x_i, sub.prime_power)
            residues.append(x_i)
            moduli.append(sub.prime_power)

        arith = select_arithmetic(math.prod(moduli))
        logger.debug("[*] Combining %d residues with %s arithmetic", len(moduli), arith.name)
        x = crt(residues, moduli, inverse=arith.inverse)
        if x is None:
            logger.info("[-] CRT recombination failed")
            return None

        if pow_mod(g, x, p) != h:
            logger.info("[-] Recombined exponent %d does not verify", x)
            return None

        logger.info("[+] Found x: %d", x)
        return x


def baby_step_giant_step(g, h, p, order):
    return DLogSolver().bsgs(g, h, p, order)


def discrete_log(g, h, p, max_subgroup_order=DEFAULT_MAX_SUBGROUP_ORDER):
    """Solves g^x = h (mod p) for smooth p - 1. Returns x or None."""
    return DLogSolver(max_subgroup_order).solve(g, h, p)
