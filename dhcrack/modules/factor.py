from typing import List, Optional, Tuple

FactorizedOrder = List[Tuple[int, int]]


def factorize(n: int, bound: Optional[int] = None) -> FactorizedOrder:
    """
    Trial division of a group order into (prime, exponent) pairs.

    Only tractable for smooth orders. With a bound, divisors above it are not
    tried and whatever is left is returned as a single factor, which may be
    composite; callers use that to reject orders they cannot handle.
    """
    if n < 1:
        raise ValueError(f"cannot factorize {n}")

    factors = []
    remaining = n
    d = 2
    while d * d <= remaining:
        if bound is not None and d > bound:
            break
        if remaining % d == 0:
            exp = 0
            while remaining % d == 0:
                remaining //= d
                exp += 1
            factors.append((d, exp))
        d += 1

    if remaining > 1:
        factors.append((remaining, 1))
    return factors
