from dataclasses import dataclass

# Demonstration group: p is the largest 64-bit prime and p - 1 is smooth
# enough for Pohlig-Hellman (2^2 * 11 * 137 * 547 * 5594472617641).
MODULUS = (1 << 64) - 59
GENERATOR = 5


@dataclass(frozen=True)
class Group:
    """
    Multiplicative group modulo a prime p, generated by g.
    """
    p: int
    g: int

    def __post_init__(self):
        if self.p < 2:
            raise ValueError(f"modulus must be at least 2, got {self.p}")
        if not 1 <= self.g < self.p:
            raise ValueError(f"generator must lie in [1, {self.p}), got {self.g}")

    @property
    def order(self) -> int:
        return self.p - 1


DEFAULT_GROUP = Group(MODULUS, GENERATOR)
