import pytest

from dhcrack.modules.arith import (
    BIG,
    NATIVE,
    inverse_mod,
    inverse_mod_big,
    pow_mod,
    select_arithmetic,
)
from dhcrack.modules.crt import crt


def test_pow_mod_matches_builtin():
    assert pow_mod(4, 13, 497) == 445
    assert pow_mod(6, 6689, 8101) == 7531
    p = (1 << 64) - 59
    assert pow_mod(5, 0xFFFFFFFFFFFF, p) == pow(5, 0xFFFFFFFFFFFF, p)


def test_pow_mod_edge_cases():
    assert pow_mod(7, 0, 13) == 1
    assert pow_mod(7, 5, 1) == 0
    assert pow_mod(20, 1, 13) == 7
    with pytest.raises(ValueError):
        pow_mod(2, -1, 13)
    with pytest.raises(ValueError):
        pow_mod(2, 3, 0)


def test_inverse_mod():
    assert inverse_mod(3, 7) == 5
    assert inverse_mod(10, 7) == 5
    assert inverse_mod(2, 4) is None
    assert inverse_mod(0, 7) is None
    p = (1 << 64) - 59
    a = 0x1234567890ABCDEF
    assert a * inverse_mod(a, p) % p == 1


def test_inverse_mod_big():
    m = (1 << 89) - 1
    a = 12345678901234567890123
    inv = inverse_mod_big(a, m)
    assert isinstance(inv, int)
    assert a * inv % m == 1
    assert inverse_mod_big(6, 9) is None
    assert inverse_mod_big(3, 7) == inverse_mod(3, 7)


def test_select_arithmetic():
    assert select_arithmetic(1009) is NATIVE
    assert select_arithmetic((1 << 64) - 1) is NATIVE
    assert select_arithmetic(1 << 64) is BIG
    assert BIG.fits(1 << 200)


def test_crt():
    assert crt([2, 3, 2], [3, 5, 7]) == 23
    assert crt([2, 3, 2], [3, 5, 7], inverse=inverse_mod) == 23
    assert crt([], []) == 0


def test_crt_large_moduli():
    moduli = [(1 << 61) - 1, (1 << 89) - 1, 1009]
    x = 98765432109876543210987654321
    residues = [x % m for m in moduli]
    assert crt(residues, moduli) == x


def test_crt_not_coprime():
    assert crt([1, 1], [2, 4]) is None
    with pytest.raises(ValueError):
        crt([1], [2, 3])
