from math import gcd

import pytest

from ..exceptions import InvalidModulusError, NoInverseExistsError
from ..modular import mod_inverse, normalize


def test_normalize() -> None:
    assert normalize(20, 7) == 6
    assert normalize(-1, 7) == 6
    assert normalize(-14, 7) == 0
    assert normalize(130 - 313 * 5, 313) == 130

    for value in range(-1000, 1000):
        assert 0 <= normalize(value, 313) < 313


def test_inverse() -> None:
    # 124 * 260 = 103 * 313 + 1
    assert mod_inverse(260, 313) == 124
    assert mod_inverse(-1, 313) == 312
    assert mod_inverse(1, 2) == 1

    for m in (313, 26, 1 << 16):
        for a in range(1, m):
            if gcd(a, m) != 1:
                continue
            b = mod_inverse(a, m)
            assert 0 <= b < m
            assert a * b % m == 1
            assert b == pow(a, -1, m)


def test_no_inverse() -> None:
    for m in range(2, 50):
        with pytest.raises(NoInverseExistsError):
            mod_inverse(0, m)

    with pytest.raises(NoInverseExistsError):
        mod_inverse(313, 313)

    with pytest.raises(NoInverseExistsError, match='4 has no modular inverse modulo 26') as info:
        mod_inverse(4, 26)
    assert info.value.value == 4
    assert info.value.modulus == 26


def test_bad_modulus() -> None:
    for m in (-5, 0, 1):
        with pytest.raises(InvalidModulusError, match='Modulus should be at least 2') as info:
            mod_inverse(3, m)
        assert info.value.modulus == m
