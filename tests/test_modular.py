import math

import pytest
import sympy as sp

from ringalgebra.modular import NotInvertibleError, inverse, is_invertible, try_inverse
from ringalgebra.ring import INTEGERS, PolynomialDomain

X = sp.Symbol("x")
POLYS = PolynomialDomain("x")

MODULI = [2, 7, 12, 26, 97, 100]


@pytest.mark.parametrize("modulus", MODULI)
def test_inverse_exists_exactly_for_coprime_residues(modulus):
    for x in range(modulus):
        inv = try_inverse(INTEGERS, x, modulus)
        if x != 0 and math.gcd(x, modulus) == 1:
            assert inv is not None
            assert (x * inv) % modulus == 1
            assert (x * inverse(INTEGERS, x, modulus)) % modulus == 1
            assert is_invertible(INTEGERS, x, modulus)
        else:
            assert inv is None
            assert not is_invertible(INTEGERS, x, modulus)
            with pytest.raises(NotInvertibleError):
                inverse(INTEGERS, x, modulus)


def test_seven_mod_twenty_six():
    assert inverse(INTEGERS, 7, 26) % 26 == 15


def test_inverse_is_normalised_by_a_non_one_unit_gcd():
    # gcd(-7, -3) comes out as -1, so the raw Bezout coefficient has the
    # wrong sign until it is divided by the gcd.
    inv = inverse(INTEGERS, -7, -3)

    assert INTEGERS.rem(-7 * inv, -3) == 1


def test_zero_is_never_invertible():
    assert try_inverse(INTEGERS, 0, 5) is None
    with pytest.raises(NotInvertibleError):
        inverse(INTEGERS, 0, 5)


def test_zero_modulus_is_rejected():
    with pytest.raises(ValueError):
        try_inverse(INTEGERS, 3, 0)


def test_not_invertible_error_is_arithmetic_error():
    with pytest.raises(ArithmeticError):
        inverse(INTEGERS, 4, 8)


def test_polynomial_inverse():
    modulus = POLYS.coerce(X ** 2 + 1)
    x = POLYS.coerce(X)

    inv = inverse(POLYS, x, modulus)

    assert inv == POLYS.coerce(-X)
    assert POLYS.rem(POLYS.mul(x, inv), modulus) == POLYS.one


def test_polynomial_inverse_with_constant_gcd():
    a = POLYS.coerce(2 * X + 2)
    modulus = POLYS.coerce(2 * X)

    inv = inverse(POLYS, a, modulus)

    assert inv == POLYS.coerce(sp.Rational(1, 2))
    assert POLYS.rem(POLYS.mul(a, inv), modulus) == POLYS.one


def test_polynomial_without_inverse():
    modulus = POLYS.coerce(X ** 2)
    assert try_inverse(POLYS, POLYS.coerce(X), modulus) is None
    assert try_inverse(POLYS, POLYS.zero, modulus) is None
