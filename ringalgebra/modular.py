"""Inverses modulo an element of a Euclidean domain."""

from typing import Any, Optional

from .gcd import extended_gcd
from .ring import EuclideanDomain


class NotInvertibleError(ArithmeticError):
    """Raised when an element has no inverse modulo the given modulus."""


def try_inverse(domain: EuclideanDomain, x, modulus) -> Optional[Any]:
    """Return an inverse of ``x`` modulo ``modulus``, or ``None``.

    The Bezout coefficient is divided by the gcd, which normalises it when
    the gcd is a unit other than ``one`` (for example ``-1`` over the
    integers, or a nonzero constant polynomial). The result is not reduced
    modulo ``modulus``.

    Raises:
        ValueError: If ``modulus`` is zero.
    """
    if domain.is_zero(x):
        return None
    alpha, _beta, g = extended_gcd(domain, x, modulus)
    if not domain.is_unit(g):
        return None
    return domain.div(alpha, g)


def inverse(domain: EuclideanDomain, x, modulus):
    """Like ``try_inverse`` but raises instead of returning ``None``.

    Raises:
        NotInvertibleError: If ``x`` is zero or ``gcd(x, modulus)`` is not
            a unit.
    """
    inv = try_inverse(domain, x, modulus)
    if inv is None:
        raise NotInvertibleError(f"{x} is not invertible modulo {modulus}")
    return inv


def is_invertible(domain: EuclideanDomain, x, modulus) -> bool:
    return try_inverse(domain, x, modulus) is not None
