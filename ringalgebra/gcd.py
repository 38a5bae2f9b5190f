"""Extended Euclidean algorithm over an abstract Euclidean domain.

The computation keeps a 2x3 status table whose rows ``(c, d, v)`` are
linear combinations of the inputs::

    v == c*a + d*b

Starting from ``[[1, 0, a], [0, 1, b]]`` each step subtracts a multiple of
the second row from the first, which replaces ``row1.v`` by the remainder
``row1.v % row2.v``, and then swaps the rows. When ``row2.v`` reaches zero
the first row holds the Bezout coefficients and the gcd, so no
back-substitution is needed.
"""

import logging
from typing import Any, List, Tuple

from .ring import EuclideanDomain

logger = logging.getLogger(__name__)


def _coherent(domain: EuclideanDomain, row: List[Any], a, b) -> bool:
    c, d, v = row
    return domain.eq(v, domain.add(domain.mul(c, a), domain.mul(d, b)))


def extended_gcd(domain: EuclideanDomain, a, b) -> Tuple[Any, Any, Any]:
    """Compute ``(alpha, beta, g)`` with ``alpha*a + beta*b == g``.

    ``g`` is a gcd of ``a`` and ``b``; it is only determined up to a unit
    of the domain, so over the integers it may come out as ``-1``.

    Args:
        domain: Euclidean domain the inputs live in.
        a: First operand, must be nonzero.
        b: Second operand, must be nonzero.

    Returns:
        The tuple ``(alpha, beta, g)``.

    Raises:
        ValueError: If ``a`` or ``b`` is zero.
    """
    if domain.is_zero(a) or domain.is_zero(b):
        raise ValueError("extended_gcd requires nonzero operands")

    one, zero = domain.one, domain.zero
    row1 = [one, zero, a]
    row2 = [zero, one, b]

    if domain.degree(row1[2]) < domain.degree(row2[2]):
        row1, row2 = row2, row1

    steps = 0
    while not domain.is_zero(row2[2]):
        assert _coherent(domain, row1, a, b) and _coherent(domain, row2, a, b)
        assert domain.degree(row1[2]) >= domain.degree(row2[2])

        m = domain.rem(row1[2], row2[2])
        quotient = domain.div(domain.sub(row1[2], m), row2[2])

        # row1 <- row1 - quotient * row2; this leaves m in row1.v
        row1 = [domain.sub(x, domain.mul(quotient, y)) for x, y in zip(row1, row2)]
        assert domain.is_zero(row1[2]) or domain.degree(row1[2]) < domain.degree(row2[2])

        row1, row2 = row2, row1
        steps += 1

    assert _coherent(domain, row1, a, b)
    logger.debug("extended_gcd finished after %d steps", steps)

    alpha, beta, g = row1
    return alpha, beta, g


def gcd(domain: EuclideanDomain, a, b):
    """Return a gcd of two nonzero elements."""
    return extended_gcd(domain, a, b)[2]
