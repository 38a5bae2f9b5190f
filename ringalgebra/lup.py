"""LUP decomposition of square matrices over a field.

Elimination is exact, so the pivot in each column is simply the first
nonzero entry at or below the diagonal.
"""

import logging
from typing import Tuple

from .matrix import Matrix
from .ring import Field

logger = logging.getLogger(__name__)


class SingularMatrixError(ValueError):
    """Raised when a matrix has no LUP decomposition with invertible U."""


def _require_square_field(a: Matrix) -> Field:
    if not isinstance(a.ring, Field):
        raise TypeError(f"LUP decomposition needs a field, got {a.ring!r}")
    if not a.is_square():
        raise ValueError(f"Expected a square matrix, got {a.rows}x{a.cols}")
    return a.ring


def _decompose(a: Matrix) -> Tuple[Matrix, Matrix, list, int]:
    field = _require_square_field(a)
    n = a.rows
    L = Matrix.identity(field, n)
    U = a.copy()
    perm = list(range(1, n + 1))
    swaps = 0

    for k in range(1, n + 1):
        pivot = next((p for p in range(k, n + 1) if not field.is_zero(U[p, k])), None)
        if pivot is None:
            raise SingularMatrixError(f"Matrix is singular (no pivot in column {k})")
        if pivot != k:
            U.swap_rows(k, pivot)
            # Only the multipliers already stored left of the diagonal move.
            L.swap_rows(k, pivot, upto=k - 1)
            perm[k - 1], perm[pivot - 1] = perm[pivot - 1], perm[k - 1]
            swaps += 1

        inv_pivot = field.inv(U[k, k])
        for i in range(k + 1, n + 1):
            if field.is_zero(U[i, k]):
                continue
            factor = field.mul(U[i, k], inv_pivot)
            L[i, k] = factor
            for j in range(k, n + 1):
                U[i, j] = field.sub(U[i, j], field.mul(factor, U[k, j]))

    logger.debug("LUP of %dx%d matrix used %d row swaps", n, n, swaps)
    return L, U, perm, swaps


def _permutation_matrix(field: Field, perm: list) -> Matrix:
    P = Matrix.zero(field, len(perm))
    for k, source in enumerate(perm, start=1):
        P[k, source] = field.one
    return P


def lup_decompose(a: Matrix) -> Tuple[Matrix, Matrix, Matrix]:
    """Factor ``a`` as ``P * a == L * U``.

    Args:
        a: Square matrix over a ``Field``.

    Returns:
        ``(L, U, P)`` with ``L`` unit lower triangular, ``U`` upper
        triangular and ``P`` a permutation matrix.

    Raises:
        TypeError: If the ring of ``a`` is not a field.
        ValueError: If ``a`` is not square.
        SingularMatrixError: If ``a`` is singular.
    """
    L, U, perm, _ = _decompose(a)
    return L, U, _permutation_matrix(a.ring, perm)


def determinant(a: Matrix):
    field = _require_square_field(a)
    try:
        _, U, _, swaps = _decompose(a)
    except SingularMatrixError:
        return field.zero
    det = field.one
    for k in range(1, a.rows + 1):
        det = field.mul(det, U[k, k])
    return field.neg(det) if swaps % 2 else det


def solve(a: Matrix, b: Matrix) -> Matrix:
    """Solve ``a * x == b`` for a column vector ``b``."""
    field = _require_square_field(a)
    n = a.rows
    if b.shape != (n, 1):
        raise ValueError(f"Right-hand side must be {n}x1, got {b.rows}x{b.cols}")

    L, U, perm, _ = _decompose(a)

    y = [field.zero] * n
    for i in range(n):
        acc = b[perm[i], 1]
        for j in range(i):
            acc = field.sub(acc, field.mul(L[i + 1, j + 1], y[j]))
        y[i] = acc

    x = [field.zero] * n
    for i in reversed(range(n)):
        acc = y[i]
        for j in range(i + 1, n):
            acc = field.sub(acc, field.mul(U[i + 1, j + 1], x[j]))
        x[i] = field.div(acc, U[i + 1, i + 1])

    return Matrix(field, n, 1, x)
