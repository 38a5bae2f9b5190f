import random

from ringalgebra.matrix import Matrix
from ringalgebra.ring import Ring


def make_random_matrix(
    ring: Ring,
    nrows: int,
    ncols: int,
    low: int = -9,
    high: int = 9,
) -> Matrix:
    """Generate a random matrix whose entries are small integers in ``ring``."""
    data = [
        [ring.from_int(random.randint(low, high)) for _ in range(ncols)]
        for _ in range(nrows)
    ]
    return Matrix.from_rows(ring, data)


def make_random_invertible(
    field: Ring,
    n: int,
    low: int = -9,
    high: int = 9,
) -> Matrix:
    """Random invertible ``n x n`` matrix built as a row-shuffled ``L * U``.

    ``L`` is unit lower triangular and ``U`` is upper triangular with a
    nonzero diagonal, so the product is invertible by construction.
    """
    L = make_random_matrix(field, n, n, low, high)
    U = make_random_matrix(field, n, n, low, high)
    for i in range(1, n + 1):
        for j in range(1, n + 1):
            if j > i:
                L[i, j] = field.zero
            elif j < i:
                U[i, j] = field.zero
        L[i, i] = field.one
        while field.is_zero(U[i, i]):
            U[i, i] = field.from_int(random.randint(low, high))
    A = L * U
    order = list(range(1, n + 1))
    random.shuffle(order)
    return Matrix.from_rows(field, [A.row(r).data for r in order])



def det_ring_matrix(M: Matrix):
    """
    Naive cofactor-expansion determinant for small square matrices.
    Uses only the ring operations, so it works over any commutative ring.
    """
    ring = M.ring
    n = M.rows
    assert n == M.cols

    if n == 0:
        return ring.one
    if n == 1:
        return M[1, 1]

    rows = M.to_rows()
    det = ring.zero
    for j in range(n):
        minor = [row[:j] + row[j + 1:] for row in rows[1:]]
        sub_det = det_ring_matrix(Matrix.from_rows(ring, minor))
        term = ring.mul(rows[0][j], sub_det)
        if j % 2 == 0:
            det = ring.add(det, term)
        else:
            det = ring.sub(det, term)
    return det


def is_lower_unitriangular(M: Matrix) -> bool:
    ring = M.ring
    for r in range(1, M.rows + 1):
        for c in range(1, M.cols + 1):
            x = M[r, c]
            if r == c and not ring.eq(x, ring.one):
                return False
            if c > r and not ring.is_zero(x):
                return False
    return True


def is_upper_triangular(M: Matrix) -> bool:
    ring = M.ring
    return all(
        ring.is_zero(M[r, c])
        for r in range(1, M.rows + 1)
        for c in range(1, min(r, M.cols + 1))
    )


def is_permutation_matrix(P: Matrix) -> bool:
    ring = P.ring
    rows = P.to_rows()
    for line in rows + P.transpose().to_rows():
        ones = [x for x in line if ring.eq(x, ring.one)]
        zeros = [x for x in line if ring.is_zero(x)]
        if len(ones) != 1 or len(ones) + len(zeros) != len(line):
            return False
    return True
