"""Dense matrices over an arbitrary ring.

Entries are addressed with 1-based ``(row, col)`` pairs and stored in a flat
column-major list, so element ``(r, c)`` sits at ``(r - 1) + (c - 1) * rows``.
Every arithmetic operation goes through the matrix's ``ring``.
"""

from typing import Any, Callable, List, Optional, Sequence, Tuple

import numpy as np

from .printing import Printer, to_string
from .ring import Ring


class Matrix:
    """Dense ``rows x cols`` matrix over ``ring``.

    The shape is fixed at construction; only individual elements can be
    replaced afterwards.
    """

    def __init__(
        self,
        ring: Ring,
        rows: int,
        cols: int,
        data: Optional[Sequence[Any]] = None,
    ):
        if rows < 0 or cols < 0:
            raise ValueError(f"Negative dimensions: {rows}x{cols}")
        size = rows * cols
        if data is None:
            data = [ring.zero] * size
        elif len(data) != size:
            raise ValueError(
                f"Backing store has {len(data)} elements, "
                f"expected {rows}x{cols} = {size}"
            )
        else:
            data = [ring.coerce(x) for x in data]
        self._ring = ring
        self._rows = rows
        self._cols = cols
        self._data = data

    @property
    def ring(self) -> Ring:
        return self._ring

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def data(self) -> List[Any]:
        """Copy of the column-major backing store."""
        return self._data[:]

    def __repr__(self) -> str:
        return (
            f"Matrix(ring={self.ring!r}, rows={self.rows}, "
            f"cols={self.cols}, data={self._data!r})"
        )

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def length(self) -> int:
        return max(self.rows, self.cols)

    def is_empty(self) -> bool:
        return self.rows * self.cols == 0

    def is_row_vector(self) -> bool:
        return self.rows == 1

    def is_column_vector(self) -> bool:
        return self.cols == 1

    def is_vector(self) -> bool:
        return self.rows == 1 or self.cols == 1

    def is_square(self) -> bool:
        return self.rows == self.cols

    @classmethod
    def from_rows(cls, ring: Ring, rows: Sequence[Sequence[Any]]) -> "Matrix":
        nrows = len(rows)
        ncols = len(rows[0]) if nrows else 0
        for row in rows:
            if len(row) != ncols:
                raise ValueError("All rows must have the same length")
        data = [rows[r][c] for c in range(ncols) for r in range(nrows)]
        return cls(ring, nrows, ncols, data)

    @classmethod
    def zero(cls, ring: Ring, rows: int, cols: Optional[int] = None) -> "Matrix":
        return cls(ring, rows, rows if cols is None else cols)

    @classmethod
    def identity(cls, ring: Ring, rows: int, cols: Optional[int] = None) -> "Matrix":
        m = cls.zero(ring, rows, cols)
        for i in range(min(m.rows, m.cols)):
            m._data[i + i * m.rows] = ring.one
        return m

    @classmethod
    def reverse_identity(
        cls, ring: Ring, rows: int, cols: Optional[int] = None
    ) -> "Matrix":
        """Ones at ``(rows + 1 - i, i)`` for ``i`` in ``1..min(rows, cols)``.

        This is ``identity(rows, cols).flip_ud()`` built in one pass, so on
        tall matrices the ones end in the bottom row rather than on the
        ``row + col == min + 1`` diagonal.
        """
        m = cls.zero(ring, rows, cols)
        for i in range(min(m.rows, m.cols)):
            m._data[(m.rows - 1 - i) + i * m.rows] = ring.one
        return m

    @classmethod
    def zero_like(cls, other: "Matrix") -> "Matrix":
        return cls.zero(other.ring, other.rows, other.cols)

    @classmethod
    def identity_like(cls, other: "Matrix") -> "Matrix":
        return cls.identity(other.ring, other.rows, other.cols)

    @classmethod
    def reverse_identity_like(cls, other: "Matrix") -> "Matrix":
        return cls.reverse_identity(other.ring, other.rows, other.cols)

    def copy(self) -> "Matrix":
        return Matrix(self.ring, self.rows, self.cols, self._data[:])

    def to_rows(self) -> List[List[Any]]:
        n = self.rows
        return [[self._data[r + c * n] for c in range(self.cols)] for r in range(n)]

    def _offset(self, r: int, c: Optional[int] = None) -> int:
        if c is None:
            if not self.is_vector():
                raise ValueError(
                    f"Single-index access needs a vector, got {self.rows}x{self.cols}"
                )
            if not 1 <= r <= len(self._data):
                raise ValueError(f"Index {r} out of range 1..{len(self._data)}")
            return r - 1
        if not (1 <= r <= self.rows and 1 <= c <= self.cols):
            raise ValueError(
                f"Index ({r}, {c}) out of range for {self.rows}x{self.cols} matrix"
            )
        return (r - 1) + (c - 1) * self.rows

    @staticmethod
    def _split_key(key) -> Tuple[int, Optional[int]]:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise ValueError(f"Expected (row, col), got {key!r}")
            return key
        return key, None

    def value(self, r: int, c: Optional[int] = None):
        return self._data[self._offset(r, c)]

    def __getitem__(self, key):
        return self.value(*self._split_key(key))

    def __setitem__(self, key, element) -> None:
        self._data[self._offset(*self._split_key(key))] = self.ring.coerce(element)

    def update(self, key, fn: Callable[[Any], Any]) -> None:
        """Replace the element at ``key`` with ``fn(element)`` in place."""
        pos = self._offset(*self._split_key(key))
        self._data[pos] = fn(self._data[pos])

    def row(self, r: int) -> "Matrix":
        if not 1 <= r <= self.rows:
            raise ValueError(f"Row {r} out of range 1..{self.rows}")
        n = self.rows
        return Matrix(
            self.ring, 1, self.cols, [self._data[(r - 1) + c * n] for c in range(self.cols)]
        )

    def column(self, c: int) -> "Matrix":
        if not 1 <= c <= self.cols:
            raise ValueError(f"Column {c} out of range 1..{self.cols}")
        n = self.rows
        return Matrix(self.ring, n, 1, self._data[(c - 1) * n : c * n])

    def swap_rows(self, i: int, j: int, upto: Optional[int] = None) -> None:
        """In-place: exchange rows ``i`` and ``j`` in columns ``1..upto``."""
        if not (1 <= i <= self.rows and 1 <= j <= self.rows):
            raise ValueError(f"Rows ({i}, {j}) out of range 1..{self.rows}")
        if upto is None:
            upto = self.cols
        elif not 0 <= upto <= self.cols:
            raise ValueError(f"Column bound {upto} out of range 0..{self.cols}")
        n = self.rows
        for c in range(upto):
            a, b = (i - 1) + c * n, (j - 1) + c * n
            self._data[a], self._data[b] = self._data[b], self._data[a]

    def flip_lr(self) -> "Matrix":
        n = self.rows
        data = []
        for c in reversed(range(self.cols)):
            data.extend(self._data[c * n : (c + 1) * n])
        return Matrix(self.ring, self.rows, self.cols, data)

    def flip_ud(self) -> "Matrix":
        n = self.rows
        data = []
        for c in range(self.cols):
            data.extend(reversed(self._data[c * n : (c + 1) * n]))
        return Matrix(self.ring, self.rows, self.cols, data)

    def transpose(self) -> "Matrix":
        n = self.rows
        data = [self._data[r + c * n] for r in range(n) for c in range(self.cols)]
        return Matrix(self.ring, self.cols, self.rows, data)

    def _check_compatible(self, other: "Matrix", op: str) -> None:
        if self.ring != other.ring:
            raise ValueError(f"Cannot {op} matrices over different rings")

    def _check_same_shape(self, other: "Matrix", op: str) -> None:
        self._check_compatible(other, op)
        if self.shape != other.shape:
            raise ValueError(f"Cannot {op} {self.rows}x{self.cols} and {other.rows}x{other.cols}")

    def trace(self):
        n = self.rows
        return self.ring.sum(self._data[i + i * n] for i in range(min(self.rows, self.cols)))

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, "add")
        add = self.ring.add
        return Matrix(self.ring, self.rows, self.cols, [add(x, y) for x, y in zip(self._data, other._data)])

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, "subtract")
        sub = self.ring.sub
        return Matrix(self.ring, self.rows, self.cols, [sub(x, y) for x, y in zip(self._data, other._data)])

    def __neg__(self) -> "Matrix":
        neg = self.ring.neg
        return Matrix(self.ring, self.rows, self.cols, [neg(x) for x in self._data])

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_compatible(other, "multiply")

        rA, cA = self.shape
        rB, cB = other.shape
        if cA != rB:
            raise ValueError(f"Dimension mismatch: {cA} != {rB}")

        ring = self.ring
        A = self._data
        B = other._data

        C = []
        for j in range(cB):
            Bj = B[j * rB : (j + 1) * rB]
            for i in range(rA):
                C.append(ring.sum(ring.mul(A[i + k * rA], Bj[k]) for k in range(cA)))

        return Matrix(ring, rA, cB, C)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self @ other
        c = self.ring.coerce(other)
        mul = self.ring.mul
        return Matrix(self.ring, self.rows, self.cols, [mul(x, c) for x in self._data])

    def __rmul__(self, other):
        return self.scale(other)

    def scale(self, c) -> "Matrix":
        """Left-multiply every element by the ring constant ``c``."""
        c = self.ring.coerce(c)
        mul = self.ring.mul
        return Matrix(self.ring, self.rows, self.cols, [mul(c, x) for x in self._data])

    def __pow__(self, exponent: int) -> "Matrix":
        if not self.is_square():
            raise ValueError(f"Power of a non-square {self.rows}x{self.cols} matrix")
        if isinstance(exponent, bool) or not isinstance(exponent, int) or exponent < 0:
            raise ValueError(f"Exponent must be a non-negative int, got {exponent!r}")
        if exponent == 0:
            return Matrix.identity_like(self)
        result = self.copy()
        for _ in range(exponent - 1):
            result = result @ self
        return result

    def dot(self, other: "Matrix"):
        return scalar_product(self, other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.ring != other.ring or self.shape != other.shape:
            return False
        eq = self.ring.eq
        return all(eq(x, y) for x, y in zip(self._data, other._data))

    def to_string(self, printer: Optional[Printer] = None) -> str:
        return to_string(self, printer)

    def __str__(self) -> str:
        return to_string(self)

    def to_numpy(self) -> np.ndarray:
        out = np.empty((self.rows, self.cols), dtype=object)
        for r, row in enumerate(self.to_rows()):
            out[r, :] = row
        return out

    def to_sympy(self):
        import sympy as sp

        # Poly entries have to become plain expressions first.
        cells = [
            x.as_expr() if isinstance(x, sp.Poly) else x
            for row in self.to_rows()
            for x in row
        ]
        return sp.Matrix(self.rows, self.cols, cells)

    def pprint(self):
        from sympy import pprint
        pprint(self.to_sympy())


def to_matrix(ring: Ring, array2d: Sequence[Sequence[Any]]) -> Matrix:
    return Matrix.from_rows(ring, array2d)


def to_array(matrix: Matrix) -> List[List[Any]]:
    return matrix.to_rows()


def scalar_product(x: Matrix, y: Matrix):
    """Sum of pairwise products of two vectors of equal length.

    Row and column orientation do not matter.
    """
    if not (x.is_vector() and y.is_vector()):
        raise ValueError(f"scalar_product needs vectors, got {x.shape} and {y.shape}")
    if x.length != y.length:
        raise ValueError(f"Vector lengths differ: {x.length} != {y.length}")
    x._check_compatible(y, "multiply")
    ring = x.ring
    return ring.sum(ring.mul(a, b) for a, b in zip(x._data, y._data))
