"""Algebraic structures the matrix and gcd engines are parametrised over.

The engines never touch elements directly; every operation goes through a
structure object. A structure supplies ``zero``, ``one`` and the operations
of its capability:

* ``Ring``: ``add``, ``neg``, ``mul``.
* ``EuclideanDomain``: a ring plus ``div``, ``rem``, ``degree``, ``is_unit``.
* ``Field``: a ring plus ``inv``.

Concrete structures live at the bottom of the module.
"""

import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Iterable, Optional

import sympy as sp


class Ring(ABC):
    """Base class of rings.

    Subclasses provide ``zero`` and ``one`` (as attributes or properties)
    and the three primitive operations. No ring law is checked.
    """

    @abstractmethod
    def add(self, a, b):
        ...

    @abstractmethod
    def neg(self, a):
        ...

    @abstractmethod
    def mul(self, a, b):
        ...

    def sub(self, a, b):
        return self.add(a, self.neg(b))

    def eq(self, a, b) -> bool:
        return a == b

    def is_zero(self, a) -> bool:
        return self.eq(a, self.zero)

    def sum(self, values: Iterable):
        result = self.zero
        for value in values:
            result = self.add(result, value)
        return result

    def from_int(self, n: int):
        """Return ``one + one + ... + one`` (``n`` times), negated if n < 0."""
        result = self.zero
        for _ in range(abs(n)):
            result = self.add(result, self.one)
        return self.neg(result) if n < 0 else result

    def coerce(self, value):
        """Convert a literal into an element. Identity unless overridden."""
        return value


class EuclideanDomain(Ring):
    """A ring with division with remainder and a degree function.

    For nonzero ``b`` the pair must satisfy
    ``a == div(a, b) * b + rem(a, b)`` and either ``rem(a, b) == zero``
    or ``degree(rem(a, b)) < degree(b)``.
    """

    @abstractmethod
    def div(self, a, b):
        ...

    @abstractmethod
    def rem(self, a, b):
        ...

    @abstractmethod
    def degree(self, a) -> int:
        ...

    @abstractmethod
    def is_unit(self, a) -> bool:
        ...


class Field(Ring):
    """A ring in which every nonzero element has an inverse."""

    @abstractmethod
    def inv(self, a):
        ...

    def div(self, a, b):
        return self.mul(a, self.inv(b))


@dataclass(frozen=True)
class OperatorRing(Ring):
    """Ring over any element type that already implements ``+``, ``-``, ``*``.

    >>> r = OperatorRing(0.0, 1.0)
    """

    zero: Any
    one: Any

    def add(self, a, b):
        return a + b

    def neg(self, a):
        return -a

    def mul(self, a, b):
        return a * b

    def sub(self, a, b):
        return a - b


def _integral(value) -> int:
    """Return ``value`` as an int, refusing anything that is not integral."""
    if isinstance(value, bool):
        raise TypeError(f"Expected an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"Expected an integer, got {value!r}") from None


@dataclass(frozen=True)
class IntegerDomain(EuclideanDomain):
    """The integers with truncating division.

    ``div`` rounds toward zero and ``rem`` takes the sign of the dividend,
    so ``|rem(a, b)| < |b|``.
    """

    zero = 0
    one = 1

    def add(self, a, b):
        return a + b

    def neg(self, a):
        return -a

    def mul(self, a, b):
        return a * b

    def sub(self, a, b):
        return a - b

    def div(self, a, b):
        if b == 0:
            raise ZeroDivisionError("integer division by zero")
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q

    def rem(self, a, b):
        return a - b * self.div(a, b)

    def degree(self, a) -> int:
        return abs(a)

    def is_unit(self, a) -> bool:
        return abs(a) == 1

    def from_int(self, n: int):
        return n

    def coerce(self, value):
        return _integral(value)


INTEGERS = IntegerDomain()


@dataclass(frozen=True)
class RationalField(Field):
    """Exact rationals backed by ``sympy.Rational``."""

    zero = sp.Integer(0)
    one = sp.Integer(1)

    def add(self, a, b):
        return a + b

    def neg(self, a):
        return -a

    def mul(self, a, b):
        return a * b

    def sub(self, a, b):
        return a - b

    def inv(self, a):
        if a == 0:
            raise ZeroDivisionError("inverse of zero in QQ")
        return sp.Integer(1) / a

    def from_int(self, n: int):
        return sp.Integer(n)

    def coerce(self, value):
        if isinstance(value, Fraction):
            return sp.Rational(value.numerator, value.denominator)
        return sp.Rational(value)


RATIONALS = RationalField()


@dataclass(frozen=True)
class RingZModN(Ring):
    """The ring ``Z/NZ`` with elements stored as ints in ``[0, N)``."""

    N: int

    def __post_init__(self):
        if self.N < 1:
            raise ValueError(f"Modulus must be positive, got {self.N}")

    @property
    def zero(self):
        return 0

    @property
    def one(self):
        return 1 % self.N

    def add(self, a, b):
        return (a + b) % self.N

    def neg(self, a):
        return (-a) % self.N

    def sub(self, a, b):
        return (a - b) % self.N

    def mul(self, a, b):
        return (a * b) % self.N

    def eq(self, a, b) -> bool:
        return (a - b) % self.N == 0

    def from_int(self, n: int):
        return n % self.N

    def coerce(self, value):
        return _integral(value) % self.N

    def is_unit(self, a) -> bool:
        return self.try_inverse(a) is not None

    def try_inverse(self, a) -> Optional[int]:
        """Return the canonical inverse of ``a`` or ``None`` if it has none."""
        from .modular import try_inverse

        if self.N == 1:
            return 0
        inv = try_inverse(INTEGERS, a % self.N, self.N)
        return None if inv is None else inv % self.N

    def inverse(self, a) -> int:
        """Return the canonical inverse of ``a``.

        Raises:
            NotInvertibleError: If ``gcd(a, N)`` is not 1.
        """
        from .modular import NotInvertibleError

        inv = self.try_inverse(a)
        if inv is None:
            raise NotInvertibleError(f"{a} has no inverse modulo {self.N}")
        return inv


@dataclass(frozen=True)
class PrimeField(RingZModN, Field):
    """``Z/pZ`` for prime ``p``."""

    def __post_init__(self):
        if not sp.isprime(self.N):
            raise ValueError(f"{self.N} is not prime")

    def inv(self, a):
        if a % self.N == 0:
            raise ZeroDivisionError(f"inverse of zero in GF({self.N})")
        return self.inverse(a)

    def div(self, a, b):
        return self.mul(a, self.inv(b))


@dataclass(frozen=True)
class PolynomialDomain(EuclideanDomain):
    """Univariate polynomials over QQ, elements are ``sympy.Poly``."""

    symbol: str = "x"

    @property
    def gen(self):
        return sp.Symbol(self.symbol)

    @property
    def zero(self):
        return sp.Poly(0, self.gen, domain=sp.QQ)

    @property
    def one(self):
        return sp.Poly(1, self.gen, domain=sp.QQ)

    def coerce(self, value):
        if isinstance(value, sp.Poly):
            return value.set_domain(sp.QQ)
        return sp.Poly(value, self.gen, domain=sp.QQ)

    def add(self, a, b):
        return a + b

    def neg(self, a):
        return -a

    def mul(self, a, b):
        return a * b

    def sub(self, a, b):
        return a - b

    def is_zero(self, a) -> bool:
        return a.is_zero

    def div(self, a, b):
        if b.is_zero:
            raise ZeroDivisionError("polynomial division by zero")
        return a.quo(b)

    def rem(self, a, b):
        if b.is_zero:
            raise ZeroDivisionError("polynomial division by zero")
        return a.rem(b)

    def degree(self, a) -> int:
        return 0 if a.is_zero else int(a.degree())

    def is_unit(self, a) -> bool:
        return not a.is_zero and a.degree() == 0
