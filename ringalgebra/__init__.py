from .gcd import extended_gcd, gcd
from .lup import SingularMatrixError, determinant, lup_decompose, solve
from .matrix import Matrix, scalar_product, to_array, to_matrix
from .modular import NotInvertibleError, inverse, is_invertible, try_inverse
from .printing import ElementPrinter, IndexedPrinter, register_printer, registered_printer, to_string
from .ring import (
    INTEGERS,
    RATIONALS,
    EuclideanDomain,
    Field,
    IntegerDomain,
    OperatorRing,
    PolynomialDomain,
    PrimeField,
    RationalField,
    Ring,
    RingZModN,
)

__all__ = [
    "ElementPrinter",
    "EuclideanDomain",
    "Field",
    "INTEGERS",
    "IndexedPrinter",
    "IntegerDomain",
    "Matrix",
    "NotInvertibleError",
    "OperatorRing",
    "PolynomialDomain",
    "PrimeField",
    "RATIONALS",
    "RationalField",
    "Ring",
    "RingZModN",
    "SingularMatrixError",
    "determinant",
    "extended_gcd",
    "gcd",
    "inverse",
    "is_invertible",
    "lup_decompose",
    "register_printer",
    "registered_printer",
    "scalar_product",
    "solve",
    "to_array",
    "to_matrix",
    "to_string",
    "try_inverse",
]
