"""Immutable complex numbers with polar operations and three display forms."""
from .complex import Complex, Quadrant, cbrt, exp, i, isclose, sqrt
from .errors import ComplexZeroDivisionError, InvalidArgument
from .formatting import to_pretty_string

__all__ = [
    "Complex",
    "ComplexZeroDivisionError",
    "InvalidArgument",
    "Quadrant",
    "cbrt",
    "exp",
    "i",
    "isclose",
    "sqrt",
    "to_pretty_string",
]
