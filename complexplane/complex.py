import math
import numbers
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .config import DEFAULT_FRACTION_DIGITS
from .errors import ComplexZeroDivisionError, InvalidArgument
from .formatting import require_fraction_digits, to_pretty_string


class Quadrant(Enum):
    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    ON_AXIS = 0


def _as_float(value, name: str) -> float:
    if isinstance(value, numbers.Real):
        return float(value)
    raise TypeError(f"{name} must be a real number, got {type(value).__name__}")


def _overflowing(compute, *args) -> float:
    # math raises on overflow where IEEE arithmetic gives inf
    try:
        return compute(*args)
    except OverflowError:
        return math.inf


def _trig(fn, x: float) -> float:
    # math raises on inf where IEEE arithmetic gives nan
    return fn(x) if math.isfinite(x) else math.nan


@dataclass(frozen=True)
class Complex:
    """
    An immutable complex number with rectangular storage and polar views.

    Constructors
    ------------
    Complex(a, b)                 -> a + b i      (any real inputs, default 0)
    Complex.from_polar(r, theta)  -> r·e^{iθ}
    Complex.from_complex(z)       -> from a builtin ``complex``

    Operators work between two ``Complex`` values and between a ``Complex``
    and any real scalar, on either side. Powers and roots go through polar
    form (de Moivre), so ``z ** 50`` costs the same as ``z ** 2``.
    """

    re: float = 0.0
    im: float = 0.0

    # let numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    # ---------- construction ----------
    def __post_init__(self):
        object.__setattr__(self, "re", _as_float(self.re, "re"))
        object.__setattr__(self, "im", _as_float(self.im, "im"))

    @classmethod
    def from_polar(cls, r: float, theta: float) -> "Complex":
        """Explicit polar constructor."""
        return cls(r * _trig(math.cos, theta), r * _trig(math.sin, theta))

    @classmethod
    def from_complex(cls, z: complex) -> "Complex":
        return cls(z.real, z.imag)

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def to_numpy(self) -> np.complex128:
        return np.complex128(complex(self.re, self.im))

    # ---------- polar properties ----------
    @property
    def conjugate(self) -> "Complex":
        return Complex(self.re, -self.im)

    @property
    def r(self) -> float:
        return math.hypot(self.re, self.im)

    @property
    def theta(self) -> float:
        return math.atan2(self.im, self.re)

    @property
    def quadrant(self) -> Quadrant:
        if self.re == 0 or self.im == 0:
            return Quadrant.ON_AXIS
        if self.re > 0:
            return Quadrant.FIRST if self.im > 0 else Quadrant.FOURTH
        return Quadrant.SECOND if self.im > 0 else Quadrant.THIRD

    def __abs__(self) -> float:
        return self.r

    def isclose(self, other: "Complex | float | int", *, rel_tol: float = 1e-09, abs_tol: float = 0.0) -> bool:
        """Componentwise ``math.isclose``; ``==`` stays exact."""
        other = self._operand(other)
        return (math.isclose(self.re, other.re, rel_tol=rel_tol, abs_tol=abs_tol)
                and math.isclose(self.im, other.im, rel_tol=rel_tol, abs_tol=abs_tol))

    # ---------- arithmetic ----------
    @staticmethod
    def _operand(other) -> "Complex":
        if isinstance(other, Complex):
            return other
        if isinstance(other, numbers.Real):
            return Complex(other)
        raise TypeError(f"Unsupported operand type: {type(other).__name__}")

    def add(self, other: "Complex | float | int") -> "Complex":
        other = self._operand(other)
        return Complex(self.re + other.re, self.im + other.im)

    def subtract(self, other: "Complex | float | int") -> "Complex":
        other = self._operand(other)
        return Complex(self.re - other.re, self.im - other.im)

    def multiply(self, other: "Complex | float | int") -> "Complex":
        if isinstance(other, numbers.Real):
            n = float(other)
            return Complex(n * self.re, n * self.im)
        other = self._operand(other)
        return Complex(self.re * other.re - self.im * other.im,
                       self.re * other.im + self.im * other.re)

    def divide(self, other: "Complex | float | int") -> "Complex":
        if isinstance(other, numbers.Real):
            n = float(other)
            if n == 0:
                raise ComplexZeroDivisionError("You can't divide a complex number by 0")
            return Complex(self.re / n, self.im / n)

        other = self._operand(other)
        if other.r == 0:
            raise ComplexZeroDivisionError("The absolute value of the divisor complex number must not be 0")
        # scale the divisor so its squared magnitude neither underflows nor overflows
        scale = max(abs(other.re), abs(other.im))
        unit = Complex(other.re / scale, other.im / scale)
        return self.multiply(unit.conjugate).divide(unit.re * unit.re + unit.im * unit.im).divide(scale)

    def inverse(self) -> "Complex":
        return Complex(1).divide(self)

    def normalize(self) -> "Complex":
        m = self.r
        if m == 0:
            raise ComplexZeroDivisionError("Cannot normalize the zero complex number")
        return Complex(self.re / m, self.im / m)

    # ---------- powers & roots ----------
    def pow(self, n: float) -> "Complex":
        n = _as_float(n, "exponent")
        r = self.r
        if r == 0 and n < 0:
            magnitude = math.inf
        else:
            magnitude = _overflowing(math.pow, r, n)
        return Complex.from_polar(magnitude, n * self.theta)

    def square(self) -> "Complex":
        return self.pow(2)

    def cube(self) -> "Complex":
        return self.pow(3)

    def root(self, n: int) -> "Complex":
        """Principal ``n``th root: magnitude ``r^(1/n)``, angle ``theta/n``."""
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise TypeError(f"The root must be an integer, got {type(n).__name__}")
        if n <= 0:
            raise InvalidArgument("The root must be positive")
        return Complex.from_polar(self.r ** (1.0 / n), self.theta / n)

    def sqrt(self) -> "Complex":
        return self.root(2)

    def cbrt(self) -> "Complex":
        return self.root(3)

    # ---------- display forms ----------
    def to_algebraic_form(self, max_fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> str:
        require_fraction_digits(max_fraction_digits)
        re = to_pretty_string(self.re, max_fraction_digits)
        if self.im >= 0:
            return f"{re} + {to_pretty_string(self.im, max_fraction_digits)}i"
        return f"{re} - {to_pretty_string(abs(self.im), max_fraction_digits)}i"

    def to_trigonometric_form(self, max_fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> str:
        require_fraction_digits(max_fraction_digits)
        r = to_pretty_string(self.r, max_fraction_digits)
        theta = to_pretty_string(self.theta, max_fraction_digits)
        return f"{r} (cos({theta}) + sin({theta})i)"

    def to_exponential_form(self, max_fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> str:
        require_fraction_digits(max_fraction_digits)
        r = to_pretty_string(self.r, max_fraction_digits)
        theta = to_pretty_string(self.theta, max_fraction_digits)
        return f"{r} e^{theta}i"

    def __str__(self):
        return self.to_algebraic_form()

    # ---------- dunder sugar ----------
    def __neg__(self) -> "Complex":
        return Complex(-self.re, -self.im)

    def __pos__(self) -> "Complex":
        return self

    def __add__(self, other):
        if not isinstance(other, (Complex, numbers.Real)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, (Complex, numbers.Real)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return (-self).add(other)

    def __mul__(self, other):
        if not isinstance(other, (Complex, numbers.Real)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, (Complex, numbers.Real)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Complex(other).divide(self)

    def __pow__(self, n):
        if not isinstance(n, numbers.Real):
            return NotImplemented
        return self.pow(n)


i = Complex(0.0, 1.0)


def exp(z: Complex) -> Complex:
    """Euler's formula: ``e^re · (cos(im) + i·sin(im))``."""
    return _overflowing(math.exp, z.re) * (_trig(math.cos, z.im) + _trig(math.sin, z.im) * i)


def sqrt(z: Complex) -> Complex:
    return z.sqrt()


def cbrt(z: Complex) -> Complex:
    return z.cbrt()


def isclose(a: Complex, b: "Complex | float | int", *, rel_tol: float = 1e-09, abs_tol: float = 0.0) -> bool:
    return a.isclose(b, rel_tol=rel_tol, abs_tol=abs_tol)
