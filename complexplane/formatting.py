"""
Decimal rendering of floats for the display forms.

Values are rounded half-even on their exact binary value, trailing zeros are
dropped and no grouping separators are written:

    to_pretty_string(1.0986841134678)     -> "1.0987"
    to_pretty_string(2.0)                 -> "2"
    to_pretty_string(0.125, 2)            -> "0.12"
"""
import math
import numbers
from decimal import Context, Decimal

from .config import DEFAULT_FRACTION_DIGITS, MAX_INTEGER_DIGITS, ROUNDING
from .errors import InvalidArgument


def require_fraction_digits(max_fraction_digits: int) -> None:
    if not isinstance(max_fraction_digits, numbers.Integral):
        raise TypeError(f"Fraction digits must be an integer, got {max_fraction_digits!r}")
    if max_fraction_digits < 0:
        raise InvalidArgument("The number of fraction digits must not be negative")


def to_pretty_string(value: float, max_fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> str:
    """Render ``value`` with at most ``max_fraction_digits`` fraction digits."""
    require_fraction_digits(max_fraction_digits)

    value = float(value)
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    context = Context(prec=MAX_INTEGER_DIGITS + max_fraction_digits, rounding=ROUNDING)
    quantum = Decimal(1).scaleb(-max_fraction_digits)
    rounded = Decimal(value).quantize(quantum, context=context)

    if rounded.is_zero():                  # also folds "-0" into "0"
        return "0"

    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
