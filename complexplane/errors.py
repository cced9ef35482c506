class InvalidArgument(ValueError):
    """An operation was called with an argument outside its domain."""


class ComplexZeroDivisionError(InvalidArgument, ZeroDivisionError):
    """Division by a zero scalar or by a complex number of zero magnitude."""
