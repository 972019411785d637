"""Error taxonomy for the isometry library.

Every error derives from IsometryError and from the builtin exception a
Python caller would reach for first, so both ``except IndexError`` and
``except IsometryError`` work.
"""


class IsometryError(Exception):
    """Base class for all errors raised by this library."""


class IndexOutOfRange(IsometryError, IndexError):
    """Component, row or column index outside [0, 2]."""


class InvalidSize(IsometryError, ValueError):
    """A sequence does not hold the number of values a constructor needs."""


class InvalidArgument(IsometryError, ValueError):
    """Degenerate input to a geometric factory, e.g. a zero-length axis."""


class NonInvertible(IsometryError, ArithmeticError):
    """Inversion requested for a matrix whose determinant is near zero."""
