"""Exceptions raised by PyMatrix.

Every error derives from `MatrixError` and from the closest builtin, so
callers may catch either.
"""


class MatrixError(Exception):
    """Base class for all PyMatrix errors."""


class OutOfBounds(MatrixError, IndexError):
    def __init__(self, message: str = "invalid row: out of bounds") -> None:
        super().__init__(message)


class WrongOperation(MatrixError, ValueError):
    """Indices are valid but the combination is not a meaningful operation."""

    def __init__(self, message: str = "there is an operation better suited for this") -> None:
        super().__init__(message)


class DimensionMismatch(MatrixError, TypeError):
    """Operands have incompatible shapes for the requested operation."""


class ShapeError(MatrixError, ValueError):
    """Input data does not describe the requested rectangular shape."""
