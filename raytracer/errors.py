"""Exceptions raised by the matrix engine and its collaborators."""

from __future__ import annotations


class RaytracerError(Exception):
    """Base class for all errors raised by this package."""


class DimensionMismatchError(RaytracerError, ValueError):
    """Operand shapes are incompatible for the requested operation."""


class NonSquareMatrixError(RaytracerError, ValueError):
    """Determinant, minor, cofactor or inverse requested on a non-square matrix."""


class SingularMatrixError(RaytracerError, ValueError):
    """Inverse requested on a matrix whose determinant is zero."""


class IndexOutOfRangeError(RaytracerError, IndexError):
    """Row/column (or pixel) index outside the bounds of the container."""


class MatrixTooLargeError(RaytracerError, ValueError):
    """Matrix exceeds the size limit for recursive cofactor expansion."""


class InvalidRayError(RaytracerError, ValueError):
    """Ray origin is not a point or ray direction is not a vector."""
