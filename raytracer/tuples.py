"""Homogeneous 4-component tuples.

A tuple with ``w == 1`` is a point in 3D space, a tuple with ``w == 0`` is
a vector. Both share one type so that a 4x4 transform matrix can be
applied to either.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Iterator

from raytracer.floats import EPSILON, approx_equal


@dataclass(frozen=True, eq=False)
class Tuple:
    """Immutable (x, y, z, w) value with tolerance-based equality."""

    x: float
    y: float
    z: float
    w: float

    def __post_init__(self):
        # Frozen dataclass: coerce through object.__setattr__
        for name in ("x", "y", "z", "w"):
            object.__setattr__(self, name, float(getattr(self, name)))

    def is_point(self) -> bool:
        """True when ``w`` is within tolerance of 1."""
        return approx_equal(self.w, 1.0)

    def is_vector(self) -> bool:
        """True when ``w`` is within tolerance of 0."""
        return approx_equal(self.w, 0.0)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return all(approx_equal(a, b, EPSILON) for a, b in zip(self, other))

    __hash__ = None

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def magnitude(self) -> float:
        """Euclidean length over all four components."""
        return math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2 + self.w ** 2)

    def normalize(self) -> Tuple:
        """Scale to unit length.

        Raises:
            ZeroDivisionError: If the tuple has zero length
        """
        length = self.magnitude()
        if length == 0.0:
            raise ZeroDivisionError("cannot normalize a zero-length tuple")
        return self / length

    def dot(self, other: Tuple) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Tuple) -> Tuple:
        """Cross product of two vectors.

        Raises:
            ValueError: If either operand is not a vector
        """
        if not (self.is_vector() and other.is_vector()):
            raise ValueError(f"cross product is only defined for vectors, got {self!r} and {other!r}")
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w = 1)."""
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w = 0)."""
    return Tuple(x, y, z, 0.0)
