"""Rays: an origin point travelling along a direction vector."""

from __future__ import annotations

from raytracer.errors import InvalidRayError
from raytracer.matrix import Matrix
from raytracer.tuples import Tuple


class Ray:
    """Half-line starting at ``origin`` and pointing along ``direction``."""

    def __init__(self, origin: Tuple, direction: Tuple):
        """Initialize ray.

        Args:
            origin: Starting point (w = 1)
            direction: Direction vector (w = 0), not necessarily normalized

        Raises:
            InvalidRayError: If origin is not a point or direction is not a vector
        """
        if not origin.is_point():
            raise InvalidRayError(f"invalid origin: {origin!r} is not a point")
        if not direction.is_vector():
            raise InvalidRayError(f"invalid direction: {direction!r} is not a vector")

        self.origin = origin
        self.direction = direction

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r})"

    def position(self, t: float) -> Tuple:
        """Point reached after travelling ``t`` units of ``direction``."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Apply a 4x4 transform to both origin and direction."""
        return Ray(matrix * self.origin, matrix * self.direction)
