"""RGB color values."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from raytracer.floats import EPSILON, approx_equal, round_half_away


@dataclass(frozen=True, eq=False)
class Color:
    """Immutable RGB triple, nominally in [0, 1] per channel."""

    red: float
    green: float
    blue: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.red, self.green, self.blue))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return all(approx_equal(a, b, EPSILON) for a, b in zip(self, other))

    __hash__ = None

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Union[Color, float]) -> Color:
        # Hadamard product for colors, scaling for numbers
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        if isinstance(other, numbers.Real):
            return Color(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    __rmul__ = __mul__

    def to_int(self, max_value: int = 255) -> Tuple[int, int, int]:
        """Scale to integer channels clamped to ``[0, max_value]``."""
        return tuple(
            int(round_half_away(min(max(channel, 0.0), 1.0) * max_value, 0))
            for channel in self
        )


BLACK = Color(0.0, 0.0, 0.0)
