"""Immutable two-dimensional vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

_EPSILON = 1e-6


@dataclass(frozen=True)
class Vector2:
    """A 2D vector with arithmetic operators."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __pos__(self) -> Vector2:
        return self

    def __mul__(self, other: Union[Vector2, float]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        return Vector2(self.x * other, self.y * other)

    def __rmul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def length_sq(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_sq())

    def dot(self, other: Vector2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """Scalar 2D cross product."""
        return self.x * other.y - self.y * other.x

    def normalized(self) -> Vector2:
        """Unit vector in the same direction, or the zero vector if too short."""
        length = self.length()
        if length > _EPSILON:
            return Vector2(self.x / length, self.y / length)
        return Vector2(0.0, 0.0)

    def rotated_by(self, angle: float) -> Vector2:
        """This vector rotated by ``angle`` radians."""
        s = math.sin(angle)
        c = math.cos(angle)
        return Vector2(self.x * c - self.y * s, self.x * s + self.y * c)

    def to_int(self) -> Vector2:
        """Components truncated toward zero."""
        return Vector2(int(self.x), int(self.y))