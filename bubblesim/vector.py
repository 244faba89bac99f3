"""Immutable three-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Vec:
    """A 3D vector with component-wise ordering."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y, -self.z)

    def scale(self, factor: float) -> Vec:
        """Return the vector multiplied by a scalar."""
        return Vec(self.x * factor, self.y * factor, self.z * factor)

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec:
        """Return the unit vector in the same direction, or zero for a zero vector."""
        size = self.length()
        if size == 0:
            return Vec(0.0, 0.0, 0.0)
        return Vec(self.x / size, self.y / size, self.z / size)

    def __str__(self) -> str:
        return f"{self.x:g},{self.y:g},{self.z:g}"