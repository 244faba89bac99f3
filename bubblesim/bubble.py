"""Bodies of the simulation and the scale factors used to make them dimensionless."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vec


@dataclass
class Sizes:
    """Characteristic scales removed from a system by non-dimensionalisation."""

    total_mass: float
    charac_length: float
    charac_time: float
    center_of_mass: Vec


class Bubble:
    """A spherical body with a name, position, velocity, mass and radius."""

    def __init__(self, name: str, coord: Vec, vel: Vec, mass: float, radius: float) -> None:
        if radius <= 0:
            raise ValueError("radius must be positive")
        if mass <= 0:
            raise ValueError("mass must be positive")
        self.name = name
        self.coord = coord
        self.vel = vel
        self._mass = float(mass)
        self._radius = float(radius)

    @property
    def mass(self) -> float:
        """The body's mass; must stay positive."""
        return self._mass

    @mass.setter
    def mass(self, value: float) -> None:
        if not value > 0:
            raise ValueError("mass must be positive")
        self._mass = float(value)

    @property
    def radius(self) -> float:
        """The body's radius; must stay positive."""
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        if not value > 0:
            raise ValueError("radius must be positive")
        self._radius = float(value)

    def move(self, delta: Vec) -> None:
        """Shift the position by ``delta``."""
        self.coord = self.coord + delta

    def accelerate(self, delta: Vec) -> None:
        """Change the velocity by ``delta``."""
        self.vel = self.vel + delta

    def copy(self) -> Bubble:
        """Return an independent copy."""
        return Bubble(self.name, self.coord, self.vel, self._mass, self._radius)

    def _key(self) -> tuple:
        return (self.name, self.coord, self.vel, self._mass, self._radius)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bubble):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Bubble({self.name!r}, {self.coord!r}, {self.vel!r}, "
            f"{self._mass!r}, {self._radius!r})"
        )

    def __str__(self) -> str:
        return f"{self.name},{self._mass:g},{self._radius:g},{self.coord},{self.vel}"