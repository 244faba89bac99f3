"""Gravitational forces, non-dimensionalisation and Runge-Kutta integration."""

from __future__ import annotations

import math
from itertools import combinations, permutations

from .bubble import Bubble, Sizes
from .vector import Vec

G = 6.67430e-11


def desize(foam: list[Bubble]) -> Sizes:
    """Make the bubbles dimensionless in place and return the scales used."""
    if len(foam) < 2:
        raise ValueError("at least two bubbles are needed")

    mass = sum(b.mass for b in foam)
    weighted = Vec()
    for b in foam:
        weighted = weighted + b.coord.scale(b.mass)
    length = sum(
        (a.coord - b.coord).length() for a, b in permutations(foam, 2) if a != b
    )

    center_of_mass = weighted.scale(1.0 / mass)
    length /= len(foam) * (len(foam) - 1)
    if length == 0:
        raise ValueError("bubbles coincide")
    time = math.sqrt(length**3 / (G * mass))

    for b in foam:
        b.coord = (b.coord - center_of_mass).scale(1.0 / length)
        b.vel = b.vel.scale(time / length)
        b.mass = b.mass / mass
        b.radius = b.radius / length

    return Sizes(mass, length, time, center_of_mass)


def gravity(first: Bubble, second: Bubble) -> Vec:
    """Return the dimensionless gravitational force on ``first`` from ``second``."""
    offset = second.coord - first.coord
    r = offset.length()
    if r == 0:
        raise ValueError("bodies are too close")
    return offset.scale(first.mass * second.mass / r**3)


def accelerations(foam: list[Bubble]) -> list[Vec]:
    """Return the dimensionless acceleration of every bubble."""
    result = [Vec() for _ in foam]
    for (i, a), (j, b) in combinations(enumerate(foam), 2):
        if a != b:
            force = gravity(a, b)
            result[i] = result[i] + force.scale(1 / a.mass)
            result[j] = result[j] - force.scale(1 / b.mass)
    return result


def _shifted(foam: list[Bubble], dcoord: list[Vec], dvel: list[Vec], factor: float) -> list[Bubble]:
    temp = [b.copy() for b in foam]
    for b, dc, dv in zip(temp, dcoord, dvel):
        b.move(dc.scale(factor))
        b.accelerate(dv.scale(factor))
    return temp


def rk4_step(foam: list[Bubble], dt: float) -> None:
    """Advance the bubbles in place by one Runge-Kutta step of length ``dt``."""
    kv1 = [a.scale(dt) for a in accelerations(foam)]
    k1 = [b.vel.scale(dt) for b in foam]

    temp = _shifted(foam, k1, kv1, 0.5)
    kv2 = [a.scale(dt) for a in accelerations(temp)]
    k2 = [b.vel.scale(dt) for b in temp]

    temp = _shifted(foam, k2, kv2, 0.5)
    acc = accelerations(temp)
    kv3 = [a.scale(dt) for a in acc]
    k3 = [b.vel.scale(dt) for b in temp]

    # The final stage reuses the third-stage accelerations.
    temp = _shifted(foam, k3, kv3, 1.0)
    kv4 = [a.scale(dt) for a in acc]
    k4 = [b.vel.scale(dt) for b in temp]

    for i, b in enumerate(foam):
        b.move((k1[i] + k2[i].scale(2) + k3[i].scale(2) + k4[i]).scale(1.0 / 6))
        b.accelerate((kv1[i] + kv2[i].scale(2) + kv3[i].scale(2) + kv4[i]).scale(1.0 / 6))