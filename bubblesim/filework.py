"""Reading bubble descriptions and writing simulation results."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .bubble import Bubble, Sizes
from .vector import Vec

_SPACE = re.compile(r"\s*")
_WORD = re.compile(r"\S+")
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

CSV_HEADER = "Step,Name,Mass,Radius,X,Y,Z,VelX,VelY,VelZ\n"


class _Scanner:
    """Whitespace-separated extraction from one line; stops at the first failure."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.failed = False

    def _ready(self) -> bool:
        if self.failed:
            return False
        self._pos = _SPACE.match(self._text, self._pos).end()
        if self._pos >= len(self._text):
            self.failed = True
            return False
        return True

    def word(self) -> str | None:
        if not self._ready():
            return None
        match = _WORD.match(self._text, self._pos)
        self._pos = match.end()
        return match.group()

    def char(self) -> str | None:
        if not self._ready():
            return None
        c = self._text[self._pos]
        self._pos += 1
        return c

    def number(self, default: float = 0.0) -> float:
        if not self._ready():
            return default
        match = _NUMBER.match(self._text, self._pos)
        if match is None:
            self.failed = True
            return 0.0
        self._pos = match.end()
        return float(match.group())

    def vector(self) -> Vec:
        values = []
        for _ in range(3):
            self.char()
            values.append(self.number())
        return Vec(*values)


def parse_bubbles(lines: Iterable[str]) -> list[Bubble]:
    """Build bubbles from ``{ ... }`` blocks of ``Key = value`` lines."""
    foam: list[Bubble] = []
    name = ""
    radius = mass = 0.0
    coordinate = velocity = Vec()

    for line in lines:
        if "{" in line:
            name = ""
            radius = mass = 0.0
            coordinate = velocity = Vec()
            continue
        if "}" in line:
            if name:
                foam.append(Bubble(name, coordinate, velocity, mass, radius))
            continue

        scan = _Scanner(line)
        key = scan.word()
        scan.word()
        if key == "Name":
            word = scan.word()
            if word is not None:
                name = word[:-1] if word.endswith(";") else word
        elif key == "Radius":
            radius = scan.number(radius)
        elif key == "Mass":
            mass = scan.number(mass)
        elif key == "Coordinate":
            coordinate = scan.vector()
        elif key == "Velocity":
            velocity = scan.vector()

    return foam


def read_bubbles(filename: str) -> list[Bubble]:
    """Read bubbles from a description file."""
    with open(filename, encoding="utf-8") as handle:
        return parse_bubbles(handle)


def write_csv(bubbles: Iterable[Bubble], filename: str, step: float, sizes: Sizes) -> None:
    """Append one step's rows to a CSV file, with a header when ``step`` is zero."""
    with open(filename, "a", encoding="utf-8") as handle:
        if step == 0:
            handle.write(
                f"Sizes: Mass = {sizes.total_mass:g}, Length = {sizes.charac_length:g}, "
                f"Time = {sizes.charac_time:g}, Center of Mass = {sizes.center_of_mass}.\n"
            )
            handle.write(CSV_HEADER)
        for bubble in bubbles:
            handle.write(f"{step:g},{bubble}\n")