"""Command line entry point that runs a gravitational simulation."""

from __future__ import annotations

import argparse
from collections.abc import Iterator

from .bubble import Bubble
from .calculus import desize, rk4_step
from .filework import read_bubbles, write_csv


def simulate(foam: list[Bubble], total_time: float, dt: float) -> Iterator[float]:
    """Step the bubbles in place, yielding the time of each completed step."""
    if dt <= 0:
        raise ValueError("time step must be positive")
    t = 0.0
    while t <= total_time:
        rk4_step(foam, dt)
        yield t
        t += dt


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate gravitating bubbles.")
    parser.add_argument("input", nargs="?", default="enter.txt", help="bubble description file")
    parser.add_argument("-o", "--output", default="DATA.csv", help="CSV file to write")
    parser.add_argument("--time", type=float, default=1.0, help="dimensionless end time")
    parser.add_argument("--dt", type=float, default=0.05, help="dimensionless time step")
    args = parser.parse_args(argv)

    foam = read_bubbles(args.input)
    sizes = desize(foam)
    for bubble in foam:
        print(bubble)

    with open(args.output, "w", encoding="utf-8"):
        pass

    for t in simulate(foam, args.time, args.dt):
        write_csv(foam, args.output, t, sizes)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())