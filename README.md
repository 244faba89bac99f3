# bubblesim

A small N-body gravity simulator. Bodies ("bubbles") are read from a text
file and brought to dimensionless units. They are then advanced in time with
a fourth-order Runge-Kutta step. Every step is appended to a CSV file.

## Installation

```
pip install .
```

## Running a simulation

```
bubblesim [INPUT] [-o OUTPUT] [--time T] [--dt DT]
```

- `INPUT`: the file that describes the bodies. The default is `enter.txt`.
- `-o`, `--output`: the CSV file to write. The default is `DATA.csv`. It is
  emptied before the run starts.
- `--time`: the dimensionless end time. The default is `1.0`.
- `--dt`: the dimensionless time step. The default is `0.05`.

The command reads the bodies and makes them dimensionless. It prints each body
as `name,mass,radius,x,y,z,vx,vy,vz`. It then takes steps, starting at
`t = 0`, for as long as `t` does not exceed the end time. After each step it
appends the state of every body to the output file.

### Input format

Each body is a block in braces. Each field sits on its own line as
`Key = value`. The key and the `=` must be separated by whitespace. A vector
is written in parentheses, with its components separated by commas:

```
{
Name = Sun;
Mass = 20;
Radius = 20;
Coordinate = (0, 0, 0);
Velocity = (0, 0, 0);
}
{
Name = Earth;
Mass = 3;
Radius = 3;
Coordinate = (100, 0, 0);
Velocity = (0, 20, 0);
}
```

The recognised keys are `Name`, `Mass`, `Radius`, `Coordinate` and
`Velocity`. Other lines are ignored. A trailing `;` is removed from the name.
A block without a name is skipped. If a field is missing it defaults to zero.
Mass and radius must be positive, or a `ValueError` is raised.

### Output format

The first line records the scales that were used to make the system
dimensionless:

```
Sizes: Mass = <total mass>, Length = <mean pairwise distance>, Time = <characteristic time>, Center of Mass = x,y,z.
```

A header row follows. After it comes one row per body for each step:

```
Step,Name,Mass,Radius,X,Y,Z,VelX,VelY,VelZ
```

The `Step` column holds the time at which that step began.

## Using the library

```python
from bubblesim.vector import Vec
from bubblesim.bubble import Bubble
from bubblesim.calculus import desize, accelerations, rk4_step

foam = [
    Bubble("Sun", Vec(0, 0, 0), Vec(0, 0, 0), 20, 20),
    Bubble("Earth", Vec(100, 0, 0), Vec(0, 20, 0), 3, 3),
    Bubble("Mars", Vec(200, 0, 0), Vec(0, 30, 0), 2, 2),
]

sizes = desize(foam)        # rescales the bodies in place and returns a Sizes
print(accelerations(foam))  # one acceleration Vec per body
rk4_step(foam, 0.05)        # advances every body by one step, in place
for body in foam:
    print(body)
```

- `bubblesim.vector.Vec` is an immutable 3D vector. It supports `+`, `-`,
  negation, `scale`, `length` and `normalized`.
- `bubblesim.bubble.Bubble` is a body with a `name`, a `coord`, a `vel`, a
  `mass` and a `radius`. It also has `move`, `accelerate` and `copy`.
  Setting a mass or radius that is not positive raises `ValueError`.
- `bubblesim.calculus` provides `desize`, `gravity`, `accelerations` and
  `rk4_step`, all in dimensionless units.
  - `desize` needs at least two bodies. It raises `ValueError` if their
    positions all coincide.
  - `gravity` raises `ValueError` for two bodies at the same position.
- `bubblesim.filework` provides `read_bubbles`, `parse_bubbles` and
  `write_csv` for the file formats above.
- `bubblesim.cli.simulate(foam, total_time, dt)` steps the bodies in place.
  It yields the start time of each step.

## What it does not do

The package does not plot or animate the trajectories. It only writes them to
CSV. It does not detect or resolve collisions between bodies. Only the
integration step uses the radius.

## Running the tests

```
pip install .[test]
pytest
```