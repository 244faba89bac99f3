import pytest

from bubblesim.bubble import Bubble
from bubblesim.cli import main, simulate
from bubblesim.vector import Vec

SAMPLE = """\
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
Velocity = (0, 0.000001, 0);
}
"""


def system():
    return [
        Bubble("a", Vec(0, 0, 0), Vec(0, 0, 0), 1, 0.1),
        Bubble("b", Vec(1, 0, 0), Vec(0, 1, 0), 1, 0.1),
    ]


def test_simulate_yields_step_times():
    assert list(simulate(system(), 1.0, 0.25)) == [0.0, 0.25, 0.5, 0.75, 1.0]


def test_simulate_moves_bubbles():
    foam = system()
    before = [b.copy() for b in foam]
    next(simulate(foam, 1.0, 0.25))
    assert foam != before


def test_simulate_rejects_non_positive_step():
    with pytest.raises(ValueError):
        list(simulate(system(), 1.0, 0))


def test_main_writes_csv(tmp_path, capsys):
    src = tmp_path / "enter.txt"
    src.write_text(SAMPLE, encoding="utf-8")
    out = tmp_path / "DATA.csv"
    argv = [str(src), "--output", str(out), "--time", "0.5", "--dt", "0.25"]
    assert main(argv) == 0
    printed = capsys.readouterr().out.splitlines()
    assert [line.split(",")[0] for line in printed] == ["Sun", "Earth"]
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("Sizes: Mass = 23,")
    assert lines[1] == "Step,Name,Mass,Radius,X,Y,Z,VelX,VelY,VelZ"
    assert [line.split(",")[0] for line in lines[2:]] == ["0", "0", "0.25", "0.25", "0.5", "0.5"]


def test_main_truncates_previous_output(tmp_path):
    src = tmp_path / "enter.txt"
    src.write_text(SAMPLE, encoding="utf-8")
    out = tmp_path / "DATA.csv"
    argv = [str(src), "-o", str(out), "--time", "0.25", "--dt", "0.25"]
    assert main(argv) == 0
    first = out.read_text(encoding="utf-8")
    first_lines = first.splitlines()
    assert first_lines[1] == "Step,Name,Mass,Radius,X,Y,Z,VelX,VelY,VelZ"
    assert [line.split(",")[0] for line in first_lines[2:]] == ["0", "0", "0.25", "0.25"]
    assert main(argv) == 0
    second = out.read_text(encoding="utf-8")
    assert second == first
    assert len(second.splitlines()) == 6


def test_main_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "absent.txt"), "-o", str(tmp_path / "out.csv")])