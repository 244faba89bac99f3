import pytest

from bubblesim.bubble import Bubble, Sizes
from bubblesim.vector import Vec


def make():
    return Bubble("Bub1", Vec(1, 2, 3), Vec(1.1, 4.4, 9.9), 42, 37)


def test_fields_are_kept():
    b = make()
    assert b.name == "Bub1"
    assert b.coord == Vec(1, 2, 3)
    assert b.vel == Vec(1.1, 4.4, 9.9)
    assert b.mass == 42
    assert b.radius == 37


@pytest.mark.parametrize("mass, radius", [(-1, -1), (1, 0), (0, 1), (-1, 5), (5, -1)])
def test_invalid_construction_raises(mass, radius):
    with pytest.raises(ValueError):
        Bubble("WRONG", Vec(), Vec(), mass, radius)


def test_negative_mass_change_rejected_and_mass_kept():
    b = make()
    with pytest.raises(ValueError):
        b.mass = -1
    assert b.mass == 42


def test_negative_radius_change_rejected():
    b = make()
    with pytest.raises(ValueError):
        b.radius = 0
    assert b.radius == 37


def test_mass_change_accepted():
    b = make()
    b.mass = 1337
    assert b.mass == 1337
    assert str(b).startswith("Bub1,1337,37,")


def test_move_and_accelerate_add_deltas():
    b = make()
    b.move(Vec(1, 1, 1))
    b.accelerate(Vec(-1.1, 0, 0))
    assert b.coord == Vec(1, 2, 3) + Vec(1, 1, 1)
    assert b.vel == Vec(1.1, 4.4, 9.9) + Vec(-1.1, 0, 0)


def test_copy_is_equal_but_independent():
    b = make()
    c = b.copy()
    assert c == b
    c.move(Vec(1, 0, 0))
    assert c != b
    assert b.coord == Vec(1, 2, 3)


def test_equality_depends_on_name():
    b = make()
    c = make()
    c.name = "Other"
    assert b != c


def test_str_format():
    assert str(make()) == "Bub1,42,37,1,2,3,1.1,4.4,9.9"


def test_sizes_holds_values():
    s = Sizes(10.0, 2.0, 3.0, Vec(1, 2, 3))
    assert (s.total_mass, s.charac_length, s.charac_time) == (10.0, 2.0, 3.0)
    assert s.center_of_mass == Vec(1, 2, 3)