import pytest

from drrsim.position import BaseStation, Mobility, Position


def test_distance_2d_ignores_height():
    a = Position(0, 0, 0)
    b = Position(3, 4, 100)
    assert a.distance_2d(b) == pytest.approx(5.0)


def test_distance_3d():
    a = Position(0, 0, 0)
    b = Position(3, 4, 12)
    assert a.distance_3d(b) == pytest.approx(13.0)


def test_distances_symmetric_and_ordered():
    a = Position(1000, -250, 1.5)
    b = Position(-30, 8000, 25)
    assert a.distance_2d(b) == pytest.approx(b.distance_2d(a))
    assert a.distance_3d(b) == pytest.approx(b.distance_3d(a))
    assert a.distance_3d(b) >= a.distance_2d(b)


def test_distance_to_self_is_zero():
    p = Position(8000, 8000, 1.5)
    assert p.distance_3d(p) == 0.0


def test_str():
    assert str(Position(1, 2, 3)) == "Position: (1, 2, 3)"
    assert str(Position(0.5, 0, 25)) == "Position: (0.5, 0, 25)"


def test_defaults():
    assert Position() == Position(0, 0, 0)
    assert Mobility() == Mobility(0.0, "")


def test_base_station_position_is_independent():
    first = BaseStation()
    second = BaseStation()
    first.position.z = 25
    assert second.position.z == 0
    assert first.position == Position(0, 0, 25)


def test_mobility_fields():
    mobility = Mobility(speed=30.0, direction="left")
    assert (mobility.speed, mobility.direction) == (30.0, "left")