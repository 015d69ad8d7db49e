# tests/domain/test_geography.py
import math

import pytest

from ride_match.domain.entities.driver import Driver
from ride_match.domain.entities.geography import Location, to_location
from ride_match.domain.entities.rider import Rider


@pytest.mark.parametrize(
    "a, b",
    [
        (Location(0.0, 0.0), Location(4.0, 3.0)),
        (Location(-2.5, 7.0), Location(1.0, -1.0)),
        (Location(1e6, 1e6), Location(-1e6, 0.5)),
    ],
)
def test_distance_is_symmetric(a, b):
    assert a.distance_to(b) == b.distance_to(a)


def test_distance_to_self_is_zero():
    p = Location(3.3, -7.1)
    assert p.distance_to(p) == 0.0


def test_distance_is_euclidean():
    assert Location(0.0, 0.0).distance_to(Location(4.0, 3.0)) == pytest.approx(5.0)
    assert Location(1.0, 2.0).distance_to(Location(0.0, 0.0)) == pytest.approx(math.sqrt(5))


def test_location_is_immutable_value():
    p = Location(1.0, 2.0)
    assert p == Location(1.0, 2.0)
    with pytest.raises(AttributeError):
        p.x = 5.0  # frozen dataclass


def test_to_location_accepts_tuples():
    assert to_location((1, 2)) == Location(1.0, 2.0)
    p = Location(3.0, 4.0)
    assert to_location(p) is p


def test_driver_defaults_available_and_moves():
    d = Driver(id=1, name="Maya", rating=4.98, position=Location(1.0, 2.0))
    assert d.available
    d.set_available(False)
    d.move_to(Location(4.0, 3.0))
    assert not d.available
    assert d.position == Location(4.0, 3.0)


def test_rider_trip_distance():
    r = Rider(id=1, name="Alex", pickup=Location(0.0, 0.0), dropoff=Location(4.0, 3.0))
    assert r.trip_distance_km == pytest.approx(5.0)
