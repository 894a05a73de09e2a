import math

import numpy as np
import pytest

from orrery import (
    CelestialBody, SpeedState, StateDesyncError, compute_transforms,
    orbital_transform, parse_bodies,
)
from orrery.updater import ANGULAR_SPEED_FACTOR


@pytest.fixture
def bodies(body_table):
    return [CelestialBody(spec, mesh=i, node=i)
            for i, spec in enumerate(parse_bodies(body_table))]


@pytest.fixture
def speeds(body_table):
    return SpeedState(parse_bodies(body_table))


def by_id(bodies, body_id):
    return next(b for b in bodies if b.id == body_id)


def test_factor():
    assert ANGULAR_SPEED_FACTOR == 0.01


@pytest.mark.parametrize("t", [0.0, 0.016, 1.0, 123.4, 1e4, 1e7])
@pytest.mark.parametrize("speed", [1.0, 7.5, 50.0, 100.0])
def test_stays_on_circle(bodies, t, speed):
    for body in bodies:
        if not body.orbits:
            continue
        p = orbital_transform(body, t, speed).position
        assert p[1] == 0.0
        assert p[0] ** 2 + p[2] ** 2 == pytest.approx(body.orbital_radius ** 2, rel=1e-9)


def test_scenario_earth_slowest_speed(bodies):
    earth = by_id(bodies, "earth")
    p = orbital_transform(earth, 1000.0, 1.0).position
    assert p[0] == pytest.approx(35 * math.cos(0.1))
    assert p[0] == pytest.approx(34.83, abs=0.01)
    assert p[2] == pytest.approx(3.495, abs=0.01)


def test_initial_position_is_on_x_axis(bodies):
    mars = by_id(bodies, "mars")
    t = orbital_transform(mars, 0.0, 60.0)
    np.testing.assert_allclose(t.position, [55.0, 0.0, 0.0])
    np.testing.assert_allclose(t.rotation, [0.0, 0.0, 0.0])


def test_self_rotation_from_elapsed(bodies):
    mars = by_id(bodies, "mars")
    t = orbital_transform(mars, 10.0, 20.0)
    np.testing.assert_allclose(t.rotation, [3.0, 3.2, 0.0])


def test_sun_only_rotates(bodies):
    sun = by_id(bodies, "sun")
    t = orbital_transform(sun, 100.0, 99.0)
    np.testing.assert_allclose(t.position, [0.0, 0.0, 0.0])
    np.testing.assert_allclose(t.rotation, [2.0, 1.0, 0.0])


def test_angle_is_not_wrapped(bodies):
    # Equivalent angles a full turn apart land on the same point
    earth = by_id(bodies, "earth")
    speed = 10.0
    period = 2 * math.pi / (speed * ANGULAR_SPEED_FACTOR)
    a = orbital_transform(earth, 3.0, speed).position
    b = orbital_transform(earth, 3.0 + 5 * period, speed).position
    np.testing.assert_allclose(a, b, atol=1e-9)


def test_same_snapshot_same_transforms(bodies, speeds):
    first = compute_transforms(bodies, speeds, 42.0)
    second = compute_transforms(bodies, speeds, 42.0)
    assert first == second


def test_speed_change_applies_immediately(bodies, speeds):
    speeds.set_speed("venus", 10.0)
    before = compute_transforms(bodies, speeds, 100.0)["venus"].position
    speeds.set_speed("venus", 20.0)
    after = compute_transforms(bodies, speeds, 100.0)["venus"].position
    expected = orbital_transform(by_id(bodies, "venus"), 100.0, 20.0).position
    np.testing.assert_allclose(after, expected)
    assert not np.allclose(before, after)


def test_missing_speed_entry_fails_fast(bodies, body_table):
    partial = SpeedState(parse_bodies([b for b in body_table if b["id"] != "uranus"]))
    with pytest.raises(StateDesyncError, match="uranus"):
        compute_transforms(bodies, partial, 1.0)


def test_out_of_range_stored_speed_clamped_and_logged(bodies, speeds, caplog):
    speeds._speeds["jupiter"] = 500.0
    with caplog.at_level("WARNING", logger="orrery.updater"):
        transforms = compute_transforms(bodies, speeds, 2.0)
    expected = orbital_transform(by_id(bodies, "jupiter"), 2.0, 100.0)
    assert transforms["jupiter"] == expected
    assert "jupiter" in caplog.text
