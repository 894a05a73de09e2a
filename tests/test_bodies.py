import pytest

from orrery import ConfigurationError, parse_bodies
from orrery.bodies import parse_body


def test_parse_real_table(body_table):
    specs = parse_bodies(body_table)
    assert [s.id for s in specs][:3] == ["sun", "mercury", "venus"]
    assert len(specs) == 9
    assert sum(1 for s in specs if not s.orbits) == 1


def test_sun_rates(body_table):
    sun = parse_bodies(body_table)[0]
    assert sun.rotation_rate_x == 0.02
    assert sun.rotation_rate_y == 0.01
    assert sun.orbital_radius == 0.0


@pytest.mark.parametrize("radius", [0, -5, 0.0])
def test_non_positive_orbit_rejected(radius):
    with pytest.raises(ConfigurationError, match="orbital_radius"):
        parse_body({"id": "x", "orbital_radius": radius,
                    "rotation_rate_x": 0.1, "rotation_rate_y": 0.1})


def test_missing_key_rejected():
    with pytest.raises(ConfigurationError, match="rotation_rate_y"):
        parse_body({"id": "x", "orbital_radius": 10, "rotation_rate_x": 0.1})


def test_non_numeric_rejected():
    with pytest.raises(ConfigurationError, match="number"):
        parse_body({"id": "x", "orbital_radius": "far",
                    "rotation_rate_x": 0.1, "rotation_rate_y": 0.1})


def test_nan_rejected():
    with pytest.raises(ConfigurationError, match="finite"):
        parse_body({"id": "x", "orbital_radius": float("nan"),
                    "rotation_rate_x": 0.1, "rotation_rate_y": 0.1})


def test_duplicate_ids_rejected(body_table):
    body_table.append(dict(body_table[3]))
    with pytest.raises(ConfigurationError, match="Duplicate"):
        parse_bodies(body_table)


def test_needs_exactly_one_central_body(body_table):
    with pytest.raises(ConfigurationError, match="central"):
        parse_bodies(body_table[1:])


def test_empty_table_rejected():
    with pytest.raises(ConfigurationError):
        parse_bodies([])
