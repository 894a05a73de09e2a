import pytest

from orrery import EventQueue, SimulationClock, SpeedChange, SpeedState, parse_bodies


@pytest.fixture
def speeds(body_table):
    return SpeedState(parse_bodies(body_table))


@pytest.fixture
def queue():
    return EventQueue(1.0, 100.0)


def test_events_wait_for_drain(queue, speeds):
    clock = SimulationClock()
    queue.post_speed("earth", 5)
    queue.post_pause_toggle()
    assert speeds.get_speed("earth") != 5
    assert clock.paused is False

    assert queue.drain(speeds, clock) == 2
    assert speeds.get_speed("earth") == 5
    assert clock.paused is True
    assert len(queue) == 0


def test_applied_in_arrival_order(queue, speeds):
    for value in (10, 20, 30):
        queue.post_speed("mars", value)
    queue.drain(speeds, SimulationClock())
    assert speeds.get_speed("mars") == 30


def test_two_toggles_cancel(queue, speeds):
    clock = SimulationClock()
    queue.post_pause_toggle()
    queue.post_pause_toggle()
    queue.drain(speeds, clock)
    assert clock.paused is False


@pytest.mark.parametrize("raw, stored", [(0, 1.0), (-3, 1.0), (150, 100.0)])
def test_out_of_range_clamped_at_boundary(queue, speeds, caplog, raw, stored):
    with caplog.at_level("WARNING", logger="orrery.events"):
        queue.post(SpeedChange("saturn", raw))
    queue.drain(speeds, SimulationClock())
    assert speeds.get_speed("saturn") == stored
    assert "clamped" in caplog.text


def test_reset_event(queue, speeds):
    queue.post_speed("neptune", 90)
    queue.post_reset("neptune")
    queue.drain(speeds, SimulationClock())
    assert speeds.get_speed("neptune") == pytest.approx(1000 / 135)


def test_unknown_body_logged_and_later_events_applied(queue, speeds, caplog):
    clock = SimulationClock()
    queue.post_speed("pluto", 10)
    queue.post_reset("ceres")
    queue.post_speed("earth", 5)
    queue.post_pause_toggle()
    with caplog.at_level("ERROR", logger="orrery.events"):
        assert queue.drain(speeds, clock) == 2
    assert "pluto" in caplog.text
    assert "ceres" in caplog.text
    assert speeds.get_speed("earth") == 5
    assert clock.paused is True
    assert len(queue) == 0


def test_steps_accumulate_within_one_drain(queue, speeds):
    speeds.set_speed("mars", 10)
    queue.post_step("mars", 1)
    queue.post_step("mars", 1)
    queue.drain(speeds, SimulationClock())
    assert speeds.get_speed("mars") == 12


def test_step_clamped_at_range_edge(queue, speeds, caplog):
    speeds.set_speed("mars", 100)
    queue.post_step("mars", 1)
    with caplog.at_level("WARNING", logger="orrery.events"):
        queue.drain(speeds, SimulationClock())
    assert speeds.get_speed("mars") == 100
    assert "clamped" in caplog.text
