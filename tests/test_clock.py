import pytest

from orrery import SimulationClock


def test_starts_at_zero_running():
    clock = SimulationClock()
    assert clock.elapsed_seconds == 0.0
    assert clock.paused is False


def test_tick_accumulates():
    clock = SimulationClock()
    clock.tick(0.5)
    assert clock.tick(0.25) == pytest.approx(0.75)


def test_paused_tick_is_frozen():
    clock = SimulationClock()
    clock.tick(2.0)
    clock.toggle_pause()
    for _ in range(10):
        assert clock.tick(1.0) == 2.0
    clock.toggle_pause()
    assert clock.tick(1.0) == 3.0


def test_pause_resume_without_ticks():
    clock = SimulationClock()
    clock.tick(4.0)
    assert clock.toggle_pause() is True
    assert clock.toggle_pause() is False
    assert clock.elapsed_seconds == 4.0
    assert clock.paused is False


def test_negative_delta_rejected():
    clock = SimulationClock()
    with pytest.raises(ValueError):
        clock.tick(-0.1)


@pytest.mark.parametrize("delta", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_delta_rejected(delta):
    clock = SimulationClock()
    clock.tick(1.0)
    with pytest.raises(ValueError):
        clock.tick(delta)
    assert clock.elapsed_seconds == 1.0
