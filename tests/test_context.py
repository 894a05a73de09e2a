import numpy as np
import pytest

from orrery import StateDesyncError, orbital_transform


def positions(context):
    return {body_id: context.world_position(body_id).copy() for body_id in context.bodies}


def test_frame_moves_bodies(context, renderer):
    context.bind()
    renderer.run_frames(60, 1 / 60)
    assert context.elapsed_seconds == pytest.approx(1.0)
    earth = context.body("earth")
    expected = orbital_transform(earth, context.elapsed_seconds, 1000 / 35)
    np.testing.assert_allclose(context.world_position("earth"), expected.position)
    np.testing.assert_allclose(renderer.transform_of(earth.mesh).position, expected.position)


def test_pause_freezes_everything(context):
    context.frame(3.0)
    frozen = positions(context)
    rotations = {b: context.graph.nodes[context.bodies[b].node].local.rotation.copy()
                 for b in context.bodies}

    context.events.post_pause_toggle()
    for _ in range(50):
        assert context.frame(0.1) == 3.0

    for body_id, pos in positions(context).items():
        np.testing.assert_array_equal(pos, frozen[body_id])
    for body_id, rot in rotations.items():
        np.testing.assert_array_equal(
            context.graph.nodes[context.bodies[body_id].node].local.rotation, rot
        )


def test_resume_continues_from_frozen_time(context):
    context.frame(2.0)
    context.events.post_pause_toggle()
    context.frame(10.0)
    context.events.post_pause_toggle()
    assert context.frame(0.5) == pytest.approx(2.5)


def test_pause_then_resume_with_no_ticks(context):
    context.frame(1.5)
    context.clock.toggle_pause()
    context.clock.toggle_pause()
    assert context.paused is False
    assert context.elapsed_seconds == 1.5


def test_speed_events_apply_before_tick(context):
    context.events.post_speed("earth", 1)
    context.frame(1000.0)
    x, _, z = context.world_position("earth")
    assert x == pytest.approx(34.83, abs=0.01)
    assert z == pytest.approx(3.495, abs=0.01)


@pytest.mark.parametrize("dt", [0.7, 13.0, 250.0])
def test_ring_follows_saturn(context, dt):
    for _ in range(3):
        context.events.post_speed("saturn", 37)
        context.frame(dt)
        saturn = context.world_position("saturn")
        ring = context.world_position("saturn_ring")
        offset = context.graph.nodes[context.attachments["saturn_ring"]].local.position
        np.testing.assert_allclose(ring, saturn + offset, atol=1e-9)
        assert np.hypot(ring[0], ring[2]) == pytest.approx(95.0)


def test_ring_world_matrix_is_parent_composed(context):
    context.frame(42.0)
    ring_index = context.attachments["saturn_ring"]
    saturn_index = context.body("saturn").node
    np.testing.assert_allclose(
        context.graph.world_matrix(ring_index),
        context.graph.world_matrix(saturn_index) @ context.graph.nodes[ring_index].local.matrix()
    )


def test_failing_body_is_skipped(context, renderer, caplog):
    mars_mesh = context.body("mars").mesh
    original = renderer.set_transform

    def flaky(handle, position, rotation):
        if handle == mars_mesh:
            raise RuntimeError("mesh lost")
        original(handle, position, rotation)

    renderer.set_transform = flaky
    with caplog.at_level("ERROR", logger="orrery.updater"):
        context.frame(5.0)

    assert "mars" in caplog.text
    np.testing.assert_allclose(context.world_position("mars"), [55.0, 0.0, 0.0])
    assert not np.allclose(context.world_position("venus"), [25.0, 0.0, 0.0])


def test_desync_is_fatal(context):
    del context.speeds._speeds["neptune"]
    with pytest.raises(StateDesyncError):
        context.frame(0.1)


def test_bad_event_does_not_cost_the_frame(context):
    context.events.post_speed("pluto", 10)
    context.events.post_speed("earth", 5)
    assert context.frame(1.0) == 1.0
    assert context.speeds.get_speed("earth") == 5
    assert len(context.events) == 0
    expected = orbital_transform(context.body("earth"), 1.0, 5.0)
    np.testing.assert_allclose(context.world_position("earth"), expected.position)


def test_nan_frame_leaves_positions_finite(context):
    context.frame(1.0)
    with pytest.raises(ValueError):
        context.frame(float("nan"))
    context.frame(1.0)
    assert context.elapsed_seconds == 2.0
    assert np.all(np.isfinite(context.world_position("earth")))
