import math
import random

import pytest

from dyegame.physics import (
    PhysicsBody,
    PhysicsMovementComponent,
    TimerManager,
    Vector3,
    random_unit_vector,
)


def test_size_2d_ignores_height():
    assert Vector3(3.0, 4.0, 12.0).size_2d() == pytest.approx(5.0)


def test_vector_scaling_round_trip():
    vector = Vector3(1.5, -2.0, 0.25)
    assert (vector * 4.0) / 4.0 == vector
    assert 2.0 * vector == vector * 2.0


def test_add_impulse_changes_velocity_by_impulse_over_mass():
    body = PhysicsBody(mass=2.0)
    body.add_impulse(Vector3(4.0, 0.0, 0.0))
    assert body.velocity == Vector3(4.0, 0.0, 0.0) / 2.0


def test_add_force_accumulates():
    body = PhysicsBody()
    body.add_force(Vector3(1.0, 0.0, 0.0))
    body.add_force(Vector3(0.0, 1.0, 0.0))
    assert body.force == Vector3(1.0, 1.0, 0.0)


@pytest.mark.parametrize("seed", range(20))
def test_random_unit_vector_has_unit_length(seed):
    vector = random_unit_vector(random.Random(seed))
    assert vector.size() == pytest.approx(1.0)


def test_non_looping_timer_fires_once():
    timers = TimerManager()
    calls = []
    handle = timers.set_timer(lambda: calls.append(timers.elapsed), 1.0, False)
    timers.advance(0.5)
    assert calls == []
    timers.advance(5.0)
    assert calls == [1.0]
    assert timers.is_active(handle) is False


def test_looping_timer_fires_every_interval():
    timers = TimerManager()
    calls = []
    timers.set_timer(lambda: calls.append(timers.elapsed), 1.0, True)
    timers.advance(3.0)
    assert calls == [1.0, 2.0, 3.0]


def test_clear_timer_stops_callbacks():
    timers = TimerManager()
    calls = []
    handle = timers.set_timer(lambda: calls.append(1), 1.0, True)
    timers.advance(1.0)
    timers.clear_timer(handle)
    timers.advance(10.0)
    assert calls == [1]


def test_timers_fire_in_time_order():
    timers = TimerManager()
    calls = []
    timers.set_timer(lambda: calls.append("late"), 2.0, False)
    timers.set_timer(lambda: calls.append("early"), 1.0, False)
    timers.advance(2.0)
    assert calls == ["early", "late"]


def test_invalid_timer_arguments_raise():
    timers = TimerManager()
    with pytest.raises(ValueError):
        timers.set_timer(lambda: None, 0.0, True)
    with pytest.raises(ValueError):
        timers.advance(-1.0)


def test_component_defaults_match_source():
    component = PhysicsMovementComponent()
    assert component.force_magnitude == 10000.0
    assert component.max_speed_by_force == 750.0
    assert component.should_apply_random_impulse is False
    assert component.impulse_applying_frequency == 3.0
    assert component.min_impulse_magnitude == 5000.0
    assert component.max_impulse_magnitude == 12500.0


def test_component_without_owner_does_nothing():
    component = PhysicsMovementComponent(should_apply_random_impulse=True)
    timers = TimerManager()
    component.begin_play(None, timers)
    assert component.impulse_timer is None
    assert component.apply_random_impulse() is None
    assert component.move_by_force(Vector3(1.0, 0.0, 0.0)) is False


def test_random_impulse_within_magnitude_range():
    component = PhysicsMovementComponent(rng=random.Random(4))
    body = PhysicsBody()
    component.begin_play(body, TimerManager())
    impulse = component.apply_random_impulse()
    assert component.min_impulse_magnitude <= impulse.size() <= component.max_impulse_magnitude
    assert body.velocity == impulse


def test_begin_play_schedules_random_impulses():
    component = PhysicsMovementComponent(should_apply_random_impulse=True, rng=random.Random(1))
    body = PhysicsBody()
    timers = TimerManager()
    component.begin_play(body, timers)
    timers.advance(component.impulse_applying_frequency / 2)
    assert body.velocity == Vector3()
    timers.advance(component.impulse_applying_frequency)
    assert body.velocity.size() > 0.0
    assert timers.is_active(component.impulse_timer) is True


def test_begin_play_without_random_impulse_schedules_nothing():
    component = PhysicsMovementComponent()
    body = PhysicsBody()
    timers = TimerManager()
    component.begin_play(body, timers)
    timers.advance(100.0)
    assert component.impulse_timer is None
    assert body.velocity == Vector3()


def test_move_by_force_applies_scaled_force_below_speed_cap():
    component = PhysicsMovementComponent()
    body = PhysicsBody()
    component.begin_play(body, TimerManager())
    direction = Vector3(0.0, 1.0, 0.0)
    assert component.move_by_force(direction) is True
    assert body.force == direction * component.force_magnitude


def test_move_by_force_skipped_at_speed_cap():
    component = PhysicsMovementComponent()
    body = PhysicsBody(velocity=Vector3(component.max_speed_by_force, 0.0, 0.0))
    component.begin_play(body, TimerManager())
    assert component.move_by_force(Vector3(1.0, 0.0, 0.0)) is False
    assert body.force == Vector3()


def test_vertical_speed_does_not_block_force():
    component = PhysicsMovementComponent()
    body = PhysicsBody(velocity=Vector3(0.0, 0.0, component.max_speed_by_force * 10))
    component.begin_play(body, TimerManager())
    assert component.move_by_force(Vector3(1.0, 0.0, 0.0)) is True
    assert math.isclose(body.force.x, component.force_magnitude)