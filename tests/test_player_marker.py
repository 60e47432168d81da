import pytest

from dyegame.dyeable import LinearColor
from dyegame.materials import COLOR_PARAMETER_NAME
from dyegame.physics import TimerManager, Vector3
from dyegame.player_marker import Controller, PlayerMarker
from dyegame.targets import ClearerTarget, ClearTarget


def _marker(controller=None):
    marker = PlayerMarker(controller=controller)
    marker.begin_play(TimerManager())
    return marker


def test_begin_play_shows_mark_color():
    marker = _marker()
    assert marker.material_instance.get_vector_parameter(COLOR_PARAMETER_NAME) == LinearColor.RED


def test_overlap_dyes_undyed_target():
    marker = _marker()
    target = ClearTarget("t")
    target.begin_play()
    marker.on_overlap(target)
    assert target.is_dyed()
    assert target.current_color == marker.mark_color


def test_overlap_leaves_dyed_target_alone():
    marker = _marker()
    target = ClearTarget("t")
    target.begin_play()
    target.dye(LinearColor.BLUE)
    marker.on_overlap(target)
    assert target.current_color == LinearColor.BLUE


def test_overlap_dyes_clearer_and_expires_it():
    marker = _marker()
    clearer = ClearerTarget("c")
    clearer.begin_play()
    marker.on_overlap(clearer)
    assert clearer.expired
    assert clearer.is_dyed()


def test_overlap_ignores_non_dyeable():
    marker = _marker()
    other = object()
    marker.on_overlap(other)
    assert marker.body.force == Vector3()


def test_move_forward_along_yaw_zero():
    marker = _marker(Controller())
    marker.move((0.0, 1.0))
    assert marker.body.force.x == pytest.approx(marker.movement.force_magnitude)
    assert marker.body.force.y == pytest.approx(0.0)


def test_move_follows_control_yaw():
    marker = _marker(Controller(yaw=90.0))
    marker.move((0.0, 1.0))
    assert marker.body.force.x == pytest.approx(0.0, abs=1e-6)
    assert marker.body.force.y == pytest.approx(marker.movement.force_magnitude)


def test_move_right_is_perpendicular():
    marker = _marker(Controller())
    marker.move((1.0, 0.0))
    assert marker.body.force.x == pytest.approx(0.0)
    assert marker.body.force.y == pytest.approx(marker.movement.force_magnitude)


def test_move_without_controller_does_nothing():
    marker = _marker()
    marker.move((1.0, 1.0))
    assert marker.body.force == Vector3()


def test_move_respects_speed_cap():
    marker = _marker(Controller())
    marker.body.velocity = Vector3(marker.movement.max_speed_by_force, 0.0, 0.0)
    marker.move((0.0, 1.0))
    assert marker.body.force == Vector3()


def test_look_adds_controller_input():
    controller = Controller()
    marker = _marker(controller)
    marker.look((2.5, -1.5))
    marker.look((2.5, -1.5))
    assert controller.yaw == pytest.approx(5.0)
    assert controller.pitch == pytest.approx(-3.0)