"""The player's pawn: a physics ball that dyes every target it touches."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from dyegame.dyeable import Dyeable, LinearColor
from dyegame.materials import (
    Material,
    MaterialInstanceDynamic,
    StaticMesh,
    create_material_instance_on_mesh,
    set_material_instance_color,
)
from dyegame.physics import PhysicsBody, PhysicsMovementComponent, TimerManager, Vector3

logger = logging.getLogger(__name__)


@dataclass
class Controller:
    """Holds the control rotation in degrees that camera and movement follow."""

    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0

    def add_yaw_input(self, value: float) -> None:
        self.yaw += value

    def add_pitch_input(self, value: float) -> None:
        self.pitch += value


class PlayerMarker:
    """The player-controlled marker."""

    def __init__(
        self,
        name: str = "PlayerMarker",
        *,
        mark_color: LinearColor = LinearColor.RED,
        mesh: StaticMesh | None = None,
        body: PhysicsBody | None = None,
        movement: PhysicsMovementComponent | None = None,
        controller: Controller | None = None,
    ) -> None:
        self.name = name
        self.mark_color = mark_color
        self.mesh = mesh if mesh is not None else StaticMesh([Material("MarkerMaterial")])
        self.body = body if body is not None else PhysicsBody()
        self.movement = movement if movement is not None else PhysicsMovementComponent()
        self.controller = controller
        self.material_instance: MaterialInstanceDynamic | None = None

    def begin_play(self, timers: TimerManager) -> None:
        """Show the mark colour and attach movement to the body."""
        self.material_instance = create_material_instance_on_mesh(self.mesh)
        if self.material_instance is not None:
            set_material_instance_color(self.material_instance, self.mark_color)
        else:
            logger.warning("%s: can't create material dynamic instance", self.name)
        self.movement.begin_play(self.body, timers)

    def move(self, value: tuple[float, float]) -> None:
        """Push the marker relative to the control yaw: ``value`` is (right, forward)."""
        right_amount, forward_amount = value
        if self.controller is None:
            return
        yaw = math.radians(self.controller.yaw)
        forward = Vector3(math.cos(yaw), math.sin(yaw), 0.0)
        right = Vector3(-math.sin(yaw), math.cos(yaw), 0.0)
        self.movement.move_by_force(forward * forward_amount)
        self.movement.move_by_force(right * right_amount)

    def look(self, value: tuple[float, float]) -> None:
        """Turn the view: ``value`` is (yaw, pitch) input."""
        yaw_input, pitch_input = value
        if self.controller is None:
            return
        self.controller.add_yaw_input(yaw_input)
        self.controller.add_pitch_input(pitch_input)

    def on_overlap(self, other: object) -> None:
        """Dye any undyed dyeable that the marker touches."""
        if isinstance(other, Dyeable) and not other.is_dyed():
            other.dye(self.mark_color)