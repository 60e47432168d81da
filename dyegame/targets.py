"""Targets that the player and other targets dye and clear."""

from __future__ import annotations

import logging
from typing import ClassVar

from dyegame.dyeable import Dyeable, LinearColor, Signal
from dyegame.materials import (
    Material,
    MaterialInstanceDynamic,
    StaticMesh,
    create_material_instance_on_mesh,
    set_material_instance_color,
)
from dyegame.physics import PhysicsBody, PhysicsMovementComponent, TimerManager

logger = logging.getLogger(__name__)


class TargetBase(Dyeable):
    """A physics-driven target that holds a colour and reports changes to its dyed state."""

    default_origin_color: ClassVar[LinearColor] = LinearColor.YELLOW

    def __init__(
        self,
        name: str = "Target",
        *,
        mesh: StaticMesh | None = None,
        body: PhysicsBody | None = None,
        movement: PhysicsMovementComponent | None = None,
        timers: TimerManager | None = None,
    ) -> None:
        self.name = name
        self.mesh = mesh if mesh is not None else StaticMesh([Material("TargetMaterial")])
        self.body = body if body is not None else PhysicsBody()
        self.movement = (
            movement if movement is not None else PhysicsMovementComponent(should_apply_random_impulse=True)
        )
        self.timers = timers if timers is not None else TimerManager()
        self.base_target_color = LinearColor.YELLOW
        self.origin_color = self.default_origin_color
        self.current_color = self.origin_color
        self.dyed = False
        self.material_instance: MaterialInstanceDynamic | None = None
        self.on_dyed_changed = Signal()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, dyed={self.dyed})"

    def begin_play(self) -> None:
        """Create the colour material, show the origin colour and start moving."""
        self.material_instance = create_material_instance_on_mesh(self.mesh)
        if self.material_instance is not None:
            set_material_instance_color(self.material_instance, self.origin_color)
        else:
            logger.warning("%s: can't create material dynamic instance", self.name)
        self.current_color = self.origin_color
        self.movement.begin_play(self.body, self.timers)

    def on_overlap(self, other: object) -> None:
        """React to touching another object; plain targets do nothing."""

    def _set_dyed(self, dyed: bool) -> None:
        self.dyed = dyed
        self.on_dyed_changed.emit(self.dyed)

    def _show_color(self, color: LinearColor) -> None:
        if self.material_instance is not None:
            set_material_instance_color(self.material_instance, color)
        else:
            logger.warning("%s: invalid material dynamic instance", self.name)
        self.current_color = color

    def dye(self, color: LinearColor) -> None:
        self._show_color(color)
        logger.info("%s : Target has been dyed", self.name)
        self._set_dyed(True)

    def can_be_dyed_by_target(self) -> bool:
        return True

    def clear(self) -> None:
        self._show_color(self.origin_color)
        logger.info("%s : Target has been cleared", self.name)
        self._set_dyed(False)

    def is_dyed(self) -> bool:
        return self.dyed


class ClearTarget(TargetBase):
    """A target that, once dyed, passes its colour on to undyed targets it touches."""

    def on_overlap(self, other: object) -> None:
        if not isinstance(other, Dyeable):
            return
        if self.dyed and not other.is_dyed() and other.can_be_dyed_by_target():
            other.dye(self.current_color)


class ClearerTarget(TargetBase):
    """A target that clears dyed targets until the player dyes it; then it acts as a clear target."""

    default_origin_color: ClassVar[LinearColor] = LinearColor.GREEN

    def __init__(self, name: str = "ClearerTarget", **kwargs: object) -> None:
        super().__init__(name, **kwargs)  # type: ignore[arg-type]
        self.expired = False
        self.on_expired = Signal()

    def _expire(self) -> None:
        self.expired = True
        self.on_expired.emit(self)

    def dye(self, color: LinearColor) -> None:
        super().dye(color)
        self._expire()
        self.origin_color = self.base_target_color
        logger.info("%s : Clearer target has been dyed and transformed to a clear target", self.name)

    def can_be_dyed_by_target(self) -> bool:
        return self.expired

    def clear(self) -> None:
        super().clear()
        logger.info("%s : Clearer target (now it's clear target) has been cleared", self.name)

    def on_overlap(self, other: object) -> None:
        if not isinstance(other, Dyeable):
            return
        if self.expired:
            if self.dyed and not other.is_dyed() and other.can_be_dyed_by_target():
                other.dye(self.current_color)
        elif other.is_dyed():
            other.clear()