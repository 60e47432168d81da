"""Vectors, physics bodies, timers and the physics-driven movement component."""

from __future__ import annotations

import itertools
import logging
import math
import random
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vector3:
    """A three-dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> Vector3:
        return Vector3(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> Vector3:
        return Vector3(self.x / scale, self.y / scale, self.z / scale)

    def size(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def size_2d(self) -> float:
        """Length of the vector projected on the ground (XY) plane."""
        return math.hypot(self.x, self.y)


@dataclass
class PhysicsBody:
    """A simulated rigid body that accepts impulses and forces."""

    mass: float = 1.0
    velocity: Vector3 = field(default_factory=Vector3)
    force: Vector3 = field(default_factory=Vector3)

    def add_impulse(self, impulse: Vector3) -> None:
        """Change velocity immediately by impulse / mass."""
        self.velocity = self.velocity + impulse / self.mass

    def add_force(self, force: Vector3) -> None:
        """Accumulate a force to be applied over the next simulation step."""
        self.force = self.force + force


@dataclass
class _Timer:
    callback: Callable[[], object]
    interval: float
    loop: bool
    due: float


class TimerManager:
    """Schedules callbacks against a clock that advances only when told to."""

    def __init__(self) -> None:
        self._timers: dict[int, _Timer] = {}
        self._handles = itertools.count(1)
        self._now = 0.0

    @property
    def elapsed(self) -> float:
        return self._now

    def set_timer(self, callback: Callable[[], object], interval: float, loop: bool) -> int:
        """Call ``callback`` after ``interval`` seconds, repeatedly if ``loop``; returns a handle."""
        if interval <= 0:
            raise ValueError("timer interval must be positive")
        handle = next(self._handles)
        self._timers[handle] = _Timer(callback, interval, loop, self._now + interval)
        return handle

    def clear_timer(self, handle: int) -> None:
        """Cancel a timer; cancelling an unknown or finished timer does nothing."""
        self._timers.pop(handle, None)

    def is_active(self, handle: int) -> bool:
        return handle in self._timers

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing every timer that falls due, in time order."""
        if seconds < 0:
            raise ValueError("cannot advance time backwards")
        target = self._now + seconds
        while True:
            pending = [(timer.due, handle) for handle, timer in self._timers.items() if timer.due <= target]
            if not pending:
                break
            due, handle = min(pending)
            timer = self._timers[handle]
            self._now = due
            if timer.loop:
                timer.due += timer.interval
            else:
                del self._timers[handle]
            timer.callback()
        self._now = target


def random_unit_vector(rng: random.Random) -> Vector3:
    """Return a uniformly distributed direction of unit length."""
    while True:
        candidate = Vector3(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0))
        length_squared = candidate.x ** 2 + candidate.y ** 2 + candidate.z ** 2
        if 1e-8 < length_squared <= 1.0:
            return candidate / math.sqrt(length_squared)


@dataclass
class PhysicsMovementComponent:
    """Moves its owner's physics body by force, and optionally by periodic random impulses."""

    force_magnitude: float = 10000.0
    max_speed_by_force: float = 750.0
    should_apply_random_impulse: bool = False
    impulse_applying_frequency: float = 3.0
    min_impulse_magnitude: float = 5000.0
    max_impulse_magnitude: float = 12500.0
    rng: random.Random = field(default_factory=random.Random)
    owner_root: PhysicsBody | None = field(default=None, init=False)
    impulse_timer: int | None = field(default=None, init=False)

    def begin_play(self, owner_root: PhysicsBody | None, timers: TimerManager) -> None:
        """Attach to the owner's body and start random impulses if enabled."""
        if not isinstance(owner_root, PhysicsBody):
            logger.warning(
                "Invalid root component! PhysicsMovementComponent works only with a physics body as a root"
            )
            return
        self.owner_root = owner_root
        if self.should_apply_random_impulse:
            self.impulse_timer = timers.set_timer(
                self.apply_random_impulse, self.impulse_applying_frequency, True
            )

    def apply_random_impulse(self) -> Vector3 | None:
        """Push the body in a random direction; returns the impulse applied."""
        if self.owner_root is None:
            logger.warning("Invalid root component")
            return None
        direction = random_unit_vector(self.rng)
        magnitude = self.rng.uniform(self.min_impulse_magnitude, self.max_impulse_magnitude)
        impulse = direction * magnitude
        self.owner_root.add_impulse(impulse)
        return impulse

    def move_by_force(self, move_vector: Vector3) -> bool:
        """Apply a force along ``move_vector`` unless ground speed is at the cap; True if applied."""
        if self.owner_root is None:
            logger.warning("Invalid root component")
            return False
        ground_speed = self.owner_root.velocity.size_2d()
        if ground_speed < self.max_speed_by_force:
            self.owner_root.add_force(move_vector * self.force_magnitude)
            return True
        return False