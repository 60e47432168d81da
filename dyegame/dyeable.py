"""Colour values, multicast signals and the dyeable contract shared by all targets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar


class Signal:
    """A multicast event: handlers are bound once each and called in binding order."""

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []

    def connect(self, handler: Callable[..., Any]) -> None:
        """Bind a handler; binding the same handler twice has no further effect."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Callable[..., Any]) -> None:
        """Unbind a handler; unbinding one that is not bound does nothing."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def emit(self, *args: Any) -> None:
        """Call every bound handler with the given arguments."""
        for handler in tuple(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, handler: object) -> bool:
        return handler in self._handlers


@dataclass(frozen=True)
class LinearColor:
    """A linear RGBA colour."""

    r: float
    g: float
    b: float
    a: float = 1.0

    WHITE: ClassVar[LinearColor]
    BLACK: ClassVar[LinearColor]
    RED: ClassVar[LinearColor]
    GREEN: ClassVar[LinearColor]
    BLUE: ClassVar[LinearColor]
    YELLOW: ClassVar[LinearColor]


LinearColor.WHITE = LinearColor(1.0, 1.0, 1.0)
LinearColor.BLACK = LinearColor(0.0, 0.0, 0.0)
LinearColor.RED = LinearColor(1.0, 0.0, 0.0)
LinearColor.GREEN = LinearColor(0.0, 1.0, 0.0)
LinearColor.BLUE = LinearColor(0.0, 0.0, 1.0)
LinearColor.YELLOW = LinearColor(1.0, 1.0, 0.0)


class Dyeable(ABC):
    """Something that can be dyed with a colour and cleared again."""

    @abstractmethod
    def dye(self, color: LinearColor) -> None:
        """Paint the object with the given colour."""

    @abstractmethod
    def can_be_dyed_by_target(self) -> bool:
        """Whether another target (not only the player) may dye this object."""

    @abstractmethod
    def clear(self) -> None:
        """Return the object to its original colour."""

    @abstractmethod
    def is_dyed(self) -> bool:
        """Whether the object is currently dyed."""