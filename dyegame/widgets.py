"""On-screen widgets: the target counters and the end-of-game menu."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Protocol

from dyegame.dyeable import Signal


class _Constructible(Protocol):
    def construct(self) -> None: ...


@dataclass
class TextBlock:
    """A line of text on screen."""

    text: str = ""


@dataclass
class Button:
    """A clickable button."""

    on_clicked: Signal = field(default_factory=Signal)

    def click(self) -> None:
        self.on_clicked.emit()


class Viewport:
    """The screen widgets are added to, kept in drawing (z) order."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int, _Constructible]] = []
        self._sequence = itertools.count()

    def add(self, widget: _Constructible, z_order: int) -> None:
        """Show a widget at a z order and construct it."""
        self._entries.append((z_order, next(self._sequence), widget))
        self._entries.sort(key=lambda entry: entry[:2])
        widget.construct()

    @property
    def widgets(self) -> list[_Constructible]:
        return [widget for _, _, widget in self._entries]

    def __contains__(self, widget: object) -> bool:
        return any(entry[2] is widget for entry in self._entries)


class TargetsWidget:
    """Shows how many clearer targets are left and how many targets are dyed."""

    def __init__(
        self,
        clearer_targets_left_label: TextBlock | None = None,
        targets_dyed_label: TextBlock | None = None,
    ) -> None:
        self.clearer_targets_left_label = clearer_targets_left_label
        self.targets_dyed_label = targets_dyed_label

    @classmethod
    def with_labels(cls) -> TargetsWidget:
        return cls(TextBlock(), TextBlock())

    def construct(self) -> None:
        self.set_clearer_targets_left(0)
        self.set_targets_dyed(0, 0)

    def set_clearer_targets_left(self, clearer_targets_left: int) -> None:
        if self.clearer_targets_left_label is not None:
            self.clearer_targets_left_label.text = f"Clearer Targets Left: {clearer_targets_left}"

    def set_targets_dyed(self, targets_dyed: int, targets_amount: int) -> None:
        if self.targets_dyed_label is not None:
            self.targets_dyed_label.text = f"Targets Dyed: {targets_dyed} / {targets_amount}"


class GameEndWidget:
    """The end-of-game menu with a restart button."""

    def __init__(self, restart_button: Button | None = None) -> None:
        self.restart_button = restart_button
        self.on_restart_button_clicked = Signal()

    @classmethod
    def with_button(cls) -> GameEndWidget:
        return cls(Button())

    def construct(self) -> None:
        if self.restart_button is not None:
            self.restart_button.on_clicked.connect(self._handle_restart_button_clicked)

    def _handle_restart_button_clicked(self) -> None:
        self.on_restart_button_clicked.emit()