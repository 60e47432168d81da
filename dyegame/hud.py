"""The heads-up display that owns the on-screen widgets."""

from __future__ import annotations

from typing import Callable

from dyegame.dyeable import Signal
from dyegame.widgets import GameEndWidget, TargetsWidget, Viewport


class GameplayHUD:
    """Creates the target counters and the end menu and keeps their values."""

    def __init__(
        self,
        *,
        targets_widget_class: Callable[[], TargetsWidget] | None = TargetsWidget.with_labels,
        game_end_widget_class: Callable[[], GameEndWidget] | None = GameEndWidget.with_button,
        viewport: Viewport | None = None,
        targets_widget_order_z: int = 0,
        game_end_widget_order_z: int = 1,
    ) -> None:
        self.targets_widget_class = targets_widget_class
        self.game_end_widget_class = game_end_widget_class
        self.viewport = viewport if viewport is not None else Viewport()
        self.targets_widget_order_z = targets_widget_order_z
        self.game_end_widget_order_z = game_end_widget_order_z
        self.targets_widget: TargetsWidget | None = None
        self.game_end_widget: GameEndWidget | None = None
        self.targets_amount = 0
        self.targets_dyed = 0
        self.on_game_end_menu_restart_button_clicked = Signal()

    def begin_play(self) -> None:
        self._add_targets_widget()

    def _add_targets_widget(self) -> None:
        if self.targets_widget_class is None:
            return
        self.targets_widget = self.targets_widget_class()
        self.viewport.add(self.targets_widget, self.targets_widget_order_z)

    def add_game_end_widget(self) -> None:
        """Show the end-of-game menu and forward its restart clicks."""
        if self.game_end_widget_class is None:
            return
        self.game_end_widget = self.game_end_widget_class()
        self.viewport.add(self.game_end_widget, self.game_end_widget_order_z)
        self.game_end_widget.on_restart_button_clicked.connect(self._handle_restart_clicked)

    def _handle_restart_clicked(self) -> None:
        self.on_game_end_menu_restart_button_clicked.emit()

    def set_clearer_targets_left(self, clearer_targets_left: int) -> None:
        if self.targets_widget is not None:
            self.targets_widget.set_clearer_targets_left(clearer_targets_left)

    def set_targets_dyed(self, targets_dyed: int) -> None:
        if self.targets_widget is not None:
            self.targets_dyed = targets_dyed
            self.targets_widget.set_targets_dyed(self.targets_dyed, self.targets_amount)

    def set_targets_amount(self, targets_amount: int) -> None:
        if self.targets_widget is not None:
            self.targets_amount = targets_amount
            self.targets_widget.set_targets_dyed(self.targets_dyed, self.targets_amount)