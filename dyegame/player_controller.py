"""The player controller that ties the game mode to the HUD and input mode."""

from __future__ import annotations

from enum import Enum

from dyegame.dyeable import Signal
from dyegame.game_mode import GameplayGameMode
from dyegame.hud import GameplayHUD
from dyegame.physics import TimerManager

_NEXT_TICK = 1e-9


class InputMode(Enum):
    """Where player input goes."""

    GAME_ONLY = "game_only"
    UI_ONLY = "ui_only"


class GameplayPlayerController:
    """Feeds game-mode counters to the HUD and switches to the menu when the game ends."""

    def __init__(self, game_mode: GameplayGameMode | None = None, hud: GameplayHUD | None = None) -> None:
        self.game_mode = game_mode
        self.hud = hud
        self.show_mouse_cursor = False
        self.input_mode = InputMode.GAME_ONLY
        self.on_restart_level = Signal()

    def begin_play(self, timers: TimerManager) -> None:
        """Listen for the game end, set up the HUD on the next tick and enter gameplay input."""
        if self.game_mode is not None:
            self.game_mode.on_game_end.connect(self._handle_game_end)
        timers.set_timer(self.init_hud, _NEXT_TICK, False)
        self.set_gameplay_mode_input()

    def init_hud(self) -> None:
        """Copy the current counters to the HUD and keep it updated."""
        if self.game_mode is None or self.hud is None:
            return
        self.hud.set_clearer_targets_left(self.game_mode.clearer_targets_left)
        self.hud.set_targets_dyed(self.game_mode.clear_targets_dyed)
        self.hud.set_targets_amount(self.game_mode.targets_amount)
        self.game_mode.on_clearer_targets_left_changed.connect(self._handle_clearer_targets_left_changed)
        self.game_mode.on_clear_targets_dyed_changed.connect(self._handle_clear_targets_dyed_changed)

    def set_ui_mode_input(self) -> None:
        self.show_mouse_cursor = True
        self.input_mode = InputMode.UI_ONLY

    def set_gameplay_mode_input(self) -> None:
        self.show_mouse_cursor = False
        self.input_mode = InputMode.GAME_ONLY

    def _handle_clearer_targets_left_changed(self, value: int) -> None:
        if self.hud is not None:
            self.hud.set_clearer_targets_left(value)

    def _handle_clear_targets_dyed_changed(self, value: int) -> None:
        if self.hud is not None:
            self.hud.set_targets_dyed(value)

    def _handle_game_end(self) -> None:
        if self.hud is not None:
            self.hud.add_game_end_widget()
            self.hud.on_game_end_menu_restart_button_clicked.connect(self._handle_restart_clicked)
        self.set_ui_mode_input()

    def _handle_restart_clicked(self) -> None:
        self.on_restart_level.emit()