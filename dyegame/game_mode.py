"""Game rules: counts targets, tracks dyed and clearer targets and detects the win."""

from __future__ import annotations

import logging
from typing import Iterable

from dyegame.dyeable import Signal
from dyegame.targets import ClearerTarget, ClearTarget

logger = logging.getLogger(__name__)


class GameplayGameMode:
    """Keeps the score of a round and announces when every target is dyed."""

    def __init__(self) -> None:
        self.on_clearer_targets_left_changed = Signal()
        self.on_clear_targets_dyed_changed = Signal()
        self.on_game_end = Signal()
        self.targets_amount = 0
        self.game_ended = False
        self._clearer_targets_left = 0
        self._clear_targets_dyed = 0

    @property
    def clearer_targets_left(self) -> int:
        return self._clearer_targets_left

    @property
    def clear_targets_dyed(self) -> int:
        return self._clear_targets_dyed

    def begin_play(self, actors: Iterable[object]) -> None:
        """Count the targets among ``actors`` and listen to their state changes."""
        for actor in actors:
            if isinstance(actor, ClearerTarget):
                actor.on_expired.connect(self._handle_clearer_target_expired)
                self._clearer_targets_left += 1
                self.targets_amount += 1
            elif isinstance(actor, ClearTarget):
                actor.on_dyed_changed.connect(self._handle_target_dyed_status_changed)
                self.targets_amount += 1

    def is_win_condition_met(self) -> bool:
        """True when no clearer targets remain and every target is dyed."""
        return self._clearer_targets_left == 0 and self._clear_targets_dyed == self.targets_amount

    def _handle_clearer_target_expired(self, target: ClearerTarget) -> None:
        target.on_expired.disconnect(self._handle_clearer_target_expired)
        self._set_clearer_targets_left(self._clearer_targets_left - 1)
        self._set_clear_targets_dyed(self._clear_targets_dyed + 1)
        target.on_dyed_changed.connect(self._handle_target_dyed_status_changed)
        self._handle_win_condition()

    def _handle_target_dyed_status_changed(self, dyed: bool) -> None:
        self._set_clear_targets_dyed(self._clear_targets_dyed + (1 if dyed else -1))
        self._handle_win_condition()

    def _set_clearer_targets_left(self, value: int) -> None:
        self._clearer_targets_left = value
        self.on_clearer_targets_left_changed.emit(value)

    def _set_clear_targets_dyed(self, value: int) -> None:
        self._clear_targets_dyed = value
        self.on_clear_targets_dyed_changed.emit(value)

    def _handle_win_condition(self) -> None:
        if self.is_win_condition_met() and not self.game_ended:
            logger.info("You've won!!!")
            self.game_ended = True
            self.on_game_end.emit()