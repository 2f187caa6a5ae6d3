"""Per-match state: phase, round, remaining enemies, score and the round timer."""

from __future__ import annotations

import logging
import math
from typing import Any

from .defines import LOG_GAME, Event, GamePhase

DEFAULT_SCORE_TO_CLEAR = 100

_log = LOG_GAME


class RoundState:
    """Shared match data that the game mode updates and the HUD reads."""

    def __init__(
        self, world: Any = None, *, score_to_clear_round: int = DEFAULT_SCORE_TO_CLEAR
    ) -> None:
        self.world = world
        self.current_state = GamePhase.WAITING_TO_START
        self.current_round = 1
        self.remaining_enemies = 0
        self.score = 0
        self.score_to_clear_round = score_to_clear_round
        self.remaining_time = 0.0
        self.is_timer_running = False
        self.previous_display_seconds = -1
        self.on_score_changed = Event()

    def is_round_cleared(self) -> bool:
        """Whether the score has reached the target for this round."""
        return self.score >= self.score_to_clear_round

    def add_score(self, amount: int) -> None:
        """Add ``amount`` to the score and notify listeners."""
        self.score += amount
        self.on_score_changed.emit(self.score)
        _log.info("Score updated: %d", self.score)

    def reset_score(self) -> None:
        """Set the score back to zero and notify listeners."""
        self.score = 0
        self.on_score_changed.emit(self.score)
        _log.info("Score reset to 0")

    def start_round_timer(self, duration: float) -> None:
        """Start counting down ``duration`` seconds."""
        self.remaining_time = duration
        self.is_timer_running = True

    def stop_round_timer(self) -> None:
        """Pause the countdown."""
        self.is_timer_running = False

    def tick(self, delta_time: float) -> None:
        """Advance the countdown; end the round when it runs out."""
        if not self.is_timer_running:
            return
        self.remaining_time -= delta_time
        seconds = math.ceil(self.remaining_time)
        if seconds != self.previous_display_seconds:
            self.previous_display_seconds = seconds
        if self.remaining_time <= 0.0:
            self._on_round_timer_finished()

    def _on_round_timer_finished(self) -> None:
        _log.warning("Round time limit reached")
        game_mode = getattr(self.world, "game_mode", None)
        if game_mode is not None:
            game_mode.end_round()
        self.is_timer_running = False