"""A simple enemy that takes damage, scores on death and reports to the game mode."""

from __future__ import annotations

from typing import Any

from .defines import LOG_ENEMY, LOG_GAME
from .weapons import ZERO_ROTATOR, ZERO_VECTOR

KILL_SCORE = 10


class DummyEnemy:
    """A target with health that awards score when killed."""

    def __init__(self, max_health: float = 100.0) -> None:
        self.max_health = max_health
        self.current_health = max_health
        self.world: Any = None
        self.destroyed = False
        self.location = ZERO_VECTOR
        self.rotation = ZERO_ROTATOR

    def begin_play(self) -> None:
        """Restore full health."""
        self.current_health = self.max_health

    def take_damage(self, amount: float) -> float:
        """Lose health and die at zero; return the damage actually taken."""
        if amount <= 0.0 or self.current_health <= 0.0:
            return 0.0
        self.current_health -= amount
        LOG_ENEMY.info(
            "DummyEnemy took damage: %.1f, health left: %.1f",
            amount,
            self.current_health,
        )
        if self.current_health <= 0.0:
            self.kill()
        return amount

    def kill(self) -> None:
        """Award score, notify the game mode and leave the world."""
        LOG_ENEMY.warning("DummyEnemy died")
        world = self.world
        game_mode = getattr(world, "game_mode", None)
        game_state = getattr(world, "game_state", None)

        if game_state is not None:
            game_state.add_score(KILL_SCORE)
            LOG_ENEMY.warning("score + %d. current score : %d", KILL_SCORE, game_state.score)

        if game_mode is not None:
            game_mode.on_enemy_killed()
            if game_state is not None and game_state.is_round_cleared():
                LOG_GAME.warning("Score target met, round cleared")
                game_mode.end_round()

        if world is None or not world.destroy(self):
            self.destroyed = True