"""Debug helpers for restarting, clearing enemies and skipping rounds."""

from __future__ import annotations

from typing import Any

from .defines import LOG_DEBUG, LOG_GAME
from .enemy import DummyEnemy
from .gamemode import GameMode
from .state import RoundState


def restart_level(world: Any) -> None:
    """Reopen the current level."""
    if world is None:
        return
    name = world.level
    world.open_level(name)
    LOG_GAME.warning("Level restarted: %s", name)


def kill_all_enemies(world: Any) -> int:
    """Remove every dummy enemy from the world; return how many were removed."""
    removed = sum(1 for enemy in world.actors_of(DummyEnemy) if world.destroy(enemy))
    LOG_GAME.warning("All enemies removed")
    return removed


def end_wave(world: Any) -> None:
    """Force the current round to end."""
    LOG_DEBUG.warning("end_wave() called")
    game_mode = getattr(world, "game_mode", None)
    if isinstance(game_mode, GameMode):
        game_mode.end_round()


def skip_to_last_round(world: Any) -> None:
    """Jump to the final round and start it."""
    LOG_DEBUG.warning("skip_to_last_round() called")
    game_mode = getattr(world, "game_mode", None)
    game_state = getattr(world, "game_state", None)
    if isinstance(game_mode, GameMode) and isinstance(game_state, RoundState):
        game_state.current_round = game_mode.max_rounds
        game_mode.start_round()