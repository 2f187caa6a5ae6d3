"""Round flow: starting and ending rounds, counting kills, rewards and game over."""

from __future__ import annotations

from typing import Any, Optional

from .character import PppCharacter
from .defines import LOG_ENEMY, LOG_GAME, LOG_WAVE, GamePhase, World
from .enemy import DummyEnemy
from .spawning import SpawnVolume
from .state import RoundState
from .weapons import ZERO_ROTATOR, Vector

ROUND_DURATION = 20.0
REWARD_SCORE = 40
REWARD_LOCATION: Vector = (-500.0, 500.0, 0.0)

_PHASE_MESSAGES = {
    GamePhase.WAITING_TO_START: "Game state: waiting",
    GamePhase.IN_PROGRESS: "Game state: combat started",
    GamePhase.ROUND_ENDED: "Game state: round ended",
    GamePhase.GAME_OVER: "Game state: game over",
}


class GameMode:
    """Runs rounds in a world and decides between clearing and game over."""

    def __init__(
        self,
        world: Optional[World] = None,
        *,
        max_rounds: int = 3,
        enemies_per_round: int = 5,
        reward_actor_class: Any = None,
        enemy_class: Any = None,
    ) -> None:
        self.world = world if world is not None else World()
        self.world.game_mode = self
        if self.world.game_state is None:
            self.world.game_state = RoundState(self.world)
        self.max_rounds = max_rounds
        self.enemies_per_round = enemies_per_round
        self.reward_actor_class = reward_actor_class
        self.enemy_class = enemy_class
        self.reward_given = False

    @property
    def game_state(self) -> Optional[RoundState]:
        """The world's round state."""
        return self.world.game_state

    def begin_play(self) -> None:
        """Listen for the player character's death."""
        character = self.world.player_character
        if isinstance(character, PppCharacter):
            character.on_character_dead.subscribe(self.on_game_over)
        else:
            LOG_GAME.warning("Player character not found in game mode begin play")

    def set_phase(self, phase: GamePhase) -> None:
        """Move the match to ``phase`` unless it is already there."""
        state = self.game_state
        if state is not None:
            if state.current_state is phase:
                return
            state.current_state = phase
        if phase is GamePhase.GAME_OVER:
            LOG_GAME.warning(_PHASE_MESSAGES[phase])
        else:
            LOG_GAME.info(_PHASE_MESSAGES[phase])

    def start_round(self) -> None:
        """Clear leftover enemies, reset counters, start the timer and spawn."""
        for enemy in self.world.actors_of(DummyEnemy):
            self.world.destroy(enemy)
        LOG_ENEMY.warning("All enemies from the previous round removed")

        state = self.game_state
        if state is not None:
            state.current_state = GamePhase.IN_PROGRESS
            state.remaining_enemies = self.enemies_per_round
            LOG_WAVE.info("Wave %d started!", state.current_round)
            state.start_round_timer(ROUND_DURATION)

        self.spawn_enemies()
        self.reward_given = False

    def end_round(self) -> None:
        """Finish the round and either clear it or end the game."""
        self.set_phase(GamePhase.ROUND_ENDED)
        state = self.game_state
        if state is None:
            return
        LOG_WAVE.info("Round %d ended!", state.current_round)

        if state.is_round_cleared() or state.remaining_enemies <= 0:
            LOG_GAME.info("Conditions met, round cleared")
            self.on_round_cleared()
        else:
            LOG_GAME.warning("Conditions not met, game over")
            self.on_game_over()

    def on_enemy_killed(self) -> None:
        """Count a kill, check for the reward and end the round when none are left."""
        state = self.game_state
        if state is None:
            return
        remaining = state.remaining_enemies - 1
        state.remaining_enemies = remaining
        LOG_ENEMY.info("Enemy killed! Remaining: %d", remaining)

        self.check_reward_condition()

        if remaining <= 0:
            LOG_ENEMY.info("All enemies killed, ending round")
            self.end_round()

    def on_player_death(self) -> None:
        """Put the match into the game-over phase."""
        LOG_GAME.error("Player died")
        self.set_phase(GamePhase.GAME_OVER)

    def spawn_enemies(self) -> list[Any]:
        """Have every spawn volume spawn a round's worth of enemies."""
        volumes = self.world.actors_of(SpawnVolume)
        if not volumes:
            LOG_ENEMY.warning("No enemy spawn volume exists")
            return []
        spawned: list[Any] = []
        for volume in volumes:
            spawned.extend(volume.spawn_enemies(self.enemies_per_round))
            LOG_ENEMY.info("%s spawned %d enemies", volume.name, self.enemies_per_round)
        return spawned

    def on_round_cleared(self) -> None:
        """Go to the next round with a fresh score."""
        LOG_GAME.info("Round cleared, moving on")
        state = self.game_state
        if state is not None:
            state.current_round += 1
            state.reset_score()
        self.start_round()

    def on_game_over(self) -> None:
        """Show the game-over screen on the player's controller."""
        LOG_GAME.warning("Game over")
        show_game_over = getattr(self.world.player_controller, "show_game_over", None)
        if callable(show_game_over):
            show_game_over()

    def check_reward_condition(self) -> Any:
        """Spawn the reward once the score is high enough; return the reward actor."""
        state = self.game_state
        if state is None or self.reward_given:
            return None
        if state.score < REWARD_SCORE:
            return None

        self.reward_given = True
        reward = None
        if self.reward_actor_class is not None:
            reward = self.reward_actor_class()
            reward.location = REWARD_LOCATION
            reward.rotation = ZERO_ROTATOR
            self.world.spawn(reward)
            LOG_GAME.warning("Score %d reached, reward spawned", REWARD_SCORE)
        else:
            LOG_GAME.warning("No reward actor class is set")

        if state.current_state is GamePhase.IN_PROGRESS:
            LOG_GAME.info("Score condition met, ending round")
            self.end_round()
        return reward