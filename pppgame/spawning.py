"""A box volume that spawns enemies at random points, chosen by weight."""

from __future__ import annotations

import random
from typing import Any, Iterable, Optional

from .defines import LOG_DEBUG
from .weapons import ZERO_ROTATOR, Vector

DEFAULT_SPAWN_COUNT = 3


class SpawnVolume:
    """Spawns enemies inside an axis-aligned box around ``origin``."""

    def __init__(
        self,
        *,
        origin: Vector = (0.0, 0.0, 0.0),
        extent: Vector = (100.0, 100.0, 100.0),
        enemy_classes: Iterable[Any] = (),
        spawn_weights: Iterable[float] = (),
        rng: Any = None,
        name: str = "EnemySpawnVolume",
    ) -> None:
        self.origin = origin
        self.extent = extent
        self.enemy_classes: list[Any] = list(enemy_classes)
        self.spawn_weights: list[float] = list(spawn_weights)
        self.rng = rng if rng is not None else random.Random()
        self.name = name
        self.world: Any = None
        self.destroyed = False

    def _configured(self) -> bool:
        return bool(self.enemy_classes) and len(self.spawn_weights) == len(
            self.enemy_classes
        )

    def random_point(self) -> Vector:
        """A uniformly random point inside the box."""
        return tuple(
            self.rng.uniform(o - e, o + e) for o, e in zip(self.origin, self.extent)
        )

    def pick_enemy_class(self) -> Optional[Any]:
        """Choose an enemy class by weight; None when misconfigured."""
        if not self._configured():
            LOG_DEBUG.error("Enemy classes or spawn weights are misconfigured")
            return None
        total = sum(self.spawn_weights)
        if total <= 0.0:
            LOG_DEBUG.error("Spawn weights add up to zero")
            return None

        roll = self.rng.uniform(0.0, total)
        accumulated = 0.0
        for enemy_class, weight in zip(self.enemy_classes, self.spawn_weights):
            accumulated += weight
            if roll <= accumulated:
                return enemy_class
        return self.enemy_classes[-1]

    def spawn_enemies(self, count: int) -> list[Any]:
        """Spawn ``count`` enemies into the world; return the spawned actors."""
        if not self._configured():
            LOG_DEBUG.error("Enemy classes and spawn weights do not match")
            return []
        if self.world is None:
            return []

        spawned = []
        for _ in range(count):
            enemy_class = self.pick_enemy_class()
            if enemy_class is None:
                continue
            enemy = enemy_class()
            enemy.location = self.random_point()
            enemy.rotation = ZERO_ROTATOR
            spawned.append(self.world.spawn(enemy))
        return spawned

    def begin_play(self) -> None:
        """Spawn the initial batch of enemies."""
        LOG_DEBUG.info("Spawn volume begin play")
        self.spawn_enemies(DEFAULT_SPAWN_COUNT)