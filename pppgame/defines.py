"""Shared game definitions: phases, log channels, events and the simulated world."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

LOG_GAME = logging.getLogger("pppgame.game")
LOG_WAVE = logging.getLogger("pppgame.wave")
LOG_ENEMY = logging.getLogger("pppgame.enemy")
LOG_ITEM = logging.getLogger("pppgame.item")
LOG_UI = logging.getLogger("pppgame.ui")
LOG_DEBUG = logging.getLogger("pppgame.debug")


class GamePhase(Enum):
    """Overall state of a match."""

    WAITING_TO_START = "WaitingToStart"
    IN_PROGRESS = "InProgress"
    ROUND_ENDED = "RoundEnded"
    GAME_OVER = "GameOver"


class Event:
    """A multicast event: handlers are called in subscription order."""

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []

    def subscribe(self, handler: Callable[..., Any]) -> None:
        """Add a handler; subscribing the same handler twice has no effect."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unsubscribe(self, handler: Callable[..., Any]) -> None:
        """Remove a handler if it is subscribed."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def emit(self, *args: Any) -> None:
        """Call every subscribed handler with the given arguments."""
        for handler in list(self._handlers):
            handler(*args)

    def is_bound(self) -> bool:
        """Whether at least one handler is subscribed."""
        return bool(self._handlers)


@dataclass
class World:
    """A minimal game world holding actors, timers and the current level."""

    level: str = ""
    actors: list[Any] = field(default_factory=list)
    game_mode: Any = None
    game_state: Any = None
    player_character: Any = None
    player_controller: Any = None
    delta_seconds: float = 1.0 / 60.0
    tracer: Optional[Callable[..., Any]] = None
    time: float = 0.0
    quit_requested: bool = False
    level_history: list[str] = field(default_factory=list)
    _timers: list[tuple[float, int, Callable[[], Any]]] = field(
        default_factory=list, repr=False
    )
    _sequence: Any = field(default_factory=itertools.count, repr=False)

    def spawn(self, actor: Any) -> Any:
        """Place an actor in the world, start its play and return it."""
        self.actors.append(actor)
        actor.world = self
        begin_play = getattr(actor, "begin_play", None)
        if callable(begin_play):
            begin_play()
        return actor

    def destroy(self, actor: Any) -> bool:
        """Remove an actor from the world; return whether it was present."""
        if actor not in self.actors:
            return False
        self.actors.remove(actor)
        try:
            actor.destroyed = True
        except AttributeError:
            pass
        return True

    def actors_of(self, cls: type) -> list[Any]:
        """All live actors that are instances of ``cls``, in spawn order."""
        return [actor for actor in self.actors if isinstance(actor, cls)]

    def set_timer(self, delay: float, callback: Callable[[], Any]) -> int:
        """Run ``callback`` once after ``delay`` seconds; return a timer handle."""
        if delay < 0:
            raise ValueError("timer delay must not be negative")
        handle = next(self._sequence)
        heapq.heappush(self._timers, (self.time + delay, handle, callback))
        return handle

    def advance(self, seconds: float) -> None:
        """Move the world clock forward, firing due timers in order."""
        if seconds < 0:
            raise ValueError("cannot advance time backwards")
        target = self.time + seconds
        while self._timers and self._timers[0][0] <= target:
            due, _, callback = heapq.heappop(self._timers)
            self.time = due
            callback()
        self.time = target

    def open_level(self, name: str) -> None:
        """Switch to another level, discarding its actors and pending timers."""
        self.level = name
        self.level_history.append(name)
        self.actors.clear()
        self._timers.clear()
        LOG_GAME.info("Opened level %s", name)

    def quit(self) -> None:
        """Ask the game to shut down."""
        self.quit_requested = True
        LOG_GAME.info("Quit requested")