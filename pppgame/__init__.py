"""Round-based shooter game logic: weapons, pick-ups, quests, rounds, scoring and menus."""

__version__ = "0.1.0"