"""Staged enemy-kill quests and the tracker that walks through their stages."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Optional

from .defines import Event

_log = logging.getLogger(__name__)

DEFAULT_QUEST_STAGES = (20, 30, 40)


class QuestState(Enum):
    """Progress of a single quest, with its display label as value."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class KillQuest:
    """A quest that is completed by defeating a target number of enemies."""

    def __init__(
        self,
        name: str = "Default Kill Quest",
        description: str = "Defeat enemies.",
    ) -> None:
        self.target_kill_count = 0
        self.current_kill_count = 0
        self.state = QuestState.NOT_STARTED
        self.name = name
        self.description = description

    def add_kill_count(self, kill_amount: int = 1) -> bool:
        """Count kills while in progress; return whether the quest just completed."""
        if self.state is not QuestState.IN_PROGRESS:
            return False
        self.current_kill_count = min(
            self.current_kill_count + kill_amount, self.target_kill_count
        )
        _log.info(
            "Quest: %s - Current Kills: %d / %d",
            self.name,
            self.current_kill_count,
            self.target_kill_count,
        )
        if self.current_kill_count >= self.target_kill_count:
            self.complete_quest()
            return True
        return False

    def advance_quest(self, new_target_kill_count: int) -> None:
        """Start a new stage with a fresh target and a zeroed kill count."""
        self.target_kill_count = new_target_kill_count
        self.current_kill_count = 0
        self.state = QuestState.IN_PROGRESS
        _log.info("Quest advanced! New Target: %d", self.target_kill_count)

    def complete_quest(self) -> None:
        """Mark the quest as completed."""
        self.state = QuestState.COMPLETED
        _log.info("Quest '%s' Completed!", self.name)

    def reset_quest(self) -> None:
        """Return the quest to its not-started state."""
        self.target_kill_count = 0
        self.current_kill_count = 0
        self.state = QuestState.NOT_STARTED
        _log.info("Quest '%s' Reset.", self.name)


class QuestTracker:
    """Drives a kill quest through a list of stage targets."""

    def __init__(self, quest_stages: Optional[Iterable[int]] = None) -> None:
        self.quest_stages: list[int] = list(
            DEFAULT_QUEST_STAGES if quest_stages is None else quest_stages
        )
        self.current_stage_index = -1
        self.current_quest: Optional[KillQuest] = None
        self.on_quest_progress_updated = Event()
        self.on_quest_stage_completed = Event()
        self.on_all_quests_completed = Event()

    def _configure_stage(self, quest: KillQuest) -> None:
        target = self.quest_stages[self.current_stage_index]
        quest.advance_quest(target)
        quest.name = f"Enemy Kill Quest Stage {self.current_stage_index + 1:,}"
        quest.description = f"Defeat {target:,} enemies."

    def _broadcast_progress(self) -> None:
        quest = self.current_quest
        if quest is not None:
            self.on_quest_progress_updated.emit(
                quest.current_kill_count, quest.target_kill_count
            )

    def start_quest(self) -> bool:
        """Begin the first stage; return whether the quest was started."""
        if not self.quest_stages:
            _log.warning("Quest stages are empty; the quest cannot start.")
            return False
        if self.current_stage_index != -1:
            _log.warning("Quest has already been started or completed.")
            return False

        self.current_stage_index = 0
        self.current_quest = KillQuest()
        self._configure_stage(self.current_quest)
        self._broadcast_progress()
        _log.info(
            "Quest started: '%s' target: %d",
            self.current_quest.name,
            self.current_quest.target_kill_count,
        )
        return True

    def on_enemy_killed(self, kill_amount: int = 1) -> None:
        """Record kills against the active stage and move on when it completes."""
        quest = self.current_quest
        if quest is None or quest.state is not QuestState.IN_PROGRESS:
            _log.warning("No active quest, or the quest is not in progress.")
            return

        completed = quest.add_kill_count(kill_amount)
        self._broadcast_progress()

        if completed:
            _log.info("Quest stage completed: %d", self.current_stage_index + 1)
            self.on_quest_stage_completed.emit(self.current_stage_index)
            self.go_to_next_quest_stage()

    def go_to_next_quest_stage(self) -> None:
        """Advance to the next stage, or finish when none is left."""
        if self.current_stage_index + 1 < len(self.quest_stages):
            self.current_stage_index += 1
            if self.current_quest is None:
                self.current_quest = KillQuest()
            self._configure_stage(self.current_quest)
            _log.info(
                "Moved to quest stage %d, target: %d",
                self.current_stage_index + 1,
                self.current_quest.target_kill_count,
            )
            self._broadcast_progress()
        else:
            _log.info("All quest stages are completed!")
            if self.current_quest is not None:
                self.current_quest.complete_quest()
            self.on_all_quests_completed.emit()

    def all_quests_completed(self) -> bool:
        """Whether the stage index has run past the last stage."""
        return self.current_stage_index >= len(self.quest_stages)