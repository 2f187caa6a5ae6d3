import pytest

from pppgame.defines import GamePhase, World
from pppgame.state import DEFAULT_SCORE_TO_CLEAR, RoundState


class _RecordingMode:
    def __init__(self):
        self.end_calls = 0

    def end_round(self):
        self.end_calls += 1


def test_defaults():
    state = RoundState()
    assert state.current_state is GamePhase.WAITING_TO_START
    assert state.current_round == 1
    assert state.remaining_enemies == 0
    assert state.score == 0
    assert state.score_to_clear_round == DEFAULT_SCORE_TO_CLEAR
    assert state.is_timer_running is False


def test_add_and_reset_score_notify():
    state = RoundState()
    seen = []
    state.on_score_changed.subscribe(seen.append)
    state.add_score(10)
    state.add_score(5)
    assert state.score == 15
    state.reset_score()
    assert state.score == 0
    assert seen == [10, 15, 0]


def test_round_cleared_threshold():
    state = RoundState(score_to_clear_round=30)
    state.add_score(29)
    assert state.is_round_cleared() is False
    state.add_score(1)
    assert state.is_round_cleared() is True


def test_timer_counts_down():
    state = RoundState()
    state.start_round_timer(2.0)
    state.tick(0.5)
    assert state.remaining_time == pytest.approx(2.0 - 0.5)
    assert state.is_timer_running is True


def test_tick_does_nothing_when_stopped():
    state = RoundState()
    state.start_round_timer(5.0)
    state.stop_round_timer()
    state.tick(1.0)
    assert state.remaining_time == 5.0
    assert state.is_timer_running is False


def test_timer_expiry_ends_round_and_stops():
    world = World()
    mode = _RecordingMode()
    world.game_mode = mode
    state = RoundState(world)
    state.start_round_timer(1.0)
    state.tick(0.4)
    assert mode.end_calls == 0
    state.tick(0.7)
    assert mode.end_calls == 1
    assert state.is_timer_running is False
    state.tick(1.0)
    assert mode.end_calls == 1


def test_timer_expiry_without_game_mode_stops():
    state = RoundState(World())
    state.start_round_timer(0.1)
    state.tick(0.2)
    assert state.is_timer_running is False