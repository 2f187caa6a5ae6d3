from pppgame.debug import end_wave, kill_all_enemies, restart_level, skip_to_last_round
from pppgame.defines import GamePhase, World
from pppgame.enemy import DummyEnemy
from pppgame.gamemode import GameMode


class _Prop:
    pass


def test_restart_level_reopens_current():
    world = World(level="BasicMap")
    world.spawn(_Prop())
    restart_level(world)
    assert world.level == "BasicMap"
    assert world.level_history[-1] == "BasicMap"
    assert world.actors == []


def test_kill_all_enemies_keeps_other_actors():
    world = World()
    prop = world.spawn(_Prop())
    world.spawn(DummyEnemy())
    world.spawn(DummyEnemy())
    assert kill_all_enemies(world) == 2
    assert world.actors_of(DummyEnemy) == []
    assert world.actors == [prop]


def test_end_wave_ends_round():
    world = World()
    mode = GameMode(world)
    mode.game_state.remaining_enemies = 0
    end_wave(world)
    assert mode.game_state.current_round == 2


def test_skip_to_last_round():
    world = World()
    mode = GameMode(world, max_rounds=7)
    skip_to_last_round(world)
    assert mode.game_state.current_round == 7
    assert mode.game_state.current_state is GamePhase.IN_PROGRESS