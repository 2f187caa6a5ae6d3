# pppgame

Game logic for a small round-based shooter. It is written as plain Python
objects that you drive yourself. There is no engine and no rendering, only the
rules.

## Modules

- `pppgame.defines` holds the `GamePhase` enum, the multicast `Event`
  (`subscribe`, `unsubscribe`, `emit`, `is_bound`) and the `World`. The
  `World` keeps actors (`spawn`, `destroy`, `actors_of`) and one-shot timers
  (`set_timer`). Timers fire only when you call `World.advance(seconds)`.
  `open_level` switches level and clears the actors and pending timers.
  `quit` sets `quit_requested`. The module also defines the logger objects
  `LOG_GAME`, `LOG_WAVE`, `LOG_ENEMY`, `LOG_ITEM`, `LOG_UI` and `LOG_DEBUG`.
- `pppgame.weapons` holds the `WeaponRow` data, the `WeaponType` and
  `FireMode` enums, `HitResult`, and `EquipWeapon`. `EquipWeapon` has
  `fire`, `reload`, `on_equipped` and `drop`, and emits the
  `on_weapon_fired`, `on_ammo_changed` and `on_weapon_dropped` events.
- `pppgame.pickup` holds `PickUpComponent` and `PickUpWeapon`. A
  `PickUpWeapon` loads its row from a mapping of row names to `WeaponRow`
  values in `begin_play`. `handle_pick_up` drops the character's current
  weapon into the world, then spawns and equips the new one.
- `pppgame.quest` holds `KillQuest` and `QuestTracker`. The tracker runs a
  staged kill quest. Its stages default to 20, 30 and 40 kills, and it emits
  progress, stage-completed and all-completed events.
- `pppgame.character` holds `PppCharacter`. It handles movement, jumping,
  sprinting, crouching, zoom, look, the first/third-person camera toggle,
  health, damage and the equipped weapon.
- `pppgame.state` holds `RoundState`. It keeps the phase, round number,
  remaining enemies, score and the round timer.
- `pppgame.enemy` holds `DummyEnemy`.
- `pppgame.spawning` holds `SpawnVolume`, which picks enemy classes by weight
  and places them at random points inside a box.
- `pppgame.gamemode` holds `GameMode`, which starts, ends and clears rounds
  and gives out the score reward.
- `pppgame.debug` holds `restart_level`, `kill_all_enemies`, `end_wave` and
  `skip_to_last_round`.
- `pppgame.controller` holds `PlayerController`. It covers the input mapping
  setup, the main, pause and game-over menus, `start_game` (which opens
  `BasicMap` after 0.3 s) and `quit_game` (which quits after 1 s).
- `pppgame.widgets` holds `GameOverWidget`, `MainMenuWidget` and
  `PauseMenuWidget`, each made of named buttons that emit `on_clicked`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Rules in short

**Rounds**

- `GameMode.start_round` does the following:
  - removes any leftover `DummyEnemy` actors;
  - sets the phase to in progress;
  - sets the remaining enemies to `enemies_per_round` (5 by default);
  - starts a 20-second round timer;
  - has every `SpawnVolume` in the world spawn enemies.
- `GameMode.end_round` clears the round if either of these holds:
  - the score has reached `score_to_clear_round` (100 by default);
  - no enemies remain.

  Clearing raises the round number, resets the score to 0 and starts the next
  round. Otherwise `on_game_over` asks the player controller to show its
  game-over screen.
- The round timer counts down only when you call `RoundState.tick(delta_time)`.
  When it reaches zero it calls the world's game mode `end_round`.

**Scoring**

- Each `DummyEnemy` killed adds 10 points and reports the kill to the game
  mode.
- At 40 points, the reward actor is spawned once per round, if
  `reward_actor_class` is set. If the round is still in progress, it then
  ends.

**Weapons**

- A weapon does not fire with an empty magazine.
- Firing needs an owner whose `controller` has a `view_direction`.
- Hits come from the world's optional `tracer` callable. It is called with
  `(start, end, ignored_actors)` and returns a `HitResult` or `None`.
- A hit actor that has `take_damage` receives the weapon's damage.
- Reloading moves ammunition from the reserve, up to the magazine size in the
  weapon's row.

**Health**

- A character's health is kept between 0 and its maximum.
- At 0, `on_character_dead` fires, provided the character's world has a
  game state.

## What this package does not do

- It draws nothing, plays no sound and reads no keyboard, mouse or gamepad.
  Input handlers such as `PppCharacter.move` or `PlayerController.handle_pause_key`
  are called by your code. `PlayerController.quit_game` only records the quit
  sound in `played_sounds`.
- It has no physics or collision. Line traces come only from a `tracer` you
  supply, and overlaps are reported by calling
  `PickUpComponent.on_begin_overlap` and `on_end_overlap` yourself.
- There is no game loop and no command-line program. You advance time with
  `World.advance` and `RoundState.tick`.