# outbreak

This package holds the rules of a four-player cooperative zombie shooter. They are
plain Python objects with no engine behind them. You can drive them from your own
game loop or server, or call them directly in tests. Time moves forward only when
you pass a delta time in seconds to a `tick` method.

## Modules

- `outbreak.statemachine`
  - `StateMachine` and the abstract `State` base class, keyed by any hashable value
    such as an enum member.
  - `StateMachineError` is raised in these cases: a key is added twice, you switch to
    an unknown key, or you call `execute` while no state is active.
- `outbreak.defines`
  - Enumerations: `ZombieStateType`, `ZombieAnimationType`, `ZombieType`,
    `ZombieSubType`, `PlayerType`, `CharacterType`, `CharacterBodyType`,
    `CameraMode`, `PlayerControlType` and the flag `AvoidanceGroupType`.
  - Data rows: `CharacterBaseData`, `PlayerData`, `ZombieData` and `WeaponData`.
  - `enum_to_string` gives a member's canonical name, such as `"ChaseWalk"`.
    `display_name` gives its display label, such as `"추적"` for `ZombieStateType.CHASE`.
- `outbreak.text`
  - `pad_left` and `to_padded_string` for zero padding.
  - `zombie_mesh_path`, `random_zombie_mesh_path` and `zombie_mesh_type_to_string`
    build zombie mesh asset paths such as
    `.../SKM_Zombie_Normal_001.SKM_Zombie_Normal_001'`.
- `outbreak.hud`
  - `Widget` is a set of `TextBlock`s with a `Visibility` each.
  - `Hud` routes game events to the widget.
  - `format_match_time` renders seconds as `MM:SS`.
  - `Widget.set_cutscene_mode` hides the gameplay overlay during a cutscene.
- `outbreak.game`
  - `GameInstance` holds the settings for a whole run.
  - `LobbyGameMode` raises `LobbyFullError` from `pre_login` once four players are
    in. When the fourth player joins, `post_login` starts the match and returns the
    first level's URL.
  - `InGameMode` tracks the `MatchState`. Its `proceed_to_next_level` returns the URL
    of the next level, using `next_level_url`.
  - `GameState` keeps the match clock, the alive count and the kill totals.
    `PlayerState` keeps per-player counters.
  - `phase_title` gives the on-screen title of each level.
- `outbreak.events`
  - `InvisibleWall` is made of three `WallBox`es.
  - `CutsceneManager` freezes a `Controllable` player while a cutscene plays.
  - `SafeZoneController` tracks players in the start and end zones. When the last
    player leaves the start zone, it opens the wall and plays the cutscene, with the
    objective from `objective_for_level`. When every player has reached the end zone,
    it ends the match and returns the next level's URL.
- `outbreak.weapons`
  - `AssaultRifle` and `SubmachineGun` share the base class `Weapon`, which handles
    the magazine, the reserve, timed reloads and automatic fire.
  - Shots are resolved by a `tracer` callable that you supply, and it returns a
    `ShotResult`. A shot that hits a zombie deals 10 damage.
  - `SubmachineGun.server_make_shot` rejects requests that fail `can_make_shot`.
  - `CameraShake` holds the recoil shake settings.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

A state machine:

```python
from outbreak.statemachine import StateMachine, State
from outbreak.defines import ZombieStateType


class Idle(State):
    def enter(self, previous_state, context=None):
        print("idle after", previous_state)

    def execute(self, current_state, delta_time):
        pass

    def exit(self, next_state, context=None):
        print("leaving idle for", next_state)


fsm = StateMachine(ZombieStateType.NONE)
fsm.add_state(ZombieStateType.IDLE, Idle(fsm, ZombieStateType.IDLE))
fsm.change_state(ZombieStateType.IDLE)
assert fsm.is_in_state(ZombieStateType.IDLE)
```

The lobby and level flow:

```python
from outbreak.game import LobbyGameMode, LobbyFullError, next_level_url, phase_title

lobby = LobbyGameMode()
for player in ["a", "b", "c"]:
    lobby.post_login(player)
lobby.post_login("d")          # "/Game/Maps/FirstPhase?listen"
try:
    lobby.pre_login("", "127.0.0.1", "e")
except LobbyFullError:
    pass

phase_title("FirstPhase")      # "LEVEL 1 : Lush Forest"
next_level_url("FirstPhase")   # "/Game/Maps/SecondPhase?listen"
```

A weapon driven by `tick`:

```python
from outbreak.defines import WeaponData
from outbreak.hud import Hud
from outbreak.weapons import AssaultRifle

hud = Hud()
hud.begin_play()
rifle = AssaultRifle(
    WeaponData(magazine_capacity=30, current_ammo=30, total_ammo=90,
               fire_frequency=0.1, reload_duration=2.0),
    hud=hud,
)
rifle.start_fire()   # fires at once, then every 0.1 s
rifle.tick(0.25)     # two more shots: 27 rounds left
rifle.stop_fire()
rifle.reload()
rifle.tick(2.0)      # reload done: 30 in the magazine, 87 in reserve
hud.widget.ammo_block.text   # "30 / 87"
```

## What this package does not do

- It draws nothing, plays no sound and opens no network connections.
  - Widgets only hold text and visibility.
  - Sounds and camera shakes are only counted.
  - Travelling to a level means returning its URL.
- It has no game loop and no command to run. The caller advances time.
- It has no characters, no zombie AI, no spawning and no abilities.
  - The enumerations and data rows describe them, but nothing here moves or fights.
  - Hits are whatever your `tracer` reports.