# baggob

The game rules behind a backpack-management dungeon crawler, written as a plain
Python library with no engine attached. A hero explores a dungeon while you keep
the goblin's backpack in order; this package holds the pieces of logic that do
not depend on drawing anything to the screen.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `baggob.vectors`: `Pos` and `Dimens`, immutable integer grid vectors ordered
  by x and then y, with `+`, `-`, `plus_x`, `plus_y` and `plus_xy`;
  `pos_from_floats` floors world coordinates into a `Pos`, and `unit_dimens`
  gives a 1×1 size.
- `baggob.catalog`: the `TextureId`, `SoundId`, `FontId` and `AlbumId`
  identifiers; `prepare_loading_config` returns a `LoadingConfig` listing every
  texture, sound effect and font, and `LoadingConfig.asset_paths` expands them
  to full paths. `atlas_sheets`, `music_tracks` and `config_paths` list the
  sprite sheets, the music of each album and the configuration files.
- `baggob.feed`: the message feed. `MessageColour` (with `rgba`, `is_major`,
  `is_minor`), `AddFeedItemEvent`, `EventFeed.next_id`, `stack_feed_items`
  for stacking items from the newest down, `background_colour` for the
  alternating row shade and `is_out_of_bounds`.
- `baggob.clock`: `Timer`, a one-shot or repeating countdown advanced with
  `tick(delta)`, with `finished`, `just_finished`, `percent`, `percent_left`
  and `reset`.
- `baggob.dungeon`: `TextType` message kinds with their `colour_hint`, `Room`
  flags with `diag_name`, `TimePoint`, `DungeonLevel` and `TimePointLevel`.
- `baggob.combat`: `Combatant`, `Hero`, `Enemy`, `EnemyId`, `DropTable`,
  `CombatState`, and `process_combat`, one dice-rolled exchange of blows that
  returns the new combat state and the message it produced.
- `baggob.messages`: turns a `TextType` into a feed entry and a sound effect
  (`handle_sim_message`), with `font_for_colour`, `sound_for_text` and
  `pick_random_from_series`; `SimMessageEvent` and `SimLootEvent` carry them.
- `baggob.generation`: `RoomType`, `SegmentBlueprint`, `LevelBlueprint`,
  weighted `choose_room_type` and `choose_monster_type`, room constructors
  (`generate_first_room`, `generate_last_room`, `generate_corridor`,
  `generate_empty`, `generate_fight`), `get_enemy` and `generate_level`.
- `baggob.effects`: `TemporaryModifier` stat changes applied, counted down and
  undone by a `TimedEffectTicker`; `modifiers_for_keys` builds the two test
  modifiers; `DamageOverTime` describes damage spread over ticks.
- `baggob.transition`: `AppState`, `GameResult`, the animated `MenuTransition`
  between menu and game (`menu_to_game`, `game_to_menu`, `step`), `CameraZoom`,
  `TransitionView`, `handle_escape` with its `EscapeOutcome`, and
  `result_title` for the game-over headline.
- `baggob.mouse`: `Mouse`, `MouseInteractive`, `HoverTarget`,
  `update_screen_position`, `track_mouse_hover` (only the topmost hovered
  targets stay hovered), `cursor_appearance`, and `toggle_window_mode` for the
  fullscreen key.
- `baggob.opening`: the three-scene narrated introduction, `default_opening`
  and `OpeningSequence.update`.
- `baggob.gold`: `Gold`, a counter that earns 10 gold every second once its
  timer runs.

## Example

```python
import random

from baggob.combat import CombatState, Combatant, process_combat

hero = Combatant(health=20, max_health=20, proficiency=1)
rat = Combatant(health=5, max_health=5)
state = CombatState.IN_PROGRESS
rng = random.Random(1)

while state is CombatState.IN_PROGRESS:
    state, message = process_combat(rat, hero, state, rng)
    print(message.name, hero.health, rat.health)
```

Functions that roll dice take an optional `rng` argument, so a seeded
`random.Random` gives repeatable results.

## What it does not do

- There is no game to run: no window, rendering, audio playback or command.
  The package gives rules and state; a front end has to draw and play them.
- There is no inventory grid: no rectangle placement, overlap checks or search
  for free space in the backpack.
- There is no dungeon runner that steps through rooms and time points on a
  timer, pauses for the player, or rolls loot from a drop table.
- There is no main-menu logic such as debug start-up flags, menu music timing
  or the overseer's eye tracking.
- Asset and configuration files are only named by path; nothing here reads or
  parses them.