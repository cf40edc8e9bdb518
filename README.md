# nightfall

The rules of a top-down survival shooter as a plain Python library with no
engine attached. The player shoots at enemies, picks abilities that change
their gun, speed and health, and tries to last as long as possible. The
library holds that logic as values and small state machines that you drive
from your own game loop, or from tests, by passing in frame times and input.

It has no dependencies outside the standard library.

## Install

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `nightfall.vec`: frozen `Vec2` and `Vec3` with arithmetic, `length`,
  `normalize`, `perp`, `truncate`, `distance` and `with_z`.
- `nightfall.radians`: `Radian`, an angle where zero points up. Adding,
  subtracting, multiplying or dividing wraps the result into `[0, 2π]`;
  `unit_vector()` gives its direction, `from_degrees` and `to_degrees` convert.
- `nightfall.timer`: `Timer` with `TimerMode.ONCE` or `TimerMode.REPEATING`.
  Call `tick(delta)` with seconds, then check `finished()`, `just_finished()`
  or `remaining()`.
- `nightfall.palette`: `Palette` holding the game's four colours, `Color`,
  and `parse_hex` for `RGB`, `RGBA`, `RRGGBB` and `RRGGBBAA` strings
  (raises `HexColorError` on bad input).
- `nightfall.rng`: `choose_global_seed` picks a run's seed word;
  `make_rng` and `pitch_rng` give deterministic `random.Random` streams from it;
  `random_playback_rate` returns a rate in `[0.9, 1.1)`.
- `nightfall.ability`: the `Ability` enum with `all()`, `display_name()`,
  `description()`, `texture_key()`, `is_available(owned)` and the damage,
  knockback, reload and shoot-speed multipliers.
- `nightfall.player`: `Player` with stats worked out from its abilities
  (`damage`, `shoot_time`, `reload_time`, `knockback`, `move_speed`,
  `update_max_bullets`), `movement` for a frame, and `reset` for a new run;
  `PlayerAnimationState`, `facing_after_move`, `ImmunityTracker` for the
  invincibility spell after a hit, and `format_elapsed` (`125` → `"2:05"`).
- `nightfall.shooting`: `Gun.update(player, delta, trigger_pressed, target)`
  handles the cooldown and reload and returns `BulletSpec`s for the shot,
  following the spread abilities (double barrel, triple barrel, shotgun,
  mega shotgun, sixfold); sound names for the frame are left in `Gun.sounds`.
  `bullet_speed`, `bullet_piercing`, `spread_bullets` and `Piercing` are
  available on their own.
- `nightfall.movement`: `cursor_to_world`, `edge_teleport`, `velocity_step`,
  `friction_step`, `magnet_step` and `fake_magnet_step`.
- `nightfall.pause`: `PauseController` (`accepts_escape`, `toggle_menu`) and
  `volume_from_bar` / `bar_from_volume` for the ten-step volume bars.
- `nightfall.menu`: `GameState`, `Interaction`, and the button feedback of
  `respond_to_interaction` and `play_button_response`.
- `nightfall.hud`: positions of the bullet, heart and reload icons,
  `icon_state`, `reload_frame`, and `HitFlash` for the blinking hit marker.
- `nightfall.thorns`: `ThornsCycle`, which steps the thorns ring through its
  spawning, present and despawning phases and the cooldown.
- `nightfall.vial`: `Vial`, which counts kills towards a heal, doubles the
  kills needed each time and tracks the sprite frame to show.
- `nightfall.widgets`: `Button`, `Clickable`, `Hoverable` and the stepped `Bar`.
- `nightfall.layout`: size constraints (`Const`, `Percent`, `Min`, `Max`,
  `MatchParent`, `SizeVec2`), `Alignment`, `aligned_position`, `grid_cells`,
  `apply_offset` and `window_resize`.
- `nightfall.selection`: `SelectionGroup`, a row of choices driven by
  `hover(index, clicked)` and `handle_keys(left, right, confirm)`, reporting
  each step as a `SelectionEvent`.

## Example

```python
from nightfall.ability import Ability
from nightfall.player import Player, format_elapsed
from nightfall.shooting import Gun
from nightfall.vec import Vec2

player = Player()
player.abilities.append(Ability.MEDIUM_BULLETS)
player.abilities.append(Ability.SHELLS)

print(player.damage())       # 15
print(player.reload_time())  # 1.25
print(format_elapsed(125))   # 2:05

gun = Gun()
bullets = gun.update(player, 1.0, True, Vec2(0.0, 100.0))
print(len(bullets))          # 1
print(player.curr_bullets)   # 5
```

## What it does not do

There is no game to run: no window, rendering, sprites, text, sound playback
or input handling, and no command to start. Enemies, their spawning,
collision detection, health and damage events, experience crystals and
level-up choice screens are not part of the package either. The functions
here take positions, times and input flags as arguments and return what
should happen; drawing and playing it is left to the caller.