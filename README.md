# dyegame

Game logic for a small simulation in which a player marker dyes targets and
special "clearer" targets wipe the dye off again. The game is won once no
clearer targets are left and every counted target is dyed.

The package models game state, the rules applied when two objects overlap,
and the events that a user interface listens to. It is a library only; it
has no command to run.

## Installation

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

### `dyegame.dyeable`

- `Signal`: a multicast event. `connect(handler)` binds a handler once
  (binding it again does nothing), `disconnect(handler)` unbinds it (a
  handler that is not bound is ignored), `emit(*args)` calls the handlers in
  binding order. `len()` and `in` work on it.
- `LinearColor`: a frozen RGBA colour with `WHITE`, `BLACK`, `RED`,
  `GREEN`, `BLUE` and `YELLOW` constants.
- `Dyeable`: the abstract interface `dye(color)`,
  `can_be_dyed_by_target()`, `clear()` and `is_dyed()`.

### `dyegame.materials`

- `Material`: a named material with default vector parameters.
- `MaterialInstanceDynamic`: an instance whose `set_vector_parameter`
  overrides values and whose `get_vector_parameter` falls back to its
  parent, raising `KeyError` if no value exists.
- `StaticMesh`: material slots; `get_material(index)` returns `None` for an
  empty or missing slot, `create_dynamic_material_instance(index, material)`
  places a new instance in the slot and raises `IndexError` for a missing slot.
- `create_material_instance_on_mesh(mesh)` gives slot 0 its own instance
  (or returns `None`), and `set_material_instance_color(instance, color)`
  sets its `"Color"` parameter.

### `dyegame.physics`

- `Vector3` with arithmetic, `size()` and `size_2d()` (length in the XY plane).
- `PhysicsBody`: `add_impulse` changes `velocity` by impulse / mass at once;
  `add_force` accumulates into `force`.
- `TimerManager`: `set_timer(callback, interval, loop)` returns a handle
  (a non-positive interval raises `ValueError`), `clear_timer(handle)`,
  `is_active(handle)`, and `advance(seconds)`, which fires due timers in
  time order. Time moves only when `advance` is called.
- `random_unit_vector(rng)`: a uniformly distributed unit direction.
- `PhysicsMovementComponent`: after `begin_play(owner_root, timers)`,
  `move_by_force(move_vector)` adds `move_vector * force_magnitude` as a
  force while ground speed is below `max_speed_by_force` (default 750) and
  returns whether it did. With `should_apply_random_impulse`, a looping
  timer every `impulse_applying_frequency` seconds (default 3) calls
  `apply_random_impulse`, which pushes the body by a random direction times a
  magnitude between `min_impulse_magnitude` (5000) and
  `max_impulse_magnitude` (12500).

### `dyegame.targets`

- `TargetBase`: holds `origin_color`, `current_color` and `dyed`, keeps its
  mesh colour in sync, and emits `on_dyed_changed(dyed)` on every `dye` and
  `clear`. `begin_play()` creates the material instance, shows the origin
  colour and starts its movement component (random impulses by default).
  Its `on_overlap` does nothing.
- `ClearTarget` (yellow): when dyed, dyes an undyed `Dyeable` it overlaps,
  if that object accepts dye from targets.
- `ClearerTarget` (green): clears any dyed `Dyeable` it overlaps. It does
  not accept dye from targets. When dyed (by the player marker), it becomes
  `expired`, emits `on_expired(target)`, takes yellow as its origin colour
  and from then on behaves like a clear target.

### `dyegame.player_marker`

- `Controller`: control rotation in degrees, with `add_yaw_input` and
  `add_pitch_input`.
- `PlayerMarker`: `on_overlap(other)` dyes any undyed `Dyeable` with its
  `mark_color` (red by default). `move((right, forward))` pushes the body
  relative to the controller's yaw; `look((yaw, pitch))` turns the
  controller. Both do nothing without a controller.

### `dyegame.game_mode`

- `GameplayGameMode`: `begin_play(actors)` counts clear and clearer
  targets into `targets_amount` and listens to them. It exposes
  `clearer_targets_left` and `clear_targets_dyed`, emits
  `on_clearer_targets_left_changed`, `on_clear_targets_dyed_changed`, and
  `on_game_end` once, when `is_win_condition_met()` first becomes true.

### `dyegame.widgets` and `dyegame.hud`

- `TextBlock`, `Button` (`click()` emits `on_clicked`) and `Viewport`
  (`add(widget, z_order)` keeps widgets in z order and constructs them).
- `TargetsWidget` writes `"Clearer Targets Left: N"` and
  `"Targets Dyed: D / T"` into its labels.
- `GameEndWidget` re-emits its restart button's clicks as
  `on_restart_button_clicked`.
- `GameplayHUD`: `begin_play()` adds the targets widget;
  `set_clearer_targets_left`, `set_targets_dyed` and `set_targets_amount`
  update it; `add_game_end_widget()` shows the end menu and forwards
  restart clicks as `on_game_end_menu_restart_button_clicked`.

### `dyegame.player_controller`

- `InputMode`: `GAME_ONLY` or `UI_ONLY`.
- `GameplayPlayerController`: `begin_play(timers)` enters gameplay input
  and schedules `init_hud` for the next timer tick, which copies the game
  mode's counters to the HUD and keeps them updated. When the game ends it
  shows the end menu, switches to UI input with the mouse cursor shown, and
  emits `on_restart_level` when restart is clicked.

## Example

```python
from dyegame.game_mode import GameplayGameMode
from dyegame.physics import TimerManager
from dyegame.player_marker import PlayerMarker
from dyegame.targets import ClearerTarget, ClearTarget

timers = TimerManager()
clear = ClearTarget()
clearer = ClearerTarget()
for target in (clear, clearer):
    target.begin_play()

mode = GameplayGameMode()
mode.begin_play([clear, clearer])

marker = PlayerMarker()
marker.begin_play(timers)

marker.on_overlap(clear)    # the clear target is dyed
marker.on_overlap(clearer)  # the clearer expires and counts as dyed
print(mode.is_win_condition_met())  # True
```

## What the package does not do

- It draws nothing and reads no keyboard, mouse or gamepad; widgets only
  hold text and buttons only fire when `click()` is called.
- It does not integrate motion: forces accumulate on `PhysicsBody.force`
  and nothing moves bodies or detects overlaps. The caller decides when
  objects touch and calls `on_overlap`.
- It does not restart a level; `on_restart_level` is only a signal for the
  caller to act on.