# penguinroom

The state and rules behind a penguin chat room, as plain Python objects. The package has no dependencies outside the standard library.

## What is in it

- `penguinroom.constants` holds the shared enumerations: `Direction`, `State`, `Badge`, `ClothingType`, `InventorySort`, `CanvasAction`, `VerticalAlignment`, `HorizontalAlignment`, `BackgroundColor` and `CellProperties`. It also holds `SPRITES_MAPPED`, which maps atlas sprite numbers 1 to 38 to a `SpriteInfo`. Two functions go with it:
  - `sprite_id_for(direction, state)` returns the lowest matching sprite number, or `None`.
  - `state_from_string(text)` reads a state name without regard to case. An unknown name gives `State.UNUSED`.
- `penguinroom.items` provides `ItemCatalog`, with `exists`, `item_type`, `cost`, `is_bait` and `is_patched`. `item_type` and `cost` give `-1` for an unknown item. `load_items(path)` reads a JSON object keyed by item id. A file that is missing, unreadable or not valid JSON gives an empty catalogue.
- `penguinroom.localization` provides `LocalizationManager(locale, directory)`, which reads `<directory>/locale_<code>.json`.
  - Nested objects become dotted keys, built by `flatten_strings`.
  - `text(key)` returns `"Undefined"` when a key is missing or its string is empty.
  - `load()` raises `LocalizationError` when the file is missing, unreadable or not valid JSON.
- `penguinroom.clothes` provides `Clothes`, which records the item id worn in each slot. `wear(slot, item_id)` stores the id as a 16-bit signed value. `item_for(slot)` reads it back.
- `penguinroom.workers` covers background work:
  - `LoadingProgress` is a loading bar that fills one step at a time.
  - `move_towards(position, destination, velocity)` moves one step along each axis and never overshoots.
  - `MoveWorker` walks sprites until they arrive, then calls each sprite's `reset()` and runs its `on_finished` callbacks.
  - `WorkerPool` is a thread pool, usable as a context manager, that owns the shared move worker.
- `penguinroom.sprite_base` provides `PenguinSpriteBase`, a sprite that chooses its atlas picture from a direction and a state. Its children follow the picture chosen for the parent. `SpriteClothing` is a worn item.
- `penguinroom.facing` provides three functions:
  - `facing_angle(dx, dy)` gives the angle of an offset.
  - `direction_towards(dx, dy)` gives the nearest of the eight directions.
  - `clamp_to_scene(point, width, height)` keeps a point inside the scene.
- `penguinroom.sprite` provides `PenguinSprite`:
  - `look_at(point)` turns the penguin toward a point while it follows the pointer.
  - `press_at(point, scene_width, scene_height)` starts a walk. When the sprite was given a `WorkerPool`, the walk runs on that pool's move worker.
  - `handle_key(key)`: W waves, D dances, and I/K/J/L sit facing north, south, west or east. Pressing the same sit key again stands the penguin up. Keys are ignored while it walks.
  - `wear(slot, item_id)` puts on a clothing item in the head, face, neck, body, hand or feet slot.
- `penguinroom.paper` handles the paper doll shown on a player card:
  - `color_for_id(color_id)` gives the fill colour for penguin colours 1 to 16.
  - `recolor_svg(svg, color)` recolours the `penguin`/`body` group of an SVG.
  - `item_offset(svg)` reads an item's `matrix(...)` translation.
  - `PenguinPaper` has `change_color`, `set_color`, `wear(slot, item_id, svg)` and `remove(slot)`.
- `penguinroom.hud` holds the state of the on-screen widgets:
  - `Notification` is a badge that shows 0 to 99 and is hidden at 0.
  - `ChatBubble` picks its size with `bubble_layout` and hides itself after five seconds.
  - `ChatHistory` keeps the last 15 lines, with the newest at the bottom, and highlights a line on hover.
- `penguinroom.player` provides `Player`, which has friend and ignore lists, owned items, a badge, and a penguin sprite and paper doll that are created on first use. `PlayerFactory` creates and destroys players and finds them by username (ignoring case) or by id.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from penguinroom.constants import Direction, State, sprite_id_for
from penguinroom.player import PlayerFactory

factory = PlayerFactory()
player = factory.create_player()
player.username = "Username1"
player.add_friend(2)

assert factory.by_username("username1") is player
assert sprite_id_for(Direction.S, State.WALKING) == 9

penguin = player.sprite()
penguin.handle_key("K")          # sit facing south
assert penguin.state is State.SITTING
```

## What it does not do

This is a model only. It does not draw anything, play sound, talk to a server or store anything. It also has no command to run. The SVG drawings, item catalogue and locale files are not included; you supply them yourself. Sprite positions and frames are plain values, for your own renderer to read.