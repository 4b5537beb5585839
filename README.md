# thomaslate

A small two-character platform game built on pygame. Thomas and Bob must both
reach a goal tile before the level's clock runs out. Touching fire or water
with the head sends a character back to the level start; landing on fire or
water with the feet sets off a burst of particles. The characters can stand on
each other's heads, and the view can follow one character or split the screen
between both.

## Installing

```
pip install .
```

## Playing

```
thomaslate --assets PATH
```

`--assets` names the directory holding the game's assets and defaults to the
current directory. The game opens full screen and expects:

- `graphics/background.png`, `graphics/tiles_sheet.png`,
  `graphics/thomas.png` and `graphics/bob.png`;
- `levels/level1.txt` to `levels/level4.txt`;
- `fonts/Roboto-Light.ttf` (pygame's default font is used if it is missing);
- `sound/fire1.wav`, `sound/fallinfire.wav`, `sound/fallinwater.wav`,
  `sound/jump.wav` and `sound/reachgoal.wav` (a missing sound, or no audio
  device, is replaced by silence).

Level files are text grids, one digit per tile: `0` empty, `1` solid block,
`2` fire, `3` water, `4` goal. Blank lines are ignored and every row must have
the same length. After level 4 the game starts again at level 1 with the time
limit cut by a tenth of its base value.

## Controls

| Key               | Action                                   |
|-------------------|------------------------------------------|
| Enter             | start the level                          |
| W / A / D         | Thomas: jump, left, right                |
| Up / Left / Right | Bob: jump, left, right                   |
| Q                 | switch which character the view follows  |
| E                 | toggle split screen                      |
| Escape            | quit (closing the window also quits)     |

## Using the pieces

The game rules run without a window and can be driven directly:

- `thomaslate.geometry`: `Vector2` and `Rect` (with `Rect.intersects`).
- `thomaslate.level`: `parse_level(text)` turns level text into a grid of
  `Tile` values, `build_quads(grid, tile_size)` makes textured quads, and
  `LevelManager(levels_dir)` loads the levels in turn with `next_level()`,
  exposing `start_position`, `time_limit`, `level_size` and `current_level`.
- `thomaslate.character`: `Thomas(size)` and `Bob(size)`, which take the set
  of held key names in `handle_input(pressed)` and move in `update(elapsed)`.
- `thomaslate.particles`: `ParticleSystem(count, rng)` with
  `emit_particles(position)` and `update(dt)`.
- `thomaslate.sound`: `SoundManager(load_sound)`, where `load_sound` returns
  an object with `play(loops=...)`, `stop()` and `set_volume()`, and
  `attenuated_volume(distance, min_distance, attenuation)`.
- `thomaslate.textures`: `TextureHolder(loader)`, a load-once cache.
- `thomaslate.hud`: `Hud`, the level, time and start-prompt texts.
- `thomaslate.world`: `World(level_manager, sounds, thomas, bob, particles)`;
  call `handle_key(key)` for key presses, `handle_input(pressed)` for held
  keys and `update(dt)` once per frame. `populate_emitters(grid, tile_size)`
  picks the fire tiles that fire sounds come from.
- `thomaslate.engine`: `Engine(asset_dir)` opens the window; `run()` runs the
  frame loop and `draw()` draws one frame. `main(argv)` is the command.

## What it does not do

The package ships no graphics, fonts, sounds or level files; they must be
supplied in the asset directory. The window always opens full screen at the
desktop resolution, and there is no menu, saved progress or score table.

## Running the tests

```
pip install .[test]
pytest
```