# Pushin' Boxes

A box-pushing puzzle game. Walk the character around a 10×10 map, push
every box onto a zone, and try to beat your best number of moves and time.

## Features

- Sixteen stock levels, unlocked one after another as you win them.
- A level editor: paint floor, void, zones, boxes on floor, boxes on zones
  and the character's start, playtest the level, and save it under a name
  as a custom level.
- Up to sixteen custom levels. When sixteen exist, opening the editor shows
  a notice and leads to the custom level selection instead.
- Custom levels can be played and deleted from the selection screen.
- Per-level records (moves and time) and the volume setting are kept in a
  save file.

## Installing

```
pip install .
```

## Playing

```
pushin-boxes
pushin-boxes --assets path/to/assets
```

The game opens a fullscreen window with pygame. If no audio device can be
opened, it runs without sound.

### Assets

The package holds the game's logic only; it ships no images, sounds, fonts
or levels. They are read from an assets directory (`assets` in the current
directory unless `--assets` names another one) laid out as:

- `levels/stock/1.lvl` … `levels/stock/16.lvl`: the stock levels (RON text);
- `levels/custom/<uuid>.lvl`: custom levels, written by the game;
- `game.dat`: the save file, written by the game; a missing or unreadable
  one starts fresh progress;
- `images/entities/*.png`, `images/brushes/*.png`,
  `images/character/spritesheet.png`, `images/instructions.png`;
- `sounds/sfx/*.wav`, `sounds/music/*.wav`;
- `fonts/upheaval/upheaval.ttf` (pygame's default font is used if it is
  missing).

If the stock levels cannot be read, the command stops with
`cannot load the game assets: …`.

### Controls

| Key          | Action                                                  |
|--------------|---------------------------------------------------------|
| Arrow keys   | Move / change selection / adjust volume (Options)       |
| SPACE        | Select; playtest the level in the editor                |
| ENTER        | Switch stock/custom selection; cycle the editor brush   |
| Z            | Undo a move (up to four per attempt)                    |
| F5           | Reload the level (only once something has changed)      |
| DELETE       | Remove the selected custom level                        |
| ESC          | Go back; quit from the title screen                     |

The volume moves in steps of 25 % and wraps around at 0 % and 100 %; it is
saved when leaving the Options screen with ESC.

While naming a passed level, letters and spaces type the name (up to 16
characters), BACKSPACE erases, and ENTER saves it. Names are stored in lower
case.

## A valid custom level

A level can be playtested once it has at least one zone and exactly as many
boxes on floor as zones. A level has to be passed in playtest before it can
be saved.

## Using the modules

The game logic runs without a window, which is how the tests drive it:

- `pushin_boxes.context.load_context(assets_dir, audio=None)` loads the save
  file and levels into a `GameContext`; `SilentAudio` records the sounds it
  is asked to play.
- `pushin_boxes.app.App(ctx)` routes keys with `dispatch_key(key)` and
  advances time with `step(delta)`; `run()` opens the window.
- `pushin_boxes.ron` reads and writes RON text (`loads`, `dumps`), used by
  `levelstate.parse_level_state` / `LevelState.to_ron` for level files and
  `savefile.parse_save_file` / `SaveFile.to_ron` for the save file.
- `pushin_boxes.scenes.playing.move_character(level, direction)` applies one
  move to a `Level` and returns the sounds it makes.

## Running the tests

```
pip install ".[test]"
pytest
```