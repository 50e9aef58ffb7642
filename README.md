# cubraycaster

A small grid-based raycasting engine. It reads a `.cub` scene file that
names four wall textures, gives floor and ceiling colours and draws a map
of walls. Then it opens a 1820×920 window. The window shows a first-person
view and a minimap in the top-left corner.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Running

```
cubraycaster path/to/scene.cub
```

The command takes exactly one argument, the path to a scene file. With
any other number of arguments it does nothing and exits with status 0.

If the scene file is invalid or cannot be opened, the command prints
`Error` and a short reason to standard error. It then exits with status 1.

### Controls

| Key           | Action        |
|---------------|---------------|
| `W`           | move forward  |
| `S`           | move backward |
| `A`           | strafe left   |
| `D`           | strafe right  |
| `Left` / `Q`  | turn left     |
| `Right` / `E` | turn right    |
| `Escape`      | quit          |

Closing the window also quits.

Each key press moves the player 0.1 cells or turns it by 0.04 radians. The
player cannot step into a wall cell. Against a wall it slides along the
side that is free.

## Scene file format

A scene file must have the `.cub` extension. It starts with six header
lines, in any order. Blank lines between them are allowed.

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` give the wall texture paths.
  - Each of these lines must end in `.xpm` followed by a line break.
  - The path is whatever follows the first space on the line.
- `F` and `C`, each followed by a space, give the floor and ceiling colours.
  - Each colour is three comma-separated decimal values from 0 to 255.
- Each identifier may appear only once.
- Any other non-blank line in the header is an error.
- Only printable ASCII characters are allowed.

The map follows, after optional blank lines:

```
111111
100001
10N001
111111
```

- `1` is a wall and `0` is open floor. A space is empty space outside the
  map.
- Exactly one of `N`, `S`, `E` or `W` marks the starting cell of the player.
  The letter also gives the direction the player faces.
- The map must be closed. Every floor cell and the player cell needs a wall
  or a floor cell on all four sides. A space or the edge of the map does not
  count.
- No other characters are allowed. The map may not contain blank lines,
  including blank lines after its last row.

## Display

- **Walls** are drawn in flat colours: blue for wall cells, and half as
  bright on faces that run along the map rows.
- **Ceiling** uses the `C` colour from the scene file.
- **Floor** is always drawn dark grey (`0x222222`).
- **Minimap**: each map cell is a 10×10 pixel square. Walls are black, floor
  and the start cell are white, and the player is a red square.

## What it does not do

- The wall texture files named in the header are checked for their `.xpm`
  ending and stored. They are never loaded or drawn.
- The floor colour from the header is parsed and validated. It is not used
  when drawing.
- There is no frame-rate display.
- There is no mouse control.

## Using it as a library

```python
from cubraycaster.parsing import parse_map_file, MapParseError
from cubraycaster.game import Game
from cubraycaster.framebuffer import Framebuffer
from cubraycaster.raycast import render_scene
from cubraycaster.minimap import Key, apply_key, render_minimap

try:
    parsed = parse_map_file("scene.cub")
except MapParseError as exc:
    print(exc)
else:
    game = Game.from_parsed(parsed, 10)
    frame = Framebuffer()
    render_scene(game, frame)
    render_minimap(game, frame)
    apply_key(game, frame, Key.W)
    pixels = frame.to_rgb_bytes()
```

### Modules

- **`cubraycaster.parsing`** reads and validates scene files.
  - `parse_map_file` returns a `ParsedMap`. It holds a `MapData` (textures,
    colours, grid) and a `PlayerStart` (a `Direction`, plus row and column).
  - Every problem in a scene file raises `MapParseError`, a subclass of
    `ValueError`.
- **`cubraycaster.game`** holds the game state.
  - `Game` holds the map, the `Player`, the camera plane and the
    `MinimapState`.
  - Its methods are `move_front`, `move_back`, `strafe_left`,
    `strafe_right`, `rotate_left` and `rotate_right`.
- **`cubraycaster.framebuffer`** has `Framebuffer`, a 32-bit `0xRRGGBB`
  pixel buffer.
  - Its methods are `put_pixel`, `get_pixel`, `fill_column` and
    `to_rgb_bytes`.
- **`cubraycaster.raycast`** draws the first-person view.
  - `cast_ray` steps one ray through the grid and returns a `RayHit`.
  - `wall_span` gives the wall height and the drawn rows for a distance.
  - `render_scene` draws all screen columns.
- **`cubraycaster.minimap`** draws the minimap and handles keys.
  - `render_minimap` draws the minimap.
  - `apply_key` performs a `Key` action and redraws the view and minimap.
- **`cubraycaster.app`** runs the program.
  - `build_game` loads a scene and draws its first frame.
  - `run` opens the pygame window and runs the event loop.
  - `main` is the command-line entry point.
- **`cubraycaster.textutil`** has the small string helpers that the parser
  uses.