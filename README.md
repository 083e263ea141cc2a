# cubcaster

cubcaster is a small first-person raycaster. It reads a `.cub` scene file and validates it. If the scene is valid, it opens a 1600×800 pygame window where you can walk through the maze. The walls are drawn with textures.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
cubcaster maps/demo.cub
```

The command takes exactly one argument, which is the scene file.

- The extension check uses the first dot in the argument. Everything after that dot must be exactly `cub`. Because of this, a path that starts with a dot, such as `./demo.cub`, is rejected.
- If the argument is missing, the program prints a usage error and exits with status 0.
- If the extension is wrong, or the scene fails validation, the program prints the error to standard error and exits with status 1. The same happens if a texture cannot be loaded.

## Controls

| Key          | Action                            |
|--------------|-----------------------------------|
| W / S        | move forward / back               |
| A / D        | strafe left / right               |
| Left / Right | turn the camera (0.02 rad per frame) |
| Esc          | quit                              |

- Closing the window also quits.
- The game runs at up to 60 frames per second.
- Movement slides along walls: each axis is checked against the map separately.

## Scene file format

A scene file looks like this:

```
NO textures/north.xpm
SO textures/south.xpm
WE textures/west.xpm
EA textures/east.xpm
F 220,100,0
C 225,30,0
111111
100101
1010N1
111111
```

### Header

- `NO`, `SO`, `WE` and `EA` give the wall textures. Each path must end in `.xpm`. The images are loaded with `pygame.image.load`.
- `F` (floor) and `C` (ceiling) give colours as `R,G,B`. Each component is a number from 0 to 255.
- Identifier lines must not be indented. The identifier must be followed by a space or a tab, and then a value.
- Exactly four textures and two colours are required. If there are more, the file is reported as having repeated elements. If there are fewer, it is reported as having missing elements.
- The first line of the file must not be blank.
- Lines that are not identifier lines may contain only map characters and whitespace.

### Map

- The map starts at the first map line after all six identifiers have been read.
- Once the map has started, every later line must also be a map line. This means a blank line after the map is an error.
- The map may contain `0` (floor), `1` (wall) and spaces. It must also contain exactly one player marker: `N`, `S`, `E` or `W`. The marker sets the direction the player faces at the start.
- The first and last rows may hold only walls and whitespace.
- Every other row must begin and end (ignoring whitespace) with a wall.
- A floor cell or the player cell must not touch a space, horizontally or vertically.

## Using it as a library

```python
from cubcaster.errors import CubError
from cubcaster.loader import load_scene

try:
    scene = load_scene("maps/demo.cub")
except CubError as err:
    print(err)  # "Error\n<message>" plus an optional detail line
else:
    print(scene.height, scene.player_x, scene.player_y, scene.orientation)
    print(scene.config.textures, scene.config.ceiling_color(), scene.config.floor_color())
```

### Modules

- `cubcaster.errors`: `CubError` and the message texts.
- `cubcaster.lines`: line and character helpers, such as `is_identifier_line`, `has_foreign_chars`, `has_extension` and `read_lines`.
- `cubcaster.scene`: `SceneConfig`, which collects textures and colours line by line. It also has `is_rgb` and `extract_value`. `ceiling_color()` and `floor_color()` return the colour packed as `0xRRGGBB`.
- `cubcaster.mapcheck`: map checks. These are `is_map_line`, `check_walls`, `check_interior_spaces`, `count_players` and `find_player`.
- `cubcaster.loader`: `precheck_file`, `load_scene` and the `Scene` dataclass.
- `cubcaster.raycast`:
  - `Player`, including `Player.from_orientation`.
  - `cast_ray`, which returns a `RayHit`.
  - `select_texture`.
  - `render_frame`, which draws into a `(height, width)` NumPy array of `0xRRGGBB` pixels.
- `cubcaster.movement`: the `Key` codes, `move_player`, `rotate_camera` and `KeyState`.
- `cubcaster.app`: `load_texture`, `run` and `main`, the command entry point.

## What it does not do

The game is limited to walking and turning inside a static textured maze. It has:

- no sprites, doors or enemies;
- no minimap;
- no mouse look;
- no saving or other persistent state.