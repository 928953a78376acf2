# raygame

The rendering and client-side logic of a small first-person raycasting
shooter, in pure Python. It draws into a plain RGBA pixel buffer and
describes its HUD and minimap overlays as simple shapes, so any window or
image library can display the result.

## What it contains

- `raygame.pixels.Pixels`: a column-major RGBA buffer (`width` x `height`,
  cleared to opaque black). `set_color`, `get_color`, `blend_color`,
  `clear`, `clear_with(f(x, y))`, `clear_with_column(f(y))`, mutable
  per-column access with `column(x)` and `columns()`, `dimensions()` and
  `to_bytes()`, which returns the RGBA bytes column by column.
  `blend_color_u8(back, front)` keeps `back` when `front` is fully
  transparent and otherwise returns `front`.
- `raygame.helpers`: `as_arrays(data, length)` splits a flat sequence into
  tuples; `flat_arrays(arrays)` flattens them again.
- `raygame.sampler.TextureSampler`: an RGBA texture built from a Pillow
  image or encoded bytes (`from_bytes`), or cut from a tile atlas
  (`from_tiles(tiles_x, tiles_y, gap, data)`, row by row). It samples by uv
  (`sample`), by pixel (`sample_exact`) and by whole column
  (`sample_column`, `sample_column_exact`), wrapping at the edges.
  `dominant` holds a dominant colour, which `set_dominant` can override;
  `original_image()` rebuilds a Pillow image.
- `raygame.animated_texture`: `AnimatedTexture(sprite_sheet)` with named
  animations added by `register_state(name, frame_time, frames)`, where each
  frame lists sprite indices by viewing direction. `get_state(name)` returns
  an `AnimatedTextureState`, whose `get_sprite(look_angle, dt)` advances time
  and picks the sprite for the angle; `set_state(name, speed_mult)` switches
  animation. Unknown names raise `KeyError`.
- `raygame.perspective.Perspective`: the vertical screen offset and horizon
  height of a projected column, with `from_angle`, `offset_camera` and
  `offset_subject`.
- `raygame.ray_gen.RayGenerator`: one ray direction per screen column
  (`from_fov` spreads them evenly by angle instead), and `rotate(v, by)`.
- `raygame.draw_column`: `calculate_perspective`, `draw_texture_column` and
  `draw_color_column` project a wall or sprite column into a pixel column.
- `raygame.raycaster`: `cast_ray(start, direction, grid)` returns a `Hit`
  (distance, position, cell, `HitSide`) or `None` beyond a view distance of
  20 cells. `RayCaster(width, height, fov)` draws walls with `draw_walls`,
  recording `depth_map` and `minimap_rays`, then draws `Sprite`s from far to
  near with `draw_sprites`, hiding them where walls are nearer. Walls struck
  on their left or right face are drawn darker. `draw_sprites` raises
  `RuntimeError` if `draw_walls` has not run.
- `raygame.input.InputHandler`: turns `Key` and `MouseButton` events and
  mouse movement into an `InputState` (movement, shooting, look angle) plus
  an up/down look angle. `take_state()` returns the state only when it has
  changed; `tick(dt, pressed_keys)` applies arrow-key look.
- `raygame.gameui`: `GameUI(GameUiState(...))` lays out the health bar
  (`draw_health`) and weapon name, ammo count and ammo bars
  (`draw_weapon_stats`) as `Rect` and `Label` values. `health_color` goes
  from red through yellow to green.
- `raygame.minimap.Minimap`: renders the grid into a `Pixels` image
  (`render_map`), and gives the border rectangle and image position
  (`draw`), the vision polygon (`vision_polygon`) and entity markers
  (`entity_rect`).
- `raygame.errorwindow.ErrorWindows`: closable `ErrorWindow`s with
  increasing ids; `remove_closed()` drops the closed ones.

## Maps

Anything with integer `width` and `height` attributes and a
`cell(x, y)` method can serve as a map. `cell` returns `None` for empty
space, an RGBA tuple for a flat-coloured wall, or a `TextureSampler` for a
textured wall.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Example

```python
from raygame.pixels import Pixels
from raygame.raycaster import RayCaster


class Grid:
    def __init__(self, rows):
        self.rows = rows
        self.width = len(rows[0])
        self.height = len(rows)

    def cell(self, x, y):
        return self.rows[y][x]


WALL = (200, 50, 50, 255)
grid = Grid([
    [WALL, WALL, WALL, WALL, WALL],
    [WALL, None, None, None, WALL],
    [WALL, None, None, None, WALL],
    [WALL, WALL, WALL, WALL, WALL],
])

width, height = 320, 200
pixels = Pixels(width, height)
caster = RayCaster(width, height, 70.0)
perspective = caster.perspective(0.0, 0.65, 0.0)

caster.draw_walls(pixels, (2.5, 1.5), (1.0, 0.0), perspective, grid)

frame = pixels.to_bytes()  # RGBA bytes, column by column
```

## What it does not do

raygame has no window, event loop, networking, game rules or command-line
program. It does not open a display, read the keyboard or mouse itself, or
draw text and shapes: the HUD and minimap come back as `Rect`, `Label` and
point values for the caller to draw, and the frame comes back as pixels.