# overhead

Building blocks for a small overhead scrolling shooter. Everything on
screen goes through a limited, NES-style picture processor.

## Modules

- `overhead.ppu`: `PPU466` holds the picture state. It has a 256x240
  screen with its origin in the lower left, and a 64x60 tile background
  (`background`, `background_position`) that wraps as it scrolls. There
  are 256 two-bit tiles (`Tile`, with `Tile.color_index(x, y)`), eight
  four-colour palettes (`palette_table`) and 64 hardware sprites
  (`Sprite`, whose fields wrap as unsigned bytes). Its methods give what
  a renderer needs:
  - `build_triangle_strip()` returns a list of `Vertex`. Sprites behind
    the background come first, then the background, then sprites in
    front. Each tile is six vertices.
  - `tile_texture()` returns 128x128 colour indices as bytes.
  - `palette_texture()` returns the palettes as packed RGBA bytes.
  - `viewport(drawable_size)` returns an integer-scaled, centred
    `(x, y, width, height)`.
- `overhead.sprite_group`: `SpriteGroup` takes sprites from an iterator
  and tile settings from a `tilemap[x][y]` of `(index, attributes)`.
  It lays the sprites out on an 8-pixel grid. Its methods are
  `draw_at`, `set_offset`, `override_palette`, `reset_palette` and
  `hide`.
- `overhead.timer`: `Timer` counts down from 99 seconds and shows whole
  seconds on two digit groups. It calls `on_expire` when the time
  reaches zero, and it stops ticking while `is_game_over()` is true.
- `overhead.projectile`: `Projectile` is a bullet with a 0.1-second
  muzzle flash. It is parked off-screen once it hits something on
  another live `Layer` or leaves the screen vertically.
- `overhead.rect`: `Rect` is a frozen rectangle with `center`, `width`
  and `height`.
- `overhead.util`: `init_random`, `random_up_to(n)` (raises `ValueError`
  when `n <= 0`), `sample_unit` and `sample_unit_circle`.
- `overhead.chunk`: `read_chunk` and `write_chunk` handle fixed-size
  records described by a `struct` format. The records follow a four-byte
  magic tag and a native-endian byte count. Bad input raises
  `ChunkError`.
- `overhead.png`: `load_png(filename, origin)` returns
  `((width, height), pixels)` as RGBA tuples. `save_png(filename, size,
  data, origin)` writes them. `OriginLocation` chooses whether the first
  row is the bottom or the top.
- `overhead.data_path`: `data_path(suffix)` joins `suffix` onto the
  directory of the running program.

## Installing

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
from overhead.ppu import PPU466
from overhead.sprite_group import SpriteGroup

ppu = PPU466()
tilemap = [[(x + 16 * y, 0) for y in range(16)] for x in range(16)]
sprites = iter(ppu.sprites)

ship = SpriteGroup([(0, 0), (1, 0)], (0, 0), sprites, tilemap)
ship.draw_at((100, 50))

ppu.background_position = (0, -40)
strip = ppu.build_triangle_strip()
tiles = ppu.tile_texture()
palettes = ppu.palette_texture()
x, y, w, h = ppu.viewport((1024, 960))
```

## What it does not do

The package describes what to draw; it does not draw it. It opens no
window, makes no graphics calls and reads no keyboard input. There is no
game loop and no command to start a game. It has no player plane, enemy
planes or explosion effects. A program that uses it supplies those
parts, together with a renderer for the strip and the textures.