"""A small tile-and-sprite picture processor loosely modelled on the NES PPU.

The screen is 256x240 pixels with the origin in the lower left.  Drawing is
described as a triangle strip of textured quads plus two lookup textures: a
128x128 table of 2-bit colour indices and an 8x4 table of RGBA palette colours.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

Color = tuple[int, int, int, int]
Palette = list[Color]

SCREEN_WIDTH = 256
SCREEN_HEIGHT = 240
BACKGROUND_WIDTH = 64
BACKGROUND_HEIGHT = 60
TILE_SIZE = 8
TILE_TEXTURE_SIZE = 128
PALETTE_COUNT = 8
TILE_COUNT = 16 * 16
SPRITE_COUNT = 64

PRIORITY_BIT = 0x80
PALETTE_MASK = 0x07

_BACKGROUND_WIDTH_PIXELS = BACKGROUND_WIDTH * TILE_SIZE
_BACKGROUND_HEIGHT_PIXELS = BACKGROUND_HEIGHT * TILE_SIZE

_DEFAULT_PALETTE: tuple[Color, ...] = (
    (0x00, 0x00, 0x00, 0x00),
    (0x44, 0x44, 0x44, 0xFF),
    (0x99, 0x99, 0x99, 0xFF),
    (0xFF, 0xFF, 0xFF, 0xFF),
)


@dataclass
class Sprite:
    """One hardware sprite; every field is an unsigned byte and wraps as one.

    ``y >= 240`` places the sprite off-screen.  Bits 0-2 of ``attributes``
    choose the palette; bit 7 puts the sprite behind the background.
    """

    x: int = 0
    y: int = SCREEN_HEIGHT
    index: int = 0
    attributes: int = 0

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, int(value) & 0xFF)

    @property
    def palette(self) -> int:
        """The palette index held in the attribute bits."""
        return self.attributes & PALETTE_MASK

    @property
    def behind(self) -> bool:
        """True if the priority bit puts this sprite behind the background."""
        return bool(self.attributes & PRIORITY_BIT)


@dataclass
class Tile:
    """An 8x8 tile stored as two bit planes, rows from bottom to top.

    Bit ``x`` of row ``y`` in ``bit0``/``bit1`` gives bit 0/1 of the colour
    index of pixel ``(x, y)``.
    """

    bit0: list[int]
    bit1: list[int]

    def __post_init__(self) -> None:
        if len(self.bit0) != TILE_SIZE or len(self.bit1) != TILE_SIZE:
            raise ValueError("each bit plane must have eight rows")

    def color_index(self, x: int, y: int) -> int:
        """Return the 2-bit colour index of pixel ``(x, y)``."""
        if not (0 <= x < TILE_SIZE and 0 <= y < TILE_SIZE):
            raise IndexError("pixel outside the tile")
        return ((self.bit0[y] >> x) & 1) | (((self.bit1[y] >> x) & 1) << 1)


@dataclass(frozen=True)
class Vertex:
    """One vertex of the tile triangle strip."""

    position: tuple[int, int]
    tile_coord: tuple[int, int]
    palette: int


def _default_tile() -> Tile:
    return Tile(bit0=[0xF0] * 8, bit1=[0x00] * 4 + [0xFF] * 4)


def _default_background() -> list[int]:
    return [
        ((i % 8) << 8) | (i % PALETTE_COUNT)
        for i in range(BACKGROUND_WIDTH * BACKGROUND_HEIGHT)
    ]


def _wrap_nonpositive(value: int, period: int) -> int:
    """Reduce ``value`` into ``(-period, 0]``."""
    return -((-value) % period)


@dataclass
class PPU466:
    """Picture-processor state: palettes, tiles, background and sprites."""

    SCREEN_WIDTH = SCREEN_WIDTH
    SCREEN_HEIGHT = SCREEN_HEIGHT
    BACKGROUND_WIDTH = BACKGROUND_WIDTH
    BACKGROUND_HEIGHT = BACKGROUND_HEIGHT

    background_color: tuple[int, int, int] = (0x00, 0x00, 0x00)
    palette_table: list[Palette] = field(
        default_factory=lambda: [list(_DEFAULT_PALETTE) for _ in range(PALETTE_COUNT)]
    )
    tile_table: list[Tile] = field(
        default_factory=lambda: [_default_tile() for _ in range(TILE_COUNT)]
    )
    background: list[int] = field(default_factory=_default_background)
    background_position: tuple[int, int] = (0, 0)
    sprites: list[Sprite] = field(
        default_factory=lambda: [Sprite() for _ in range(SPRITE_COUNT)]
    )

    def build_triangle_strip(self) -> list[Vertex]:
        """Return the strip: behind sprites, the background, then front sprites.

        Each tile becomes six vertices, a quad bracketed by degenerate
        triangles.  The background is drawn as four screen-sized chunks placed
        so that it tiles endlessly around the screen.
        """
        strip: list[Vertex] = []

        def draw_tile(lower_left: tuple[int, int], tile_index: int, palette: int) -> None:
            lx, ly = lower_left
            tx = (tile_index % 16) * TILE_SIZE
            ty = (tile_index // 16) * TILE_SIZE
            first = Vertex((lx, ly), (tx, ty), palette)
            last = Vertex((lx + 8, ly + 8), (tx + 8, ty + 8), palette)
            strip.extend(
                (
                    first,
                    first,
                    Vertex((lx, ly + 8), (tx, ty + 8), palette),
                    Vertex((lx + 8, ly), (tx + 8, ty), palette),
                    last,
                    last,
                )
            )

        def draw_sprites(behind: bool) -> None:
            for sprite in self.sprites:
                if sprite.behind == behind:
                    draw_tile((sprite.x, sprite.y), sprite.index, sprite.palette)

        draw_sprites(behind=True)

        bx, by = self.background_position
        for chunk_y in (0, SCREEN_HEIGHT):
            for chunk_x in (0, SCREEN_WIDTH):
                px = _wrap_nonpositive(chunk_x + bx, _BACKGROUND_WIDTH_PIXELS)
                py = _wrap_nonpositive(chunk_y + by, _BACKGROUND_HEIGHT_PIXELS)
                if px + SCREEN_WIDTH <= 0:
                    px += _BACKGROUND_WIDTH_PIXELS
                if py + SCREEN_HEIGHT <= 0:
                    py += _BACKGROUND_HEIGHT_PIXELS

                ox = chunk_x // TILE_SIZE
                oy = chunk_y // TILE_SIZE
                for y in range(BACKGROUND_HEIGHT // 2):
                    row = BACKGROUND_WIDTH * (y + oy)
                    for x in range(BACKGROUND_WIDTH // 2):
                        info = self.background[row + x + ox]
                        draw_tile(
                            (px + TILE_SIZE * x, py + TILE_SIZE * y),
                            info & 0xFF,
                            (info >> 8) & PALETTE_MASK,
                        )

        draw_sprites(behind=False)
        return strip

    def tile_texture(self) -> bytes:
        """Return the 128x128 colour-index texture, one byte per pixel, rows bottom-up."""
        data = bytearray(TILE_TEXTURE_SIZE * TILE_TEXTURE_SIZE)
        for i, tile in enumerate(self.tile_table):
            ox = (i % 16) * TILE_SIZE
            oy = (i // 16) * TILE_SIZE
            for y in range(TILE_SIZE):
                base = TILE_TEXTURE_SIZE * (oy + y) + ox
                data[base : base + TILE_SIZE] = bytes(
                    tile.color_index(x, y) for x in range(TILE_SIZE)
                )
        return bytes(data)

    def palette_texture(self) -> bytes:
        """Return the palette table as packed RGBA bytes, one palette per row."""
        return bytes(
            channel
            for palette in self.palette_table
            for color in palette
            for channel in color
        )

    def viewport(self, drawable_size: tuple[int, int]) -> tuple[int, int, int, int]:
        """Return ``(x, y, width, height)`` of the screen inside the drawable.

        The screen is scaled by the largest whole factor that fits and
        centred; a drawable smaller than the screen is filled entirely.
        """
        width, height = drawable_size
        if width < SCREEN_WIDTH or height < SCREEN_HEIGHT:
            return (0, 0, width, height)
        scale = max(1, min(width // SCREEN_WIDTH, height // SCREEN_HEIGHT))
        return (
            (width - scale * SCREEN_WIDTH) // 2,
            (height - scale * SCREEN_HEIGHT) // 2,
            scale * SCREEN_WIDTH,
            scale * SCREEN_HEIGHT,
        )