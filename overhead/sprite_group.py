"""Groups of hardware sprites that move and change appearance together."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from overhead.ppu import SCREEN_HEIGHT, TILE_SIZE, Sprite

TileCoord = tuple[int, int]
TileInfo = tuple[int, int]
Tilemap = Sequence[Sequence[TileInfo]]


@dataclass
class _Member:
    sprite: Sprite
    base_index: int
    base_attributes: int


class SpriteGroup:
    """Several sprites laid out on an 8-pixel grid as one picture.

    Each tile coordinate ``(x, y)`` is looked up as ``tilemap[x][y]``, which
    gives the ``(tile index, attributes)`` the sprite starts with.  Sprites are
    taken in order from ``sprite_source``.
    """

    def __init__(
        self,
        tile_coords: Sequence[TileCoord],
        anchor_point: TileCoord,
        sprite_source: Iterator[Sprite],
        tilemap: Tilemap,
    ) -> None:
        self.tile_coords: list[TileCoord] = [(int(x), int(y)) for x, y in tile_coords]
        self.anchor_point: TileCoord = (int(anchor_point[0]), int(anchor_point[1]))
        self._offset = 0
        self._members: list[_Member] = []
        for x, y in self.tile_coords:
            try:
                sprite = next(sprite_source)
            except StopIteration:
                raise ValueError("no sprites left for this group") from None
            index, attributes = tilemap[x][y]
            sprite.index = index
            sprite.attributes = attributes
            self._members.append(_Member(sprite, index & 0xFF, attributes & 0xFF))

    @property
    def sprites(self) -> list[Sprite]:
        """The sprites in this group, in tile-coordinate order."""
        return [member.sprite for member in self._members]

    @property
    def offset(self) -> int:
        """The amount currently added to every sprite's tile index."""
        return self._offset

    def override_palette(self, palette: int) -> None:
        """Replace the attribute byte of every sprite with ``palette``."""
        for member in self._members:
            member.sprite.attributes = palette

    def reset_palette(self) -> None:
        """Restore every sprite's attribute byte from the tilemap."""
        for member in self._members:
            member.sprite.attributes = member.base_attributes

    def draw_at(self, position: tuple[float, float]) -> None:
        """Place the group so its first tile's lower-left corner is at ``position``."""
        if not self._members:
            return
        base_x = int(position[0]) & 0xFF
        base_y = int(position[1]) & 0xFF
        first_x, first_y = self.tile_coords[0]
        for member, (x, y) in zip(self._members, self.tile_coords):
            member.sprite.x = base_x + TILE_SIZE * (x - first_x)
            member.sprite.y = base_y + TILE_SIZE * (y - first_y)

    def set_offset(self, offset: int) -> None:
        """Show the tiles ``offset`` places after the group's own tiles."""
        offset &= 0xFF
        if offset == self._offset:
            return
        self._offset = offset
        for member in self._members:
            member.sprite.index = member.base_index + offset

    def hide(self) -> None:
        """Move every sprite off the bottom-left of the visible screen."""
        for member in self._members:
            member.sprite.x = 0
            member.sprite.y = SCREEN_HEIGHT