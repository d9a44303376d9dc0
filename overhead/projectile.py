"""Bullets with a short muzzle flash."""

from __future__ import annotations

import enum

from overhead.ppu import SCREEN_HEIGHT
from overhead.rect import Rect
from overhead.sprite_group import SpriteGroup

EXPLOSION_TILE = (0, 5)
PROJECTILE_TILE = (13, 1)
FLASH_TIME = 0.1
_PARKED = (0.0, float(SCREEN_HEIGHT))


class Layer(enum.Enum):
    """Collision layers; objects only collide across different layers."""

    DISABLED = "disabled"
    PLAYER = "player"
    ENEMY = "enemy"


class Projectile:
    """A bullet that flies in a straight line until it hits or leaves the screen."""

    def __init__(self, explosion_group: SpriteGroup, projectile_group: SpriteGroup) -> None:
        self._explosion = explosion_group
        self._projectile = projectile_group
        self.layer = Layer.DISABLED
        self.position: tuple[float, float] = _PARKED
        self.direction: tuple[float, float] = (0.0, 0.0)
        self.speed = 0.0
        self.is_firing = False
        self._should_die = False
        self._explosion_over = True
        self._time_since_fire = 0.0
        self._explosion.draw_at(_PARKED)

    def rect(self) -> Rect:
        """The 8x8 collision box at the bullet's position."""
        x, y = self.position
        return Rect((x, y), (x + 8.0, y + 8.0))

    def fire_at(
        self,
        position: tuple[float, float],
        direction: tuple[float, float],
        speed: float,
        layer: Layer,
    ) -> None:
        """Launch the bullet from ``position`` and show the muzzle flash there."""
        self._explosion_over = False
        self._time_since_fire = 0.0
        self._should_die = False
        self.layer = layer
        self.is_firing = True
        self.position = (float(position[0]), float(position[1]))
        self.speed = float(speed)
        self.direction = (float(direction[0]), float(direction[1]))

        self._projectile.draw_at(self.position)
        self._explosion.draw_at(self.position)
        self._explosion.set_offset(1 if self.direction[1] < 0 else 0)

    def tick(self, elapsed: float) -> None:
        """Move the bullet, retire the flash, and park the bullet when done."""
        if self.is_firing:
            x, y = self.position
            dx, dy = self.direction
            self.position = (x + dx * self.speed * elapsed, y + dy * self.speed * elapsed)

        if not self._explosion_over and self._time_since_fire > FLASH_TIME:
            self._explosion.draw_at(_PARKED)
            self._explosion_over = True
        elif not self._explosion_over:
            self._time_since_fire += elapsed

        y = self.position[1]
        if self._should_die or y < 0 or y > SCREEN_HEIGHT:
            self.is_firing = False
            self.position = _PARKED

        self._projectile.draw_at(self.position)

    def on_collision_enter(self, other_layer: Layer) -> None:
        """Mark the bullet for removal if it touched something on another live layer."""
        if other_layer is not Layer.DISABLED and other_layer is not self.layer:
            self._should_die = True