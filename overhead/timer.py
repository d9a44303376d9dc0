"""Countdown timer drawn as two digit sprites."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Optional

from overhead.sprite_group import SpriteGroup

DIGIT_TILE = (6, 2)
START_TIME = 99.0
DIGIT_SPACING = 10


class Timer:
    """Counts down from 99 seconds and shows whole seconds as two digits.

    The digit groups should show the tile for 0; further digits follow it in
    the tile table.  ``on_expire`` is called when the time runs out, and no
    ticking happens while ``is_game_over`` returns true.
    """

    def __init__(
        self,
        position: tuple[float, float],
        tens_digit: SpriteGroup,
        ones_digit: SpriteGroup,
        on_expire: Optional[Callable[[], None]] = None,
        is_game_over: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.position = (float(position[0]), float(position[1]))
        self._total_time = START_TIME
        self._tens = tens_digit
        self._ones = ones_digit
        self._on_expire = on_expire
        self._is_game_over = is_game_over

    def tick(self, elapsed: float) -> None:
        """Advance the countdown by ``elapsed`` seconds and redraw the digits."""
        if self._is_game_over is not None and self._is_game_over():
            return

        self._total_time -= elapsed
        if self._total_time <= 0.0:
            if self._on_expire is not None:
                self._on_expire()
            self._total_time = 0.0

        seconds = int(math.floor(self._total_time))
        self._ones.set_offset(seconds % 10)
        self._tens.set_offset(seconds // 10)

        x, y = self.position
        self._tens.draw_at((x, y))
        self._ones.draw_at((x + DIGIT_SPACING, y))

    def time_remaining(self) -> float:
        """Seconds left on the clock."""
        return self._total_time