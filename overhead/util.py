"""Random-number helpers shared by the game objects."""

from __future__ import annotations

import math
import random
import time

_rng = random.Random()


def init_random() -> None:
    """Seed the shared generator from the current time."""
    _rng.seed(int(time.time()) * 10000)


def random_up_to(n: int) -> int:
    """Return a random integer in ``[0, n)``."""
    if n <= 0:
        raise ValueError("n must be positive")
    return _rng.randrange(n)


def sample_unit() -> float:
    """Return a random float in ``[0, 1]``."""
    return _rng.uniform(0.0, 1.0)


def sample_unit_circle() -> tuple[float, float]:
    """Return a random point on the unit circle."""
    t = sample_unit() * math.pi * 2
    return (math.cos(t), math.sin(t))