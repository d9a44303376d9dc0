"""Locate data files that ship beside the running program."""

from __future__ import annotations

import os
import sys
from functools import lru_cache


@lru_cache(maxsize=None)
def _program_dir() -> str:
    program = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    return os.path.dirname(os.path.abspath(program))


def data_path(suffix: str) -> str:
    """Return ``suffix`` joined onto the running program's directory."""
    return _program_dir() + "/" + suffix