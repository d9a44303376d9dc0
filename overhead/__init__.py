"""Picture processor, sprite groups, timer, projectiles and file helpers for an overhead shooter."""

__version__ = "0.1.0"