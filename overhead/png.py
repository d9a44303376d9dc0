"""Load and save RGBA PNG images as flat lists of pixels."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from PIL import Image, UnidentifiedImageError

Pixel = tuple[int, int, int, int]


class OriginLocation(enum.Enum):
    """Which image row comes first in the pixel list."""

    LOWER_LEFT = "lower_left"
    UPPER_LEFT = "upper_left"


def load_png(filename: str, origin: OriginLocation) -> tuple[tuple[int, int], list[Pixel]]:
    """Read a PNG file and return ``((width, height), pixels)`` as RGBA."""
    try:
        handle = open(filename, "rb")
    except OSError as exc:
        raise OSError(f"Failed to open PNG image file '{filename}'.") from exc
    with handle:
        try:
            with Image.open(handle) as image:
                image.load()
                rgba = image.convert("RGBA")
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            raise ValueError(f"Failed to read PNG image from '{filename}'.") from exc
    if origin is OriginLocation.LOWER_LEFT:
        rgba = rgba.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    raw = rgba.tobytes()
    pixels = [tuple(raw[i : i + 4]) for i in range(0, len(raw), 4)]
    return rgba.size, pixels


def save_png(
    filename: str,
    size: tuple[int, int],
    data: Sequence[Sequence[int]],
    origin: OriginLocation,
) -> None:
    """Write ``width * height`` RGBA pixels to ``filename`` as a PNG."""
    width, height = size
    if len(data) != width * height:
        raise ValueError("pixel count does not match image size")
    raw = bytes(channel for pixel in data for channel in pixel)
    if len(raw) != 4 * width * height:
        raise ValueError("every pixel must have four channels")
    image = Image.frombytes("RGBA", (width, height), raw)
    if origin is OriginLocation.LOWER_LEFT:
        image = image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    image.save(filename, format="PNG")