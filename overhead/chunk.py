"""Read and write arrays of fixed-size records preceded by a small header.

Layout: a four-byte magic tag, a four-byte native-endian byte count, then
that many bytes of records.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable
from typing import Any, BinaryIO

_HEADER = struct.Struct("=4sI")


class ChunkError(ValueError):
    """Raised when a chunk cannot be read."""


def _magic_bytes(magic: str | bytes) -> bytes:
    return magic.encode("latin-1") if isinstance(magic, str) else bytes(magic)


def read_chunk(stream: BinaryIO, magic: str | bytes, item_format: str) -> list[tuple[Any, ...]]:
    """Read one chunk from ``stream`` and return its records as tuples."""
    item = struct.Struct(item_format)
    header = stream.read(_HEADER.size)
    if len(header) != _HEADER.size:
        raise ChunkError("Failed to read chunk header")
    found_magic, size = _HEADER.unpack(header)
    if found_magic != _magic_bytes(magic):
        raise ChunkError("Unexpected magic number in chunk")
    if item.size == 0 or size % item.size != 0:
        raise ChunkError("Size of chunk not divisible by element size")
    payload = stream.read(size)
    if len(payload) != size:
        raise ChunkError("Failed to read chunk data.")
    return list(item.iter_unpack(payload))


def write_chunk(
    magic: str | bytes,
    items: Iterable[Any],
    stream: BinaryIO,
    item_format: str,
) -> None:
    """Write ``items`` to ``stream`` in the format :func:`read_chunk` reads.

    Each item is a tuple of fields, or a single value for one-field formats.
    """
    tag = _magic_bytes(magic)
    if len(tag) != 4:
        raise ValueError("magic must be exactly four bytes")
    item = struct.Struct(item_format)
    payload = b"".join(
        item.pack(*(value if isinstance(value, tuple) else (value,))) for value in items
    )
    stream.write(_HEADER.pack(tag, len(payload)))
    stream.write(payload)