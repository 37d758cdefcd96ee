"""CRC-32 checksums as used by PNG chunks."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable

_POLYNOMIAL = 0xEDB88320
_MASK = 0xFFFFFFFF


@lru_cache(maxsize=None)
def _table() -> tuple[int, ...]:
    entries = []
    for n in range(256):
        c = n
        for _ in range(8):
            c = _POLYNOMIAL ^ (c >> 1) if c & 1 else c >> 1
        entries.append(c)
    return tuple(entries)


def make_crc_table() -> list[int]:
    """Return the 256-entry lookup table of CRCs of all 8-bit messages."""
    return list(_table())


def update_crc(crc: int, buf: bytes | bytearray | memoryview | Iterable[int]) -> int:
    """Update a running CRC with the bytes of ``buf``.

    The running value should start as all ones; the final checksum is its
    ones' complement (see :func:`crc`).
    """
    table = _table()
    c = crc & _MASK
    for byte in bytes(buf):
        c = table[(c ^ byte) & 0xFF] ^ (c >> 8)
    return c


def crc(buf: bytes | bytearray | memoryview | Iterable[int]) -> int:
    """Return the CRC-32 of ``buf``."""
    return update_crc(_MASK, buf) ^ _MASK