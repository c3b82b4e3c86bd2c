"""Adler-32 and CRC-32 checksums, plus CRC table generation and formatting."""

from __future__ import annotations

from functools import lru_cache
from itertools import accumulate
from typing import Iterable, Optional

BASE = 65521
"""Largest prime smaller than 65536."""

NMAX = 5552
"""Largest block that can be summed before a modulo is needed in 32 bits."""

CRC_POLYNOMIAL = 0xEDB88320
_MASK32 = 0xFFFFFFFF


def adler32(data: Optional[bytes], value: int = 1) -> int:
    """Update the Adler-32 checksum ``value`` with ``data``.

    Passing ``None`` as data returns the initial checksum, 1.
    """
    if data is None:
        return 1
    s1 = value & 0xFFFF
    s2 = (value >> 16) & 0xFFFF
    view = memoryview(data).cast("B")
    for start in range(0, len(view), NMAX):
        block = view[start:start + NMAX]
        s2 = (s2 + s1 * len(block) + sum(accumulate(block))) % BASE
        s1 = (s1 + sum(block)) % BASE
    return (s2 << 16) | s1


@lru_cache(maxsize=None)
def make_crc_table() -> tuple[int, ...]:
    """Return the 256-entry table for the reflected CRC-32 polynomial."""
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            c = (c >> 1) ^ (CRC_POLYNOMIAL if c & 1 else 0)
        table.append(c)
    return tuple(table)


def crc32(data: Optional[bytes], value: int = 0) -> int:
    """Update the CRC-32 checksum ``value`` with ``data``.

    Passing ``None`` as data returns the initial checksum, 0.
    """
    if data is None:
        return 0
    table = make_crc_table()
    crc = (value & _MASK32) ^ _MASK32
    for byte in memoryview(data).cast("B"):
        crc = table[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ _MASK32


def format_table(table: Iterable[int]) -> str:
    """Render table entries as C-style hex literals, five to a line."""
    entries = [f"0x{entry & _MASK32:08X}" for entry in table]
    lines = [
        "    " + ", ".join(entries[start:start + 5])
        for start in range(0, len(entries), 5)
    ]
    return ",\n".join(lines) + "\n" if lines else ""