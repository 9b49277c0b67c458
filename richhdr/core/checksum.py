#!/usr/bin/env python3
"""
Rich header checksum

The linker derives the key from the bytes that precede the header and from
the entries themselves. Recomputing it tells whether the header was edited
after linking.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

from collections.abc import Iterable

from .constants import E_LFANEW_OFFSET, E_LFANEW_SIZE, U32_MAX
from .unmasker import ToolEntry


def rol32(value: int, shift: int) -> int:
    """Rotate a 32-bit value left by ``shift`` modulo 32"""
    shift &= 0x1F
    value &= U32_MAX
    return ((value << shift) | (value >> (32 - shift))) & U32_MAX


def compute_checksum(
    buffer: bytes | bytearray | memoryview, header_offset: int, entries: Iterable[ToolEntry]
) -> int:
    """
    Recompute the Rich header key.

    Args:
        buffer: Raw file content
        header_offset: Offset of the masked "DanS" word
        entries: Decoded tool entries

    Returns:
        The 32-bit checksum the linker would have stored
    """
    data = memoryview(buffer).cast("B")
    if header_offset > len(data):
        raise ValueError(f"Header offset 0x{header_offset:x} is beyond the buffer")

    checksum = header_offset
    skipped = range(E_LFANEW_OFFSET, E_LFANEW_OFFSET + E_LFANEW_SIZE)
    for i in range(header_offset):
        if i in skipped:
            continue
        checksum += rol32(data[i], i)

    for entry in entries:
        checksum += rol32(entry.comp_id, entry.object_count)

    return checksum & U32_MAX


__all__ = ["compute_checksum", "rol32"]
