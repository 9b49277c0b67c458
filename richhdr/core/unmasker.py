#!/usr/bin/env python3
"""
Rich header unmasking and decoding

Every word of the masked region is XORed with the footer key. Once unmasked
the region reads "DanS", three zero padding words, then one 8-byte entry per
tool: a 32-bit comp id (build number low, tool id high) and an object count.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .constants import (
    DANS_SIGNATURE_VALUE,
    HEADER_PADDING_WORDS,
    MIN_HEADER_SIZE,
    TOOL_ENTRY_SIZE,
    U32_MAX,
    WORD_SIZE,
)
from .exceptions import InvalidSizeError
from .locator import HeaderLocation, read_key

_DWORD = struct.Struct("<I")
_ENTRY = struct.Struct("<HHI")


@dataclass(frozen=True)
class ToolEntry:
    """One tool usage record, in file order"""

    build_number: int
    tool_id: int
    object_count: int

    @property
    def comp_id(self) -> int:
        return (self.tool_id << 16) | self.build_number


@dataclass(frozen=True)
class MaskedRichHeader:
    """Cleartext view of the masked region"""

    signature: int
    padding: tuple[int, int, int]
    entries: tuple[ToolEntry, ...]

    @property
    def signature_valid(self) -> bool:
        return self.signature == DANS_SIGNATURE_VALUE

    @property
    def padding_valid(self) -> bool:
        return all(word == 0 for word in self.padding)


def entry_count(size: int) -> int:
    """Number of tool entries held by a masked region of ``size`` bytes"""
    entries, remainder = divmod(size - MIN_HEADER_SIZE, TOOL_ENTRY_SIZE)
    if size < MIN_HEADER_SIZE or remainder:
        raise InvalidSizeError(size)
    return entries


def xor_words(data: bytes | bytearray | memoryview, key: int) -> bytes:
    """XOR every little-endian 32-bit word of ``data`` with ``key``"""
    if len(data) % WORD_SIZE:
        raise ValueError(f"Data length {len(data)} is not a multiple of {WORD_SIZE}")
    if not 0 <= key <= U32_MAX:
        raise ValueError(f"Key 0x{key:x} is not a 32-bit value")
    out = bytearray(len(data))
    for i, (word,) in enumerate(_DWORD.iter_unpack(data)):
        _DWORD.pack_into(out, i * WORD_SIZE, word ^ key)
    return bytes(out)


def mask_header(header: MaskedRichHeader, key: int) -> bytes:
    """Serialize ``header`` and mask it with ``key``"""
    return xor_words(pack_header(header), key)


def pack_header(header: MaskedRichHeader) -> bytes:
    parts = [_DWORD.pack(header.signature)]
    parts.extend(_DWORD.pack(word) for word in header.padding)
    parts.extend(
        _ENTRY.pack(entry.build_number, entry.tool_id, entry.object_count)
        for entry in header.entries
    )
    return b"".join(parts)


def unmask(
    buffer: bytes | bytearray | memoryview,
    location: HeaderLocation,
    out: bytearray | memoryview,
) -> None:
    """
    Unmask the region described by ``location`` into ``out``.

    ``out`` may alias the masked region of ``buffer`` (in-place mode). Each
    word is read before it is written, so forward processing is safe. The
    caller must hold exclusive access to an aliased buffer.

    Args:
        buffer: Raw file content the location was derived from
        location: Offset and size of the masked region
        out: Writable buffer of exactly ``location.size`` bytes

    Raises:
        ValueError: If ``out`` has the wrong length, the size is not word
            aligned, or the location does not end at a Rich footer
    """
    if len(out) != location.size:
        raise ValueError(f"Output buffer is {len(out)} bytes, expected {location.size}")
    if location.size % WORD_SIZE:
        raise ValueError(f"Header size {location.size} is not a multiple of {WORD_SIZE}")

    key = read_key(buffer, location)
    source = memoryview(buffer).cast("B")[location.offset : location.footer_offset]
    target = memoryview(out).cast("B")
    for i, (word,) in enumerate(_DWORD.iter_unpack(source)):
        _DWORD.pack_into(target, i * WORD_SIZE, word ^ key)


def unmask_in_place(buffer: bytearray, location: HeaderLocation) -> memoryview:
    """Overwrite the masked region of ``buffer`` with its cleartext and return a view of it"""
    region = memoryview(buffer)[location.offset : location.footer_offset]
    unmask(buffer, location, region)
    return region


def unmask_to_bytes(buffer: bytes | bytearray | memoryview, location: HeaderLocation) -> bytes:
    out = bytearray(location.size)
    unmask(buffer, location, out)
    return bytes(out)


def parse_masked_header(clear: bytes | bytearray | memoryview) -> MaskedRichHeader:
    """
    Decode an unmasked region into its signature, padding and entries.

    Raises:
        InvalidSizeError: If the region is not 16 bytes plus whole entries
    """
    count = entry_count(len(clear))
    words = struct.unpack_from(f"<{1 + HEADER_PADDING_WORDS}I", clear, 0)
    entries = tuple(
        ToolEntry(build_number=build, tool_id=tool_id, object_count=objects)
        for build, tool_id, objects in _ENTRY.iter_unpack(
            memoryview(clear).cast("B")[MIN_HEADER_SIZE : MIN_HEADER_SIZE + count * TOOL_ENTRY_SIZE]
        )
    )
    return MaskedRichHeader(signature=words[0], padding=tuple(words[1:]), entries=entries)


__all__ = [
    "MaskedRichHeader",
    "ToolEntry",
    "entry_count",
    "mask_header",
    "pack_header",
    "parse_masked_header",
    "unmask",
    "unmask_in_place",
    "unmask_to_bytes",
    "xor_words",
]
