#!/usr/bin/env python3
"""
Rich header locator

The Rich header carries no length field. Its end is marked by the clear
"Rich" signature followed by a 32-bit key, and its start is the word that
decodes to "DanS" once XORed with that key. The size is recovered by scanning
backward from the footer until the masked "DanS" is found.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum

from ..utils.logger import get_logger
from .constants import (
    DANS_SIGNATURE_VALUE,
    DOS_HEADER_SIZE,
    FOOTER_SIZE,
    MIN_HEADER_SIZE,
    RICH_SIGNATURE,
    TOOL_ENTRY_SIZE,
    WORD_SIZE,
)

logger = get_logger(__name__)

_DWORD = struct.Struct("<I")


class LocateStatus(Enum):
    """Outcome of a Rich header search"""

    FOUND = "found"
    NOT_FOUND = "not_found"
    AMBIGUOUS_SIZE = "ambiguous_size"
    INVALID_SIZE = "invalid_size"


@dataclass(frozen=True)
class HeaderLocation:
    """Byte offset and size of the masked region preceding the footer"""

    offset: int
    size: int

    @property
    def footer_offset(self) -> int:
        return self.offset + self.size

    @property
    def word_count(self) -> int:
        return self.size // WORD_SIZE


@dataclass(frozen=True)
class RichFooter:
    """The clear "Rich" signature and the XOR key stored after it"""

    offset: int
    key: int
    signature: bytes = RICH_SIGNATURE


@dataclass(frozen=True)
class LocateResult:
    status: LocateStatus
    location: HeaderLocation | None = None
    footer: RichFooter | None = None

    @property
    def found(self) -> bool:
        return self.status is LocateStatus.FOUND

    @property
    def key(self) -> int | None:
        return self.footer.key if self.footer is not None else None


def _as_bytes(buffer: bytes | bytearray | memoryview) -> bytes | bytearray:
    if isinstance(buffer, (bytes, bytearray)):
        return buffer
    return memoryview(buffer).cast("B").tobytes()


def find_footer(buffer: bytes | bytearray | memoryview) -> RichFooter | None:
    """
    Find the first word-aligned "Rich" signature after the DOS header.

    Only candidates followed by a complete 4-byte key are considered.

    Args:
        buffer: Raw file content

    Returns:
        RichFooter for the first match, or None
    """
    data = _as_bytes(buffer)
    limit = len(data) - FOOTER_SIZE
    pos = data.find(RICH_SIGNATURE, DOS_HEADER_SIZE)
    while 0 <= pos <= limit:
        if pos % WORD_SIZE == 0:
            key = _DWORD.unpack_from(data, pos + WORD_SIZE)[0]
            return RichFooter(offset=pos, key=key)
        pos = data.find(RICH_SIGNATURE, pos + 1)
    return None


def find_header_start(buffer: bytes | bytearray | memoryview, footer: RichFooter) -> int | None:
    """Scan backward from the footer word to offset 0 for the masked "DanS" word"""
    data = _as_bytes(buffer)
    for pos in range(footer.offset, -1, -WORD_SIZE):
        if _DWORD.unpack_from(data, pos)[0] ^ footer.key == DANS_SIGNATURE_VALUE:
            return pos
    return None


def is_valid_header_size(size: int) -> bool:
    return size >= MIN_HEADER_SIZE and (size - MIN_HEADER_SIZE) % TOOL_ENTRY_SIZE == 0


def locate_and_size(buffer: bytes | bytearray | memoryview) -> LocateResult:
    """
    Locate the Rich header and derive its size.

    Args:
        buffer: Raw file content, starting with the DOS header

    Returns:
        LocateResult whose status is FOUND with a HeaderLocation, NOT_FOUND when
        no footer exists, AMBIGUOUS_SIZE when the footer key never decodes a
        "DanS" word, or INVALID_SIZE when the decoded region cannot hold a
        whole number of entries.
    """
    data = _as_bytes(buffer)
    footer = find_footer(data)
    if footer is None:
        logger.debug("No Rich footer found")
        return LocateResult(LocateStatus.NOT_FOUND)

    logger.debug(f"Rich footer at 0x{footer.offset:x}, key 0x{footer.key:08x}")

    start = find_header_start(data, footer)
    if start is None:
        logger.debug("No masked DanS signature before the Rich footer")
        return LocateResult(LocateStatus.AMBIGUOUS_SIZE, footer=footer)

    location = HeaderLocation(offset=start, size=footer.offset - start)
    if not is_valid_header_size(location.size):
        logger.debug(f"Rich header at 0x{start:x} has invalid size {location.size}")
        return LocateResult(LocateStatus.INVALID_SIZE, location=location, footer=footer)

    return LocateResult(LocateStatus.FOUND, location=location, footer=footer)


def read_key(buffer: bytes | bytearray | memoryview, location: HeaderLocation) -> int:
    """Read the key stored after the footer signature that ends ``location``"""
    data = _as_bytes(buffer)
    footer = location.footer_offset
    if location.offset < 0 or footer + FOOTER_SIZE > len(data):
        raise ValueError(
            f"Location 0x{location.offset:x}+{location.size} is outside a buffer of {len(data)} bytes"
        )
    if data[footer : footer + WORD_SIZE] != RICH_SIGNATURE:
        raise ValueError(f"No Rich signature at offset 0x{footer:x}")
    return _DWORD.unpack_from(data, footer + WORD_SIZE)[0]


__all__ = [
    "HeaderLocation",
    "LocateResult",
    "LocateStatus",
    "RichFooter",
    "find_footer",
    "find_header_start",
    "is_valid_header_size",
    "locate_and_size",
    "read_key",
]
