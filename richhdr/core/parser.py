#!/usr/bin/env python3
"""
Rich header parse facade: locate, unmask, decode and verify in one call.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

from dataclasses import dataclass

from ..utils.logger import get_logger
from .checksum import compute_checksum
from .exceptions import AmbiguousSizeError, InvalidSizeError, RichHeaderNotFoundError
from .locator import HeaderLocation, LocateStatus, locate_and_size, read_key
from .unmasker import MaskedRichHeader, ToolEntry, parse_masked_header, unmask_to_bytes

logger = get_logger(__name__)


@dataclass(frozen=True)
class RichHeaderInfo:
    """A located and decoded Rich header"""

    location: HeaderLocation
    key: int
    header: MaskedRichHeader
    clear_data: bytes
    computed_checksum: int

    @property
    def entries(self) -> tuple[ToolEntry, ...]:
        return self.header.entries

    @property
    def checksum_valid(self) -> bool:
        return self.computed_checksum == self.key

    @property
    def padding_valid(self) -> bool:
        return self.header.padding_valid


def parse_rich_header(data: bytes | bytearray | memoryview) -> RichHeaderInfo:
    """
    Parse the Rich header out of raw file content.

    Args:
        data: Raw file content starting with the DOS header

    Returns:
        RichHeaderInfo with the decoded entries

    Raises:
        RichHeaderNotFoundError: No Rich footer in the buffer
        AmbiguousSizeError: The footer key never decodes a "DanS" word
        InvalidSizeError: The masked region cannot hold whole entries
    """
    result = locate_and_size(data)

    if result.status is LocateStatus.NOT_FOUND:
        raise RichHeaderNotFoundError("Rich header not found")
    if result.status is LocateStatus.AMBIGUOUS_SIZE:
        footer = result.footer
        raise AmbiguousSizeError(
            f"Rich footer at 0x{footer.offset:x} has no matching DanS signature",
            footer_offset=footer.offset,
            key=footer.key,
        )
    if result.status is LocateStatus.INVALID_SIZE:
        raise InvalidSizeError(result.location.size)

    return decode_rich_header(data, result.location)


def decode_rich_header(data: bytes | bytearray | memoryview, location: HeaderLocation) -> RichHeaderInfo:
    """
    Unmask, decode and verify the header at an already known location.

    Raises:
        InvalidSizeError: The masked region cannot hold whole entries
        ValueError: ``location`` does not end at a Rich footer inside ``data``
    """
    key = read_key(data, location)
    clear = unmask_to_bytes(data, location)
    header = parse_masked_header(clear)
    checksum = compute_checksum(data, location.offset, header.entries)

    if not header.padding_valid:
        logger.warning(f"Rich header padding is not zero: {header.padding}")
    if checksum != key:
        logger.info(f"Rich header checksum mismatch: computed 0x{checksum:08x}, stored 0x{key:08x}")

    logger.debug(
        f"Rich header at 0x{location.offset:x}, {location.size} bytes, {len(header.entries)} entries"
    )
    return RichHeaderInfo(
        location=location,
        key=key,
        header=header,
        clear_data=clear,
        computed_checksum=checksum,
    )


__all__ = ["RichHeaderInfo", "decode_rich_header", "parse_rich_header"]
