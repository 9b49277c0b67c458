#!/usr/bin/env python3
"""
richhdr core: Rich header location, unmasking and verification

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .checksum import compute_checksum
from .exceptions import (
    AmbiguousSizeError,
    InvalidSizeError,
    NotPEFileError,
    RichHeaderError,
    RichHeaderNotFoundError,
)
from .locator import HeaderLocation, LocateResult, LocateStatus, RichFooter, locate_and_size
from .parser import RichHeaderInfo, decode_rich_header, parse_rich_header
from .unmasker import (
    MaskedRichHeader,
    ToolEntry,
    entry_count,
    parse_masked_header,
    unmask,
    unmask_in_place,
    unmask_to_bytes,
    xor_words,
)

__all__ = [
    "AmbiguousSizeError",
    "HeaderLocation",
    "InvalidSizeError",
    "LocateResult",
    "LocateStatus",
    "MaskedRichHeader",
    "NotPEFileError",
    "RichFooter",
    "RichHeaderError",
    "RichHeaderInfo",
    "RichHeaderNotFoundError",
    "ToolEntry",
    "compute_checksum",
    "decode_rich_header",
    "entry_count",
    "locate_and_size",
    "parse_masked_header",
    "parse_rich_header",
    "unmask",
    "unmask_in_place",
    "unmask_to_bytes",
    "xor_words",
]
