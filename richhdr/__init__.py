#!/usr/bin/env python3
"""
richhdr - Rich header decoder for PE files

Locates, sizes and deciphers the XOR-masked "Rich" header that the Microsoft
linker stamps into the DOS stub, and names the tools it records.

Author: Marc Rivero (@seifreed)
License: GPL-3.0
"""

from .__version__ import __author__, __author_email__, __license__, __version__

__description__ = "Rich header decoder for PE files"

from .core import (
    AmbiguousSizeError,
    HeaderLocation,
    InvalidSizeError,
    LocateResult,
    LocateStatus,
    MaskedRichHeader,
    RichHeaderError,
    RichHeaderInfo,
    RichHeaderNotFoundError,
    ToolEntry,
    locate_and_size,
    parse_rich_header,
    unmask,
)
from .core.inspector import RichHeaderInspector
from .modules import tool_display_name, tool_version_label

__all__ = [
    "AmbiguousSizeError",
    "HeaderLocation",
    "InvalidSizeError",
    "LocateResult",
    "LocateStatus",
    "MaskedRichHeader",
    "RichHeaderError",
    "RichHeaderInfo",
    "RichHeaderInspector",
    "RichHeaderNotFoundError",
    "ToolEntry",
    "locate_and_size",
    "parse_rich_header",
    "tool_display_name",
    "tool_version_label",
    "unmask",
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__description__",
]
