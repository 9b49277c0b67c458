#!/usr/bin/env python3
"""
Visual Studio release lookup for Rich header tool identifiers.

Tool ids are allocated in blocks per toolchain release, so the release is
found by range. The table is evaluated in order, newest release first, and
the first match wins. Neighbouring ranges share their boundary id; the
earlier entry takes it.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations


def _closed(low: int, high: int) -> range:
    return range(low, high + 1)


VS_VERSION_RANGES: tuple[tuple[str, tuple[range, ...]], ...] = (
    ("Visual Studio 2017 14.01+", (_closed(0x0106, 0x010A),)),
    ("Visual Studio 2015 14.00", (_closed(0x00FD, 0x0106),)),
    ("Visual Studio 2013 12.10", (_closed(0x00EB, 0x00FD),)),
    ("Visual Studio 2013 12.00", (_closed(0x00D9, 0x00EB),)),
    ("Visual Studio 2012 11.00", (_closed(0x00C7, 0x00D9),)),
    ("Visual Studio 2010 10.10", (_closed(0x00B5, 0x00C7),)),
    ("Visual Studio 2010 10.00", (_closed(0x0098, 0x00B5),)),
    ("Visual Studio 2008 09.00", (_closed(0x0083, 0x0098),)),
    ("Visual Studio 2005 08.00", (_closed(0x006D, 0x0083),)),
    ("Visual Studio 2003 07.10", (_closed(0x005A, 0x006D),)),
    ("Visual Studio 2002 07.00", (_closed(0x0019, 0x0045),)),
    ("Visual Studio 6.0 06.00", (_closed(0x000A, 0x000D), _closed(0x0015, 0x0016))),
    (
        "Visual Studio 97 05.00",
        (_closed(0x0002, 0x0002), _closed(0x0006, 0x0006), _closed(0x000C, 0x000C), _closed(0x000E, 0x000E)),
    ),
    ("Visual Studio", (_closed(0x0001, 0x0001),)),
)


def tool_version_label(tool_id: int) -> str:
    """Return the Visual Studio release for ``tool_id``, or an empty string"""
    for label, ranges in VS_VERSION_RANGES:
        if any(tool_id in id_range for id_range in ranges):
            return label
    return ""


__all__ = ["VS_VERSION_RANGES", "tool_version_label"]
