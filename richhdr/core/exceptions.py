#!/usr/bin/env python3
"""
richhdr exception hierarchy

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""


class RichHeaderError(Exception):
    """Base class for Rich header parsing failures"""


class RichHeaderNotFoundError(RichHeaderError):
    """No "Rich" footer signature after the DOS header"""


class AmbiguousSizeError(RichHeaderError):
    """A footer was found but no masked "DanS" decodes under its key"""

    def __init__(self, message: str, footer_offset: int | None = None, key: int | None = None):
        super().__init__(message)
        self.footer_offset = footer_offset
        self.key = key


class InvalidSizeError(RichHeaderError, ValueError):
    """The masked region is not 16 bytes plus a whole number of 8-byte entries"""

    def __init__(self, size: int):
        super().__init__(
            f"Invalid Rich header size {size}: expected 16 + 8*N bytes"
        )
        self.size = size


class NotPEFileError(RichHeaderError):
    """Input does not start with the MS-DOS "MZ" magic"""


__all__ = [
    "RichHeaderError",
    "RichHeaderNotFoundError",
    "AmbiguousSizeError",
    "InvalidSizeError",
    "NotPEFileError",
]
