#!/usr/bin/env python3
"""
richhdr Pydantic result schemas

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .base import AnalysisResultBase
from .rich_header import RichHeaderResult, ToolEntryInfo

__all__ = [
    "AnalysisResultBase",
    "RichHeaderResult",
    "ToolEntryInfo",
]
