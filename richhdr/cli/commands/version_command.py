#!/usr/bin/env python3
"""
richhdr CLI Commands - Version Command

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

import platform
from typing import Any

from ...__version__ import __author__, __license__, __version__
from ...modules.product_ids import PRODUCT_NAMES
from ..display import create_info_table
from .base import Command


class VersionCommand(Command):
    """Print version information and the size of the tool id table."""

    def execute(self, _args: dict[str, Any]) -> int:
        table = create_info_table(f"richhdr {__version__}")
        table.add_row("Version", __version__)
        table.add_row("Author", __author__)
        table.add_row("License", __license__)
        table.add_row("Python", platform.python_version())
        table.add_row("Known tool ids", str(len(PRODUCT_NAMES)))
        self.context.console.print(table)
        return 0
