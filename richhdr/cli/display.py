#!/usr/bin/env python3
"""
richhdr CLI Display Module

Rich formatted output tables for Rich header results.

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

from collections.abc import Iterable

import pyfiglet
from rich.console import Console
from rich.table import Table

from ..schemas.rich_header import RichHeaderResult

console = Console()

# Constants
UNKNOWN_ERROR = "Unknown error"
STATUS_AVAILABLE = "[green]✓ Available[/green]"
STATUS_NOT_AVAILABLE = "[red]✗ Not Available[/red]"
CHECKSUM_OK = "[green]✓ Valid[/green]"
CHECKSUM_BAD = "[yellow]⚠ Mismatch[/yellow]"


def create_info_table(title: str, prop_width: int = 15, value_min_width: int = 40) -> Table:
    """Create a standardized info table with proper sizing"""
    table = Table(title=title, show_header=True, expand=True)
    table.add_column("Property", style="cyan", width=prop_width, no_wrap=True)
    table.add_column("Value", style="green", min_width=value_min_width, overflow="fold")
    return table


def print_banner(out: Console | None = None) -> None:
    """Print richhdr banner"""
    out = out or console
    banner = pyfiglet.figlet_format("richhdr", font="slant")
    out.print(f"[bold blue]{banner}[/bold blue]")
    out.print("[bold]Rich Header Decoder for PE Files[/bold]")
    out.print("[dim]Deciphers the MSVC build environment stamped into the DOS stub[/dim]\n")


def display_validation_errors(validation_errors: Iterable[str], out: Console | None = None) -> None:
    """Display validation errors"""
    out = out or console
    for error in validation_errors:
        out.print(f"[red]Error: {error}[/red]")


def build_summary_table(result: RichHeaderResult) -> Table:
    table = create_info_table(f"Rich Header: {result.file_path or '<buffer>'}")

    if not result.available:
        table.add_row("Status", STATUS_NOT_AVAILABLE)
        table.add_row("Reason", result.error or UNKNOWN_ERROR)
        if result.xor_key is not None:
            table.add_row("XOR Key", f"0x{result.xor_key:08X}")
        return table

    table.add_row("Status", STATUS_AVAILABLE)
    table.add_row("Offset", f"0x{result.offset:X}")
    table.add_row("Size", f"{result.size} bytes")
    table.add_row("XOR Key", f"0x{result.xor_key:08X}")
    table.add_row(
        "Checksum",
        f"0x{result.checksum:08X} {CHECKSUM_OK if result.checksum_valid else CHECKSUM_BAD}",
    )
    if not result.padding_valid:
        table.add_row("Padding", "[yellow]⚠ Non-zero[/yellow]")
    if result.richpe_hash:
        table.add_row("RichPE Hash", result.richpe_hash)
    table.add_row("Entries", str(result.entry_count))
    return table


def build_entries_table(result: RichHeaderResult) -> Table:
    table = Table(title="Tool Entries", show_header=True, expand=True)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Tool ID", style="cyan", justify="right")
    table.add_column("Build", style="magenta", justify="right")
    table.add_column("Objects", style="yellow", justify="right")
    table.add_column("Product", style="green")
    table.add_column("Visual Studio", style="blue")

    for index, entry in enumerate(result.entries):
        table.add_row(
            str(index),
            f"0x{entry.tool_id:04X}",
            str(entry.build_number),
            str(entry.object_count),
            entry.tool_name or "-",
            entry.vs_version or "-",
        )
    return table


def build_aggregate_table(result: RichHeaderResult) -> Table:
    table = Table(title="Objects per Tool", show_header=True)
    table.add_column("Tool ID", style="cyan", justify="right")
    table.add_column("Objects", style="yellow", justify="right")
    for tool_id, total in (result.aggregated or {}).items():
        table.add_row(f"0x{tool_id:04X}", str(total))
    return table


def display_result(result: RichHeaderResult, out: Console | None = None) -> None:
    """Print the tables for one result"""
    out = out or console
    out.print(build_summary_table(result))
    if result.available and result.entries:
        out.print(build_entries_table(result))
    if result.aggregated:
        out.print(build_aggregate_table(result))
    out.print()
