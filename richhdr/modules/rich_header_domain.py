#!/usr/bin/env python3
"""Domain helpers for decoded Rich header entries."""

from __future__ import annotations

import hashlib
from collections import defaultdict
from collections.abc import Iterable
from typing import Any

from ..core.constants import MIN_HEADER_SIZE
from ..core.unmasker import ToolEntry
from .product_ids import tool_display_name
from .vs_versions import tool_version_label

TOOL_FAMILIES = {
    "Utc": "Microsoft C/C++ Compiler",
    "Phx": "Microsoft Phoenix Compiler",
    "Linker": "Microsoft Linker",
    "Masm": "Microsoft Macro Assembler",
    "Cvtres": "Microsoft Resource Converter",
    "Export": "Microsoft Export Tool",
    "Implib": "Microsoft Import Library Tool",
    "Cvtomf": "Microsoft OMF Converter",
    "AliasObj": "Microsoft Alias Object Tool",
    "VisualBasic": "Microsoft Visual Basic",
    "Cvtpgd": "Microsoft Profile Guided Optimization Tool",
    "ILAsm": "Microsoft IL Assembler",
    "Import0": "Imported Functions",
    "Resource": "Microsoft Resource Compiler",
}


def get_compiler_description(compiler_name: str, build_number: int) -> str:
    if not compiler_name:
        return f"Unknown tool (Build {build_number})"
    for key, desc in TOOL_FAMILIES.items():
        if compiler_name.startswith(key):
            return f"{desc} (Build {build_number})"
    return f"{compiler_name} (Build {build_number})"


def describe_entry(entry: ToolEntry) -> dict[str, Any]:
    name = tool_display_name(entry.tool_id)
    return {
        "tool_id": entry.tool_id,
        "build_number": entry.build_number,
        "object_count": entry.object_count,
        "tool_name": name,
        "vs_version": tool_version_label(entry.tool_id),
        "description": get_compiler_description(name, entry.build_number),
    }


def describe_entries(entries: Iterable[ToolEntry]) -> list[dict[str, Any]]:
    return [describe_entry(entry) for entry in entries]


def aggregate_object_counts(entries: Iterable[ToolEntry]) -> dict[int, int]:
    """Sum object counts per tool id, keeping first-seen order"""
    totals: dict[int, int] = defaultdict(int)
    for entry in entries:
        totals[entry.tool_id] += entry.object_count
    return dict(totals)


def calculate_richpe_hash(clear_data: bytes) -> str | None:
    """
    MD5 over the decoded entries, excluding DanS and its padding.

    Args:
        clear_data: The whole unmasked region

    Returns:
        Hex digest, or None when the header holds no entries
    """
    entry_bytes = clear_data[MIN_HEADER_SIZE:]
    if not entry_bytes:
        return None
    return hashlib.md5(entry_bytes, usedforsecurity=False).hexdigest()


def summarize_versions(entries: Iterable[ToolEntry]) -> list[str]:
    """Distinct Visual Studio releases seen in ``entries``, in file order"""
    seen: list[str] = []
    for entry in entries:
        label = tool_version_label(entry.tool_id)
        if label and label not in seen:
            seen.append(label)
    return seen
