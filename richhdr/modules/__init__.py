#!/usr/bin/env python3
"""
richhdr lookup tables and entry analysis
"""

from .product_ids import PRODUCT_NAMES, tool_display_name
from .rich_header_domain import (
    aggregate_object_counts,
    calculate_richpe_hash,
    describe_entries,
    get_compiler_description,
)
from .vs_versions import VS_VERSION_RANGES, tool_version_label

__all__ = [
    "PRODUCT_NAMES",
    "VS_VERSION_RANGES",
    "aggregate_object_counts",
    "calculate_richpe_hash",
    "describe_entries",
    "get_compiler_description",
    "tool_display_name",
    "tool_version_label",
]
