from __future__ import annotations

import hashlib

from richhdr.core.parser import parse_rich_header
from richhdr.core.unmasker import ToolEntry
from richhdr.modules.rich_header_domain import (
    aggregate_object_counts,
    calculate_richpe_hash,
    describe_entries,
    describe_entry,
    get_compiler_description,
    summarize_versions,
)


def test_compiler_description_by_family():
    assert get_compiler_description("Utc1900_CPP", 23918) == "Microsoft C/C++ Compiler (Build 23918)"
    assert get_compiler_description("Linker1400", 1) == "Microsoft Linker (Build 1)"
    assert get_compiler_description("Import0", 0) == "Imported Functions (Build 0)"


def test_compiler_description_fallbacks():
    assert get_compiler_description("", 7) == "Unknown tool (Build 7)"
    assert get_compiler_description("Unknown", 7) == "Unknown (Build 7)"


def test_describe_entry():
    described = describe_entry(ToolEntry(build_number=23918, tool_id=0x0105, object_count=31))
    assert described == {
        "tool_id": 0x0105,
        "build_number": 23918,
        "object_count": 31,
        "tool_name": "Utc1900_CPP",
        "vs_version": "Visual Studio 2015 14.00",
        "description": "Microsoft C/C++ Compiler (Build 23918)",
    }


def test_describe_unknown_tool():
    described = describe_entry(ToolEntry(build_number=1, tool_id=0x0400, object_count=2))
    assert described["tool_name"] == ""
    assert described["vs_version"] == ""
    assert described["description"] == "Unknown tool (Build 1)"


def test_describe_entries_keeps_order(rich_pe):
    pe = rich_pe()
    described = describe_entries(pe.entries)
    assert [item["tool_id"] for item in described] == [e.tool_id for e in pe.entries]


def test_aggregate_object_counts():
    entries = [
        ToolEntry(1, 0x0104, 3),
        ToolEntry(2, 0x0105, 4),
        ToolEntry(3, 0x0104, 5),
    ]
    totals = aggregate_object_counts(entries)
    assert totals == {0x0104: 8, 0x0105: 4}
    assert list(totals) == [0x0104, 0x0105]


def test_aggregate_of_nothing_is_empty():
    assert aggregate_object_counts([]) == {}


def test_richpe_hash_covers_entries_only(rich_pe):
    info = parse_rich_header(rich_pe().data)
    expected = hashlib.md5(info.clear_data[16:]).hexdigest()
    assert calculate_richpe_hash(info.clear_data) == expected


def test_richpe_hash_empty_header():
    assert calculate_richpe_hash(bytes(16)) is None


def test_summarize_versions(rich_pe):
    pe = rich_pe()
    assert summarize_versions(pe.entries) == ["Visual Studio", "Visual Studio 2015 14.00"]
