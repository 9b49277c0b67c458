from __future__ import annotations

import pytest

from richhdr.modules.product_ids import PRODUCT_NAMES, tool_display_name
from richhdr.modules.vs_versions import VS_VERSION_RANGES, tool_version_label


@pytest.mark.parametrize(
    "tool_id, name",
    [
        (0x0000, "Unknown"),
        (0x0001, "Import0"),
        (0x000F, "Masm710"),
        (0x005D, "Implib710"),
        (0x0093, "Implib900"),
        (0x00AA, "Utc1600_C"),
        (0x0104, "Utc1900_C"),
        (0x0105, "Utc1900_CPP"),
        (0x010E, "Utc1900_POGO_O_CPP"),
    ],
)
def test_tool_display_name(tool_id, name):
    assert tool_display_name(tool_id) == name


@pytest.mark.parametrize("tool_id", [0x010F, 0x0200, 0xFFFF, -1])
def test_tool_display_name_unknown_is_empty(tool_id):
    assert tool_display_name(tool_id) == ""


def test_product_table_is_dense_and_read_only():
    assert len(PRODUCT_NAMES) == 0x010F
    assert sorted(PRODUCT_NAMES) == list(range(0x010F))
    with pytest.raises(TypeError):
        PRODUCT_NAMES[0x0200] = "Forged"  # type: ignore[index]


@pytest.mark.parametrize(
    "tool_id, label",
    [
        (0x010A, "Visual Studio 2017 14.01+"),
        (0x0106, "Visual Studio 2017 14.01+"),
        (0x0105, "Visual Studio 2015 14.00"),
        (0x00FD, "Visual Studio 2015 14.00"),
        (0x00FC, "Visual Studio 2013 12.10"),
        (0x00EB, "Visual Studio 2013 12.10"),
        (0x00EA, "Visual Studio 2013 12.00"),
        (0x00D9, "Visual Studio 2013 12.00"),
        (0x00C7, "Visual Studio 2012 11.00"),
        (0x00B5, "Visual Studio 2010 10.10"),
        (0x0098, "Visual Studio 2010 10.00"),
        (0x0097, "Visual Studio 2008 09.00"),
        (0x0083, "Visual Studio 2008 09.00"),
        (0x006D, "Visual Studio 2005 08.00"),
        (0x005A, "Visual Studio 2003 07.10"),
        (0x0045, "Visual Studio 2002 07.00"),
        (0x0019, "Visual Studio 2002 07.00"),
        (0x0016, "Visual Studio 6.0 06.00"),
        (0x0015, "Visual Studio 6.0 06.00"),
        (0x000D, "Visual Studio 6.0 06.00"),
        (0x000C, "Visual Studio 6.0 06.00"),
        (0x000A, "Visual Studio 6.0 06.00"),
        (0x000E, "Visual Studio 97 05.00"),
        (0x0006, "Visual Studio 97 05.00"),
        (0x0002, "Visual Studio 97 05.00"),
        (0x0001, "Visual Studio"),
    ],
)
def test_tool_version_label(tool_id, label):
    assert tool_version_label(tool_id) == label


@pytest.mark.parametrize(
    "tool_id", [0x0000, 0x0003, 0x0009, 0x000F, 0x0017, 0x0018, 0x0046, 0x0059, 0x010B, 0xFFFF, -5]
)
def test_tool_version_label_gaps_are_empty(tool_id):
    assert tool_version_label(tool_id) == ""


def test_version_table_is_newest_first():
    labels = [label for label, _ in VS_VERSION_RANGES]
    assert labels[0] == "Visual Studio 2017 14.01+"
    assert labels[-1] == "Visual Studio"
    assert len(labels) == len(set(labels))


def test_every_named_tool_in_a_release_range_is_resolved():
    for tool_id in range(0x005A, 0x010B):
        assert tool_version_label(tool_id), hex(tool_id)
