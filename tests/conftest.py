"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import struct
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

import pytest

from richhdr.core.checksum import compute_checksum
from richhdr.core.constants import DANS_SIGNATURE_VALUE, E_LFANEW_OFFSET, RICH_SIGNATURE
from richhdr.core.unmasker import MaskedRichHeader, ToolEntry, pack_header, xor_words

# Entries of a small MSVC 2015 build: imports, C/C++ objects, resources, link
SAMPLE_ENTRIES = (
    ToolEntry(build_number=0, tool_id=0x0001, object_count=0x97),
    ToolEntry(build_number=23918, tool_id=0x0104, object_count=12),
    ToolEntry(build_number=23918, tool_id=0x0105, object_count=31),
    ToolEntry(build_number=23918, tool_id=0x00FF, object_count=1),
    ToolEntry(build_number=23918, tool_id=0x0102, object_count=1),
)


@dataclass(frozen=True)
class SyntheticPE:
    data: bytearray
    key: int
    header_offset: int
    footer_offset: int
    entries: tuple[ToolEntry, ...]

    @property
    def size(self) -> int:
        return self.footer_offset - self.header_offset


def build_rich_pe(
    entries: Sequence[ToolEntry] = SAMPLE_ENTRIES,
    key: int | None = None,
    header_offset: int = 0x80,
    total_size: int = 0x400,
    padding: tuple[int, int, int] = (0, 0, 0),
    mz: bool = True,
) -> SyntheticPE:
    """
    Build an MZ image with a masked Rich header at ``header_offset``.

    When ``key`` is omitted the linker checksum is used, so the header
    verifies.
    """
    entries = tuple(entries)
    data = bytearray(total_size)
    if mz:
        data[0:2] = b"MZ"

    clear = pack_header(MaskedRichHeader(DANS_SIGNATURE_VALUE, padding, entries))
    footer = header_offset + len(clear)
    pe_offset = (footer + 8 + 7) & ~7
    struct.pack_into("<I", data, E_LFANEW_OFFSET, pe_offset)
    data[pe_offset : pe_offset + 4] = b"PE\x00\x00"

    if key is None:
        key = compute_checksum(data, header_offset, entries)

    data[header_offset:footer] = xor_words(clear, key)
    data[footer : footer + 4] = RICH_SIGNATURE
    struct.pack_into("<I", data, footer + 4, key)
    return SyntheticPE(data, key, header_offset, footer, entries)


def place_footer(data: bytearray, offset: int, key: int) -> None:
    data[offset : offset + 4] = RICH_SIGNATURE
    struct.pack_into("<I", data, offset + 4, key)


def place_masked_word(data: bytearray, offset: int, word: int, key: int) -> None:
    struct.pack_into("<I", data, offset, word ^ key)


@pytest.fixture
def rich_pe() -> Callable[..., SyntheticPE]:
    """Factory for synthetic images carrying a Rich header."""
    return build_rich_pe


@pytest.fixture
def footer_writer() -> Callable[[bytearray, int, int], None]:
    return place_footer


@pytest.fixture
def masked_word_writer() -> Callable[[bytearray, int, int, int], None]:
    return place_masked_word


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """A file holding a verifiable Rich header."""
    path = tmp_path / "sample.exe"
    path.write_bytes(bytes(build_rich_pe().data))
    return path


@pytest.fixture
def plain_file(tmp_path: Path) -> Path:
    """An MZ file without any Rich header."""
    data = bytearray(0x200)
    data[0:2] = b"MZ"
    path = tmp_path / "plain.exe"
    path.write_bytes(bytes(data))
    return path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from the user's configuration file."""
    path = tmp_path / "richhdr-config" / "config.json"
    monkeypatch.setenv("RICHHDR_CONFIG", str(path))
    return path
