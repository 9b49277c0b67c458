#!/usr/bin/env python3
"""
Rich header result schemas

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from pydantic import BaseModel, Field

from .base import AnalysisResultBase


class ToolEntryInfo(BaseModel):
    """One decoded Rich header entry with its resolved names"""

    tool_id: int = Field(..., ge=0, le=0xFFFF, description="Product identifier")
    build_number: int = Field(..., ge=0, le=0xFFFF, description="Tool build number")
    object_count: int = Field(..., ge=0, le=0xFFFFFFFF, description="Objects produced by the tool")
    tool_name: str = Field("", description="Internal product name, empty when unknown")
    vs_version: str = Field("", description="Visual Studio release, empty when unknown")
    description: str = Field("", description="Tool family description")


class RichHeaderResult(AnalysisResultBase):
    """
    Result of Rich header analysis for one file.

    ``status`` mirrors the locator outcome (found, not_found, ambiguous_size,
    invalid_size) or ``not_pe`` / ``error`` for driver failures.
    """

    file_path: str | None = Field(None, description="Path to the analyzed file")
    file_size: int | None = Field(None, ge=0, description="Size of file in bytes")
    is_pe: bool = Field(False, description="File starts with the MZ magic")
    status: str = Field("not_found", description="Locator outcome")
    offset: int | None = Field(None, ge=0, description="Offset of the masked DanS word")
    size: int | None = Field(None, ge=0, description="Size of the masked region in bytes")
    xor_key: int | None = Field(None, ge=0, le=0xFFFFFFFF, description="Key stored after Rich")
    checksum: int | None = Field(None, ge=0, le=0xFFFFFFFF, description="Recomputed checksum")
    checksum_valid: bool | None = Field(None, description="Recomputed checksum equals the key")
    padding_valid: bool | None = Field(None, description="Padding words after DanS are zero")
    richpe_hash: str | None = Field(None, description="MD5 of the decoded entries")
    entries: list[ToolEntryInfo] = Field(default_factory=list, description="Entries in file order")
    aggregated: dict[int, int] | None = Field(
        None, description="Object counts summed per tool id"
    )

    @property
    def entry_count(self) -> int:
        return len(self.entries)
