#!/usr/bin/env python3
"""
Base Pydantic Schemas for Type-Safe Results

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AnalysisResultBase(BaseModel):
    """
    Base result model for all analyzers.

    Attributes:
        available: Whether the analyzer produced a result
        error: Error message if analyzer failed
        execution_time: Execution time in seconds
        timestamp: When the analysis was performed
        analyzer_name: Name of the analyzer that produced this result

    Example:
        >>> result = AnalysisResultBase(available=True, analyzer_name="Rich_Header")
        >>> result.analyzer_name
        'rich_header'
    """

    model_config = ConfigDict(validate_assignment=True, use_enum_values=True)

    available: bool = Field(..., description="Whether the analyzer produced a result")

    error: str | None = Field(None, description="Error message if analyzer failed")

    execution_time: float | None = Field(None, ge=0.0, description="Execution time in seconds")

    timestamp: datetime | None = Field(
        default_factory=_utcnow, description="When the analysis was performed"
    )

    analyzer_name: str | None = Field(
        None, description="Name of the analyzer that produced this result"
    )

    @field_validator("analyzer_name")
    @classmethod
    def validate_analyzer_name(cls, v: str | None) -> str | None:
        """Normalize analyzer name to lowercase"""
        if v is not None:
            return v.lower().strip()
        return v

    def model_dump_safe(self, **kwargs) -> dict[str, Any]:
        """Dump model to dict without None values"""
        return self.model_dump(exclude_none=True, **kwargs)

    def to_json(self, **kwargs) -> str:
        """Convert model to JSON string."""
        return self.model_dump_json(exclude_none=True, **kwargs)
