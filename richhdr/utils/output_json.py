#!/usr/bin/env python3
"""JSON output formatting helpers."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from ..schemas.rich_header import RichHeaderResult


class JsonOutputFormatter:
    """Format Rich header results to JSON."""

    def __init__(self, results: Sequence[RichHeaderResult] | RichHeaderResult):
        if isinstance(results, RichHeaderResult):
            results = [results]
        self.results = list(results)

    def to_dict(self) -> list[dict[str, Any]] | dict[str, Any]:
        dumped = [result.model_dump(mode="json", exclude_none=True) for result in self.results]
        return dumped[0] if len(dumped) == 1 else dumped

    def to_json(self, indent: int = 2) -> str:
        """Convert results to JSON format."""
        try:
            return json.dumps(self.to_dict(), indent=indent or None, default=str)
        except (TypeError, ValueError) as e:
            return json.dumps(
                {
                    "error": f"JSON serialization failed: {str(e)}",
                    "partial_results": {},
                },
                indent=indent or None,
            )
