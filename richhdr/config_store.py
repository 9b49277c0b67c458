#!/usr/bin/env python3
"""
JSON persistence for richhdr configuration files.

Config validates and merges values; this module only moves dictionaries
between memory and disk.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .utils.logger import get_logger

logger = get_logger(__name__)


class ConfigStore:
    """A JSON configuration file at a fixed path."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> dict[str, Any] | None:
        """
        Read the file.

        Returns:
            The decoded object, or None when the file is unreadable, is not
            JSON, or does not hold a JSON object at the top level
        """
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning(f"Could not load config from {self.path}: {exc}")
            return None
        if not isinstance(data, dict):
            logger.warning(f"Ignoring config {self.path}: top level is not an object")
            return None
        return data

    def save(self, payload: dict[str, Any]) -> bool:
        """Write ``payload``, creating parent directories; False when the write fails"""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            logger.warning(f"Could not save config to {self.path}: {exc}")
            return False
        logger.debug(f"Saved configuration to {self.path}")
        return True
