#!/usr/bin/env python3
"""
richhdr Configuration Schemas - Typed Dataclasses
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

import logging
from dataclasses import asdict, dataclass, field
from typing import Any

from ..core.constants import DEFAULT_MAX_FILE_SIZE_MB

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class GeneralConfig:
    """General configuration settings"""

    verbose: bool = False


@dataclass(frozen=True)
class ScanConfig:
    """Input scanning configuration"""

    max_scan_bytes: int = 0  # 0 reads the whole file
    max_file_size_mb: int = DEFAULT_MAX_FILE_SIZE_MB
    require_mz: bool = True

    def __post_init__(self):
        """Validate configuration values"""
        if self.max_scan_bytes < 0:
            raise ValueError("max_scan_bytes must be non-negative")
        if self.max_file_size_mb < 1:
            raise ValueError("max_file_size_mb must be at least 1")


@dataclass(frozen=True)
class OutputConfig:
    """Output formatting configuration"""

    json_indent: int = 2
    show_banner: bool = True
    aggregate: bool = False

    def __post_init__(self):
        """Validate configuration values"""
        if self.json_indent < 0:
            raise ValueError("json_indent must be non-negative")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration"""

    level: str = "WARNING"
    log_to_file: bool = False
    log_dir: str = "~/.richhdr/logs"

    def __post_init__(self):
        """Validate configuration values"""
        if self.level.upper() not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level.upper())


@dataclass(frozen=True)
class RichHdrConfig:
    """Main richhdr configuration container"""

    general: GeneralConfig = field(default_factory=GeneralConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RichHdrConfig":
        """Create configuration from dictionary"""
        if not isinstance(config_dict, dict):
            raise TypeError("config_dict must be a dictionary")

        sections = {
            "general": GeneralConfig,
            "scan": ScanConfig,
            "output": OutputConfig,
            "logging": LoggingConfig,
        }
        kwargs: dict[str, Any] = {}
        for name, section_cls in sections.items():
            if name in config_dict:
                values = config_dict[name]
                if not isinstance(values, dict):
                    raise TypeError(f"config section '{name}' must be a dictionary")
                kwargs[name] = section_cls(**values)

        return cls(**kwargs)

    def merge(self, other: dict[str, Any]) -> "RichHdrConfig":
        """Merge a partial configuration dict, with ``other`` taking precedence per key"""
        merged = self.to_dict()
        for section, settings in other.items():
            if isinstance(settings, dict) and isinstance(merged.get(section), dict):
                merged[section] = {**merged[section], **settings}
            else:
                merged[section] = settings
        return RichHdrConfig.from_dict(merged)
