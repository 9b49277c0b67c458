#!/usr/bin/env python3
"""
richhdr Configuration Management
"""

import os
from pathlib import Path
from typing import Any

from .config_schemas import RichHdrConfig
from .config_store import ConfigStore
from .utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "RICHHDR_CONFIG"


class Config:
    """Configuration manager for richhdr"""

    DEFAULT_CONFIG = RichHdrConfig().to_dict()

    def __init__(self, config_path: str | None = None):
        self.config_path = config_path or self._get_default_config_path()
        self._typed = RichHdrConfig()
        self._store = ConfigStore(self.config_path)

        if self._store.exists():
            self.load_config()

    @staticmethod
    def _get_default_config_path() -> str:
        """Get default configuration file path"""
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return env_path
        return str(Path.home() / ".richhdr" / "config.json")

    @property
    def typed_config(self) -> RichHdrConfig:
        return self._typed

    @property
    def config(self) -> dict[str, Any]:
        return self._typed.to_dict()

    def load_config(self) -> None:
        """Load configuration from file; invalid values raise ValueError or TypeError"""
        user_config = self._store.load()
        if user_config is None:
            return
        self._merge_config(user_config)
        logger.debug(f"Loaded configuration from {self.config_path}")

    def save_config(self) -> bool:
        """Save configuration to file"""
        return self._store.save(self.config)

    def _merge_config(self, user_config: dict[str, Any]) -> None:
        """Merge user configuration with the current values"""
        known = {key: value for key, value in user_config.items() if key in self.DEFAULT_CONFIG}
        for section in user_config.keys() - known.keys():
            logger.warning(f"Ignoring unknown config section: {section}")
        self._typed = self._typed.merge(known)

    def apply_overrides(self, overrides: dict[str, Any]) -> None:
        """Apply partial overrides, for example from command line flags"""
        self._merge_config(overrides)

    def get(self, section: str, key: str | None = None, default: Any = None) -> Any:
        """Get configuration value"""
        config = self.config
        if key is None:
            return config.get(section, default)
        return config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value: Any) -> None:
        """Set configuration value"""
        self.apply_overrides({section: {key: value}})

    @property
    def max_scan_bytes(self) -> int:
        return self._typed.scan.max_scan_bytes

    @property
    def max_file_size_mb(self) -> int:
        return self._typed.scan.max_file_size_mb

    @property
    def require_mz(self) -> bool:
        return self._typed.scan.require_mz

    @property
    def json_indent(self) -> int:
        return self._typed.output.json_indent

    @property
    def aggregate(self) -> bool:
        return self._typed.output.aggregate

    def __getitem__(self, key: str) -> Any:
        """Allow dict-like access"""
        return self.config[key]

    def __contains__(self, key: str) -> bool:
        """Allow 'in' operator"""
        return key in self.config
