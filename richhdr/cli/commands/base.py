#!/usr/bin/env python3
"""
richhdr CLI Commands - Base Abstractions

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
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from rich.console import Console

from ...config import Config
from ...utils.logger import configure_logging_levels, get_logger, setup_logger


def configure_logging(config: Config, verbose: bool = False, quiet: bool = False) -> None:
    """Apply the logging config section, then let --verbose/--quiet override its level."""
    settings = config.typed_config.logging
    setup_logger(
        level=settings.numeric_level,
        log_to_file=settings.log_to_file,
        log_dir=settings.log_dir,
    )
    configure_logging_levels(
        verbose or config.typed_config.general.verbose,
        quiet,
        default_level=settings.numeric_level,
    )


@dataclass
class CommandContext:
    """Console, logger and configuration shared by the commands of one run."""

    console: Console
    logger: logging.Logger
    config: Config
    verbose: bool = False
    quiet: bool = False

    @classmethod
    def create(
        cls,
        config: Config | None = None,
        verbose: bool = False,
        quiet: bool = False,
    ) -> "CommandContext":
        config = config or Config()
        configure_logging(config, verbose, quiet)
        return cls(
            console=Console(),
            logger=get_logger(),
            config=config,
            verbose=verbose,
            quiet=quiet,
        )


class Command(ABC):
    """One CLI operation. ``execute`` returns the process exit status."""

    def __init__(self, context: CommandContext | None = None):
        self._context = context

    @property
    def context(self) -> CommandContext:
        if self._context is None:
            self._context = CommandContext.create()
        return self._context

    @abstractmethod
    def execute(self, args: dict[str, Any]) -> int:
        """Run the command with the option values collected by click."""

    def _get_config(self, config_path: str | None = None) -> Config:
        """An explicit config file wins over the context configuration."""
        if config_path:
            return Config(config_path)
        return self.context.config
