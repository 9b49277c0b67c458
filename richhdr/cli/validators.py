#!/usr/bin/env python3
"""
richhdr CLI Input Validation Module

Problems are collected as messages so every bad argument is reported at once,
before any file is opened for analysis.

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

import os
import stat
from collections.abc import Sequence
from pathlib import Path

CONFIG_SUFFIX = ".json"


def validate_inputs(
    filenames: Sequence[str],
    output: str | None,
    config: str | None,
) -> list[str]:
    """
    Validate the command line arguments.

    Args:
        filenames: Files to analyze
        output: Report path, if any
        config: Config file path, if any

    Returns:
        Error messages, empty when every argument is usable
    """
    errors = [] if filenames else ["At least one input file is required"]
    for filename in filenames:
        errors.extend(validate_file_input(filename))
    errors.extend(validate_output_input(output))
    errors.extend(validate_config_input(config))
    return errors


def validate_file_input(filename: str) -> list[str]:
    """An input must be a non-empty regular file."""
    try:
        info = Path(filename).stat()
    except FileNotFoundError:
        return [f"File does not exist: {filename}"]
    except OSError as e:
        return [f"File access error: {filename} - {e}"]

    if not stat.S_ISREG(info.st_mode):
        return [f"Path is not a regular file: {filename}"]
    if info.st_size == 0:
        return [f"File is empty: {filename}"]
    return []


def validate_output_input(output: str | None) -> list[str]:
    """The report path must be a writable file in an existing directory."""
    if not output:
        return []

    path = Path(output)
    if path.is_dir():
        return [f"Output path is a directory: {output}"]

    parent = path.parent
    if not parent.is_dir():
        return [f"Output directory does not exist: {parent}"]

    target = path if path.exists() else parent
    if not os.access(target, os.W_OK):
        return [f"Cannot write to output file: {output}"]
    return []


def validate_config_input(config: str | None) -> list[str]:
    """A config file must exist and be JSON."""
    if not config:
        return []

    path = Path(config)
    if not path.exists():
        return [f"Config file does not exist: {config}"]
    if not path.is_file():
        return [f"Config path is not a file: {config}"]
    if path.suffix.lower() != CONFIG_SUFFIX:
        return [f"Config file must be JSON: {config}"]
    return []
