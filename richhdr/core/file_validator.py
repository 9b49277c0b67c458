#!/usr/bin/env python3
"""
richhdr File Validator - File validation logic before Rich header parsing

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from pathlib import Path

from ..utils.logger import get_logger
from .constants import DEFAULT_MAX_FILE_SIZE_MB, DOS_MAGIC, MIN_HEADER_SIZE_BYTES

logger = get_logger(__name__)


class FileValidator:
    """
    Validates files before Rich header parsing.

    This class encapsulates all file validation logic including:
    - File existence checks
    - Size validation (empty files and configured maximum)
    - File readability checks

    Attributes:
        file_path: Pathlib Path object for the file
        filename: String representation of the file path
        max_file_size_mb: Largest file accepted for analysis
    """

    def __init__(self, filename: str | Path, max_file_size_mb: int = DEFAULT_MAX_FILE_SIZE_MB):
        self.filename = str(filename)
        self.file_path = Path(filename)
        self.max_file_size_mb = max_file_size_mb
        self.errors: list[str] = []

    def validate(self) -> bool:
        """
        Perform complete file validation.

        Returns:
            True if all validations pass, False otherwise. Messages for failed
            checks are collected in ``errors``.
        """
        self.errors = []
        try:
            if not self._file_exists():
                return False

            if not self._is_regular_file():
                return False

            if not self._is_size_valid(self._file_size_bytes()):
                return False

            return self._is_readable()

        except OSError as e:
            self._fail(f"Error validating file {self.filename}: {e}")
            return False

    def _fail(self, message: str) -> None:
        logger.error(message)
        self.errors.append(message)

    def _file_exists(self) -> bool:
        if self.file_path.exists():
            return True
        self._fail(f"File does not exist: {self.filename}")
        return False

    def _is_regular_file(self) -> bool:
        if self.file_path.is_file():
            return True
        self._fail(f"Not a regular file: {self.filename}")
        return False

    def _file_size_bytes(self) -> int:
        return self.file_path.stat().st_size

    def _is_size_valid(self, file_size: int) -> bool:
        """
        Check if the file size is valid for analysis.

        Files smaller than the DOS header are still accepted; they simply
        cannot contain a Rich header.
        """
        if file_size == 0:
            self._fail(f"File is empty: {self.filename}")
            return False

        if file_size > self.max_file_size_mb * 1024 * 1024:
            self._fail(
                f"File too large for analysis ({file_size / 1024 / 1024:.1f}MB > "
                f"{self.max_file_size_mb}MB): {self.filename}"
            )
            return False

        return True

    def _is_readable(self) -> bool:
        try:
            with open(self.file_path, "rb") as f:
                f.read(MIN_HEADER_SIZE_BYTES)
        except OSError as e:
            self._fail(f"File access error: {self.filename} - {e}")
            return False
        return True


def has_dos_magic(data: bytes | bytearray | memoryview) -> bool:
    """Check for the MS-DOS "MZ" magic at the start of ``data``"""
    return bytes(data[: len(DOS_MAGIC)]) == DOS_MAGIC


__all__ = ["FileValidator", "has_dos_magic"]
