#!/usr/bin/env python3
"""
richhdr Inspector - reads a file and reports its Rich header

The inspector is the I/O shell around the core: it validates and reads the
file, checks the MS-DOS magic, runs the locator and decoder, and resolves tool
identifiers. A missing Rich header is reported as an unavailable result, not
raised.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import time
from pathlib import Path

from ..config import Config
from ..modules.rich_header_domain import (
    aggregate_object_counts,
    calculate_richpe_hash,
    describe_entries,
)
from ..schemas.rich_header import RichHeaderResult, ToolEntryInfo
from ..utils.logger import get_logger
from .exceptions import InvalidSizeError
from .file_validator import FileValidator, has_dos_magic
from .locator import LocateStatus, locate_and_size
from .parser import decode_rich_header

logger = get_logger(__name__)

ANALYZER_NAME = "rich_header"

STATUS_MESSAGES = {
    LocateStatus.NOT_FOUND: "Rich header not found",
    LocateStatus.AMBIGUOUS_SIZE: "Rich footer found but no DanS signature decodes under its key",
    LocateStatus.INVALID_SIZE: "Rich header size is not 16 bytes plus whole 8-byte entries",
}


class RichHeaderInspector:
    """
    Rich header extraction for one file.

    Args:
        filename: Path to the file to inspect
        config: Configuration; defaults are used when omitted
    """

    def __init__(self, filename: str | Path, config: Config | None = None):
        self.filename = str(filename)
        self.config = config or Config()

    def analyze(self) -> RichHeaderResult:
        start = time.perf_counter()
        validator = FileValidator(self.filename, max_file_size_mb=self.config.max_file_size_mb)
        if not validator.validate():
            return self._finish(
                RichHeaderResult(
                    available=False,
                    status="error",
                    error="; ".join(validator.errors) or "File validation failed",
                    file_path=self.filename,
                ),
                start,
            )

        try:
            data = self._read()
        except OSError as e:
            logger.error(f"Cannot read {self.filename}: {e}")
            return self._finish(
                RichHeaderResult(
                    available=False, status="error", error=str(e), file_path=self.filename
                ),
                start,
            )

        result = self.analyze_bytes(
            data,
            file_path=self.filename,
            require_mz=self.config.require_mz,
            aggregate=self.config.aggregate,
        )
        result.file_size = Path(self.filename).stat().st_size
        return self._finish(result, start)

    def _read(self) -> bytes:
        limit = self.config.max_scan_bytes
        with open(self.filename, "rb") as f:
            return f.read(limit) if limit else f.read()

    @staticmethod
    def _finish(result: RichHeaderResult, start: float) -> RichHeaderResult:
        result.execution_time = time.perf_counter() - start
        return result

    @staticmethod
    def analyze_bytes(
        data: bytes | bytearray | memoryview,
        file_path: str | None = None,
        require_mz: bool = True,
        aggregate: bool = False,
    ) -> RichHeaderResult:
        """
        Analyze an in-memory buffer.

        Args:
            data: Raw file content
            file_path: Path reported in the result
            require_mz: Reject buffers without the MZ magic
            aggregate: Include per-tool object count totals

        Returns:
            RichHeaderResult, ``available`` only for a decoded header
        """
        is_pe = has_dos_magic(data)
        base = {
            "analyzer_name": ANALYZER_NAME,
            "file_path": file_path,
            "file_size": len(data),
            "is_pe": is_pe,
        }

        if require_mz and not is_pe:
            logger.info(f"Not an MS-DOS/PE file: {file_path or '<buffer>'}")
            return RichHeaderResult(
                available=False, status="not_pe", error="MZ signature not found", **base
            )

        located = locate_and_size(data)
        if not located.found:
            message = STATUS_MESSAGES[located.status]
            log = logger.debug if located.status is LocateStatus.NOT_FOUND else logger.warning
            log(f"{message}: {file_path or '<buffer>'}")
            return RichHeaderResult(
                available=False,
                status=located.status.value,
                error=message,
                offset=located.location.offset if located.location else None,
                size=located.location.size if located.location else None,
                xor_key=located.key,
                **base,
            )

        try:
            info = decode_rich_header(data, located.location)
        except InvalidSizeError as e:
            logger.warning(f"{e}: {file_path or '<buffer>'}")
            return RichHeaderResult(
                available=False, status=LocateStatus.INVALID_SIZE.value, error=str(e), **base
            )

        logger.info(
            f"Rich header in {file_path or '<buffer>'}: {len(info.entries)} entries, "
            f"key 0x{info.key:08x}"
        )
        return RichHeaderResult(
            available=True,
            status=located.status.value,
            offset=info.location.offset,
            size=info.location.size,
            xor_key=info.key,
            checksum=info.computed_checksum,
            checksum_valid=info.checksum_valid,
            padding_valid=info.padding_valid,
            richpe_hash=calculate_richpe_hash(info.clear_data),
            entries=[ToolEntryInfo(**entry) for entry in describe_entries(info.entries)],
            aggregated=aggregate_object_counts(info.entries) if aggregate else None,
            **base,
        )


__all__ = ["RichHeaderInspector", "ANALYZER_NAME"]
