#!/usr/bin/env python3
"""
Error classification for richhdr

Nothing here retries or recovers: errors are classified so the caller can
decide whether to skip the file, log it, or abort.
"""

import threading
import time
from enum import Enum
from typing import Any

from ..core.exceptions import (
    AmbiguousSizeError,
    InvalidSizeError,
    NotPEFileError,
    RichHeaderError,
    RichHeaderNotFoundError,
)
from .logger import get_logger

logger = get_logger(__name__)


class ErrorSeverity(Enum):
    """Error severity levels"""

    LOW = "low"  # Expected outcome, processing continues
    MEDIUM = "medium"  # Header unusable, other files unaffected
    HIGH = "high"  # Input cannot be processed at all
    CRITICAL = "critical"  # Processing should be aborted


class ErrorCategory(Enum):
    """Error categories for classification"""

    INPUT_VALIDATION = "input_validation"
    FILE_ACCESS = "file_access"
    FORMAT = "format"
    MEMORY = "memory"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class ErrorInfo:
    """Information about an error"""

    def __init__(
        self,
        exception: Exception,
        severity: ErrorSeverity,
        category: ErrorCategory,
        context: dict[str, Any] | None = None,
        recoverable: bool = True,
        suggested_action: str | None = None,
    ):
        self.exception = exception
        self.severity = severity
        self.category = category
        self.context = context or {}
        self.recoverable = recoverable
        self.suggested_action = suggested_action
        self.timestamp = time.time()
        self.thread_id = threading.get_ident()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization"""
        return {
            "exception_type": type(self.exception).__name__,
            "exception_message": str(self.exception),
            "severity": self.severity.value,
            "category": self.category.value,
            "context": self.context,
            "recoverable": self.recoverable,
            "suggested_action": self.suggested_action,
            "timestamp": self.timestamp,
            "thread_id": self.thread_id,
        }


class ErrorClassifier:
    """Classify exceptions into categories and severities"""

    # Checked in order, so subclasses come before their bases
    EXCEPTION_MAPPING = (
        (RichHeaderNotFoundError, ErrorCategory.FORMAT, ErrorSeverity.LOW),
        (AmbiguousSizeError, ErrorCategory.FORMAT, ErrorSeverity.MEDIUM),
        (InvalidSizeError, ErrorCategory.FORMAT, ErrorSeverity.MEDIUM),
        (NotPEFileError, ErrorCategory.INPUT_VALIDATION, ErrorSeverity.MEDIUM),
        (RichHeaderError, ErrorCategory.FORMAT, ErrorSeverity.MEDIUM),
        (MemoryError, ErrorCategory.MEMORY, ErrorSeverity.CRITICAL),
        (FileNotFoundError, ErrorCategory.FILE_ACCESS, ErrorSeverity.HIGH),
        (PermissionError, ErrorCategory.FILE_ACCESS, ErrorSeverity.HIGH),
        (IsADirectoryError, ErrorCategory.FILE_ACCESS, ErrorSeverity.MEDIUM),
        (OSError, ErrorCategory.FILE_ACCESS, ErrorSeverity.MEDIUM),
        (ValueError, ErrorCategory.INPUT_VALIDATION, ErrorSeverity.MEDIUM),
        (TypeError, ErrorCategory.INPUT_VALIDATION, ErrorSeverity.MEDIUM),
    )

    @classmethod
    def classify(cls, exception: Exception, context: dict[str, Any] | None = None) -> ErrorInfo:
        """
        Classify an exception

        Args:
            exception: The exception to classify
            context: Additional context information

        Returns:
            ErrorInfo object with classification
        """
        context = context or {}
        category, severity = cls._classify_by_inheritance(exception)

        if context.get("phase") == "configuration" and category == ErrorCategory.INPUT_VALIDATION:
            category = ErrorCategory.CONFIGURATION

        # Be more tolerant when several files are processed
        if context.get("batch_mode") and severity == ErrorSeverity.HIGH:
            severity = ErrorSeverity.MEDIUM

        return ErrorInfo(
            exception=exception,
            severity=severity,
            category=category,
            context=context,
            recoverable=severity != ErrorSeverity.CRITICAL,
            suggested_action=cls._suggest_action(exception, category),
        )

    @classmethod
    def _classify_by_inheritance(cls, exception: Exception) -> tuple[ErrorCategory, ErrorSeverity]:
        """Classify by checking exception inheritance"""
        for exc_type, category, severity in cls.EXCEPTION_MAPPING:
            if isinstance(exception, exc_type):
                return category, severity
        return ErrorCategory.UNKNOWN, ErrorSeverity.LOW

    @classmethod
    def _suggest_action(cls, exception: Exception, category: ErrorCategory) -> str:
        """Suggest a follow-up for the caller"""
        if isinstance(exception, RichHeaderNotFoundError):
            return "File was not linked by the Microsoft toolchain; nothing to decode"
        if isinstance(exception, (AmbiguousSizeError, InvalidSizeError)):
            return "Rich header is corrupt or forged; treat its entries as untrusted"
        if isinstance(exception, NotPEFileError):
            return "Check that the input is an MS-DOS/PE executable"
        if isinstance(exception, PermissionError):
            return "Check file permissions or run with appropriate privileges"
        if category == ErrorCategory.FILE_ACCESS:
            return "Skip this file and continue"
        if category == ErrorCategory.CONFIGURATION:
            return "Fix the configuration file and retry"
        if category == ErrorCategory.MEMORY:
            return "Limit scan.max_scan_bytes or process a smaller file"
        if category == ErrorCategory.INPUT_VALIDATION:
            return "Validate input and retry with corrected parameters"
        return "Log error and continue with remaining files"


def log_error_info(error_info: ErrorInfo) -> None:
    """Log error with appropriate level"""
    error_dict = error_info.to_dict()

    if error_info.severity == ErrorSeverity.CRITICAL:
        logger.critical(f"Critical error: {error_dict}")
    elif error_info.severity == ErrorSeverity.HIGH:
        logger.error(f"High severity error: {error_dict}")
    elif error_info.severity == ErrorSeverity.MEDIUM:
        logger.warning(f"Medium severity error: {error_dict}")
    else:
        logger.debug(f"Low severity error: {error_dict}")


def classify_and_log(exception: Exception, context: dict[str, Any] | None = None) -> ErrorInfo:
    """Classify ``exception`` and log it at the level matching its severity"""
    error_info = ErrorClassifier.classify(exception, context)
    log_error_info(error_info)
    return error_info
