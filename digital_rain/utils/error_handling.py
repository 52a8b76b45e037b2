"""
Error Handling Utilities for Digital Rain

The simulation itself has almost nothing that can fail: every color and index
computation is total, and degenerate viewports simply produce no output. What
can fail is the environment around it, so this module provides:

1. A small exception hierarchy for startup failures
2. Error categorization and severity levels
3. Detailed, context-rich log records for those failures

USAGE:
    from digital_rain.utils.error_handling import (
        handle_error,
        ErrorCategory,
        TerminalUnavailableError,
    )

    try:
        width, height = query_terminal_size()
    except TerminalUnavailableError as e:
        handle_error(e, "query_terminal_size", ErrorCategory.PLATFORM)
        raise
"""

import logging
import sys
import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """Categories of errors for proper handling and reporting."""
    # Terminal/platform capabilities missing
    PLATFORM = "platform"

    # Unknown/uncategorized
    UNKNOWN = "unknown"


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    # Error - operation failed but process can continue
    ERROR = "error"

    # Fatal - process must shut down
    FATAL = "fatal"


class RainError(Exception):
    """Base class for digital rain failures."""
    category = ErrorCategory.UNKNOWN


class TerminalUnavailableError(RainError):
    """Terminal size could not be determined; there is no viewport to draw in."""
    category = ErrorCategory.PLATFORM


class CursesUnavailableError(RainError):
    """The curses module cannot be imported on this platform."""
    category = ErrorCategory.PLATFORM


@dataclass
class ErrorContext:
    """Detailed context information for an error."""
    error: Exception
    category: ErrorCategory
    severity: ErrorSeverity
    operation: str
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    stack_trace: str = ""
    additional_context: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.stack_trace:
            self.stack_trace = traceback.format_exc()

    def format_log_message(self) -> str:
        """Format a detailed log message."""
        lines = [
            f"ERROR [{self.severity.value.upper()}] in {self.operation}",
            f"  Category: {self.category.value}",
            f"  Type: {type(self.error).__name__}",
            f"  Message: {self.error}",
            f"  Timestamp: {self.timestamp}",
            f"  Platform: {sys.platform}",
        ]

        if self.additional_context:
            lines.append("  Context:")
            for key, value in self.additional_context.items():
                lines.append(f"    {key}: {value}")

        # format_exc() yields "NoneType: None" outside an except block
        if self.stack_trace.strip() and not self.stack_trace.startswith("NoneType: None"):
            lines.append("  Stack Trace:")
            for line in self.stack_trace.split('\n'):
                if line.strip():
                    lines.append(f"    {line}")

        return '\n'.join(lines)


def determine_severity(error: Exception, category: ErrorCategory) -> ErrorSeverity:
    """
    Determine the severity level for an error based on type and category.
    """
    if isinstance(error, (SystemExit, KeyboardInterrupt)):
        return ErrorSeverity.FATAL

    # Nothing to render into without a working terminal
    if isinstance(error, RainError) and category == ErrorCategory.PLATFORM:
        return ErrorSeverity.FATAL

    return ErrorSeverity.ERROR


def handle_error(
    error: Exception,
    operation: str,
    category: Optional[ErrorCategory] = None,
    severity: Optional[ErrorSeverity] = None,
    additional_context: Optional[Dict[str, Any]] = None,
) -> ErrorContext:
    """
    Log an error with full context and return the context record.

    Args:
        error: The exception that occurred
        operation: Name of the operation that failed
        category: Category of the error (taken from RainError subclasses if omitted)
        severity: Severity level (auto-determined if not provided)
        additional_context: Additional context information

    Returns:
        ErrorContext with full error details
    """
    if category is None:
        category = getattr(error, 'category', ErrorCategory.UNKNOWN)
    if severity is None:
        severity = determine_severity(error, category)

    context = ErrorContext(
        error=error,
        category=category,
        severity=severity,
        operation=operation,
        additional_context=additional_context or {},
    )

    log_level_map = {
        ErrorSeverity.ERROR: logging.ERROR,
        ErrorSeverity.FATAL: logging.CRITICAL,
    }
    logger.log(log_level_map.get(severity, logging.ERROR), context.format_log_message())

    return context
