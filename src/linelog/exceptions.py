"""
Unified exception hierarchy for linelog.

Errors are split by concern: construction (opening a log file), registry
conflicts, configuration validation, and the error value handed to a
logger's error handler for ERROR/CRITICAL lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .levels import Level


class LinelogError(Exception):
    """Root of every linelog exception.

    Carries a stable machine-readable ``code`` plus free-form ``details``.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


# =============================================================================
# Construction Errors
# =============================================================================


class LogFileOpenError(LinelogError):
    """Raised when a log file cannot be opened or positioned at its end."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"cannot open log file {path}: {reason}",
            code="log_file_open_failed",
            details={"path": path, "reason": reason},
        )
        self.path = path


# =============================================================================
# Registry Errors
# =============================================================================


class LoggerExistsError(LinelogError):
    """Raised when a name is already taken in a LoggerRegistry."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"{name} logger is already existing",
            code="logger_exists",
            details={"name": name},
        )
        self.name = name


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidLevelError(LinelogError, ValueError):
    """Raised when a value cannot be interpreted as a severity level."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"invalid log level: {value!r}",
            code="invalid_level",
            details={"value": value},
        )
        self.value = value


# =============================================================================
# Logged Errors
# =============================================================================


class LoggedError(LinelogError):
    """Error value built from an emitted ERROR or CRITICAL line.

    Never raised by linelog itself: it is passed to ``Logger.error_handler``
    so callers can turn a logged line into an actionable failure.

    Attributes:
        line: The exact text written to the sink, trailing newline included.
        level: Severity the line was emitted at.
    """

    def __init__(self, line: str, level: "Level") -> None:
        super().__init__(
            line.rstrip("\n"),
            code="logged_error",
            details={"level": level.name},
        )
        self.line = line
        self.level = level
