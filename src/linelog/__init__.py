"""
linelog: a minimal leveled logger for byte sinks.

Writes ``[<timestamp>] <PREFIX> - <args>`` lines to any byte writer (standard
streams, files, buffers) with threshold filtering, lock-serialized writes and
an optional hook for ERROR/CRITICAL lines.
"""

from .core import (
    Logger,
    from_file,
    from_path,
    from_stderr,
    from_stdout,
    from_write_closer,
    from_writer,
)
from .exceptions import (
    InvalidLevelError,
    LinelogError,
    LogFileOpenError,
    LoggedError,
    LoggerExistsError,
)
from .formatters import DEFAULT_LAYOUT
from .levels import DEFAULT_LEVEL, Level, parse_level
from .registry import LoggerRegistry
from .sinks import open_log_file
from .terminators import MockTerminator, exit_process

__all__ = [
    "DEFAULT_LAYOUT",
    "DEFAULT_LEVEL",
    "InvalidLevelError",
    "Level",
    "LinelogError",
    "LogFileOpenError",
    "LoggedError",
    "Logger",
    "LoggerExistsError",
    "LoggerRegistry",
    "MockTerminator",
    "exit_process",
    "from_file",
    "from_path",
    "from_stderr",
    "from_stdout",
    "from_write_closer",
    "from_writer",
    "open_log_file",
    "parse_level",
]
