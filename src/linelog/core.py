"""
Core Logger: level filtering, line formatting and lock-serialized writes.
"""

from __future__ import annotations

import os
import threading
from typing import Any, BinaryIO, Callable, Optional, Union

from .diagnostics import get_logger
from .exceptions import LoggedError
from .formatters import DEFAULT_LAYOUT, format_line, interpolate, render_timestamp
from .levels import ABORT_PREFIX, DEFAULT_LEVEL, PREFIXES, Level, LevelLike, parse_level
from .sinks import (
    DEFAULT_FILE_MODE,
    NO_CLOSER,
    CloseFunc,
    Closer,
    WriteCloser,
    Writer,
    open_log_file,
    run_closer,
    stderr_writer,
    stdout_writer,
)
from .terminators import Terminator, exit_process

ErrorHandler = Callable[[LoggedError], None]


class Logger:
    """Leveled logger writing ``[<timestamp>] <PREFIX> - <args>`` lines to a byte sink.

    Args:
        sink: Byte writer; must not be written to directly once wrapped
        closer: Finalizer run once by ``close`` (NO_CLOSER if the sink is not owned)
        level: Threshold; a message at severity S is emitted iff S >= level
        layout: Timestamp layout (see ``linelog.formatters``)
        error_handler: Called with a LoggedError after each ERROR/CRITICAL line
        name: Identifier used when sharing through a LoggerRegistry
        terminator: Called with the exit code by ``abort``
    """

    def __init__(
        self,
        sink: Writer,
        *,
        closer: Closer = NO_CLOSER,
        level: LevelLike = DEFAULT_LEVEL,
        layout: str = DEFAULT_LAYOUT,
        error_handler: Optional[ErrorHandler] = None,
        name: Optional[str] = None,
        terminator: Terminator = exit_process,
    ):
        self._sink = sink
        self._closer = closer
        self._lock = threading.Lock()
        self._closed = False

        self.level = level
        self.layout = layout
        self.error_handler = error_handler
        self.name = name
        self.terminator = terminator

    def __repr__(self) -> str:
        return f"<Logger name={self.name!r} level={self.level.name} closed={self._closed}>"

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def level(self) -> Level:
        return self._level

    @level.setter
    def level(self, value: LevelLike) -> None:
        self._level = parse_level(value)

    @property
    def closed(self) -> bool:
        return self._closed

    def enabled_for(self, level: Level) -> bool:
        return level >= self.level

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def _output(self, prefix: str, args: tuple) -> str:
        return format_line(render_timestamp(self.layout), prefix, args)

    def _write(self, line: str) -> None:
        data = line.encode("utf-8")
        with self._lock:
            if self._closed:
                return
            try:
                self._sink.write(data)
                flush = getattr(self._sink, "flush", None)
                if flush is not None:
                    flush()
            except Exception as exc:
                get_logger("linelog.core").warning(
                    "log write failed",
                    logger_name=self.name,
                    error_type=type(exc).__name__,
                    error=str(exc),
                )

    def _emit(self, level: Level, args: tuple) -> None:
        if level < self.level:
            return
        line = self._output(PREFIXES[level], args)
        self._write(line)
        if level >= Level.ERROR and self.error_handler is not None:
            self.error_handler(LoggedError(line, level))

    # -------------------------------------------------------------------------
    # Emission
    # -------------------------------------------------------------------------

    def log(self, *args: object) -> None:
        """Write a line without prefix, whatever the level."""
        self._write(self._output("", args))

    def logf(self, fmt: str, *args: object) -> None:
        self.log(interpolate(fmt, args))

    def debug(self, *args: object) -> None:
        self._emit(Level.DEBUG, args)

    def debugf(self, fmt: str, *args: object) -> None:
        if self.enabled_for(Level.DEBUG):
            self.debug(interpolate(fmt, args))

    def info(self, *args: object) -> None:
        self._emit(Level.INFO, args)

    def infof(self, fmt: str, *args: object) -> None:
        if self.enabled_for(Level.INFO):
            self.info(interpolate(fmt, args))

    def warn(self, *args: object) -> None:
        self._emit(Level.WARNING, args)

    def warnf(self, fmt: str, *args: object) -> None:
        if self.enabled_for(Level.WARNING):
            self.warn(interpolate(fmt, args))

    warning = warn
    warningf = warnf

    def error(self, *args: object) -> None:
        self._emit(Level.ERROR, args)

    def errorf(self, fmt: str, *args: object) -> None:
        if self.enabled_for(Level.ERROR):
            self.error(interpolate(fmt, args))

    def critical(self, *args: object) -> None:
        self._emit(Level.CRITICAL, args)

    def criticalf(self, fmt: str, *args: object) -> None:
        if self.enabled_for(Level.CRITICAL):
            self.critical(interpolate(fmt, args))

    def abort(self, rc: int, *args: object) -> None:
        """Write an ABORT line whatever the level, then call the terminator with ``rc``."""
        self._write(self._output(ABORT_PREFIX, args))
        self.terminator(rc)

    def abortf(self, rc: int, fmt: str, *args: object) -> None:
        self.abort(rc, interpolate(fmt, args))

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Stop writing and release the sink if the logger owns it.

        Later writes are dropped silently. Repeated calls are no-ops; an error
        raised by the underlying close propagates.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            run_closer(self._closer)


# =============================================================================
# Factories
# =============================================================================


def from_writer(w: Writer, **options: Any) -> Logger:
    """Wrap a writer the caller keeps ownership of."""
    return Logger(w, closer=NO_CLOSER, **options)


def from_write_closer(w: WriteCloser, **options: Any) -> Logger:
    """Wrap a writer whose ``close`` runs when the logger is closed."""
    return Logger(w, closer=CloseFunc(w.close), **options)


def from_stdout(**options: Any) -> Logger:
    return from_writer(stdout_writer(), **options)


def from_stderr(**options: Any) -> Logger:
    return from_writer(stderr_writer(), **options)


def from_file(fp: BinaryIO, **options: Any) -> Logger:
    """Wrap an opened binary file; closing the logger closes the file."""
    return from_write_closer(fp, **options)


def from_path(path: Union[str, os.PathLike], mode: int = DEFAULT_FILE_MODE, **options: Any) -> Logger:
    """Open ``path`` in append mode (creating it with ``mode``) and wrap it.

    Raises:
        LogFileOpenError: the file cannot be opened or positioned.
    """
    return from_file(open_log_file(path, mode), **options)
