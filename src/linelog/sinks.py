"""
Sink abstractions: byte writers, their optional closer, and log file opening.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Any, BinaryIO, Callable, Protocol, TextIO, Union, runtime_checkable

from .exceptions import LogFileOpenError

DEFAULT_FILE_MODE = 0o644


# =============================================================================
# Writer Protocols
# =============================================================================


@runtime_checkable
class Writer(Protocol):
    """Append-only byte destination."""

    def write(self, data: bytes) -> Any:
        ...


@runtime_checkable
class WriteCloser(Writer, Protocol):
    """Byte destination whose lifecycle can be ended by the logger."""

    def close(self) -> Any:
        ...


# =============================================================================
# Closer (sum type)
# =============================================================================


@dataclass(frozen=True)
class NoCloser:
    """The logger does not own the sink; closing is a pure flag-set."""


@dataclass(frozen=True)
class CloseFunc:
    """The logger owns the sink and must run ``func`` exactly once on close."""

    func: Callable[[], Any]


Closer = Union[NoCloser, CloseFunc]

NO_CLOSER = NoCloser()


def run_closer(closer: Closer) -> None:
    """Run the finalizer held by ``closer``, if any."""
    if isinstance(closer, NoCloser):
        return
    if isinstance(closer, CloseFunc):
        closer.func()
        return
    raise TypeError(f"unsupported closer: {closer!r}")


# =============================================================================
# Standard Streams
# =============================================================================


class TextStreamWriter:
    """Adapts a text stream without a binary buffer to the Writer protocol."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    @property
    def encoding(self) -> str:
        return getattr(self._stream, "encoding", None) or "utf-8"

    def write(self, data: bytes) -> int:
        self._stream.write(data.decode(self.encoding, errors="replace"))
        return len(data)

    def flush(self) -> None:
        self._stream.flush()


def binary_stream(stream: TextIO) -> Writer:
    """Return the byte-level writer behind a process text stream."""
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        return buffer
    return TextStreamWriter(stream)


def stdout_writer() -> Writer:
    return binary_stream(sys.stdout)


def stderr_writer() -> Writer:
    return binary_stream(sys.stderr)


# =============================================================================
# Log Files
# =============================================================================


def open_log_file(path: Union[str, os.PathLike], mode: int = DEFAULT_FILE_MODE) -> BinaryIO:
    """Open ``path`` for appending log lines, creating it with ``mode`` if missing.

    The file is opened read-write in append mode and the cursor is moved to
    end-of-file explicitly, since not every platform guarantees that on open.

    Raises:
        LogFileOpenError: the file cannot be opened or the seek fails.
    """
    path = os.fspath(path)
    try:
        fd = os.open(path, os.O_RDWR | os.O_CREAT | os.O_APPEND, mode)
    except OSError as exc:
        raise LogFileOpenError(path, exc.strerror or str(exc)) from exc

    fp = os.fdopen(fd, "rb+", buffering=0)
    try:
        fp.seek(0, os.SEEK_END)
    except OSError as exc:
        fp.close()
        raise LogFileOpenError(path, exc.strerror or str(exc)) from exc
    return fp
