"""
Sink and log file unit tests.
"""

from __future__ import annotations

import io
import os
import stat
import sys
from pathlib import Path

import pytest

from linelog import Level, LogFileOpenError, from_file, from_path, open_log_file
from linelog.sinks import (
    NO_CLOSER,
    CloseFunc,
    TextStreamWriter,
    WriteCloser,
    Writer,
    binary_stream,
    run_closer,
)


def readlines(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


class TestOpenLogFile:
    """open_log_file contract"""

    def test_creates_missing_file(self, tmp_path: Path) -> None:
        """A missing file is created"""
        path = tmp_path / "new.log"
        fp = open_log_file(path, 0o600)
        fp.close()
        assert path.exists()

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
    def test_creates_with_requested_mode(self, tmp_path: Path) -> None:
        """A created file gets the requested mode"""
        path = tmp_path / "private.log"
        old_umask = os.umask(0)
        try:
            open_log_file(path, 0o600).close()
        finally:
            os.umask(old_umask)
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_positions_cursor_at_end(self, tmp_path: Path) -> None:
        """The cursor starts at end-of-file"""
        path = tmp_path / "existing.log"
        path.write_bytes(b"first\n")
        fp = open_log_file(path)
        try:
            assert fp.tell() == len(b"first\n")
            fp.write(b"second\n")
        finally:
            fp.close()
        assert path.read_bytes() == b"first\nsecond\n"

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        """Open failures raise LogFileOpenError"""
        path = tmp_path / "missing" / "dir" / "x.log"
        with pytest.raises(LogFileOpenError) as excinfo:
            open_log_file(path)
        assert excinfo.value.code == "log_file_open_failed"
        assert excinfo.value.path == str(path)
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_directory_path_raises(self, tmp_path: Path) -> None:
        """A directory cannot be a log file"""
        with pytest.raises(LogFileOpenError):
            from_path(tmp_path)


class TestFileRoundTrip:
    """Append semantics across reopen"""

    def test_reopen_appends(self, tmp_path: Path) -> None:
        """Reopening a log file appends to it"""
        path = tmp_path / "logfile.log"

        logger = from_path(path, 0o777)
        logger.info("dummy")
        logger.close()

        logger = from_path(path, 0o777)
        logger.warn("dummy")
        logger.error("dummy")
        logger.close()

        lines = readlines(path)
        assert len(lines) == 3
        assert " INFO " in lines[0]
        assert " WARNING " in lines[1]
        assert " ERROR " in lines[2]

    def test_close_closes_file(self, tmp_path: Path) -> None:
        """Closing the logger closes the owned file"""
        fp = open_log_file(tmp_path / "owned.log")
        logger = from_file(fp, level=Level.DEBUG)
        logger.debug("owned")
        logger.close()
        assert fp.closed

    def test_lines_visible_before_close(self, tmp_path: Path) -> None:
        """Lines reach the file before close"""
        path = tmp_path / "live.log"
        with from_path(path) as logger:
            logger.info("live")
            assert " INFO - live" in path.read_text(encoding="utf-8")


class TestWriterAdapters:
    """Writer protocols and stream adapters"""

    def test_bytes_io_is_writer(self) -> None:
        """BytesIO satisfies the writer protocols"""
        assert isinstance(io.BytesIO(), Writer)
        assert isinstance(io.BytesIO(), WriteCloser)

    def test_binary_stream_prefers_buffer(self) -> None:
        """Text streams are unwrapped to their buffer"""
        stream = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
        assert binary_stream(stream) is stream.buffer

    def test_text_only_stream_is_adapted(self) -> None:
        """Text-only streams are adapted"""
        stream = io.StringIO()
        writer = binary_stream(stream)
        assert isinstance(writer, TextStreamWriter)
        assert writer.write("héllo\n".encode("utf-8")) == len("héllo\n".encode("utf-8"))
        writer.flush()
        assert stream.getvalue() == "héllo\n"


class TestClosers:
    """Closer sum type"""

    def test_no_closer_does_nothing(self) -> None:
        """NO_CLOSER is a no-op"""
        run_closer(NO_CLOSER)

    def test_close_func_runs(self) -> None:
        """CloseFunc runs its function"""
        calls = []
        run_closer(CloseFunc(lambda: calls.append(1)))
        assert calls == [1]

    def test_unknown_closer_rejected(self) -> None:
        """Anything else is rejected"""
        with pytest.raises(TypeError):
            run_closer(lambda: None)  # type: ignore[arg-type]
