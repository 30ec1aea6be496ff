import io
from dataclasses import dataclass

import pytest
import structlog

from linelog import Level, Logger, MockTerminator, from_writer
from linelog.diagnostics import configure_diagnostics


@dataclass
class BufferedLogger:
    buffer: io.BytesIO
    logger: Logger
    terminator: MockTerminator

    def text(self) -> str:
        return self.buffer.getvalue().decode("utf-8")

    def reset(self) -> None:
        self.buffer.seek(0)
        self.buffer.truncate()


@pytest.fixture
def buffered():
    """Logger over an in-memory buffer, with process termination suppressed."""
    buf = io.BytesIO()
    terminator = MockTerminator()
    logger = from_writer(buf, level=Level.DEBUG, terminator=terminator)
    return BufferedLogger(buffer=buf, logger=logger, terminator=terminator)


@pytest.fixture
def diagnostics():
    """Route linelog diagnostics to an in-memory stream."""
    stream = io.StringIO()
    configure_diagnostics(stream=stream)
    return stream


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Restore diagnostics and structlog defaults after each test."""
    yield
    configure_diagnostics()
    structlog.reset_defaults()
