"""
Process termination used by ``Logger.abort``.
"""

from __future__ import annotations

import os
import sys
from typing import Callable, List, NoReturn

Terminator = Callable[[int], None]


def exit_process(rc: int) -> NoReturn:
    """Terminate the whole process with exit code ``rc``, from any thread.

    Standard streams are flushed first; nothing else runs (no atexit hooks,
    no ``finally`` blocks), so no caller can intercept the exit.
    """
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (AttributeError, OSError, ValueError):
            pass
    os._exit(rc)


class MockTerminator:
    """Terminator for tests: records exit codes and returns control to the caller."""

    def __init__(self) -> None:
        self.codes: List[int] = []

    def __call__(self, rc: int) -> None:
        self.codes.append(rc)

    @property
    def called(self) -> bool:
        return bool(self.codes)
