"""
Named logger registry.

Shares one Logger between independent call sites. A registry is an explicit
object handed to whoever needs it; there is no module-level instance.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterator, Optional

from .core import Logger
from .exceptions import LoggerExistsError


class LoggerRegistry:
    """Thread-safe map from logger name to Logger. Entries are never replaced or removed."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._loggers: Dict[str, Logger] = {}

    def register(self, name: str, logger: Logger) -> None:
        """Associate ``logger`` with ``name``.

        Raises:
            LoggerExistsError: ``name`` is already registered.
        """
        with self._lock:
            if name in self._loggers:
                raise LoggerExistsError(name)
            self._loggers[name] = logger

    def share(self, logger: Logger) -> None:
        """Register ``logger`` under its own ``name``."""
        if not logger.name:
            raise ValueError("cannot share a logger without a name")
        self.register(logger.name, logger)

    def lookup(self, name: str) -> Optional[Logger]:
        """Return the logger registered under ``name``, or None."""
        with self._lock:
            return self._loggers.get(name)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._loggers

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._loggers))
