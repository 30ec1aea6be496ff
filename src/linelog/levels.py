"""
Severity levels.
"""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Union

from .exceptions import InvalidLevelError


class Level(IntEnum):
    """Ordered severities. DISABLE sits above everything and mutes all leveled output."""

    DEBUG = 1 << 0
    INFO = 1 << 1
    WARNING = 1 << 2
    ERROR = 1 << 3
    CRITICAL = 1 << 4
    DISABLE = sys.maxsize


DEFAULT_LEVEL = Level.INFO

ABORT_PREFIX = "ABORT -"

PREFIXES = {
    Level.DEBUG: "DEBUG -",
    Level.INFO: "INFO -",
    Level.WARNING: "WARNING -",
    Level.ERROR: "ERROR -",
    Level.CRITICAL: "CRITICAL -",
}

_ALIASES = {
    "WARN": Level.WARNING,
    "DISABLED": Level.DISABLE,
    "OFF": Level.DISABLE,
}

LevelLike = Union[Level, int, str]


def parse_level(value: LevelLike) -> Level:
    """Interpret a Level, a member value or a case-insensitive level name."""
    if isinstance(value, Level):
        return value
    if isinstance(value, bool):
        raise InvalidLevelError(value)
    if isinstance(value, int):
        try:
            return Level(value)
        except ValueError:
            raise InvalidLevelError(value) from None
    if isinstance(value, str):
        key = value.strip().upper()
        if key in Level.__members__:
            return Level[key]
        if key in _ALIASES:
            return _ALIASES[key]
    raise InvalidLevelError(value)
