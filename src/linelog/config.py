"""
Logger Configuration.

Settings are read from ``LINELOG_*`` environment variables or a ``.env``
file, e.g.::

    LINELOG_LEVEL=DEBUG
    LINELOG_PATH=logs/app.log
    LINELOG_FILE_MODE=0o600
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core import Logger, from_path, from_stderr, from_stdout
from .diagnostics import configure_diagnostics
from .formatters import DEFAULT_LAYOUT
from .levels import Level
from .sinks import DEFAULT_FILE_MODE


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    DISABLE = "DISABLE"

    def to_level(self) -> Level:
        return Level[self.value]


_LEVEL_ALIASES = {"WARN": "WARNING", "OFF": "DISABLE", "DISABLED": "DISABLE"}


class DiagnosticsLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggerSettings(BaseSettings):
    """Configuration of a single Logger."""

    model_config = SettingsConfigDict(
        env_prefix="LINELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    name: Optional[str] = Field(default=None, description="Name used when sharing the logger")
    level: LogLevel = Field(default=LogLevel.INFO, description="Severity threshold")
    layout: str = Field(default=DEFAULT_LAYOUT, description="Timestamp layout")
    path: Optional[str] = Field(default=None, description="Log file path; a standard stream is used when unset")
    file_mode: int = Field(default=DEFAULT_FILE_MODE, description="Permission bits of a created log file")
    stream: Literal["stdout", "stderr"] = Field(default="stdout", description="Standard stream used without a path")
    diagnostics_level: DiagnosticsLevel = Field(
        default=DiagnosticsLevel.WARNING,
        description="Threshold of linelog's own diagnostics",
    )

    @field_validator("level", "diagnostics_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().upper()
            return _LEVEL_ALIASES.get(value, value)
        return value

    @field_validator("file_mode", mode="before")
    @classmethod
    def _parse_file_mode(cls, value: Any) -> Any:
        # "644" and "0o644" are both octal
        if isinstance(value, str):
            text = value.strip().lower()
            if text.startswith("0o"):
                text = text[2:]
            return int(text, 8)
        return value


def build_logger(settings: LoggerSettings | None = None, **options: Any) -> Logger:
    """Build a Logger from settings (read from the environment when omitted).

    Extra keyword options (``error_handler``, ``terminator``) are passed to the
    Logger unchanged.

    Raises:
        LogFileOpenError: ``settings.path`` cannot be opened.
    """
    settings = settings or LoggerSettings()
    configure_diagnostics(level=settings.diagnostics_level.value)

    options = {
        "name": settings.name,
        "level": settings.level.to_level(),
        "layout": settings.layout,
        **options,
    }
    if settings.path:
        return from_path(settings.path, settings.file_mode, **options)
    if settings.stream == "stderr":
        return from_stderr(**options)
    return from_stdout(**options)
