"""
Internal diagnostics for linelog itself.

A Logger never reports its own failures through its sink. Problems such as
a failing write go to a private structlog logger instead, which defaults to
stderr at WARNING.

The private logger is built with ``structlog.wrap_logger`` and its own
processor chain, so the process-wide structlog configuration owned by the
host application is never read or replaced.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

import structlog
from structlog.typing import EventDict, WrappedLogger

_settings: dict[str, Any] = {"level": logging.WARNING, "stream": None}


# =============================================================================
# Structlog Processors
# =============================================================================


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to the event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Move the bound ``_name`` to ``logger``."""
    event_dict["logger"] = event_dict.pop("_name", "linelog")
    return event_dict


_PROCESSORS = [
    structlog.stdlib.add_log_level,
    add_timestamp,
    add_logger_name,
    structlog.processors.format_exc_info,
    structlog.dev.ConsoleRenderer(colors=False),
]


# =============================================================================
# Public API
# =============================================================================


def get_logger(name: str | None = None) -> Any:
    """Get a diagnostics logger bound to the current diagnostics settings."""
    return structlog.wrap_logger(
        structlog.PrintLogger(file=_settings["stream"] or sys.stderr),
        processors=_PROCESSORS,
        wrapper_class=structlog.make_filtering_bound_logger(_settings["level"]),
        context_class=dict,
        _name=name or "linelog",
    )


def configure_diagnostics(*, level: str = "WARNING", stream: TextIO | None = None) -> None:
    """
    Configure linelog diagnostics output.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Output stream (default: stderr at emission time)
    """
    _settings["level"] = getattr(logging, level.upper(), logging.WARNING)
    _settings["stream"] = stream
