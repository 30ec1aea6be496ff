"""
Line and timestamp formatting.

Layouts are ``strftime`` strings with two extra directives:

- ``%N``: nanoseconds, zero-padded to 9 digits
- ``%:z``: UTC offset as ``+HH:MM``

The default layout renders an RFC 3339 timestamp with nanosecond precision,
e.g. ``2024-05-01T13:37:00.123456789+02:00``.
"""

from __future__ import annotations

import re
import time
from collections.abc import Mapping
from datetime import datetime, timezone, tzinfo
from typing import Iterable, Optional

DEFAULT_LAYOUT = "%Y-%m-%dT%H:%M:%S.%N%:z"

_EXTENDED_DIRECTIVE = re.compile(r"%(%|N|:z)")

_NANOS_PER_SECOND = 1_000_000_000


def _format_offset(dt: datetime) -> str:
    offset = dt.utcoffset()
    if offset is None:
        return ""
    minutes = int(offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def render_timestamp(
    layout: str = DEFAULT_LAYOUT,
    *,
    now_ns: Optional[int] = None,
    tz: Optional[tzinfo] = None,
) -> str:
    """Render a timestamp with ``layout``.

    Args:
        layout: strftime layout, ``%N`` and ``%:z`` included
        now_ns: Epoch time in nanoseconds (default: current time)
        tz: Target timezone (default: local timezone)
    """
    if now_ns is None:
        now_ns = time.time_ns()
    seconds, nanos = divmod(now_ns, _NANOS_PER_SECOND)
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc).astimezone(tz)
    dt = dt.replace(microsecond=nanos // 1000)

    def expand(match: re.Match) -> str:
        directive = match.group(1)
        if directive == "N":
            return f"{nanos:09d}"
        if directive == ":z":
            return _format_offset(dt)
        return "%%"

    return dt.strftime(_EXTENDED_DIRECTIVE.sub(expand, layout))


def format_line(timestamp: str, prefix: str, args: Iterable[object]) -> str:
    """Build ``[<timestamp>] <prefix> <arg> <arg> ...\\n``.

    An empty prefix is omitted together with its separating space.
    """
    parts = [f"[{timestamp}]"]
    if prefix:
        parts.append(prefix)
    parts.extend(str(arg) for arg in args)
    return " ".join(parts) + "\n"


def interpolate(fmt: str, args: tuple) -> str:
    """printf-style interpolation; ``fmt`` is returned untouched without args.

    A single mapping argument feeds named placeholders, as in ``logging``.
    """
    if not args:
        return fmt
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        return fmt % args[0]
    return fmt % args
