"""Comma-separated log line parser.

Line grammar:
  Level,Severity,Timestamp,Message   (4 fields, severity used by "E")
  Level,Timestamp,Message            (3 fields)
  anything else                      → UnknownLog

A line that does not resolve to a KnownLog is kept verbatim as an UnknownLog,
so one malformed line never aborts a whole file.
"""

import logging
import re

from logparser.models import (
    INFO,
    WARNING,
    ErrorLevel,
    KnownLog,
    LogLevel,
    LogMessage,
    UnknownLog,
)

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"-?[0-9]+")


def parse_int(value: str | None) -> int | None:
    """Parse an optionally negative run of ASCII digits. Returns None otherwise."""
    if value is None or not _INT_RE.fullmatch(value):
        return None
    return int(value)


def parse_log_level(tag: str, severity: str | None) -> LogLevel | None:
    """Resolve 'I' / 'W' / 'E' to a level. 'E' needs an integer severity."""
    if tag == "I":
        return INFO
    if tag == "W":
        return WARNING
    if tag == "E":
        parsed = parse_int(severity)
        if parsed is None:
            return None
        return ErrorLevel(parsed)
    return None


def build_known(
    tag: str, severity: str | None, timestamp: str, message: str
) -> KnownLog | None:
    """Build a KnownLog, or None if the level or timestamp does not resolve."""
    level = parse_log_level(tag, severity)
    if level is None:
        return None

    ts = parse_int(timestamp)
    if ts is None:
        return None

    return KnownLog(level=level, timestamp=ts, message=message)


def parse_line(line: str) -> LogMessage:
    """Parse a single line. Never raises; falls back to UnknownLog(line)."""
    fields = line.split(",")
    # Trailing empty fields don't count: "I,147," has two fields.
    while fields and fields[-1] == "":
        fields.pop()

    if len(fields) == 4:
        tag, severity, timestamp, message = fields
        known = build_known(tag, severity, timestamp, message)
    elif len(fields) == 3:
        tag, timestamp, message = fields
        known = build_known(tag, None, timestamp, message)
    else:
        known = None

    if known is None:
        logger.debug("Unrecognised log line: %r", line)
        return UnknownLog(line)
    return known


def parse_file(content: str) -> list[LogMessage]:
    """Parse newline-separated content. Empty content yields no entries."""
    if content == "":
        return []

    messages = [parse_line(line) for line in content.split("\n")]

    unknown = sum(1 for m in messages if isinstance(m, UnknownLog))
    logger.debug("Parsed %d lines: %d known, %d unknown",
                 len(messages), len(messages) - unknown, unknown)
    return messages
