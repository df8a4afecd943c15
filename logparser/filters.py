"""Queries over parsed log messages — unknown entries, errors above a severity."""

from typing import Iterable

from logparser.formatter import render
from logparser.models import ErrorLevel, KnownLog, LogMessage, UnknownLog
from logparser.parser import parse_file


def is_unknown(message: LogMessage) -> bool:
    return isinstance(message, UnknownLog)


def is_error_above(message: LogMessage, threshold: int) -> bool:
    """True for a known Error entry whose severity is strictly above threshold."""
    return (
        isinstance(message, KnownLog)
        and isinstance(message.level, ErrorLevel)
        and message.level.severity > threshold
    )


def filter_unknown(messages: Iterable[LogMessage]) -> list[LogMessage]:
    """Keep only the UnknownLog entries, in their original order."""
    return [m for m in messages if is_unknown(m)]


def filter_errors_above(messages: Iterable[LogMessage], threshold: int) -> list[LogMessage]:
    return [m for m in messages if is_error_above(m, threshold)]


def errors_above_severity(content: str, threshold: int) -> list[str]:
    """Parse content and render every error entry with severity > threshold."""
    return [render(m) for m in filter_errors_above(parse_file(content), threshold)]
