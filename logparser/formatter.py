"""Output formatters — text, JSON (NDJSON), colorized (ANSI)."""

import json
from typing import Any, Callable

from logparser.models import ErrorLevel, KnownLog, LogMessage, UnknownLog

# ANSI color codes
COLORS = {
    "Info": "\033[32m",     # green
    "Warning": "\033[33m",  # yellow
    "Error": "\033[31m",    # red
    "Unknown": "\033[35m",  # magenta
}
RESET = "\033[0m"


def render(message: LogMessage) -> str:
    """Human-readable form, e.g. 'Error 2 (147) weird' or 'Info (147) mice'."""
    if isinstance(message, KnownLog):
        level = message.level
        if isinstance(level, ErrorLevel):
            return f"Error {level.severity} ({message.timestamp}) {message.message}"
        return f"{level.label} ({message.timestamp}) {message.message}"
    if isinstance(message, UnknownLog):
        return f"Unknown log: {message.message}"
    raise TypeError(f"Unsupported log message: {message!r}")


def format_text(message: LogMessage) -> str:
    return render(message)


def message_to_dict(message: LogMessage) -> dict[str, Any]:
    """Convert a LogMessage to a dict, dropping None values for cleaner JSON."""
    if isinstance(message, KnownLog):
        severity = message.level.severity if isinstance(message.level, ErrorLevel) else None
        d = {
            "kind": "known",
            "level": message.level.label,
            "severity": severity,
            "timestamp": message.timestamp,
            "message": message.message,
        }
        return {k: v for k, v in d.items() if v is not None}
    if isinstance(message, UnknownLog):
        return {"kind": "unknown", "message": message.message}
    raise TypeError(f"Unsupported log message: {message!r}")


def format_json(message: LogMessage) -> str:
    """Return NDJSON — one JSON object per line, compatible with jq."""
    return json.dumps(message_to_dict(message))


def format_color(message: LogMessage) -> str:
    """Return the rendered message with an ANSI-colored level label."""
    text = render(message)
    label = message.level.label if isinstance(message, KnownLog) else "Unknown"
    color = COLORS.get(label, "")
    return f"{color}{label}{RESET}{text[len(label):]}"


def get_formatter(output_format: str = "text", color: bool = False) -> Callable[[LogMessage], str]:
    """Factory that returns the right formatter based on args."""
    if output_format == "json":
        return format_json
    if color:
        return format_color
    return format_text
