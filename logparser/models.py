"""Log level and log message tagged unions — frozen dataclasses."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class InfoLevel:
    label: ClassVar[str] = "Info"


@dataclass(frozen=True)
class WarningLevel:
    label: ClassVar[str] = "Warning"


@dataclass(frozen=True)
class ErrorLevel:
    severity: int   # unbounded, may be negative

    label: ClassVar[str] = "Error"


LogLevel = InfoLevel | WarningLevel | ErrorLevel

INFO = InfoLevel()
WARNING = WarningLevel()


@dataclass(frozen=True)
class KnownLog:
    level: LogLevel
    timestamp: int
    message: str


@dataclass(frozen=True)
class UnknownLog:
    message: str    # original line, verbatim


LogMessage = KnownLog | UnknownLog
