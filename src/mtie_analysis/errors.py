"""Error types raised by the MTIE toolkit."""

from __future__ import annotations


class MtieError(Exception):
    """Base class for all MTIE toolkit failures."""


class InsufficientData(MtieError):
    """Raised when a series has fewer than two samples."""

    def __init__(self, count: int) -> None:
        super().__init__(f"MTIE requires at least 2 samples, got {count}")
        self.count = count


class InvalidConfiguration(MtieError):
    """Raised for an unusable threshold, worker count, mode, or settings file."""


class ParseError(MtieError):
    """Raised when an input line does not hold a valid TIE value."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(f"line {line_number} '{line}': it does not contain a valid number")
        self.line_number = line_number
        self.line = line


class InputReadError(MtieError, OSError):
    """Raised when TIE input cannot be read."""


class MonotonicityError(MtieError):
    """Raised when computed MTIE values decrease with a growing interval."""
