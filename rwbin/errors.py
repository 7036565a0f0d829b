"""Exceptions raised while reading or writing binary data."""

from __future__ import annotations


class ReadError(Exception):
    """Raised when binary data cannot be read."""


class NotEnoughBytesError(ReadError):
    """Raised when fewer bytes remain than a read needs."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"not enough bytes: expected {expected}, actual: {actual}")


class InvalidDataFormatError(ReadError):
    """Raised when bytes were read but do not hold a valid value."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"invalid data format: {message}")


class InvalidArgumentError(ReadError):
    """Raised when a read is requested with an unusable argument."""

    def __init__(self) -> None:
        super().__init__("invalid argument")


class WriteError(Exception):
    """Raised when binary data cannot be written."""