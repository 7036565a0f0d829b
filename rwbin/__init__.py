"""Binary readers and writers with explicit byte order, for sync and async I/O."""

__version__ = "0.1.0"

__all__ = [
    "async_reader",
    "async_writer",
    "endian",
    "errors",
    "kinds",
    "reader",
    "strings",
    "writer",
]