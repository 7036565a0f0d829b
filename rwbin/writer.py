"""Synchronous writer of binary values to a byte stream."""

from __future__ import annotations

from typing import Any, BinaryIO, Optional

from .endian import Endian
from .errors import WriteError
from .kinds import ArrayOf, Kind
from .strings import StringMode, encode_utf8, encode_utf16

_BYTES_LIKE = (bytes, bytearray, memoryview)


class BinaryWriter:
    """Writes numbers, strings and composite values to a stream in a fixed byte order.

    Values are described by a *kind*: a :class:`Kind`, an :class:`ArrayOf`,
    or a tuple of kinds for a tuple of values.  A list or tuple written with a
    single :class:`Kind` is written element by element.  ``None`` is written as
    nothing.  With no kind, bytes are written as they are and any other object
    must provide ``write_to(writer)``.
    """

    def __init__(self, stream: BinaryIO, endian: Endian) -> None:
        self.stream = stream
        self.endian = endian

    @classmethod
    def new_le(cls, stream: BinaryIO) -> BinaryWriter:
        """Create a little-endian writer over ``stream``."""
        return cls(stream, Endian.LITTLE)

    @classmethod
    def new_be(cls, stream: BinaryIO) -> BinaryWriter:
        """Create a big-endian writer over ``stream``."""
        return cls(stream, Endian.BIG)

    def _write_bytes(self, data: bytes) -> None:
        try:
            self.stream.write(data)
        except OSError as exc:
            raise WriteError(f"io error: {exc}") from exc

    def _primitive(self, kind: Kind, value: Any) -> None:
        self._write_bytes(kind.encode(value, self.endian))

    def u8(self, value: int) -> None:
        """Write an unsigned 8-bit integer."""
        self._primitive(Kind.U8, value)

    def i8(self, value: int) -> None:
        """Write a signed 8-bit integer."""
        self._primitive(Kind.I8, value)

    def u16(self, value: int) -> None:
        """Write an unsigned 16-bit integer."""
        self._primitive(Kind.U16, value)

    def i16(self, value: int) -> None:
        """Write a signed 16-bit integer."""
        self._primitive(Kind.I16, value)

    def u32(self, value: int) -> None:
        """Write an unsigned 32-bit integer."""
        self._primitive(Kind.U32, value)

    def i32(self, value: int) -> None:
        """Write a signed 32-bit integer."""
        self._primitive(Kind.I32, value)

    def f32(self, value: float) -> None:
        """Write a 32-bit float."""
        self._primitive(Kind.F32, value)

    def u64(self, value: int) -> None:
        """Write an unsigned 64-bit integer."""
        self._primitive(Kind.U64, value)

    def i64(self, value: int) -> None:
        """Write a signed 64-bit integer."""
        self._primitive(Kind.I64, value)

    def f64(self, value: float) -> None:
        """Write a 64-bit float."""
        self._primitive(Kind.F64, value)

    def reserved(self, value: int, length: int) -> None:
        """Write ``length`` copies of the byte ``value``."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"reserved byte out of range: {value}")
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        self._write_bytes(bytes([value]) * length)

    def fill_aligned(self, alignment: int, offset: int) -> None:
        """Pad with zeros from ``offset`` to the next multiple of ``alignment``.

        An offset that is already aligned is followed by a whole block of padding.
        """
        self.reserved(0x00, alignment - (offset % alignment))

    def flush(self) -> None:
        """Flush the underlying stream."""
        flush = getattr(self.stream, "flush", None)
        if flush is None:
            return
        try:
            flush()
        except OSError as exc:
            raise WriteError(f"io error: {exc}") from exc

    def write(self, value: Any, kind: Any = None) -> None:
        """Write ``value`` laid out as ``kind``."""
        if value is None:
            return
        if kind is None:
            if isinstance(value, _BYTES_LIKE):
                self._write_bytes(bytes(value))
            elif hasattr(value, "write_to"):
                value.write_to(self)
            else:
                raise TypeError(f"no kind given for {type(value).__name__} value")
        elif isinstance(kind, Kind):
            if isinstance(value, (list, tuple)):
                for item in value:
                    self.write(item, kind)
            else:
                self._primitive(kind, value)
        elif isinstance(kind, ArrayOf):
            items = list(value)
            if len(items) != kind.count:
                raise ValueError(f"expected {kind.count} elements, got {len(items)}")
            for item in items:
                self.write(item, kind.kind)
        elif isinstance(kind, tuple):
            items = tuple(value)
            if len(items) != len(kind):
                raise ValueError(f"expected {len(kind)} fields, got {len(items)}")
            for item, item_kind in zip(items, kind):
                self.write(item, item_kind)
        else:
            raise TypeError(f"unsupported kind: {kind!r}")

    def write_with(self, value: Any, arg: Any) -> None:
        """Write an object that needs an argument, via ``value.write_to_with(writer, arg)``."""
        value.write_to_with(self, arg)

    def _in(self, endian: Endian) -> BinaryWriter:
        return BinaryWriter(self.stream, endian)

    def write_as_le(self, value: Any, kind: Any = None) -> None:
        """Write ``value`` little-endian without changing this writer's order."""
        self._in(Endian.LITTLE).write(value, kind)

    def write_as_be(self, value: Any, kind: Any = None) -> None:
        """Write ``value`` big-endian without changing this writer's order."""
        self._in(Endian.BIG).write(value, kind)

    def write_as_le_with(self, value: Any, arg: Any) -> None:
        """Write an object with an argument, little-endian."""
        self._in(Endian.LITTLE).write_with(value, arg)

    def write_as_be_with(self, value: Any, arg: Any) -> None:
        """Write an object with an argument, big-endian."""
        self._in(Endian.BIG).write_with(value, arg)

    def utf8_str(self, value: str, mode: Optional[StringMode] = None) -> None:
        """Write a UTF-8 string; null-terminated unless a fixed mode is given."""
        self._write_bytes(encode_utf8(value, mode or StringMode.null_terminated()))

    def utf16_str(self, value: str, mode: Optional[StringMode] = None) -> None:
        """Write a UTF-16 string in this writer's order; null-terminated by default."""
        self._write_bytes(
            encode_utf16(value, self.endian, mode or StringMode.null_terminated())
        )