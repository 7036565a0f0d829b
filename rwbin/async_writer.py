"""Asynchronous writer of binary values to a byte stream."""

from __future__ import annotations

import inspect
from typing import Any, Optional

from .endian import Endian
from .errors import WriteError
from .kinds import ArrayOf, Kind
from .strings import StringMode, encode_utf8, encode_utf16

_BYTES_LIKE = (bytes, bytearray, memoryview)


async def _settle(result: Any) -> None:
    if inspect.isawaitable(result):
        await result


class AsyncBinaryWriter:
    """Writes numbers, strings and composite values to an async stream in a fixed byte order.

    The stream needs a ``write(data)`` method, which may be a coroutine or a
    plain method such as :meth:`asyncio.StreamWriter.write`.  Flushing awaits
    ``drain()`` and calls ``flush()`` where the stream has them.

    Values are described by a *kind*: a :class:`Kind`, an :class:`ArrayOf`,
    or a tuple of kinds for a tuple of values.  A list or tuple written with a
    single :class:`Kind` is written element by element.  ``None`` is written as
    nothing.  With no kind, bytes are written as they are and any other object
    must provide the coroutine ``write_to_async(writer)``.
    """

    def __init__(self, stream: Any, endian: Endian) -> None:
        self.stream = stream
        self.endian = endian

    @classmethod
    def new_le(cls, stream: Any) -> AsyncBinaryWriter:
        """Create a little-endian writer over ``stream``."""
        return cls(stream, Endian.LITTLE)

    @classmethod
    def new_be(cls, stream: Any) -> AsyncBinaryWriter:
        """Create a big-endian writer over ``stream``."""
        return cls(stream, Endian.BIG)

    async def _write_bytes(self, data: bytes) -> None:
        try:
            await _settle(self.stream.write(data))
        except OSError as exc:
            raise WriteError(f"io error: {exc}") from exc

    async def _primitive(self, kind: Kind, value: Any) -> None:
        await self._write_bytes(kind.encode(value, self.endian))

    async def u8(self, value: int) -> None:
        """Write an unsigned 8-bit integer."""
        await self._primitive(Kind.U8, value)

    async def i8(self, value: int) -> None:
        """Write a signed 8-bit integer."""
        await self._primitive(Kind.I8, value)

    async def u16(self, value: int) -> None:
        """Write an unsigned 16-bit integer."""
        await self._primitive(Kind.U16, value)

    async def i16(self, value: int) -> None:
        """Write a signed 16-bit integer."""
        await self._primitive(Kind.I16, value)

    async def u32(self, value: int) -> None:
        """Write an unsigned 32-bit integer."""
        await self._primitive(Kind.U32, value)

    async def i32(self, value: int) -> None:
        """Write a signed 32-bit integer."""
        await self._primitive(Kind.I32, value)

    async def f32(self, value: float) -> None:
        """Write a 32-bit float."""
        await self._primitive(Kind.F32, value)

    async def u64(self, value: int) -> None:
        """Write an unsigned 64-bit integer."""
        await self._primitive(Kind.U64, value)

    async def i64(self, value: int) -> None:
        """Write a signed 64-bit integer."""
        await self._primitive(Kind.I64, value)

    async def f64(self, value: float) -> None:
        """Write a 64-bit float."""
        await self._primitive(Kind.F64, value)

    async def reserved(self, value: int, length: int) -> None:
        """Write ``length`` copies of the byte ``value``."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"reserved byte out of range: {value}")
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        await self._write_bytes(bytes([value]) * length)

    async def fill_aligned(self, alignment: int, offset: int) -> None:
        """Pad with zeros from ``offset`` to the next multiple of ``alignment``.

        An offset that is already aligned is followed by a whole block of padding.
        """
        await self.reserved(0x00, alignment - (offset % alignment))

    async def flush(self) -> None:
        """Drain and flush the underlying stream where it supports it."""
        for name in ("drain", "flush"):
            method = getattr(self.stream, name, None)
            if method is None:
                continue
            try:
                await _settle(method())
            except OSError as exc:
                raise WriteError(f"io error: {exc}") from exc

    async def write(self, value: Any, kind: Any = None) -> None:
        """Write ``value`` laid out as ``kind``."""
        if value is None:
            return
        if kind is None:
            if isinstance(value, _BYTES_LIKE):
                await self._write_bytes(bytes(value))
            elif hasattr(value, "write_to_async"):
                await value.write_to_async(self)
            else:
                raise TypeError(f"no kind given for {type(value).__name__} value")
        elif isinstance(kind, Kind):
            if isinstance(value, (list, tuple)):
                for item in value:
                    await self.write(item, kind)
            else:
                await self._primitive(kind, value)
        elif isinstance(kind, ArrayOf):
            items = list(value)
            if len(items) != kind.count:
                raise ValueError(f"expected {kind.count} elements, got {len(items)}")
            for item in items:
                await self.write(item, kind.kind)
        elif isinstance(kind, tuple):
            items = tuple(value)
            if len(items) != len(kind):
                raise ValueError(f"expected {len(kind)} fields, got {len(items)}")
            for item, item_kind in zip(items, kind):
                await self.write(item, item_kind)
        else:
            raise TypeError(f"unsupported kind: {kind!r}")

    async def write_with(self, value: Any, arg: Any) -> None:
        """Write an object that needs an argument, via ``value.write_to_async_with(writer, arg)``."""
        await value.write_to_async_with(self, arg)

    def _in(self, endian: Endian) -> AsyncBinaryWriter:
        return AsyncBinaryWriter(self.stream, endian)

    async def write_as_le(self, value: Any, kind: Any = None) -> None:
        """Write ``value`` little-endian without changing this writer's order."""
        await self._in(Endian.LITTLE).write(value, kind)

    async def write_as_be(self, value: Any, kind: Any = None) -> None:
        """Write ``value`` big-endian without changing this writer's order."""
        await self._in(Endian.BIG).write(value, kind)

    async def write_as_le_with(self, value: Any, arg: Any) -> None:
        """Write an object with an argument, little-endian."""
        await self._in(Endian.LITTLE).write_with(value, arg)

    async def write_as_be_with(self, value: Any, arg: Any) -> None:
        """Write an object with an argument, big-endian."""
        await self._in(Endian.BIG).write_with(value, arg)

    async def utf8_str(self, value: str, mode: Optional[StringMode] = None) -> None:
        """Write a UTF-8 string; null-terminated unless a fixed mode is given."""
        await self._write_bytes(encode_utf8(value, mode or StringMode.null_terminated()))

    async def utf16_str(self, value: str, mode: Optional[StringMode] = None) -> None:
        """Write a UTF-16 string in this writer's order; null-terminated by default."""
        await self._write_bytes(
            encode_utf16(value, self.endian, mode or StringMode.null_terminated())
        )