"""Asynchronous reader of binary values from a byte stream."""

from __future__ import annotations

import io
from typing import Any, Awaitable, Callable, Optional, Protocol, TypeVar

from .endian import Endian
from .errors import InvalidDataFormatError, NotEnoughBytesError, ReadError
from .kinds import ArrayOf, Kind
from .strings import StringMode, decode_fixed_utf8, decode_fixed_utf16

T = TypeVar("T")


class AsyncByteStream(Protocol):
    """Any object with a coroutine ``read(n)`` returning at most ``n`` bytes."""

    async def read(self, n: int = -1) -> bytes: ...


class _MemoryStream:
    """An in-memory stream with an awaitable ``read``."""

    def __init__(self, data: bytes) -> None:
        self._buffer = io.BytesIO(bytes(data))

    async def read(self, n: int = -1) -> bytes:
        return self._buffer.read(n)


class AsyncBinaryReader:
    """Reads numbers, strings and composite values from an async stream in a fixed byte order.

    The stream is any object with a coroutine ``read(n)``, such as
    :class:`asyncio.StreamReader`.  Values are described by a *kind*: a
    :class:`Kind`, an :class:`ArrayOf` (read as a list), a tuple of kinds
    (read as a tuple), or a class that provides the coroutine
    ``read_from_async(reader)``.  Objects that need an argument provide
    ``read_from_async_with(reader, arg)``.

    The reader counts the bytes it has consumed.  When a limit is set, a read
    that would go past it raises :class:`NotEnoughBytesError` before touching
    the stream.
    """

    def __init__(
        self, stream: AsyncByteStream, endian: Endian, limit: Optional[int] = None
    ) -> None:
        self.stream = stream
        self.endian = endian
        self.limit = limit
        self.total_bytes_read = 0

    @classmethod
    def new_le(cls, stream: AsyncByteStream) -> AsyncBinaryReader:
        """Create a little-endian reader over ``stream`` with no limit."""
        return cls(stream, Endian.LITTLE)

    @classmethod
    def new_be(cls, stream: AsyncByteStream) -> AsyncBinaryReader:
        """Create a big-endian reader over ``stream`` with no limit."""
        return cls(stream, Endian.BIG)

    @classmethod
    def from_le_bytes(cls, data: bytes) -> AsyncBinaryReader:
        """Create a little-endian reader over in-memory bytes, limited to their length."""
        return cls(_MemoryStream(data), Endian.LITTLE, len(data))

    @classmethod
    def from_be_bytes(cls, data: bytes) -> AsyncBinaryReader:
        """Create a big-endian reader over in-memory bytes, limited to their length."""
        return cls(_MemoryStream(data), Endian.BIG, len(data))

    def check_size(self, length: int) -> None:
        """Raise :class:`NotEnoughBytesError` if ``length`` more bytes would pass the limit."""
        if self.limit is not None and self.total_bytes_read + length > self.limit:
            raise NotEnoughBytesError(length, self.limit - self.total_bytes_read)

    async def _read_exact(self, length: int) -> bytes:
        buf = bytearray()
        while len(buf) < length:
            try:
                chunk = await self.stream.read(length - len(buf))
            except OSError as exc:
                raise ReadError(f"io error: {exc}") from exc
            if not chunk:
                raise ReadError("io error: failed to fill whole buffer")
            buf += chunk
        return bytes(buf)

    async def _take(self, length: int) -> bytes:
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        self.check_size(length)
        data = await self._read_exact(length)
        self.total_bytes_read += length
        return data

    async def read_from_slice(self, length: int, parse: Callable[[bytes], T]) -> T:
        """Read ``length`` bytes and return ``parse`` applied to them."""
        return parse(await self._take(length))

    async def read_while(
        self, size: int, try_parse: Callable[[bytes], Optional[T]]
    ) -> list[T]:
        """Read ``size``-byte items until ``try_parse`` returns None; the last item is consumed."""
        values: list[T] = []
        while (value := try_parse(await self._take(size))) is not None:
            values.append(value)
        return values

    async def _primitive(self, kind: Kind) -> Any:
        return await self.read_from_slice(
            kind.size, lambda data: kind.decode(data, self.endian)
        )

    async def u8(self) -> int:
        """Read an unsigned 8-bit integer."""
        return await self._primitive(Kind.U8)

    async def i8(self) -> int:
        """Read a signed 8-bit integer."""
        return await self._primitive(Kind.I8)

    async def u16(self) -> int:
        """Read an unsigned 16-bit integer."""
        return await self._primitive(Kind.U16)

    async def i16(self) -> int:
        """Read a signed 16-bit integer."""
        return await self._primitive(Kind.I16)

    async def u32(self) -> int:
        """Read an unsigned 32-bit integer."""
        return await self._primitive(Kind.U32)

    async def i32(self) -> int:
        """Read a signed 32-bit integer."""
        return await self._primitive(Kind.I32)

    async def f32(self) -> float:
        """Read a 32-bit float."""
        return await self._primitive(Kind.F32)

    async def u64(self) -> int:
        """Read an unsigned 64-bit integer."""
        return await self._primitive(Kind.U64)

    async def i64(self) -> int:
        """Read a signed 64-bit integer."""
        return await self._primitive(Kind.I64)

    async def f64(self) -> float:
        """Read a 64-bit float."""
        return await self._primitive(Kind.F64)

    async def read(self, kind: Any) -> Any:
        """Read one value laid out as ``kind``."""
        if isinstance(kind, Kind):
            return await self._primitive(kind)
        if isinstance(kind, ArrayOf):
            return [await self.read(kind.kind) for _ in range(kind.count)]
        if isinstance(kind, tuple):
            return tuple([await self.read(item) for item in kind])
        if hasattr(kind, "read_from_async"):
            return await kind.read_from_async(self)
        raise TypeError(f"unsupported kind: {kind!r}")

    async def read_with(self, kind: Any, arg: Any) -> Any:
        """Read a value that needs an argument, via ``kind.read_from_async_with(reader, arg)``."""
        return await kind.read_from_async_with(self, arg)

    async def read_list(self, kind: Any, count: int) -> list[Any]:
        """Read ``count`` consecutive values of ``kind``."""
        return [await self.read(kind) for _ in range(count)]

    async def read_optional(self, kind: Any, present: bool) -> Any:
        """Read a value of ``kind`` if ``present``, otherwise read nothing and return None."""
        return await self.read(kind) if present else None

    async def value(self, kind: Any, expected: Any) -> None:
        """Read a value and raise :class:`InvalidDataFormatError` unless it equals ``expected``."""
        actual = await self.read(kind)
        if actual != expected:
            raise InvalidDataFormatError(f"Expected {expected!r}, got {actual!r}")

    async def values(self, kind: Any, expected: Any) -> None:
        """Check each expected value in turn."""
        for item in expected:
            await self.value(kind, item)

    async def reserved(self, length: int, expected: int) -> None:
        """Read ``length`` bytes and require every one to equal ``expected``."""
        for byte in await self._take(length):
            if byte != expected:
                raise InvalidDataFormatError(f"Expected {expected!r}, got {byte!r}")

    async def _limited(self, length: int, read: Callable[[], Awaitable[T]]) -> T:
        original = self.limit
        self.limit = self.total_bytes_read + length
        try:
            return await read()
        finally:
            self.limit = original

    async def read_partial(self, length: int, kind: Any) -> Any:
        """Read ``kind`` from at most the next ``length`` bytes."""
        return await self._limited(length, lambda: self.read(kind))

    async def read_partial_with(self, length: int, kind: Any, arg: Any) -> Any:
        """Read ``kind`` with an argument from at most the next ``length`` bytes."""
        return await self._limited(length, lambda: self.read_with(kind, arg))

    async def skip(self, length: int) -> None:
        """Consume ``length`` bytes."""
        await self._take(length)

    async def skip_aligned(self, align: int) -> None:
        """Consume bytes up to the next multiple of ``align`` bytes read."""
        remainder = self.total_bytes_read % align
        if remainder:
            await self.skip(align - remainder)

    async def _in(
        self, endian: Endian, read: Callable[[AsyncBinaryReader], Awaitable[T]]
    ) -> T:
        other = AsyncBinaryReader(self.stream, endian, self.limit)
        other.total_bytes_read = self.total_bytes_read
        result = await read(other)
        self.total_bytes_read = other.total_bytes_read
        return result

    async def read_as_le(self, kind: Any) -> Any:
        """Read ``kind`` little-endian without changing this reader's order."""
        return await self._in(Endian.LITTLE, lambda r: r.read(kind))

    async def read_as_be(self, kind: Any) -> Any:
        """Read ``kind`` big-endian without changing this reader's order."""
        return await self._in(Endian.BIG, lambda r: r.read(kind))

    async def read_as_le_with(self, kind: Any, arg: Any) -> Any:
        """Read ``kind`` with an argument, little-endian."""
        return await self._in(Endian.LITTLE, lambda r: r.read_with(kind, arg))

    async def read_as_be_with(self, kind: Any, arg: Any) -> Any:
        """Read ``kind`` with an argument, big-endian."""
        return await self._in(Endian.BIG, lambda r: r.read_with(kind, arg))

    async def utf8_str(self, mode: Optional[StringMode] = None) -> str:
        """Read a UTF-8 string; null-terminated unless a fixed mode is given."""
        mode = mode or StringMode.null_terminated()
        if not mode.is_null_terminated:
            return await self.read_from_slice(mode.chars, decode_fixed_utf8)
        units = await self.read_while(1, lambda data: data[0] or None)
        return bytes(units).decode("utf-8", errors="replace")

    async def utf16_str(self, mode: Optional[StringMode] = None) -> str:
        """Read a UTF-16 string in this reader's order; null-terminated by default."""
        mode = mode or StringMode.null_terminated()
        if not mode.is_null_terminated:
            return await self.read_from_slice(
                2 * mode.chars, lambda data: decode_fixed_utf16(data, self.endian)
            )
        units = await self.read_while(
            2, lambda data: self.endian.unpack("H", data) or None
        )
        return Endian.LITTLE.u16s_to_bytes(units).decode("utf-16-le", errors="replace")