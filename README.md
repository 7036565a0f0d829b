# rwbin

rwbin reads and writes binary data in a byte order that you choose. It works
with ordinary file-like objects and with asyncio streams. It has no
dependencies outside the standard library.

It handles these kinds of values:

- 8, 16, 32 and 64-bit integers, both signed and unsigned
- 32 and 64-bit floats
- booleans and characters
- tuples, fixed-size arrays, lists and optional values
- UTF-8 and UTF-16 strings
- your own types, through a few hook methods

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Writing

```python
import io
from rwbin.writer import BinaryWriter

buf = io.BytesIO()
w = BinaryWriter.new_le(buf)      # or BinaryWriter.new_be(buf)
w.u32(0xDEADBEEF)
w.i16(-123)
w.flush()
```

You can also construct a writer directly with `BinaryWriter(stream, endian)`.
The `endian` argument is `Endian.LITTLE` or `Endian.BIG`, both from
`rwbin.endian`.

There is one method for each primitive: `u8`, `i8`, `u16`, `i16`, `u32`,
`i32`, `f32`, `u64`, `i64` and `f64`. A value that does not fit its type
raises `ValueError`.

The writer also has these methods:

- `reserved(value, length)` writes `length` copies of the byte `value`.
- `fill_aligned(alignment, offset)` writes zero bytes from `offset` up to the next multiple of `alignment`. If `offset` is already aligned, it writes a whole block of `alignment` zero bytes.
- `write(value, kind=None)` writes a value described by a kind (see below).
  - If `value` is `None`, nothing is written.
  - If no kind is given, bytes-like values are written unchanged.
  - If no kind is given and the object has a `write_to(writer)` method, that method is called.
- `write_with(value, arg)` calls `value.write_to_with(writer, arg)`.
- `write_as_le` / `write_as_be` (and the `_with` forms) write one value in a given byte order. They do not change the writer's own order.
- `flush()` flushes the stream, if the stream has a `flush` method.

If the stream raises `OSError`, the writer raises `rwbin.errors.WriteError`
instead.

## Kinds

A kind tells the reader or writer how a value is laid out. Kinds come from
`rwbin.kinds`:

- A `Kind` member: `U8`, `I8`, `U16`, `I16`, `U32`, `I32`, `F32`, `U64`, `I64`, `F64`, `BOOL` or `CHAR`.
  - `BOOL` is one byte, 0 or 1.
  - `CHAR` is a 32-bit code point.
  - When writing, a list or tuple given with a single `Kind` is written element by element.
- `ArrayOf(kind, count)` is a fixed number of consecutive values. It reads as a list.
- A tuple of kinds, such as `(Kind.U8, Kind.U16)`, reads and writes a tuple of values.

```python
from rwbin.kinds import ArrayOf, Kind

w.write((1, 0x0203), (Kind.U8, Kind.U16))
w.write([1.0, 2.0], ArrayOf(Kind.F32, 2))
w.write_as_be(0x0102, Kind.U16)
```

## Reading

```python
from rwbin.reader import BinaryReader

r = BinaryReader.from_le_bytes(buf.getvalue())
assert r.u32() == 0xDEADBEEF
assert r.i16() == -123
```

You can create a reader in several ways:

- `from_le_bytes(data)` and `from_be_bytes(data)` read from memory. The reader is limited to the length of the data.
- `new_le(stream)` and `new_be(stream)` wrap any object with a `read(n)` method. These readers have no limit.
- `BinaryReader(stream, endian, limit)` sets everything explicitly.

The reader counts the bytes it has consumed in `total_bytes_read`. It raises
these errors from `rwbin.errors`:

- `NotEnoughBytesError` is raised if a read would pass the limit. It is raised before the stream is touched, and it carries `expected` and `actual`.
- `ReadError` is raised if the stream runs dry or fails.
- `InvalidDataFormatError` is raised for content that is not valid.

The two specific errors are subclasses of `ReadError`.

The reader has these methods:

- The primitive methods `u8` … `f64`.
- `read(kind)` reads one value of a kind. You can also pass a class that has a `read_from(reader)` method.
- `read_with(kind, arg)` calls `kind.read_from_with(reader, arg)`.
- `read_list(kind, count)` reads a list of values.
- `read_optional(kind, present)` reads a value only if `present` is true. Otherwise it returns `None`.
- `value(kind, expected)` and `values(kind, expected)` check that the next values equal the ones expected.
- `reserved(length, expected)` checks that the next `length` bytes all equal `expected`.
- `skip(length)` moves past `length` bytes.
- `skip_aligned(align)` skips up to the next multiple of `align` bytes read.
- `read_partial(length, kind)` and `read_partial_with(length, kind, arg)` limit a nested read to the next `length` bytes.
- `read_as_le` / `read_as_be` (and the `_with` forms) read one value in a given byte order.
- `read_from_slice(length, parse)` and `read_while(size, try_parse)` are building blocks for custom formats. `read_while` stops when `try_parse` returns `None`.

## Strings

`rwbin.strings.StringMode` sets how a string is laid out:

- `StringMode.fixed(n)` is a field of `n` code units, padded with zeros. Reading stops at the first zero.
- `StringMode.null_terminated()` ends the string with a zero unit. This is the default when no mode is given.

```python
from rwbin.strings import StringMode

w.utf8_str("Hello", StringMode.null_terminated())
w.utf16_str("World", StringMode.fixed(8))
```

Writing a string that is longer than its fixed field raises `WriteError`.
When reading, invalid byte sequences are replaced with U+FFFD. UTF-16 uses
the byte order of the reader or writer.

The module also provides the underlying functions: `encode_utf8`,
`encode_utf16`, `decode_fixed_utf8` and `decode_fixed_utf16`.

## Asynchronous use

`rwbin.async_reader.AsyncBinaryReader` and
`rwbin.async_writer.AsyncBinaryWriter` offer the same operations as
coroutines.

The reader needs a stream with a coroutine `read(n)`, such as
`asyncio.StreamReader`. You can also use `from_le_bytes` / `from_be_bytes`
to read from memory.

The writer needs a stream with a `write(data)` method, which may be plain or
a coroutine. `flush()` awaits `drain()` and calls `flush()` wherever the
stream has them.

Custom types use different hook names in async code:

- `read_from_async` and `read_from_async_with` for reading
- `write_to_async` and `write_to_async_with` for writing

```python
from rwbin.async_reader import AsyncBinaryReader

async def main():
    r = AsyncBinaryReader.from_be_bytes(bytes([0, 1, 0, 2]))
    assert await r.u16() == 1
    assert await r.u16() == 2
```

## Custom types

```python
from rwbin.kinds import ArrayOf, Kind
from rwbin.strings import StringMode

class Record:
    def __init__(self, points, name):
        self.points, self.name = points, name

    @classmethod
    def read_from(cls, reader):
        points = reader.read(ArrayOf((Kind.F32, Kind.F32), 2))
        return cls(points, reader.utf8_str(StringMode.fixed(8)))

    def write_to(self, writer):
        writer.write(self.points, ArrayOf((Kind.F32, Kind.F32), 2))
        writer.utf8_str(self.name, StringMode.fixed(8))
```

With this class, `writer.write(record)` writes a record and
`reader.read(Record)` reads one back.