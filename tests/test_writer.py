import io

import pytest

from rwbin.endian import Endian
from rwbin.errors import WriteError
from rwbin.kinds import ArrayOf, Kind
from rwbin.strings import StringMode
from rwbin.writer import BinaryWriter


def _le():
    buf = io.BytesIO()
    return buf, BinaryWriter.new_le(buf)


def _be():
    buf = io.BytesIO()
    return buf, BinaryWriter.new_be(buf)


class _Pair:
    def __init__(self, a, b):
        self.a = a
        self.b = b

    def write_to(self, writer):
        writer.u8(self.a)
        writer.u16(self.b)

    def write_to_with(self, writer, extra):
        self.write_to(writer)
        writer.u8(extra)


class _BrokenStream:
    def write(self, data):
        raise OSError("disk full")

    def flush(self):
        raise OSError("disk full")


def test_binary_writer():
    buf, writer = _le()
    writer.write(0x01, Kind.U8)
    writer.write(0x0203, Kind.I16)
    writer.write(0x04050607, Kind.U32)
    writer.write(0x08090A0B0C0D0E0F, Kind.U64)
    assert buf.getvalue() == bytes(
        [0x01, 0x03, 0x02, 0x07, 0x06, 0x05, 0x04,
         0x0F, 0x0E, 0x0D, 0x0C, 0x0B, 0x0A, 0x09, 0x08]
    )


def test_immediate_write():
    buf, writer = _le()
    writer.write_as_be(0x0102, Kind.U16)
    writer.write(0x0304, Kind.U16)
    assert buf.getvalue() == bytes([0x01, 0x02, 0x04, 0x03])
    assert writer.endian is Endian.LITTLE


def test_binary_writer_tuple():
    buf, writer = _le()
    writer.write((0x01, 0x0203), (Kind.U8, Kind.I16))
    writer.write((0x04050607, 0x08090A0B0C0D0E0F), (Kind.U32, Kind.U64))
    writer.write([0x0001, 0x0203], Kind.U16)
    assert buf.getvalue() == bytes(
        [0x01, 0x03, 0x02, 0x07, 0x06, 0x05, 0x04, 0x0F, 0x0E, 0x0D,
         0x0C, 0x0B, 0x0A, 0x09, 0x08, 0x01, 0x00, 0x03, 0x02]
    )


def test_write_strings():
    buf, writer = _le()
    writer.utf8_str("Hello", StringMode.null_terminated())
    writer.utf16_str("World", StringMode.null_terminated())
    assert buf.getvalue() == b"Hello\0W\0o\0r\0l\0d\0\0\0"


def test_fixed_strings_big_endian():
    buf, writer = _be()
    writer.utf8_str("Hello", StringMode.fixed(10))
    writer.utf16_str("World", StringMode.fixed(6))
    assert buf.getvalue() == (
        b"Hello\0\0\0\0\0" + b"\0W\0o\0r\0l\0d\0\0"
    )


def test_fixed_string_too_long():
    buf, writer = _le()
    with pytest.raises(WriteError):
        writer.utf8_str("Hello", StringMode.fixed(4))
    with pytest.raises(WriteError):
        writer.utf16_str("Hello", StringMode.fixed(4))
    assert buf.getvalue() == b""


def test_layout_sequence_big_endian():
    buf, writer = _be()
    writer.write(29, Kind.U8)
    writer.fill_aligned(4, 1)
    writer.write(bytes([1, 2, 3, 4]))
    writer.reserved(0, 1)
    writer.write((0x56, 0x789A), (Kind.U8, Kind.U16))
    writer.write(0x12345678, Kind.U32)
    writer.flush()
    assert buf.getvalue() == bytes(
        [29, 0, 0, 0, 1, 2, 3, 4, 0, 0x56, 0x78, 0x9A, 0x12, 0x34, 0x56, 0x78]
    )


def test_fill_aligned_when_already_aligned_writes_full_block():
    buf, writer = _le()
    writer.fill_aligned(4, 8)
    assert buf.getvalue() == b"\0\0\0\0"


def test_reserved_value():
    buf, writer = _le()
    writer.reserved(0xAB, 3)
    assert buf.getvalue() == b"\xab\xab\xab"
    with pytest.raises(ValueError):
        writer.reserved(256, 1)


@pytest.mark.parametrize(
    "method,value,expected",
    [
        ("u8", 0xFF, b"\xff"),
        ("i8", -1, b"\xff"),
        ("i16", -2, b"\xfe\xff"),
        ("i32", -42, b"\xd6\xff\xff\xff"),
        ("f32", 1.0, b"\x00\x00\x80\x3f"),
        ("f64", 1.0, b"\x00\x00\x00\x00\x00\x00\xf0\x3f"),
        ("i64", -1, b"\xff" * 8),
    ],
)
def test_primitive_methods(method, value, expected):
    buf, writer = _le()
    getattr(writer, method)(value)
    assert buf.getvalue() == expected


def test_out_of_range_raises():
    _, writer = _le()
    with pytest.raises(ValueError):
        writer.u8(256)
    with pytest.raises(ValueError):
        writer.u16(-1)


def test_bool_char_and_none():
    buf, writer = _be()
    writer.write(True, Kind.BOOL)
    writer.write(False, Kind.BOOL)
    writer.write("A", Kind.CHAR)
    writer.write(None, Kind.U32)
    assert buf.getvalue() == b"\x01\x00\x00\x00\x00\x41"


def test_array_of():
    buf, writer = _be()
    writer.write([(1.0, 2.0), (3.0, 4.0)], ArrayOf((Kind.F32, Kind.F32), 2))
    assert buf.getvalue() == (
        b"\x3f\x80\x00\x00\x40\x00\x00\x00\x40\x40\x00\x00\x40\x80\x00\x00"
    )
    with pytest.raises(ValueError):
        writer.write([1, 2, 3], ArrayOf(Kind.U8, 2))


def test_custom_objects():
    buf, writer = _le()
    writer.write(_Pair(1, 0x0203))
    writer.write_with(_Pair(4, 0x0506), 7)
    assert buf.getvalue() == bytes([1, 3, 2, 4, 6, 5, 7])


def test_write_as_be_with_and_le_with():
    buf, writer = _le()
    writer.write_as_be_with(_Pair(1, 0x0203), 9)
    writer.write_as_le_with(_Pair(1, 0x0203), 9)
    assert buf.getvalue() == bytes([1, 2, 3, 9, 1, 3, 2, 9])


def test_write_as_le_from_big_endian():
    buf, writer = _be()
    writer.write_as_le(0x01020304, Kind.U32)
    writer.write(0x0506, Kind.U16)
    assert buf.getvalue() == bytes([4, 3, 2, 1, 5, 6])


def test_unknown_value_without_kind():
    _, writer = _le()
    with pytest.raises(TypeError):
        writer.write(3)


def test_io_error_becomes_write_error():
    writer = BinaryWriter(_BrokenStream(), Endian.LITTLE)
    with pytest.raises(WriteError):
        writer.u32(1)
    with pytest.raises(WriteError):
        writer.flush()


def test_file_round_trip(tmp_path):
    path = tmp_path / "test.bin"
    with path.open("wb") as handle:
        writer = BinaryWriter.new_le(handle)
        writer.u32(0xDEADBEEF)
        writer.i16(-42)
        writer.flush()
    assert path.read_bytes() == b"\xef\xbe\xad\xde\xd6\xff"