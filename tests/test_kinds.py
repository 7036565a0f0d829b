import pytest

from rwbin.endian import Endian
from rwbin.errors import InvalidDataFormatError, NotEnoughBytesError
from rwbin.kinds import ArrayOf, Kind

DATA = bytes([0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07, 0x08])


@pytest.mark.parametrize(
    "kind,little,big",
    [
        (Kind.U8, 0x01, 0x01),
        (Kind.U16, 0x0201, 0x0102),
        (Kind.U32, 0x04030201, 0x01020304),
        (Kind.U64, 0x0807060504030201, 0x0102030405060708),
        (Kind.I8, 0x01, 0x01),
        (Kind.I16, 0x0201, 0x0102),
        (Kind.I32, 0x04030201, 0x01020304),
        (Kind.I64, 0x0807060504030201, 0x0102030405060708),
    ],
)
def test_decode_integers(kind, little, big):
    data = DATA[: kind.size]
    assert kind.decode(data, Endian.LITTLE) == little
    assert kind.decode(data, Endian.BIG) == big


def test_decode_floats():
    assert Kind.F32.decode(bytes([0x00, 0x00, 0x80, 0x3F]), Endian.LITTLE) == 1.0
    assert Kind.F64.decode(bytes([0x3F, 0xF0, 0, 0, 0, 0, 0, 0]), Endian.BIG) == 1.0


def test_encode_matches_wire_bytes():
    assert Kind.I16.encode(0x0203, Endian.LITTLE) == bytes([0x03, 0x02])
    assert Kind.U32.encode(0x04050607, Endian.LITTLE) == bytes([0x07, 0x06, 0x05, 0x04])
    assert Kind.U32.encode(0x12345678, Endian.BIG) == bytes([0x12, 0x34, 0x56, 0x78])


@pytest.mark.parametrize("endian", list(Endian))
@pytest.mark.parametrize(
    "kind,value",
    [
        (Kind.U8, 29),
        (Kind.I8, -1),
        (Kind.I16, -42),
        (Kind.U32, 0xDEADBEEF),
        (Kind.I64, -123),
        (Kind.F64, 0.5),
        (Kind.BOOL, True),
        (Kind.BOOL, False),
        (Kind.CHAR, "H"),
        (Kind.CHAR, "\U0001F600"),
    ],
)
def test_round_trip(kind, endian, value):
    encoded = kind.encode(value, endian)
    assert len(encoded) == kind.size
    assert kind.decode(encoded, endian) == value


def test_bool_rejects_other_bytes():
    with pytest.raises(InvalidDataFormatError):
        Kind.BOOL.decode(b"\x02", Endian.LITTLE)


@pytest.mark.parametrize("raw", [0xD800, 0x110000])
def test_char_rejects_invalid_code_points(raw):
    with pytest.raises(InvalidDataFormatError):
        Kind.CHAR.decode(Kind.U32.encode(raw, Endian.BIG), Endian.BIG)


def test_decode_short_data_raises():
    with pytest.raises(NotEnoughBytesError) as info:
        Kind.U32.decode(DATA[:2], Endian.LITTLE)
    assert info.value.expected == Kind.U32.size
    assert info.value.actual == 2


def test_decode_long_data_raises():
    with pytest.raises(ValueError):
        Kind.U16.decode(DATA[:3], Endian.LITTLE)


@pytest.mark.parametrize("kind,value", [(Kind.U8, 256), (Kind.I8, -129), (Kind.U16, -1)])
def test_encode_out_of_range(kind, value):
    with pytest.raises(ValueError):
        kind.encode(value, Endian.LITTLE)


def test_array_size_and_validation():
    assert ArrayOf(Kind.U16, 2).size == Kind.U16.size * 2
    assert ArrayOf(ArrayOf(Kind.U8, 3), 2).size == 2 * 3 * Kind.U8.size
    with pytest.raises(ValueError):
        ArrayOf(Kind.U8, -1)
    with pytest.raises(TypeError):
        _ = ArrayOf((Kind.U8, Kind.U16), 2).size