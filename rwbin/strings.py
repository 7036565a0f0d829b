"""String layouts and the UTF-8 / UTF-16 encodings used by readers and writers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .endian import Endian
from .errors import WriteError

_TOO_LONG = "String is too long for fixed size"
_UTF16_UNIT = 2


@dataclass(frozen=True)
class StringMode:
    """How a string is laid out: a fixed number of characters, or null-terminated."""

    chars: Optional[int] = None

    def __post_init__(self) -> None:
        if self.chars is not None and self.chars < 0:
            raise ValueError(f"character count must not be negative: {self.chars}")

    @classmethod
    def fixed(cls, chars: int) -> StringMode:
        """A field of exactly ``chars`` code units, padded with zeros."""
        return cls(chars)

    @classmethod
    def null_terminated(cls) -> StringMode:
        """A string ended by a zero code unit."""
        return cls(None)

    @property
    def is_null_terminated(self) -> bool:
        return self.chars is None


def decode_fixed_utf8(data: bytes) -> str:
    """Decode UTF-8 up to the first zero byte, replacing invalid sequences."""
    end = data.find(0)
    if end < 0:
        end = len(data)
    return bytes(data[:end]).decode("utf-8", errors="replace")


def decode_fixed_utf16(data: bytes, endian: Endian) -> str:
    """Decode UTF-16 up to the first zero unit, replacing invalid sequences."""
    units = endian.u16s_from_bytes(data)
    if 0 in units:
        units = units[: units.index(0)]
    return Endian.LITTLE.u16s_to_bytes(units).decode("utf-16-le", errors="replace")


def encode_utf8(value: str, mode: StringMode) -> bytes:
    """Encode a string as UTF-8 in the given layout."""
    encoded = value.encode("utf-8")
    if mode.is_null_terminated:
        return encoded + b"\x00"
    if len(encoded) > mode.chars:
        raise WriteError(_TOO_LONG)
    return encoded.ljust(mode.chars, b"\x00")


def encode_utf16(value: str, endian: Endian, mode: StringMode) -> bytes:
    """Encode a string as UTF-16 in the given byte order and layout."""
    codec = "utf-16-le" if endian is Endian.LITTLE else "utf-16-be"
    encoded = value.encode(codec, errors="surrogatepass")
    if mode.is_null_terminated:
        return encoded + b"\x00" * _UTF16_UNIT
    size = mode.chars * _UTF16_UNIT
    if len(encoded) > size:
        raise WriteError(_TOO_LONG)
    return encoded.ljust(size, b"\x00")