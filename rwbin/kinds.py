"""Descriptions of the primitive values that readers and writers handle."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .endian import Endian
from .errors import InvalidDataFormatError, NotEnoughBytesError

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


class Kind(Enum):
    """A fixed-size primitive value."""

    U8 = "u8"
    I8 = "i8"
    U16 = "u16"
    I16 = "i16"
    U32 = "u32"
    I32 = "i32"
    F32 = "f32"
    U64 = "u64"
    I64 = "i64"
    F64 = "f64"
    BOOL = "bool"
    CHAR = "char"

    @property
    def code(self) -> str:
        """The struct format code of the value."""
        return _LAYOUT[self.value][0]

    @property
    def size(self) -> int:
        """The number of bytes the value occupies."""
        return _LAYOUT[self.value][1]

    def decode(self, data: bytes, endian: Endian) -> Any:
        """Decode exactly ``size`` bytes into a Python value."""
        if len(data) < self.size:
            raise NotEnoughBytesError(self.size, len(data))
        if len(data) > self.size:
            raise ValueError(f"{self.value} takes {self.size} bytes, got {len(data)}")
        raw = endian.unpack(self.code, data)
        if self is Kind.BOOL:
            if raw not in (0, 1):
                raise InvalidDataFormatError("Expected 0 or 1 for boolean")
            return raw == 1
        if self is Kind.CHAR:
            if raw > _MAX_CODE_POINT or raw in _SURROGATES:
                raise InvalidDataFormatError(f"Invalid char value: {raw}")
            return chr(raw)
        return raw

    def encode(self, value: Any, endian: Endian) -> bytes:
        """Encode a Python value into ``size`` bytes."""
        if self is Kind.BOOL:
            raw = 1 if value else 0
        elif self is Kind.CHAR:
            raw = ord(value)
        else:
            raw = value
        try:
            return endian.pack(self.code, raw)
        except struct.error as exc:
            raise ValueError(f"{value!r} cannot be encoded as {self.value}") from exc


_LAYOUT: dict[str, tuple[str, int]] = {
    "u8": ("B", 1),
    "i8": ("b", 1),
    "u16": ("H", 2),
    "i16": ("h", 2),
    "u32": ("I", 4),
    "i32": ("i", 4),
    "f32": ("f", 4),
    "u64": ("Q", 8),
    "i64": ("q", 8),
    "f64": ("d", 8),
    "bool": ("B", 1),
    "char": ("I", 4),
}


@dataclass(frozen=True)
class ArrayOf:
    """A fixed number of consecutive values of one kind."""

    kind: Any
    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"array length must not be negative: {self.count}")

    @property
    def size(self) -> int:
        """The number of bytes the array occupies, for fixed-size element kinds."""
        if isinstance(self.kind, (Kind, ArrayOf)):
            return self.kind.size * self.count
        raise TypeError(f"size of {self.kind!r} is not fixed")