"""Byte order selection and conversion of numbers to and from bytes."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from enum import Enum
from typing import Any


class Endian(Enum):
    """Byte order of multi-byte values."""

    LITTLE = "<"
    BIG = ">"

    @property
    def prefix(self) -> str:
        """The struct byte-order prefix for this order."""
        return self.value

    def pack(self, fmt: str, value: Any) -> bytes:
        """Pack one value using a struct format code in this byte order."""
        return struct.pack(self.prefix + fmt, value)

    def unpack(self, fmt: str, data: bytes) -> Any:
        """Unpack a struct format in this byte order; a single field is returned bare."""
        values = struct.unpack(self.prefix + fmt, bytes(data))
        return values[0] if len(values) == 1 else values

    def u16s_to_bytes(self, values: Iterable[int]) -> bytes:
        """Pack a sequence of 16-bit code units."""
        units = list(values)
        return struct.pack(f"{self.prefix}{len(units)}H", *units)

    def u16s_from_bytes(self, data: bytes) -> list[int]:
        """Unpack bytes into 16-bit code units; the length must be even."""
        if len(data) % 2 != 0:
            raise ValueError(f"Invalid length for u16 array: {len(data)}")
        return list(struct.unpack(f"{self.prefix}{len(data) // 2}H", bytes(data)))