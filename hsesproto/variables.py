"""Wire codecs for the basic variable types."""

from __future__ import annotations

import struct
from typing import ClassVar

from .errors import SerializationError, UnderflowError

_I32 = struct.Struct("<i")
_F32 = struct.Struct("<f")


def _require(data: bytes, size: int) -> None:
    if len(data) < size:
        raise UnderflowError()


class ByteCodec:
    """Byte variable: one value byte padded to four."""

    command_id: ClassVar[int] = 0x7A

    def serialize(self, value: int) -> bytes:
        if not 0 <= value <= 0xFF:
            raise SerializationError(f"byte value out of range: {value}")
        return bytes((value, 0, 0, 0))

    def deserialize(self, data: bytes) -> int:
        _require(data, 4)
        return data[0]


class IntegerCodec:
    """Integer variable: signed 32-bit little-endian."""

    command_id: ClassVar[int] = 0x7B

    def serialize(self, value: int) -> bytes:
        try:
            return _I32.pack(value)
        except struct.error as exc:
            raise SerializationError(str(exc)) from exc

    def deserialize(self, data: bytes) -> int:
        _require(data, 4)
        return _I32.unpack_from(data)[0]


class RealCodec:
    """Real variable: 32-bit little-endian float."""

    command_id: ClassVar[int] = 0x7D

    def serialize(self, value: float) -> bytes:
        try:
            return _F32.pack(value)
        except (struct.error, OverflowError) as exc:
            raise SerializationError(str(exc)) from exc

    def deserialize(self, data: bytes) -> float:
        _require(data, 4)
        return _F32.unpack_from(data)[0]


class UnitCodec:
    """Empty value used for writes that return nothing."""

    command_id: ClassVar[int] = 0x00

    def serialize(self, value: None = None) -> bytes:
        return b""

    def deserialize(self, data: bytes) -> None:
        return None


BYTE = ByteCodec()
INTEGER = IntegerCodec()
REAL = RealCodec()
UNIT = UnitCodec()