"""Alarm records, their wire layout and a few sample alarms."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, replace
from typing import ClassVar

from .errors import DeserializationError, InvalidAttributeError, SerializationError

_U32 = struct.Struct("<I")

# Alarm time and name: the part of a record that deserialize reads back.
_MIN_RECORD_SIZE = 60


class AlarmAttribute(enum.IntEnum):
    """Attribute numbers of an alarm record."""

    CODE = 1
    DATA = 2
    TYPE = 3
    TIME = 4
    NAME = 5
    SUB_CODE_INFO = 6
    SUB_CODE_DATA = 7
    SUB_CODE_REVERSE = 8

    @classmethod
    def from_value(cls, value: int) -> AlarmAttribute:
        """Return the attribute for ``value``; unknown values map to CODE."""
        try:
            return cls(value)
        except ValueError:
            return cls.CODE


_INT_FIELDS = {
    AlarmAttribute.CODE: "code",
    AlarmAttribute.DATA: "data",
    AlarmAttribute.TYPE: "alarm_type",
}

_TEXT_FIELDS = {
    AlarmAttribute.TIME: ("time", 16),
    AlarmAttribute.NAME: ("name", 32),
    AlarmAttribute.SUB_CODE_INFO: ("sub_code_info", 16),
    AlarmAttribute.SUB_CODE_DATA: ("sub_code_data", 96),
    AlarmAttribute.SUB_CODE_REVERSE: ("sub_code_reverse", 96),
}


def _padded(text: str, size: int) -> bytes:
    raw = text.encode("utf-8")[:size]
    return raw.ljust(size, b"\x00")


def _text(raw: bytes) -> str:
    end = raw.find(b"\x00")
    if end != -1:
        raw = raw[:end]
    return raw.decode("utf-8", errors="replace")


@dataclass
class Alarm:
    """One alarm as reported by the controller."""

    command_id: ClassVar[int] = 0x70

    code: int
    data: int
    alarm_type: int
    time: str
    name: str
    sub_code_info: str = ""
    sub_code_data: str = ""
    sub_code_reverse: str = ""

    @classmethod
    def default(cls) -> Alarm:
        """The placeholder alarm reported when no alarm is present."""
        return cls(0, 0, 0, "2024/01/01 00:00", "No Alarm")

    def with_sub_code(self, info: str, data: str, reverse: str) -> Alarm:
        """Return a copy of this alarm carrying the given sub-code texts."""
        return replace(
            self, sub_code_info=info, sub_code_data=data, sub_code_reverse=reverse
        )

    def serialize(self, attribute: int) -> bytes:
        """Encode a single attribute of the alarm."""
        try:
            attr = AlarmAttribute(attribute)
        except ValueError:
            raise InvalidAttributeError() from None
        if attr in _INT_FIELDS:
            value = getattr(self, _INT_FIELDS[attr])
            try:
                return _U32.pack(value)
            except struct.error as exc:
                raise SerializationError(str(exc)) from exc
        name, size = _TEXT_FIELDS[attr]
        return _padded(getattr(self, name), size)

    def serialize_complete(self) -> bytes:
        """Encode every attribute in order: a 268-byte record."""
        return b"".join(self.serialize(attr) for attr in AlarmAttribute)

    @classmethod
    def deserialize(cls, data: bytes) -> Alarm:
        """Decode code, data, type, time and name from an alarm record."""
        data = bytes(data)
        if len(data) < _MIN_RECORD_SIZE:
            raise DeserializationError("Insufficient data length")
        code, alarm_data, alarm_type = struct.unpack_from("<3I", data)
        return cls(
            code=code,
            data=alarm_data,
            alarm_type=alarm_type,
            time=_text(data[12:28]),
            name=_text(data[28:60]),
        )


def servo_error() -> Alarm:
    """Sample servo amplifier alarm."""
    return Alarm(1001, 1, 1, "2024/01/01 12:00", "Servo Error").with_sub_code(
        "[SV#1]", "Servo amplifier error", "0"
    )


def emergency_stop() -> Alarm:
    """Sample emergency stop alarm."""
    return Alarm(2001, 0, 0, "2024/01/01 12:01", "Emergency Stop")


def safety_error() -> Alarm:
    """Sample safety circuit alarm."""
    return Alarm(3001, 2, 2, "2024/01/01 12:02", "Safety Error").with_sub_code(
        "[SV#2]", "Safety circuit error", "1"
    )


def communication_error() -> Alarm:
    """Sample network communication alarm."""
    return Alarm(4001, 3, 3, "2024/01/01 12:03", "Communication Error").with_sub_code(
        "[COM#1]", "Network communication error", "2"
    )