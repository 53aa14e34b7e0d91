"""Controller status words and their decoded flags."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar

from .errors import UnderflowError

_DATA1_BITS = {
    "step": 0x0001,
    "one_cycle": 0x0002,
    "continuous": 0x0004,
    "running": 0x0008,
    "speed_limited": 0x0010,
    "teach": 0x0020,
    "play": 0x0040,
    "remote": 0x0080,
}

_DATA2_BITS = {
    "teach_pendant_hold": 0x0002,
    "external_hold": 0x0004,
    "command_hold": 0x0008,
    "alarm": 0x0010,
    "error": 0x0020,
    "servo_on": 0x0040,
}


def _read_word(data: bytes) -> int:
    if len(data) < 2:
        raise UnderflowError()
    return int.from_bytes(bytes(data[:2]), "little")


def _flags(word: int, bits: dict[str, int]) -> dict[str, bool]:
    return {name: bool(word & bit) for name, bit in bits.items()}


def _word(obj: object, bits: dict[str, int]) -> bytes:
    word = sum(bit for name, bit in bits.items() if getattr(obj, name))
    return word.to_bytes(2, "little")


@dataclass
class StatusData1:
    """Status data 1: operating mode and cycle flags."""

    command_id: ClassVar[int] = 0x72

    step: bool = False
    one_cycle: bool = False
    continuous: bool = False
    running: bool = False
    speed_limited: bool = False
    teach: bool = False
    play: bool = False
    remote: bool = False

    @classmethod
    def from_bytes(cls, data: bytes) -> StatusData1:
        return cls(**_flags(_read_word(data), _DATA1_BITS))

    def serialize(self) -> bytes:
        return _word(self, _DATA1_BITS)


@dataclass
class StatusData2:
    """Status data 2: hold, alarm, error and servo flags."""

    command_id: ClassVar[int] = 0x72

    teach_pendant_hold: bool = False
    external_hold: bool = False
    command_hold: bool = False
    alarm: bool = False
    error: bool = False
    servo_on: bool = False

    @classmethod
    def from_bytes(cls, data: bytes) -> StatusData2:
        return cls(**_flags(_read_word(data), _DATA2_BITS))

    def serialize(self) -> bytes:
        return _word(self, _DATA2_BITS)


@dataclass
class Status:
    """Both status words of the controller."""

    command_id: ClassVar[int] = 0x72

    data1: StatusData1
    data2: StatusData2

    @classmethod
    def from_bytes(cls, data: bytes) -> Status:
        if len(data) < 4:
            raise UnderflowError()
        return cls(StatusData1.from_bytes(data[0:2]), StatusData2.from_bytes(data[2:4]))

    def serialize(self) -> bytes:
        return self.data1.serialize() + self.data2.serialize()

    def is_running(self) -> bool:
        return self.data1.running

    def is_servo_on(self) -> bool:
        return self.data2.servo_on

    def has_alarm(self) -> bool:
        return self.data2.alarm

    def is_teach_mode(self) -> bool:
        return self.data1.teach

    def is_play_mode(self) -> bool:
        return self.data1.play

    def is_remote_mode(self) -> bool:
        return self.data1.remote

    def has_error(self) -> bool:
        return self.data2.error


__all__ = [name for name in ("Status", "StatusData1", "StatusData2")]
_ = fields