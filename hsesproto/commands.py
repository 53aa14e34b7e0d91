"""Typed request commands for variables, status and position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from .types import CoordinateSystemType


def _check_index(index: int) -> None:
    if not 0 <= index <= 0xFF:
        raise ValueError(f"variable index out of range: {index}")


@dataclass(frozen=True)
class ReadVar:
    """Read a variable; ``codec`` is a value codec or record class with a command id."""

    attribute: ClassVar[int] = 1

    codec: Any
    index: int

    def __post_init__(self) -> None:
        _check_index(self.index)

    @property
    def command_id(self) -> int:
        return self.codec.command_id

    @property
    def instance(self) -> int:
        """The variable number."""
        return self.index

    def serialize(self) -> bytes:
        return b""


@dataclass(frozen=True)
class WriteVar:
    """Write a variable; the payload is the value in the codec's wire form."""

    attribute: ClassVar[int] = 1

    codec: Any
    index: int
    value: Any

    def __post_init__(self) -> None:
        _check_index(self.index)

    @property
    def command_id(self) -> int:
        return self.codec.command_id

    @property
    def instance(self) -> int:
        """The variable number."""
        return self.index

    def serialize(self) -> bytes:
        # Record classes (status, position, alarm) serialize themselves;
        # codec instances serialize plain values.
        if isinstance(self.codec, type):
            return self.value.serialize()
        return self.codec.serialize(self.value)


@dataclass(frozen=True)
class ReadStatus:
    """Read both status words with Get_Attribute_All."""

    command_id: ClassVar[int] = 0x72
    instance: ClassVar[int] = 1
    attribute: ClassVar[int] = 0

    def serialize(self) -> bytes:
        return b""


@dataclass(frozen=True)
class ReadStatusData1:
    """Read status data 1."""

    command_id: ClassVar[int] = 0x72
    instance: ClassVar[int] = 1
    attribute: ClassVar[int] = 1

    def serialize(self) -> bytes:
        return b""


@dataclass(frozen=True)
class ReadStatusData2:
    """Read status data 2."""

    command_id: ClassVar[int] = 0x72
    instance: ClassVar[int] = 1
    attribute: ClassVar[int] = 2

    def serialize(self) -> bytes:
        return b""


@dataclass(frozen=True)
class ReadCurrentPosition:
    """Read the current position of a control group."""

    command_id: ClassVar[int] = 0x75
    attribute: ClassVar[int] = 1

    control_group: int
    coordinate_system: CoordinateSystemType

    def __post_init__(self) -> None:
        if not 0 <= self.control_group <= 0xFF:
            raise ValueError(f"control group out of range: {self.control_group}")

    @property
    def instance(self) -> int:
        """The control group: 1-2 for robots, 11-12 for bases and so on."""
        return self.control_group

    def serialize(self) -> bytes:
        return b""