"""Basic enumerations and value types of the HSES protocol."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, ClassVar, Generic, TypeVar

DEFAULT_PORT = 10040
FILE_PORT = 10041

T = TypeVar("T")


class VarType(enum.IntEnum):
    """Variable kinds and the command ids that access them."""

    IO = 0x78
    REGISTER = 0x79
    BYTE = 0x7A
    INTEGER = 0x7B
    DOUBLE = 0x7C
    REAL = 0x7D
    STRING = 0x7E
    ROBOT_POSITION = 0x7F
    BASE_POSITION = 0x80
    EXTERNAL_AXIS = 0x81


class Division(enum.IntEnum):
    """Processing division of a message."""

    ROBOT = 1
    FILE = 2


class Service(enum.IntEnum):
    """Service codes carried in the request sub-header."""

    GET_SINGLE = 0x0E
    SET_SINGLE = 0x10
    GET_ALL = 0x01
    SET_ALL = 0x02
    READ_MULTIPLE = 0x33
    WRITE_MULTIPLE = 0x34


class CoordinateSystemKind(enum.Enum):
    """The kinds of coordinate system."""

    BASE = "base"
    ROBOT = "robot"
    TOOL = "tool"
    USER = "user"


@dataclass(frozen=True)
class CoordinateSystem:
    """A coordinate system; user systems carry their number."""

    kind: CoordinateSystemKind
    number: int = 0

    BASE: ClassVar[CoordinateSystem]
    ROBOT: ClassVar[CoordinateSystem]
    TOOL: ClassVar[CoordinateSystem]

    def __post_init__(self) -> None:
        if self.kind is CoordinateSystemKind.USER:
            if not 0 <= self.number <= 0xFF:
                raise ValueError(f"user coordinate number out of range: {self.number}")
        elif self.number != 0:
            raise ValueError(f"{self.kind.value} coordinate system takes no number")

    @classmethod
    def user(cls, number: int) -> CoordinateSystem:
        """Return the user coordinate system with the given number."""
        return cls(CoordinateSystemKind.USER, number)


CoordinateSystem.BASE = CoordinateSystem(CoordinateSystemKind.BASE)
CoordinateSystem.ROBOT = CoordinateSystem(CoordinateSystemKind.ROBOT)
CoordinateSystem.TOOL = CoordinateSystem(CoordinateSystemKind.TOOL)


class CoordinateSystemType(enum.IntEnum):
    """Coordinate system codes used when reading positions."""

    ROBOT_PULSE = 0
    BASE_PULSE = 1
    STATION_PULSE = 3
    ROBOT_CARTESIAN = 4


@dataclass
class Variable(Generic[T]):
    """A controller variable: its kind, index and value."""

    var_type: VarType
    index: int
    value: T

    def __post_init__(self) -> None:
        if not 0 <= self.index <= 0xFF:
            raise ValueError(f"variable index out of range: {self.index}")

    @classmethod
    def with_default(
        cls, var_type: VarType, index: int, factory: Callable[[], T]
    ) -> Variable[T]:
        """Create a variable whose value comes from ``factory()``."""
        return cls(var_type, index, factory())