"""Robot position data: pulse and cartesian forms and their wire layout."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import ClassVar, Union

from .errors import PositionError, SerializationError, UnderflowError
from .types import CoordinateSystem

PULSE_TYPE = 0
CARTESIAN_TYPE = 16
JOINT_COUNT = 8
POSITION_SIZE = 52

_PULSE = struct.Struct("<5I8i")
_CARTESIAN = struct.Struct("<5I6f2I")
_TYPE = struct.Struct("<I")
_F32 = struct.Struct("<f")

# Cartesian values travel in thousandths of the unit held here.
_SCALE = 1000.0


def _to_f32(value: float) -> float:
    return _F32.unpack(_F32.pack(value))[0]


def _pack(layout: struct.Struct, *values: object) -> bytes:
    try:
        return layout.pack(*values)
    except (struct.error, OverflowError) as exc:
        raise SerializationError(str(exc)) from exc


@dataclass
class PulsePosition:
    """Joint angles in encoder pulses for one control group."""

    command_id: ClassVar[int] = 0x7F

    joints: tuple[int, ...]
    control_group: int

    def __post_init__(self) -> None:
        self.joints = tuple(self.joints)
        if len(self.joints) != JOINT_COUNT:
            raise ValueError(
                f"expected {JOINT_COUNT} joints, got {len(self.joints)}"
            )

    def serialize(self) -> bytes:
        """Encode as the 52-byte position record."""
        return _pack(_PULSE, PULSE_TYPE, 0, self.control_group, 0, 0, *self.joints)


@dataclass
class CartesianPosition:
    """A tool pose in cartesian space."""

    command_id: ClassVar[int] = 0x7F

    x: float
    y: float
    z: float
    rx: float
    ry: float
    rz: float
    tool_no: int
    user_coord_no: int
    coordinate_system: CoordinateSystem = field(default=CoordinateSystem.BASE)

    def serialize(self) -> bytes:
        """Encode as the 52-byte position record."""
        scaled = (
            v * _SCALE for v in (self.x, self.y, self.z, self.rx, self.ry, self.rz)
        )
        return _pack(
            _CARTESIAN,
            CARTESIAN_TYPE,
            0,
            self.tool_no,
            self.user_coord_no,
            0,
            *scaled,
            0,
            0,
        )


Position = Union[PulsePosition, CartesianPosition]


def deserialize_position(data: bytes) -> Position:
    """Decode a 52-byte position record into a pulse or cartesian position."""
    data = bytes(data)
    if len(data) < POSITION_SIZE:
        raise UnderflowError()
    (position_type,) = _TYPE.unpack_from(data)
    if position_type == PULSE_TYPE:
        fields = _PULSE.unpack_from(data)
        return PulsePosition(fields[5:], fields[2] & 0xFF)
    if position_type == CARTESIAN_TYPE:
        fields = _CARTESIAN.unpack_from(data)
        x, y, z, rx, ry, rz = (_to_f32(v / _SCALE) for v in fields[5:11])
        return CartesianPosition(
            x,
            y,
            z,
            rx,
            ry,
            rz,
            fields[2] & 0xFF,
            fields[3] & 0xFF,
            CoordinateSystem.BASE,
        )
    raise PositionError(f"Unknown position type: {position_type}")