"""Commands that read the current alarms and the alarm history."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar


class AlarmCategory(enum.Enum):
    """Alarm history categories, keyed by the instance ranges they occupy."""

    MAJOR_FAILURE = "major_failure"
    MONITOR_ALARM = "monitor_alarm"
    USER_ALARM_SYSTEM = "user_alarm_system"
    USER_ALARM_USER = "user_alarm_user"
    OFFLINE_ALARM = "offline_alarm"
    INVALID = "invalid"


# First instance of each category; every category spans 100 instances.
_CATEGORY_BASES = (
    (1, AlarmCategory.MAJOR_FAILURE),
    (1001, AlarmCategory.MONITOR_ALARM),
    (2001, AlarmCategory.USER_ALARM_SYSTEM),
    (3001, AlarmCategory.USER_ALARM_USER),
    (4001, AlarmCategory.OFFLINE_ALARM),
)
_CATEGORY_SPAN = 100


def _check_fields(instance: int, attribute: int) -> None:
    if not 0 <= instance <= 0xFFFF:
        raise ValueError(f"instance out of range: {instance}")
    if not 0 <= attribute <= 0xFF:
        raise ValueError(f"attribute out of range: {attribute}")


@dataclass(frozen=True)
class ReadAlarmData:
    """Read the controller's current alarm data (command 0x70)."""

    command_id: ClassVar[int] = 0x70

    instance: int
    attribute: int

    def __post_init__(self) -> None:
        _check_fields(self.instance, self.attribute)

    def serialize(self) -> bytes:
        """The request carries no payload; the sub-header says what to read."""
        return b""


@dataclass(frozen=True)
class ReadAlarmHistory:
    """Read an entry of the alarm history (command 0x71)."""

    command_id: ClassVar[int] = 0x71

    instance: int
    attribute: int

    def __post_init__(self) -> None:
        _check_fields(self.instance, self.attribute)

    def serialize(self) -> bytes:
        """The request carries no payload; the sub-header says what to read."""
        return b""

    def _base(self) -> tuple[int, AlarmCategory] | None:
        for base, category in _CATEGORY_BASES:
            if base <= self.instance < base + _CATEGORY_SPAN:
                return base, category
        return None

    def is_valid_instance(self) -> bool:
        """Whether the instance falls in one of the history ranges."""
        return self._base() is not None

    def get_alarm_category(self) -> AlarmCategory:
        """The category the instance belongs to."""
        found = self._base()
        return AlarmCategory.INVALID if found is None else found[1]

    def get_alarm_index(self) -> int:
        """The zero-based position within the category; 0 when invalid."""
        found = self._base()
        return 0 if found is None else self.instance - found[0]