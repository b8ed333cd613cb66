from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

UNKNOWN_LABEL = "Unknown"

# opaque, assigned by the store
SlotId = Union[int, str]


@dataclass(frozen=True)
class DecodedSlot:
    day: str
    hour: str

    UNKNOWN: ClassVar["DecodedSlot"]

    @property
    def is_known(self) -> bool:
        return self != DecodedSlot.UNKNOWN


DecodedSlot.UNKNOWN = DecodedSlot(UNKNOWN_LABEL, UNKNOWN_LABEL)


@dataclass(frozen=True, order=True)
class TimeRange:
    """Weekly meeting: start hour inclusive, end hour exclusive."""
    start_time_id: int
    end_time_id: int


@dataclass(frozen=True)
class CourseTimeSlot:
    """A time range attached to a course; id is None until the store confirms it."""
    start_time_id: int
    end_time_id: int
    id: Optional[SlotId] = None

    @property
    def is_draft(self) -> bool:
        return self.id is None

    @property
    def range(self) -> TimeRange:
        return TimeRange(self.start_time_id, self.end_time_id)

    @classmethod
    def draft(cls, time_range: TimeRange) -> "CourseTimeSlot":
        return cls(start_time_id=time_range.start_time_id, end_time_id=time_range.end_time_id)
