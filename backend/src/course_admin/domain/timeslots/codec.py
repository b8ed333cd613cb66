# timeslots/codec.py
# Conversion between compact slot ids and (day, hour) pairs.

from __future__ import annotations

from typing import Optional, Tuple, Union

from course_admin.domain.timeslots.models import CourseTimeSlot, DecodedSlot, TimeRange
from course_admin.domain.timeslots.schedule import (
    DEFAULT_SCHEDULE,
    DayName,
    DayOffset,
    SlotSchedule,
    validate_schedule,
)


# ---------- Errors ----------

class SlotCodecError(ValueError):
    """Local validation failure, raised before anything reaches the store."""


class InvalidDayError(SlotCodecError):
    def __init__(self, day: object):
        self.day = day
        super().__init__(f"Unknown day '{day}'.")


class InvalidHourError(SlotCodecError):
    def __init__(self, hour: object, valid: Tuple[int, ...]):
        self.hour = hour
        super().__init__(f"Hour {hour!r} is outside the schedule ({valid[0]}..{valid[-1]}).")


class InvalidRangeError(SlotCodecError):
    def __init__(self, start_time_id: int, end_time_id: int, reason: str = "End time must be after start time"):
        self.start_time_id = start_time_id
        self.end_time_id = end_time_id
        super().__init__(f"{reason} (start={start_time_id}, end={end_time_id}).")


class OutOfRangeError(SlotCodecError):
    def __init__(self, slot_id: object):
        self.slot_id = slot_id
        super().__init__(f"Slot id {slot_id!r} does not belong to any day.")


# ---------- Codec ----------

class SlotCodec:
    def __init__(self, schedule: SlotSchedule = DEFAULT_SCHEDULE) -> None:
        self._schedule = validate_schedule(schedule)
        self._labels = schedule.hour_labels()
        self._hours = schedule.hours()

    @property
    def schedule(self) -> SlotSchedule:
        return self._schedule

    def _lookup(self, slot_id: object) -> Optional[Tuple[DayOffset, int]]:
        # bool is an int subclass but never a valid id
        if not isinstance(slot_id, int) or isinstance(slot_id, bool):
            return None
        for day in self._schedule.days:
            hour_index = slot_id - day.offset
            if 0 <= hour_index < self._schedule.hours_per_day:
                return day, hour_index
        return None

    def try_decode(self, slot_id: object) -> DecodedSlot:
        """Display-safe decode: unknown ids map to ("Unknown", "Unknown")."""
        found = self._lookup(slot_id)
        if found is None:
            return DecodedSlot.UNKNOWN
        day, hour_index = found
        return DecodedSlot(day.name, self._labels[hour_index])

    decode = try_decode

    def decode_strict(self, slot_id: object) -> DecodedSlot:
        found = self._lookup(slot_id)
        if found is None:
            raise OutOfRangeError(slot_id)
        day, hour_index = found
        return DecodedSlot(day.name, self._labels[hour_index])

    def day_of(self, slot_id: object) -> Optional[DayName]:
        found = self._lookup(slot_id)
        return found[0].name if found else None

    def encode(self, day: DayName, hour: int) -> int:
        offset = self._schedule.offset_of(day)
        if offset is None:
            raise InvalidDayError(day)
        if not isinstance(hour, int) or isinstance(hour, bool) or hour not in self._hours:
            raise InvalidHourError(hour, self._hours)
        return (hour - self._schedule.first_hour) + offset

    def make_range(self, day: DayName, start_hour: int, end_hour: int) -> TimeRange:
        start_time_id = self.encode(day, start_hour)
        end_time_id = self.encode(day, end_hour)
        if start_time_id >= end_time_id:
            raise InvalidRangeError(start_time_id, end_time_id)
        return TimeRange(start_time_id, end_time_id)

    def make_range_from_ids(self, start_time_id: int, end_time_id: int) -> TimeRange:
        """Validate a raw id pair, e.g. one received from the wire."""
        start = self.decode_strict(start_time_id)
        end = self.decode_strict(end_time_id)
        if start_time_id >= end_time_id:
            raise InvalidRangeError(start_time_id, end_time_id)
        if start.day != end.day:
            raise InvalidRangeError(start_time_id, end_time_id, reason="Range spans two days")
        return TimeRange(start_time_id, end_time_id)

    def describe(self, slot: Union[TimeRange, CourseTimeSlot]) -> str:
        start = self.try_decode(slot.start_time_id)
        end = self.try_decode(slot.end_time_id)
        return f"{start.day} {start.hour} - {end.hour}"


default_codec = SlotCodec()
