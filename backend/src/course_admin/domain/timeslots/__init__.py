from course_admin.domain.timeslots.codec import (
    InvalidDayError,
    InvalidHourError,
    InvalidRangeError,
    OutOfRangeError,
    SlotCodec,
    SlotCodecError,
    default_codec,
)
from course_admin.domain.timeslots.models import CourseTimeSlot, DecodedSlot, TimeRange
from course_admin.domain.timeslots.schedule import (
    DEFAULT_SCHEDULE,
    DayOffset,
    ScheduleConfigError,
    SlotSchedule,
    validate_schedule,
)

__all__ = [
    "CourseTimeSlot",
    "DEFAULT_SCHEDULE",
    "DayOffset",
    "DecodedSlot",
    "InvalidDayError",
    "InvalidHourError",
    "InvalidRangeError",
    "OutOfRangeError",
    "ScheduleConfigError",
    "SlotCodec",
    "SlotCodecError",
    "SlotSchedule",
    "TimeRange",
    "default_codec",
    "validate_schedule",
]
