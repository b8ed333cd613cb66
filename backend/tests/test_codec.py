import pytest

from course_admin.domain.timeslots.codec import (
    InvalidDayError,
    InvalidHourError,
    InvalidRangeError,
    OutOfRangeError,
    SlotCodec,
)
from course_admin.domain.timeslots.models import CourseTimeSlot, DecodedSlot, TimeRange
from course_admin.domain.timeslots.schedule import DEFAULT_SCHEDULE, DayOffset, SlotSchedule

DAYS = DEFAULT_SCHEDULE.day_names()
HOURS = DEFAULT_SCHEDULE.hours()


def test_encode_decode_roundtrip_for_every_cell(codec: SlotCodec) -> None:
    for day in DAYS:
        for hour in HOURS:
            decoded = codec.try_decode(codec.encode(day, hour))
            assert decoded == DecodedSlot(day, f"{hour:02d}:40")


def test_ids_partition_the_week(codec: SlotCodec) -> None:
    owners = {slot_id: codec.day_of(slot_id) for slot_id in range(0, 72)}

    assert owners[0] is None
    assert owners[71] is None
    known = [slot_id for slot_id, day in owners.items() if day is not None]
    assert known == list(range(1, 71))
    for index, day in enumerate(DAYS):
        start = 1 + 14 * index
        assert {owners[i] for i in range(start, start + 14)} == {day}


def test_decode_outside_range_is_unknown(codec: SlotCodec) -> None:
    assert codec.try_decode(0) == DecodedSlot("Unknown", "Unknown")
    assert codec.try_decode(71) == DecodedSlot.UNKNOWN
    assert codec.try_decode(-5) == DecodedSlot.UNKNOWN
    assert codec.try_decode(None) == DecodedSlot.UNKNOWN
    assert codec.try_decode("16") == DecodedSlot.UNKNOWN
    assert codec.decode(0).is_known is False


def test_decode_strict_raises_out_of_range(codec: SlotCodec) -> None:
    assert codec.decode_strict(70) == DecodedSlot("Friday", "21:40")
    with pytest.raises(OutOfRangeError):
        codec.decode_strict(0)
    with pytest.raises(OutOfRangeError):
        codec.decode_strict(71)


def test_tuesday_concrete_values(codec: SlotCodec) -> None:
    assert codec.encode("Tuesday", 9) == 16
    assert codec.encode("Tuesday", 8) == 15
    assert codec.decode(16) == DecodedSlot(day="Tuesday", hour="09:40")


def test_encode_rejects_unknown_day(codec: SlotCodec) -> None:
    with pytest.raises(InvalidDayError):
        codec.encode("Saturday", 9)


@pytest.mark.parametrize("hour", [7, 22, -1, True, 9.0, "9"])
def test_encode_rejects_hours_outside_table(codec: SlotCodec, hour: int) -> None:
    with pytest.raises(InvalidHourError):
        codec.encode("Monday", hour)


def test_make_range_orders_endpoints(codec: SlotCodec) -> None:
    assert codec.make_range("Wednesday", 9, 10) == TimeRange(30, 31)
    with pytest.raises(InvalidRangeError):
        codec.make_range("Wednesday", 10, 9)
    with pytest.raises(InvalidRangeError):
        codec.make_range("Wednesday", 10, 10)


def test_codec_errors_are_value_errors(codec: SlotCodec) -> None:
    with pytest.raises(ValueError):
        codec.make_range("Friday", 12, 11)


def test_make_range_from_ids_guards_raw_pairs(codec: SlotCodec) -> None:
    assert codec.make_range_from_ids(15, 17) == TimeRange(15, 17)
    with pytest.raises(InvalidRangeError, match="spans two days"):
        codec.make_range_from_ids(13, 16)
    with pytest.raises(InvalidRangeError):
        codec.make_range_from_ids(17, 15)
    with pytest.raises(OutOfRangeError):
        codec.make_range_from_ids(0, 3)


def test_describe_uses_display_labels(codec: SlotCodec) -> None:
    assert codec.describe(TimeRange(16, 18)) == "Tuesday 09:40 - 11:40"
    assert codec.describe(CourseTimeSlot(start_time_id=0, end_time_id=2, id=4)) == "Unknown Unknown - 09:40"


def test_codec_accepts_alternate_schedule() -> None:
    codec = SlotCodec(
        SlotSchedule(
            days=(DayOffset("Mon", 0), DayOffset("Wed", 10)),
            first_hour=9,
            hours_per_day=4,
            minute_label="00",
        )
    )

    assert codec.encode("Wed", 10) == 11
    assert codec.try_decode(3) == DecodedSlot("Mon", "12:00")
    assert codec.try_decode(4) == DecodedSlot.UNKNOWN
    assert codec.try_decode(13) == DecodedSlot("Wed", "12:00")
    with pytest.raises(InvalidHourError):
        codec.encode("Mon", 13)
