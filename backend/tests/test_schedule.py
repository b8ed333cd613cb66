import pytest

from course_admin.domain.timeslots.schedule import (
    DEFAULT_SCHEDULE,
    DayOffset,
    ScheduleConfigError,
    SlotSchedule,
    validate_schedule,
)


def test_default_schedule_matches_wire_contract() -> None:
    assert [(d.name, d.offset) for d in DEFAULT_SCHEDULE.days] == [
        ("Monday", 1),
        ("Tuesday", 15),
        ("Wednesday", 29),
        ("Thursday", 43),
        ("Friday", 57),
    ]
    labels = DEFAULT_SCHEDULE.hour_labels()
    assert len(labels) == 14
    assert labels[0] == "08:40"
    assert labels[-1] == "21:40"
    assert DEFAULT_SCHEDULE.hours() == tuple(range(8, 22))
    assert DEFAULT_SCHEDULE.max_id == 71


def test_offset_of_unknown_day_is_none() -> None:
    assert DEFAULT_SCHEDULE.offset_of("Tuesday") == 15
    assert DEFAULT_SCHEDULE.offset_of("Saturday") is None


def test_validate_schedule_accepts_default() -> None:
    assert validate_schedule(DEFAULT_SCHEDULE) is DEFAULT_SCHEDULE


def test_validate_schedule_reports_every_problem() -> None:
    broken = SlotSchedule(
        days=(DayOffset("Monday", 0), DayOffset("Tuesday", 5), DayOffset("Monday", -3)),
        hours_per_day=10,
    )

    with pytest.raises(ScheduleConfigError) as excinfo:
        validate_schedule(broken)

    errors = excinfo.value.errors
    assert any("Duplicated day names" in e for e in errors)
    assert any("negative offset" in e for e in errors)
    assert any("overlap" in e for e in errors)


def test_validate_schedule_rejects_empty_days() -> None:
    with pytest.raises(ScheduleConfigError, match="no days"):
        validate_schedule(SlotSchedule(days=()))
