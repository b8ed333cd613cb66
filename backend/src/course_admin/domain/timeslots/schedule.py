# timeslots/schedule.py
# Weekly teaching grid: which integer ids belong to which (day, hour) cell.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


# ---------- Types ----------

DayName = str  # "Monday".."Friday"


@dataclass(frozen=True)
class DayOffset:
    """A weekday and the id of its first hour cell."""
    name: DayName
    offset: int


@dataclass(frozen=True)
class SlotSchedule:
    """
    Id layout of the teaching week.

    Each day owns the ids [offset, offset + hours_per_day); hour index i of
    that run is the hour first_hour + i, labelled "HH:<minute_label>".
    """
    days: Tuple[DayOffset, ...]
    first_hour: int = 8
    hours_per_day: int = 14
    minute_label: str = "40"

    def day_names(self) -> Tuple[DayName, ...]:
        return tuple(d.name for d in self.days)

    def offset_of(self, day: DayName) -> Optional[int]:
        for d in self.days:
            if d.name == day:
                return d.offset
        return None

    def hours(self) -> Tuple[int, ...]:
        return tuple(range(self.first_hour, self.first_hour + self.hours_per_day))

    def hour_labels(self) -> Tuple[str, ...]:
        return tuple(f"{h:02d}:{self.minute_label}" for h in self.hours())

    @property
    def max_id(self) -> int:
        """Exclusive upper bound of the ids used by this schedule."""
        if not self.days:
            return 0
        return max(d.offset for d in self.days) + self.hours_per_day


DEFAULT_SCHEDULE = SlotSchedule(
    days=(
        DayOffset("Monday", 1),
        DayOffset("Tuesday", 15),
        DayOffset("Wednesday", 29),
        DayOffset("Thursday", 43),
        DayOffset("Friday", 57),
    ),
    first_hour=8,
    hours_per_day=14,
)


# ---------- Validation ----------

class ScheduleConfigError(ValueError):
    """Schedule layout is inconsistent; carries every problem found."""
    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("\n".join(errors))


def validate_schedule(schedule: SlotSchedule) -> SlotSchedule:
    errors: List[str] = []

    if not schedule.days:
        errors.append("Schedule has no days.")
    if schedule.hours_per_day <= 0:
        errors.append(f"hours_per_day must be > 0 (got {schedule.hours_per_day}).")
    if not 0 <= schedule.first_hour <= 23:
        errors.append(f"first_hour must be within 0..23 (got {schedule.first_hour}).")
    elif schedule.first_hour + schedule.hours_per_day > 24:
        errors.append("Hours run past midnight.")

    names = schedule.day_names()
    dupes = sorted({n for n in names if names.count(n) > 1})
    if dupes:
        errors.append(f"Duplicated day names: {dupes}")

    for d in schedule.days:
        if d.offset < 0:
            errors.append(f"Day '{d.name}' has a negative offset ({d.offset}).")

    ordered = sorted(schedule.days, key=lambda d: d.offset)
    for prev, cur in zip(ordered, ordered[1:]):
        if cur.offset < prev.offset + schedule.hours_per_day:
            errors.append(
                f"Days '{prev.name}' and '{cur.name}' overlap: "
                f"{prev.offset}+{schedule.hours_per_day} > {cur.offset}."
            )

    if errors:
        raise ScheduleConfigError(errors)
    return schedule
