# timeslots/io.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from course_admin.domain.timeslots.models import CourseTimeSlot, TimeRange


def slot_from_dict(d: Dict[str, Any]) -> CourseTimeSlot:
    return CourseTimeSlot(
        start_time_id=int(d["start_time_id"]),
        end_time_id=int(d["end_time_id"]),
        id=d.get("id"),
    )


def slots_from_payload(d: Optional[Dict[str, Any]]) -> List[CourseTimeSlot]:
    # a response without "slots" is an empty list, not an error
    if not d:
        return []
    return [slot_from_dict(x) for x in d.get("slots") or []]


def slot_to_dict(slot: CourseTimeSlot) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "start_time_id": slot.start_time_id,
        "end_time_id": slot.end_time_id,
    }
    if slot.id is not None:
        out["id"] = slot.id
    return out


def slot_create_payload(term: str, time_range: TimeRange) -> Dict[str, Any]:
    return {
        "term": term,
        "start_time_id": time_range.start_time_id,
        "end_time_id": time_range.end_time_id,
    }
