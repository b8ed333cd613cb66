from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from itertools import count
from threading import Lock
from typing import Any, Protocol
from uuid import uuid4

from course_admin.services.errors import BadRequestError, NotFoundError

COURSE_FIELDS = (
    "course_code",
    "course_name",
    "section_name",
    "faculty",
    "term",
    "lecturer",
    "credits",
    "prerequisites",
    "corequisites",
    "description",
)


@dataclass
class CourseRecord:
    id: str
    term: str
    course_code: str = ""
    course_name: str = ""
    section_name: str = ""
    faculty: str = ""
    lecturer: str = ""
    credits: float = 0.0
    prerequisites: str = ""
    corequisites: str = ""
    description: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["created_at"] = self.created_at.isoformat()
        out["updated_at"] = self.updated_at.isoformat()
        return out


class CourseStore(Protocol):
    """
    Storage collaborator used by the slot editor. Payloads follow the admin API.

    Slot ids are opaque to callers. Any exception raised here, transport errors
    included, is reported to the editor as a RemoteFailure.
    """

    def list_courses(self, search: str = "", term: str = "") -> dict[str, Any]: ...

    def list_terms(self) -> dict[str, Any]: ...

    def list_course_slots(self, course_id: str, term: str) -> dict[str, Any]: ...

    def create_course_slot(self, course_id: str, payload: dict[str, Any]) -> dict[str, Any]: ...

    def delete_course_slot(self, course_id: str, slot_id: Any, term: str) -> None: ...

    def create_course(self, fields: dict[str, Any]) -> dict[str, Any]: ...

    def update_course(self, course_id: str, fields: dict[str, Any]) -> None: ...

    def delete_course(self, course_id: str, term: str) -> None: ...


def _clean_fields(fields: dict[str, Any]) -> dict[str, Any]:
    out = {k: v for k, v in fields.items() if k in COURSE_FIELDS and v is not None}
    for key, value in out.items():
        if key == "credits":
            try:
                out[key] = float(value)
            except (TypeError, ValueError) as exc:
                raise BadRequestError(f"credits must be a number (got {value!r})") from exc
        else:
            out[key] = str(value).strip()
    return out


class InMemoryCourseStore:
    def __init__(self) -> None:
        self._lock = Lock()
        self._courses: dict[str, CourseRecord] = {}
        # (course_id, term) -> ordered slot dicts
        self._slots: dict[tuple[str, str], list[dict[str, Any]]] = {}
        self._slot_ids = count(1)

    def _get(self, course_id: str) -> CourseRecord:
        course = self._courses.get(course_id)
        if course is None:
            raise NotFoundError("Course", course_id)
        return course

    def list_courses(self, search: str = "", term: str = "") -> dict[str, Any]:
        needle = search.strip().lower()
        courses = sorted(self._courses.values(), key=lambda course: course.created_at)
        if term:
            courses = [c for c in courses if c.term == term]
        if needle:
            courses = [
                c for c in courses
                if any(needle in value.lower() for value in (c.course_code, c.course_name, c.section_name, c.lecturer))
            ]
        return {"courses": [c.to_dict() for c in courses]}

    def list_terms(self) -> dict[str, Any]:
        return {"terms": sorted({c.term for c in self._courses.values() if c.term})}

    def list_course_slots(self, course_id: str, term: str) -> dict[str, Any]:
        self._get(course_id)
        return {"slots": [dict(slot) for slot in self._slots.get((course_id, term), [])]}

    def create_course_slot(self, course_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            term = str(payload["term"])
            start_time_id = int(payload["start_time_id"])
            end_time_id = int(payload["end_time_id"])
        except (KeyError, TypeError, ValueError) as exc:
            raise BadRequestError(f"Invalid slot payload: {payload!r}") from exc
        if start_time_id >= end_time_id:
            raise BadRequestError("end_time_id must be greater than start_time_id")

        with self._lock:
            self._get(course_id)
            slot = {"id": next(self._slot_ids), "start_time_id": start_time_id, "end_time_id": end_time_id}
            self._slots.setdefault((course_id, term), []).append(slot)
        return {"slot": dict(slot)}

    def delete_course_slot(self, course_id: str, slot_id: Any, term: str) -> None:
        with self._lock:
            self._get(course_id)
            slots = self._slots.get((course_id, term), [])
            for i, slot in enumerate(slots):
                if slot["id"] == slot_id:
                    del slots[i]
                    return
        raise NotFoundError("Slot", str(slot_id))

    def create_course(self, fields: dict[str, Any]) -> dict[str, Any]:
        cleaned = _clean_fields(fields)
        if not cleaned.get("term"):
            raise BadRequestError("term is required")
        course = CourseRecord(id=str(uuid4()), **cleaned)
        with self._lock:
            self._courses[course.id] = course
        return {"course": course.to_dict()}

    def update_course(self, course_id: str, fields: dict[str, Any]) -> None:
        cleaned = _clean_fields(fields)
        with self._lock:
            course = self._get(course_id)
            for key, value in cleaned.items():
                setattr(course, key, value)
            course.updated_at = datetime.now(timezone.utc)

    def delete_course(self, course_id: str, term: str) -> None:
        with self._lock:
            course = self._get(course_id)
            if course.term != term:
                raise NotFoundError("Course", f"{course_id}@{term}")
            del self._courses[course_id]
            for key in [k for k in self._slots if k[0] == course_id]:
                del self._slots[key]


course_store = InMemoryCourseStore()
