from __future__ import annotations

from typing import Any

import pytest

from course_admin.domain.timeslots.codec import SlotCodec
from course_admin.infra.stores.course_store import InMemoryCourseStore
from course_admin.services.errors import ServiceError


class FlakyCourseStore(InMemoryCourseStore):
    """In-memory store that records slot calls and fails the ones listed in fail_on.

    raise_on maps (operation, call number) to the exception that call raises.
    """

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, Any]] = []
        self.fail_on: set[tuple[str, int]] = set()
        self.raise_on: dict[tuple[str, int], Exception] = {}
        self._counters: dict[str, int] = {}

    def _maybe_fail(self, operation: str) -> None:
        n = self._counters.get(operation, 0) + 1
        self._counters[operation] = n
        if (operation, n) in self.raise_on:
            raise self.raise_on[(operation, n)]
        if (operation, n) in self.fail_on:
            raise ServiceError(f"{operation} call {n} rejected")

    def list_course_slots(self, course_id: str, term: str) -> dict[str, Any]:
        self.calls.append(("list_course_slots", (course_id, term)))
        self._maybe_fail("list_course_slots")
        return super().list_course_slots(course_id, term)

    def create_course_slot(self, course_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("create_course_slot", (course_id, dict(payload))))
        self._maybe_fail("create_course_slot")
        return super().create_course_slot(course_id, payload)

    def delete_course_slot(self, course_id: str, slot_id: int, term: str) -> None:
        self.calls.append(("delete_course_slot", (course_id, slot_id, term)))
        self._maybe_fail("delete_course_slot")
        super().delete_course_slot(course_id, slot_id, term)

    def slot_calls(self) -> list[tuple[str, Any]]:
        return [c for c in self.calls if c[0] != "list_course_slots"]


@pytest.fixture
def store() -> FlakyCourseStore:
    return FlakyCourseStore()


@pytest.fixture
def codec() -> SlotCodec:
    return SlotCodec()


@pytest.fixture
def course_id(store: FlakyCourseStore) -> str:
    return store.create_course({"term": "2024-2025 Spring", "course_code": "MATH101"})["course"]["id"]
