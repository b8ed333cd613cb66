from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from course_admin.domain.timeslots.codec import SlotCodec, default_codec
from course_admin.domain.timeslots.io import slot_create_payload, slot_from_dict, slots_from_payload
from course_admin.domain.timeslots.models import CourseTimeSlot, TimeRange
from course_admin.infra.stores.course_store import CourseStore
from course_admin.services.errors import MalformedResponseError, PartialFlushFailure, RemoteFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlushResult:
    """
    Outcome of pushing draft slots to the store, in sequence order.

    failed_index is the position of the slot whose create call failed; every
    draft after it is listed in not_attempted.
    """
    course_id: str
    persisted: tuple[tuple[int, CourseTimeSlot], ...] = ()
    failed_index: Optional[int] = None
    error: Optional[Exception] = None
    not_attempted: tuple[int, ...] = ()

    @property
    def ok(self) -> bool:
        return self.failed_index is None

    def raise_for_failure(self) -> None:
        if self.failed_index is not None:
            raise PartialFlushFailure(
                self.course_id,
                failed_index=self.failed_index,
                persisted=len(self.persisted),
                not_attempted=len(self.not_attempted),
                cause=self.error,
            )


class SlotSetManager:
    """Ordered time slots of the course open in one editor."""

    def __init__(
        self,
        store: CourseStore,
        codec: SlotCodec = default_codec,
        *,
        term: str,
        course_id: Optional[str] = None,
    ) -> None:
        self._store = store
        self._codec = codec
        self._term = term
        self._course_id = course_id
        self._slots: list[CourseTimeSlot] = []

    @property
    def course_id(self) -> Optional[str]:
        return self._course_id

    @property
    def term(self) -> str:
        return self._term

    @property
    def course_is_persisted(self) -> bool:
        return self._course_id is not None

    @property
    def slots(self) -> tuple[CourseTimeSlot, ...]:
        return tuple(self._slots)

    @property
    def codec(self) -> SlotCodec:
        return self._codec

    def load(self, course_id: Optional[str], term: str) -> tuple[CourseTimeSlot, ...]:
        self._course_id = course_id
        self._term = term
        self._slots = []
        if course_id is None:
            return self.slots

        payload = self._call_store("list_course_slots", course_id, term)
        self._slots = self._parse("list_course_slots", slots_from_payload, payload)
        return self.slots

    def add_slot(self, day: str, start_hour: int, end_hour: int) -> tuple[CourseTimeSlot, ...]:
        return self.add_range(self._codec.make_range(day, start_hour, end_hour))

    def add_range(self, time_range: TimeRange) -> tuple[CourseTimeSlot, ...]:
        time_range = self._codec.make_range_from_ids(time_range.start_time_id, time_range.end_time_id)
        if not self.course_is_persisted:
            self._slots.append(CourseTimeSlot.draft(time_range))
            return self.slots

        created = self._create(self._course_id, time_range)
        self._slots.append(created)
        return self.slots

    def remove_slot(self, index: int) -> tuple[CourseTimeSlot, ...]:
        if not 0 <= index < len(self._slots):
            raise IndexError(f"slot index {index} out of range (0..{len(self._slots) - 1})")

        slot = self._slots[index]
        if slot.id is not None and self.course_is_persisted:
            self._call_store("delete_course_slot", self._course_id, slot.id, self._term)

        del self._slots[index]
        return self.slots

    def flush_on_course_creation(self, new_course_id: str, term: str) -> FlushResult:
        if self.course_is_persisted:
            raise RuntimeError(f"course {self._course_id} is already persisted; use retry_flush()")
        self._course_id = new_course_id
        self._term = term
        return self._flush_drafts()

    def retry_flush(self) -> FlushResult:
        if not self.course_is_persisted:
            raise RuntimeError("course has not been created yet")
        return self._flush_drafts()

    # ------------------ Helpers ------------------

    def _call_store(self, operation: str, *args: Any) -> Any:
        # network and backend failures alike surface as RemoteFailure
        try:
            return getattr(self._store, operation)(*args)
        except Exception as exc:
            logger.warning("%s failed for course %s (%s): %s", operation, self._course_id, self._term, exc)
            raise RemoteFailure(operation, exc) from exc

    def _parse(self, operation: str, parser: Callable[[Any], Any], payload: Any) -> Any:
        try:
            return parser(payload)
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("%s returned an unreadable response for course %s: %r", operation, self._course_id, payload)
            raise MalformedResponseError(operation, payload, exc) from exc

    def _create(self, course_id: str, time_range: TimeRange) -> CourseTimeSlot:
        response = self._call_store("create_course_slot", course_id, slot_create_payload(self._term, time_range))
        return self._parse("create_course_slot", lambda r: slot_from_dict(r["slot"]), response)

    def _flush_drafts(self) -> FlushResult:
        course_id = self._course_id
        drafts = [i for i, slot in enumerate(self._slots) if slot.is_draft]
        persisted: list[tuple[int, CourseTimeSlot]] = []

        # one call at a time, in display order; stop at the first failure
        for position, index in enumerate(drafts):
            try:
                created = self._create(course_id, self._slots[index].range)
            except (RemoteFailure, MalformedResponseError) as exc:
                result = FlushResult(
                    course_id=course_id,
                    persisted=tuple(persisted),
                    failed_index=index,
                    error=exc.cause,
                    not_attempted=tuple(drafts[position + 1:]),
                )
                logger.warning(
                    "Slot flush for course %s stopped at index %s (%s persisted, %s pending)",
                    course_id, index, len(persisted), len(result.not_attempted),
                )
                return result
            self._slots[index] = created
            persisted.append((index, created))

        logger.debug("Flushed %s draft slots for course %s", len(persisted), course_id)
        return FlushResult(course_id=course_id, persisted=tuple(persisted))
