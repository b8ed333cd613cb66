from __future__ import annotations

import logging
from typing import Any, Optional

from course_admin.domain.timeslots.codec import SlotCodec, default_codec
from course_admin.infra.stores.course_store import CourseStore
from course_admin.services.errors import RemoteFailure
from course_admin.services.slot_set_service import FlushResult, SlotSetManager

logger = logging.getLogger(__name__)


class CourseService:
    def __init__(self, store: CourseStore, codec: SlotCodec = default_codec) -> None:
        self._store = store
        self._codec = codec

    @property
    def codec(self) -> SlotCodec:
        return self._codec

    def _call(self, operation: str, *args: Any) -> Any:
        try:
            return getattr(self._store, operation)(*args)
        except Exception as exc:
            logger.warning("%s failed: %s", operation, exc)
            raise RemoteFailure(operation, exc) from exc

    def list_courses(self, search: str = "", term: str = "") -> list[dict[str, Any]]:
        return self._call("list_courses", search, term).get("courses") or []

    def list_terms(self) -> list[str]:
        return self._call("list_terms").get("terms") or []

    def delete_course(self, course_id: str, term: str) -> None:
        self._call("delete_course", course_id, term)

    def new_editor(self, term: str) -> SlotSetManager:
        return SlotSetManager(self._store, self._codec, term=term)

    def open_editor(self, course_id: str, term: str) -> SlotSetManager:
        editor = SlotSetManager(self._store, self._codec, term=term, course_id=course_id)
        editor.load(course_id, term)
        return editor

    def save_course(
        self, fields: dict[str, Any], editor: SlotSetManager
    ) -> tuple[dict[str, Any], Optional[FlushResult]]:
        """
        Persist the course open in `editor`.

        Existing courses are updated in place; their slots were already stored
        as they were added. A new course is created first and its draft slots
        are then flushed in order.
        """
        term = str(fields.get("term") or editor.term)

        if editor.course_is_persisted:
            course_id = editor.course_id
            self._call("update_course", course_id, fields)
            return {"id": course_id, **fields}, None

        course = self._call("create_course", {**fields, "term": term})["course"]
        result = editor.flush_on_course_creation(str(course["id"]), term)
        return course, result
