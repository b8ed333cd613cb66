from __future__ import annotations

from course_admin.domain.timeslots.codec import SlotCodec, default_codec
from course_admin.infra.stores.course_store import course_store
from course_admin.services.course_service import CourseService
from course_admin.settings import Settings, load_settings

settings = load_settings()
_course_service = CourseService(store=course_store, codec=default_codec)


def get_settings() -> Settings:
    return settings


def get_codec() -> SlotCodec:
    return default_codec


def get_course_service() -> CourseService:
    return _course_service
