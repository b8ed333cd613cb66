from course_admin.infra.stores.course_store import (
    CourseRecord,
    CourseStore,
    InMemoryCourseStore,
    course_store,
)

__all__ = [
    "CourseRecord",
    "CourseStore",
    "InMemoryCourseStore",
    "course_store",
]
