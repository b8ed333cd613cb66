from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from course_admin.api.deps import get_course_service, get_settings
from course_admin.api.schemas import (
    CourseCreateRequest,
    CourseCreateResponse,
    FlushReport,
    RangeRequest,
    SlotListResponse,
    SlotResponse,
)
from course_admin.domain.timeslots.codec import SlotCodec
from course_admin.domain.timeslots.models import CourseTimeSlot
from course_admin.services.course_service import CourseService
from course_admin.services.slot_set_service import SlotSetManager
from course_admin.settings import Settings

router = APIRouter(prefix="/courses", tags=["courses"])


def _to_slot(codec: SlotCodec, slot: CourseTimeSlot) -> SlotResponse:
    start = codec.try_decode(slot.start_time_id)
    end = codec.try_decode(slot.end_time_id)
    return SlotResponse(
        id=slot.id,
        start_time_id=slot.start_time_id,
        end_time_id=slot.end_time_id,
        day=start.day,
        start=start.hour,
        end=end.hour,
    )


def _to_list(editor: SlotSetManager) -> SlotListResponse:
    return SlotListResponse(
        course_id=editor.course_id or "",
        term=editor.term,
        slots=[_to_slot(editor.codec, slot) for slot in editor.slots],
    )


@router.post("", response_model=CourseCreateResponse, status_code=status.HTTP_201_CREATED)
def create_course(
    body: CourseCreateRequest,
    strict: bool = False,
    service: CourseService = Depends(get_course_service),
    settings: Settings = Depends(get_settings),
) -> CourseCreateResponse:
    term = body.term or settings.default_term or next(iter(service.list_terms()), "")
    if not term:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="term is required")

    editor = service.new_editor(term)
    # validate every draft before anything is created
    for slot in body.slots:
        editor.add_slot(slot.day, slot.start_hour, slot.end_hour)

    fields = body.model_dump(exclude={"slots"})
    fields["term"] = term
    course, result = service.save_course(fields, editor)
    if strict:
        result.raise_for_failure()

    return CourseCreateResponse(
        course=course,
        slots=[_to_slot(service.codec, slot) for slot in editor.slots],
        flush=FlushReport(
            flushed=[index for index, _ in result.persisted],
            failed_index=result.failed_index,
            not_attempted=list(result.not_attempted),
            error=str(result.error) if result.error is not None else None,
        ),
    )


@router.get("/{course_id}/slots", response_model=SlotListResponse)
def list_slots(
    course_id: str,
    term: str,
    service: CourseService = Depends(get_course_service),
) -> SlotListResponse:
    return _to_list(service.open_editor(course_id, term))


@router.post("/{course_id}/slots", response_model=SlotListResponse, status_code=status.HTTP_201_CREATED)
def add_slot(
    course_id: str,
    term: str,
    body: RangeRequest,
    service: CourseService = Depends(get_course_service),
) -> SlotListResponse:
    editor = service.open_editor(course_id, term)
    editor.add_slot(body.day, body.start_hour, body.end_hour)
    return _to_list(editor)


@router.delete("/{course_id}/slots/{index}", response_model=SlotListResponse)
def remove_slot(
    course_id: str,
    index: int,
    term: str,
    service: CourseService = Depends(get_course_service),
) -> SlotListResponse:
    editor = service.open_editor(course_id, term)
    try:
        editor.remove_slot(index)
    except IndexError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_list(editor)
