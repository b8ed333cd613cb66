from __future__ import annotations

from fastapi import APIRouter, Depends

from course_admin.api.deps import get_codec
from course_admin.api.schemas import (
    DayOption,
    DecodedSlotResponse,
    HourOption,
    RangeRequest,
    RangeResponse,
    ScheduleResponse,
)
from course_admin.domain.timeslots.codec import SlotCodec

router = APIRouter(prefix="/timeslots", tags=["timeslots"])


@router.get("/schedule", response_model=ScheduleResponse)
def get_schedule(codec: SlotCodec = Depends(get_codec)) -> ScheduleResponse:
    schedule = codec.schedule
    return ScheduleResponse(
        days=[DayOption(name=d.name, offset=d.offset) for d in schedule.days],
        hours=[HourOption(hour=h, label=label) for h, label in zip(schedule.hours(), schedule.hour_labels())],
        hours_per_day=schedule.hours_per_day,
        max_id=schedule.max_id,
    )


@router.get("/{slot_id}", response_model=DecodedSlotResponse)
def decode_slot(
    slot_id: int,
    strict: bool = False,
    codec: SlotCodec = Depends(get_codec),
) -> DecodedSlotResponse:
    decoded = codec.decode_strict(slot_id) if strict else codec.try_decode(slot_id)
    return DecodedSlotResponse(slot_id=slot_id, day=decoded.day, hour=decoded.hour, known=decoded.is_known)


@router.post("/range", response_model=RangeResponse)
def make_range(body: RangeRequest, codec: SlotCodec = Depends(get_codec)) -> RangeResponse:
    time_range = codec.make_range(body.day, body.start_hour, body.end_hour)
    return RangeResponse(
        start_time_id=time_range.start_time_id,
        end_time_id=time_range.end_time_id,
        label=codec.describe(time_range),
    )
