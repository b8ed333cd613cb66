from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str
    version: str


class DayOption(BaseModel):
    name: str
    offset: int


class HourOption(BaseModel):
    hour: int
    label: str


class ScheduleResponse(BaseModel):
    days: list[DayOption]
    hours: list[HourOption]
    hours_per_day: int
    max_id: int


class DecodedSlotResponse(BaseModel):
    slot_id: int
    day: str
    hour: str
    known: bool


class RangeRequest(BaseModel):
    day: str
    start_hour: int
    end_hour: int


class RangeResponse(BaseModel):
    start_time_id: int
    end_time_id: int
    label: str


class SlotResponse(BaseModel):
    id: Optional[int | str] = None
    start_time_id: int
    end_time_id: int
    day: str
    start: str
    end: str


class SlotListResponse(BaseModel):
    course_id: str
    term: str
    slots: list[SlotResponse]


class CourseFields(BaseModel):
    term: str = ""
    course_code: str = Field(default="", max_length=32)
    course_name: str = Field(default="", max_length=200)
    section_name: str = ""
    faculty: str = ""
    lecturer: str = ""
    credits: float = Field(default=0, ge=0)
    prerequisites: str = ""
    corequisites: str = ""
    description: str = ""


class CourseCreateRequest(CourseFields):
    slots: list[RangeRequest] = Field(default_factory=list)


class FlushReport(BaseModel):
    flushed: list[int]
    failed_index: Optional[int] = None
    not_attempted: list[int] = Field(default_factory=list)
    error: Optional[str] = None


class CourseCreateResponse(BaseModel):
    course: dict
    slots: list[SlotResponse]
    flush: FlushReport
