from __future__ import annotations

from fastapi import APIRouter, Depends

from course_admin.api.deps import get_settings
from course_admin.api.schemas import HealthResponse
from course_admin.settings import Settings

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version=settings.app_version)
