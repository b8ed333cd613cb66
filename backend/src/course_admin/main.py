from __future__ import annotations

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from course_admin.api.routers.courses import router as courses_router
from course_admin.api.routers.health import router as health_router
from course_admin.api.routers.timeslots import router as timeslots_router
from course_admin.domain.timeslots.codec import SlotCodecError
from course_admin.logging import configure_logging
from course_admin.services.errors import (
    BadRequestError,
    MalformedResponseError,
    NotFoundError,
    PartialFlushFailure,
    RemoteFailure,
)
from course_admin.settings import Settings, load_settings


def create_app(settings: Settings | None = None) -> FastAPI:
    active_settings = settings or load_settings()
    configure_logging(debug=active_settings.debug, level=active_settings.log_level)

    app = FastAPI(title=active_settings.app_name, version=active_settings.app_version)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(_: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(BadRequestError)
    async def handle_bad_request(_: Request, exc: BadRequestError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(SlotCodecError)
    async def handle_codec_error(_: Request, exc: SlotCodecError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(RemoteFailure)
    async def handle_remote_failure(_: Request, exc: RemoteFailure) -> JSONResponse:
        if isinstance(exc.cause, NotFoundError):
            return JSONResponse(status_code=404, content={"detail": str(exc.cause)})
        if isinstance(exc.cause, BadRequestError):
            return JSONResponse(status_code=400, content={"detail": str(exc.cause)})
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.exception_handler(MalformedResponseError)
    async def handle_malformed_response(_: Request, exc: MalformedResponseError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.exception_handler(PartialFlushFailure)
    async def handle_partial_flush(_: Request, exc: PartialFlushFailure) -> JSONResponse:
        return JSONResponse(
            status_code=502,
            content={
                "detail": str(exc),
                "course_id": exc.course_id,
                "failed_index": exc.failed_index,
            },
        )

    @app.exception_handler(ValueError)
    async def handle_value_error(_: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(HTTPException)
    async def passthrough_http(_: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    app.include_router(health_router)
    app.include_router(timeslots_router)
    app.include_router(courses_router)

    return app


app = create_app()
