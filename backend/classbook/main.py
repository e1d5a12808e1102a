from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from classbook.api.routes import (
    announcements,
    faculty,
    floors,
    health,
    rooms,
    schedule,
    students,
    study_materials,
    subjects,
    teachers,
)
from classbook.core.config import get_settings
from classbook.core.exceptions import AppError
from classbook.core.logging import configure_logging
from classbook.core.middleware import RequestSizeLimitMiddleware, SecurityHeadersMiddleware
from classbook.db.bootstrap import ensure_schema, seed_sample_data
from classbook.db.session import SessionLocal, engine
from classbook.services.schedule_store import build_schedule_store

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings)
    ensure_schema(engine)
    if settings.seed_sample_data:
        with SessionLocal() as db:
            seed_sample_data(db)
    app.state.schedule_store = build_schedule_store(settings, session_factory=SessionLocal)
    yield


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    content = {"error": exc.message}
    if exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    missing = [
        ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0])
        for error in errors
        if error.get("type") == "missing"
    ]
    if missing:
        message = f"Missing required fields: {', '.join(missing)}"
    else:
        message = "Invalid request"
    details = [
        {"field": ".".join(str(part) for part in error["loc"]), "message": error.get("msg", "")}
        for error in errors
    ]
    return JSONResponse(status_code=400, content={"error": message, "details": {"errors": details}})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


app = FastAPI(title=settings.project_name, lifespan=lifespan)
app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.add_middleware(RequestSizeLimitMiddleware, max_bytes=settings.max_request_size_bytes)
app.add_middleware(SecurityHeadersMiddleware, settings=settings)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix=settings.api_prefix, tags=["health"])
app.include_router(schedule.router, prefix=f"{settings.api_prefix}/schedule", tags=["schedule"])
app.include_router(teachers.router, prefix=f"{settings.api_prefix}/teachers", tags=["teachers"])
app.include_router(subjects.router, prefix=f"{settings.api_prefix}/subjects", tags=["subjects"])
app.include_router(rooms.router, prefix=f"{settings.api_prefix}/rooms", tags=["rooms"])
app.include_router(floors.router, prefix=f"{settings.api_prefix}/floors", tags=["floors"])
app.include_router(students.router, prefix=f"{settings.api_prefix}/students", tags=["students"])
app.include_router(study_materials.router, prefix=f"{settings.api_prefix}/study-materials", tags=["study-materials"])
app.include_router(announcements.router, prefix=f"{settings.api_prefix}/announcements", tags=["announcements"])
app.include_router(faculty.router, prefix=f"{settings.api_prefix}/faculty", tags=["faculty"])
