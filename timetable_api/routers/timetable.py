from datetime import datetime
from typing import Callable
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from timetable_api.config import settings
from timetable_api.database import get_db
from timetable_api.schemas.timetable import Day, ServiceResult
from timetable_api.services.timetable_service import TimetableService
from timetable_api.services.timetable_store import TimetableStore
from timetable_api.utils.errors import SERVER_ERROR_MSG

router = APIRouter(prefix="/timetable", tags=["Timetable"])


def get_clock() -> Callable[[], datetime]:
    tz = ZoneInfo(settings.TIMEZONE)
    return lambda: datetime.now(tz)


def get_timetable_service(
    db: Session = Depends(get_db),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> TimetableService:
    return TimetableService(TimetableStore(db), clock=clock, tz=ZoneInfo(settings.TIMEZONE))


def respond(result: ServiceResult) -> JSONResponse:
    if result.status >= 500:
        return JSONResponse(status_code=result.status, content={"msg": SERVER_ERROR_MSG})
    return JSONResponse(status_code=result.status, content=result.to_body())


@router.get("/locations")
def locations(service: TimetableService = Depends(get_timetable_service)):
    return respond(service.get_all_locations())


@router.get("/courses-today")
def courses_today(
    location: str = Query(..., description="room name as stored"),
    service: TimetableService = Depends(get_timetable_service),
):
    return respond(service.courses_today(location))


@router.get("/courses-right-now")
def courses_right_now(
    location: str = Query(...),
    service: TimetableService = Depends(get_timetable_service),
):
    return respond(service.courses_right_now(location))


@router.get("/available-right-now")
def available_right_now(service: TimetableService = Depends(get_timetable_service)):
    return respond(service.available_right_now())


@router.get("/courses-within")
def courses_within(
    location: str = Query(...),
    hours: float = Query(..., ge=0, le=24, allow_inf_nan=False, description="window on both sides of now"),
    service: TimetableService = Depends(get_timetable_service),
):
    return respond(service.courses_within_n_hours(location, hours))


@router.get("/courses")
def courses_and_sections(service: TimetableService = Depends(get_timetable_service)):
    return respond(service.all_courses_and_sections())


@router.get("/course-info")
def course_info(
    course: str = Query(..., description="course code, e.g. CS101"),
    day: Day = Query(...),
    section: str = Query(...),
    service: TimetableService = Depends(get_timetable_service),
):
    return respond(service.course_info(course, day, section))
