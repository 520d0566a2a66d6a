import logging
from datetime import datetime, tzinfo
from typing import Callable, List, Optional

from timetable_api.schemas.timetable import CourseSectionOut, Day, ServiceResult, TimetableEntryOut
from timetable_api.services.timetable_store import TimetableStore
from timetable_api.utils.errors import handle_server_error
from timetable_api.utils.timeconv import HOUR_MS, instant_of, to_human, to_instant, weekday_name

# placeholder locations meaning "no room assigned"
NO_LOCATION = {" - ", "OT"}

Entries = ServiceResult[List[TimetableEntryOut]]
Names = ServiceResult[List[str]]


class TimetableService:
    """
    Today / right-now / within-N-hours views over the timetable.

    Every public method returns a ServiceResult and never raises: failures are
    logged once, with the route they belong to, and come back as status 500.
    The private helpers raise, so nested calls do not log the same failure twice.
    """

    def __init__(
        self,
        store: TimetableStore,
        clock: Optional[Callable[[], datetime]] = None,
        tz: Optional[tzinfo] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.tz = tz
        self.clock = clock or (lambda: datetime.now(self.tz))
        self.logger = logger or logging.getLogger("app.timetable")

    # ----- helpers -----
    def _now(self) -> datetime:
        # one reading per operation, in the zone the stored times are written in
        return self.clock().astimezone(self.tz)

    def _locations(self) -> List[str]:
        return [loc for loc in self.store.list_locations() if loc not in NO_LOCATION]

    def _today(self, location: str, now: datetime) -> List[TimetableEntryOut]:
        rows = self.store.list_by_location(location)
        today = weekday_name(now)
        return [TimetableEntryOut.model_validate(r) for r in rows if r.day == today]

    def _log_now(self, now: datetime) -> int:
        right_now = instant_of(now)
        self.logger.info("Today is %s, time now is %s", weekday_name(now), to_human(right_now, now.tzinfo))
        self.logger.debug("Unix time is %d", right_now)
        return right_now

    def _right_now(self, location: str, now: datetime, right_now: int) -> List[TimetableEntryOut]:
        return [
            c for c in self._today(location, now)
            if to_instant(c.start_time, now) <= right_now <= to_instant(c.end_time, now)
        ]

    # ----- operations -----
    def get_all_locations(self) -> Names:
        try:
            return Names(status=200, data=self._locations())
        except Exception as e:
            return handle_server_error(e, "/timetable/locations", self.logger)

    def courses_today(self, location: str) -> Entries:
        try:
            now = self._now()
            self.logger.info("Today is %s", weekday_name(now))
            return Entries(status=200, data=self._today(location, now))
        except Exception as e:
            return handle_server_error(e, "/timetable/courses-today", self.logger)

    def courses_right_now(self, location: str) -> Entries:
        try:
            now = self._now()
            return Entries(status=200, data=self._right_now(location, now, self._log_now(now)))
        except Exception as e:
            return handle_server_error(e, "/timetable/courses-right-now", self.logger)

    def available_right_now(self) -> Names:
        try:
            now = self._now()
            right_now = self._log_now(now)
            available = [loc for loc in self._locations() if not self._right_now(loc, now, right_now)]
            return Names(status=200, data=available)
        except Exception as e:
            return handle_server_error(e, "/timetable/available-right-now", self.logger)

    def courses_within_n_hours(self, location: str, hours: float) -> Entries:
        try:
            now = self._now()
            right_now = self._log_now(now)

            window = int(hours * HOUR_MS)
            lower = right_now - window
            upper = right_now + window
            within = [
                c for c in self._today(location, now)
                if to_instant(c.start_time, now) >= lower and to_instant(c.end_time, now) <= upper
            ]
            return Entries(status=200, data=within)
        except Exception as e:
            return handle_server_error(e, "/timetable/courses-within", self.logger)

    def all_courses_and_sections(self) -> ServiceResult[List[CourseSectionOut]]:
        try:
            pairs = [
                CourseSectionOut(course=course, section=section)
                for course, section in self.store.list_courses_and_sections()
            ]
            return ServiceResult[List[CourseSectionOut]](status=200, data=pairs)
        except Exception as e:
            return handle_server_error(e, "/timetable/courses", self.logger)

    def course_info(self, course: str, day: Day, section: str) -> Entries:
        try:
            rows = self.store.list_by_course_day_section(course, day.value, section)
            return Entries(status=200, data=[TimetableEntryOut.model_validate(r) for r in rows])
        except Exception as e:
            return handle_server_error(e, "/timetable/course-info", self.logger)
