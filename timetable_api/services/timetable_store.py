from typing import List, Tuple

from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from timetable_api.models.timetable import Timetable
from timetable_api.utils.errors import StoreError

# plain column rows, so identical timetable lines are not merged by the identity map
ENTRY_COLUMNS = tuple(Timetable.__table__.c)


class TimetableStore:
    """Read-only queries over the timetable table."""

    def __init__(self, db: Session):
        self.db = db

    def list_locations(self) -> List[str]:
        try:
            rows = (
                self.db.query(Timetable.location)
                .distinct()
                .order_by(Timetable.location.asc())
                .all()
            )
        except SQLAlchemyError as e:
            raise StoreError(f"list_locations: {e}") from e
        return [r[0] for r in rows]

    def list_courses_and_sections(self) -> List[Tuple[str, str]]:
        try:
            rows = (
                self.db.query(Timetable.course_code, Timetable.section)
                .distinct()
                .order_by(Timetable.course_code.asc(), Timetable.section.asc())
                .all()
            )
        except SQLAlchemyError as e:
            raise StoreError(f"list_courses_and_sections: {e}") from e
        return [(r[0], r[1]) for r in rows]

    def list_by_location(self, location: str) -> List[Row]:
        try:
            return (
                self.db.query(*ENTRY_COLUMNS)
                .filter(Timetable.location == location)
                .all()
            )
        except SQLAlchemyError as e:
            raise StoreError(f"list_by_location({location!r}): {e}") from e

    def list_by_course_day_section(self, course: str, day: str, section: str) -> List[Row]:
        try:
            return (
                self.db.query(*ENTRY_COLUMNS)
                .filter(
                    Timetable.course_code == course,
                    Timetable.day == day,
                    Timetable.section == section,
                )
                .all()
            )
        except SQLAlchemyError as e:
            raise StoreError(f"list_by_course_day_section({course!r}, {day!r}, {section!r}): {e}") from e
