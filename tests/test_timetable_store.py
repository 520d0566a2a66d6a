from __future__ import annotations

from datetime import time

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from timetable_api.models.timetable import Timetable
from timetable_api.services.timetable_store import TimetableStore
from timetable_api.utils.errors import StoreError


def test_list_locations_is_distinct_and_sorted(db, add_entry) -> None:
    add_entry(location="Radichel MPR")
    add_entry(location="Fab Lab", course_code="EN112")
    add_entry(location="Radichel MPR", day="Wednesday")
    add_entry(location="OT", course_code="BA301")

    assert TimetableStore(db).list_locations() == ["Fab Lab", "OT", "Radichel MPR"]


def test_list_courses_and_sections(db, add_entry) -> None:
    add_entry(course_code="MA201", section="B")
    add_entry(course_code="CS101", section="B")
    add_entry(course_code="CS101", section="A")
    add_entry(course_code="CS101", section="A", day="Thursday")

    assert TimetableStore(db).list_courses_and_sections() == [
        ("CS101", "A"),
        ("CS101", "B"),
        ("MA201", "B"),
    ]


def test_list_by_location_matches_exactly(db, add_entry) -> None:
    add_entry(location="Norton-Motulsky 207A")
    add_entry(location="Norton-Motulsky 207", course_code="EC102")

    rows = TimetableStore(db).list_by_location("Norton-Motulsky 207")
    assert [r.course_code for r in rows] == ["EC102"]
    assert TimetableStore(db).list_by_location("nowhere") == []


def test_list_by_course_day_section(db, add_entry) -> None:
    add_entry(course_code="CS101", day="Monday", section="A", start=time(8, 0), end=time(9, 30))
    add_entry(course_code="CS101", day="Monday", section="B")
    add_entry(course_code="CS101", day="Friday", section="A")

    rows = TimetableStore(db).list_by_course_day_section("CS101", "Monday", "A")
    assert len(rows) == 1
    assert (rows[0].start_time, rows[0].end_time) == (time(8, 0), time(9, 30))


def test_query_failure_raises_store_error() -> None:
    # no tables created
    engine = create_engine("sqlite://")
    session = sessionmaker(bind=engine)()
    try:
        with pytest.raises(StoreError) as info:
            TimetableStore(session).list_locations()
        assert info.value.__cause__ is not None
    finally:
        session.close()
        engine.dispose()


def test_identical_rows_are_all_returned(db) -> None:
    line = {
        "day": "Monday",
        "period_name": "Lab",
        "start_time": time(13, 0),
        "end_time": time(15, 0),
        "location": "Fab Lab",
        "course_code": "EN112",
        "section": "A",
    }
    db.execute(Timetable.__table__.insert(), [line, dict(line)])
    db.commit()

    store = TimetableStore(db)
    assert len(store.list_by_location("Fab Lab")) == 2
    assert len(store.list_by_course_day_section("EN112", "Monday", "A")) == 2
