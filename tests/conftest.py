from __future__ import annotations

import os
import tempfile

# keep the module-level engine off PostgreSQL and logs out of the repo
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "timetable-api-logs"))

from datetime import datetime, time, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from timetable_api.database import Base
from timetable_api.models.timetable import Timetable

# a Monday
NOW = datetime(2026, 10, 19, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    yield session
    session.close()


@pytest.fixture
def add_entry(db):
    def _add(
        location: str = "L1",
        day: str = "Monday",
        start: time = time(9, 0),
        end: time = time(11, 0),
        course_code: str = "CS101",
        section: str = "A",
        period_name: str = "Lecture",
    ) -> Timetable:
        row = Timetable(
            day=day,
            period_name=period_name,
            start_time=start,
            end_time=end,
            location=location,
            course_code=course_code,
            section=section,
        )
        db.add(row)
        db.commit()
        return row

    return _add


@pytest.fixture
def now() -> datetime:
    return NOW
