from sqlalchemy import Column, String, Time
from timetable_api.database import Base


class Timetable(Base):
    __tablename__ = "timetable"

    # Monday .. Sunday
    day = Column(String, nullable=False)
    period_name = Column(String, nullable=False)

    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)

    # " - " / "OT" mean no room assigned
    location = Column(String, nullable=False)

    course_code = Column(String, nullable=False)
    section = Column(String, nullable=False)

    # no primary key in the store; the mapper needs one, so every column is used.
    # reads go through TimetableStore column queries and keep duplicate lines
    __mapper_args__ = {
        "primary_key": [day, period_name, start_time, end_time, location, course_code, section],
    }
