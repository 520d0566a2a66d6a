from datetime import time
from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class Day(str, Enum):
    Sunday = "Sunday"
    Monday = "Monday"
    Tuesday = "Tuesday"
    Wednesday = "Wednesday"
    Thursday = "Thursday"
    Friday = "Friday"
    Saturday = "Saturday"


class TimetableEntryOut(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    day: str
    period_name: str
    start_time: time
    end_time: time
    location: str
    course_code: str
    section: str


class CourseSectionOut(BaseModel):
    course: str
    section: str


class ServiceResult(BaseModel, Generic[T]):
    status: int
    data: Optional[T] = None
    extra: Optional[Any] = None

    def to_body(self) -> dict:
        body = self.model_dump(mode="json", by_alias=True)
        if self.extra is None:
            body.pop("extra")
        return body
