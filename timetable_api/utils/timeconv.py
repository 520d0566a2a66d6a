from datetime import datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Union

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MS = timedelta(milliseconds=1)
HOUR_MS = 60 * 60 * 1000

# datetime.weekday() -> name, independent of the process locale
WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

TimeOfDay = Union[time, datetime, str]


def _aware(moment: datetime) -> datetime:
    # naive datetimes are local time
    if moment.tzinfo is None or moment.utcoffset() is None:
        return moment.astimezone()
    return moment


def _wall_clock(value: TimeOfDay) -> time:
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, time):
        return value.replace(tzinfo=None)
    if isinstance(value, str):
        return time.fromisoformat(value.strip())
    raise TypeError(f"not a time of day: {value!r}")


def instant_of(moment: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return (_aware(moment) - EPOCH) // ONE_MS


def to_instant(value: TimeOfDay, reference: datetime) -> int:
    """
    Project a stored wall-clock time onto the calendar day of `reference`.

    Stored rows carry no date, so they are anchored to the date (and zone) of
    the moment they are compared against:
        to_instant("09:30", 2026-10-19 11:00+00:00) -> instant of 2026-10-19 09:30+00:00
    """
    reference = _aware(reference)
    anchored = datetime.combine(reference.date(), _wall_clock(value), tzinfo=reference.tzinfo)
    return instant_of(anchored)


def to_human(instant: int, tz: Optional[tzinfo] = None) -> str:
    moment = EPOCH + timedelta(milliseconds=instant)
    if tz is None:
        moment = moment.astimezone()
    else:
        moment = moment.astimezone(tz)
    return moment.strftime("%Y-%m-%d %H:%M:%S %Z")


def weekday_name(moment: datetime) -> str:
    return WEEKDAYS[moment.weekday()]
