import logging
from typing import Optional

from timetable_api.schemas.timetable import ServiceResult

logger = logging.getLogger("app.errors")

SERVER_ERROR_MSG = "Server error!"


class StoreError(Exception):
    """The timetable store could not be reached or the query failed."""


def handle_server_error(exc: Exception, route: str, log: Optional[logging.Logger] = None) -> ServiceResult:
    (log or logger).error("%s failed: %s", route, exc, exc_info=exc)
    return ServiceResult(status=500, data=None)
