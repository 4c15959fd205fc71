from .config import Settings, get_settings, reset_settings
from .domain.entities import FetchOutcome, FetchRequest, ScheduleRecord
from .domain.errors import (
    FetchTimeoutError,
    InvalidDayError,
    ResponseShapeError,
    ScheduleFetchError,
    TransportError,
    UpstreamStatusError,
)
from .log_config import configure_logging
from .services.fetch_service import ScheduleDayFetcher, schedule_fetch_by_day

__all__ = [
    "FetchOutcome",
    "FetchRequest",
    "FetchTimeoutError",
    "InvalidDayError",
    "ResponseShapeError",
    "ScheduleDayFetcher",
    "ScheduleFetchError",
    "ScheduleRecord",
    "Settings",
    "TransportError",
    "UpstreamStatusError",
    "configure_logging",
    "get_settings",
    "reset_settings",
    "schedule_fetch_by_day",
]
