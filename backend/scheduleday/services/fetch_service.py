"""Fetch schedules and narrow them down to a single calendar day.

Failures never reach the caller of ``fetch_by_day``: timeouts, transport
errors, bad statuses and malformed bodies all resolve to an empty list.
``fetch`` exposes the same pipeline as a ``FetchOutcome`` for callers that
need to tell "nothing scheduled" apart from "endpoint unavailable".
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone, tzinfo
from typing import Any

import httpx

from ..config import Settings, get_settings
from ..domain.days import is_same_day, is_valid_day, parse_day
from ..domain.entities import (
    CalendarDaySelector,
    FetchOutcome,
    FetchRequest,
    ScheduleRecord,
)
from ..domain.errors import (
    InvalidDayError,
    ResponseShapeError,
    ScheduleFetchError,
)
from ..ports.schedule_source import ScheduleSourcePort
from ..sources.http_schedule import HttpScheduleSource

_default_logger = logging.getLogger(__name__)


class ScheduleDayFetcher:
    def __init__(
        self,
        source: ScheduleSourcePort,
        *,
        tz: tzinfo = timezone.utc,
        logger: logging.Logger | None = None,
    ) -> None:
        self._source = source
        self._tz = tz
        self._logger = logger if logger is not None else _default_logger

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: logging.Logger | None = None,
    ) -> "ScheduleDayFetcher":
        source = HttpScheduleSource.from_settings(settings, transport=transport)
        return cls(source, tz=settings.tzinfo, logger=logger)

    async def fetch_by_day(
        self, date: CalendarDaySelector | None = None
    ) -> list[ScheduleRecord]:
        outcome = await self.fetch(FetchRequest(date=date))
        return outcome.records

    async def fetch(self, request: FetchRequest | None = None) -> FetchOutcome:
        request = request or FetchRequest()
        self._logger.debug(
            "Schedule fetch starting",
            extra={"url": getattr(self._source, "url", None), "date": request.date},
        )
        try:
            schedules = await self._source.fetch_schedules()
            records = self._select(schedules, request)
        except ScheduleFetchError as exc:
            self._log_failure(exc)
            return FetchOutcome.failure(exc)
        except Exception as exc:
            self._logger.exception("Unexpected error while fetching schedules")
            return FetchOutcome.failure(
                ScheduleFetchError(f"Unexpected error: {exc!r}", error=repr(exc))
            )
        return FetchOutcome(records=records)

    def _select(
        self, schedules: list[ScheduleRecord], request: FetchRequest
    ) -> list[ScheduleRecord]:
        if not request.has_date:
            self._logger.debug(
                "No date provided, returning all schedules",
                extra={"count": len(schedules)},
            )
            return schedules

        selected_day = parse_day(request.date, self._tz)
        if not is_valid_day(selected_day):
            raise InvalidDayError(request.date)

        daily = [
            schedule
            for schedule in schedules
            if self._falls_on(schedule, selected_day)
        ]
        self._logger.debug(
            "Daily schedules found",
            extra={"count": len(daily), "total": len(schedules)},
        )
        return daily

    def _falls_on(self, schedule: Any, selected_day: datetime) -> bool:
        when = schedule.get("when") if isinstance(schedule, Mapping) else None
        if when is None or when == "":
            self._logger.warning(
                "Schedule without a date skipped", extra={"schedule": schedule}
            )
            return False

        schedule_day = parse_day(when, self._tz)
        if not is_valid_day(schedule_day):
            self._logger.warning(
                "Schedule with invalid date skipped", extra={"schedule": schedule}
            )
            return False
        return is_same_day(schedule_day, selected_day, self._tz)

    def _log_failure(self, exc: ScheduleFetchError) -> None:
        if isinstance(exc, (ResponseShapeError, InvalidDayError)):
            self._logger.warning(str(exc), extra=exc.context)
        else:
            self._logger.error(str(exc), extra=exc.context)


async def schedule_fetch_by_day(
    date: CalendarDaySelector | None = None,
    *,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[ScheduleRecord]:
    """Fetch schedules for ``date`` (or all schedules) using the configured API.

    Settings are resolved on every call. Returns an empty list on any failure.
    """
    settings = settings or get_settings()
    fetcher = ScheduleDayFetcher.from_settings(settings, transport=transport)
    return await fetcher.fetch_by_day(date)
