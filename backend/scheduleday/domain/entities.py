from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Union

from .errors import ScheduleFetchError

ScheduleRecord = Mapping[str, Any]
CalendarDaySelector = Union[str, date, datetime, int, float]


@dataclass(frozen=True)
class FetchRequest:
    date: CalendarDaySelector | None = None

    @property
    def has_date(self) -> bool:
        # None, "" and False select no day; 0 is the epoch
        return not (self.date is None or self.date is False or self.date == "")


@dataclass(frozen=True)
class FetchOutcome:
    """Records returned by a fetch, or the reason there are none."""

    records: list[Any] = field(default_factory=list)
    error: ScheduleFetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: ScheduleFetchError) -> "FetchOutcome":
        return cls(records=[], error=error)
