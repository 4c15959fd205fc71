from typing import Protocol

from ..domain.entities import ScheduleRecord


class ScheduleSourcePort(Protocol):
    async def fetch_schedules(self) -> list[ScheduleRecord]:
        ...
