from __future__ import annotations

import logging

import httpx

from ..config import DEFAULT_FETCH_TIMEOUT_SECONDS, Settings
from ..domain.entities import ScheduleRecord
from ..domain.errors import ResponseShapeError
from ..ports.schedule_source import ScheduleSourcePort
from ._http import TimeoutBoundRequester

SCHEDULES_PATH = "/schedules"

logger = logging.getLogger(__name__)


class HttpScheduleSource(ScheduleSourcePort):
    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._requester = TimeoutBoundRequester(
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "HttpScheduleSource":
        return cls(
            base_url=settings.api_base_url,
            timeout_seconds=settings.fetch_timeout_seconds,
            transport=transport,
        )

    @property
    def url(self) -> str:
        return self._requester.build_url(SCHEDULES_PATH)

    @property
    def timeout_seconds(self) -> float:
        return self._requester.timeout_seconds

    async def fetch_schedules(self) -> list[ScheduleRecord]:
        payload = await self._requester.get_json(SCHEDULES_PATH)
        if not isinstance(payload, list):
            raise ResponseShapeError(
                "Unexpected response shape, expected a list",
                payload_type=type(payload).__name__,
            )
        logger.debug("Schedules received", extra={"count": len(payload)})
        return payload
