from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

import httpx

from ..config import DEFAULT_FETCH_TIMEOUT_SECONDS
from ..domain.errors import (
    FetchTimeoutError,
    ResponseShapeError,
    TransportError,
    UpstreamStatusError,
)


class TimeoutBoundRequester:
    """Issue single GET requests that must finish within a hard deadline.

    Each call opens its own client, so the deadline, the connection and any
    cancellation are scoped to that call alone. No retries are attempted.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
        headers: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._headers = dict(headers or {})
        self._transport = transport

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    def build_url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    async def get_json(
        self, path: str, *, params: Mapping[str, str] | None = None
    ) -> Any:
        url = self.build_url(path)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                headers=self._headers,
                transport=self._transport,
            ) as client:
                # wait_for cancels the request task on expiry; the client is
                # closed by the context manager on every exit path
                response = await asyncio.wait_for(
                    client.get(url, params=params),
                    timeout=self._timeout_seconds,
                )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise FetchTimeoutError(self._timeout_seconds) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Request to {url} failed: {exc!r}", url=url, error=repr(exc)
            ) from exc

        if not response.is_success:
            raise UpstreamStatusError(response.status_code, response.reason_phrase)

        try:
            return response.json()
        except ValueError as exc:
            raise ResponseShapeError(
                "Response body is not valid JSON",
                url=url,
                content_type=response.headers.get("content-type"),
            ) from exc
