from __future__ import annotations

from typing import Any


class ScheduleFetchError(Exception):
    """Base exception for schedule fetch failures."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.context = context


class FetchTimeoutError(ScheduleFetchError):
    """Raised when the schedule endpoint does not answer before the deadline."""

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__(
            f"Request aborted after {timeout_seconds}s timeout",
            timeout_seconds=timeout_seconds,
        )
        self.timeout_seconds = timeout_seconds


class TransportError(ScheduleFetchError):
    """Raised on connection-level failures (DNS, reset, protocol errors)."""
    pass


class UpstreamStatusError(ScheduleFetchError):
    """Raised when the schedule endpoint answers with a non-success status."""

    def __init__(self, status_code: int, reason_phrase: str) -> None:
        super().__init__(
            f"Upstream responded with {status_code} {reason_phrase}".rstrip(),
            status=status_code,
            status_text=reason_phrase,
        )
        self.status_code = status_code
        self.reason_phrase = reason_phrase


class ResponseShapeError(ScheduleFetchError):
    """Raised when the body is not JSON or not a list of schedules."""
    pass


class InvalidDayError(ScheduleFetchError):
    """Raised when the requested day cannot be parsed."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid day: {value!r}", date=value)
        self.value = value
