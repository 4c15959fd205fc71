import os
import threading
from urllib.parse import urlparse
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()

DEFAULT_FETCH_TIMEOUT_SECONDS = 10.0


class Settings(BaseModel):
    api_base_url: str = Field(default="")
    fetch_timeout_seconds: float = Field(default=DEFAULT_FETCH_TIMEOUT_SECONDS)
    schedule_timezone: str = Field(default="UTC")
    log_level: str = Field(default="INFO")

    @classmethod
    def from_env(cls) -> "Settings":
        api_base_url = os.getenv("SCHEDULE_API_BASE_URL", "").strip()
        if not api_base_url:
            raise ValueError("SCHEDULE_API_BASE_URL environment variable must be set")

        parsed = urlparse(api_base_url)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ValueError(
                "SCHEDULE_API_BASE_URL must be a valid http/https URL with host"
            )

        raw_timeout = os.getenv(
            "SCHEDULE_FETCH_TIMEOUT_SECONDS",
            str(cls.model_fields["fetch_timeout_seconds"].default),
        ).strip()
        try:
            fetch_timeout_seconds = float(raw_timeout)
        except ValueError as exc:
            raise ValueError(
                f"SCHEDULE_FETCH_TIMEOUT_SECONDS must be a number: {exc}"
            ) from exc
        if fetch_timeout_seconds <= 0:
            raise ValueError("SCHEDULE_FETCH_TIMEOUT_SECONDS must be greater than 0")

        schedule_timezone = os.getenv(
            "SCHEDULE_TIMEZONE", cls.model_fields["schedule_timezone"].default
        ).strip()
        try:
            ZoneInfo(schedule_timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(
                f"SCHEDULE_TIMEZONE is not a known timezone: {schedule_timezone!r}"
            ) from exc

        return cls(
            api_base_url=api_base_url,
            fetch_timeout_seconds=fetch_timeout_seconds,
            schedule_timezone=schedule_timezone,
            log_level=os.getenv("LOG_LEVEL", cls.model_fields["log_level"].default)
            .strip()
            .upper(),
        )

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.schedule_timezone)


_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_settings() -> Settings:
    """Get settings instance, creating it on first access.

    The module can be imported without a configured environment; validation
    happens on first access.

    Raises:
        ValueError: If required environment variables are missing or invalid
    """
    global _settings_instance

    if _settings_instance is not None:
        return _settings_instance

    with _settings_lock:
        # Another thread may have initialized while we waited for the lock
        if _settings_instance is None:
            _settings_instance = Settings.from_env()

    return _settings_instance


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings_instance

    with _settings_lock:
        _settings_instance = None
