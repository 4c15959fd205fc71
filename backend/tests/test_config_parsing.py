import pytest

from scheduleday.config import Settings, get_settings, reset_settings

# Tests for Settings.from_env() and the cached settings accessor


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCHEDULE_API_BASE_URL", "https://api.example.test")
    monkeypatch.delenv("SCHEDULE_FETCH_TIMEOUT_SECONDS", raising=False)
    monkeypatch.delenv("SCHEDULE_TIMEZONE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


def test_defaults_from_env() -> None:
    """Test that optional settings fall back to their defaults."""
    settings = Settings.from_env()

    assert settings.api_base_url == "https://api.example.test"
    assert settings.fetch_timeout_seconds == 10.0
    assert settings.schedule_timezone == "UTC"
    assert settings.log_level == "INFO"


def test_all_values_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that every setting can be overridden from the environment."""
    monkeypatch.setenv("SCHEDULE_FETCH_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("SCHEDULE_TIMEZONE", "Europe/Berlin")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.fetch_timeout_seconds == 2.5
    assert settings.schedule_timezone == "Europe/Berlin"
    assert settings.tzinfo.key == "Europe/Berlin"
    assert settings.log_level == "DEBUG"


def test_base_url_is_required(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a missing base URL raises an error."""
    monkeypatch.setenv("SCHEDULE_API_BASE_URL", "  ")

    with pytest.raises(ValueError, match="SCHEDULE_API_BASE_URL environment variable must be set"):
        Settings.from_env()


@pytest.mark.parametrize("value", ["ftp://files.example.test", "api.example.test", "https://"])
def test_base_url_must_be_http(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    """Test that non-http(s) or hostless base URLs are rejected."""
    monkeypatch.setenv("SCHEDULE_API_BASE_URL", value)

    with pytest.raises(ValueError, match="valid http/https URL"):
        Settings.from_env()


@pytest.mark.parametrize("value", ["0", "-1"])
def test_timeout_must_be_positive(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("SCHEDULE_FETCH_TIMEOUT_SECONDS", value)

    with pytest.raises(ValueError, match="must be greater than 0"):
        Settings.from_env()


def test_timeout_must_be_numeric(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCHEDULE_FETCH_TIMEOUT_SECONDS", "ten")

    with pytest.raises(ValueError, match="must be a number"):
        Settings.from_env()


def test_unknown_timezone_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCHEDULE_TIMEZONE", "Mars/Olympus_Mons")

    with pytest.raises(ValueError, match="not a known timezone"):
        Settings.from_env()


def test_get_settings_is_cached_until_reset(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that settings are read once and re-read only after reset."""
    first = get_settings()
    monkeypatch.setenv("SCHEDULE_API_BASE_URL", "https://other.example.test")

    assert get_settings() is first

    reset_settings()
    assert get_settings().api_base_url == "https://other.example.test"
