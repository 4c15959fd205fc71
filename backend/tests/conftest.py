"""Shared test fixtures and configuration."""
import os

import pytest

# Modules resolve settings lazily, but keep a usable base URL around for
# tests that go through get_settings()
os.environ.setdefault("SCHEDULE_API_BASE_URL", "https://api.example.test")

from scheduleday.config import reset_settings  # noqa: E402


@pytest.fixture()
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings()
    yield
    reset_settings()
