"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from nullsafe.config import reset_conversion_settings, runtime

TEST_TIMEZONE = "Europe/Oslo"


@dataclass
class FakeElement:
    """Stand-in for an XML-binding element boxing its payload in ``value``."""

    value: Any
    name: str = "element"


@pytest.fixture(autouse=True)
def pinned_settings(monkeypatch):
    """Run every test in the Oslo zone with no .env files and fresh settings."""
    monkeypatch.setenv("NULLSAFE_TIMEZONE", TEST_TIMEZONE)
    monkeypatch.delenv("NULLSAFE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NULLSAFE_LOG_DEFAULTS", raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    reset_conversion_settings()
    yield
    reset_conversion_settings()


@pytest.fixture
def element():
    return FakeElement
