"""Tests for calrange.logs."""

import logging
from typing import Any

import pytest

from calrange.logs import configure_logging


@pytest.fixture
def basic_config(monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
    captured: dict[str, Any] = {}

    def fake_basic_config(**kwargs: Any) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
    return captured


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_defaults_to_warning(self, basic_config: dict[str, Any]) -> None:
        """Should default to WARNING without forcing."""
        configure_logging()

        assert basic_config["level"] == logging.WARNING
        assert basic_config["force"] is False

    def test_accepts_level_names(self, basic_config: dict[str, Any]) -> None:
        """Should translate level names, case-insensitively."""
        configure_logging(level="debug", force=True)

        assert basic_config["level"] == logging.DEBUG
        assert basic_config["force"] is True

    def test_unknown_level_name_falls_back(self, basic_config: dict[str, Any]) -> None:
        """Should fall back to WARNING for unknown names."""
        configure_logging(level="chatty")

        assert basic_config["level"] == logging.WARNING
