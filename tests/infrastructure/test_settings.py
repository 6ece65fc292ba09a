"""Tests for environment settings."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from ihic.infrastructure.config import Settings, load_settings

ENV_VARS = (
    "INPUT_PATH",
    "SHEET_NAME",
    "OUTPUT_DIR",
    "SITE_TITLE",
    "CONTACT_EMAIL",
    "GENERATION_DATE",
    "RUN_MODE",
    "CRON_SCHEDULE",
    "LOG_LEVEL",
    "DRY_RUN",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test from an empty configuration."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        """Defaults point at the usual spreadsheet and output folder."""
        settings = load_settings()
        assert settings.input_file == Path("Halal_Info_2.csv")
        assert settings.output_path == Path("generated")
        assert settings.contact_email == "mygml021@gmail.com"
        assert settings.run_mode == "once"
        assert settings.dry_run is False
        assert settings.generation_date is None

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Values come from environment variables."""
        monkeypatch.setenv("INPUT_PATH", "data/stock.xlsx")
        monkeypatch.setenv("OUTPUT_DIR", "public")
        monkeypatch.setenv("CONTACT_EMAIL", "pic@example.com")
        monkeypatch.setenv("GENERATION_DATE", "2025-05-22")
        monkeypatch.setenv("DRY_RUN", "yes")

        settings = load_settings()

        assert settings.input_file == Path("data/stock.xlsx")
        assert settings.output_path == Path("public")
        assert settings.generation_date == date(2025, 5, 22)
        assert settings.dry_run is True
        assert settings.renderer_config.contact_email == "pic@example.com"

    def test_invalid_generation_date(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """GENERATION_DATE must be ISO formatted."""
        monkeypatch.setenv("GENERATION_DATE", "22/05/2025")
        with pytest.raises(ValueError, match="GENERATION_DATE"):
            load_settings()

    def test_invalid_run_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unknown run modes are rejected."""
        monkeypatch.setenv("RUN_MODE", "watch")
        with pytest.raises(ValueError, match="RUN_MODE"):
            load_settings()

    def test_invalid_cron_in_scheduled_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Scheduled mode needs a valid cron expression."""
        monkeypatch.setenv("RUN_MODE", "scheduled")
        monkeypatch.setenv("CRON_SCHEDULE", "every day")
        with pytest.raises(ValueError, match="CRON_SCHEDULE"):
            load_settings()

    def test_empty_input_path(self) -> None:
        """An explicitly empty input path is rejected."""
        settings = Settings(input_path="  ")
        with pytest.raises(ValueError, match="INPUT_PATH"):
            settings.validate()
