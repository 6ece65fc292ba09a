"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from datetime import date
from functools import cached_property
from pathlib import Path

from croniter import croniter

from ..adapters.html import RendererConfig

RUN_MODES = ("once", "scheduled")


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Application settings container."""

    # Input and output
    input_path: str = field(default_factory=lambda: _env_str("INPUT_PATH", "Halal_Info_2.csv"))
    sheet_name: str = field(default_factory=lambda: _env_str("SHEET_NAME"))
    output_dir: str = field(default_factory=lambda: _env_str("OUTPUT_DIR", "generated"))

    # Page content
    site_title: str = field(
        default_factory=lambda: _env_str("SITE_TITLE", "INSTANT HALAL & INVENTORY CHECKER")
    )
    contact_email: str = field(default_factory=lambda: _env_str("CONTACT_EMAIL", "mygml021@gmail.com"))

    # Evaluation date (ISO format); empty means the day of the run
    generation_date_raw: str = field(default_factory=lambda: _env_str("GENERATION_DATE"))

    # Run configuration
    run_mode: str = field(default_factory=lambda: _env_str("RUN_MODE", "once"))
    cron_schedule: str = field(default_factory=lambda: _env_str("CRON_SCHEDULE", "0 0 * * *"))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))
    dry_run: bool = field(default_factory=lambda: _env_bool("DRY_RUN"))

    def validate(self) -> None:
        """Validate settings."""
        errors: list[str] = []

        if not self.input_path.strip():
            errors.append("INPUT_PATH must not be empty")
        if not self.output_dir.strip():
            errors.append("OUTPUT_DIR must not be empty")
        if self.run_mode.lower() not in RUN_MODES:
            errors.append(f"RUN_MODE must be one of {', '.join(RUN_MODES)}, got {self.run_mode!r}")
        if self.run_mode.lower() == "scheduled" and not croniter.is_valid(self.cron_schedule):
            errors.append(f"CRON_SCHEDULE is not a valid cron expression: {self.cron_schedule!r}")
        if self.generation_date_raw:
            try:
                date.fromisoformat(self.generation_date_raw)
            except ValueError:
                errors.append(f"GENERATION_DATE must be an ISO date, got {self.generation_date_raw!r}")

        if errors:
            msg = "; ".join(errors)
            raise ValueError(msg)

    @cached_property
    def generation_date(self) -> date | None:
        """Fixed evaluation date, or None to use the day of each run."""
        if not self.generation_date_raw:
            return None
        return date.fromisoformat(self.generation_date_raw)

    @cached_property
    def input_file(self) -> Path:
        """Spreadsheet location."""
        return Path(self.input_path).expanduser()

    @cached_property
    def output_path(self) -> Path:
        """Output directory location."""
        return Path(self.output_dir).expanduser()

    @cached_property
    def renderer_config(self) -> RendererConfig:
        """Get page rendering configuration."""
        return RendererConfig(
            site_title=self.site_title,
            contact_email=self.contact_email,
        )


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
