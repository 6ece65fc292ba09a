#!/usr/bin/env python3
"""
i-HIC Static Page Generator

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import logging
import sys
import time
from datetime import date, datetime
from typing import TYPE_CHECKING

from croniter import croniter

from . import __version__
from .application.exceptions import ApplicationError
from .application.use_cases import GenerateSite
from .domain.services import ExpiryEvaluator, InventoryAnalyzer
from .infrastructure.adapters import (
    FileSystemSiteWriter,
    HtmlPageRenderer,
    create_item_repository,
)
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from .application.ports import ItemRepository
    from .application.use_cases import GenerationResult

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    def create_item_repository(self) -> ItemRepository:
        """Create the spreadsheet adapter for the configured input file."""
        return create_item_repository(
            self._settings.input_file,
            sheet_name=self._settings.sheet_name or None,
        )

    def create_renderer(self) -> HtmlPageRenderer:
        """Create the HTML page renderer."""
        return HtmlPageRenderer(self._settings.renderer_config)

    def create_site_writer(self) -> FileSystemSiteWriter:
        """Create the output directory writer."""
        return FileSystemSiteWriter(self._settings.output_path)

    def create_generate_use_case(self) -> GenerateSite:
        """Create the main use case with all dependencies."""
        return GenerateSite(
            item_repository=self.create_item_repository(),
            renderer=self.create_renderer(),
            writer=self.create_site_writer(),
            analyzer=InventoryAnalyzer(ExpiryEvaluator()),
            dry_run=self._settings.dry_run,
        )


class Application:
    """
    Main application orchestrator.

    Handles run modes (single execution or scheduled regeneration) and
    decides which day the pages are generated for.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    def resolve_today(self) -> date:
        """The evaluation date: GENERATION_DATE if set, otherwise the current day."""
        return self._settings.generation_date or date.today()

    def run_once(self) -> GenerationResult:
        """Generate the site a single time."""
        use_case = self._container.create_generate_use_case()
        return use_case.execute(self.resolve_today())

    def run_scheduled(self) -> None:
        """Regenerate the site on a cron schedule so statuses stay current."""
        logger.info("Starting scheduled mode with cron: %s", self._settings.cron_schedule)

        # Run immediately on startup
        logger.info("Running initial generation on startup...")
        self._run_logged()

        cron = croniter(self._settings.cron_schedule, datetime.now())

        while True:
            next_run = cron.get_next(datetime)
            sleep_seconds = (next_run - datetime.now()).total_seconds()

            if sleep_seconds > 0:
                logger.info("Next generation scheduled for %s", next_run.isoformat())
                time.sleep(sleep_seconds)

            logger.info("Running scheduled generation...")
            self._run_logged()

    def _run_logged(self) -> None:
        """Run once, keeping the schedule alive when a run fails."""
        try:
            self.run_once()
        except ApplicationError as e:
            logger.error("Generation failed: %s", e)

    def run(self) -> int:
        """
        Run the application based on configured mode.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        match self._settings.run_mode.lower():
            case "once":
                logger.info("Running in single-execution mode")
                result = self.run_once()
                return 0 if result.success else 1

            case "scheduled":
                self.run_scheduled()
                return 0  # Never reached in scheduled mode

            case _:
                logger.error(
                    "Invalid RUN_MODE: %s (use 'once' or 'scheduled')",
                    self._settings.run_mode,
                )
                return 1


def run() -> int:
    """Load settings and run the application, returning an exit code."""
    try:
        logger.info("i-HIC page generator %s starting...", __version__)

        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        app = Application(settings)
        return app.run()

    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except ApplicationError as e:
        logger.error("Generation failed: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
