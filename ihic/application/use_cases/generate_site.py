"""Use case for generating the static inventory site."""

import logging
from dataclasses import dataclass
from datetime import date

from ...domain.entities import InventoryReport
from ...domain.services import InventoryAnalyzer
from ..exceptions import PageWriteError
from ..ports import ItemRepository, PageRenderer, SiteWriter

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.html"


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Result of the site generation use case."""

    report: InventoryReport
    pages_written: int
    pages_failed: int
    dry_run: bool

    @property
    def success(self) -> bool:
        """Check if every page was written."""
        return self.pages_failed == 0


class GenerateSite:
    """
    Use case for building one detail page per item plus an index page.

    Orchestrates the domain analysis with the spreadsheet, rendering and
    writing adapters.
    """

    def __init__(
        self,
        item_repository: ItemRepository,
        renderer: PageRenderer,
        writer: SiteWriter,
        analyzer: InventoryAnalyzer | None = None,
        *,
        dry_run: bool = False,
    ) -> None:
        """
        Initialize the use case.

        Args:
            item_repository: Adapter reading inventory records.
            renderer: Adapter producing page markup.
            writer: Adapter storing the pages.
            analyzer: Domain service evaluating expiry dates.
            dry_run: If True, evaluate and log without writing pages.
        """
        self._repository = item_repository
        self._renderer = renderer
        self._writer = writer
        self._analyzer = analyzer or InventoryAnalyzer()
        self._dry_run = dry_run

    def execute(self, today: date) -> GenerationResult:
        """
        Execute the site generation use case.

        Args:
            today: The date expiry statuses are computed for.

        Returns:
            GenerationResult containing the report and write counts.

        Raises:
            ItemRepositoryError: If the spreadsheet cannot be read.
            PageWriteError: If the output location cannot be prepared.
        """
        logger.info("Starting site generation for %s...", today.isoformat())

        items = self._repository.get_all_items()
        logger.info("Read %d items", len(items))

        report = self._analyzer.analyze(items, today)
        logger.info("Analysis complete: %s", report.get_summary())

        if self._dry_run:
            logger.info("DRY RUN: Would write %d pages", report.total_count + 1)
            self._log_dry_run_report(report)
            return GenerationResult(report=report, pages_written=0, pages_failed=0, dry_run=True)

        self._writer.prepare()
        written, failed = self._write_pages(report)
        logger.info("Site generation complete: %d pages written, %d failed", written, failed)

        return GenerationResult(
            report=report,
            pages_written=written,
            pages_failed=failed,
            dry_run=False,
        )

    def _write_pages(self, report: InventoryReport) -> tuple[int, int]:
        """Render and write every detail page followed by the index."""
        written = 0
        failed = 0

        for evaluated in report.items:
            if evaluated.page_filename != evaluated.item.page_filename:
                logger.warning(
                    "Page name %s is already used, writing %s (%s) to %s",
                    evaluated.item.page_filename,
                    evaluated.item.item_name,
                    evaluated.item.item_id,
                    evaluated.page_filename,
                )
            html = self._renderer.render_item(evaluated)
            if self._write(evaluated.page_filename, html):
                written += 1
            else:
                failed += 1

        if self._write(INDEX_FILENAME, self._renderer.render_index(report)):
            written += 1
        else:
            failed += 1

        return written, failed

    def _write(self, filename: str, content: str) -> bool:
        """Write one page, logging instead of raising on failure."""
        try:
            self._writer.write_page(filename, content)
        except PageWriteError:
            logger.exception("Failed to write %s", filename)
            return False

        logger.info("Generated: %s", filename)
        return True

    def _log_dry_run_report(self, report: InventoryReport) -> None:
        """Log report details in dry run mode."""
        logger.info("  Date: %s", report.today.isoformat())
        logger.info("  Summary: %s", report.get_summary())
        logger.info("  Expired: %d", report.expired_count)
        logger.info("  Near expiry: %d", report.near_expiry_count)
        logger.info("  Unrecognised: %d", report.invalid_count)
        for evaluated in report.requiring_attention:
            for kind, status in evaluated.statuses():
                if status.requires_alert:
                    logger.info(
                        "  - %s (%s): %s %s %s",
                        evaluated.item.item_name,
                        evaluated.item.item_id,
                        kind.display_name,
                        status.state,
                        status.text,
                    )
