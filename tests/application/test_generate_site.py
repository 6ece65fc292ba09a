"""Tests for the GenerateSite use case."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import pytest

from ihic.application.exceptions import ItemRepositoryError, PageWriteError
from ihic.application.use_cases import GenerateSite
from ihic.domain.entities import EvaluatedItem, InventoryItem, InventoryReport
from ihic.infrastructure.adapters import FileSystemSiteWriter, HtmlPageRenderer, RendererConfig


class FakeRepository:
    """In-memory item repository."""

    def __init__(self, items: list[InventoryItem], *, error: Exception | None = None) -> None:
        self._items = items
        self._error = error

    def get_all_items(self) -> list[InventoryItem]:
        if self._error:
            raise self._error
        return list(self._items)


class FakeRenderer:
    """Renderer producing short marker strings."""

    def render_item(self, evaluated: EvaluatedItem) -> str:
        return f"item:{evaluated.item.item_id}:{evaluated.item_expiry.state}"

    def render_index(self, report: InventoryReport) -> str:
        return f"index:{report.total_count}"


class FakeWriter:
    """Writer recording pages, optionally failing for some names."""

    def __init__(self, *, failing: set[str] | None = None) -> None:
        self.pages: dict[str, str] = {}
        self.prepared = False
        self._failing = failing or set()

    def prepare(self) -> None:
        self.prepared = True

    def write_page(self, filename: str, content: str) -> Path:
        if filename in self._failing:
            msg = f"disk full: {filename}"
            raise PageWriteError(msg)
        self.pages[filename] = content
        return Path(filename)


class TestGenerateSite:
    """Tests for GenerateSite use case."""

    def test_writes_detail_pages_and_index(
        self, inventory: list[InventoryItem], today: date
    ) -> None:
        """One page per item plus the index is written."""
        writer = FakeWriter()
        use_case = GenerateSite(FakeRepository(inventory), FakeRenderer(), writer)

        result = use_case.execute(today)

        assert writer.prepared is True
        assert sorted(writer.pages) == [
            "index.html",
            "item_101.html",
            "item_102.html",
            "item_103.html",
        ]
        assert writer.pages["item_102.html"] == "item:102:near_expiry"
        assert writer.pages["index.html"] == "index:3"
        assert result.pages_written == 4
        assert result.pages_failed == 0
        assert result.success is True
        assert result.dry_run is False
        assert result.report.today == today

    def test_uses_given_date(self, near_expiry_item: InventoryItem) -> None:
        """Statuses depend only on the date passed in."""
        writer = FakeWriter()
        use_case = GenerateSite(FakeRepository([near_expiry_item]), FakeRenderer(), writer)

        use_case.execute(date(2025, 5, 1))

        assert writer.pages["item_102.html"] == "item:102:valid"

    def test_failed_page_does_not_abort(
        self, inventory: list[InventoryItem], today: date
    ) -> None:
        """A page that cannot be written is counted and the rest still go out."""
        writer = FakeWriter(failing={"item_102.html"})
        use_case = GenerateSite(FakeRepository(inventory), FakeRenderer(), writer)

        result = use_case.execute(today)

        assert "item_102.html" not in writer.pages
        assert "item_103.html" in writer.pages
        assert "index.html" in writer.pages
        assert result.pages_written == 3
        assert result.pages_failed == 1
        assert result.success is False

    def test_dry_run_writes_nothing(self, inventory: list[InventoryItem], today: date) -> None:
        """Dry run evaluates but never touches the writer."""
        writer = FakeWriter()
        use_case = GenerateSite(FakeRepository(inventory), FakeRenderer(), writer, dry_run=True)

        result = use_case.execute(today)

        assert writer.prepared is False
        assert writer.pages == {}
        assert result.dry_run is True
        assert result.pages_written == 0
        assert result.report.total_count == 3

    def test_repository_error_propagates(self, today: date) -> None:
        """An unreadable source stops the run."""
        repository = FakeRepository([], error=ItemRepositoryError("missing"))
        use_case = GenerateSite(repository, FakeRenderer(), FakeWriter())

        with pytest.raises(ItemRepositoryError, match="missing"):
            use_case.execute(today)

    def test_empty_inventory_still_writes_index(self, today: date) -> None:
        """An empty spreadsheet produces just the index page."""
        writer = FakeWriter()
        result = GenerateSite(FakeRepository([]), FakeRenderer(), writer).execute(today)

        assert list(writer.pages) == ["index.html"]
        assert result.pages_written == 1

    def test_colliding_page_names_are_kept_apart(
        self, tmp_path: Path, today: date, caplog: pytest.LogCaptureFixture
    ) -> None:
        """IDs that sanitize to the same name still get one page each."""
        items = [
            InventoryItem(item_id="A 1", item_name="Beef"),
            InventoryItem(item_id="A_1", item_name="Lamb"),
        ]
        use_case = GenerateSite(
            FakeRepository(items),
            HtmlPageRenderer(RendererConfig()),
            FileSystemSiteWriter(tmp_path),
        )

        with caplog.at_level(logging.WARNING):
            result = use_case.execute(today)

        pages = sorted(p.name for p in tmp_path.iterdir())
        assert pages == ["index.html", "item_A_1.html", "item_A_1_2.html"]
        assert result.pages_written == len(pages)
        assert "Beef" in (tmp_path / "item_A_1.html").read_text(encoding="utf-8")
        assert "Lamb" in (tmp_path / "item_A_1_2.html").read_text(encoding="utf-8")
        assert "item_A_1_2.html" in caplog.text
