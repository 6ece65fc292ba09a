"""Spreadsheet adapters reading inventory records."""

from pathlib import Path

from .csv_repository import CsvItemRepository
from .models import SpreadsheetRow
from .xlsx_repository import XlsxItemRepository

__all__ = [
    "CsvItemRepository",
    "SpreadsheetRow",
    "XlsxItemRepository",
    "create_item_repository",
]

_XLSX_SUFFIXES = {".xlsx", ".xlsm"}


def create_item_repository(path: Path, *, sheet_name: str | None = None) -> CsvItemRepository | XlsxItemRepository:
    """Pick a repository for the input file by its extension."""
    path = Path(path)
    if path.suffix.lower() in _XLSX_SUFFIXES:
        return XlsxItemRepository(path, sheet_name=sheet_name)
    return CsvItemRepository(path)
