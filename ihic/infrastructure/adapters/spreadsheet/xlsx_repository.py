"""Excel workbook inventory repository implementation."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Any

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from ....application.exceptions import ItemRepositoryError
from ....domain.entities import InventoryItem
from .rows import FIRST_DATA_ROW, rows_to_items

logger = logging.getLogger(__name__)


class XlsxItemRepository:
    """
    Item repository reading an .xlsx inventory workbook.

    Implements the ItemRepository port. Reads one worksheet whose first row
    holds the column headers.
    """

    def __init__(self, path: Path, *, sheet_name: str | None = None) -> None:
        """
        Initialize the repository.

        Args:
            path: Location of the workbook.
            sheet_name: Worksheet to read; the active sheet when omitted.
        """
        self._path = Path(path)
        self._sheet_name = sheet_name

    def get_all_items(self) -> list[InventoryItem]:
        """
        Read all items from the workbook.

        Raises:
            ItemRepositoryError: If the workbook or worksheet cannot be read.
        """
        if not self._path.is_file():
            msg = f"Input file not found: {self._path}"
            raise ItemRepositoryError(msg)

        try:
            wb = openpyxl.load_workbook(self._path, read_only=True, data_only=True)
        except (OSError, InvalidFileException, zipfile.BadZipFile) as e:
            msg = f"Failed to open workbook {self._path}: {e}"
            raise ItemRepositoryError(msg) from e

        try:
            rows = self._read_rows(wb)
        finally:
            wb.close()

        logger.debug("Read %d rows from %s", len(rows), self._path)
        return rows_to_items(enumerate(rows, start=FIRST_DATA_ROW), source=str(self._path))

    def _read_rows(self, wb: Any) -> list[dict[str, Any]]:
        """Read the worksheet as a list of header-keyed rows."""
        if self._sheet_name:
            if self._sheet_name not in wb.sheetnames:
                msg = f"Worksheet {self._sheet_name!r} not found in {self._path}"
                raise ItemRepositoryError(msg)
            ws = wb[self._sheet_name]
        else:
            ws = wb.active

        values = ws.iter_rows(values_only=True)
        header_row = next(values, None)
        if header_row is None:
            return []

        headers = [str(h).strip() if h is not None else "" for h in header_row]
        return [
            {header: cell for header, cell in zip(headers, row, strict=False) if header}
            for row in values
        ]
