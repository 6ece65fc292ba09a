"""CSV inventory repository implementation."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from ....application.exceptions import ItemRepositoryError
from ....domain.entities import InventoryItem
from .rows import rows_to_items

logger = logging.getLogger(__name__)


class CsvItemRepository:
    """
    Item repository reading a CSV export of the inventory spreadsheet.

    Implements the ItemRepository port.
    """

    def __init__(self, path: Path, *, encoding: str = "utf-8-sig") -> None:
        """
        Initialize the repository.

        Args:
            path: Location of the CSV file; the first line holds the headers.
            encoding: File encoding. The default tolerates a byte order mark.
        """
        self._path = Path(path)
        self._encoding = encoding

    def get_all_items(self) -> list[InventoryItem]:
        """
        Read all items from the CSV file.

        Raises:
            ItemRepositoryError: If the file is missing or unreadable.
        """
        if not self._path.is_file():
            msg = f"Input file not found: {self._path}"
            raise ItemRepositoryError(msg)

        try:
            with self._path.open(newline="", encoding=self._encoding) as handle:
                reader = csv.DictReader(handle)
                # line_num is the last line of the record, quoted line breaks included
                rows = [(reader.line_num, row) for row in reader]
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            msg = f"Failed to read {self._path}: {e}"
            raise ItemRepositoryError(msg) from e

        logger.debug("Read %d rows from %s", len(rows), self._path)
        return rows_to_items(rows, source=str(self._path))
