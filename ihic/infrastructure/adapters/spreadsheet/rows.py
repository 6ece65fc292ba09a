"""Conversion of raw spreadsheet rows into inventory items."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from ....domain.entities import InventoryItem
from .models import SpreadsheetRow

logger = logging.getLogger(__name__)

# Spreadsheet row 1 is the header, so data starts on row 2.
FIRST_DATA_ROW = 2


def rows_to_items(
    rows: Iterable[tuple[int, Mapping[str, Any]]], *, source: str
) -> list[InventoryItem]:
    """
    Validate rows and convert them to items, skipping invalid rows.

    Each row comes with the row (or line) number it was read from. Blank
    rows are ignored silently; rows missing an ID or a name are logged with
    their number.
    """
    items: list[InventoryItem] = []

    for row_number, row in rows:
        if _is_blank(row):
            continue
        cells = {key.strip(): value for key, value in row.items() if isinstance(key, str)}
        try:
            items.append(SpreadsheetRow.model_validate(cells).to_item())
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors())
            logger.warning("Skipping %s row %d: invalid %s", source, row_number, fields)

    return items


def _is_blank(row: Mapping[str, Any]) -> bool:
    return all(value is None or not str(value).strip() for value in row.values())
