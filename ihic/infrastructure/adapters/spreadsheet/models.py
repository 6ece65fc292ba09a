"""Validation model for spreadsheet rows."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ....domain.entities import InventoryItem
from ....domain.services import format_date


class SpreadsheetRow(BaseModel):
    """One row of the inventory spreadsheet, keyed by its column headers."""

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
        frozen=True,
    )

    item_id: str = Field(alias="Item ID", min_length=1)
    item_name: str = Field(alias="Item Name", min_length=1)
    category: str = Field(default="", alias="Category")
    batch_number: str = Field(default="", alias="Batch/GRIS No.")
    brand: str = Field(default="", alias="Brand")
    supplier: str = Field(default="", alias="Supplier")
    item_expiry_date: str = Field(default="", alias="Item Expiry Date")
    stock_available: str = Field(default="", alias="Stock Available")
    purchased_date: str = Field(default="", alias="Purchased Date")
    invoice_url: str = Field(default="", alias="Invoice")
    halal_certificate: str = Field(default="", alias="Halal Certificate")
    certificate_expiry_date: str = Field(default="", alias="Certificate Expiry Date")
    certificate_url: str = Field(default="", alias="Halal Certificate URL")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_cell(cls, value: Any) -> str:
        """Turn any cell value into text."""
        if value is None:
            return ""
        if isinstance(value, datetime):
            return format_date(value.date())
        if isinstance(value, date):
            return format_date(value)
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    def to_item(self) -> InventoryItem:
        """Convert the validated row to a domain entity."""
        return InventoryItem(**self.model_dump())
