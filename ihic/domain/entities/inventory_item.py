"""Inventory item entity read from one spreadsheet row."""

import re
from dataclasses import dataclass

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


@dataclass(frozen=True, slots=True)
class InventoryItem:
    """An inventory record with its halal certification details."""

    item_id: str
    item_name: str
    category: str = ""
    batch_number: str = ""
    brand: str = ""
    supplier: str = ""
    item_expiry_date: str = ""
    stock_available: str = ""
    purchased_date: str = ""
    invoice_url: str = ""
    halal_certificate: str = ""
    certificate_expiry_date: str = ""
    certificate_url: str = ""

    @property
    def has_halal_certificate(self) -> bool:
        """Check if a halal certificate is on file."""
        return self.halal_certificate.strip().lower() == "available"

    @property
    def page_filename(self) -> str:
        """File name of this item's detail page."""
        return f"item_{_UNSAFE_FILENAME_CHARS.sub('_', self.item_id)}.html"
