"""Inventory item paired with its evaluated expiry statuses."""

from dataclasses import dataclass

from ..value_objects import ExpiryKind, ExpiryStatus
from .inventory_item import InventoryItem


@dataclass(frozen=True, slots=True)
class EvaluatedItem:
    """An item with the statuses of its expiry dates on a given day."""

    item: InventoryItem
    item_expiry: ExpiryStatus
    certificate_expiry: ExpiryStatus | None
    purchased_date_text: str
    # Unique within a report; see InventoryAnalyzer.analyze
    page_filename: str

    def statuses(self) -> list[tuple[ExpiryKind, ExpiryStatus]]:
        """Evaluated dates by kind; the certificate only when one is on file."""
        result = [(ExpiryKind.ITEM, self.item_expiry)]
        if self.certificate_expiry is not None:
            result.append((ExpiryKind.CERTIFICATE, self.certificate_expiry))
        return result

    @property
    def requires_attention(self) -> bool:
        """Check if any tracked date is expired or near expiry."""
        return any(status.requires_alert for _, status in self.statuses())

    @property
    def days_until_next_expiry(self) -> int | None:
        """Fewest days remaining across tracked dates, None if none are dated."""
        remaining = [
            status.days_remaining
            for _, status in self.statuses()
            if status.days_remaining is not None
        ]
        return min(remaining, default=None)
