"""Inventory report aggregate root."""

from dataclasses import dataclass, field
from datetime import date

from ..value_objects import ExpiryKind, ExpiryState
from .evaluated_item import EvaluatedItem


@dataclass(slots=True)
class InventoryReport:
    """Aggregate root representing the evaluation of a whole spreadsheet."""

    items: list[EvaluatedItem]
    today: date

    _counts: dict[tuple[ExpiryKind, ExpiryState], int] = field(
        init=False, repr=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        """Count statuses by kind and state."""
        self._counts = {(kind, state): 0 for kind in ExpiryKind for state in ExpiryState}
        for evaluated in self.items:
            for kind, status in evaluated.statuses():
                self._counts[(kind, status.state)] += 1

    def count(self, kind: ExpiryKind, state: ExpiryState) -> int:
        """Number of dates of the given kind in the given state."""
        return self._counts[(kind, state)]

    @property
    def total_count(self) -> int:
        """Total item count."""
        return len(self.items)

    @property
    def requiring_attention(self) -> list[EvaluatedItem]:
        """Items with an expired or near-expiry date."""
        return [e for e in self.items if e.requires_attention]

    @property
    def expired_count(self) -> int:
        """Count of expired dates across items and certificates."""
        return sum(self.count(kind, ExpiryState.EXPIRED) for kind in ExpiryKind)

    @property
    def near_expiry_count(self) -> int:
        """Count of near-expiry dates across items and certificates."""
        return sum(self.count(kind, ExpiryState.NEAR_EXPIRY) for kind in ExpiryKind)

    @property
    def invalid_count(self) -> int:
        """Count of unparseable dates across items and certificates."""
        return sum(self.count(kind, ExpiryState.INVALID) for kind in ExpiryKind)

    @property
    def requires_attention(self) -> bool:
        """Check if any item needs follow-up."""
        return bool(self.expired_count or self.near_expiry_count)

    def get_summary(self) -> str:
        """Generate a human-readable summary of the report."""
        parts: list[str] = []
        if self.expired_count:
            parts.append(f"{self.expired_count} expired")
        if self.near_expiry_count:
            parts.append(f"{self.near_expiry_count} near expiry")
        if self.invalid_count:
            parts.append(f"{self.invalid_count} unrecognised")

        attention = len(self.requiring_attention)
        if not parts:
            return f"All {self.total_count} items are valid"
        if not attention:
            return f"No items requiring attention: {', '.join(parts)}"
        return f"{attention} of {self.total_count} items requiring attention: {', '.join(parts)}"

    def get_items_sorted_by_urgency(self) -> list[EvaluatedItem]:
        """Get all items sorted by urgency (most urgent first, undated last)."""
        def key(evaluated: EvaluatedItem) -> tuple[bool, int]:
            remaining = evaluated.days_until_next_expiry
            return (remaining is None, remaining or 0)

        return sorted(self.items, key=key)
