"""Domain entities - Objects with identity and lifecycle."""

from .evaluated_item import EvaluatedItem
from .inventory_item import InventoryItem
from .inventory_report import InventoryReport

__all__ = [
    "EvaluatedItem",
    "InventoryItem",
    "InventoryReport",
]
