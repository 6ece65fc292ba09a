"""Port for the inventory record source - driven/secondary port."""

from typing import Protocol

from ...domain.entities import InventoryItem


class ItemRepository(Protocol):
    """
    Port for reading inventory records.

    This is a driven (secondary) port that defines how the application
    obtains the rows of the inventory spreadsheet.
    """

    def get_all_items(self) -> list[InventoryItem]:
        """
        Read all inventory items.

        Returns:
            Items in spreadsheet order.

        Raises:
            ItemRepositoryError: If the source cannot be read.
        """
        ...
