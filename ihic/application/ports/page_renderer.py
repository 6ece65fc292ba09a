"""Port for page rendering - driven/secondary port."""

from typing import Protocol

from ...domain.entities import EvaluatedItem, InventoryReport


class PageRenderer(Protocol):
    """Port turning evaluated items into page markup."""

    def render_item(self, evaluated: EvaluatedItem) -> str:
        """Render the detail page of one item."""
        ...

    def render_index(self, report: InventoryReport) -> str:
        """Render the landing page listing every item."""
        ...
