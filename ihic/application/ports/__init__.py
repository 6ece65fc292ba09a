"""Application ports - Interfaces for external adapters."""

from .item_repository import ItemRepository
from .page_renderer import PageRenderer
from .site_writer import SiteWriter

__all__ = [
    "ItemRepository",
    "PageRenderer",
    "SiteWriter",
]
