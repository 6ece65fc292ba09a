"""Infrastructure adapters - Implementations of application ports."""

from .filesystem import FileSystemSiteWriter
from .html import HtmlPageRenderer, RendererConfig
from .spreadsheet import CsvItemRepository, XlsxItemRepository, create_item_repository

__all__ = [
    "CsvItemRepository",
    "FileSystemSiteWriter",
    "HtmlPageRenderer",
    "RendererConfig",
    "XlsxItemRepository",
    "create_item_repository",
]
