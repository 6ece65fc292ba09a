"""Filesystem adapter writing generated pages."""

from .site_writer import FileSystemSiteWriter

__all__ = ["FileSystemSiteWriter"]
