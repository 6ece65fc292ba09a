"""Instant Halal & Inventory Checker (i-HIC) static page generator."""

__version__ = "1.0.0"
