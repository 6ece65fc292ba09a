"""Domain services - Stateless operations on domain objects."""

from .expiry_evaluator import (
    ExpiryEvaluator,
    classify,
    days_remaining,
    format_date,
    parse_date,
)
from .inventory_analyzer import InventoryAnalyzer

__all__ = [
    "ExpiryEvaluator",
    "InventoryAnalyzer",
    "classify",
    "days_remaining",
    "format_date",
    "parse_date",
]
