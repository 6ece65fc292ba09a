"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import date

import pytest

from ihic.domain.entities import InventoryItem
from ihic.domain.services import ExpiryEvaluator, InventoryAnalyzer
from ihic.domain.value_objects import ExpiryThresholds


@pytest.fixture
def today() -> date:
    """Fixed evaluation date."""
    return date(2025, 5, 22)


@pytest.fixture
def default_thresholds() -> ExpiryThresholds:
    """Default expiry thresholds."""
    return ExpiryThresholds(valid_from=15, near_expiry_from=1)


@pytest.fixture
def evaluator(default_thresholds: ExpiryThresholds) -> ExpiryEvaluator:
    """Evaluator with the default thresholds."""
    return ExpiryEvaluator(default_thresholds)


@pytest.fixture
def analyzer(evaluator: ExpiryEvaluator) -> InventoryAnalyzer:
    """Inventory analyzer with the default evaluator."""
    return InventoryAnalyzer(evaluator)


@pytest.fixture
def valid_item() -> InventoryItem:
    """An item with a distant expiry and a valid certificate."""
    return InventoryItem(
        item_id="101",
        item_name="Chicken Sausage",
        category="Frozen",
        batch_number="GRIS-0101",
        brand="Ayamas",
        supplier="Fresh Foods Sdn Bhd",
        item_expiry_date="30/12/2025",
        stock_available="40",
        purchased_date="01/05/2025",
        invoice_url="https://example.com/invoices/101.pdf",
        halal_certificate="Available",
        certificate_expiry_date="2026-01-31",
        certificate_url="https://example.com/certs/101.pdf",
    )


@pytest.fixture
def near_expiry_item() -> InventoryItem:
    """An item expiring in three days with no certificate."""
    return InventoryItem(
        item_id="102",
        item_name="Fresh Milk",
        category="Dairy",
        batch_number="GRIS-0102",
        item_expiry_date="25/05/2025",
        purchased_date="NA",
        halal_certificate="Not Available",
        certificate_expiry_date="NA",
    )


@pytest.fixture
def expired_certificate_item() -> InventoryItem:
    """An item with no expiry date whose certificate expired yesterday."""
    return InventoryItem(
        item_id="103",
        item_name="Cooking Oil",
        category="Dry Goods",
        batch_number="GRIS-0103",
        item_expiry_date="NA",
        purchased_date="2025/04/10",
        halal_certificate="available",
        certificate_expiry_date="21-05-2025",
        certificate_url="https://example.com/certs/103.pdf",
    )


@pytest.fixture
def inventory(
    valid_item: InventoryItem,
    near_expiry_item: InventoryItem,
    expired_certificate_item: InventoryItem,
) -> list[InventoryItem]:
    """A small mixed inventory."""
    return [valid_item, near_expiry_item, expired_certificate_item]
