"""Domain value objects - Immutable objects defined by their attributes."""

from .expiry_kind import ExpiryKind
from .expiry_state import ExpiryState
from .expiry_status import ExpiryStatus
from .thresholds import ExpiryThresholds

__all__ = [
    "ExpiryKind",
    "ExpiryState",
    "ExpiryStatus",
    "ExpiryThresholds",
]
