"""Expiry state value object."""

from enum import StrEnum, auto


class ExpiryState(StrEnum):
    """Classification of an expiry date relative to today."""

    EXPIRED = auto()
    NEAR_EXPIRY = auto()
    VALID = auto()
    NOT_APPLICABLE = auto()
    INVALID = auto()

    @property
    def requires_alert(self) -> bool:
        """Check if this state should raise an alert."""
        return self in {ExpiryState.EXPIRED, ExpiryState.NEAR_EXPIRY}

    @property
    def css_class(self) -> str:
        """CSS class used when rendering a date in this state."""
        match self:
            case ExpiryState.EXPIRED | ExpiryState.NEAR_EXPIRY:
                return "expired"
            case ExpiryState.VALID:
                return "valid"
            case ExpiryState.NOT_APPLICABLE:
                return "na-value"
            case ExpiryState.INVALID:
                return "invalid-value"

    def __str__(self) -> str:
        return self.value
