"""Expiry thresholds value object."""

from dataclasses import dataclass

from ..exceptions import InvalidThresholdsError


@dataclass(frozen=True, slots=True)
class ExpiryThresholds:
    """
    Day counts separating the expiry states.

    A date is valid with at least ``valid_from`` days remaining, near expiry
    with at least ``near_expiry_from`` days remaining, and expired otherwise.
    Item and certificate expiry share the same thresholds.
    """

    valid_from: int = 15
    near_expiry_from: int = 1

    def __post_init__(self) -> None:
        """Validate thresholds are in correct order."""
        if not (0 < self.near_expiry_from < self.valid_from):
            msg = (
                f"Thresholds must be: 0 < near_expiry_from({self.near_expiry_from}) "
                f"< valid_from({self.valid_from})"
            )
            raise InvalidThresholdsError(msg)
