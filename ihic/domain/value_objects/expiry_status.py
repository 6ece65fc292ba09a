"""Expiry status value object."""

from dataclasses import dataclass
from datetime import date
from typing import Self

from .expiry_kind import ExpiryKind
from .expiry_state import ExpiryState


@dataclass(frozen=True, slots=True)
class ExpiryStatus:
    """
    Outcome of evaluating one raw expiry cell.

    Dated states (valid, near expiry, expired) carry the parsed date and the
    days remaining. An invalid status keeps the raw text so it can be shown
    as-is instead of a guessed date.
    """

    state: ExpiryState
    days_remaining: int | None = None
    expiry_date: date | None = None
    raw: str | None = None

    @classmethod
    def not_applicable(cls) -> Self:
        """Status for an absent or NA date."""
        return cls(state=ExpiryState.NOT_APPLICABLE)

    @classmethod
    def invalid(cls, raw: str | None) -> Self:
        """Status for text that could not be parsed."""
        return cls(state=ExpiryState.INVALID, raw=raw)

    @classmethod
    def dated(cls, state: ExpiryState, expiry_date: date, days_remaining: int) -> Self:
        """Status for a parsed date."""
        return cls(state=state, days_remaining=days_remaining, expiry_date=expiry_date)

    @property
    def css_class(self) -> str:
        """CSS class for this status."""
        return self.state.css_class

    @property
    def requires_alert(self) -> bool:
        """Check if this status should raise an alert."""
        return self.state.requires_alert

    @property
    def is_expired(self) -> bool:
        """Check if the date is today or in the past."""
        return self.state == ExpiryState.EXPIRED

    @property
    def text(self) -> str:
        """Parenthesised status text shown after the date."""
        match self.state:
            case ExpiryState.EXPIRED:
                return "(Expired)"
            case ExpiryState.NEAR_EXPIRY | ExpiryState.VALID:
                unit = "day" if self.days_remaining == 1 else "days"
                return f"(Expires in {self.days_remaining} {unit})"
            case ExpiryState.INVALID:
                return "(Unrecognised date)"
            case ExpiryState.NOT_APPLICABLE:
                return ""

    def alert_text(self, kind: ExpiryKind) -> str | None:
        """Alert button caption, or None when no alert is needed."""
        if not self.requires_alert:
            return None
        return kind.alert_text(expired=self.is_expired)
