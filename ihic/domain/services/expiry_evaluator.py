"""Domain service for parsing and classifying expiry dates."""

import re
from datetime import date, datetime

from ..exceptions import EmptyDateError, MalformedDateError, NotApplicableDateError
from ..value_objects import ExpiryState, ExpiryStatus, ExpiryThresholds

NOT_APPLICABLE = "NA"

# Separators must match on both sides: 22/05/2025 or 22-05-2025, never 22/05-2025.
_DAY_FIRST = re.compile(
    r"(?P<day>[0-9]{1,2})(?P<sep>[/-])(?P<month>[0-9]{1,2})(?P=sep)(?P<year>[0-9]{4})"
)
_YEAR_FIRST = re.compile(
    r"(?P<year>[0-9]{4})(?P<sep>[/-])(?P<month>[0-9]{1,2})(?P=sep)(?P<day>[0-9]{1,2})"
)


def parse_date(raw: str | None) -> date:
    """
    Parse a spreadsheet date cell.

    Tries day/month/year, then year/month/day, then ISO 8601. The first
    pattern that matches the shape of the text decides; an impossible date
    such as 31/02/2025 is rejected rather than rolled over.

    Args:
        raw: Cell text, possibly empty or the NA sentinel.

    Returns:
        The calendar date.

    Raises:
        EmptyDateError: If the cell is absent or blank.
        NotApplicableDateError: If the cell is ``NA`` in any case.
        MalformedDateError: If the text is not a real date.
    """
    if raw is None or not raw.strip():
        raise EmptyDateError(raw)

    token = raw.strip()
    if token.upper() == NOT_APPLICABLE:
        raise NotApplicableDateError(raw)

    for pattern in (_DAY_FIRST, _YEAR_FIRST):
        match = pattern.fullmatch(token)
        if match:
            return _build_date(raw, int(match["year"]), int(match["month"]), int(match["day"]))

    return _parse_iso(raw, token)


def _build_date(raw: str, year: int, month: int, day: int) -> date:
    """Construct a date and reject anything that does not round-trip."""
    try:
        candidate = date(year, month, day)
    except ValueError:
        raise MalformedDateError(raw) from None

    if (candidate.year, candidate.month, candidate.day) != (year, month, day):
        raise MalformedDateError(raw)
    return candidate


def _parse_iso(raw: str, token: str) -> date:
    """Fallback for ISO-like text such as 20250522, 2025-W21-4 or 2025-05-22T08:00."""
    try:
        return date.fromisoformat(token)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(token).date()
    except ValueError:
        raise MalformedDateError(raw) from None


def format_date(value: date) -> str:
    """Format a date as DD/MM/YYYY."""
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def days_remaining(expiry_date: date, today: date) -> int:
    """
    Whole calendar days from today until the expiry date.

    Both dates count from midnight, so the expiry day itself is 0 and the
    day before it is 1. Past dates are negative.
    """
    return (_as_date(expiry_date) - _as_date(today)).days


def _as_date(value: date) -> date:
    # datetime subclasses date; drop the time of day
    if isinstance(value, datetime):
        return value.date()
    return value


class ExpiryEvaluator:
    """Domain service classifying expiry cells against fixed thresholds."""

    def __init__(self, thresholds: ExpiryThresholds | None = None) -> None:
        """Initialize evaluator with thresholds."""
        self._thresholds = thresholds or ExpiryThresholds()

    @property
    def thresholds(self) -> ExpiryThresholds:
        """Thresholds used for classification."""
        return self._thresholds

    def classify(self, raw: str | None, today: date) -> ExpiryStatus:
        """
        Classify a raw expiry cell relative to today.

        Args:
            raw: Cell text as read from the spreadsheet.
            today: The date the evaluation is made for.

        Returns:
            NOT_APPLICABLE for blank or NA cells, INVALID for unparseable
            text, otherwise EXPIRED, NEAR_EXPIRY or VALID with the days
            remaining.
        """
        try:
            expiry_date = parse_date(raw)
        except (EmptyDateError, NotApplicableDateError):
            return ExpiryStatus.not_applicable()
        except MalformedDateError:
            return ExpiryStatus.invalid(raw)

        remaining = days_remaining(expiry_date, today)
        return ExpiryStatus.dated(self.state_for(remaining), expiry_date, remaining)

    def state_for(self, remaining: int) -> ExpiryState:
        """Map a day count to an expiry state."""
        if remaining < self._thresholds.near_expiry_from:
            return ExpiryState.EXPIRED
        if remaining < self._thresholds.valid_from:
            return ExpiryState.NEAR_EXPIRY
        return ExpiryState.VALID


_default_evaluator = ExpiryEvaluator()


def classify(raw: str | None, today: date) -> ExpiryStatus:
    """Classify a raw expiry cell using the standard thresholds."""
    return _default_evaluator.classify(raw, today)
