"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class InvalidThresholdsError(DomainError, ValueError):
    """Raised when expiry thresholds are invalid."""


class DateError(DomainError):
    """Base exception for date parsing failures."""

    def __init__(self, raw: str | None, message: str) -> None:
        """Keep the original cell text alongside the message."""
        super().__init__(message)
        self.raw = raw


class EmptyDateError(DateError):
    """Raised when no date was provided."""

    def __init__(self, raw: str | None = None) -> None:
        super().__init__(raw, "No date provided")


class NotApplicableDateError(DateError):
    """Raised when the cell holds the NA sentinel instead of a date."""

    def __init__(self, raw: str | None = None) -> None:
        super().__init__(raw, "Date is marked as not applicable")


class MalformedDateError(DateError):
    """Raised when the cell holds text that is not a recognisable date."""

    def __init__(self, raw: str | None = None) -> None:
        super().__init__(raw, f"Unrecognised date: {raw!r}")
