"""Expiry kind value object."""

from enum import StrEnum, auto


class ExpiryKind(StrEnum):
    """Which date of a record is being evaluated."""

    ITEM = auto()
    CERTIFICATE = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        match self:
            case ExpiryKind.ITEM:
                return "Item"
            case ExpiryKind.CERTIFICATE:
                return "Certificate"

    def alert_text(self, *, expired: bool) -> str:
        """Button caption asking the reader to contact the person in charge."""
        match self:
            case ExpiryKind.ITEM:
                return "Item Expired. Contact PIC" if expired else "Nearly Expired. Contact PIC"
            case ExpiryKind.CERTIFICATE:
                if expired:
                    return "Certificate Expired. Contact PIC"
                return "Certificate Nearly Expired. Contact PIC"
