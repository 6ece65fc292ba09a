"""mailto: link builders for alert and stock request messages."""

from urllib.parse import quote

from ....domain.entities import InventoryItem
from ....domain.value_objects import ExpiryKind


def mailto_link(recipient: str, subject: str, body: str) -> str:
    """Build a mailto: URL with an encoded subject and body."""
    return f"mailto:{recipient}?subject={quote(subject)}&body={quote(body)}"


def expiry_alert_link(recipient: str, item: InventoryItem, kind: ExpiryKind, *, expired: bool) -> str:
    """Build the mailto: URL reporting an expired or nearly expired date."""
    state = "Expired" if expired else "Nearly Expired"
    phrase = "already expired" if expired else "nearly expired"

    match kind:
        case ExpiryKind.ITEM:
            subject = f"High Important : {item.item_name} is {state}"
            body = (
                f"Hi. The {item.item_name} with Identification Number of "
                f"{item.batch_number} is {phrase}. Please do the necessary. Thank you."
            )
        case ExpiryKind.CERTIFICATE:
            subject = f"High Important : {item.item_name} Halal Certificate is {state}"
            body = (
                f"Hi. The {item.item_name} Halal certificate is {phrase}. "
                "Please do the necessary. Thank you."
            )

    return mailto_link(recipient, subject, body)
