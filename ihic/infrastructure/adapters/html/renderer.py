"""Static HTML page renderer."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import TYPE_CHECKING

from .... import __version__
from ....domain.services import format_date
from ....domain.value_objects import ExpiryKind, ExpiryState, ExpiryStatus
from .mailto import expiry_alert_link
from .styles import BASE_CSS, DETAIL_CSS, INDEX_CSS

if TYPE_CHECKING:
    from ....domain.entities import EvaluatedItem, InventoryReport

INDEX_PAGE = "index.html"

_STOCK_REQUEST_JS = """
function sendRequest(button) {
    const quantityInput = document.querySelector('.quantity-input');
    const quantity = quantityInput.value.trim();
    if (!quantity) {
        alert('Please enter a quantity');
        return;
    }
    const itemName = button.dataset.itemName;
    const subject = `Stock Request - ${itemName}`;
    const body = `Hi. I want to request for ${itemName} with a quantity of ${quantity}. Thank you.`;
    window.location.href = `mailto:${button.dataset.contact}?subject=${encodeURIComponent(subject)}&body=${encodeURIComponent(body)}`;
    quantityInput.value = '';
}
"""


@dataclass(frozen=True, slots=True)
class RendererConfig:
    """Page rendering configuration."""

    site_title: str = "INSTANT HALAL & INVENTORY CHECKER"
    site_subtitle: str = "(i-HIC)"
    contact_email: str = ""


def expiry_display(status: ExpiryStatus) -> str:
    """Plain display text of an expiry status, e.g. '22/05/2025 (Expired)'."""
    match status.state:
        case ExpiryState.NOT_APPLICABLE:
            return "N/A"
        case ExpiryState.INVALID:
            return f"{(status.raw or '').strip()} {status.text}"
        case _:
            return f"{format_date(status.expiry_date)} {status.text}"


class HtmlPageRenderer:
    """
    Render detail and index pages as self-contained HTML documents.

    Implements the PageRenderer port. Every value taken from the spreadsheet
    is HTML-escaped; statuses are fixed at build time.
    """

    def __init__(self, config: RendererConfig) -> None:
        """Initialize the renderer."""
        self._config = config

    def render_item(self, evaluated: EvaluatedItem) -> str:
        """Render the detail page of one item."""
        item = evaluated.item
        name = escape(item.item_name)

        body = f"""<div class="item-name">{name}</div>
{self._product_card(evaluated)}
{self._purchase_card(evaluated)}
{self._halal_card(evaluated)}
<div class="stock-request-box">
<button class="btn btn-purple" type="button">Stock Request</button>
<label class="quantity-label" for="quantity">Quantity:</label>
<input type="text" id="quantity" class="quantity-input" placeholder="Enter quantity">
<button class="btn btn-green" type="button" data-item-name="{name}" data-contact="{escape(self._config.contact_email)}" onclick="sendRequest(this)">Send Request</button>
</div>
<a href="{INDEX_PAGE}" class="back-btn">&larr; Back</a>"""

        return self._document(
            title=f"i-HIC - {item.item_name} Details",
            css=BASE_CSS + DETAIL_CSS,
            body=body,
            script=_STOCK_REQUEST_JS,
        )

    def render_index(self, report: InventoryReport) -> str:
        """Render the landing page listing every item, most urgent first."""
        rows = ""
        for evaluated in report.get_items_sorted_by_urgency():
            item = evaluated.item
            row_class = ' class="attention"' if evaluated.requires_attention else ""
            certificate = (
                self._status_cell(evaluated.certificate_expiry)
                if evaluated.certificate_expiry is not None
                else '<td class="na-value">No certificate</td>'
            )
            rows += f"<tr{row_class}>"
            rows += f'<td><a href="{escape(evaluated.page_filename)}">{escape(item.item_name)}</a></td>'
            rows += f"<td>{escape(item.item_id)}</td><td>{escape(item.category)}</td>"
            rows += self._status_cell(evaluated.item_expiry)
            rows += certificate
            rows += "</tr>\n"

        body = f"""<div class="summary">
<h2>{escape(report.get_summary())}</h2>
<p>Expired: {report.expired_count} | Near expiry: {report.near_expiry_count} | Unrecognised dates: {report.invalid_count}</p>
</div>
<table>
<tr><th>Item</th><th>ID</th><th>Category</th><th>Item Expiry</th><th>Certificate Expiry</th></tr>
{rows}</table>
<div class="footer"><p>Status as of {format_date(report.today)}. Generated by i-HIC {__version__}.</p></div>"""

        return self._document(
            title="i-HIC - Inventory",
            css=BASE_CSS + INDEX_CSS,
            body=body,
        )

    def _document(self, *, title: str, css: str, body: str, script: str = "") -> str:
        """Wrap a page body in the shared document skeleton."""
        script_html = f"<script>{script}</script>\n" if script else ""
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{escape(title)}</title>
<style>{css}</style>
</head>
<body>
<div class="container">
<div class="header-container">
<div class="header-main">{escape(self._config.site_title)}</div>
<div class="header-sub">{escape(self._config.site_subtitle)}</div>
</div>
{body}
</div>
{script_html}</body>
</html>
"""

    def _product_card(self, evaluated: EvaluatedItem) -> str:
        """Product details with the item expiry date and its alert."""
        item = evaluated.item
        return f"""<div class="info-card">
<div class="card-title">Product Info</div>
{_detail_row("Item ID", escape(item.item_id))}
{_detail_row("Category", escape(item.category))}
{_detail_row("Batch/GRIS No.", escape(item.batch_number))}
{_detail_row("Brand", escape(item.brand))}
{_detail_row("Supplier", escape(item.supplier))}
{self._expiry_row("Item Expiry Date", evaluated.item_expiry)}
{self._alert(evaluated, ExpiryKind.ITEM, evaluated.item_expiry)}
{_detail_row("Stock Available", escape(item.stock_available))}
</div>"""

    def _purchase_card(self, evaluated: EvaluatedItem) -> str:
        item = evaluated.item
        return f"""<div class="info-card">
<div class="card-title">Purchase Info</div>
{_detail_row("Purchased Date", escape(evaluated.purchased_date_text))}
{_detail_row("Invoice", _link_button(item.invoice_url, "View Invoice"))}
</div>"""

    def _halal_card(self, evaluated: EvaluatedItem) -> str:
        """Halal certificate details; expiry only when a certificate is on file."""
        item = evaluated.item
        css_class = "cert-available" if item.has_halal_certificate else "cert-not-available"
        certificate_rows = ""
        if evaluated.certificate_expiry is not None:
            certificate_rows = f"""
{self._expiry_row("Certificate Expiry", evaluated.certificate_expiry)}
{self._alert(evaluated, ExpiryKind.CERTIFICATE, evaluated.certificate_expiry)}
{_detail_row("Certificate", _link_button(item.certificate_url, "View Certificate"))}"""

        return f"""<div class="info-card">
<div class="card-title">Halal Info</div>
{_detail_row("Halal Certificate", escape(item.halal_certificate), css_class)}{certificate_rows}
</div>"""

    def _expiry_row(self, label: str, status: ExpiryStatus) -> str:
        return _detail_row(label, escape(expiry_display(status)), status.css_class)

    def _status_cell(self, status: ExpiryStatus) -> str:
        return f'<td class="{status.css_class}">{escape(expiry_display(status))}</td>'

    def _alert(self, evaluated: EvaluatedItem, kind: ExpiryKind, status: ExpiryStatus) -> str:
        """Alert button for expired or nearly expired dates, empty otherwise."""
        caption = status.alert_text(kind)
        if caption is None:
            return ""
        href = expiry_alert_link(
            self._config.contact_email,
            evaluated.item,
            kind,
            expired=status.is_expired,
        )
        return (
            f'<div class="alert-container">'
            f'<a class="btn btn-red" href="{escape(href)}">{escape(caption)}</a>'
            f"</div>"
        )


def _detail_row(label: str, value_html: str, css_class: str = "") -> str:
    """One label/value row; the value must already be escaped."""
    classes = f"detail-value {css_class}".strip()
    return (
        f'<div class="detail-row"><div class="detail-label">{escape(label)}:</div>'
        f'<div class="{classes}">{value_html}</div></div>'
    )


def _link_button(url: str, caption: str) -> str:
    if not url.strip():
        return '<span class="na-value">N/A</span>'
    return f'<a href="{escape(url.strip())}" class="btn btn-blue">{escape(caption)}</a>'
