"""Domain service for evaluating inventory items."""

from datetime import date

from ..entities import EvaluatedItem, InventoryItem, InventoryReport
from ..exceptions import EmptyDateError, MalformedDateError, NotApplicableDateError
from .expiry_evaluator import ExpiryEvaluator, format_date, parse_date


class InventoryAnalyzer:
    """Domain service evaluating every item of a spreadsheet on a given day."""

    def __init__(self, evaluator: ExpiryEvaluator | None = None) -> None:
        """Initialize analyzer with an expiry evaluator."""
        self._evaluator = evaluator or ExpiryEvaluator()

    def analyze(self, items: list[InventoryItem], today: date) -> InventoryReport:
        """
        Evaluate items and build an inventory report.

        Every item gets its own detail page. When two IDs reduce to the same
        file name, later items get a numbered suffix (item_A_1_2.html).

        Args:
            items: Items read from the spreadsheet.
            today: The date the pages are generated for.

        Returns:
            InventoryReport with one evaluated entry per item.
        """
        taken: set[str] = set()
        evaluated = []
        for item in items:
            page_filename = unique_page_filename(item, taken)
            taken.add(page_filename)
            evaluated.append(self.evaluate(item, today, page_filename=page_filename))

        return InventoryReport(items=evaluated, today=today)

    def evaluate(
        self, item: InventoryItem, today: date, *, page_filename: str | None = None
    ) -> EvaluatedItem:
        """Evaluate the expiry dates of a single item."""
        certificate_expiry = None
        if item.has_halal_certificate:
            certificate_expiry = self._evaluator.classify(item.certificate_expiry_date, today)

        return EvaluatedItem(
            item=item,
            item_expiry=self._evaluator.classify(item.item_expiry_date, today),
            certificate_expiry=certificate_expiry,
            purchased_date_text=describe_date(item.purchased_date),
            page_filename=page_filename or item.page_filename,
        )


def unique_page_filename(item: InventoryItem, taken: set[str]) -> str:
    """The item's page file name, suffixed with _2, _3, ... until not taken."""
    filename = item.page_filename
    stem = filename.removesuffix(".html")
    suffix = 2
    while filename in taken:
        filename = f"{stem}_{suffix}.html"
        suffix += 1
    return filename


def describe_date(raw: str) -> str:
    """Display text for a plain date cell: formatted, N/A, or the raw text."""
    try:
        return format_date(parse_date(raw))
    except (EmptyDateError, NotApplicableDateError):
        return "N/A"
    except MalformedDateError:
        return raw.strip()
