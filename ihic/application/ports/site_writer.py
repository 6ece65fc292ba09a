"""Port for publishing generated pages - driven/secondary port."""

from pathlib import Path
from typing import Protocol


class SiteWriter(Protocol):
    """Port for storing generated pages."""

    def prepare(self) -> None:
        """
        Make the destination ready to receive pages.

        Raises:
            PageWriteError: If the destination cannot be created.
        """
        ...

    def write_page(self, filename: str, content: str) -> Path:
        """
        Store a single page.

        Args:
            filename: Page file name relative to the site root.
            content: Page markup.

        Returns:
            Location the page was written to.

        Raises:
            PageWriteError: If the page cannot be written.
        """
        ...
