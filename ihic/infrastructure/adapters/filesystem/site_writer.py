"""Site writer storing pages in a local directory."""

from __future__ import annotations

import logging
from pathlib import Path

from ....application.exceptions import PageWriteError

logger = logging.getLogger(__name__)


class FileSystemSiteWriter:
    """
    Write generated pages into an output directory.

    Implements the SiteWriter port.
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the writer with its output directory."""
        self._output_dir = Path(output_dir)

    @property
    def output_dir(self) -> Path:
        """Directory pages are written to."""
        return self._output_dir

    def prepare(self) -> None:
        """Create the output directory if it does not exist."""
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            msg = f"Cannot create output directory {self._output_dir}: {e}"
            raise PageWriteError(msg) from e

    def write_page(self, filename: str, content: str) -> Path:
        """Write one page as UTF-8, replacing any previous version."""
        target = self._output_dir / filename
        if target.parent != self._output_dir:
            msg = f"Page name must not contain a directory: {filename!r}"
            raise PageWriteError(msg)

        try:
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            msg = f"Cannot write {target}: {e}"
            raise PageWriteError(msg) from e

        logger.debug("Wrote %d characters to %s", len(content), target)
        return target
