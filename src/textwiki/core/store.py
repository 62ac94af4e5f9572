"""File-backed page storage.

Storage structure:
    <pages_dir>/
    ├── FrontPage.txt       # Raw body bytes, no header
    └── Notes.txt

Each page lives in a single file named after its title. There is no index,
no cache and no locking: every request reads or rewrites the file directly.
Writes truncate in place, so a save that fails partway can leave a partial
file behind, and concurrent saves to the same title are last-writer-wins.
"""

import logging
import os
from pathlib import Path

from textwiki.core.errors import PageNotFoundError, PageStorageError
from textwiki.core.types import Page

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".txt"
PAGE_FILE_MODE = 0o600


class PageStore:
    """Loads and saves pages as ``<title>.txt`` files in a directory.

    Titles are used verbatim as filename stems. Callers are expected to pass
    titles that already went through ``TitleValidator``.
    """

    def __init__(self, pages_dir: Path) -> None:
        """Initialize store.

        Args:
            pages_dir: Directory holding the page files
        """
        self._pages_dir = pages_dir

    @property
    def pages_dir(self) -> Path:
        """Directory holding the page files."""
        return self._pages_dir

    def path_for(self, title: str) -> Path:
        """Return the file path backing a page title."""
        return self._pages_dir / f"{title}{PAGE_SUFFIX}"

    def load(self, title: str) -> Page:
        """Read a page from disk.

        Args:
            title: Page title

        Returns:
            Page with the file contents as body

        Raises:
            PageNotFoundError: If the file cannot be read for any reason
        """
        path = self.path_for(title)
        try:
            body = path.read_bytes()
        except OSError as e:
            logger.debug(f"Could not read {path}: {e}")
            raise PageNotFoundError(title) from e
        logger.debug(f"Loaded page {title} ({len(body)} bytes) from {path}")
        return Page(title=title, body=body)

    def save(self, page: Page) -> None:
        """Write a page to disk, creating or truncating its file.

        New files are created with owner-only read/write permissions.

        Args:
            page: Page to persist

        Raises:
            PageStorageError: If the file cannot be opened or written
        """
        path = self.path_for(page.title)
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, PAGE_FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(page.body)
        except OSError as e:
            logger.warning(f"Failed to save page {page.title} to {path}: {e}")
            raise PageStorageError(page.title, str(e)) from e
        logger.debug(f"Saved page {page.title} ({len(page.body)} bytes) to {path}")
