"""File-backed storage for wiki pages.

Each page lives in ``<data_dir>/<Title>.txt``. There is no index and no
cache: every read goes to disk, and the directory listing is the list of
pages.
"""

import logging
import os
import tempfile
from pathlib import Path

from plainwiki.core.errors import InvalidTitleError, PageNotFoundError, StorageError
from plainwiki.core.models import Page, is_valid_title

logger = logging.getLogger(__name__)


class FileStorage:
    """Flat-directory page store.

    Writes are whole-file replacements done through a temporary file and an
    atomic rename, so a concurrent reader sees either the previous body or the
    new one. Concurrent saves to the same title are not coordinated; the last
    rename wins.
    """

    SUFFIX = ".txt"
    FILE_MODE = 0o600

    def __init__(self, base_path: Path):
        self.base_path = Path(base_path)

    def _title_to_filename(self, title: str) -> str:
        """Convert page title to filename."""
        return title + self.SUFFIX

    def _filename_to_title(self, filename: str) -> str:
        """Convert filename to page title."""
        return filename.removesuffix(self.SUFFIX)

    def _get_path(self, title: str) -> Path:
        """Get full path for a page, refusing titles that are not plain identifiers."""
        if not is_valid_title(title):
            raise InvalidTitleError(title)
        return self.base_path / self._title_to_filename(title)

    def _ensure_dir(self) -> None:
        """Create the data directory if it does not exist yet."""
        if self.base_path.is_dir():
            return
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Data directory %s doesn't exist and couldn't be created", self.base_path)
            raise StorageError(str(exc)) from exc
        logger.info("Created data directory %s", self.base_path)

    async def get_page(self, title: str) -> Page:
        """Load a page by title.

        Raises PageNotFoundError if the page has never been saved and
        StorageError for any other I/O failure.
        """
        path = self._get_path(title)
        try:
            body = path.read_bytes()
        except FileNotFoundError as exc:
            raise PageNotFoundError(title) from exc
        except OSError as exc:
            raise StorageError(str(exc)) from exc
        return Page(title=title, body=body)

    async def save_page(self, page: Page) -> None:
        """Write the page body, replacing any previous content."""
        path = self._get_path(page.title)
        self._ensure_dir()

        try:
            # mkstemp creates the file readable and writable by the owner only
            fd, tmp_name = tempfile.mkstemp(
                dir=self.base_path, prefix=f".{page.title}.", suffix=".tmp"
            )
        except OSError as exc:
            raise StorageError(str(exc)) from exc

        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(page.body)
            os.chmod(tmp_name, self.FILE_MODE)
            os.replace(tmp_name, path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(str(exc)) from exc

    async def list_titles(self) -> list[str]:
        """List the titles of all stored pages."""
        self._ensure_dir()
        titles = []
        try:
            for path in self.base_path.iterdir():
                if not path.name.endswith(self.SUFFIX):
                    continue
                title = self._filename_to_title(path.name)
                if is_valid_title(title) and path.is_file():
                    titles.append(title)
        except OSError as exc:
            raise StorageError(str(exc)) from exc
        return sorted(titles)
