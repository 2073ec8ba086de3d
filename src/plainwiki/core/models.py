"""Data models for PlainWiki."""

import re

from pydantic import BaseModel, ConfigDict, Field

TITLE_PATTERN = r"[A-Za-z0-9]+"
TITLE_RE = re.compile(rf"^{TITLE_PATTERN}$")


def is_valid_title(title: str) -> bool:
    """Return True if ``title`` is usable as a page title and filename stem."""
    return TITLE_RE.fullmatch(title) is not None


class Page(BaseModel):
    """Represents a wiki page."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(pattern=TITLE_RE.pattern)
    body: bytes = b""

    @property
    def text(self) -> str:
        """Body decoded for display."""
        return self.body.decode("utf-8", errors="replace")
