"""Request path validation.

Maps a URL path to the operation it names and the page title it targets.
The title check here runs before any storage access and is what keeps
path separators and other filename tricks out of the data directory.
"""

import enum
import re
from typing import NamedTuple

from plainwiki.core.models import TITLE_PATTERN


class Operation(str, enum.Enum):
    """Operations a request can ask for."""

    VIEW = "view"
    EDIT = "edit"
    SAVE = "save"
    INDEX = "index"


VALID_PATH = re.compile(rf"/(edit|save|view)/({TITLE_PATTERN})")
INDEX_PATH = "/"


class RouteMatch(NamedTuple):
    """A recognised request path."""

    operation: Operation
    title: str | None = None


def match_path(path: str) -> RouteMatch | None:
    """Match a request path.

    Returns ``RouteMatch(Operation.INDEX)`` for ``/``, a match carrying the
    title for ``/view/<title>``, ``/edit/<title>`` and ``/save/<title>``, and
    None for anything else.
    """
    if path == INDEX_PATH:
        return RouteMatch(Operation.INDEX)
    m = VALID_PATH.fullmatch(path)
    if m is None:
        return None
    return RouteMatch(Operation(m.group(1)), m.group(2))


def page_url(operation: Operation, title: str) -> str:
    """Build the path for an operation on a page."""
    return f"/{operation.value}/{title}"
