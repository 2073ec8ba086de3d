"""Exception types shared by the store, the renderer and the HTTP boundary.

Only ``PageNotFoundError`` is an expected outcome: handlers turn it into a
redirect or a blank edit form. ``StorageError`` and ``RenderError`` reach the
application's exception handlers and become 500 responses.
``InvalidTitleError`` becomes a 404.
"""


class WikiError(Exception):
    """Base class for all wiki errors."""


class PageNotFoundError(WikiError):
    """The page file does not exist yet."""

    def __init__(self, title: str):
        super().__init__(f"page not found: {title}")
        self.title = title


class StorageError(WikiError):
    """Any file-system failure other than a missing page."""


class InvalidTitleError(WikiError):
    """A title does not match the allowed identifier shape."""

    def __init__(self, title: str):
        super().__init__(f"invalid page title: {title!r}")
        self.title = title


class RenderError(WikiError):
    """Template execution failed."""
