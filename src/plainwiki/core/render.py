"""Template rendering for the three wiki pages."""

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError
from starlette.responses import Response

from plainwiki.core.errors import RenderError

TEMPLATES_PATH = Path(__file__).parent.parent / "templates"
TEMPLATE_NAMES = ("index", "edit", "view")


class Renderer:
    """Executes a named template with a page or a list of titles."""

    def __init__(self, directory: Path = TEMPLATES_PATH, app_title: str = "PlainWiki"):
        self.templates = Jinja2Templates(directory=str(directory))
        self.app_title = app_title

    def render(self, request: Request, name: str, **data: Any) -> Response:
        """Render ``<name>.html``; template failures raise RenderError."""
        if name not in TEMPLATE_NAMES:
            raise RenderError(f"unknown template: {name}")
        context = {"app_title": self.app_title, **data}
        try:
            return self.templates.TemplateResponse(request, f"{name}.html", context)
        except TemplateError as exc:
            raise RenderError(str(exc)) from exc
