"""Request handlers for the four wiki operations."""

from collections.abc import Awaitable, Callable

from fastapi import Request
from fastapi.responses import RedirectResponse
from starlette.responses import Response

from plainwiki.core.errors import PageNotFoundError
from plainwiki.core.models import Page
from plainwiki.core.router import Operation, RouteMatch, page_url

Handler = Callable[[Request, str | None], Awaitable[Response]]

READ_METHODS = frozenset({"GET", "HEAD"})
WRITE_METHODS = frozenset({"POST"})


async def view_page(request: Request, title: str | None) -> Response:
    """Show a page, or send the client to create it."""
    storage = request.app.state.storage
    try:
        page = await storage.get_page(title)
    except PageNotFoundError:
        return RedirectResponse(url=page_url(Operation.EDIT, title), status_code=302)
    return request.app.state.renderer.render(request, "view", page=page)


async def edit_page(request: Request, title: str | None) -> Response:
    """Edit form, blank for a page that has not been saved yet."""
    storage = request.app.state.storage
    try:
        page = await storage.get_page(title)
    except PageNotFoundError:
        page = Page(title=title)
    return request.app.state.renderer.render(request, "edit", page=page)


async def save_page(request: Request, title: str | None) -> Response:
    """Store the submitted body and show the page."""
    async with request.form() as form:
        body = form.get("body", "")
        if not isinstance(body, str):
            body = (await body.read()).decode("utf-8", errors="replace")
    page = Page(title=title, body=body.encode("utf-8"))
    await request.app.state.storage.save_page(page)
    return RedirectResponse(url=page_url(Operation.VIEW, title), status_code=302)


async def list_pages(request: Request, title: str | None = None) -> Response:
    """Home page - list all pages."""
    titles = await request.app.state.storage.list_titles()
    return request.app.state.renderer.render(request, "index", titles=titles)


HANDLERS: dict[Operation, tuple[frozenset[str], Handler]] = {
    Operation.INDEX: (READ_METHODS, list_pages),
    Operation.VIEW: (READ_METHODS, view_page),
    Operation.EDIT: (READ_METHODS, edit_page),
    Operation.SAVE: (WRITE_METHODS, save_page),
}


async def dispatch(request: Request, route: RouteMatch) -> Response | None:
    """Run the handler for a matched route.

    Returns None when the operation does not accept the request method.
    """
    methods, handler = HANDLERS[route.operation]
    if request.method not in methods:
        return None
    return await handler(request, route.title)
