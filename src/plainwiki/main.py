"""PlainWiki FastAPI application."""

from __future__ import annotations

import logging
import sys

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.responses import Response

from plainwiki.config import Settings, settings as default_settings
from plainwiki.core.errors import InvalidTitleError, RenderError, StorageError, WikiError
from plainwiki.core.render import Renderer
from plainwiki.core.router import match_path
from plainwiki.core.storage import FileStorage
from plainwiki.handlers import dispatch
from plainwiki.middleware import RequestLogMiddleware

logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
NOT_FOUND_TEXT = "404 page not found"
GENERIC_ERROR_TEXT = "Internal Server Error"


def _configure_logging(debug: bool) -> None:
    """Configure application logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
        force=True,
    )
    # Requests are logged by RequestLogMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def not_found() -> Response:
    return PlainTextResponse(NOT_FOUND_TEXT, status_code=404)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the wiki application around one settings instance."""
    if settings is None:
        settings = default_settings

    app = FastAPI(
        title=settings.app_title,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.storage = FileStorage(settings.data_dir)
    app.state.renderer = Renderer(app_title=settings.app_title)

    app.add_middleware(RequestLogMiddleware)

    async def server_error_handler(request: Request, exc: WikiError) -> Response:
        logger.error("%s %s failed: %s", request.method, request.scope["path"], exc)
        detail = str(exc) if request.app.state.settings.expose_errors else GENERIC_ERROR_TEXT
        return PlainTextResponse(detail, status_code=500)

    async def invalid_title_handler(request: Request, exc: InvalidTitleError) -> Response:
        return not_found()

    app.add_exception_handler(StorageError, server_error_handler)
    app.add_exception_handler(RenderError, server_error_handler)
    app.add_exception_handler(InvalidTitleError, invalid_title_handler)

    @app.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    async def handle(request: Request) -> Response:
        """Route every request through the path router."""
        route = match_path(request.scope["path"])
        if route is None:
            return not_found()
        response = await dispatch(request, route)
        if response is None:
            return not_found()
        return response

    return app


app = create_app()


def cli_entry() -> None:
    """CLI entry point for running the server."""
    import uvicorn

    settings: Settings = app.state.settings
    _configure_logging(settings.debug)
    logger.info(
        "Starting %s on %s:%d (data in %s)",
        settings.app_title,
        settings.host,
        settings.port,
        settings.data_dir,
    )
    uvicorn.run(
        "plainwiki.main:app",
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.idle_timeout,
        reload=settings.debug,
    )
