"""Request logging middleware."""

from __future__ import annotations

import logging
import traceback
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from starlette.requests import Request
    from starlette.responses import Response

logger = logging.getLogger(__name__)


def log_request(request: Request, status: int) -> None:
    """Log a completed request; a failing log sink never reaches the client."""
    try:
        logger.info("%s %s %d", request.method, request.scope["path"], status)
    except Exception:
        # Same fallback as logging.Handler.handleError
        traceback.print_exc()


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log method, path and status of every request once it has been handled."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        try:
            response = await call_next(request)
        except Exception:
            log_request(request, 500)
            raise
        log_request(request, response.status_code)
        return response
