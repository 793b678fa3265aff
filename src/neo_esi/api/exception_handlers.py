"""Administrative exception handlers.

Fragment endpoints never reach these: the dispatcher degrades every
fragment-path failure to a minimal fragment on its own.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.exceptions import NeoEsiError, create_error_response, get_http_status_code

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register neo-esi exception handlers for the application."""

    @app.exception_handler(NeoEsiError)
    async def neo_esi_exception_handler(request: Request, exc: NeoEsiError):
        """Handle fragment service exceptions."""
        status_code = get_http_status_code(exc)
        if status_code >= 500:
            logger.error(f"{exc.error_code} on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=status_code, content=create_error_response(exc))
