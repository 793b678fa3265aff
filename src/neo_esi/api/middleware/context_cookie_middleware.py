"""Context cookie middleware.

ONLY boot check - re-issues the context cookie set when an authenticated
request arrives without the liveness cookie (new browser, expired cookies,
seed rotated since login).

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Iterable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ...core.entities.cookie_descriptor import CookieDescriptor
from ...core.exceptions import PersistenceFailure
from ..dependencies import principal_from_request

logger = logging.getLogger(__name__)


def apply_cookies(response: Response, cookies: Iterable[CookieDescriptor]) -> None:
    """Write issued or revoked cookie descriptors onto a response.

    Hosts call this from their login and logout handlers.
    """
    for cookie in cookies:
        cookie.apply_to(response)


class ContextCookieMiddleware(BaseHTTPMiddleware):
    """Issues context cookies to authenticated principals that lack them."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        services = getattr(request.app.state, "esi", None)
        if services is None:
            return response

        # The principal may be set by inner middleware or a route dependency
        principal = principal_from_request(request)
        manager = services.cookie_manager
        if not manager.needs_boot(principal, request.cookies):
            return response

        try:
            cookies = await manager.issue_cookies(principal)
        except PersistenceFailure as e:
            logger.error(f"Context cookie boot failed for session {principal.mask_session_for_logging()}: {e}")
            return response

        apply_cookies(response, cookies)
        logger.debug(f"Booted {len(cookies)} context cookies for session {principal.mask_session_for_logging()}")
        return response
