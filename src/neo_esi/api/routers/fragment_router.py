"""Fragment router.

ONLY fragment delivery endpoint - serves fragment paths to the edge device.
Responses are bare fragments: no page chrome and never a JSON error body.

Following maximum separation architecture - one file = one purpose.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from ...core.entities.principal import Principal
from ...platform.dispatch import FragmentDispatcher
from ..dependencies import get_dispatcher, get_principal

fragment_router = APIRouter(tags=["Fragments"])


@fragment_router.get(
    "/{fragment_path:path}",
    response_class=Response,
    summary="Serve fragment",
    description="Render one fragment path for inclusion by an edge device",
)
async def serve_fragment(
    fragment_path: str,
    request: Request,
    principal: Principal = Depends(get_principal),
    dispatcher: FragmentDispatcher = Depends(get_dispatcher),
) -> Response:
    """Serve a fragment."""
    prefix = request.app.state.esi.settings.url_prefix
    fragment = await dispatcher.dispatch(f"{prefix}/{fragment_path}", principal)
    return Response(
        content=fragment.body,
        status_code=fragment.status_code,
        headers=fragment.headers,
        media_type=fragment.media_type,
    )
