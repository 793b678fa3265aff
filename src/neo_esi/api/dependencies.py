"""Fragment service dependencies.

ONLY FastAPI dependency injection - hands the request principal and the
service collaborators stored on ``app.state`` to the routers.

Following maximum separation architecture - one file = one purpose.
"""

from fastapi import Depends, HTTPException, Request, status

from ..core.entities.principal import Principal
from ..platform.dispatch import FragmentDispatcher
from ..platform.seeds import SeedStore
from ..services import EsiServices


def principal_from_request(request: Request) -> Principal:
    """Get the principal the host's auth layer stored on the request.

    Falls back to an anonymous principal.
    """
    principal = getattr(request.state, "principal", None)
    if isinstance(principal, Principal):
        return principal
    return Principal.anonymous()


async def get_principal(request: Request) -> Principal:
    return principal_from_request(request)


async def get_services(request: Request) -> EsiServices:
    """Get the fragment service graph of the running app."""
    return request.app.state.esi


async def get_dispatcher(services: EsiServices = Depends(get_services)) -> FragmentDispatcher:
    return services.dispatcher


async def get_seed_store(services: EsiServices = Depends(get_services)) -> SeedStore:
    return services.seed_store


async def require_admin(
    principal: Principal = Depends(get_principal),
    services: EsiServices = Depends(get_services),
) -> Principal:
    """Allow only principals carrying the configured admin role."""
    admin_role = services.settings.admin_role
    if admin_role and admin_role not in principal.roles:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Fragment administration requires the admin role",
        )
    return principal
