"""Neo ESI application.

FastAPI application serving edge-cacheable fragments, with the context
cookie boot check and the administrative maintenance endpoints.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .__version__ import __version__
from .api import ContextCookieMiddleware, admin_router, fragment_router, register_exception_handlers
from .config.settings import EsiSettings, get_settings
from .services import EsiServices, build_services

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    services: EsiServices = app.state.esi

    # Make sure a seed exists before the first cookie is issued
    await services.seed_store.current()
    logger.info(
        f"Fragment service ready: {len(services.registry.get())} components, "
        f"render mode '{services.settings.render_mode}'"
    )

    yield

    await services.close()


def create_app(
    settings: Optional[EsiSettings] = None,
    services: Optional[EsiServices] = None,
) -> FastAPI:
    """Create the fragment service application.

    Args:
        settings: Service settings, loaded from the environment when omitted
        services: Prebuilt service graph, built from ``settings`` when omitted

    Returns:
        Configured FastAPI application
    """
    if services is None:
        services = build_services(settings or get_settings())
    settings = services.settings

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Edge-cacheable page fragments with context cookies",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.esi = services

    register_exception_handlers(app)
    app.add_middleware(ContextCookieMiddleware)

    app.include_router(admin_router)
    app.include_router(fragment_router, prefix=f"/{settings.url_prefix}")

    logger.info(f"Created {settings.app_name} ({settings.environment})")
    return app
