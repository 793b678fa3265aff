"""Fragment administration router.

ONLY maintenance endpoints - namespace flush and forced seed rotation,
for operators and external schedulers.

Following maximum separation architecture - one file = one purpose.
"""

import logging

from fastapi import APIRouter, Depends, status

from ...platform.dispatch import FragmentDispatcher
from ...platform.seeds import SeedStore
from ..dependencies import get_dispatcher, get_seed_store, require_admin
from ..models import OperationResponse

logger = logging.getLogger(__name__)

admin_router = APIRouter(
    prefix="/admin/esi",
    tags=["Fragment Administration"],
    dependencies=[Depends(require_admin)],
    responses={403: {"description": "Admin role required"}},
)


@admin_router.post(
    "/flush",
    response_model=OperationResponse,
    status_code=status.HTTP_200_OK,
    summary="Flush fragment namespace",
    description="Flush providers, cached fragments and the component registry",
)
async def flush_fragments(
    dispatcher: FragmentDispatcher = Depends(get_dispatcher),
) -> OperationResponse:
    """Flush every fragment."""
    summary = await dispatcher.flush()
    return OperationResponse(
        success=not (summary["providers_failed"] or summary["edge_purges_failed"]),
        message="Fragment namespace flushed",
        data=summary,
    )


@admin_router.post(
    "/seed/rotate",
    response_model=OperationResponse,
    status_code=status.HTTP_200_OK,
    summary="Rotate context cookie seed",
    description="Replace the seed now; every issued context cookie stops matching",
)
async def rotate_seed(
    seed_store: SeedStore = Depends(get_seed_store),
) -> OperationResponse:
    """Force a seed rotation."""
    await seed_store.rotate_seed()
    seed = await seed_store.current()
    logger.info("Context cookie seed rotated on request")
    return OperationResponse(
        success=True,
        message="Seed rotated",
        data={"last_changed": seed.last_changed},
    )
