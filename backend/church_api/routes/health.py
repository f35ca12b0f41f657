"""
Children's Church API — Health Check Route
============================================

What:  Liveness endpoint for the hosting platform and uptime monitors.
How:   Always answers 200 while the process serves requests. The payload also
       reports whether the document store can be read, so a corrupt or
       unreadable data file shows up in monitoring without failing the health check.
"""

import logging
import time

from fastapi import APIRouter, Depends

from church_api import __version__
from church_api.exceptions import CorruptStoreError, StoreError
from church_api.schemas.common import HealthResponse
from church_api.store import JsonDocumentStore, get_document_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    store: JsonDocumentStore = Depends(get_document_store),
) -> HealthResponse:
    store_status = "readable"
    try:
        await store.load()
    except CorruptStoreError as e:
        store_status = "corrupt"
        logger.warning("Health check: document store corrupt: %s", e.context)
    except StoreError as e:
        store_status = "unavailable"
        logger.warning("Health check: document store unreadable: %s", e.context)

    return HealthResponse(
        status="ok",
        message="Children's Church API is running",
        version=__version__,
        store=store_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
