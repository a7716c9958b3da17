"""Health and readiness check routes."""

import logging

from fastapi import APIRouter, Depends

from config import settings
from dependencies import get_store
from errors import StoreUnavailable
from services.store import FishStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/ready")
async def ready() -> dict:
    """Lightweight readiness check — no external calls."""
    return {"status": "ok", "service": "fishcache", "commit": settings.git_sha}


@router.get("/health")
async def health(store: FishStore = Depends(get_store)) -> dict:
    """Deep health check that verifies Redis connectivity."""
    result = {"status": "ok", "service": "fishcache", "commit": settings.git_sha, "store": "not_tested"}

    if not store.connected:
        result["store"] = "disconnected"
        return result

    try:
        await store.ping()
        result["store"] = "connected"
    except StoreUnavailable as e:
        logger.warning("Store health check failed: %s", e)
        result["store"] = "error"
        result["store_error"] = str(e)

    return result
