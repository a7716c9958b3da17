"""Species lookup route — cache-aside read in front of FishWatch.

The cache lookup runs as a dependency ahead of the handler. A hit answers
directly; a miss, or any store failure, falls through to the origin.
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends

from config import Settings
from dependencies import get_origin, get_settings, get_store
from errors import StoreUnavailable
from services.fishwatch import FishWatchClient
from services.store import DATASET, FishStore

logger = logging.getLogger(__name__)

router = APIRouter()


async def cached_species(species: str, store: FishStore = Depends(get_store)) -> dict | None:
    """Return the hit envelope for a cached species, or None on a miss.

    Any failure while reading or parsing the cached entry counts as a miss.
    """
    try:
        raw = await store.get_field(DATASET, species)
        if logger.isEnabledFor(logging.DEBUG):
            await _log_cached_keys(store)
        if not raw:
            return None
        data = json.loads(raw)
    except Exception as e:
        logger.warning("Cache lookup for %s failed, treating as miss: %s", species, e)
        return None

    return {"fromCache": True, "data": data}


async def _log_cached_keys(store: FishStore) -> None:
    # Diagnostic only; never affects the hit/miss decision
    try:
        all_fields = await store.get_all_fields(DATASET)
    except Exception as e:
        logger.debug("Could not list cached %s keys: %s", DATASET, e)
        return
    logger.debug("Cached %s keys: %s", DATASET, sorted(all_fields))


async def _write_back(store: FishStore, species: str, data: Any, ttl_seconds: int) -> None:
    try:
        await store.set_field(DATASET, species, data)
        await store.expire(DATASET, ttl_seconds)
    except StoreUnavailable as e:
        logger.warning("Write-back for %s failed: %s", species, e)


@router.get("/fish/{species}")
async def get_species(
    species: str,
    cached: dict | None = Depends(cached_species),
    store: FishStore = Depends(get_store),
    origin: FishWatchClient = Depends(get_origin),
    cfg: Settings = Depends(get_settings),
) -> dict:
    """Species data, from the cache when present, otherwise from FishWatch."""
    if cached is not None:
        return cached

    data = await origin.fetch_species(species)
    if cfg.cache_writeback:
        await _write_back(store, species, data, cfg.cache_ttl_seconds)

    return {"fromCache": False, "data": data}
