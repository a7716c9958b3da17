"""Redis-backed store for cached species payloads.

Entries live in a single Redis hash (the dataset, always "fish") with one
field per species. Values are JSON strings.

Note: one FishStore is built per process and shared by every request.
Only reads run on the request path, so no locking is done here.
"""

import json
import logging
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

from errors import StoreUnavailable

logger = logging.getLogger(__name__)

DATASET = "fish"


class FishStore:
    """Thin async wrapper over the Redis hash commands used by the cache."""

    def __init__(self, url: str):
        self.url = url
        self._client: redis.Redis | None = None

    @property
    def connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        """Open the connection and verify it with a PING."""
        client = redis.from_url(self.url, encoding="utf-8", decode_responses=True)
        try:
            await client.ping()
        except (RedisError, OSError) as e:
            logger.error("Redis connection to %s failed: %s", self.url, e)
            await client.aclose()
            raise StoreUnavailable(str(e)) from e
        self._client = client
        logger.info("Connected to redis at %s", self.url)

    async def close(self) -> None:
        if self._client is None:
            return
        await self._client.aclose()
        self._client = None
        logger.info("Redis connection closed")

    async def ping(self) -> bool:
        try:
            return bool(await self._require().ping())
        except (RedisError, OSError) as e:
            raise StoreUnavailable(str(e)) from e

    async def get_field(self, dataset: str, field: str) -> str | None:
        """HGET. Returns None when the field is absent."""
        try:
            return await self._require().hget(dataset, field)
        except (RedisError, OSError, UnicodeDecodeError) as e:
            raise StoreUnavailable(str(e)) from e

    async def get_all_fields(self, dataset: str) -> dict[str, str]:
        try:
            return await self._require().hgetall(dataset)
        except (RedisError, OSError, UnicodeDecodeError) as e:
            raise StoreUnavailable(str(e)) from e

    async def set_field(self, dataset: str, field: str, payload: Any) -> None:
        try:
            await self._require().hset(dataset, field, json.dumps(payload))
        except (RedisError, OSError) as e:
            raise StoreUnavailable(str(e)) from e

    async def expire(self, dataset: str, ttl_seconds: int) -> None:
        # TTL applies to the whole hash, not to individual fields
        try:
            await self._require().expire(dataset, ttl_seconds)
        except (RedisError, OSError) as e:
            raise StoreUnavailable(str(e)) from e

    def _require(self) -> redis.Redis:
        if self._client is None:
            raise StoreUnavailable("not connected")
        return self._client
