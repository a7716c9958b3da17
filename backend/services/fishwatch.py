"""FishWatch species API client.

Free API, no key required. One GET per species, no retries.
"""

import logging
from typing import Any

import httpx

from errors import OriginUnavailable

logger = logging.getLogger(__name__)


class FishWatchClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            timeout=timeout, transport=transport, follow_redirects=True
        )

    async def fetch_species(self, species: str) -> Any:
        """Fetch the provider payload for a species, passed through as parsed JSON."""
        url = f"{self.base_url}/species/{species}"
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            logger.warning("FishWatch fetch failed for %s: %s", species, e)
            raise OriginUnavailable(species, str(e)) from e
        except ValueError as e:
            logger.warning("FishWatch returned invalid JSON for %s: %s", species, e)
            raise OriginUnavailable(species, "invalid JSON body") from e

        logger.info("Request sent to FishWatch for %s", species)
        return data

    async def aclose(self) -> None:
        await self._client.aclose()
