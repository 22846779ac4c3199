"""
NHTSA vPIC API client (free, no auth required).

DecodeVinValues returns one flat result object per VIN with every element
as a string; GetModelsForMakeIdYear feeds the reference importer.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from app.config import settings
from app.errors import VpicProviderError
from app.repositories.base import VinRepository

logger = logging.getLogger(__name__)


class NhtsaVpicClient:
    """Thin async wrapper over the vPIC REST endpoints."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or settings.vpic_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout

    async def _get_results(self, path: str) -> list[Any]:
        url = f"{self.base_url}/{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params={"format": "json"})
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"vPIC HTTP error {e.response.status_code} for {path}")
            raise VpicProviderError(
                f"vPIC returned HTTP {e.response.status_code}",
                {"path": path, "status": e.response.status_code},
                inner_error=e,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"vPIC request failed for {path}: {e}")
            raise VpicProviderError("vPIC request failed", {"path": path}, inner_error=e) from e
        except ValueError as e:
            logger.error(f"vPIC returned invalid JSON for {path}: {e}")
            raise VpicProviderError("vPIC returned invalid JSON", {"path": path}, inner_error=e) from e

        results = data.get("Results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise VpicProviderError("vPIC response has no Results list", {"path": path})
        return results

    async def decode_vin_values(self, vin: str) -> dict[str, Any]:
        """Decode a VIN into vPIC's flat element mapping."""
        results = await self._get_results(f"DecodeVinValues/{quote(vin, safe='')}")
        if not results or not isinstance(results[0], dict):
            raise VpicProviderError("No results from vPIC", {"vin": vin})
        return results[0]

    async def get_models_for_make_id_year(self, make_id: int, year: int) -> list[dict[str, Any]]:
        """Models vPIC lists for a make id in one model year."""
        results = await self._get_results(f"GetModelsForMakeIdYear/makeId/{make_id}/modelyear/{year}")
        return [r for r in results if isinstance(r, dict)]


class NhtsaVinRepository(VinRepository):
    """VinRepository backed by the live vPIC API."""

    def __init__(self, client: NhtsaVpicClient | None = None):
        self.client = client or NhtsaVpicClient()

    async def vin_decode(self, vin: str) -> dict[str, Any]:
        return await self.client.decode_vin_values(vin)
