from typing import Any, List
from urllib.parse import quote
import httpx
from ..schemas import LandArea

class LandApiError(Exception):
    """The API answered with success=false (or no data)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

class LandApiClient:
    """
    Async client for the /api/land-areas endpoints. Unwraps the
    {success, data, error} envelope and returns LandArea models.
    """
    def __init__(
        self,
        base_url: str = "http://localhost:3001/api",
        timeout: float = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def _request(self, method: str, path: str, fallback_error: str, **kwargs) -> Any:
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        ) as client:
            r = await client.request(method, path, **kwargs)
        try:
            j = r.json()
        except ValueError:
            r.raise_for_status()
            raise LandApiError(fallback_error, r.status_code)
        if not isinstance(j, dict):
            raise LandApiError(fallback_error, r.status_code)
        if not j.get("success") or j.get("data") is None:
            raise LandApiError(j.get("error") or fallback_error, r.status_code)
        return j["data"]

    async def _areas(self, path: str, fallback_error: str) -> List[LandArea]:
        items = await self._request("GET", path, fallback_error)
        return [LandArea.model_validate(i) for i in items]

    async def get_all(self) -> List[LandArea]:
        return await self._areas("/land-areas", "Failed to fetch land areas")

    async def get_by_id(self, area_id: str) -> LandArea:
        item = await self._request("GET", f"/land-areas/{quote(area_id, safe='')}", "Failed to fetch land area")
        return LandArea.model_validate(item)

    async def get_by_type(self, type: str) -> List[LandArea]:
        return await self._areas(f"/land-areas/type/{quote(type, safe='')}", "Failed to fetch land areas by type")

    async def search(self, query: str) -> List[LandArea]:
        return await self._areas(f"/land-areas/search/{quote(query, safe='')}", "Failed to search land areas")

    async def add_by_location(self, name: str, address: str, type: str, estimated_price: float) -> LandArea:
        item = await self._request(
            "POST", "/land-areas/add-location", "Failed to add area by location",
            json={"name": name, "address": address, "type": type, "estimatedPrice": estimated_price},
        )
        return LandArea.model_validate(item)
