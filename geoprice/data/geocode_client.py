import logging
from typing import List, Optional
from .base import Bounds, GeocodeDetails, GeocodingAdapter, GeoPoint, LatLng
from .geometry import octagon_boundary, rectangle_to_boundary
from ..core.config import settings
from ..core.metrics import GEOCODE_LOOKUPS
import httpx

logger = logging.getLogger(__name__)

def _point(j: dict) -> GeoPoint:
    return GeoPoint(lat=float(j["lat"]), lng=float(j["lng"]))

class GoogleGeocode(GeocodingAdapter):
    """
    Adapter over the Google Geocoding JSON API.

    Every provider failure (transport error, non-2xx, bad JSON, non-OK
    status, malformed payload) is logged and reported as None so callers
    only ever deal with "got geometry" or "no geometry". No retries here.
    """
    def __init__(
        self,
        api_key: str,
        base_url: str = settings.GEOCODE_BASE_URL,
        timeout: float = settings.GEOCODE_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        # Tests plug an httpx.MockTransport in here
        self.transport = transport

    async def _lookup(self, address: str) -> Optional[dict]:
        """Return the first provider result for `address`, or None."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                r = await client.get(self.base_url, params={"address": address, "key": self.api_key})
                r.raise_for_status()
                j = r.json()
        except (httpx.HTTPError, ValueError) as e:
            GEOCODE_LOOKUPS.labels(outcome="error").inc()
            logger.warning(f"Geocoding error for {address!r}: {e}")
            return None

        status = j.get("status") if isinstance(j, dict) else None
        results = j.get("results") if isinstance(j, dict) else None
        if status == "OK" and results:
            GEOCODE_LOOKUPS.labels(outcome="ok").inc()
            return results[0]

        GEOCODE_LOOKUPS.labels(outcome="no_match").inc()
        logger.info(f"No geocoding match for {address!r} (status={status})")
        return None

    async def resolve_center(self, address: str) -> Optional[GeoPoint]:
        result = await self._lookup(address)
        if result is None:
            return None
        try:
            return _point(result["geometry"]["location"])
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Malformed geocoding result for {address!r}: {e}")
            return None

    async def resolve_details(self, address: str) -> Optional[GeocodeDetails]:
        result = await self._lookup(address)
        if result is None:
            return None
        try:
            geometry = result["geometry"]
            bounds = None
            if geometry.get("bounds"):
                bounds = Bounds(
                    northeast=_point(geometry["bounds"]["northeast"]),
                    southwest=_point(geometry["bounds"]["southwest"]),
                )
            return GeocodeDetails(
                center=_point(geometry["location"]),
                bounds=bounds,
                formatted_address=result.get("formatted_address", address),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Malformed geocoding result for {address!r}: {e}")
            return None

    async def synthesize_boundary(self, address: str, radius_km: float = 0.5) -> Optional[List[LatLng]]:
        """
        Rough octagon around the geocoded center, used when the provider
        has no bounds for a place.
        """
        center = await self.resolve_center(address)
        if center is None:
            return None
        return octagon_boundary(center, radius_km)

    def rectangle_to_boundary(self, bounds: Bounds) -> List[LatLng]:
        return rectangle_to_boundary(bounds)

def geocoding_adapter() -> GeocodingAdapter | None:
    """
    Factory: a Google adapter when an API key is configured, else None
    (the service then stays on the static sample set).
    """
    if settings.geocoding_enabled:
        return GoogleGeocode(
            settings.GOOGLE_MAPS_API_KEY,
            base_url=settings.GEOCODE_BASE_URL,
            timeout=settings.GEOCODE_TIMEOUT_SECONDS,
        )
    return None
