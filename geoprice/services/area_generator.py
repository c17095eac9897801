import asyncio
import logging
import random
import time
from typing import Awaitable, Callable, Iterable, List, Optional

from ..core.config import settings
from ..core.metrics import GENERATION_LATENCY
from ..core.utils import timestamp_id
from ..data.base import CatalogPlace, GeocodingAdapter, LatLng
from ..schemas import LandArea, LandType

logger = logging.getLogger(__name__)

NEIGHBORHOOD_RADIUS_KM = 0.3
PRICE_JITTER = 50.0
MIN_PRICE = 0.01
CATALOG_AREA_RANGE = (30_000, 80_000)
SINGLE_AREA_RANGE = (20_000, 120_000)

DESCRIPTION_TEMPLATES = {
    "residential": (
        "Beautiful residential area in {name} with excellent amenities",
        "Prime residential location in {name} perfect for families",
        "Luxury residential district in {name} with high-end properties",
        "Charming residential neighborhood in {name} with great community feel",
    ),
    "commercial": (
        "Thriving commercial district in {name} with excellent business opportunities",
        "Prime commercial real estate in {name} with high foot traffic",
        "Major commercial hub in {name} with modern office buildings",
        "Dynamic commercial area in {name} perfect for retail and offices",
    ),
    "industrial": (
        "Industrial zone in {name} with excellent transportation access",
        "Modern industrial district in {name} suitable for manufacturing",
        "Well-connected industrial area in {name} with great logistics",
    ),
    "agricultural": (
        "Fertile agricultural land in {name} suitable for farming",
        "Prime agricultural area in {name} with excellent soil quality",
    ),
}

class AreaGenerator:
    """
    Turns place names into LandArea records:
      address → details → provider bounds (rectangle) or synthesized octagon
              → randomized price/area + template description.

    `rng` and `sleep` are injectable so tests can pin randomness and skip
    the pause between provider calls.
    """
    def __init__(
        self,
        geocoder: GeocodingAdapter,
        rng: random.Random | None = None,
        request_delay: float = settings.GEOCODE_REQUEST_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.geocoder = geocoder
        self.rng = rng or random.Random()
        self.request_delay = request_delay
        self.sleep = sleep

    async def _resolve_boundary(self, address: str, radius_km: float) -> Optional[List[LatLng]]:
        details = await self.geocoder.resolve_details(address)
        if details is None:
            return None
        if details.bounds is not None:
            return self.geocoder.rectangle_to_boundary(details.bounds)
        return await self.geocoder.synthesize_boundary(address, radius_km)

    def describe(self, name: str, type: str) -> str:
        return self.rng.choice(DESCRIPTION_TEMPLATES[LandType(type).value]).format(name=name)

    def _price(self, base_price: float) -> float:
        # Jitter may not push a cheap base price to zero or below
        return max(base_price + self.rng.uniform(-PRICE_JITTER, PRICE_JITTER), MIN_PRICE)

    def _area(self, bounds: tuple[int, int]) -> float:
        return float(self.rng.randrange(*bounds))

    async def generate_catalog(self, places: Iterable[CatalogPlace]) -> List[LandArea]:
        """
        Generate one area per resolvable place, in input order.
        Unresolvable places are skipped, so ids are positions in the
        output (1-based), not in the input.
        """
        areas: List[LandArea] = []
        start = time.perf_counter()
        for i, place in enumerate(places):
            if i and self.request_delay > 0:
                # Stay under the provider's rate limit
                await self.sleep(self.request_delay)
            logger.info(f"Fetching coordinates for {place.name}...")
            try:
                coordinates = await self._resolve_boundary(place.search_term, NEIGHBORHOOD_RADIUS_KM)
                if not coordinates:
                    logger.warning(f"Skipping {place.name}: no geometry returned")
                    continue
                areas.append(LandArea(
                    id=str(len(areas) + 1),
                    name=place.name,
                    coordinates=coordinates,
                    price_per_sq_ft=self._price(place.estimated_price),
                    total_area=self._area(CATALOG_AREA_RANGE),
                    description=self.describe(place.name, place.type),
                    type=place.type,
                ))
            except Exception as e:
                logger.exception(f"Error generating area for {place.name}: {e}")
        GENERATION_LATENCY.observe(time.perf_counter() - start)
        logger.info(f"Generated {len(areas)} areas")
        return areas

    async def generate_single(
        self, name: str, address: str, type: str, base_price: float, radius_km: float = 0.5
    ) -> Optional[LandArea]:
        coordinates = await self._resolve_boundary(address, radius_km)
        if not coordinates:
            logger.warning(f"Could not resolve geometry for {name!r} at {address!r}")
            return None
        return LandArea(
            id=timestamp_id(),
            name=name,
            coordinates=coordinates,
            price_per_sq_ft=self._price(base_price),
            total_area=self._area(SINGLE_AREA_RANGE),
            description=self.describe(name, type),
            type=type,
        )
