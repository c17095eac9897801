import asyncio
import logging
from typing import List, Optional, Sequence

from ..core.config import settings
from ..core.exceptions import GeocodingNotConfiguredError
from ..data.base import CatalogPlace
from ..data.catalog import MANHATTAN_NEIGHBORHOODS
from ..data.geocode_client import geocoding_adapter
from ..data.sample_areas import SAMPLE_LAND_AREAS
from ..schemas import LandArea
from .area_generator import AreaGenerator

logger = logging.getLogger(__name__)

class LandDataService:
    """
    Single entry point for land-area reads and the two mutations
    (append by location, full refresh).

    Static mode (no generator): always the sample set.
    Geocoded mode: the catalog is generated on first use and cached on
    this instance until refresh(). Concurrent first reads share one
    in-flight generation instead of each hitting the provider.
    """
    def __init__(
        self,
        generator: AreaGenerator | None = None,
        catalog: Sequence[CatalogPlace] = MANHATTAN_NEIGHBORHOODS,
        sample_areas: Sequence[LandArea] = SAMPLE_LAND_AREAS,
    ):
        self.generator = generator
        self.catalog = tuple(catalog)
        self.sample_areas = tuple(sample_areas)
        self._cache: Optional[List[LandArea]] = None
        self._pending: Optional[asyncio.Task] = None

    @property
    def geocoding_enabled(self) -> bool:
        return self.generator is not None

    @property
    def is_cached(self) -> bool:
        return self._cache is not None

    async def _generate(self) -> List[LandArea]:
        me = asyncio.current_task()
        try:
            logger.info("Generating real coordinates for land areas...")
            areas = await self.generator.generate_catalog(self.catalog)
            # A refresh() during generation detaches this task; drop its result
            if self._pending is me:
                self._cache = areas
            return areas
        finally:
            if self._pending is me:
                self._pending = None

    async def get_all(self) -> List[LandArea]:
        if self.generator is None:
            return list(self.sample_areas)
        if self._cache is not None:
            return list(self._cache)
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._generate())
        # shield: one cancelled request must not cancel the shared generation
        return list(await asyncio.shield(self._pending))

    async def get_by_id(self, area_id: str) -> Optional[LandArea]:
        for area in await self.get_all():
            if area.id == area_id:
                return area
        return None

    async def get_by_type(self, type: str) -> List[LandArea]:
        return [a for a in await self.get_all() if a.type == type]

    async def search(self, query: str) -> List[LandArea]:
        q = query.lower()
        return [
            a for a in await self.get_all()
            if q in a.name.lower()
            or (a.description is not None and q in a.description.lower())
            or q in a.type.lower()
        ]

    async def add_by_location(
        self, name: str, address: str, type: str, base_price: float
    ) -> Optional[LandArea]:
        if self.generator is None:
            raise GeocodingNotConfiguredError()
        area = await self.generator.generate_single(name, address, type, base_price)
        if area is not None and self._cache is not None:
            self._cache.append(area)
        return area

    def refresh(self) -> None:
        """Forget generated areas; the next get_all() regenerates them."""
        if self.generator is None:
            return
        logger.info("Invalidating generated land areas")
        self._cache = None
        self._pending = None

def build_land_service() -> LandDataService:
    """
    Factory picks geocoded or static mode based on env flags.
    """
    geocoder = geocoding_adapter()
    if geocoder is None:
        logger.info("No Google Maps API key configured; serving sample land areas")
        return LandDataService()
    return LandDataService(
        generator=AreaGenerator(geocoder, request_delay=settings.GEOCODE_REQUEST_DELAY_SECONDS)
    )
