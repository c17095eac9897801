"""
Client-side refinement of the area list shown on the map.

Filters run in a fixed order: type, then min price, then max price (both
bounds inclusive). A free-text query swaps the base set for the server's
search results before the same filters run, so a query widens or changes
what is filtered, it does not only narrow the list already held.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional
from .land_client import LandApiClient
from ..schemas import LandArea

@dataclass(frozen=True)
class SearchFilters:
    type: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    query: Optional[str] = None

def apply_filters(areas: Iterable[LandArea], filters: SearchFilters) -> List[LandArea]:
    results = list(areas)
    if filters.type:
        results = [a for a in results if a.type == filters.type]
    if filters.min_price is not None:
        results = [a for a in results if a.price_per_sq_ft >= filters.min_price]
    if filters.max_price is not None:
        results = [a for a in results if a.price_per_sq_ft <= filters.max_price]
    return results

async def refine(client: LandApiClient, areas: Iterable[LandArea], filters: SearchFilters) -> List[LandArea]:
    if filters.query and filters.query.strip():
        base = await client.search(filters.query)
    else:
        base = areas
    return apply_filters(base, filters)
