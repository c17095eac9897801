from typing import Protocol, List, Optional, Tuple
from dataclasses import dataclass

# ----- Data shapes (thin & explicit) -----

# (latitude, longitude)
LatLng = Tuple[float, float]

@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lng: float

@dataclass(frozen=True)
class Bounds:
    northeast: GeoPoint
    southwest: GeoPoint

@dataclass(frozen=True)
class GeocodeDetails:
    center: GeoPoint
    formatted_address: str
    bounds: Optional[Bounds] = None

@dataclass(frozen=True)
class CatalogPlace:
    name: str           # display name, e.g. "SoHo"
    search_term: str    # query sent to the geocoder
    type: str           # one of LandType values
    estimated_price: float  # base price per sq ft

# ----- Protocols (interfaces) -----

class GeocodingAdapter(Protocol):
    async def resolve_center(self, address: str) -> Optional[GeoPoint]: ...
    async def resolve_details(self, address: str) -> Optional[GeocodeDetails]: ...
    async def synthesize_boundary(self, address: str, radius_km: float = 0.5) -> Optional[List[LatLng]]: ...
    def rectangle_to_boundary(self, bounds: Bounds) -> List[LatLng]: ...
