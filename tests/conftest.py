"""
Shared fixtures.

Fixtures:
- fake_geocoder: in-memory GeocodingAdapter that counts calls
- static_service: LandDataService on the sample set
- geocoded_service: LandDataService generating from fake_geocoder
"""

import random
from collections import Counter

import pytest

from geoprice.data.base import Bounds, GeocodeDetails, GeoPoint
from geoprice.data.catalog import MANHATTAN_NEIGHBORHOODS
from geoprice.data.geometry import octagon_boundary, rectangle_to_boundary
from geoprice.services.area_generator import AreaGenerator
from geoprice.services.land_service import LandDataService


class FakeGeocoder:
    """
    Stand-in for the Google adapter. `places` maps an address to the
    details the provider would return (None or missing = no match).
    """

    def __init__(self, places: dict | None = None):
        self.places = dict(places or {})
        self.calls = Counter()
        self.radii = []

    async def resolve_center(self, address):
        self.calls["resolve_center"] += 1
        details = self.places.get(address)
        return details.center if details else None

    async def resolve_details(self, address):
        self.calls["resolve_details"] += 1
        return self.places.get(address)

    async def synthesize_boundary(self, address, radius_km=0.5):
        self.calls["synthesize_boundary"] += 1
        self.radii.append(radius_km)
        center = await self.resolve_center(address)
        if center is None:
            return None
        return octagon_boundary(center, radius_km)

    def rectangle_to_boundary(self, bounds):
        self.calls["rectangle_to_boundary"] += 1
        return rectangle_to_boundary(bounds)


def details_at(lat, lng, with_bounds=True, name="Somewhere"):
    bounds = None
    if with_bounds:
        bounds = Bounds(
            northeast=GeoPoint(lat + 0.005, lng + 0.005),
            southwest=GeoPoint(lat - 0.005, lng - 0.005),
        )
    return GeocodeDetails(center=GeoPoint(lat, lng), formatted_address=name, bounds=bounds)


def catalog_places():
    """Provider answers for the whole catalog; odd entries come back without bounds."""
    return {
        place.search_term: details_at(40.70 + i * 0.01, -74.0 + i * 0.005, with_bounds=(i % 2 == 0), name=place.name)
        for i, place in enumerate(MANHATTAN_NEIGHBORHOODS)
    }


def is_closed(ring):
    return len(ring) >= 2 and tuple(ring[0]) == tuple(ring[-1])


async def no_sleep(seconds):
    return None


def make_generator(geocoder, seed=7):
    return AreaGenerator(geocoder, rng=random.Random(seed), request_delay=0.2, sleep=no_sleep)


@pytest.fixture
def fake_geocoder():
    return FakeGeocoder(catalog_places())


@pytest.fixture
def static_service():
    return LandDataService()


@pytest.fixture
def geocoded_service(fake_geocoder):
    return LandDataService(generator=make_generator(fake_geocoder))
