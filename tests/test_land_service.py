import asyncio

import pytest

from geoprice.core.exceptions import GeocodingNotConfiguredError
from geoprice.data.catalog import MANHATTAN_NEIGHBORHOODS
from geoprice.data.sample_areas import SAMPLE_LAND_AREAS
from geoprice.schemas import LAND_TYPES
from geoprice.services.land_service import LandDataService, build_land_service
from tests.conftest import FakeGeocoder, catalog_places, details_at, make_generator


class TestStaticMode:
    @pytest.mark.asyncio
    async def test_get_all_returns_sample_set(self, static_service):
        assert await static_service.get_all() == list(SAMPLE_LAND_AREAS)

    @pytest.mark.asyncio
    async def test_callers_cannot_mutate_sample_set(self, static_service):
        areas = await static_service.get_all()
        areas.clear()
        assert len(await static_service.get_all()) == len(SAMPLE_LAND_AREAS)

    @pytest.mark.asyncio
    async def test_add_by_location_requires_geocoding(self, static_service):
        with pytest.raises(GeocodingNotConfiguredError):
            await static_service.add_by_location("New", "Somewhere", "residential", 500)
        assert await static_service.get_all() == list(SAMPLE_LAND_AREAS)

    @pytest.mark.asyncio
    async def test_refresh_is_noop(self, static_service):
        static_service.refresh()
        assert await static_service.get_all() == list(SAMPLE_LAND_AREAS)
        assert not static_service.is_cached


class TestLookups:
    @pytest.mark.asyncio
    async def test_get_by_id(self, static_service):
        area = await static_service.get_by_id("5")
        assert area.name == "SoHo Arts District"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["0", "8", "", "abc", " 1"])
    async def test_get_by_id_unknown(self, static_service, missing):
        assert await static_service.get_by_id(missing) is None

    @pytest.mark.asyncio
    async def test_every_id_resolves_to_its_record(self, geocoded_service):
        for area in await geocoded_service.get_all():
            assert await geocoded_service.get_by_id(area.id) is area

    @pytest.mark.asyncio
    @pytest.mark.parametrize("service_fixture", ["static_service", "geocoded_service"])
    async def test_types_partition_all_areas(self, request, service_fixture):
        svc = request.getfixturevalue(service_fixture)
        all_areas = await svc.get_all()
        by_type = {t: await svc.get_by_type(t) for t in LAND_TYPES}

        for t, areas in by_type.items():
            assert areas == [a for a in all_areas if a.type == t]
        assert sorted(a.id for areas in by_type.values() for a in areas) == sorted(a.id for a in all_areas)

    @pytest.mark.asyncio
    async def test_get_by_type_is_case_sensitive(self, static_service):
        assert await static_service.get_by_type("Residential") == []


class TestSearch:
    @pytest.mark.asyncio
    async def test_case_insensitive_name_match(self, static_service):
        results = await static_service.search("SOHO")
        assert [a.name for a in results] == ["SoHo Arts District"]

    @pytest.mark.asyncio
    async def test_matches_type(self, static_service):
        results = await static_service.search("residential")
        ids = {a.id for a in results}
        assert {a.id for a in SAMPLE_LAND_AREAS if a.type == "residential"} <= ids
        # "Greenwich Village Historic District" mentions neither word; matched by type alone
        assert "4" in ids

    @pytest.mark.asyncio
    async def test_matches_description(self, static_service):
        results = await static_service.search("galleries")
        assert {a.id for a in results} == {"5", "7"}

    @pytest.mark.asyncio
    async def test_no_match(self, static_service):
        assert await static_service.search("brooklyn") == []

    @pytest.mark.asyncio
    async def test_area_without_description(self):
        svc = LandDataService(sample_areas=[
            SAMPLE_LAND_AREAS[0].model_copy(update={"description": None}),
        ])
        assert await svc.search("prime") == []
        assert len(await svc.search("lower manhattan")) == 1


class TestGeocodedMode:
    @pytest.mark.asyncio
    async def test_generates_once_and_caches(self, geocoded_service, fake_geocoder):
        first = await geocoded_service.get_all()
        calls = fake_geocoder.calls["resolve_details"]
        second = await geocoded_service.get_all()

        assert first == second
        assert len(first) == len(MANHATTAN_NEIGHBORHOODS)
        assert fake_geocoder.calls["resolve_details"] == calls == len(MANHATTAN_NEIGHBORHOODS)
        assert geocoded_service.is_cached

    @pytest.mark.asyncio
    async def test_callers_cannot_mutate_cache(self, geocoded_service, fake_geocoder):
        # Both readers await the same in-flight generation
        first, second = await asyncio.gather(geocoded_service.get_all(), geocoded_service.get_all())
        first.clear()
        assert len(second) == len(MANHATTAN_NEIGHBORHOODS)

        (await geocoded_service.get_all()).clear()
        assert len(await geocoded_service.get_all()) == len(MANHATTAN_NEIGHBORHOODS)
        assert fake_geocoder.calls["resolve_details"] == len(MANHATTAN_NEIGHBORHOODS)

    @pytest.mark.asyncio
    async def test_reads_share_the_cache(self, geocoded_service, fake_geocoder):
        await geocoded_service.get_all()
        await geocoded_service.get_by_id("1")
        await geocoded_service.get_by_type("commercial")
        await geocoded_service.search("soho")
        assert fake_geocoder.calls["resolve_details"] == len(MANHATTAN_NEIGHBORHOODS)

    @pytest.mark.asyncio
    async def test_refresh_regenerates(self, geocoded_service, fake_geocoder):
        await geocoded_service.get_all()
        geocoded_service.refresh()
        assert not geocoded_service.is_cached

        after = await geocoded_service.get_all()

        assert len(after) == len(MANHATTAN_NEIGHBORHOODS)
        assert fake_geocoder.calls["resolve_details"] == 2 * len(MANHATTAN_NEIGHBORHOODS)

    @pytest.mark.asyncio
    async def test_concurrent_first_reads_generate_once(self, geocoded_service, fake_geocoder):
        results = await asyncio.gather(*(geocoded_service.get_all() for _ in range(5)))

        assert all(r == results[0] for r in results)
        assert fake_geocoder.calls["resolve_details"] == len(MANHATTAN_NEIGHBORHOODS)

    @pytest.mark.asyncio
    async def test_refresh_during_generation_discards_stale_result(self, fake_geocoder):
        gate = asyncio.Event()

        async def wait_for_gate(seconds):
            await gate.wait()

        from geoprice.services.area_generator import AreaGenerator
        import random
        svc = LandDataService(generator=AreaGenerator(fake_geocoder, rng=random.Random(0), sleep=wait_for_gate))

        in_flight = asyncio.ensure_future(svc.get_all())
        await asyncio.sleep(0)
        svc.refresh()
        gate.set()
        stale = await in_flight

        assert len(stale) == len(MANHATTAN_NEIGHBORHOODS)
        assert not svc.is_cached

    @pytest.mark.asyncio
    async def test_add_by_location_appends_to_cache(self, fake_geocoder):
        fake_geocoder.places["350 5th Ave, New York"] = details_at(40.7484, -73.9857)
        svc = LandDataService(generator=make_generator(fake_geocoder))
        await svc.get_all()

        area = await svc.add_by_location("Empire State", "350 5th Ave, New York", "commercial", 1200)

        assert area is not None
        all_areas = await svc.get_all()
        assert all_areas[-1] is area
        assert len(all_areas) == len(MANHATTAN_NEIGHBORHOODS) + 1
        assert await svc.get_by_id(area.id) is area

    @pytest.mark.asyncio
    async def test_add_by_location_unresolved(self, geocoded_service):
        await geocoded_service.get_all()
        assert await geocoded_service.add_by_location("X", "Nowhere at all", "residential", 500) is None
        assert len(await geocoded_service.get_all()) == len(MANHATTAN_NEIGHBORHOODS)

    @pytest.mark.asyncio
    async def test_add_before_first_read_is_not_cached(self, fake_geocoder):
        fake_geocoder.places["Pier 57"] = details_at(40.7434, -74.0102)
        svc = LandDataService(generator=make_generator(fake_geocoder))

        area = await svc.add_by_location("Pier 57", "Pier 57", "commercial", 900)

        assert area is not None
        assert not svc.is_cached

    @pytest.mark.asyncio
    async def test_empty_generation_is_still_cached(self):
        geocoder = FakeGeocoder()
        svc = LandDataService(generator=make_generator(geocoder))
        assert await svc.get_all() == []
        assert await svc.get_all() == []
        assert geocoder.calls["resolve_details"] == len(MANHATTAN_NEIGHBORHOODS)

    @pytest.mark.asyncio
    async def test_custom_catalog(self):
        places = catalog_places()
        svc = LandDataService(generator=make_generator(FakeGeocoder(places)), catalog=MANHATTAN_NEIGHBORHOODS[:3])
        assert [a.id for a in await svc.get_all()] == ["1", "2", "3"]


class TestFactory:
    def test_static_without_key(self, monkeypatch):
        from geoprice.core.config import settings
        monkeypatch.setattr(settings, "GOOGLE_MAPS_API_KEY", None)
        assert not build_land_service().geocoding_enabled

    def test_geocoded_with_key(self, monkeypatch):
        from geoprice.core.config import settings
        monkeypatch.setattr(settings, "GOOGLE_MAPS_API_KEY", "abc123")
        svc = build_land_service()
        assert svc.geocoding_enabled
        assert not svc.is_cached
