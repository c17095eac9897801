"""
Test Suite for the GeoPrice API

Test Categories:
- test_geometry: rectangle/octagon ring construction
- test_geocode_client: Google geocoding adapter over mocked HTTP
- test_area_generator: catalog and single-location generation
- test_land_service: caching, lookup, filtering and search
- test_api: FastAPI endpoints and the response envelope
- test_client_filters: API client and client-side filter pipeline
- conftest.py: shared fixtures

Running Tests:
    pytest              # Run all tests
    pytest -v           # Verbose output
"""
