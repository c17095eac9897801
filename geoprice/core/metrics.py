import time
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

# Define metrics (names follow Prometheus conventions)
REQ_COUNT = Counter("http_requests_total", "Total HTTP requests", ["path","method","code"])
REQ_LATENCY = Histogram("http_request_duration_seconds", "Request latency", ["path","method"])
# Label for requests that matched no route (404s on arbitrary paths)
UNMATCHED_PATH = "<unmatched>"

# Domain metrics
GEOCODE_LOOKUPS = Counter("geocode_lookups_total", "Geocoding provider lookups", ["outcome"])
GENERATION_LATENCY = Histogram(
    "land_area_generation_seconds", "Catalog generation duration",
    buckets=(0.5, 1, 2, 5, 10, 20, 40, 80),
)

class PromMiddleware(BaseHTTPMiddleware):
    """
    Measures latency and counts requests.
    """
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed = time.perf_counter() - start

        # Use the matched route template so /{id} does not explode label sets
        route = request.scope.get("route")
        path = getattr(route, "path", None) or UNMATCHED_PATH
        method = request.method
        code = str(response.status_code)

        REQ_COUNT.labels(path=path, method=method, code=code).inc()
        REQ_LATENCY.labels(path=path, method=method).observe(elapsed)
        return response

async def metrics_endpoint(request: Request):
    """
    GET /metrics — scraped by Prometheus.
    """
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
