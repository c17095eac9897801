from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException

# Routers
from .routers.land_areas import router as land_areas_router

# Core modules
from .core.config import settings
from .core.exceptions import general_exception_handler, http_exception_handler, validation_exception_handler
from .core.logging import configure_logging, CorrelationIdMiddleware
from .core.metrics import PromMiddleware, metrics_endpoint
from .core.utils import utc_now_iso
from .services.land_service import LandDataService, build_land_service

SERVICE_NAME = "GeoPrice API"

def create_app(land_service: LandDataService | None = None) -> FastAPI:
    """
    App factory so tests and ASGI servers can instantiate cleanly.
    Tests pass their own LandDataService to get an isolated cache.
    """
    configure_logging(settings.LOG_LEVEL)  # Set up JSON logs + request-id filter

    app = FastAPI(
        title=SERVICE_NAME,
        version="1.0.0",
        description="Land areas with price metadata, from sample data or geocoded neighborhoods.",
    )
    app.state.land_service = land_service or build_land_service()

    # CORS: allow the map frontend to call the API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id"],
    )

    # Observability middlewares
    app.add_middleware(CorrelationIdMiddleware)  # Adds/propagates X-Request-Id
    if settings.PROMETHEUS_ENABLED:
        app.add_middleware(PromMiddleware)       # Records req/latency metrics

    # Uniform {success, error} envelope for every failure
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Meta routes
    @app.get("/health", tags=["meta"])
    def health():
        return {"status": "OK", "timestamp": utc_now_iso(), "service": SERVICE_NAME}

    if settings.PROMETHEUS_ENABLED:
        # Standard Prometheus scrape endpoint
        app.add_route("/metrics", metrics_endpoint, methods=["GET"])

    # Business routes
    app.include_router(land_areas_router, prefix="/api/land-areas", tags=["land-areas"])

    return app

def run():
    """Console entry point: serve the app with uvicorn on PORT."""
    import uvicorn
    uvicorn.run("geoprice.main:app", host="0.0.0.0", port=settings.PORT, log_config=None)

app = create_app()
