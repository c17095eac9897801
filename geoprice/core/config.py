import os
from pydantic import BaseModel

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"

class Settings(BaseModel):
    # Basic
    ENV: str = os.getenv("ENV", "dev")
    PORT: int = int(os.getenv("PORT", "3001"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS (comma-separated list)
    CORS_ORIGIN: str = os.getenv("CORS_ORIGIN", "http://localhost:3000")

    # Geocoding: presence of the key switches the service to generated areas
    GOOGLE_MAPS_API_KEY: str | None = os.getenv("GOOGLE_MAPS_API_KEY") or None
    GEOCODE_BASE_URL: str = os.getenv("GEOCODE_BASE_URL", GOOGLE_GEOCODE_URL)
    GEOCODE_TIMEOUT_SECONDS: float = float(os.getenv("GEOCODE_TIMEOUT_SECONDS", "10"))
    GEOCODE_REQUEST_DELAY_SECONDS: float = float(os.getenv("GEOCODE_REQUEST_DELAY_SECONDS", "0.2"))

    # Metrics
    PROMETHEUS_ENABLED: bool = os.getenv("PROMETHEUS_ENABLED", "true").lower() == "true"

    @property
    def geocoding_enabled(self) -> bool:
        return bool(self.GOOGLE_MAPS_API_KEY)

    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.CORS_ORIGIN.split(",") if o.strip()]
        return origins or ["*"]

settings = Settings()
