"""Application configuration pulled from environment variables via pydantic."""
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="config")


class Settings(BaseSettings):
    """Environment-driven configuration for the weather activities API."""
    model_config = SettingsConfigDict(env_prefix="TRAVEL_", extra="ignore")

    gateway: str = "open_meteo"  # options: open_meteo
    openmeteo_geocoding_url: str = "https://geocoding-api.open-meteo.com/v1"
    openmeteo_weather_url: str = "https://api.open-meteo.com/v1"
    request_timeout_seconds: float = 10.0
    default_forecast_days: int = 7
    hourly_forecast_hours: int = 24
    graphql_introspection: bool = True
    cors_allow_origins: list[str] = ["*"]
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    # PORT is honoured without the prefix so hosting platforms can inject it
    port: int = Field(default=4000, validation_alias=AliasChoices("TRAVEL_PORT", "PORT"))

    @field_validator("openmeteo_geocoding_url", "openmeteo_weather_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs to avoid double slashes."""
        return str(v).rstrip("/")


settings = Settings()


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    logger.debug(f"Loaded settings: {settings.model_dump_json(indent=4)}")
