"""Factory helpers for choosing a weather gateway at startup."""

from __future__ import annotations

from functools import partial

from app import config
from app.data_sources.base import CallableWeatherGateway, WeatherGateway
from app.data_sources.open_meteo_client import fetch_cities, fetch_forecast
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="data_sources/factory")


DEFAULT_GATEWAY_NAME = "open_meteo"


def build_gateway(settings: config.Settings | None = None) -> WeatherGateway:
    """Instantiate the configured weather gateway."""
    settings = settings or config.settings
    name = (settings.gateway or DEFAULT_GATEWAY_NAME).lower()

    if name == "open_meteo":
        logger.info(
            "Using Open-Meteo gateway",
            extra={
                "geocoding_url": settings.openmeteo_geocoding_url,
                "weather_url": settings.openmeteo_weather_url,
            },
        )
        return CallableWeatherGateway(
            cities=partial(
                fetch_cities,
                base_url=settings.openmeteo_geocoding_url,
                timeout=settings.request_timeout_seconds,
            ),
            forecast=partial(
                fetch_forecast,
                base_url=settings.openmeteo_weather_url,
                timeout=settings.request_timeout_seconds,
                hourly_hours=settings.hourly_forecast_hours,
            ),
        )

    raise ValueError(f"Unknown weather gateway '{name}'")
