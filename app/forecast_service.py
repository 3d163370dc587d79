"""Combine gateway lookups with the activity engine for the GraphQL layer."""
from __future__ import annotations

from typing import List

from app.activity_engine import score_all
from app.data_sources import City, WeatherForecast, WeatherGateway
from app.domain import ActivityScore, UpstreamError
from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="app/forecast_service")


def search_cities(query: str, limit: int = 10, *, gateway: WeatherGateway) -> List[City]:
    """Look up cities by name; any gateway failure becomes an UpstreamError."""
    try:
        return gateway.fetch_cities(query, limit)
    except Exception as exc:
        logger.error("Error searching cities: %s", exc)
        raise UpstreamError(f"Failed to search cities: {exc}") from exc


def get_weather_forecast(
    latitude: float,
    longitude: float,
    days: int = 7,
    *,
    gateway: WeatherGateway,
) -> WeatherForecast:
    """Fetch the forecast for a location; any gateway failure becomes an UpstreamError."""
    try:
        return gateway.fetch_forecast(latitude, longitude, days)
    except Exception as exc:
        logger.error("Error fetching weather forecast: %s", exc)
        raise UpstreamError(f"Failed to fetch weather forecast: {exc}") from exc


def get_recommended_activities(
    latitude: float,
    longitude: float,
    *,
    gateway: WeatherGateway,
) -> List[ActivityScore]:
    """Score all activities against the current weather, best first."""
    try:
        forecast = get_weather_forecast(latitude, longitude, 1, gateway=gateway)
        scores = score_all(forecast.current)
    except Exception as exc:
        logger.error("Error generating activity recommendations: %s", exc)
        raise UpstreamError(f"Failed to generate activity recommendations: {exc}") from exc

    logger.debug(
        "Ranked activities",
        extra={"latitude": latitude, "longitude": longitude,
               "ranking": [(s.activity.value, s.score) for s in scores]},
    )
    return scores
