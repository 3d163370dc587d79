"""Interfaces and helpers for weather/geocoding gateways."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Protocol

from app.data_sources.open_meteo_client import City, WeatherForecast


class WeatherGateway(Protocol):
    """Interface for anything that can geocode city names and provide forecasts."""

    def fetch_cities(self, query: str, limit: int = 10) -> List[City]:
        """Return cities whose name matches `query`."""
        ...

    def fetch_forecast(self, latitude: float, longitude: float, days: int = 7) -> WeatherForecast:
        """Return current, hourly and daily weather for a location."""
        ...


@dataclass
class CallableWeatherGateway(WeatherGateway):
    """Wrap two callables so they can be swapped for different backends."""

    cities: Callable[..., List[City]]
    forecast: Callable[..., WeatherForecast]

    def fetch_cities(self, *args, **kwargs) -> List[City]:
        """Delegate to the configured city-search callable."""
        return self.cities(*args, **kwargs)

    def fetch_forecast(self, *args, **kwargs) -> WeatherForecast:
        """Delegate to the configured forecast callable."""
        return self.forecast(*args, **kwargs)
