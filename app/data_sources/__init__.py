"""Weather gateways and the Open-Meteo client behind them."""

from .base import CallableWeatherGateway, WeatherGateway
from .factory import build_gateway
from .open_meteo_client import (
    City,
    WeatherForecast,
    WeatherSample,
    fetch_cities,
    fetch_forecast,
)

__all__ = [
    "build_gateway",
    "WeatherGateway",
    "CallableWeatherGateway",
    "City",
    "WeatherForecast",
    "WeatherSample",
    "fetch_cities",
    "fetch_forecast",
]
