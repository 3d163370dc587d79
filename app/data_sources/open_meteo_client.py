"""Helpers for searching cities and fetching forecasts from the Open-Meteo APIs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

import requests

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag='open_meteo_client')

session = requests.Session()

OPEN_METEO_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1"
OPEN_METEO_WEATHER_URL = "https://api.open-meteo.com/v1"
DEFAULT_TIMEOUT_SECONDS = 10.0
MAX_FORECAST_DAYS = 16
HOURLY_FORECAST_HOURS = 24

SAMPLE_VARS = ["temperature_2m", "weather_code", "wind_speed_10m", "precipitation"]
DAILY_VARS = [
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "wind_speed_10m_max",
    "precipitation_sum",
]

EXPECTED_UNITS = {
    "temperature_2m": "°C",
    "temperature_2m_max": "°C",
    "temperature_2m_min": "°C",
    "wind_speed_10m": "m/s",
    "wind_speed_10m_max": "m/s",
    "precipitation": "mm",
    "precipitation_sum": "mm",
    "weather_code": "wmo code",
}

# Acceptable alternative spellings that should not trigger warnings.
ALLOWED_UNIT_SYNONYMS = {
    "wind_speed_10m": {"m/s", "ms"},
    "wind_speed_10m_max": {"m/s", "ms"},
    "weather_code": {"wmo code", ""},
}


@dataclass(frozen=True)
class City:
    """Geocoding match returned by Open-Meteo."""
    id: str
    name: str
    country: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class WeatherSample:
    """Normalized weather reading (°C, WMO code, m/s, mm)."""
    temperature: float
    weather_code: int
    wind_speed: float
    precipitation: float
    time: str  # ISO-8601, passed through untouched


@dataclass(frozen=True)
class WeatherForecast:
    """Current reading plus the next hours and days."""
    current: WeatherSample
    hourly: List[WeatherSample]
    daily: List[WeatherSample]


def _warn_on_unexpected_units(units: dict | None, *, context: str):
    """Log a warning if Open-Meteo returns units we did not request/expect."""
    if not units:
        return
    for field, expected in EXPECTED_UNITS.items():
        actual = units.get(field)
        if actual is None or actual == expected:
            continue
        allowed = ALLOWED_UNIT_SYNONYMS.get(field, set())
        if actual not in allowed:
            logger.warning(
                "Unexpected Open-Meteo unit",
                extra={"context": context, "field": field, "unit": actual, "expected": expected},
            )


def fetch_cities(query: str,
                 limit: int = 10,
                 *,
                 base_url: str = OPEN_METEO_GEOCODING_URL,
                 timeout: float = DEFAULT_TIMEOUT_SECONDS,
                 ) -> List[City]:
    """Search the geocoding API for cities matching `query`."""
    params = {
        "name": query,
        "count": limit,
        "language": "en",
        "format": "json",
    }

    resp = session.get(f"{base_url}/search", params=params, timeout=timeout)
    resp.raise_for_status()
    data = resp.json()

    # the API omits `results` entirely when nothing matches
    results = data.get("results") or []
    logger.debug("Geocoding returned %d result(s) for %r", len(results), query)

    return [
        City(
            id=str(city["id"]),
            name=city["name"],
            country=city.get("country", ""),
            latitude=city["latitude"],
            longitude=city["longitude"],
        )
        for city in results
    ]


def fetch_forecast(latitude: float,
                   longitude: float,
                   days: int = 7,
                   *,
                   base_url: str = OPEN_METEO_WEATHER_URL,
                   timeout: float = DEFAULT_TIMEOUT_SECONDS,
                   hourly_hours: int = HOURLY_FORECAST_HOURS,
                   ) -> WeatherForecast:
    """Fetch current, hourly and daily weather for the given coordinates."""
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "current": ",".join(SAMPLE_VARS),
        "hourly": ",".join(SAMPLE_VARS),
        "daily": ",".join(DAILY_VARS),
        "timezone": "auto",
        "forecast_days": min(days, MAX_FORECAST_DAYS),
        "wind_speed_unit": "ms",
    }

    resp = session.get(f"{base_url}/forecast", params=params, timeout=timeout)
    resp.raise_for_status()
    data = resp.json()

    current = data["current"]
    hourly = data["hourly"]
    daily = data["daily"]
    _warn_on_unexpected_units(data.get("current_units"), context="weather_current")
    _warn_on_unexpected_units(data.get("hourly_units"), context="weather_hourly")
    _warn_on_unexpected_units(data.get("daily_units"), context="weather_daily")

    current_sample = WeatherSample(
        temperature=current["temperature_2m"],
        weather_code=current["weather_code"],
        wind_speed=current["wind_speed_10m"],
        precipitation=current["precipitation"],
        time=current["time"],
    )

    hourly_samples: List[WeatherSample] = []
    for i, t in enumerate(hourly["time"][:hourly_hours]):
        hourly_samples.append(
            WeatherSample(
                temperature=hourly["temperature_2m"][i],
                weather_code=hourly["weather_code"][i],
                wind_speed=hourly["wind_speed_10m"][i],
                precipitation=hourly["precipitation"][i],
                time=t,
            )
        )

    daily_samples: List[WeatherSample] = []
    for i, t in enumerate(daily["time"]):
        daily_samples.append(
            WeatherSample(
                temperature=(daily["temperature_2m_max"][i] + daily["temperature_2m_min"][i]) / 2,
                weather_code=daily["weather_code"][i],
                wind_speed=daily["wind_speed_10m_max"][i],
                precipitation=daily["precipitation_sum"][i],
                time=t,
            )
        )

    return WeatherForecast(current=current_sample, hourly=hourly_samples, daily=daily_samples)
