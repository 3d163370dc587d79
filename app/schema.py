"""GraphQL schema for city search, forecasts and activity recommendations."""

from typing import List

import strawberry
from graphql import GraphQLError
from graphql.validation import NoSchemaIntrospectionCustomRule
from starlette.concurrency import run_in_threadpool
from strawberry.extensions import AddValidationRules

from .config import settings
from .data_sources import City, WeatherForecast, WeatherSample, build_gateway
from .domain import ActivityScore, InvalidInputError, UpstreamError
from . import forecast_service
from .validation import validate_coordinates, validate_days, validate_search_query
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="app/schema")

BAD_USER_INPUT = "BAD_USER_INPUT"
UPSTREAM_FAILURE = "UPSTREAM_FAILURE"

GATEWAY = build_gateway(settings)


@strawberry.type(name="City")
class CityType:
    id: strawberry.ID
    name: str
    country: str
    latitude: float
    longitude: float

    @classmethod
    def from_city(cls, city: City) -> "CityType":
        return cls(
            id=strawberry.ID(city.id),
            name=city.name,
            country=city.country,
            latitude=city.latitude,
            longitude=city.longitude,
        )


@strawberry.type(name="Weather")
class WeatherType:
    temperature: float
    weather_code: int
    wind_speed: float
    precipitation: float
    time: str

    @classmethod
    def from_sample(cls, sample: WeatherSample) -> "WeatherType":
        return cls(
            temperature=sample.temperature,
            weather_code=sample.weather_code,
            wind_speed=sample.wind_speed,
            precipitation=sample.precipitation,
            time=sample.time,
        )


@strawberry.type(name="WeatherForecast")
class WeatherForecastType:
    current: WeatherType
    hourly: List[WeatherType]
    daily: List[WeatherType]

    @classmethod
    def from_forecast(cls, forecast: WeatherForecast) -> "WeatherForecastType":
        return cls(
            current=WeatherType.from_sample(forecast.current),
            hourly=[WeatherType.from_sample(s) for s in forecast.hourly],
            daily=[WeatherType.from_sample(s) for s in forecast.daily],
        )


@strawberry.type(name="ActivityScore")
class ActivityScoreType:
    activity: str
    score: int
    description: str

    @classmethod
    def from_score(cls, score: ActivityScore) -> "ActivityScoreType":
        return cls(activity=score.activity.value, score=score.score, description=score.description)


def _to_graphql_error(exc: Exception) -> GraphQLError:
    """Map domain errors onto GraphQL errors carrying an extensions.code."""
    if isinstance(exc, InvalidInputError):
        logger.debug("Rejected input: %s", exc)
        return GraphQLError(str(exc), extensions={"code": BAD_USER_INPUT})
    return GraphQLError(str(exc), extensions={"code": UPSTREAM_FAILURE})


@strawberry.type
class Query:
    @strawberry.field(description="Search for cities by name with optional result limit")
    async def search_cities(self, query: str, limit: int = 10) -> List[CityType]:
        try:
            trimmed = validate_search_query(query)
            cities = await run_in_threadpool(forecast_service.search_cities, trimmed, limit, gateway=GATEWAY)
        except (InvalidInputError, UpstreamError) as exc:
            raise _to_graphql_error(exc) from exc
        return [CityType.from_city(c) for c in cities]

    @strawberry.field(description="Get weather forecast for a specific location")
    async def get_weather_forecast(
        self,
        latitude: float,
        longitude: float,
        days: int = settings.default_forecast_days,
    ) -> WeatherForecastType:
        try:
            validate_coordinates(latitude, longitude)
            validate_days(days)
            forecast = await run_in_threadpool(
                forecast_service.get_weather_forecast, latitude, longitude, days, gateway=GATEWAY
            )
        except (InvalidInputError, UpstreamError) as exc:
            raise _to_graphql_error(exc) from exc
        return WeatherForecastType.from_forecast(forecast)

    @strawberry.field(description="Get recommended activities based on weather conditions at a location")
    async def get_recommended_activities(self, latitude: float, longitude: float) -> List[ActivityScoreType]:
        try:
            validate_coordinates(latitude, longitude)
            scores = await run_in_threadpool(
                forecast_service.get_recommended_activities, latitude, longitude, gateway=GATEWAY
            )
        except (InvalidInputError, UpstreamError) as exc:
            raise _to_graphql_error(exc) from exc
        return [ActivityScoreType.from_score(s) for s in scores]


def build_schema(introspection: bool = True) -> strawberry.Schema:
    """Create the schema, optionally rejecting introspection queries."""
    extensions = [] if introspection else [lambda: AddValidationRules([NoSchemaIntrospectionCustomRule])]
    return strawberry.Schema(query=Query, extensions=extensions)


schema = build_schema(settings.graphql_introspection)
