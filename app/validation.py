"""Guard conditions applied at the GraphQL boundary before any upstream call."""

from __future__ import annotations

import math

from app.domain import InvalidInputError

MIN_FORECAST_DAYS = 1
MAX_FORECAST_DAYS = 16
MIN_QUERY_LENGTH = 2


def _in_range(value, lower: float, upper: float) -> bool:
    """True for finite numbers within [lower, upper]."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and lower <= value <= upper


def validate_coordinates(latitude: float, longitude: float) -> None:
    """Reject latitudes outside [-90, 90] and longitudes outside [-180, 180]."""
    if not _in_range(latitude, -90, 90):
        raise InvalidInputError("Latitude must be a number between -90 and 90")
    if not _in_range(longitude, -180, 180):
        raise InvalidInputError("Longitude must be a number between -180 and 180")


def validate_days(days: int) -> None:
    if not _in_range(days, MIN_FORECAST_DAYS, MAX_FORECAST_DAYS):
        raise InvalidInputError(
            f"Days parameter must be between {MIN_FORECAST_DAYS} and {MAX_FORECAST_DAYS}"
        )


def validate_search_query(query: str | None) -> str:
    """Return the trimmed query, or raise if it is shorter than two characters."""
    trimmed = (query or "").strip()
    if len(trimmed) < MIN_QUERY_LENGTH:
        raise InvalidInputError(
            f"Search query must be at least {MIN_QUERY_LENGTH} characters long"
        )
    return trimmed
