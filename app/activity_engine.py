"""Deterministic activity scoring for a single weather sample.

Each scorer maps one sample (temperature in °C, WMO weather code, wind speed in
m/s, precipitation in mm) to an ActivityScore in the 0-100 range. No I/O and no
state: the same sample always yields the same scores.
"""

from __future__ import annotations

import math
from typing import Any, Callable, List, Mapping

from app.domain import Activity, ActivityScore


SNOW_CODES = frozenset(range(71, 78)) | {85, 86}
CLEAR_CODES = frozenset({0, 1, 2})
PRECIPITATION_CODES = range(51, 87)

IDEAL_SKI_TEMP_C = -5.0
IDEAL_SIGHTSEEING_TEMP_C = 21.5
SURF_WIND_THRESHOLD_MS = 8.0


def _get_field(sample: Any, key: str, default=None):
    """Support attribute, dict, or Mapping access for weather samples."""
    if sample is None:
        return default
    if isinstance(sample, Mapping):
        return sample.get(key, default)
    return getattr(sample, key, default)


def _require(sample: Any, key: str, alias: str):
    """Read `key` (or its camelCase `alias`); a missing reading raises KeyError."""
    value = _get_field(sample, key)
    if value is None:
        value = _get_field(sample, alias)
    if value is None:
        raise KeyError(f"Weather sample is missing '{key}'")
    return value


def _readings(sample: Any) -> tuple[float, int, float, float]:
    """Return (temperature, weather_code, wind_speed, precipitation)."""
    return (
        float(_require(sample, "temperature", "temperature")),
        int(_require(sample, "weather_code", "weatherCode")),
        float(_require(sample, "wind_speed", "windSpeed")),
        float(_require(sample, "precipitation", "precipitation")),
    )


def _finalize(score: float) -> int:
    """Clamp to 0-100, then round half away from zero."""
    clamped = max(0.0, min(100.0, score))
    return int(math.floor(clamped + 0.5))


def score_skiing(sample: Any) -> ActivityScore:
    """Cold and snowing is best; wind halves the score at 30 m/s."""
    temperature, code, wind, _precip = _readings(sample)
    is_snowing = code in SNOW_CODES

    temp_score = max(0.0, 1 - abs(IDEAL_SKI_TEMP_C - temperature) / 20)
    wind_penalty = min(1.0, wind / 30)

    score = 70 + temp_score * 30 if is_snowing else temp_score * 50
    score *= 1 - wind_penalty * 0.5

    return ActivityScore(
        activity=Activity.SKIING,
        score=_finalize(score),
        description=(
            "Perfect conditions for skiing with fresh snow!"
            if is_snowing
            else "Skiing conditions are not ideal right now."
        ),
    )


def score_surfing(sample: Any) -> ActivityScore:
    """Wind up to 15 m/s and warmth above 10 °C help; heavy rain and calm hurt."""
    temperature, _code, wind, precip = _readings(sample)
    has_waves = wind > SURF_WIND_THRESHOLD_MS

    wind_score = min(1.0, wind / 15) * 50
    temp_score = 50.0 if temperature > 10 else (temperature / 10) * 50
    rain_penalty = 20 if precip > 5 else 0
    # flat drop at or below 8 m/s, the same cut-off as the "too calm" verdict
    calm_penalty = 0 if has_waves else 10

    score = wind_score + temp_score - rain_penalty - calm_penalty

    return ActivityScore(
        activity=Activity.SURFING,
        score=_finalize(score),
        description="Good waves for surfing!" if has_waves else "Waves might be too calm for surfing.",
    )


def score_indoor_sightseeing(sample: Any) -> ActivityScore:
    """Flat 80 when it is wet, freezing or hot outside, otherwise 30."""
    temperature, code, _wind, precip = _readings(sample)
    is_bad_weather = (
        precip > 2
        or temperature < 0
        or temperature > 30
        or code in PRECIPITATION_CODES
    )

    return ActivityScore(
        activity=Activity.INDOOR_SIGHTSEEING,
        score=80 if is_bad_weather else 30,
        description=(
            "Great day to explore indoor attractions!"
            if is_bad_weather
            else "Consider outdoor activities instead."
        ),
    )


def score_outdoor_sightseeing(sample: Any) -> ActivityScore:
    """Clear, dry and close to 21.5 °C is best; wind costs 2 points per m/s up to 30."""
    temperature, code, wind, precip = _readings(sample)
    is_good_weather = (
        code in CLEAR_CODES
        and precip < 2
        and 15 <= temperature <= 28
    )

    wind_penalty = min(30.0, wind * 2)
    # goes negative beyond 20 °C from the ideal, dragging the average down
    temp_score = (1 - abs(IDEAL_SIGHTSEEING_TEMP_C - temperature) / 20) * 100

    base = 80 if is_good_weather else 30
    score = max(0.0, (base + temp_score) / 2 - wind_penalty)

    return ActivityScore(
        activity=Activity.OUTDOOR_SIGHTSEEING,
        score=_finalize(score),
        description=(
            "Perfect weather for exploring outdoors!"
            if is_good_weather
            else "Weather conditions might not be ideal for outdoor sightseeing."
        ),
    )


SCORERS: tuple[Callable[[Any], ActivityScore], ...] = (
    score_skiing,
    score_surfing,
    score_indoor_sightseeing,
    score_outdoor_sightseeing,
)


def score_all(sample: Any) -> List[ActivityScore]:
    """Score every activity and rank by score, highest first.

    `sorted` is stable, so ties keep the Skiing, Surfing, Indoor, Outdoor order.
    """
    scores = [scorer(sample) for scorer in SCORERS]
    return sorted(scores, key=lambda s: s.score, reverse=True)
