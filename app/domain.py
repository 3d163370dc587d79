"""Domain vocabulary and strict schemas for activity recommendations.

This module defines the contract between the scoring engine and the GraphQL
layer: the fixed activity names, the score payload, and the two error types
the boundary turns into GraphQL error codes. No scoring logic lives here.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class _StrictBaseModel(BaseModel):
    """Base model with strict extra handling and frozen instances."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class Activity(str, Enum):
    """Activities the engine knows how to score, in evaluation order."""
    SKIING = "Skiing"
    SURFING = "Surfing"
    INDOOR_SIGHTSEEING = "Indoor Sightseeing"
    OUTDOOR_SIGHTSEEING = "Outdoor Sightseeing"


class ActivityScore(_StrictBaseModel):
    """Suitability of one activity for one weather sample."""
    activity: Activity
    score: int = Field(ge=0, le=100)
    description: str = Field(min_length=1)


class InvalidInputError(ValueError):
    """Caller supplied coordinates, days or a query outside the accepted range."""


class UpstreamError(RuntimeError):
    """The weather/geocoding gateway failed or returned an unusable payload."""
