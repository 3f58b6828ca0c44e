"""Domain vocabulary and wire schemas for routes, forecasts and risk tiers.

Routes and forecast days are immutable snapshots: every model here is frozen
and sequences are stored as tuples. Field names are snake_case in Python and
camelCase on the wire, matching the remote service's JSON.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _SnapshotModel(BaseModel):
    """Base model for immutable payloads exchanged with the remote service."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class RiskTier(str, Enum):
    """Discrete risk tier derived from a 0-10 risk score."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Coordinate(_SnapshotModel):
    """A point on a route. Values are passed through unvalidated."""
    latitude: float
    longitude: float


class Route(_SnapshotModel):
    """A delivery path annotated with a weather-driven risk score."""
    id: str
    name: str
    description: str = ""
    risk_level: int
    weather_conditions: str = ""
    # first element is the origin, last is the destination
    coordinates: Tuple[Coordinate, ...] = Field(min_length=2)
    estimated_delivery_time: int = Field(ge=0)  # minutes
    distance: float = Field(ge=0)  # miles
    supplier: str = ""
    affected_products: Tuple[str, ...] = ()

    @property
    def start(self) -> Coordinate:
        return self.coordinates[0]

    @property
    def end(self) -> Coordinate:
        return self.coordinates[-1]


class WeatherForecastDay(_SnapshotModel):
    """One day of a chronological forecast."""
    date: str  # ISO date
    conditions: str
    temperature: int  # °F
    precipitation: float  # inches
    flood_risk: int


class WeatherSnapshot(_SnapshotModel):
    """Current weather observation returned by the remote service."""
    latitude: float
    longitude: float
    location: str | None = None
    conditions: str | None = None
    description: str | None = None
    temperature_fahrenheit: float | None = None
    humidity: float | None = None
    wind_speed_mph: float | None = None
    wind_direction: int | None = None
    precipitation_inches: float | None = None
    precipitation_probability: float | None = None
    recent_rainfall_inches: float | None = None
    flood_risk_level: int | None = None
    observation_time: datetime | None = None
    retrieval_time: datetime | None = None


class RiskAssessment(_SnapshotModel):
    """Tier, rendering color and recommendation derived from one risk score."""
    risk_level: int
    tier: RiskTier
    color: str
    recommendation: str


class RiskFactor(_SnapshotModel):
    """A weighted contributor to a composed route risk."""
    name: str
    description: str = ""
    impact_level: int
    weight: float = Field(ge=0.0, le=1.0)
