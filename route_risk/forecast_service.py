"""Aggregate daily forecasts and weighted risk factors into route-level risk."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from route_risk.domain import RiskFactor, RiskTier, WeatherForecastDay
from route_risk.risk import color_for, tier_for
from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="forecast_service")

MAX_RISK = 10
FLOOD_RISK_HORIZON_DAYS = 3
# inches of rain per risk point
RAINFALL_PER_RISK_POINT = 0.5

CURRENT_WEATHER_WEIGHT = 0.4
FORECAST_WEIGHT = 0.3
TERRAIN_WEIGHT = 0.3


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass
class ForecastDayRisk:
    """A forecast day with its flood-risk tier and rendering color."""
    day: WeatherForecastDay
    tier: RiskTier
    color: str


@dataclass
class ForecastOutlook:
    """Summary of a forecast: the worst day and how the days split across tiers."""
    days: List[ForecastDayRisk]
    peak_day: Optional[WeatherForecastDay]
    peak_tier: RiskTier
    total_precipitation: float
    tier_counts: Dict[RiskTier, int] = field(default_factory=dict)

    @property
    def peak_flood_risk(self) -> Optional[int]:
        return self.peak_day.flood_risk if self.peak_day else None


def classify_forecast(forecast: Sequence[WeatherForecastDay]) -> List[ForecastDayRisk]:
    """Attach tier and color to every day, keeping chronological order."""
    out: List[ForecastDayRisk] = []
    for day in forecast:
        tier = tier_for(day.flood_risk)
        out.append(ForecastDayRisk(day=day, tier=tier, color=color_for(tier)))
    return out


def summarize_forecast(forecast: Sequence[WeatherForecastDay]) -> ForecastOutlook:
    """Find the peak flood-risk day (earliest wins ties) and total the rainfall."""
    days = classify_forecast(forecast)
    peak: Optional[WeatherForecastDay] = None
    for entry in days:
        if peak is None or entry.day.flood_risk > peak.flood_risk:
            peak = entry.day

    tier_counts = {tier: 0 for tier in RiskTier}
    for entry in days:
        tier_counts[entry.tier] += 1

    outlook = ForecastOutlook(
        days=days,
        peak_day=peak,
        peak_tier=tier_for(peak.flood_risk) if peak else RiskTier.LOW,
        total_precipitation=round(sum(d.precipitation for d in forecast), 2),
        tier_counts=tier_counts,
    )
    logger.debug(
        "Summarized forecast",
        extra={"days_count": len(days), "peak_flood_risk": outlook.peak_flood_risk},
    )
    return outlook


def estimate_flood_risk(
    recent_rainfall_inches: float,
    forecast: Sequence[WeatherForecastDay],
    *,
    horizon_days: int = FLOOD_RISK_HORIZON_DAYS,
) -> int:
    """Score flood risk 0-10 from recent rain plus rain expected over the horizon.

    Every half inch of combined rainfall adds one point, capped at 10.
    """
    expected = sum(day.precipitation for day in forecast[:max(horizon_days, 0)])
    total = max(recent_rainfall_inches + expected, 0.0)
    return min(MAX_RISK, _round_half_up(total / RAINFALL_PER_RISK_POINT))


def default_route_factors(
    current_flood_risk: int,
    forecast_risk: int,
    terrain_risk: int,
    *,
    current_conditions: str = "",
) -> List[RiskFactor]:
    """Build the standard current-weather / forecast / terrain factor set."""
    return [
        RiskFactor(
            name="Current Weather",
            description=current_conditions,
            impact_level=current_flood_risk,
            weight=CURRENT_WEATHER_WEIGHT,
        ),
        RiskFactor(
            name="Weather Forecast",
            description=f"Based on precipitation forecast for next {FLOOD_RISK_HORIZON_DAYS * 24} hours",
            impact_level=forecast_risk,
            weight=FORECAST_WEIGHT,
        ),
        RiskFactor(
            name="Route Terrain",
            description="Based on elevation changes and known flood zones",
            impact_level=terrain_risk,
            weight=TERRAIN_WEIGHT,
        ),
    ]


def compose_route_risk(factors: Sequence[RiskFactor]) -> int:
    """Weighted sum of factor impacts, rounded to the nearest integer."""
    if not factors:
        return 0
    return _round_half_up(sum(f.impact_level * f.weight for f in factors))
