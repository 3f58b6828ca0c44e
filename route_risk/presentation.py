"""View models consumed by map and detail screens.

Adapters never compute tiers themselves: every color and recommendation
comes from `route_risk.risk`.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from route_risk.domain import Coordinate, RiskAssessment, RiskTier, Route, WeatherForecastDay
from route_risk.forecast_service import summarize_forecast
from route_risk.risk import classify, legend


class _ViewModel(BaseModel):
    """Base for serialized views; camelCase on the wire like the domain models."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class RouteMarkers(_ViewModel):
    """Start/end pins drawn at the ends of a route polyline."""
    start: Coordinate
    end: Coordinate


class RouteOverlay(_ViewModel):
    """A route polyline with its color already assigned."""
    route_id: str
    name: str
    polyline: Tuple[Coordinate, ...]
    color: str
    tier: RiskTier
    markers: RouteMarkers


class LegendEntry(_ViewModel):
    tier: RiskTier
    color: str


class MapView(_ViewModel):
    overlays: List[RouteOverlay]
    legend: List[LegendEntry]


class RouteSummary(_ViewModel):
    """List-view row; `route_id` is handed opaquely to the detail view."""
    route_id: str
    name: str
    description: str
    risk: RiskAssessment


class ForecastDayView(_ViewModel):
    date: str
    conditions: str
    temperature: int
    precipitation: float
    flood_risk: int
    tier: RiskTier
    color: str


class ForecastOutlookView(_ViewModel):
    peak_date: str | None
    peak_flood_risk: int | None
    peak_tier: RiskTier
    total_precipitation: float
    tier_counts: Dict[RiskTier, int]


class RouteDetail(_ViewModel):
    route: Route
    risk: RiskAssessment
    markers: RouteMarkers
    forecast: List[ForecastDayView]
    outlook: ForecastOutlookView


def route_markers(route: Route) -> RouteMarkers:
    """First and last coordinates of the route."""
    return RouteMarkers(start=route.start, end=route.end)


def build_route_overlay(route: Route) -> RouteOverlay:
    assessment = classify(route.risk_level)
    return RouteOverlay(
        route_id=route.id,
        name=route.name,
        polyline=route.coordinates,
        color=assessment.color,
        tier=assessment.tier,
        markers=route_markers(route),
    )


def build_map_view(routes: Sequence[Route]) -> MapView:
    """Overlays in the order the routes were given, plus the tier legend."""
    return MapView(
        overlays=[build_route_overlay(route) for route in routes],
        legend=[LegendEntry(**entry) for entry in legend()],
    )


def build_route_summary(route: Route) -> RouteSummary:
    return RouteSummary(
        route_id=route.id,
        name=route.name,
        description=route.description,
        risk=classify(route.risk_level),
    )


def build_route_detail(route: Route, forecast: Sequence[WeatherForecastDay]) -> RouteDetail:
    """Route risk with recommendation, plus the classified forecast."""
    outlook = summarize_forecast(forecast)
    days = [
        ForecastDayView(
            date=entry.day.date,
            conditions=entry.day.conditions,
            temperature=entry.day.temperature,
            precipitation=entry.day.precipitation,
            flood_risk=entry.day.flood_risk,
            tier=entry.tier,
            color=entry.color,
        )
        for entry in outlook.days
    ]
    return RouteDetail(
        route=route,
        risk=classify(route.risk_level),
        markers=route_markers(route),
        forecast=days,
        outlook=ForecastOutlookView(
            peak_date=outlook.peak_day.date if outlook.peak_day else None,
            peak_flood_risk=outlook.peak_flood_risk,
            peak_tier=outlook.peak_tier,
            total_precipitation=outlook.total_precipitation,
            tier_counts=outlook.tier_counts,
        ),
    )
