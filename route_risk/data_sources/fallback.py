"""Built-in route catalog and forecast served when the remote service is unavailable."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from route_risk.domain import Coordinate, Route, WeatherForecastDay


@dataclass(frozen=True)
class FallbackDataset:
    """Immutable catalog of routes and a forecast.

    Entries are frozen models held in tuples, so the catalog can be shared by
    every concurrent caller without copying or locking.
    """
    routes: Tuple[Route, ...]
    forecast: Tuple[WeatherForecastDay, ...]

    def find_route(self, route_id: str) -> Optional[Route]:
        """Linear scan by id; the first match wins."""
        for route in self.routes:
            if route.id == route_id:
                return route
        return None

    def list_routes(self) -> List[Route]:
        return list(self.routes)

    def forecast_for(self, days: int) -> List[WeatherForecastDay]:
        """Return up to `days` forecast days, soonest first."""
        return list(self.forecast[:max(days, 0)])


def _path(*points: Tuple[float, float]) -> Tuple[Coordinate, ...]:
    return tuple(Coordinate(latitude=lat, longitude=lon) for lat, lon in points)


# Seattle-area sample routes, one per risk tier.
FALLBACK_ROUTES: Tuple[Route, ...] = (
    Route(
        id="route1",
        name="Downtown to Capitol Hill",
        description="Urban delivery route through downtown Seattle to Capitol Hill neighborhood",
        risk_level=2,
        weather_conditions="Light rain, good visibility",
        coordinates=_path(
            (47.6062, -122.3321),  # Downtown Seattle
            (47.6104, -122.3260),
            (47.6152, -122.3214),
            (47.6195, -122.3185),
            (47.6231, -122.3142),  # Capitol Hill
        ),
        estimated_delivery_time=25,
        distance=2.3,
        supplier="Urban Greens Nursery",
        affected_products=("Potted herbs", "Decorative plants"),
    ),
    Route(
        id="route2",
        name="Ballard to Fremont",
        description="Route crossing multiple bridges with potential flooding areas",
        risk_level=6,
        weather_conditions="Moderate rain, known drainage issues",
        coordinates=_path(
            (47.6698, -122.3845),  # Ballard
            (47.6605, -122.3730),
            (47.6515, -122.3590),
            (47.6470, -122.3480),  # Fremont
        ),
        estimated_delivery_time=20,
        distance=2.1,
        supplier="Northgate Farms",
        affected_products=("Fresh produce", "Cut flowers"),
    ),
    Route(
        id="route3",
        name="South Seattle to Bellevue",
        description="Long route crossing Lake Washington with high flood risk areas",
        risk_level=8,
        weather_conditions="Heavy rainfall, possible flooding",
        coordinates=_path(
            (47.5412, -122.2714),  # South Seattle
            (47.5494, -122.2699),
            (47.5587, -122.2651),
            (47.5667, -122.2532),
            (47.5750, -122.2357),
            (47.5902, -122.2237),  # Bellevue
        ),
        estimated_delivery_time=45,
        distance=8.7,
        supplier="Eastside Organic Farms",
        affected_products=("Seasonal vegetables", "Organic fruit"),
    ),
)

FALLBACK_FORECAST: Tuple[WeatherForecastDay, ...] = (
    WeatherForecastDay(date="2025-04-17", conditions="Light Rain", temperature=52, precipitation=0.25, flood_risk=2),
    WeatherForecastDay(date="2025-04-18", conditions="Moderate Rain", temperature=48, precipitation=0.75, flood_risk=5),
    WeatherForecastDay(date="2025-04-19", conditions="Heavy Rain", temperature=45, precipitation=2.1, flood_risk=8),
    WeatherForecastDay(date="2025-04-20", conditions="Moderate Rain", temperature=47, precipitation=0.9, flood_risk=6),
    WeatherForecastDay(date="2025-04-21", conditions="Light Rain", temperature=50, precipitation=0.3, flood_risk=3),
)

FALLBACK_DATASET = FallbackDataset(routes=FALLBACK_ROUTES, forecast=FALLBACK_FORECAST)
