"""Interface for anything that can serve routes and weather for the repository."""

from __future__ import annotations

from typing import List, Protocol

from route_risk.domain import Route, WeatherForecastDay, WeatherSnapshot


class RouteWeatherSource(Protocol):
    """Async provider of routes, forecasts and flood risk.

    Implementations raise `route_risk.errors.RemoteServiceError` subclasses on
    failure; deciding what to do about a failure is the repository's job.
    """

    async def fetch_routes(self) -> List[Route]:
        """Return every route, in the order the provider lists them."""
        ...

    async def fetch_route(self, route_id: str) -> Route:
        """Return a single route by id."""
        ...

    async def fetch_current_weather(self, latitude: float, longitude: float) -> WeatherSnapshot:
        """Return the current weather observation."""
        ...

    async def fetch_forecast(self, latitude: float, longitude: float, days: int) -> List[WeatherForecastDay]:
        """Return `days` daily forecasts, soonest first."""
        ...

    async def fetch_flood_risk(self, latitude: float, longitude: float) -> int:
        """Return a 0-10 flood risk score."""
        ...
