"""Resilient access to routes and weather with per-operation failure policies.

Each repository operation carries one explicit policy tag:

- ``OpenToFallback``: failures are logged and the fallback dataset answers.
  Route reads use this so map and detail views always have something to show.
- ``ClosedPropagate``: failures are logged and re-raised unchanged. Weather
  and forecast reads use this because silently showing stale numbers is worse
  than showing an error.
- ``DefaultValue(v)``: failures are logged and ``v`` is returned. Flood risk
  uses ``DefaultValue(5)``, a moderate placeholder.

With ``use_fallback_only`` the remote source is never called.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Mapping, Optional, TypeVar

from route_risk.data_sources.base import RouteWeatherSource
from route_risk.data_sources.fallback import FALLBACK_DATASET, FallbackDataset
from route_risk.domain import Route, WeatherForecastDay, WeatherSnapshot
from route_risk.errors import RemoteDisabledError, RemoteServiceError
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="repository")

T = TypeVar("T")

DEFAULT_FORECAST_DAYS = 5
DEFAULT_FLOOD_RISK = 5


@dataclass(frozen=True)
class OpenToFallback:
    """Hide the failure and answer from the fallback dataset."""


@dataclass(frozen=True)
class ClosedPropagate:
    """Surface the failure to the caller."""


@dataclass(frozen=True)
class DefaultValue:
    """Hide the failure and answer with a fixed value."""
    value: Any


FailurePolicy = OpenToFallback | ClosedPropagate | DefaultValue

LIST_ROUTES_POLICY = OpenToFallback()
GET_ROUTE_POLICY = OpenToFallback()
CURRENT_WEATHER_POLICY = ClosedPropagate()
FORECAST_POLICY = ClosedPropagate()
FLOOD_RISK_POLICY = DefaultValue(DEFAULT_FLOOD_RISK)


class RouteWeatherRepository:
    """Fetch routes and weather, deciding per operation how to survive failures.

    Callers never learn whether a response came from the remote service or the
    fallback dataset. Calls are independent: no caching, no coalescing of
    identical in-flight requests and no retries.
    """

    def __init__(
        self,
        source: Optional[RouteWeatherSource],
        fallback: FallbackDataset = FALLBACK_DATASET,
        *,
        use_fallback_only: bool = False,
    ) -> None:
        if source is None and not use_fallback_only:
            raise ValueError("A remote source is required unless use_fallback_only is enabled")
        self._source = source
        self._fallback = fallback
        self.use_fallback_only = use_fallback_only

    @property
    def fallback(self) -> FallbackDataset:
        return self._fallback

    async def _execute(
        self,
        operation: str,
        policy: FailurePolicy,
        remote_call: Callable[[RouteWeatherSource], Awaitable[T]],
        *,
        target: Optional[Mapping[str, Any]] = None,
        fallback: Optional[Callable[[], T]] = None,
    ) -> T:
        """Run one remote call under `policy`.

        `fallback` answers for ``OpenToFallback`` operations, and also serves
        ``ClosedPropagate`` operations when remote access is disabled.
        """
        context = {"operation": operation, **(target or {})}

        if self.use_fallback_only:
            return self._answer_offline(operation, policy, fallback, context)

        try:
            return await remote_call(self._source)
        except RemoteServiceError as exc:
            if isinstance(policy, ClosedPropagate):
                logger.error("%s failed for %s: %s", operation, target or "-", exc, extra=exc.log_context())
                raise
            logger.warning(
                "%s failed for %s; %s: %s",
                operation,
                target or "-",
                "serving fallback data" if isinstance(policy, OpenToFallback) else "using default value",
                exc,
                extra=exc.log_context(),
            )
            return self._recover(policy, fallback)

    @staticmethod
    def _recover(policy: FailurePolicy, fallback: Optional[Callable[[], T]]) -> T:
        if isinstance(policy, DefaultValue):
            return policy.value
        if fallback is None:
            raise TypeError("OpenToFallback operations need a fallback callable")
        return fallback()

    def _answer_offline(
        self,
        operation: str,
        policy: FailurePolicy,
        fallback: Optional[Callable[[], T]],
        context: Mapping[str, Any],
    ) -> T:
        logger.debug("Remote access disabled; answering locally", extra=dict(context))
        if isinstance(policy, DefaultValue):
            return policy.value
        if fallback is not None:
            return fallback()
        exc = RemoteDisabledError(
            f"{operation}: remote access is disabled and no fallback data exists",
            operation=operation,
            target={k: v for k, v in context.items() if k != "operation"},
        )
        logger.error("%s", exc, extra=exc.log_context())
        raise exc

    async def list_routes(self) -> List[Route]:
        """Return all routes; never raises."""
        return await self._execute(
            "list_routes",
            LIST_ROUTES_POLICY,
            lambda source: source.fetch_routes(),
            fallback=self._fallback.list_routes,
        )

    async def get_route(self, route_id: str) -> Optional[Route]:
        """Return the route with `route_id`, or None when no source knows it; never raises."""
        return await self._execute(
            "get_route",
            GET_ROUTE_POLICY,
            lambda source: source.fetch_route(route_id),
            target={"route_id": route_id},
            fallback=lambda: self._fallback.find_route(route_id),
        )

    async def get_current_weather(self, latitude: float, longitude: float) -> WeatherSnapshot:
        """Return current weather; remote failures propagate."""
        return await self._execute(
            "get_current_weather",
            CURRENT_WEATHER_POLICY,
            lambda source: source.fetch_current_weather(latitude, longitude),
            target={"latitude": latitude, "longitude": longitude},
        )

    async def get_forecast(
        self,
        latitude: float,
        longitude: float,
        days: int = DEFAULT_FORECAST_DAYS,
    ) -> List[WeatherForecastDay]:
        """Return a chronological forecast; remote failures propagate."""
        return await self._execute(
            "get_forecast",
            FORECAST_POLICY,
            lambda source: source.fetch_forecast(latitude, longitude, days),
            target={"latitude": latitude, "longitude": longitude, "days": days},
            fallback=lambda: self._fallback.forecast_for(days),
        )

    async def get_flood_risk(self, latitude: float, longitude: float) -> int:
        """Return a 0-10 flood risk, or 5 when the service cannot answer; never raises."""
        return await self._execute(
            "get_flood_risk",
            FLOOD_RISK_POLICY,
            lambda source: source.fetch_flood_risk(latitude, longitude),
            target={"latitude": latitude, "longitude": longitude},
        )
