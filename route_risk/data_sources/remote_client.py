"""Async client for the remote route/weather service.

Every call makes a single attempt with a bounded timeout. Transport problems,
non-success statuses and malformed payloads are translated into the
`route_risk.errors` taxonomy so callers never see raw httpx exceptions.
"""
from __future__ import annotations

from typing import Annotated, Any, Dict, List, Mapping, Optional, TypeVar
from urllib.parse import quote

import httpx
from pydantic import Field, TypeAdapter, ValidationError

from route_risk.domain import Route, WeatherForecastDay, WeatherSnapshot
from route_risk.errors import DecodeError, ServerError, TransportError
from utils.logging_utils import get_tagged_logger, mask_url_credentials

logger = get_tagged_logger(__name__, tag="remote_client")

T = TypeVar("T")

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

ROUTES_PATH = "/routes"
CURRENT_WEATHER_PATH = "/weather/current"
FORECAST_PATH = "/weather/forecast"
FLOOD_RISK_PATH = "/weather/flood-risk"

_ROUTE_LIST = TypeAdapter(List[Route])
_ROUTE = TypeAdapter(Route)
_FORECAST = TypeAdapter(List[WeatherForecastDay])
_WEATHER = TypeAdapter(WeatherSnapshot)
_FLOOD_RISK = TypeAdapter(Annotated[int, Field(ge=0, le=10)])


def _coordinate_params(latitude: float, longitude: float) -> Dict[str, Any]:
    return {"latitude": latitude, "longitude": longitude}


class RemoteServiceClient:
    """HTTP transport for the routes and weather endpoints.

    The base address, default headers and timeout are fixed at construction.
    A fresh `httpx.AsyncClient` is opened per call so that concurrent callers
    share no connection state and an abandoned call leaves nothing to release.
    `transport` lets tests substitute an `httpx.MockTransport`.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not base_url:
            raise ValueError("Remote base address is not configured.")
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.headers = dict(DEFAULT_HEADERS if headers is None else headers)
        self._transport = transport

    def __repr__(self) -> str:
        return f"RemoteServiceClient(base_url={mask_url_credentials(self.base_url)!r}, timeout={self.timeout_seconds})"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=httpx.Timeout(self.timeout_seconds),
            transport=self._transport,
        )

    async def _get_json(
        self,
        operation: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        target: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Issue one GET and return the decoded JSON body."""
        logger.debug("Remote request", extra={"operation": operation, "path": path})
        try:
            async with self._client() as client:
                response = await client.get(path, params=params)
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"{operation}: request timed out after {self.timeout_seconds:.1f}s",
                operation=operation,
                target=target,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"{operation}: {exc}", operation=operation, target=target) from exc

        if not response.is_success:
            raise ServerError(
                f"{operation}: service answered {response.status_code}",
                operation=operation,
                status_code=response.status_code,
                target=target,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"{operation}: response is not valid JSON", operation=operation, target=target) from exc

    @staticmethod
    def _decode(adapter: TypeAdapter[T], payload: Any, *, operation: str,
                target: Optional[Mapping[str, Any]] = None) -> T:
        try:
            return adapter.validate_python(payload)
        except ValidationError as exc:
            raise DecodeError(
                f"{operation}: unexpected payload ({exc.error_count()} validation errors)",
                operation=operation,
                target=target,
            ) from exc

    async def fetch_routes(self) -> List[Route]:
        """GET /routes."""
        payload = await self._get_json("list_routes", ROUTES_PATH)
        return self._decode(_ROUTE_LIST, payload, operation="list_routes")

    async def fetch_route(self, route_id: str) -> Route:
        """GET /routes/{id}."""
        target = {"route_id": route_id}
        path = f"{ROUTES_PATH}/{quote(route_id, safe='')}"
        payload = await self._get_json("get_route", path, target=target)
        return self._decode(_ROUTE, payload, operation="get_route", target=target)

    async def fetch_current_weather(self, latitude: float, longitude: float) -> WeatherSnapshot:
        """GET /weather/current."""
        target = _coordinate_params(latitude, longitude)
        payload = await self._get_json("get_current_weather", CURRENT_WEATHER_PATH, params=target, target=target)
        return self._decode(_WEATHER, payload, operation="get_current_weather", target=target)

    async def fetch_forecast(self, latitude: float, longitude: float, days: int) -> List[WeatherForecastDay]:
        """GET /weather/forecast."""
        target = _coordinate_params(latitude, longitude)
        params = {**target, "days": days}
        payload = await self._get_json("get_forecast", FORECAST_PATH, params=params, target=target)
        return self._decode(_FORECAST, payload, operation="get_forecast", target=target)

    async def fetch_flood_risk(self, latitude: float, longitude: float) -> int:
        """GET /weather/flood-risk."""
        target = _coordinate_params(latitude, longitude)
        payload = await self._get_json("get_flood_risk", FLOOD_RISK_PATH, params=target, target=target)
        return self._decode(_FLOOD_RISK, payload, operation="get_flood_risk", target=target)
