"""HTTP API serving classified routes, forecasts and map overlays."""

import hmac
from typing import List

from fastapi import APIRouter, Depends, Header, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .config import settings
from .data_sources.factory import build_repository
from .domain import RiskAssessment, RiskTier, Route, WeatherForecastDay, WeatherSnapshot
from .errors import RemoteServiceError
from .presentation import (
    MapView,
    RouteDetail,
    RouteSummary,
    build_map_view,
    build_route_detail,
    build_route_summary,
)
from .repository import RouteWeatherRepository
from .risk import classify
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="route_risk/api")


def require_api_key(x_api_key: str | None = Header(default=None)):
    """Validate the X-API-Key header against the configured static key."""
    if not settings.api_key:
        logger.debug("No API key configured; allowing all requests")
        return

    if not x_api_key:
        logger.debug("No API key provided")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing API key")

    if hmac.compare_digest(str(x_api_key), str(settings.api_key)):
        return

    logger.debug("Invalid API key provided")
    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")


router = APIRouter(dependencies=[Depends(require_api_key)])
REPOSITORY = build_repository(settings)


def get_repository() -> RouteWeatherRepository:
    """Process-wide repository; overridden in tests."""
    return REPOSITORY


class FloodRiskResponse(BaseModel):
    """Flood risk score with its tier and color."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    latitude: float
    longitude: float
    flood_risk: int
    tier: RiskTier
    color: str


def _bad_gateway(exc: RemoteServiceError) -> HTTPException:
    """Translate a propagated remote failure into a 502."""
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))


async def _require_route(repository: RouteWeatherRepository, route_id: str) -> Route:
    route = await repository.get_route(route_id)
    if route is None:
        raise HTTPException(status_code=404, detail=f"Unknown route '{route_id}'")
    return route


@router.get("/routes", response_model=List[RouteSummary])
async def list_routes(repository: RouteWeatherRepository = Depends(get_repository)):
    """List routes with their risk tier and recommendation."""
    routes = await repository.list_routes()
    logger.info("Listing routes", extra={"routes_count": len(routes)})
    return [build_route_summary(route) for route in routes]


@router.get("/routes/{route_id}", response_model=Route)
async def get_route(route_id: str, repository: RouteWeatherRepository = Depends(get_repository)):
    """Return a single route snapshot."""
    return await _require_route(repository, route_id)


@router.get("/routes/{route_id}/detail", response_model=RouteDetail)
async def get_route_detail(
    route_id: str,
    days: int = Query(default=settings.forecast_days, ge=1, le=16),
    repository: RouteWeatherRepository = Depends(get_repository),
):
    """Route risk plus the forecast at the route's origin."""
    route = await _require_route(repository, route_id)
    try:
        forecast = await repository.get_forecast(route.start.latitude, route.start.longitude, days)
    except RemoteServiceError as exc:
        raise _bad_gateway(exc)
    return build_route_detail(route, forecast)


@router.get("/map", response_model=MapView)
async def get_map(repository: RouteWeatherRepository = Depends(get_repository)):
    """Colored route overlays and the tier legend."""
    routes = await repository.list_routes()
    return build_map_view(routes)


@router.get("/weather/current", response_model=WeatherSnapshot)
async def get_current_weather(
    latitude: float,
    longitude: float,
    repository: RouteWeatherRepository = Depends(get_repository),
):
    """Current weather at a coordinate; remote failures surface as 502."""
    try:
        return await repository.get_current_weather(latitude, longitude)
    except RemoteServiceError as exc:
        raise _bad_gateway(exc)


@router.get("/weather/forecast", response_model=List[WeatherForecastDay])
async def get_forecast(
    latitude: float,
    longitude: float,
    days: int = Query(default=settings.forecast_days, ge=1, le=16),
    repository: RouteWeatherRepository = Depends(get_repository),
):
    """Daily forecast at a coordinate; remote failures surface as 502."""
    try:
        return await repository.get_forecast(latitude, longitude, days)
    except RemoteServiceError as exc:
        raise _bad_gateway(exc)


@router.get("/weather/flood-risk", response_model=FloodRiskResponse)
async def get_flood_risk(
    latitude: float,
    longitude: float,
    repository: RouteWeatherRepository = Depends(get_repository),
):
    """Flood risk at a coordinate, classified for color-coding."""
    flood_risk = await repository.get_flood_risk(latitude, longitude)
    assessment = classify(flood_risk)
    return FloodRiskResponse(
        latitude=latitude,
        longitude=longitude,
        flood_risk=flood_risk,
        tier=assessment.tier,
        color=assessment.color,
    )


@router.get("/risk/{level}", response_model=RiskAssessment)
def classify_level(level: int):
    """Classify an arbitrary risk score."""
    return classify(level)
