"""Factory helpers for building the repository from configuration at startup."""

from __future__ import annotations

from typing import Optional

import httpx

from route_risk import config
from route_risk.data_sources.fallback import FALLBACK_DATASET, FallbackDataset
from route_risk.data_sources.remote_client import RemoteServiceClient
from route_risk.repository import RouteWeatherRepository
from utils.logging_utils import get_tagged_logger, mask_url_credentials

logger = get_tagged_logger(__name__, tag="data_sources/factory")


def build_remote_client(
    settings: config.Settings | None = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> RemoteServiceClient:
    """Instantiate the HTTP client for the configured remote service."""
    settings = settings or config.settings
    return RemoteServiceClient(
        settings.remote_base_address,
        timeout_seconds=settings.request_timeout_seconds,
        transport=transport,
    )


def build_repository(
    settings: config.Settings | None = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    fallback: FallbackDataset = FALLBACK_DATASET,
) -> RouteWeatherRepository:
    """Instantiate the repository described by `settings`."""
    settings = settings or config.settings

    if settings.use_fallback_only:
        logger.info("Using fallback dataset only; remote calls are disabled")
        return RouteWeatherRepository(None, fallback, use_fallback_only=True)

    masked = mask_url_credentials(settings.remote_base_address)
    logger.info(
        "Using remote route/weather service",
        extra={"base_url": masked, "timeout_ms": settings.request_timeout_ms},
    )
    return RouteWeatherRepository(build_remote_client(settings, transport=transport), fallback)
