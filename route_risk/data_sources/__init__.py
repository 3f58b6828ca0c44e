"""Data sources backing the route/weather repository."""

from .base import RouteWeatherSource
from .fallback import FALLBACK_DATASET, FallbackDataset
from .remote_client import RemoteServiceClient

__all__ = [
    "FALLBACK_DATASET",
    "FallbackDataset",
    "RemoteServiceClient",
    "RouteWeatherSource",
]
