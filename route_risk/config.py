"""Application configuration pulled from environment variables via pydantic."""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger, mask_url_credentials
logger = get_tagged_logger(__name__, tag="config")


class Settings(BaseSettings):
    """Environment-driven configuration for the route risk service.

    Resolved once at bootstrap and handed to the repository; nothing below
    the factory reads the environment.
    """
    model_config = SettingsConfigDict(env_prefix="ROUTE_RISK_", extra="ignore")

    remote_base_address: str = "http://localhost:8080/api"
    request_timeout_ms: int = Field(default=10000, gt=0)
    use_fallback_only: bool = False
    forecast_days: int = Field(default=5, ge=1)
    api_key: str | None = None
    log_level: str = "INFO"

    @field_validator("remote_base_address", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs to avoid double slashes."""
        return str(v).rstrip("/")

    @property
    def request_timeout_seconds(self) -> float:
        return self.request_timeout_ms / 1000.0


settings = Settings()


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    dumped = settings.model_dump()
    dumped["remote_base_address"] = mask_url_credentials(settings.remote_base_address)
    dumped["api_key"] = "***" if settings.api_key else None
    logger.debug(f"Loaded settings: {dumped}")
