import os

import uvicorn

from route_risk.config import settings
from utils.logging_utils import get_tagged_logger, mask_url_credentials, setup_logging

logger = get_tagged_logger(__name__, tag="server")


if __name__ == "__main__":
    setup_logging(level=settings.log_level, job_name="route_risk")
    if settings.use_fallback_only:
        logger.info("Starting in fallback-only mode (ROUTE_RISK_USE_FALLBACK_ONLY=true)")
    else:
        logger.info(f"Remote service: {mask_url_credentials(settings.remote_base_address)}")

    uvicorn.run(
        "route_risk.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", 8000)),
        reload=False,
    )
