"""FastAPI application setup for the route risk service."""

from fastapi import FastAPI

from .api import router as api_router
from .config import settings

app = FastAPI(title="Route Risk Service")


@app.get("/health")
def health():
    """Liveness probe; reports whether remote calls are enabled."""
    return {"status": "ok", "fallback_only": settings.use_fallback_only}


# API routes
app.include_router(api_router, prefix="/v1")
