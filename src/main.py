"""OptiFlow API - On-page HTML audit engine."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import audits_router, health_router
from config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Code before `yield` runs on startup.
    Code after `yield` runs on shutdown.
    """
    logger.info(f"Starting {settings.app_name}...")
    yield
    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title="OptiFlow API",
    description="Deterministic on-page audit of raw HTML: metrics, health score and findings.",
    version="1.2.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router, prefix="/api/v1")
app.include_router(audits_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root():
    """Point clients at the API docs."""
    return {
        "service": "OptiFlow API",
        "docs": "/docs",
        "health": "/api/v1/health",
        "audits": "/api/v1/audits",
    }
