from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from globetrotter.api import trips, users, cities, health
from globetrotter.api import calendar as calendar_api
from globetrotter.config import get_settings
from globetrotter.database import engine, Base, ensure_sqlite_dir
from globetrotter.models import User, City, Trip, Stop, Activity  # noqa: F401 - registers tables

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Starting GlobeTrotter API")

    if settings.database_url.startswith("sqlite"):
        logger.info("SQLite detected - creating tables if needed")
        ensure_sqlite_dir()
        Base.metadata.create_all(bind=engine)

    yield

    logger.info("🛑 Shutting down GlobeTrotter API")
    engine.dispose()


app = FastAPI(
    title="GlobeTrotter",
    description="Multi-city trip planning: itineraries, budgets and calendars",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

app.include_router(users.router, prefix="/users", tags=["users"])
app.include_router(trips.router, prefix="/trips", tags=["trips"])
app.include_router(calendar_api.router, prefix="/calendar", tags=["calendar"])
app.include_router(cities.router, prefix="/cities", tags=["cities"])
app.include_router(health.router, tags=["health"])


# Health check for monitoring/Docker
@app.get("/ping")
async def ping():
    """Simple ping endpoint for health checks."""
    return {"status": "ok"}
