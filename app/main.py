"""
Main entry point for FastAPI application.
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI

from app.routes import movies, producers
from app.services.movie_ingestion_service import load_movies_from_csv
from app.services.movie_service import count_movies
from app.utils.db_async import (
    DATABASE_URL,
    SessionLocal,
    describe_database_url,
    dispose_engine,
    init_db,
)

from app.logging_config import setup_logging
from app.config import settings

import logging
logger = logging.getLogger(__name__)

setup_logging(
    level=settings.log_level,
    access_log=settings.access_log,
    sql_echo=settings.sql_echo,
)

API_NAME = "Golden Raspberry Awards API"
API_VERSION = "1.0.0"


async def seed_catalog(csv_path: str) -> None:
    """Load ``csv_path`` unless the catalog already holds movies."""
    async with SessionLocal() as db:
        existing = await count_movies(db)
        if existing:
            logger.info("Catalog already holds %d movies; skipping CSV load", existing)
            return
        await load_movies_from_csv(db, csv_path)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_init_db:
        logger.info("Running init_db()…")
        logger.info("DB target: %s", describe_database_url(DATABASE_URL))
        try:
            await init_db()
            logger.info("DB ready.")
        except Exception:
            logger.exception("init_db failed")
            raise
    else:
        logger.info("Skipping init_db(); auto_init_db disabled")

    if settings.movies_csv_path:
        try:
            await seed_catalog(settings.movies_csv_path)
        except Exception:
            logger.exception("Loading %s failed", settings.movies_csv_path)
            raise

    # Hand control to the application
    yield

    try:
        logger.info("Disposing DB engine…")
        await dispose_engine()
        logger.info("DB engine disposed.")
    except Exception:
        logger.exception("Failed to dispose DB engine")


app = FastAPI(title=API_NAME, version=API_VERSION, lifespan=lifespan)
app.include_router(movies.router)
app.include_router(producers.router)


@app.get("/health")
async def health_check():
    """Health Check Endpoint"""
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.get("/")
async def api_info():
    """Describe the API and list its endpoints."""
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "description": "REST API over Golden Raspberry Awards nominees and winners",
        "endpoints": {
            "movies": {
                "GET /movies": "List every movie",
                "GET /movies?year={year}": "List movies from one year",
                "GET /movies?winner=true": "List winners only",
                "GET /movies/{id}": "Fetch one movie",
                "POST /movies": "Create a movie",
                "PUT /movies/{id}": "Replace a movie",
                "PATCH /movies/{id}": "Partially update a movie",
                "DELETE /movies/{id}": "Delete a movie",
            },
            "producers": {
                "GET /producers/awards-interval": "Shortest and longest gaps between consecutive wins",
            },
            "health": {
                "GET /health": "Service status",
            },
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
