# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Movie API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.auth import ApiTokenMiddleware
from app.config import settings
from app.exceptions import (
    MovieApiException,
    movie_api_exception_handler,
    validation_exception_handler,
)
from app.routers import actors, health, movie_ratings, movies
from core.services import SeedError, seed_database
from lib.database import Database

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: apply pending schema changes and seed an empty database.
      A failure here propagates and aborts startup.
    - Shutdown: dispose the database engine
    """
    logger.info(f"Starting Movie API in {settings.ENVIRONMENT} mode")

    if settings.SEED_ON_STARTUP:
        try:
            seeded = seed_database(Database.get_engine(), Database.get_session_factory())
        except SeedError as e:
            logger.error(f"Startup aborted: {e.to_dict()}")
            raise
        logger.info("Seed data inserted" if seeded else "Seed skipped, data present")

    yield

    logger.info("Shutting down Movie API")
    Database.reset()


# Create FastAPI application
app = FastAPI(
    title="Movie API",
    description="""
## Movies, actors and ratings

Plain CRUD over three resources stored in SQLite.

### Authentication

Every request other than GET must send the configured token:

```
Authorization: Bearer <API_TOKEN>
```

Missing or wrong tokens get `401` with the text body `Invalid API token.`

### Write conflicts

If a record changes or disappears between being read and being written,
the write answers `204 No Content` instead of an error.

### Quick Start

```bash
curl http://localhost:8000/api/movies

curl -X POST http://localhost:8000/api/actors \\
  -H "Authorization: Bearer $API_TOKEN" \\
  -H "Content-Type: application/json" \\
  -d '{"name": "Jane Doe"}'
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Movies",
            "description": "Movies, joined with their ratings when listed",
        },
        {
            "name": "Actors",
            "description": "Actors referenced by movie actorIds",
        },
        {
            "name": "Movie Ratings",
            "description": "One rating value per movie",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================
# Starlette runs the last-added middleware first, so CORS answers preflight
# requests before the token gate sees them.

app.add_middleware(ApiTokenMiddleware, api_token=settings.API_TOKEN)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(MovieApiException)
async def handle_movie_api_exception(request: Request, exc: MovieApiException):
    """Handle custom Movie API exceptions."""
    return await movie_api_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies and path parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    movies.router,
    prefix="/api/movies",
    tags=["Movies"]
)

app.include_router(
    actors.router,
    prefix="/api/actors",
    tags=["Actors"]
)

app.include_router(
    movie_ratings.router,
    prefix="/api/movieratings",
    tags=["Movie Ratings"]
)

app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Movie API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/health",
    }
