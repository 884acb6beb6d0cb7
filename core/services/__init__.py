# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .resource_service import ResourceService
from .actor_service import ActorService
from .movie_service import MovieService
from .movie_rating_service import MovieRatingService
from .seed_service import SeedError, seed_database

__all__ = [
    "ResourceService",
    "ActorService",
    "MovieService",
    "MovieRatingService",
    "SeedError",
    "seed_database",
]
