# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by resource:
# - health.py: Health check endpoints
# - movies.py: Movies (joined listing with ratings, cast lookup)
# - actors.py: Actors
# - movie_ratings.py: Movie ratings
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import movies
from . import actors
from . import movie_ratings

__all__ = [
    "health",
    "movies",
    "actors",
    "movie_ratings",
]
