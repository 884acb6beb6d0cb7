# =============================================================================
# core/models/ - Data Models
# =============================================================================
# This package contains:
# - tables.py: SQLAlchemy ORM tables (Movies, Actors, MovieRatings)
# - movie.py, actor.py, movie_rating.py: Pydantic request/response schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .actor import ActorCreate, ActorResponse, ActorUpdate
from .movie import MovieCast, MovieCreate, MovieResponse, MovieUpdate, MovieWithRating
from .movie_rating import MovieRatingCreate, MovieRatingResponse, MovieRatingUpdate
from .tables import Actor, Movie, MovieRating

__all__ = [
    # Actor
    "ActorCreate",
    "ActorResponse",
    "ActorUpdate",
    # Movie
    "MovieCast",
    "MovieCreate",
    "MovieResponse",
    "MovieUpdate",
    "MovieWithRating",
    # Movie rating
    "MovieRatingCreate",
    "MovieRatingResponse",
    "MovieRatingUpdate",
    # ORM tables
    "Actor",
    "Movie",
    "MovieRating",
]
