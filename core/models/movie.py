# =============================================================================
# core/models/movie.py - Movie Schemas
# =============================================================================
# These models define the API contract for movie operations:
# - MovieCreate: body of POST /api/movies
# - MovieUpdate: body of PUT /api/movies/{id} (title and actorIds are copied)
# - MovieResponse: a movie as returned to clients
# - MovieWithRating: one row of the joined movie listing
#
# The cast is kept as the comma-joined id string it is stored as
# ("actorIds": "1,2,3").
# =============================================================================

from pydantic import AliasChoices, Field

from .actor import ActorResponse
from .base import ApiModel
from .movie_rating import MovieRatingResponse


class MovieCreate(ApiModel):
    """
    Schema for creating a new movie.

    Both "actorIds" and "actors" are accepted for the cast.

    Example:
        {"title": "A Tale of Two Worlds", "actorIds": "4,5,8,7,6"}
    """

    title: str | None = Field(
        default=None,
        description="Movie title"
    )

    actors: str | None = Field(
        default=None,
        validation_alias=AliasChoices("actorIds", "actors"),
        serialization_alias="actorIds",
        description="Comma-joined actor ids, e.g. '1,2,3'"
    )


class MovieUpdate(MovieCreate):
    """Schema for overwriting a movie's title and cast."""


class MovieResponse(ApiModel):
    """
    Schema for returning movie data to clients.

    Example:
        {"id": 1, "title": "The Spectacular Adventures of Sam", "actorIds": "1,2,3"}
    """

    id: int = Field(..., description="Store-assigned movie identifier")
    title: str | None = Field(default=None, description="Movie title")
    actors: str | None = Field(
        default=None,
        validation_alias=AliasChoices("actorIds", "actors"),
        serialization_alias="actorIds",
        description="Comma-joined actor ids"
    )


class MovieWithRating(ApiModel):
    """
    One row of GET /api/movies.

    A movie with several ratings appears once per rating; a movie with
    none appears once with `rating: null`.
    """

    movie: MovieResponse
    rating: MovieRatingResponse | None = None


class MovieCast(ApiModel):
    """Response of GET /api/movies/{id}/actors."""

    movie_id: int = Field(..., description="Id of the movie")
    actors: list[ActorResponse] = Field(
        default_factory=list,
        description="Actors listed in the movie's actorIds that exist"
    )
