# =============================================================================
# core/models/movie_rating.py - Movie Rating Schemas
# =============================================================================
# These models define the API contract for rating operations:
# - MovieRatingCreate: body of POST /api/movieratings
# - MovieRatingUpdate: body of PUT /api/movieratings/{id}
# - MovieRatingResponse: a rating as returned to clients
#
# `movieId` is not checked against the movies table and `rating` has no
# declared range. Both default to 0 when omitted from the body.
# =============================================================================

from pydantic import Field

from .base import ApiModel


class MovieRatingCreate(ApiModel):
    """
    Schema for creating a new rating.

    Example:
        {"movieId": 1, "rating": 4}
    """

    movie_id: int = Field(default=0, description="Id of the rated movie")
    rating: int = Field(default=0, description="Rating value")


class MovieRatingUpdate(MovieRatingCreate):
    """Schema for overwriting a rating's movie id and value."""


class MovieRatingResponse(ApiModel):
    """
    Schema for returning rating data to clients.

    Example:
        {"id": 1, "movieId": 1, "rating": 3}
    """

    id: int = Field(..., description="Store-assigned rating identifier")
    movie_id: int = Field(..., description="Id of the rated movie")
    rating: int = Field(..., description="Rating value")
