# =============================================================================
# app/routers/movie_ratings.py - Movie Rating CRUD Endpoints
# =============================================================================
# Mounted at /api/movieratings.
# GET is open; POST/PUT/DELETE need the API token (see app/auth).
# A write conflict answers 204 No Content instead of an error.
# Handlers are plain functions so SQLAlchemy calls run in FastAPI's threadpool.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Request, Response, status

from app.dependencies import MovieRatingServiceDep
from core.models import MovieRatingCreate, MovieRatingResponse, MovieRatingUpdate

router = APIRouter()

RatingId = Annotated[int, Path(description="Movie rating id")]

CONFLICT_RESPONSE = {
    status.HTTP_204_NO_CONTENT: {"description": "Write conflict; nothing returned"},
}


@router.get("", response_model=list[MovieRatingResponse])
def list_movie_ratings(service: MovieRatingServiceDep):
    """List all movie ratings."""
    return [MovieRatingResponse.model_validate(rating) for rating in service.list_all()]


@router.get("/{rating_id}", response_model=MovieRatingResponse, name="get_movie_rating")
def get_movie_rating(rating_id: RatingId, service: MovieRatingServiceDep):
    """Get a single movie rating."""
    return MovieRatingResponse.model_validate(service.get(rating_id))


@router.post(
    "",
    response_model=MovieRatingResponse,
    status_code=status.HTTP_201_CREATED,
    responses=CONFLICT_RESPONSE,
)
def create_movie_rating(
    request: Request,
    response: Response,
    service: MovieRatingServiceDep,
    rating: MovieRatingCreate | None = None,
):
    """
    Create a movie rating.

    The movieId is stored as given; it is not checked against the movies.
    """
    result = service.create(rating)
    if result.is_conflict:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    response.headers["Location"] = str(
        request.url_for("get_movie_rating", rating_id=result.record.id)
    )
    return MovieRatingResponse.model_validate(result.record)


@router.put("/{rating_id}", response_model=MovieRatingResponse, responses=CONFLICT_RESPONSE)
def update_movie_rating(
    rating_id: RatingId,
    rating: MovieRatingUpdate,
    service: MovieRatingServiceDep,
):
    """Overwrite a rating's movieId and value."""
    result = service.update(rating_id, rating)
    if result.is_conflict:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return MovieRatingResponse.model_validate(result.record)


@router.delete("/{rating_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie_rating(rating_id: RatingId, service: MovieRatingServiceDep):
    """Delete a movie rating."""
    service.delete(rating_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
