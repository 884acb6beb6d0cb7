# =============================================================================
# app/routers/movies.py - Movie CRUD Endpoints
# =============================================================================
# GET is open; POST/PUT/DELETE need the API token (see app/auth).
# A write conflict answers 204 No Content instead of an error.
# Handlers are plain functions so SQLAlchemy calls run in FastAPI's threadpool.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Request, Response, status

from app.dependencies import MovieServiceDep
from core.models import (
    ActorResponse,
    MovieCast,
    MovieCreate,
    MovieRatingResponse,
    MovieResponse,
    MovieUpdate,
    MovieWithRating,
)

router = APIRouter()

MovieId = Annotated[int, Path(description="Movie id")]

CONFLICT_RESPONSE = {
    status.HTTP_204_NO_CONTENT: {"description": "Write conflict; nothing returned"},
}


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=list[MovieWithRating])
def list_movies(service: MovieServiceDep):
    """
    List all movies paired with their ratings.

    A movie with several ratings appears once per rating. A movie without
    ratings appears once with `rating: null`.
    """
    return [
        MovieWithRating(
            movie=MovieResponse.model_validate(movie),
            rating=MovieRatingResponse.model_validate(rating) if rating else None,
        )
        for movie, rating in service.list_with_ratings()
    ]


@router.get("/{movie_id}", response_model=MovieResponse, name="get_movie")
def get_movie(movie_id: MovieId, service: MovieServiceDep):
    """Get a single movie."""
    return MovieResponse.model_validate(service.get(movie_id))


@router.get("/{movie_id}/actors", response_model=MovieCast)
def get_movie_cast(movie_id: MovieId, service: MovieServiceDep):
    """
    Resolve the movie's actorIds to actor records.

    Ids that don't belong to an existing actor are left out.
    """
    actors = service.get_cast(movie_id)
    return MovieCast(
        movie_id=movie_id,
        actors=[ActorResponse.model_validate(actor) for actor in actors],
    )


@router.post(
    "",
    response_model=MovieResponse,
    status_code=status.HTTP_201_CREATED,
    responses=CONFLICT_RESPONSE,
)
def create_movie(
    request: Request,
    response: Response,
    service: MovieServiceDep,
    movie: MovieCreate | None = None,
):
    """
    Create a movie.

    Returns the stored movie with its new id and a Location header
    pointing at GET /api/movies/{id}.
    """
    result = service.create(movie)
    if result.is_conflict:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    response.headers["Location"] = str(request.url_for("get_movie", movie_id=result.record.id))
    return MovieResponse.model_validate(result.record)


@router.put("/{movie_id}", response_model=MovieResponse, responses=CONFLICT_RESPONSE)
def update_movie(movie_id: MovieId, movie: MovieUpdate, service: MovieServiceDep):
    """
    Overwrite a movie's title and actorIds.

    Other fields in the body are ignored.
    """
    result = service.update(movie_id, movie)
    if result.is_conflict:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return MovieResponse.model_validate(result.record)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie(movie_id: MovieId, service: MovieServiceDep):
    """
    Delete a movie.

    The first rating pointing at this movie is deleted with it.
    """
    service.delete(movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
