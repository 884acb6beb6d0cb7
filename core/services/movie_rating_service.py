# =============================================================================
# core/services/movie_rating_service.py - Movie Rating Business Logic
# =============================================================================

from sqlalchemy.orm import Session

from app.exceptions import MovieRatingNotFoundError
from core.models.tables import MovieRating
from lib.store import EntityStore

from .resource_service import ResourceService


class MovieRatingService(ResourceService[MovieRating]):
    """
    CRUD for movie ratings.

    Updates copy the movie id and the rating value. Neither is validated:
    the movie may not exist and the value has no range.
    """

    resource_name = "movie rating"
    update_fields = ("movie_id", "rating")
    not_found_error = MovieRatingNotFoundError

    def __init__(self, session: Session):
        super().__init__(EntityStore(session, MovieRating))
