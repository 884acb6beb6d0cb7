# =============================================================================
# core/services/movie_service.py - Movie Business Logic
# =============================================================================
# Movies add two things to the shared CRUD protocol:
# - listing is a left outer join onto ratings
# - deleting a movie also deletes its first rating (see MovieStore.delete)
# =============================================================================

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.exceptions import MovieNotFoundError
from core.models.tables import Actor, Movie, MovieRating
from lib.store import MovieStore
from lib.utils import parse_actor_ids

from .resource_service import ResourceService

logger = logging.getLogger(__name__)


class MovieService(ResourceService[Movie]):
    """CRUD for movies. Updates copy the title and the actor id string."""

    resource_name = "movie"
    update_fields = ("title", "actors")
    not_found_error = MovieNotFoundError

    store: MovieStore

    def __init__(self, session: Session):
        super().__init__(MovieStore(session))

    def list_with_ratings(self) -> list[tuple[Movie, MovieRating | None]]:
        """Return (movie, rating-or-None) pairs for every movie."""
        return self.store.list_with_ratings()

    def get_cast(self, movie_id: int) -> list[Actor]:
        """
        Resolve a movie's actor id string to actor records.

        Ids that don't match an actor are skipped. Order follows the
        movie's actor list.

        Raises:
            MovieNotFoundError: If the movie doesn't exist
        """
        movie = self.get(movie_id)
        actor_ids = parse_actor_ids(movie.actors)
        if not actor_ids:
            return []

        found = {
            actor.id: actor
            for actor in self.store.session.scalars(
                select(Actor).where(Actor.id.in_(actor_ids))
            )
        }

        missing = [actor_id for actor_id in actor_ids if actor_id not in found]
        if missing:
            logger.debug(f"Movie {movie_id} lists unknown actors: {missing}")

        return [found[actor_id] for actor_id in actor_ids if actor_id in found]
