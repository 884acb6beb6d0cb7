# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Each request gets its own SQLAlchemy session, closed after the response.
# =============================================================================

from typing import Annotated, Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from core.services import ActorService, MovieRatingService, MovieService
from lib.database import Database


def get_db_session() -> Iterator[Session]:
    """
    Open a request-scoped database session.

    Tests override this dependency to point at an isolated database.
    """
    session = Database.get_session_factory()()
    try:
        yield session
    finally:
        session.close()


# Type alias for dependency injection
DbSessionDep = Annotated[Session, Depends(get_db_session)]


def get_movie_service(session: DbSessionDep) -> MovieService:
    return MovieService(session)


def get_actor_service(session: DbSessionDep) -> ActorService:
    return ActorService(session)


def get_movie_rating_service(session: DbSessionDep) -> MovieRatingService:
    return MovieRatingService(session)


MovieServiceDep = Annotated[MovieService, Depends(get_movie_service)]
ActorServiceDep = Annotated[ActorService, Depends(get_actor_service)]
MovieRatingServiceDep = Annotated[MovieRatingService, Depends(get_movie_rating_service)]
