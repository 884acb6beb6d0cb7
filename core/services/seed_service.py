# =============================================================================
# core/services/seed_service.py - Startup Data Seeding
# =============================================================================
# Runs once at process start:
# 1. Apply pending schema changes (create missing tables)
# 2. Leave the database alone if any table already has rows
# 3. Otherwise insert the fixture dataset in one commit
#
# Any failure raises SeedError, which aborts application startup.
# =============================================================================

import logging

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from core.models.tables import Actor, Movie, MovieRating
from lib.database import init_schema
from lib.store import EntityStore
from lib.utils import ApplicationError

logger = logging.getLogger(__name__)


# =============================================================================
# Fixture Data
# =============================================================================

SEED_ACTORS = [
    {"id": 1, "name": "Oksana Shalovynska"},
    {"id": 2, "name": "Jim Faulhaber"},
    {"id": 3, "name": "Farhood Sani"},
    {"id": 4, "name": "John Crane"},
    {"id": 5, "name": "Connor Wells"},
    {"id": 6, "name": "Richard Paul"},
    {"id": 7, "name": "Austin Holmes"},
    {"id": 8, "name": "Jerry Lynn"},
    {"id": 9, "name": "Freddy Blade"},
]

SEED_MOVIES = [
    {"id": 1, "title": "The Spectacular Adventures of Sam", "actors": "1,2,3"},
    {"id": 2, "title": "Journey to the Forgotten Land", "actors": "2,3,4,6,8"},
    {"id": 3, "title": "Mystery of the Hidden Treasure", "actors": "1,2"},
    {"id": 4, "title": "A Tale of Two Worlds", "actors": "4,5,8,7,6"},
    {"id": 5, "title": "Escape from Destiny's Grip", "actors": "1,3,4,8,9"},
]

# Movie 5 has no rating
SEED_RATINGS = [
    {"id": 1, "rating": 3, "movie_id": 1},
    {"id": 2, "rating": 5, "movie_id": 2},
    {"id": 3, "rating": 4, "movie_id": 3},
    {"id": 4, "rating": 1, "movie_id": 4},
]


class SeedError(ApplicationError):
    """Raised when the database cannot be prepared or seeded."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("code", "SEED_FAILED")
        kwargs.setdefault("suggestion", "Check DATABASE_URL and that the database file is writable")
        super().__init__(message, **kwargs)


def is_seeded(session: Session) -> bool:
    """Check whether any of the three tables already holds a record."""
    return any(
        EntityStore(session, model).exists()
        for model in (Movie, Actor, MovieRating)
    )


def seed_database(engine: Engine, session_factory: sessionmaker[Session]) -> bool:
    """
    Prepare the schema and insert the fixture dataset into an empty database.

    Args:
        engine: Engine used to apply pending schema changes
        session_factory: Factory for the session that writes the fixture

    Returns:
        True if the fixture was inserted, False if data already existed

    Raises:
        SeedError: If the schema or the fixture cannot be written
    """
    try:
        created = init_schema(engine)
        if created:
            logger.info(f"Created tables: {', '.join(created)}")

        with session_factory() as session:
            if is_seeded(session):
                logger.info("Database already contains data, skipping seed")
                return False

            session.add_all(Actor(**row) for row in SEED_ACTORS)
            session.add_all(Movie(**row) for row in SEED_MOVIES)
            session.add_all(MovieRating(**row) for row in SEED_RATINGS)
            session.commit()

    except ApplicationError as e:
        logger.error(f"Database preparation failed: {e}")
        raise SeedError(message=f"Database preparation failed: {e.message}", details=e.details)

    except SQLAlchemyError as e:
        logger.error(f"Failed to seed database: {e}")
        raise SeedError(message=f"Failed to seed database: {e}")

    logger.info(
        f"Seeded {len(SEED_ACTORS)} actors, {len(SEED_MOVIES)} movies "
        f"and {len(SEED_RATINGS)} ratings"
    )
    return True
