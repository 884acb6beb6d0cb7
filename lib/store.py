# =============================================================================
# lib/store.py - Entity Store
# =============================================================================
# Explicit read-modify-write access to the movie tables.
#
# Every write commits before returning and reports a WriteResult:
# - SUCCESS: the write was applied; `record` holds the stored row
# - CONFLICT: the row changed or vanished after it was read
#
# Conflicts are not raised. Callers decide what a conflict means for them
# (the routers answer 204 No Content).
#
# Usage:
#   store = EntityStore(session, Actor)
#   result = store.update(3, {"name": "Jane Doe"})
#   if result.is_conflict:
#       ...
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from core.models.tables import Movie, MovieRating
from lib.database import Base

# Set up logging for this module
logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


# =============================================================================
# Write Results
# =============================================================================

class WriteOutcome(str, Enum):
    """Result variant of a store write."""
    SUCCESS = "success"
    CONFLICT = "conflict"


@dataclass
class WriteResult(Generic[ModelT]):
    """Outcome of a write plus the stored record when it succeeded."""
    outcome: WriteOutcome
    record: ModelT | None = None

    @classmethod
    def success(cls, record: ModelT | None = None) -> "WriteResult[ModelT]":
        return cls(outcome=WriteOutcome.SUCCESS, record=record)

    @classmethod
    def conflict(cls) -> "WriteResult[ModelT]":
        return cls(outcome=WriteOutcome.CONFLICT)

    @property
    def is_conflict(self) -> bool:
        return self.outcome == WriteOutcome.CONFLICT


# =============================================================================
# Generic Store
# =============================================================================

class EntityStore(Generic[ModelT]):
    """
    Table-backed storage for one record kind.

    Wraps a request-scoped Session. Writes are single statements keyed by
    primary key, so a row deleted by a concurrent request shows up as zero
    affected rows and is reported as a conflict.
    """

    def __init__(self, session: Session, model: type[ModelT]):
        self.session = session
        self.model = model

    @property
    def name(self) -> str:
        return self.model.__tablename__

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list(self) -> list[ModelT]:
        """Return every record in store order."""
        return list(self.session.scalars(select(self.model)).all())

    def get(self, record_id: int) -> ModelT | None:
        """Return the record with this id, or None."""
        return self.session.get(self.model, record_id)

    def exists(self) -> bool:
        """Check whether the table holds at least one record."""
        return self.session.scalars(select(self.model.id).limit(1)).first() is not None

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def insert(self, values: dict[str, Any]) -> WriteResult[ModelT]:
        """Persist a new record; the store assigns its id."""
        record = self.model(**values)
        self.session.add(record)

        if not self._commit():
            return WriteResult.conflict()

        logger.info(f"Inserted {self.name} record {record.id}")
        return WriteResult.success(record)

    def update(self, record_id: int, values: dict[str, Any]) -> WriteResult[ModelT]:
        """Overwrite `values` on the record with this id."""
        result = self.session.execute(
            update(self.model)
            .where(self.model.id == record_id)
            .values(**values)
        )

        if result.rowcount == 0:
            return self._conflict("update", record_id)

        if not self._commit():
            return WriteResult.conflict()

        record = self.session.get(self.model, record_id, populate_existing=True)
        logger.info(f"Updated {self.name} record {record_id}")
        return WriteResult.success(record)

    def delete(self, record_id: int) -> WriteResult[ModelT]:
        """Remove the record with this id."""
        if not self._delete_row(record_id):
            return self._conflict("delete", record_id)

        if not self._commit():
            return WriteResult.conflict()

        logger.info(f"Deleted {self.name} record {record_id}")
        return WriteResult.success()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _delete_row(self, record_id: int) -> bool:
        result = self.session.execute(
            delete(self.model).where(self.model.id == record_id)
        )
        return result.rowcount > 0

    def _commit(self) -> bool:
        try:
            self.session.commit()
            return True
        except StaleDataError as e:
            self.session.rollback()
            logger.warning(f"Write conflict on {self.name}: {e}")
            return False

    def _conflict(self, operation: str, record_id: int) -> WriteResult[ModelT]:
        self.session.rollback()
        logger.warning(f"Write conflict on {self.name}: {operation} of {record_id} affected no rows")
        return WriteResult.conflict()


# =============================================================================
# Movie Store
# =============================================================================

class MovieStore(EntityStore[Movie]):
    """Movie storage with the rating cascade and the joined listing."""

    def __init__(self, session: Session):
        super().__init__(session, Movie)

    def delete(self, record_id: int) -> WriteResult[Movie]:
        """
        Remove a movie and the first rating that points at it.

        Both deletes go out in one commit. Any further ratings for the
        same movie are left in place.
        """
        if not self._delete_row(record_id):
            return self._conflict("delete", record_id)

        rating = self.session.scalars(
            select(MovieRating)
            .where(MovieRating.movie_id == record_id)
            .order_by(MovieRating.id)
            .limit(1)
        ).first()
        if rating is not None:
            self.session.delete(rating)

        if not self._commit():
            return WriteResult.conflict()

        if rating is not None:
            logger.info(f"Deleted movie {record_id} and rating {rating.id}")
        else:
            logger.info(f"Deleted movie {record_id}")
        return WriteResult.success()

    def list_with_ratings(self) -> list[tuple[Movie, MovieRating | None]]:
        """
        Left outer join of movies to their ratings.

        One row per (movie, rating) match; movies without ratings appear
        once with None in the rating slot.
        """
        rows = self.session.execute(
            select(Movie, MovieRating)
            .outerjoin(MovieRating, MovieRating.movie_id == Movie.id)
            .order_by(Movie.id, MovieRating.id)
        )
        return [(movie, rating) for movie, rating in rows]
