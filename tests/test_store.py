# =============================================================================
# tests/test_store.py - Entity Store Tests
# =============================================================================
# Tests for lib/store.py:
# - inserts assign ids and commit
# - update/delete of a vanished row report CONFLICT instead of raising
# - movie deletion removes exactly one matching rating
# - the joined listing pairs movies with ratings (left outer join)
# =============================================================================

from unittest.mock import patch

from sqlalchemy.orm.exc import StaleDataError

from core.models.tables import Actor, Movie, MovieRating
from lib.store import EntityStore, MovieStore, WriteOutcome, WriteResult


# =============================================================================
# WriteResult Tests
# =============================================================================

class TestWriteResult:
    """Tests for the write result variant."""

    def test_success(self):
        result = WriteResult.success("row")

        assert result.outcome == WriteOutcome.SUCCESS
        assert result.record == "row"
        assert not result.is_conflict

    def test_conflict(self):
        result = WriteResult.conflict()

        assert result.outcome == WriteOutcome.CONFLICT
        assert result.record is None
        assert result.is_conflict


# =============================================================================
# EntityStore Tests
# =============================================================================

class TestEntityStore:
    """Tests for generic CRUD on one table."""

    def test_insert_assigns_id(self, db_session):
        """Test that the store assigns sequential ids."""
        store = EntityStore(db_session, Actor)

        first = store.insert({"name": "Jane Doe"})
        second = store.insert({"name": "John Roe"})

        assert first.outcome == WriteOutcome.SUCCESS
        assert first.record.id == 1
        assert second.record.id == 2
        assert store.get(1).name == "Jane Doe"

    def test_list_and_exists(self, db_session):
        """Test listing an empty and a filled table."""
        store = EntityStore(db_session, Actor)
        assert store.list() == []
        assert not store.exists()

        store.insert({"name": "Jane Doe"})

        assert [actor.name for actor in store.list()] == ["Jane Doe"]
        assert store.exists()

    def test_get_missing_returns_none(self, db_session):
        """Test that an unknown id gives None."""
        assert EntityStore(db_session, Actor).get(99) is None

    def test_update_overwrites_given_values(self, db_session):
        """Test that update changes only the provided columns."""
        store = EntityStore(db_session, Movie)
        movie = store.insert({"title": "Old", "actors": "1,2"}).record

        result = store.update(movie.id, {"title": "New"})

        assert result.outcome == WriteOutcome.SUCCESS
        assert result.record.title == "New"
        assert result.record.actors == "1,2"

    def test_update_missing_row_is_conflict(self, db_session):
        """Test that a row vanishing before the write is a conflict."""
        store = EntityStore(db_session, Actor)

        result = store.update(42, {"name": "Ghost"})

        assert result.is_conflict
        assert store.list() == []

    def test_delete(self, db_session):
        """Test deleting an existing row."""
        store = EntityStore(db_session, Actor)
        actor = store.insert({"name": "Jane Doe"}).record

        result = store.delete(actor.id)

        assert result.outcome == WriteOutcome.SUCCESS
        assert store.get(actor.id) is None

    def test_delete_missing_row_is_conflict(self, db_session):
        """Test that deleting a vanished row is a conflict."""
        assert EntityStore(db_session, Actor).delete(42).is_conflict

    def test_stale_commit_is_conflict(self, db_session):
        """Test that StaleDataError on commit becomes a conflict."""
        store = EntityStore(db_session, Actor)

        with patch.object(db_session, "commit", side_effect=StaleDataError("stale")):
            result = store.insert({"name": "Jane Doe"})

        assert result.is_conflict
        assert store.list() == []


# =============================================================================
# MovieStore Tests
# =============================================================================

class TestMovieStore:
    """Tests for the movie-specific store behaviour."""

    def _add_ratings(self, session, *rows):
        ratings = EntityStore(session, MovieRating)
        for movie_id, value in rows:
            ratings.insert({"movie_id": movie_id, "rating": value})
        return ratings

    def test_delete_removes_first_matching_rating_only(self, db_session):
        """Test the one-rating cascade on movie deletion."""
        movies = MovieStore(db_session)
        first = movies.insert({"title": "One"}).record
        second = movies.insert({"title": "Two"}).record
        ratings = self._add_ratings(db_session, (first.id, 3), (first.id, 4), (second.id, 5))

        result = movies.delete(first.id)

        assert result.outcome == WriteOutcome.SUCCESS
        remaining = [(r.id, r.movie_id) for r in ratings.list()]
        assert remaining == [(2, first.id), (3, second.id)]

    def test_delete_without_ratings(self, db_session):
        """Test deleting a movie that has no rating."""
        movies = MovieStore(db_session)
        movie = movies.insert({"title": "Lonely"}).record

        assert movies.delete(movie.id).outcome == WriteOutcome.SUCCESS
        assert movies.get(movie.id) is None

    def test_delete_missing_movie_keeps_ratings(self, db_session):
        """Test that a conflicting delete leaves ratings alone."""
        ratings = self._add_ratings(db_session, (9, 1))

        assert MovieStore(db_session).delete(9).is_conflict
        assert len(ratings.list()) == 1

    def test_list_with_ratings_is_left_join(self, db_session):
        """Test duplication for many ratings and None for no rating."""
        movies = MovieStore(db_session)
        rated = movies.insert({"title": "Rated"}).record
        unrated = movies.insert({"title": "Unrated"}).record
        self._add_ratings(db_session, (rated.id, 2), (rated.id, 4), (77, 1))

        rows = movies.list_with_ratings()

        pairs = [(movie.id, rating.rating if rating else None) for movie, rating in rows]
        assert pairs == [(rated.id, 2), (rated.id, 4), (unrated.id, None)]

    def test_list_with_ratings_empty(self, db_session):
        """Test the join on an empty database."""
        assert MovieStore(db_session).list_with_ratings() == []
