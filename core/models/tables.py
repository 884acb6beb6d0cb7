# =============================================================================
# core/models/tables.py - ORM Tables
# =============================================================================
# SQLAlchemy mappings for the three stored record kinds:
# - Movie: title plus a comma-joined string of actor ids
# - Actor: name only
# - MovieRating: a rating value pointing at a movie id
#
# Relations are informal. There are no foreign keys; MovieRating.movie_id and
# the ids inside Movie.actors are not checked against anything.
# =============================================================================

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from lib.database import Base


class Movie(Base):
    __tablename__ = "Movies"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    title: Mapped[str | None] = mapped_column("Title", String, nullable=True)
    # Comma-joined actor ids, e.g. "1,2,3"
    actors: Mapped[str | None] = mapped_column("Actors", String, nullable=True)

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title={self.title!r})>"


class Actor(Base):
    __tablename__ = "Actors"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column("Name", String, nullable=True)

    def __repr__(self) -> str:
        return f"<Actor(id={self.id}, name={self.name!r})>"


class MovieRating(Base):
    __tablename__ = "MovieRatings"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    movie_id: Mapped[int] = mapped_column("MovieId", Integer, nullable=False)
    rating: Mapped[int] = mapped_column("Rating", Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<MovieRating(id={self.id}, movie_id={self.movie_id}, rating={self.rating})>"
