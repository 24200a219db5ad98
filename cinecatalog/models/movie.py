"""Movie ORM — the catalogue's main entity.

Invariants:
    - title is non-nullable and expected unique case-insensitively
      (read-before-write check in services/movie_service.py, not atomic)
    - genre_id and language_id are foreign keys; the database rejects dangling ids
      (SQLite included, see infrastructure/database.py)
    - oscar_count defaults to 0

Design Decisions:
    - genre/language loaded with selectin: every movie response embeds both,
      and async sessions cannot lazy-load on attribute access
"""

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinecatalog.db.base import Base


class Movie(Base):
    """Movie entity — belongs to one Genre and one Language."""
    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    genre_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("genres.id"), nullable=False,
    )
    language_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("languages.id"), nullable=False,
    )
    oscar_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    release_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Relationships
    genre: Mapped["Genre"] = relationship("Genre", lazy="selectin")
    language: Mapped["Language"] = relationship("Language", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}')>"
