"""Movie Service — ORM queries and pre-write checks for the movie routes.

Invariants:
    - list_movies / list_by_genre_name order by title ascending
    - Title uniqueness compared with lower() on both sides (case-insensitive)
    - create/update/delete commit their own transaction
    - Returned movies always have genre and language loaded

Design Decisions:
    - Uniqueness and existence are read-before-write checks, not atomic:
      concurrent requests can both pass the duplicate check
    - The title duplicate check runs on create only; update merges fields as sent
    - Re-select after writes with populate_existing: refreshes relationships
      when genre_id/language_id change
"""

import logging
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cinecatalog.core.domain_types import MessageKey, MovieId
from cinecatalog.core.errors import DuplicateResourceError, ResourceNotFoundError
from cinecatalog.models.genre import Genre
from cinecatalog.models.movie import Movie

logger = logging.getLogger(__name__)


class MovieService:
    """Movie persistence operations bound to one request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_movies(self) -> list[Movie]:
        result = await self.db.execute(select(Movie).order_by(Movie.title.asc()))
        return list(result.scalars().all())

    async def list_by_genre_name(self, genre_name: str) -> list[Movie]:
        """Movies whose genre name matches genre_name, ignoring case."""
        result = await self.db.execute(
            select(Movie)
            .join(Movie.genre)
            .where(func.lower(Genre.name) == func.lower(genre_name))
            .order_by(Movie.title.asc())
        )
        return list(result.scalars().all())

    async def find_by_title(self, title: str) -> Movie | None:
        result = await self.db.execute(
            select(Movie)
            .where(func.lower(Movie.title) == func.lower(title))
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get_or_404(self, movie_id: MovieId) -> Movie:
        result = await self.db.execute(
            select(Movie)
            .where(Movie.id == movie_id)
            .execution_options(populate_existing=True)
        )
        movie = result.scalar_one_or_none()
        if not movie:
            raise ResourceNotFoundError(
                "Movie", movie_id, MessageKey.MOVIE_NOT_FOUND,
            )
        return movie

    async def create(
        self,
        title: str,
        genre_id: int,
        language_id: int,
        oscar_count: int,
        release_date: date,
    ) -> Movie:
        """Insert a movie unless its title is already taken."""
        if await self.find_by_title(title):
            raise DuplicateResourceError(
                "Movie", title, MessageKey.MOVIE_TITLE_TAKEN,
            )
        movie = Movie(
            title=title,
            genre_id=genre_id,
            language_id=language_id,
            oscar_count=oscar_count,
            release_date=release_date,
        )
        self.db.add(movie)
        await self.db.commit()
        logger.info(f"Movie {movie.id} created", extra={"movie_id": movie.id})
        return await self.get_or_404(MovieId(movie.id))

    async def update(self, movie_id: MovieId, changes: dict) -> Movie:
        """Merge changes over an existing movie."""
        movie = await self.get_or_404(movie_id)
        for field, value in changes.items():
            if hasattr(movie, field):
                setattr(movie, field, value)
        await self.db.commit()
        logger.info(
            f"Movie {movie_id} updated ({', '.join(sorted(changes)) or 'no fields'})",
            extra={"movie_id": movie_id},
        )
        return await self.get_or_404(movie_id)

    async def delete(self, movie_id: MovieId) -> None:
        movie = await self.get_or_404(movie_id)
        await self.db.delete(movie)
        await self.db.commit()
        logger.info(f"Movie {movie_id} deleted", extra={"movie_id": movie_id})
