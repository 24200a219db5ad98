"""Genre Service — ORM queries and pre-write checks for the genre routes.

Invariants:
    - list_genres orders by name ascending
    - A missing/blank name is rejected before any query runs
    - Name uniqueness is case-insensitive; on update the genre's own row is excluded,
      so changing only the case of a name is allowed

Design Decisions:
    - Same read-before-write pattern as MovieService (not atomic)
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cinecatalog.core.domain_types import GenreId, MessageKey
from cinecatalog.core.errors import (
    DuplicateResourceError, MissingFieldError, ResourceNotFoundError,
)
from cinecatalog.models.genre import Genre

logger = logging.getLogger(__name__)


def _require_name(name: str | None) -> str:
    if not name:
        raise MissingFieldError("name", MessageKey.GENRE_NAME_REQUIRED)
    return name


class GenreService:
    """Genre persistence operations bound to one request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_genres(self) -> list[Genre]:
        result = await self.db.execute(select(Genre).order_by(Genre.name.asc()))
        return list(result.scalars().all())

    async def find_by_name(
        self, name: str, exclude_id: GenreId | None = None,
    ) -> Genre | None:
        query = select(Genre).where(func.lower(Genre.name) == func.lower(name))
        if exclude_id is not None:
            query = query.where(Genre.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def get_or_404(self, genre_id: GenreId) -> Genre:
        genre = await self.db.get(Genre, genre_id)
        if not genre:
            raise ResourceNotFoundError(
                "Genre", genre_id, MessageKey.GENRE_NOT_FOUND,
            )
        return genre

    async def create(self, name: str | None) -> Genre:
        name = _require_name(name)
        if await self.find_by_name(name):
            raise DuplicateResourceError(
                "Genre", name, MessageKey.GENRE_NAME_TAKEN,
            )
        genre = Genre(name=name)
        self.db.add(genre)
        await self.db.commit()
        await self.db.refresh(genre)
        logger.info(f"Genre {genre.id} created", extra={"genre_id": genre.id})
        return genre

    async def update(self, genre_id: GenreId, name: str | None) -> Genre:
        """Rename a genre. Existence is checked before the name."""
        genre = await self.get_or_404(genre_id)
        name = _require_name(name)
        if await self.find_by_name(name, exclude_id=genre_id):
            raise DuplicateResourceError(
                "Genre", name, MessageKey.GENRE_NAME_TAKEN,
            )
        genre.name = name
        await self.db.commit()
        await self.db.refresh(genre)
        logger.info(f"Genre {genre_id} renamed", extra={"genre_id": genre_id})
        return genre

    async def delete(self, genre_id: GenreId) -> None:
        genre = await self.get_or_404(genre_id)
        await self.db.delete(genre)
        await self.db.commit()
        logger.info(f"Genre {genre_id} deleted", extra={"genre_id": genre_id})
