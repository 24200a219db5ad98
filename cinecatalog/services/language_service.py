"""Language Service — read-only queries for the language reference table."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinecatalog.models.language import Language


class LanguageService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_languages(self) -> list[Language]:
        result = await self.db.execute(
            select(Language).order_by(Language.name.asc()),
        )
        return list(result.scalars().all())
