"""Language ORM — read-only reference table for a movie's spoken language."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from cinecatalog.db.base import Base


class Language(Base):
    """Language entity."""
    __tablename__ = "languages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<Language(id={self.id}, name='{self.name}')>"
