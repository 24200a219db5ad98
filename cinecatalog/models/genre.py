"""Genre ORM — a movie classification that can be created, renamed and removed.

Invariants:
    - name is non-nullable
    - name is expected unique case-insensitively (checked by services, not the schema)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from cinecatalog.db.base import Base


class Genre(Base):
    """Genre entity."""
    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, name='{self.name}')>"
