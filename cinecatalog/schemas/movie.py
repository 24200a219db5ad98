"""Movie Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - MovieCreate.title: 1-255 chars, stripped, non-empty
    - release_date accepts ISO date strings ("2019-05-30") and ISO timestamps
      ("2019-05-30T03:00:00.000Z"); timestamps keep their UTC calendar date
    - MovieUpdate: every field optional; to_changes() keeps only supplied, non-null fields
    - MovieResponse embeds genre and language objects

Design Decisions:
    - Dates parsed by Pydantic at the boundary, so services only ever see date values
"""

from datetime import date, datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cinecatalog.schemas.genre import GenreResponse
from cinecatalog.schemas.language import LanguageResponse


def _to_release_date(v):
    """Reduce an ISO timestamp to its date; anything else is left to Pydantic."""
    if isinstance(v, str) and "T" in v:
        try:
            v = datetime.fromisoformat(v.replace("Z", "+00:00"))
        except ValueError:
            return v
    if isinstance(v, datetime):
        if v.tzinfo is not None:
            v = v.astimezone(timezone.utc)
        return v.date()
    return v


def _strip_title(v: str | None) -> str | None:
    if v is None:
        return None
    v = v.strip()
    if not v:
        raise ValueError("title cannot be empty or whitespace")
    return v


class MovieCreate(BaseModel):
    """Movie creation payload."""
    title: str = Field(min_length=1, max_length=255)
    genre_id: int
    language_id: int
    oscar_count: int = Field(0, ge=0)
    release_date: date

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)

    @field_validator("release_date", mode="before")
    @classmethod
    def parse_release_date(cls, v):
        return _to_release_date(v)


class MovieUpdate(BaseModel):
    """Partial movie update — supplied fields are merged over the record."""
    title: str | None = Field(None, min_length=1, max_length=255)
    genre_id: int | None = None
    language_id: int | None = None
    oscar_count: int | None = Field(None, ge=0)
    release_date: date | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return _strip_title(v)

    @field_validator("release_date", mode="before")
    @classmethod
    def parse_release_date(cls, v):
        return _to_release_date(v)

    def to_changes(self) -> dict:
        """Fields the client actually sent, with nulls dropped."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class MovieResponse(BaseModel):
    """Public movie representation with related names embedded."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    genre_id: int
    language_id: int
    oscar_count: int
    release_date: date
    genre: GenreResponse
    language: LanguageResponse
