"""Genre Schemas — create/update payloads and the public representation.

Invariants:
    - name is stripped; blank names become None so the route can answer 400
      with the genre-specific message instead of a generic validation error
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenreWrite(BaseModel):
    """Payload for POST /genres and PUT /genres/{id}."""
    name: str | None = Field(None, max_length=100)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


class GenreResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
