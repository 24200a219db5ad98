"""Genre Routes — list, create, rename, delete.

Invariants:
    - GET /genres is ordered by name ascending
    - POST/PUT answer 400 when name is missing or blank, 409 on a case-insensitive duplicate
    - PUT/DELETE answer 404 when the id does not exist
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cinecatalog.api.routes.route_helpers import confirm, error_responses, fail_with
from cinecatalog.core.domain_types import GenreId, MessageKey
from cinecatalog.infrastructure.database import get_db
from cinecatalog.schemas.common import MessageResponse
from cinecatalog.schemas.genre import GenreResponse, GenreWrite
from cinecatalog.services.genre_service import GenreService

router = APIRouter(prefix="/genres", tags=["genres"])


@router.get(
    "", response_model=list[GenreResponse], responses=error_responses(500),
)
async def list_genres(db: AsyncSession = Depends(get_db)):
    with fail_with(MessageKey.GENRE_LIST_FAILED):
        return await GenreService(db).list_genres()


@router.post(
    "",
    response_model=GenreResponse,
    responses=error_responses(400, 409, 500),
)
async def create_genre(body: GenreWrite, db: AsyncSession = Depends(get_db)):
    """Register a genre; names are unique regardless of case."""
    with fail_with(MessageKey.GENRE_CREATE_FAILED):
        return await GenreService(db).create(body.name)


@router.put(
    "/{genre_id}",
    response_model=MessageResponse,
    responses=error_responses(400, 404, 409, 500),
)
async def update_genre(
    genre_id: int, body: GenreWrite, db: AsyncSession = Depends(get_db),
):
    with fail_with(MessageKey.GENRE_UPDATE_FAILED, genre_id=genre_id):
        await GenreService(db).update(GenreId(genre_id), body.name)
    return confirm(MessageKey.GENRE_UPDATED)


@router.delete(
    "/{genre_id}",
    response_model=MessageResponse,
    responses=error_responses(404, 500),
)
async def delete_genre(genre_id: int, db: AsyncSession = Depends(get_db)):
    with fail_with(MessageKey.GENRE_DELETE_FAILED, genre_id=genre_id):
        await GenreService(db).delete(GenreId(genre_id))
    return confirm(MessageKey.GENRE_DELETED)
