"""Movie Routes — list, filter by genre, create, update, delete.

Invariants:
    - GET /movies is ordered by title ascending with genre and language embedded
    - POST answers 409 on a case-insensitive title match, 201 with the movie otherwise
    - PUT/DELETE answer 404 when the id does not exist
    - Unexpected failures answer 500 with a per-operation message (fail_with)
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from cinecatalog.api.routes.route_helpers import confirm, error_responses, fail_with
from cinecatalog.core.domain_types import MessageKey, MovieId
from cinecatalog.infrastructure.database import get_db
from cinecatalog.schemas.common import MessageResponse
from cinecatalog.schemas.movie import MovieCreate, MovieResponse, MovieUpdate
from cinecatalog.services.movie_service import MovieService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/movies", tags=["movies"])


@router.get(
    "", response_model=list[MovieResponse], responses=error_responses(500),
)
async def list_movies(db: AsyncSession = Depends(get_db)):
    """List every movie ordered by title."""
    with fail_with(MessageKey.MOVIE_LIST_FAILED):
        return await MovieService(db).list_movies()


@router.get(
    "/{genre_name}",
    response_model=list[MovieResponse],
    responses=error_responses(500),
)
async def list_movies_by_genre(
    genre_name: str, db: AsyncSession = Depends(get_db),
):
    """List movies whose genre name matches, ignoring case."""
    with fail_with(MessageKey.MOVIE_FILTER_FAILED):
        return await MovieService(db).list_by_genre_name(genre_name)


@router.post(
    "",
    response_model=MovieResponse,
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(400, 409, 500),
)
async def create_movie(body: MovieCreate, db: AsyncSession = Depends(get_db)):
    """Register a movie; titles are unique regardless of case."""
    with fail_with(MessageKey.MOVIE_CREATE_FAILED):
        return await MovieService(db).create(
            title=body.title,
            genre_id=body.genre_id,
            language_id=body.language_id,
            oscar_count=body.oscar_count,
            release_date=body.release_date,
        )


@router.put(
    "/{movie_id}",
    response_model=MessageResponse,
    responses=error_responses(400, 404, 500),
)
async def update_movie(
    movie_id: int, body: MovieUpdate, db: AsyncSession = Depends(get_db),
):
    """Merge the supplied fields over an existing movie."""
    with fail_with(MessageKey.MOVIE_UPDATE_FAILED, movie_id=movie_id):
        await MovieService(db).update(MovieId(movie_id), body.to_changes())
    return confirm(MessageKey.MOVIE_UPDATED)


@router.delete(
    "/{movie_id}",
    response_model=MessageResponse,
    responses=error_responses(404, 500),
)
async def delete_movie(movie_id: int, db: AsyncSession = Depends(get_db)):
    with fail_with(MessageKey.MOVIE_DELETE_FAILED, movie_id=movie_id):
        await MovieService(db).delete(MovieId(movie_id))
    return confirm(MessageKey.MOVIE_DELETED)
