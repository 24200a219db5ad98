"""Language Routes — read-only listing of the language reference table."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cinecatalog.api.routes.route_helpers import error_responses, fail_with
from cinecatalog.core.domain_types import MessageKey
from cinecatalog.infrastructure.database import get_db
from cinecatalog.schemas.language import LanguageResponse
from cinecatalog.services.language_service import LanguageService

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get(
    "", response_model=list[LanguageResponse], responses=error_responses(500),
)
async def list_languages(db: AsyncSession = Depends(get_db)):
    """List languages ordered by name."""
    with fail_with(MessageKey.LANGUAGE_LIST_FAILED):
        return await LanguageService(db).list_languages()
