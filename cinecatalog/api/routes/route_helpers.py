"""Route Helpers — shared failure mapping and localized confirmations.

Invariants:
    - CatalogError raised inside fail_with() passes through unchanged (400/404/409)
    - Any other exception becomes OperationFailedError with the block's message key (500)
    - The original exception is logged with traceback, never returned to the client
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from cinecatalog.config import get_settings
from cinecatalog.core.domain_types import MessageKey
from cinecatalog.core.errors import CatalogError, OperationFailedError
from cinecatalog.core.language_strings import get_message
from cinecatalog.schemas.common import MessageResponse

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": MessageResponse, "description": "Invalid request"},
    404: {"model": MessageResponse, "description": "Record not found"},
    409: {"model": MessageResponse, "description": "Duplicate name"},
    500: {"model": MessageResponse, "description": "Unexpected failure"},
}


def error_responses(*codes: int) -> dict:
    """OpenAPI `responses` entry documenting the given error statuses."""
    return {code: ERROR_RESPONSES[code] for code in codes}


@contextmanager
def fail_with(message_key: MessageKey, **log_extra) -> Iterator[None]:
    """Map unexpected failures inside the block to a 500 with message_key."""
    try:
        yield
    except CatalogError:
        raise
    except Exception as e:
        logger.error(
            f"Operation {message_key.value} failed: {e}",
            exc_info=True,
            extra={"operation": message_key.value, **log_extra},
        )
        raise OperationFailedError(message_key) from e


def confirm(message_key: MessageKey) -> MessageResponse:
    return MessageResponse(
        message=get_message(message_key, get_settings().locale),
    )
