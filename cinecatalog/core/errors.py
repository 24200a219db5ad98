"""Error Hierarchy — typed exceptions for every catalogue failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), message key (MessageKey)
      and an HTTP status
    - Client errors are 400/404/409; everything unclassified is 500
    - to_response() produces the REST envelope {"message": ...} — no internal details

Design Decisions:
    - Single hierarchy with CatalogError base: FastAPI global handler catches all
    - Message stored as a key, resolved to text at response time so the locale
      setting applies uniformly
"""

from cinecatalog.core.domain_types import ErrorCategory, Locale, MessageKey
from cinecatalog.core.language_strings import get_message


class CatalogError(Exception):
    """Base exception for all catalogue errors."""

    def __init__(
        self,
        message_key: MessageKey,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message_key.value)
        self.message_key = message_key
        self.code = code
        self.category = category
        self.http_status = http_status

    def message(self, locale: Locale = Locale.EN) -> str:
        return get_message(self.message_key, locale)

    def to_response(self, locale: Locale = Locale.EN) -> dict:
        """Convert to the REST error body."""
        return {"message": self.message(locale)}


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingFieldError(CatalogError):
    """A required request field was absent or blank."""
    def __init__(self, field: str, message_key: MessageKey):
        super().__init__(
            message_key, "MISSING_FIELD", ErrorCategory.VALIDATION,
            400,
        )
        self.field = field


class ResourceNotFoundError(CatalogError):
    """Requested record does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int, message_key: MessageKey,
    ):
        super().__init__(
            message_key, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateResourceError(CatalogError):
    """A case-insensitive match already exists for a unique field."""
    def __init__(self, resource_type: str, value: str, message_key: MessageKey):
        super().__init__(
            message_key, "DUPLICATE_RESOURCE", ErrorCategory.CONFLICT,
            409,
        )
        self.resource_type = resource_type
        self.value = value


# ─── Server Errors (500-level) ──────────────────────────────────

class OperationFailedError(CatalogError):
    """An operation failed for an unclassified reason."""
    def __init__(self, message_key: MessageKey):
        super().__init__(
            message_key, "OPERATION_FAILED", ErrorCategory.INTERNAL,
        )


class DatabaseError(CatalogError):
    """Database operation failed outside a route's own failure handling."""
    def __init__(self, detail: str, operation: str):
        super().__init__(
            MessageKey.DATABASE_UNAVAILABLE, "DATABASE_ERROR",
            ErrorCategory.DATABASE,
        )
        self.detail = detail
        self.operation = operation
