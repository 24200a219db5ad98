"""Domain Types — enums shared across the catalogue layers.

Invariants:
    - All valid states encoded as Enums — no raw string matching
    - Every MessageKey has a translation for every Locale (core/language_strings.py)

Design Decisions:
    - str Enums: serialize to JSON and settings values without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

MovieId = NewType("MovieId", int)
GenreId = NewType("GenreId", int)
LanguageId = NewType("LanguageId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Locale(str, Enum):
    """Languages available for user-facing API messages."""
    EN = "en"
    PT_BR = "pt-BR"


class MessageKey(str, Enum):
    """Every user-facing message the API can return."""
    # Movies
    MOVIE_TITLE_TAKEN = "movie_title_taken"
    MOVIE_NOT_FOUND = "movie_not_found"
    MOVIE_UPDATED = "movie_updated"
    MOVIE_DELETED = "movie_deleted"
    MOVIE_LIST_FAILED = "movie_list_failed"
    MOVIE_FILTER_FAILED = "movie_filter_failed"
    MOVIE_CREATE_FAILED = "movie_create_failed"
    MOVIE_UPDATE_FAILED = "movie_update_failed"
    MOVIE_DELETE_FAILED = "movie_delete_failed"
    # Genres
    GENRE_NAME_REQUIRED = "genre_name_required"
    GENRE_NAME_TAKEN = "genre_name_taken"
    GENRE_NOT_FOUND = "genre_not_found"
    GENRE_UPDATED = "genre_updated"
    GENRE_DELETED = "genre_deleted"
    GENRE_LIST_FAILED = "genre_list_failed"
    GENRE_CREATE_FAILED = "genre_create_failed"
    GENRE_UPDATE_FAILED = "genre_update_failed"
    GENRE_DELETE_FAILED = "genre_delete_failed"
    # Languages
    LANGUAGE_LIST_FAILED = "language_list_failed"
    # Generic
    INVALID_REQUEST = "invalid_request"
    DATABASE_UNAVAILABLE = "database_unavailable"
    INTERNAL_ERROR = "internal_error"


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"
