"""Language Strings — centralized locale-specific text for API responses.

Invariants:
    - All strings are pure data (no IO)
    - Every MessageKey is covered for every Locale in the Locale enum
    - Unknown locale values fall back to EN

Design Decisions:
    - One flat table per locale keyed by MessageKey: adding a message is a
      one-line change per locale
"""

from cinecatalog.core.domain_types import Locale, MessageKey

_DEFAULT_LOCALE = Locale.EN


_MESSAGES: dict[Locale, dict[MessageKey, str]] = {
    Locale.EN: {
        MessageKey.MOVIE_TITLE_TAKEN: "A movie with this title already exists",
        MessageKey.MOVIE_NOT_FOUND: "Movie not found",
        MessageKey.MOVIE_UPDATED: "Movie updated successfully",
        MessageKey.MOVIE_DELETED: "Movie removed successfully",
        MessageKey.MOVIE_LIST_FAILED: "Failed to list movies",
        MessageKey.MOVIE_FILTER_FAILED: "Failed to filter movies",
        MessageKey.MOVIE_CREATE_FAILED: "Failed to register the movie",
        MessageKey.MOVIE_UPDATE_FAILED: "Failed to update the record",
        MessageKey.MOVIE_DELETE_FAILED: "Failed to remove the record",
        MessageKey.GENRE_NAME_REQUIRED: "Genre name is required",
        MessageKey.GENRE_NAME_TAKEN: "A genre with this name already exists",
        MessageKey.GENRE_NOT_FOUND: "Genre not found",
        MessageKey.GENRE_UPDATED: "Genre updated successfully",
        MessageKey.GENRE_DELETED: "Genre removed successfully",
        MessageKey.GENRE_LIST_FAILED: "Failed to list genres",
        MessageKey.GENRE_CREATE_FAILED: "Failed to register the genre",
        MessageKey.GENRE_UPDATE_FAILED: "Failed to update the genre",
        MessageKey.GENRE_DELETE_FAILED: "Failed to remove the genre",
        MessageKey.LANGUAGE_LIST_FAILED: "Failed to list languages",
        MessageKey.INVALID_REQUEST: "Invalid request data",
        MessageKey.DATABASE_UNAVAILABLE: "Database operation failed",
        MessageKey.INTERNAL_ERROR: "An unexpected error occurred",
    },
    Locale.PT_BR: {
        MessageKey.MOVIE_TITLE_TAKEN: "Já existe um filme com esse título",
        MessageKey.MOVIE_NOT_FOUND: "O filme não foi encontrado",
        MessageKey.MOVIE_UPDATED: "Filme atualizado com sucesso",
        MessageKey.MOVIE_DELETED: "Filme removido com sucesso",
        MessageKey.MOVIE_LIST_FAILED: "Falha ao listar os filmes",
        MessageKey.MOVIE_FILTER_FAILED: "Falha ao filtrar o filme",
        MessageKey.MOVIE_CREATE_FAILED: "Falha ao cadastrar o filme",
        MessageKey.MOVIE_UPDATE_FAILED: "Falha ao atualizar o registro",
        MessageKey.MOVIE_DELETE_FAILED: "Falha ao remover o registro",
        MessageKey.GENRE_NAME_REQUIRED: "O nome do gênero é obrigatório",
        MessageKey.GENRE_NAME_TAKEN: "Já existe um gênero com esse nome",
        MessageKey.GENRE_NOT_FOUND: "Gênero não encontrado",
        MessageKey.GENRE_UPDATED: "Gênero atualizado com sucesso",
        MessageKey.GENRE_DELETED: "Gênero removido com sucesso",
        MessageKey.GENRE_LIST_FAILED: "Falha ao listar os gêneros",
        MessageKey.GENRE_CREATE_FAILED: "Falha ao cadastrar o gênero",
        MessageKey.GENRE_UPDATE_FAILED: "Falha ao atualizar o gênero",
        MessageKey.GENRE_DELETE_FAILED: "Falha ao remover o gênero",
        MessageKey.LANGUAGE_LIST_FAILED: "Falha ao listar os idiomas",
        MessageKey.INVALID_REQUEST: "Dados da requisição inválidos",
        MessageKey.DATABASE_UNAVAILABLE: "Falha na operação com o banco de dados",
        MessageKey.INTERNAL_ERROR: "Ocorreu um erro inesperado",
    },
}


def get_message(key: MessageKey, locale: Locale | str = _DEFAULT_LOCALE) -> str:
    """Return the text for key in locale, falling back to EN."""
    try:
        locale = Locale(locale)
    except ValueError:
        locale = _DEFAULT_LOCALE
    return _MESSAGES[locale].get(key) or _MESSAGES[_DEFAULT_LOCALE][key]
