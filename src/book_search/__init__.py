from book_search.core.book_index import BookIndex
from book_search.core.errors import BookSearchError, DuplicateEntryError, ValidationError
from book_search.data.records import LineRecord, MatchRecord, validate_isbn
from book_search.engine.corpus import SearchResponse, search_corpus, validate_term

__all__ = [
    "BookIndex",
    "BookSearchError",
    "DuplicateEntryError",
    "LineRecord",
    "MatchRecord",
    "SearchResponse",
    "ValidationError",
    "search_corpus",
    "validate_isbn",
    "validate_term",
]
