from __future__ import annotations


class BookSearchError(Exception):
    """Base class for errors raised by book_search."""


class ValidationError(BookSearchError, ValueError):
    """Malformed title, ISBN, search term, content shape or corpus file."""


class DuplicateEntryError(BookSearchError, ValueError):
    """Two content entries of one book share a (page, line) coordinate."""

    def __init__(self, page: int, line: int) -> None:
        super().__init__(f"Duplicate text entry on page #{page}, line #{line}")
        self.page = page
        self.line = line
