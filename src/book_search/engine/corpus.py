from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from book_search.core.book_index import BookIndex
from book_search.core.errors import ValidationError
from book_search.data.records import MatchRecord


logger = logging.getLogger(__name__)

_CONTROL_CHARS_RE = re.compile(r"[\u0000-\u001F\u007F-\u009F]")


@dataclass(frozen=True)
class SearchResponse:
    term: str
    matches: Tuple[MatchRecord, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "SearchTerm": self.term,
            "Results": [m.to_dict() for m in self.matches],
        }


def validate_term(term: Any) -> str:
    if not isinstance(term, str):
        raise ValidationError(f"search term must be a string, got {type(term).__name__}")
    if term == "":
        raise ValidationError("search term must be a non-empty string")
    if _CONTROL_CHARS_RE.search(term):
        raise ValidationError("search term cannot contain control characters")
    return term


def search_corpus(term: Any, books: Any) -> SearchResponse:
    """
    Search every book of a corpus for `term`.

    Books are indexed and searched one at a time, in input order; each book's
    matches stay together and in reading order. The first invalid book aborts
    the whole call, so a response always covers the full corpus.
    """
    term = validate_term(term)
    if isinstance(books, (str, bytes, Mapping)) or not isinstance(books, Iterable):
        raise ValidationError(f"books must be an iterable of book records, got {type(books).__name__}")

    matches: list[MatchRecord] = []
    n_books = 0
    for record in books:
        index = BookIndex.from_record(record)
        matches.extend(index.search(term))
        n_books += 1

    logger.debug("Searched %d books for %r: %d matches", n_books, term, len(matches))
    return SearchResponse(term=term, matches=tuple(matches))
