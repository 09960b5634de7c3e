from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Dict, Iterator, List, Optional, Tuple

from book_search.core.errors import DuplicateEntryError, ValidationError
from book_search.core.matcher import MatchKind, match_line
from book_search.data.records import LineRecord, MatchRecord, same_position, validate_isbn
from book_search.utils.coordinate import Coordinate


logger = logging.getLogger(__name__)


def _content_entries(content: Any) -> Sequence[Any]:
    if isinstance(content, (str, bytes)) or not isinstance(content, Sequence):
        raise ValidationError(
            f"Content must be a sequence of line entries, got {type(content).__name__}"
        )
    return content


def _line_from_entry(entry: Any) -> LineRecord:
    if not isinstance(entry, Mapping):
        raise ValidationError(f"Content entry must be a mapping, got {type(entry).__name__}")
    return LineRecord.from_raw(entry.get("Page"), entry.get("Line"), entry.get("Text"))


class BookIndex:
    """
    Sparse page -> line -> LineRecord table for one scanned book.

    Pages and lines need not be contiguous or start at 1; absent lines are
    absent keys. Content entries may arrive in any order, the table is always
    walked in ascending (page, line) order.
    """

    def __init__(self, title: Any, isbn: Any, content: Any) -> None:
        if not isinstance(title, str) or title == "":
            raise ValidationError("title must be a non-empty string")
        if not validate_isbn(isbn):
            raise ValidationError(f"Invalid ISBN value {isbn!r}; must be a 10 or 13 digit string with no delimiters")

        self._title = title
        self._isbn = isbn

        by_coord: Dict[Coordinate, LineRecord] = {}
        for entry in _content_entries(content):
            record = _line_from_entry(entry)
            # Two texts for one coordinate means the upstream scan is broken.
            if record.coord in by_coord:
                raise DuplicateEntryError(record.page, record.line)
            by_coord[record.coord] = record

        self._pages: Dict[int, Dict[int, LineRecord]] = {}
        for coord in sorted(by_coord):
            self._pages.setdefault(coord.page, {})[coord.line] = by_coord[coord]
        self._pages_sorted: Tuple[int, ...] = tuple(self._pages)
        self._size = len(by_coord)

        logger.debug("Indexed %r (%s): %d lines on %d pages", title, isbn, self._size, len(self._pages_sorted))

    @classmethod
    def from_record(cls, record: Any) -> "BookIndex":
        if not isinstance(record, Mapping):
            raise ValidationError(f"Book record must be a mapping, got {type(record).__name__}")
        return cls(title=record.get("Title"), isbn=record.get("ISBN"), content=record.get("Content"))

    @property
    def title(self) -> str:
        return self._title

    @property
    def isbn(self) -> str:
        return self._isbn

    def pages(self) -> Tuple[int, ...]:
        return self._pages_sorted

    def lines(self, page: int) -> List[LineRecord]:
        return list(self._pages.get(page, {}).values())

    def get_line(self, page: int, line: int) -> Optional[LineRecord]:
        return self._pages.get(page, {}).get(line)

    def __iter__(self) -> Iterator[LineRecord]:
        for page in self._pages_sorted:
            yield from self._pages[page].values()

    def __len__(self) -> int:
        return self._size

    def search(self, term: str) -> List[MatchRecord]:
        """
        Find every line of this book on which `term` occurs.

        Matches come back in reading order. A hyphen-break match reports both
        the broken line and the line it continues on. Breaks across a page
        boundary are never looked for: nothing says which line ends a page.
        """
        matches: List[MatchRecord] = []
        for record in self:
            next_record = self.get_line(record.page, record.line + 1)
            kind = match_line(term, record, next_record)
            if kind is None:
                continue

            found = [record.coord]
            if kind == MatchKind.HYPHEN_BREAK:
                found.append(record.coord.next_line())
            for coord in found:
                # The continuation line of a previous break may match again.
                if matches and same_position(matches[-1], coord):
                    continue
                matches.append(MatchRecord.at(self._isbn, coord))

        logger.debug("Found %d matches for %r in %s", len(matches), term, self._isbn)
        return matches
