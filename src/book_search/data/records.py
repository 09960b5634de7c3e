from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Protocol

from book_search.core.errors import ValidationError
from book_search.utils.coordinate import Coordinate


_ISBN_RE = re.compile(r"[0-9]{10}(?:[0-9]{3})?")


def validate_isbn(isbn: Any) -> bool:
    """Return True for a 10 or 13 digit ISBN string with no delimiters."""
    if not isinstance(isbn, str):
        return False
    return _ISBN_RE.fullmatch(isbn) is not None


class Positioned(Protocol):
    @property
    def page(self) -> int: ...

    @property
    def line(self) -> int: ...


def same_position(a: Positioned, b: Positioned) -> bool:
    return (a.page, a.line) == (b.page, b.line)


@dataclass(frozen=True)
class LineRecord:
    coord: Coordinate
    text: str

    @classmethod
    def from_raw(cls, page: Any, line: Any, text: Any) -> "LineRecord":
        coord = Coordinate.of(page, line)
        if not isinstance(text, str):
            raise ValidationError(
                f"Text on page #{coord.page}, line #{coord.line} must be a string, got {type(text).__name__}"
            )
        # A line may be blank after trimming (whitespace kept for layout).
        return cls(coord=coord, text=text.strip())

    @property
    def page(self) -> int:
        return self.coord.page

    @property
    def line(self) -> int:
        return self.coord.line

    def to_dict(self) -> Dict[str, Any]:
        return {"Page": self.page, "Line": self.line, "Text": self.text}


@dataclass(frozen=True)
class MatchRecord:
    isbn: str
    coord: Coordinate

    @classmethod
    def at(cls, isbn: str, coord: Coordinate) -> "MatchRecord":
        if not validate_isbn(isbn):
            raise ValidationError(f"Invalid ISBN value {isbn!r}; must be a 10 or 13 digit string with no delimiters")
        return cls(isbn=isbn, coord=coord)

    @property
    def page(self) -> int:
        return self.coord.page

    @property
    def line(self) -> int:
        return self.coord.line

    def to_dict(self) -> Dict[str, Any]:
        return {"ISBN": self.isbn, "Page": self.page, "Line": self.line}
