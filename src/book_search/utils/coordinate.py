from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Any

from book_search.core.errors import ValidationError


def _as_position(value: Any, name: str) -> int:
    # bool is an Integral subclass but never a page or line number.
    if isinstance(value, bool):
        raise ValidationError(f"{name} number must be a non-zero, positive integer")
    if isinstance(value, Integral):
        number = int(value)
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    else:
        raise ValidationError(f"{name} number must be a non-zero, positive integer")
    if number <= 0:
        raise ValidationError(f"{name} number must be a non-zero, positive integer")
    return number


@dataclass(frozen=True, order=True)
class Coordinate:
    """
    Position of one scanned line:
      (page, line), both >= 1

    Ordering is (page, line), i.e. reading order.
    """

    page: int
    line: int

    @classmethod
    def of(cls, page: Any, line: Any) -> "Coordinate":
        return cls(page=_as_position(page, "Page"), line=_as_position(line, "Line"))

    def next_line(self) -> "Coordinate":
        return Coordinate(page=self.page, line=self.line + 1)
