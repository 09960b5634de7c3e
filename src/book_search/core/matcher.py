from __future__ import annotations

from typing import Optional

from book_search.core.tokenizer import first_word, last_word, tokenize
from book_search.data.records import LineRecord


class MatchKind:
    """How a search term was found on a line."""

    EXACT = "exact"  # term equals one of the line's words
    PHRASE = "phrase"  # multi-word term found verbatim in the line text
    HYPHEN_BREAK = "hyphen_break"  # term split over this line and the next


def is_exact_match(term: str, text: str) -> bool:
    return term in tokenize(text)


def is_phrase_match(term: str, text: str) -> bool:
    return " " in term and term in text


def is_hyphen_break_match(term: str, text: str, next_text: Optional[str]) -> bool:
    """
    Check whether `term` is split between `text` and the line after it.

    The fragment before the hyphen must be a prefix of the term, and the first
    word of the next line must be exactly the rest of it, so that "be-" / "e"
    does not satisfy "because".
    """
    if next_text is None or not text.endswith("-"):
        return False

    fragment = last_word(text)
    if fragment is None:
        return False
    tail = fragment[:-1] if fragment.endswith("-") else fragment
    # A lone "-" is punctuation, not half of a word.
    if not tail or not term.startswith(tail):
        return False

    remainder = term[len(tail):]
    head = first_word(next_text)
    return head is not None and remainder == head


def match_line(term: str, record: LineRecord, next_record: Optional[LineRecord]) -> Optional[str]:
    """Return the MatchKind under which `term` occurs on `record`, or None."""
    if is_exact_match(term, record.text):
        return MatchKind.EXACT
    if is_phrase_match(term, record.text):
        return MatchKind.PHRASE
    next_text = next_record.text if next_record is not None else None
    if is_hyphen_break_match(term, record.text, next_text):
        return MatchKind.HYPHEN_BREAK
    return None
