from __future__ import annotations

import re
from typing import List, Optional


# Latin-1 accented letters, minus the multiplication and division signs.
_WORD_RE = re.compile(r"[A-Za-z'\-À-ÖØ-Ýà-öø-ÿ]+")


def tokenize(text: str) -> List[str]:
    """
    Split line text into words.

    A word is a maximal run of ASCII letters, apostrophes, hyphens and
    Latin-1 accented letters; digits, spaces and other punctuation separate
    words and are dropped.
    """
    return _WORD_RE.findall(text)


def first_word(text: str) -> Optional[str]:
    m = _WORD_RE.search(text)
    return m.group(0) if m else None


def last_word(text: str) -> Optional[str]:
    words = tokenize(text)
    return words[-1] if words else None
