from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from book_search.core.errors import ValidationError


def load_corpus(path: str) -> List[Dict[str, Any]]:
    """
    Read a corpus file: a JSON list of book records shaped as
    {"Title": ..., "ISBN": ..., "Content": [{"Page", "Line", "Text"}, ...]}.

    Records are returned as parsed; BookIndex does the field validation.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Corpus file not found: {p}")
    if not p.is_file():
        raise ValidationError(f"Corpus path is not a file: {p}")
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise ValidationError(f"Corpus file is not UTF-8 text: {p}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValidationError(f"Corpus file is not valid JSON: {p}: {e}") from e
    if not isinstance(data, list):
        raise ValidationError(f"Invalid corpus format (expected list): {p}")
    return data
