from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from book_search.core.errors import ValidationError
from book_search.engine.corpus import SearchResponse


def dump_response(response: SearchResponse, indent: int = 2) -> str:
    return json.dumps(response.to_dict(), ensure_ascii=False, indent=indent)


def write_response(path: Path, response: SearchResponse, indent: int = 2) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_response(response, indent=indent), encoding="utf-8")
    return path


def load_response(path: Path) -> Dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict) or "SearchTerm" not in data or not isinstance(data.get("Results"), list):
        raise ValidationError(f"Invalid results format (expected SearchTerm and Results): {path}")
    return data
