import json

import pytest

from book_search.core.errors import ValidationError
from book_search.data.loader import load_corpus


def test_load_corpus_reads_book_list(tmp_path, twenty_leagues) -> None:
    path = tmp_path / "books.json"
    path.write_text(json.dumps(twenty_leagues, ensure_ascii=False), encoding="utf-8")
    assert load_corpus(str(path)) == twenty_leagues


def test_load_corpus_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_corpus(str(tmp_path / "nope.json"))


def test_load_corpus_rejects_non_list(tmp_path) -> None:
    path = tmp_path / "books.json"
    path.write_text('{"Title": "x"}', encoding="utf-8")
    with pytest.raises(ValidationError):
        load_corpus(str(path))


def test_load_corpus_rejects_invalid_json(tmp_path) -> None:
    path = tmp_path / "books.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_corpus(str(path))


def test_load_corpus_rejects_non_utf8(tmp_path) -> None:
    path = tmp_path / "books.json"
    path.write_bytes(b'[{"Title": "caf\xe9"}]')
    with pytest.raises(ValidationError):
        load_corpus(str(path))


def test_load_corpus_rejects_directory(tmp_path) -> None:
    with pytest.raises(ValidationError):
        load_corpus(str(tmp_path))
