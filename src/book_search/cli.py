from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import yaml
from tqdm import tqdm

from book_search.core.book_index import BookIndex
from book_search.core.errors import BookSearchError
from book_search.data.loader import load_corpus
from book_search.data.records import validate_isbn
from book_search.engine.corpus import search_corpus
from book_search.results.store import dump_response, write_response


logger = logging.getLogger(__name__)


def _load_config(path: Optional[str]) -> dict:
    if not path:
        return {}
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise SystemExit(f"error: invalid config format (expected mapping): {path}")
    return cfg


def _section(cfg: dict, name: str) -> dict:
    section = cfg.get(name) or {}
    if not isinstance(section, dict):
        raise SystemExit(f"error: invalid config section {name!r} (expected mapping)")
    return section


def _setup_logging(args: argparse.Namespace, cfg: dict) -> None:
    level = getattr(args, "log_level", None) or _section(cfg, "logging").get("level") or "WARNING"
    logging.basicConfig(level=str(level).upper(), format="%(asctime)s %(levelname)s %(message)s")


def _books_path(args: argparse.Namespace, cfg: dict) -> str:
    path = args.books or _section(cfg, "data").get("books_path")
    if not path:
        raise SystemExit("error: no corpus file given (use --books or data.books_path in the config)")
    return str(path)


def _indent(out_cfg: dict) -> int:
    indent = out_cfg.get("indent")
    if indent is None:
        return 2
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        raise SystemExit(f"error: output.indent must be a non-negative integer, got {indent!r}")
    return indent


def _results_path(results_dir: str) -> Path:
    run_id = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
    out_path = Path(results_dir) / f"{run_id}.json"
    n = 1
    while out_path.exists():
        out_path = Path(results_dir) / f"{run_id}-{n}.json"
        n += 1
    return out_path


def cmd_search(args: argparse.Namespace) -> int:
    cfg = _load_config(args.config)
    _setup_logging(args, cfg)
    out_cfg = _section(cfg, "output")
    indent = _indent(out_cfg)

    try:
        books = load_corpus(_books_path(args, cfg))
        response = search_corpus(
            args.term,
            tqdm(books, desc="books", unit="book", file=sys.stderr, disable=not args.progress),
        )
    except (BookSearchError, FileNotFoundError) as e:
        raise SystemExit(f"error: {e}") from e

    print(dump_response(response, indent=indent))

    out_path: Optional[Path] = None
    if args.out:
        out_path = Path(args.out)
    elif out_cfg.get("results_dir"):
        out_path = _results_path(str(out_cfg["results_dir"]))
    if out_path is not None:
        write_response(out_path, response, indent=indent)
        logger.info("Wrote %s", out_path)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    cfg = _load_config(args.config)
    _setup_logging(args, cfg)

    try:
        books = load_corpus(_books_path(args, cfg))
        for record in books:
            index = BookIndex.from_record(record)
            print(f"{index.isbn}  pages={len(index.pages())} lines={len(index)}  {index.title}")
    except (BookSearchError, FileNotFoundError) as e:
        raise SystemExit(f"error: {e}") from e
    return 0


def cmd_check_isbn(args: argparse.Namespace) -> int:
    all_valid = True
    for value in args.values:
        ok = validate_isbn(value)
        all_valid = all_valid and ok
        print(f"{value}: {'valid' if ok else 'invalid'}")
    return 0 if all_valid else 1


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="book-search", description="Search scanned book lines for a term.")
    sub = p.add_subparsers(dest="cmd", required=True)

    s_search = sub.add_parser("search", help="Search a corpus file for a term.")
    s_search.add_argument("--term", required=True, help="Case-sensitive word or phrase to look for.")
    s_search.add_argument("--books", help="Path to a JSON corpus file (overrides data.books_path).")
    s_search.add_argument("--config", help="Path to config.yaml.")
    s_search.add_argument("--out", help="Also write the results JSON to this path.")
    s_search.add_argument("--progress", action="store_true", help="Show a progress bar over books.")
    s_search.add_argument("--log-level", help="Logging level, e.g. DEBUG or INFO.")
    s_search.set_defaults(func=cmd_search)

    s_validate = sub.add_parser("validate", help="Check that every book in a corpus file can be indexed.")
    s_validate.add_argument("--books", help="Path to a JSON corpus file (overrides data.books_path).")
    s_validate.add_argument("--config", help="Path to config.yaml.")
    s_validate.add_argument("--log-level", help="Logging level, e.g. DEBUG or INFO.")
    s_validate.set_defaults(func=cmd_validate)

    s_isbn = sub.add_parser("check-isbn", help="Check ISBN values (10 or 13 digits, no delimiters).")
    s_isbn.add_argument("values", nargs="+", help="ISBN values to check.")
    s_isbn.set_defaults(func=cmd_check_isbn)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
