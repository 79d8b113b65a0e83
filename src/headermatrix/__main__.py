"""Command line entry point: nested headers JSON in, header matrix JSON out."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from pydantic import ValidationError

from headermatrix.builder import build_header_forest
from headermatrix.config import HEADERMATRIX_JSON_INDENT, HEADERMATRIX_LOG_LEVEL
from headermatrix.exceptions import HeaderMatrixError, InvalidHeaderConfigError
from headermatrix.matrix import generate_matrix, matrix_to_records

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="headermatrix",
        description="Generate the header settings matrix for a nested headers configuration.",
    )
    parser.add_argument("config", help="JSON file with nestedHeaders and optional hiddenColumns")
    parser.add_argument("--hidden", help="Comma separated hidden column indexes (overrides hiddenColumns)")
    parser.add_argument("--columns", type=int, help="Number of leaf columns (defaults to the widest layer)")
    parser.add_argument("--no-validate", action="store_true", help="Skip structural checks of the header forest")
    parser.add_argument("--indent", type=int, default=HEADERMATRIX_JSON_INDENT, help="JSON output indentation")
    args = parser.parse_args(argv)

    logging.basicConfig(level=HEADERMATRIX_LOG_LEVEL)

    hidden_override: list[int] | None = None
    if args.hidden is not None:
        try:
            hidden_override = parse_hidden_columns(args.hidden)
        except ValueError:
            parser.error(f"--hidden expects comma separated integers, got {args.hidden!r}")

    try:
        config = load_config(Path(args.config))
        hidden_columns = config.get("hiddenColumns", []) if hidden_override is None else hidden_override
        roots = build_header_forest(
            config["nestedHeaders"],
            hidden_columns=hidden_columns,
            columns_count=args.columns,
        )
        matrix = generate_matrix(roots, validate=not args.no_validate)
    except (OSError, json.JSONDecodeError, HeaderMatrixError, ValidationError) as exc:
        logger.debug("Header matrix generation failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(matrix_to_records(matrix), indent=args.indent))
    return 0


def load_config(path: Path) -> dict[str, Any]:
    """Read a nested headers configuration file.

    Raises:
        InvalidHeaderConfigError: If the document has no ``nestedHeaders`` list.
    """
    config = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(config, dict) or not isinstance(config.get("nestedHeaders"), list):
        raise InvalidHeaderConfigError(f"{path} must contain a 'nestedHeaders' list")
    hidden_columns = config.get("hiddenColumns", [])
    if not isinstance(hidden_columns, list) or not all(
        isinstance(column, int) and not isinstance(column, bool) for column in hidden_columns
    ):
        raise InvalidHeaderConfigError(f"{path}: 'hiddenColumns' must be a list of integers")
    return config


def parse_hidden_columns(raw: str) -> list[int]:
    return [int(part) for part in raw.split(",") if part.strip()]


if __name__ == "__main__":
    sys.exit(main())
