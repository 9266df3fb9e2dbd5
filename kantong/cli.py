"""Parse a single command from the command line and print the result as JSON.

Example:
    python -m kantong.cli "kirim 250k dari tabungan ke e money buat top up" --describe
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from kantong.config.logging import configure_logging
from kantong.config.settings import load_settings
from kantong.intent.aliases import build_pocket_aliases
from kantong.intent.describe import describe_parse_result
from kantong.intent.normalize import normalize_text
from kantong.intent.rules_parser import parse_command

logger = logging.getLogger(__name__)


def _pocket_id(name: str) -> str:
    return normalize_text(name).replace(" ", "-")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("text", help="Command text, e.g. 'keluarkan 50rb dari keb pokok'.")
    parser.add_argument(
        "--pocket",
        action="append",
        dest="pockets",
        help="Pocket name (repeatable). Defaults to KANTONG_POCKETS.",
    )
    parser.add_argument(
        "--describe",
        action="store_true",
        help="Also print the Indonesian summary of the result.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    settings = load_settings()
    configure_logging(settings.log_level)

    args = build_arg_parser().parse_args(argv)
    names = args.pockets or settings.pocket_names

    try:
        roster = build_pocket_aliases((_pocket_id(name), name) for name in names)
        result = parse_command(args.text, roster)
    except ValueError as exc:
        # DuplicatePocketError and pydantic.ValidationError are both ValueErrors.
        logger.info("rejected roster reason=%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(json.dumps(result.to_payload(), ensure_ascii=False))
    if args.describe:
        print(describe_parse_result(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
