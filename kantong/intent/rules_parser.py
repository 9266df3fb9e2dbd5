"""Rules-based Indonesian command parser.

This parser is intentionally strict and deterministic:
    - it only recognizes the vocabulary in `dictionaries`,
    - it never guesses a pocket that is not in the caller roster,
    - it reports absent entities through `missing` instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from kantong.intent.aliases import AliasIndex
from kantong.intent.classifier import classify_intent
from kantong.intent.entities import extract_entities
from kantong.intent.missing import resolve_missing
from kantong.intent.normalize import normalize_text
from kantong.intent.schema import ParseResult, PocketAlias

logger = logging.getLogger(__name__)


def parse_command(text: str, pockets: Sequence[PocketAlias] = ()) -> ParseResult:
    """Parse a free-form command into a `ParseResult`.

    Args:
        text: Raw user input, e.g. "kirim 250k dari tabungan ke e money buat top up".
        pockets: The caller's current pocket roster, in preference order for alias ties.

    Raises:
        DuplicatePocketError: If the roster contains the same pocket id twice.
    """

    index = AliasIndex(pockets)
    normalized = normalize_text(text)

    intent = classify_intent(normalized)
    entities = extract_entities(normalized, intent, index)
    missing = resolve_missing(intent, entities)

    logger.debug(
        "parsed intent=%s missing=%s pockets=%d",
        intent,
        ",".join(missing) or "-",
        len(index),
    )
    return ParseResult(intent=intent, entities=entities, missing=missing)
