"""Entity extraction (amount, pocket references, note) from normalized commands."""

from __future__ import annotations

import re
from collections.abc import Sequence

from kantong.intent.aliases import AliasIndex
from kantong.intent.amount import AmountMatch, find_amount
from kantong.intent.dictionaries import FROM_MARKER, NOTE_MARKERS, TO_MARKER
from kantong.intent.schema import Entities, Intent

_NOTE_RE = re.compile(rf"(?:^|\s)(?:{'|'.join(NOTE_MARKERS)})\s+(?P<note>.+)$")


def _split_note(text: str) -> tuple[str, str | None]:
    """Split text into the command body and the trailing note clause."""

    match = _NOTE_RE.search(text)
    if match is None:
        return text, None
    note = match.group("note").strip()
    return text[: match.start()], note or None


def _blank_amount(text: str, amount: AmountMatch | None) -> str:
    # Digits of the amount must not be mistaken for a pocket alias.
    if amount is None:
        return text
    return f"{text[:amount.start]} {text[amount.end:]}"


def _index_of(tokens: Sequence[str], marker: str, start: int = 0) -> int | None:
    for i in range(start, len(tokens)):
        if tokens[i] == marker:
            return i
    return None


def _span_after(tokens: Sequence[str], marker_at: int, stop_marker: str) -> list[str]:
    stop = _index_of(tokens, stop_marker, marker_at + 1)
    return list(tokens[marker_at + 1 : stop])


def _match_pocket(index: AliasIndex, tokens: Sequence[str]) -> str | None:
    match = index.find_longest(tokens)
    if match is None:
        return None
    return match.pocket.canonical_name


def _extract_pair(index: AliasIndex, tokens: Sequence[str]) -> tuple[str | None, str | None]:
    from_at = _index_of(tokens, FROM_MARKER)
    to_at = None
    if from_at is not None:
        to_at = _index_of(tokens, TO_MARKER, from_at + 1)
    if to_at is None:
        to_at = _index_of(tokens, TO_MARKER)

    pocket_from = None
    if from_at is not None:
        pocket_from = _match_pocket(index, _span_after(tokens, from_at, TO_MARKER))

    pocket_to = None
    if to_at is not None:
        pocket_to = _match_pocket(index, _span_after(tokens, to_at, FROM_MARKER))

    return pocket_from, pocket_to


def extract_entities(text: str, intent: Intent, index: AliasIndex) -> Entities:
    """Extract the entities relevant to `intent` from normalized text.

    The amount span is never searched for pockets. A single pocket is looked up in the command
    body first and in the note clause only when the body names none ("terima 1jt untuk
    tabungan"); transfer spans stop at the note marker.
    """

    if intent == Intent.unknown:
        return Entities()

    amount = find_amount(text)
    _, note = _split_note(text)
    body, note_rest = _split_note(_blank_amount(text, amount))
    tokens = body.split()

    fields: dict[str, object] = {"note": note}
    if amount is not None:
        fields["amount"] = amount.value
        fields["amount_text"] = amount.text

    if intent == Intent.transfer_between_pockets:
        fields["pocket_from"], fields["pocket_to"] = _extract_pair(index, tokens)
    else:
        fields["pocket"] = _match_pocket(index, tokens) or _match_pocket(
            index, (note_rest or "").split()
        )

    return Entities.model_validate(fields)
