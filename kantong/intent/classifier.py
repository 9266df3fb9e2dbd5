"""Rule-table intent classifier.

No statistical model is used: the first rule in `INTENT_RULES` whose trigger appears in the text
decides the intent.
"""

from __future__ import annotations

from kantong.intent.dictionaries import (
    FROM_MARKER,
    INTENT_RULES,
    TO_MARKER,
    IntentRule,
    has_any_phrase,
    has_phrase,
)
from kantong.intent.schema import Intent


def has_pocket_pair(text: str) -> bool:
    """Whether the text carries both the `dari` (from) and `ke` (to) markers."""

    return has_phrase(text, FROM_MARKER) and has_phrase(text, TO_MARKER)


def _rule_matches(rule: IntentRule, text: str) -> bool:
    if not has_any_phrase(text, rule.triggers):
        return False
    if rule.requires_pair and not has_pocket_pair(text):
        return False
    return True


def classify_intent(text: str, rules: tuple[IntentRule, ...] = INTENT_RULES) -> Intent:
    """Classify normalized text into an `Intent`.

    `rules` defaults to the Indonesian rule table and may be replaced to extend the vocabulary.
    """

    if not text:
        return Intent.unknown

    for rule in rules:
        if _rule_matches(rule, text):
            return rule.intent
    return Intent.unknown
