"""Text normalization for deterministic command parsing."""

from __future__ import annotations

import re
import unicodedata

_APOSTROPHE_RE = re.compile(r"['’`]")
# Digit-group separators survive so the amount grammar can still see `1.250.000` and `1,25jt`.
_NON_WORD_RE = re.compile(r"(?<=\d)[.,](?=\d)|[^0-9a-z\s]+")
_MULTISPACE_RE = re.compile(r"\s+")


def _strip_punctuation(match: re.Match[str]) -> str:
    value = match.group(0)
    if value in {".", ","}:
        return value
    return " "


def normalize_text(text: str | None) -> str:
    """Normalize user text for rules-based parsing.

    Normalization is intentionally conservative:
        - Lowercase.
        - Drop diacritics (NFKD decomposition, combining marks removed).
        - Drop apostrophes.
        - Replace punctuation and hyphens with spaces, except `.`/`,` between two digits.
        - Collapse whitespace.

    The goal is deterministic tokenization, not linguistic lemmatization.
    """

    value = unicodedata.normalize("NFKD", (text or "").lower())
    value = "".join(ch for ch in value if not unicodedata.combining(ch))
    value = _APOSTROPHE_RE.sub("", value)
    value = _NON_WORD_RE.sub(_strip_punctuation, value)
    value = _MULTISPACE_RE.sub(" ", value).strip()
    return value
