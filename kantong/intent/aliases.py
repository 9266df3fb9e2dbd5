"""Pocket alias generation and lookup.

Users refer to pockets by full name, single words, initials, or informal truncations
("keb pokok" for "Kebutuhan Pokok"). The index is built per parse call from the caller roster and
is never cached.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from kantong.intent.normalize import normalize_text
from kantong.intent.schema import PocketAlias

MIN_WORD_ALIAS_LENGTH = 3
MIN_PREFIX_WORD_LENGTH = 5
PREFIX_LENGTHS: tuple[int, ...] = (3, 4)


class DuplicatePocketError(ValueError):
    """Raised when the pocket roster contains the same id more than once."""


def generate_aliases(canonical_name: str) -> frozenset[str]:
    """Derive the alias strings for a pocket name.

    Rules (all on the normalized name):
        - the full name;
        - every word of at least 3 characters;
        - the initials of the words ("kebutuhan pokok" -> "kp", "tabungan" -> "t");
        - 3- and 4-character prefixes of words of at least 5 characters ("keb", "kebu");
        - for multi-word names, the compact form ("e money" -> "emoney") and each form with one
          long word truncated to 3 characters ("keb pokok", "kebutuhan pok").
    """

    name = normalize_text(canonical_name)
    if not name:
        return frozenset()

    words = name.split()
    aliases = {name}

    for word in words:
        if len(word) >= MIN_WORD_ALIAS_LENGTH:
            aliases.add(word)
        if len(word) >= MIN_PREFIX_WORD_LENGTH:
            aliases.update(word[:n] for n in PREFIX_LENGTHS)

    aliases.add("".join(w[0] for w in words))

    if len(words) > 1:
        aliases.add("".join(words))
        for i, word in enumerate(words):
            if len(word) >= MIN_PREFIX_WORD_LENGTH:
                short = [*words[:i], word[: PREFIX_LENGTHS[0]], *words[i + 1 :]]
                aliases.add(" ".join(short))

    return frozenset(aliases)


def build_pocket_aliases(pockets: Iterable[tuple[str, str]]) -> list[PocketAlias]:
    """Build a roster from `(id, name)` pairs, keeping the caller's order."""

    return [PocketAlias(id=pocket_id, canonical_name=name) for pocket_id, name in pockets]


@dataclass(frozen=True)
class AliasMatch:
    """A pocket resolved from a run of tokens."""

    pocket: PocketAlias
    alias: str
    start: int
    end: int


class AliasIndex:
    """Exact alias lookup over a pocket roster.

    Tie-break when an alias belongs to several pockets: the pocket whose normalized canonical name
    equals the alias wins; otherwise the first pocket in roster order. This is a deterministic
    policy, not a guess at what the user meant.
    """

    def __init__(self, pockets: Sequence[PocketAlias]) -> None:
        seen: set[str] = set()
        for pocket in pockets:
            if pocket.id in seen:
                raise DuplicatePocketError(f"duplicate pocket id in roster: {pocket.id!r}")
            seen.add(pocket.id)

        self._pockets = tuple(pockets)
        self._by_alias: dict[str, list[PocketAlias]] = {}
        for pocket in self._pockets:
            for alias in pocket.aliases:
                self._by_alias.setdefault(alias, []).append(pocket)

        self._max_alias_words = max(
            (len(alias.split()) for alias in self._by_alias),
            default=0,
        )

    def __len__(self) -> int:
        return len(self._pockets)

    def lookup(self, candidate: str) -> PocketAlias | None:
        """Resolve a candidate string to a pocket, or `None` if it is not an alias."""

        key = normalize_text(candidate)
        owners = self._by_alias.get(key)
        if not owners:
            return None
        for pocket in owners:
            if pocket.normalized_name == key:
                return pocket
        return owners[0]

    def find_longest(self, tokens: Sequence[str]) -> AliasMatch | None:
        """Find the longest token n-gram that is an alias.

        Length is measured in characters; on a tie the leftmost n-gram wins.
        """

        best: AliasMatch | None = None
        for start in range(len(tokens)):
            for end in range(start + 1, min(len(tokens), start + self._max_alias_words) + 1):
                alias = " ".join(tokens[start:end])
                if best is not None and len(alias) <= len(best.alias):
                    continue
                pocket = self.lookup(alias)
                if pocket is not None:
                    best = AliasMatch(pocket=pocket, alias=alias, start=start, end=end)
        return best


def resolve_pocket(text: str, pockets: Sequence[PocketAlias]) -> PocketAlias | None:
    """Resolve a free-form pocket answer ("tabungan", "keb pokok") against a roster.

    The whole text is tried as an alias first, then the longest alias inside it.
    """

    index = AliasIndex(pockets)
    direct = index.lookup(text)
    if direct is not None:
        return direct

    match = index.find_longest(normalize_text(text).split())
    if match is None:
        return None
    return match.pocket
