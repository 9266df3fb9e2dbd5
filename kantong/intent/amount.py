"""Indonesian amount parsing (rupiah shorthand).

Supported forms, scanned left to right (the first match wins):
    - plain digits: `50000`
    - dot-grouped thousands: `1.250.000`
    - unit suffixes: `20 ribu`, `50rb`, `125k`, `3jt`, `2 juta`, `5m`
    - decimals before a unit: `1,25jt`, `1.5 juta`
    - compound shorthand: `3jt400` (3 juta + 400 ribu), `1k5` (1 ribu + 5)
    - spaced compound after a million unit: `3 juta 400`, `3jt 400rb`
    - an optional `rp`/`idr` prefix: `rp 50.000`
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from kantong.intent.normalize import normalize_text

UNIT_MULTIPLIERS: dict[str, int] = {
    "juta": 1_000_000,
    "jt": 1_000_000,
    "m": 1_000_000,
    "ribu": 1_000,
    "rb": 1_000,
    "k": 1_000,
}

_UNIT_GROUP = "|".join(sorted(UNIT_MULTIPLIERS, key=lambda u: (-len(u), u)))
_THOUSAND_GROUP = "|".join(
    sorted((u for u, m in UNIT_MULTIPLIERS.items() if m == 1_000), key=lambda u: (-len(u), u))
)

_AMOUNT_RE = re.compile(
    r"(?<![0-9a-z.,])"
    r"(?:(?:rp|idr)\s?)?"
    r"(?P<number>\d+(?:\.\d{3})*)"
    rf"(?:[.,](?P<fraction>\d+)(?=\s?(?:{_UNIT_GROUP})(?![a-z])))?"
    rf"(?:\s?(?P<unit>{_UNIT_GROUP})(?:(?P<remainder>\d{{1,3}})(?!\d)|(?![a-z])))?"
)

# `3 juta 400` / `3 jt 400 rb`: a spaced remainder is only read after a million unit.
_SPACED_REMAINDER_RE = re.compile(
    rf"\s(?P<remainder>\d{{1,3}})(?:\s?(?:{_THOUSAND_GROUP}))?(?![0-9a-z.,])"
)


@dataclass(frozen=True)
class AmountMatch:
    """A parsed amount and its span in the normalized text."""

    value: int
    text: str
    start: int
    end: int


def _to_int(value: Decimal) -> int:
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _match_value(match: re.Match[str], remainder: str | None) -> int:
    number = Decimal(match.group("number").replace(".", ""))
    fraction = match.group("fraction")
    if fraction:
        number += Decimal(f"0.{fraction}")

    unit = match.group("unit")
    if unit is None:
        return _to_int(number)

    multiplier = UNIT_MULTIPLIERS[unit]
    total = number * multiplier

    if remainder:
        # `3jt400`: trailing digits count in the next unit down.
        total += int(remainder) * (multiplier // 1000)
    return _to_int(total)


def find_amount(text: str) -> AmountMatch | None:
    """Find the first amount in already-normalized text.

    Returns:
        The match with its value and span, or `None` if no substring fits the grammar.
    """

    text = text or ""
    match = _AMOUNT_RE.search(text)
    if match is None:
        return None

    end = match.end()
    remainder = match.group("remainder")
    unit = match.group("unit")
    if remainder is None and unit is not None and UNIT_MULTIPLIERS[unit] == 1_000_000:
        spaced = _SPACED_REMAINDER_RE.match(text, end)
        if spaced is not None:
            remainder = spaced.group("remainder")
            end = spaced.end()

    return AmountMatch(
        value=_match_value(match, remainder),
        text=text[match.start() : end].strip(),
        start=match.start(),
        end=end,
    )


def parse_amount(text: str | None) -> int | None:
    """Parse the first amount mentioned in raw user text.

    Never raises for malformed or missing amounts; returns `None` instead.
    """

    found = find_amount(normalize_text(text))
    if found is None:
        return None
    return found.value
