"""Indonesian rule tables for intent classification and entity extraction.

These mappings drive the rules-based parser and should remain small and deterministic. Every
trigger is matched against whole tokens (or whole token phrases) of normalized text.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from kantong.intent.schema import EntityField, Intent

TRANSFER_MARKERS: tuple[str, ...] = (
    "transfer",
    "transferkan",
    "tf",
    "kirim",
    "kirimkan",
    "pindah",
    "pindahkan",
    "oper",
)

INCOME_TRIGGERS: tuple[str, ...] = (
    "dapat",
    "dapet",
    "mendapat",
    "mendapatkan",
    "terima",
    "menerima",
    "diterima",
    "gaji",
    "gajian",
    "pemasukan",
    "income",
    "masukkan",
    "tambah saldo",
    "tambahkan saldo",
    "isi saldo",
)

EXPENSE_TRIGGERS: tuple[str, ...] = (
    "keluarkan",
    "pengeluaran",
    "bayar",
    "membayar",
    "beli",
    "membeli",
    "belanja",
    "pakai",
    "tarik",
)

FROM_MARKER = "dari"
TO_MARKER = "ke"

NOTE_MARKERS: tuple[str, ...] = ("buat", "untuk", "karena", "biar")


@dataclass(frozen=True)
class IntentRule:
    """A trigger set for one intent.

    `requires_pair` rules only fire when both the `dari` and `ke` markers are present.
    """

    intent: Intent
    triggers: tuple[str, ...]
    requires_pair: bool = False


# Checked in order; the first matching rule wins. Transfer comes first because transfer sentences
# may also contain expense verbs ("bayar", "pakai").
INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule(Intent.transfer_between_pockets, TRANSFER_MARKERS, requires_pair=True),
    IntentRule(Intent.income_to_pocket, INCOME_TRIGGERS),
    IntentRule(Intent.expense_from_pocket, EXPENSE_TRIGGERS),
)

REQUIRED_FIELDS: Mapping[Intent, tuple[EntityField, ...]] = MappingProxyType(
    {
        Intent.income_to_pocket: (EntityField.amount, EntityField.pocket),
        Intent.expense_from_pocket: (EntityField.amount, EntityField.pocket),
        Intent.transfer_between_pockets: (
            EntityField.amount,
            EntityField.pocket_from,
            EntityField.pocket_to,
        ),
        Intent.unknown: (),
    }
)


def has_phrase(text: str, phrase: str) -> bool:
    """Whether `phrase` occurs in `text` on token boundaries."""

    return f" {phrase} " in f" {text} "


def has_any_phrase(text: str, phrases: tuple[str, ...]) -> bool:
    """Whether any of `phrases` occurs in `text` on token boundaries."""

    padded = f" {text} "
    return any(f" {phrase} " in padded for phrase in phrases)
