"""Tests for required-field resolution."""

from __future__ import annotations

from kantong.intent.missing import required_fields, resolve_missing
from kantong.intent.schema import Entities, EntityField, Intent


def test_required_fields_table() -> None:
    assert required_fields(Intent.income_to_pocket) == (EntityField.amount, EntityField.pocket)
    assert required_fields(Intent.expense_from_pocket) == (EntityField.amount, EntityField.pocket)
    assert required_fields(Intent.transfer_between_pockets) == (
        EntityField.amount,
        EntityField.pocket_from,
        EntityField.pocket_to,
    )
    assert required_fields(Intent.unknown) == ()


def test_missing_keeps_table_order() -> None:
    missing = resolve_missing(Intent.transfer_between_pockets, Entities(pocket_from="Tabungan"))
    assert missing == [EntityField.amount, EntityField.pocket_to]


def test_nothing_missing_for_unknown() -> None:
    assert resolve_missing(Intent.unknown, Entities()) == []


def test_populated_fields_are_not_missing() -> None:
    entities = Entities(amount=0, pocket="Tabungan")
    assert resolve_missing(Intent.expense_from_pocket, entities) == []
