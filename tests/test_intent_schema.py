"""Tests for the ParseResult Pydantic schema and its cross-field invariants."""

from __future__ import annotations

import pytest

from kantong.intent.aliases import generate_aliases
from kantong.intent.schema import Entities, EntityField, Intent, ParseResult, PocketAlias


def test_missing_cannot_name_populated_field() -> None:
    with pytest.raises(ValueError):
        ParseResult(
            intent=Intent.income_to_pocket,
            entities=Entities(amount=10_000, pocket="Tabungan"),
            missing=[EntityField.pocket],
        )


def test_unknown_intent_has_nothing_missing() -> None:
    with pytest.raises(ValueError):
        ParseResult(intent=Intent.unknown, missing=[EntityField.amount])


def test_amount_is_non_negative() -> None:
    with pytest.raises(ValueError):
        Entities(amount=-1)


def test_entities_accept_camel_case_names() -> None:
    entities = Entities.model_validate({"pocketFrom": "Tabungan", "pocketTo": "E-Money"})
    assert entities.pocket_from == "Tabungan"
    assert entities.present_fields() == {EntityField.pocket_from, EntityField.pocket_to}


def test_payload_is_camel_case_and_omits_unset_fields() -> None:
    result = ParseResult(
        intent=Intent.transfer_between_pockets,
        entities=Entities(amount=250_000, amount_text="250k", pocket_from="Tabungan"),
        missing=["pocketTo"],
    )
    assert result.to_payload() == {
        "intent": "transfer_between_pockets",
        "entities": {"amount": 250_000, "amountText": "250k", "pocketFrom": "Tabungan"},
        "missing": ["pocketTo"],
    }


def test_pocket_alias_generates_aliases_by_default() -> None:
    pocket = PocketAlias(id="emoney", canonical_name="E-Money")
    assert pocket.aliases == generate_aliases("E-Money")
    assert pocket.normalized_name == "e money"


def test_pocket_alias_normalizes_supplied_aliases() -> None:
    pocket = PocketAlias(id="k", canonical_name="Kebutuhan Pokok", aliases=["Keb. Pokok", "KP"])
    assert pocket.aliases == {"keb pokok", "kp", "kebutuhan pokok"}


def test_pocket_alias_requires_a_usable_name() -> None:
    with pytest.raises(ValueError):
        PocketAlias(id="x", canonical_name="  !! ")
    with pytest.raises(ValueError):
        PocketAlias(id="", canonical_name="Tabungan")


def test_pocket_alias_is_immutable() -> None:
    pocket = PocketAlias(id="t", canonical_name="Tabungan")
    with pytest.raises(ValueError):
        pocket.canonical_name = "Dompet"  # type: ignore[misc]
