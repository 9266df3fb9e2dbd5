"""Parse result schema (Pydantic models).

This schema is the contract between the rules-based command parser and the execution layer that
posts transactions. A result is produced fresh per call and never persisted.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from kantong.intent.normalize import normalize_text


class Intent(StrEnum):
    """Supported command intents (closed set)."""

    income_to_pocket = "income_to_pocket"
    expense_from_pocket = "expense_from_pocket"
    transfer_between_pockets = "transfer_between_pockets"
    unknown = "unknown"


class EntityField(StrEnum):
    """Entity names that can be reported as missing."""

    amount = "amount"
    pocket = "pocket"
    pocket_from = "pocketFrom"
    pocket_to = "pocketTo"


class Entities(BaseModel):
    """Structured values extracted from a command.

    Only the fields relevant to the classified intent are populated; the rest stay `None`.
    """

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    amount: int | None = Field(default=None, ge=0)
    amount_text: str | None = None
    pocket: str | None = None
    pocket_from: str | None = None
    pocket_to: str | None = None
    note: str | None = None

    def present_fields(self) -> set[EntityField]:
        """Return the reportable fields that hold a value."""

        values = {
            EntityField.amount: self.amount,
            EntityField.pocket: self.pocket,
            EntityField.pocket_from: self.pocket_from,
            EntityField.pocket_to: self.pocket_to,
        }
        return {name for name, value in values.items() if value is not None}


class PocketAlias(BaseModel):
    """A pocket from the caller roster plus the alias strings that refer to it.

    If `aliases` is omitted it is generated from `canonical_name`. Supplied aliases are normalized
    and the normalized canonical name is always included.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    id: str = Field(min_length=1)
    canonical_name: str
    aliases: frozenset[str] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def fill_aliases(cls, data: Any) -> Any:
        """Generate or normalize the alias set before field validation."""

        if not isinstance(data, dict):
            return data

        # Imported lazily: `aliases` depends on this module for the model itself.
        from kantong.intent.aliases import generate_aliases

        name = data.get("canonical_name")
        if not isinstance(name, str):
            return data

        supplied = data.get("aliases")
        if supplied:
            aliases = {normalize_text(a) for a in supplied} | {normalize_text(name)}
            aliases.discard("")
        else:
            aliases = set(generate_aliases(name))
        return {**data, "aliases": frozenset(aliases)}

    @field_validator("canonical_name")
    @classmethod
    def validate_canonical_name(cls, value: str) -> str:
        """Validate that the canonical name survives normalization."""

        if not normalize_text(value):
            raise ValueError("canonical_name must contain at least one letter or digit")
        return value

    @property
    def normalized_name(self) -> str:
        """The canonical name after normalization."""

        return normalize_text(self.canonical_name)


class ParseResult(BaseModel):
    """The sole output of `parse_command`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    intent: Intent
    entities: Entities = Field(default_factory=Entities)
    missing: list[EntityField] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_missing(self) -> ParseResult:
        """Enforce that `missing` never names a populated field."""

        overlap = set(self.missing) & self.entities.present_fields()
        if overlap:
            names = ", ".join(sorted(overlap))
            raise ValueError(f"missing lists populated fields: {names}")
        if self.intent == Intent.unknown and self.missing:
            raise ValueError("missing must be empty for intent=unknown")
        return self

    @property
    def is_complete(self) -> bool:
        """Whether the result can be handed to the execution layer as-is."""

        return self.intent != Intent.unknown and not self.missing

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON shape consumed by the assistant layer."""

        return {
            "intent": self.intent.value,
            "entities": self.entities.model_dump(by_alias=True, exclude_none=True),
            "missing": [field.value for field in self.missing],
        }
