"""Required-field bookkeeping for classified commands."""

from __future__ import annotations

from kantong.intent.dictionaries import REQUIRED_FIELDS
from kantong.intent.schema import Entities, EntityField, Intent


def required_fields(intent: Intent) -> tuple[EntityField, ...]:
    """Fields an intent needs before it can be executed (empty for `unknown`)."""

    return REQUIRED_FIELDS[intent]


def resolve_missing(intent: Intent, entities: Entities) -> list[EntityField]:
    """Return the required fields that `entities` does not populate, in table order."""

    present = entities.present_fields()
    return [field for field in required_fields(intent) if field not in present]
