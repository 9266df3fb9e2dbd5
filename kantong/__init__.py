"""Deterministic parser for Indonesian pocket-finance commands."""

from kantong.intent.aliases import (
    DuplicatePocketError,
    build_pocket_aliases,
    generate_aliases,
    resolve_pocket,
)
from kantong.intent.amount import parse_amount
from kantong.intent.describe import describe_parse_result
from kantong.intent.rules_parser import parse_command
from kantong.intent.schema import Entities, EntityField, Intent, ParseResult, PocketAlias

__all__ = [
    "DuplicatePocketError",
    "Entities",
    "EntityField",
    "Intent",
    "ParseResult",
    "PocketAlias",
    "build_pocket_aliases",
    "describe_parse_result",
    "generate_aliases",
    "parse_amount",
    "parse_command",
    "resolve_pocket",
]
