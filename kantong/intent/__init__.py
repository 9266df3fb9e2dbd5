"""Command parsing.

The intent layer converts an Indonesian natural-language finance command into a strict
`ParseResult` (intent, entities, missing fields) for the assistant execution layer.
"""
