"""
naming.py

PURPOSE: Field-name translation between record attributes and JSON wire keys.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
An internal field name is an optional fixed-length type prefix followed by a
camelCase logical name (e.g. "ccrMaxTokens" with prefix length 3). The wire
name drops the prefix and converts the rest to snake_case ("max_tokens").

Word boundaries:
- lowercase or digit followed by uppercase: "maxTokens" -> "max_tokens"
- an acronym run stays one word: "fileID" -> "file_id"
- the last capital of a run starts a new word when a lowercase letter
  follows it: "NEpochs" -> "n_epochs", "HTTPServer" -> "http_server"

Snake_case names pass through unchanged, so Python-native attribute names
map to themselves.
"""

import re
from collections.abc import Iterable

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


class FieldNameError(ValueError):
    """A field name cannot be mapped to a wire name."""

    pass


def wire_name(name: str, prefix_length: int = 0) -> str:
    """
    Map an internal field name to its wire name.

    Args:
        name: Internal field name, e.g. "ccrMaxTokens" or "max_tokens".
        prefix_length: Number of leading characters to strip.

    Returns:
        The snake_case wire name.

    Raises:
        FieldNameError: If the prefix length is negative or nothing is left
            after stripping the prefix.
    """
    if prefix_length < 0:
        raise FieldNameError(f"Negative prefix length {prefix_length} for field '{name}'")

    logical = name[prefix_length:]
    if not logical:
        raise FieldNameError(f"Field '{name}' has no name after its {prefix_length}-char prefix")

    logical = _ACRONYM_BOUNDARY.sub(r"\1_\2", logical)
    logical = _WORD_BOUNDARY.sub(r"\1_\2", logical)
    return logical.lower()


def wire_table(fields: Iterable[str], prefix_length: int = 0) -> dict[str, str]:
    """
    Build the internal -> wire name table for one record type.

    Raises:
        FieldNameError: If two fields map to the same wire name.
    """
    table: dict[str, str] = {}
    seen: dict[str, str] = {}
    for name in fields:
        wire = wire_name(name, prefix_length)
        if wire in seen:
            raise FieldNameError(
                f"Fields '{seen[wire]}' and '{name}' both map to wire name '{wire}'"
            )
        seen[wire] = name
        table[name] = wire
    return table


def reverse_table(fields: Iterable[str], prefix_length: int = 0) -> dict[str, str]:
    """Build the wire -> internal name table for one record type."""
    return {wire: name for name, wire in wire_table(fields, prefix_length).items()}


def field_name(wire: str, fields: Iterable[str], prefix_length: int = 0) -> str | None:
    """
    Recover the internal field for a wire name.

    Returns:
        The matching field name, or None if the wire name is unknown.
    """
    return reverse_table(fields, prefix_length).get(wire)
