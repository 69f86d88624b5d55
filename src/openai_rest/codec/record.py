"""
record.py

PURPOSE: Immutable pydantic base model for request/response bodies.
DEPENDENCIES: pydantic, naming.py

ARCHITECTURE NOTES:
Every record keeps an explicit per-class wire-name table built from the
field-name codec. The table is built (and checked for collisions) when the
subclass is defined, so a bad field catalogue fails at import time.

Encoding walks the table and drops None values, so optional fields the
caller left unset never reach the wire. Decoding maps wire keys back to
attributes and drops keys the record does not know about; the server may
add fields at any time.

The shipped records use snake_case attributes, which map to themselves.
field_prefix_length is the hook for records whose attributes carry a type
prefix in camelCase ("ccrMaxTokens"); the codec strips and converts those.
"""

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, model_validator

from openai_rest.codec.naming import wire_table

# Keyed by class so parametrized generics (OpenAIList[Model]) get their own entry
_WIRE_TABLES: dict[type, dict[str, str]] = {}
_REVERSE_TABLES: dict[type, dict[str, str]] = {}


class Record(BaseModel):
    """Base for all typed request and response bodies."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    # Length of the type prefix carried by attribute names, 0 for snake_case
    field_prefix_length: ClassVar[int] = 0

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls.wire_names()

    @classmethod
    def wire_names(cls) -> dict[str, str]:
        """Return the attribute -> wire name table for this record."""
        table = _WIRE_TABLES.get(cls)
        if table is None:
            table = wire_table(cls.model_fields, cls.field_prefix_length)
            _WIRE_TABLES[cls] = table
            _REVERSE_TABLES[cls] = {wire: name for name, wire in table.items()}
        return table

    @classmethod
    def _attribute_names(cls) -> dict[str, str]:
        cls.wire_names()
        return _REVERSE_TABLES[cls]

    @model_validator(mode="before")
    @classmethod
    def _map_wire_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        attributes = cls._attribute_names()
        fields = cls.model_fields
        mapped: dict[str, Any] = {}
        for key, value in data.items():
            name = attributes.get(key)
            if name is None and key in fields:
                name = key
            if name is not None:
                mapped[name] = value
        return mapped

    def to_wire(self) -> dict[str, Any]:
        """Encode this record as a JSON-ready dict keyed by wire names."""
        payload: dict[str, Any] = {}
        for name, wire in self.wire_names().items():
            value = getattr(self, name)
            if value is None:
                continue
            payload[wire] = _encode_value(value)
        return payload

    @classmethod
    def from_wire(cls, payload: Any) -> Self:
        """
        Decode a JSON object into this record.

        Raises:
            pydantic.ValidationError: If a required field is missing or a
                value has the wrong shape.
        """
        return cls.model_validate(payload)


def _encode_value(value: Any) -> Any:
    if isinstance(value, Record):
        return value.to_wire()
    if isinstance(value, (list, tuple)):
        return [_encode_value(item) for item in value]
    if isinstance(value, dict):
        return {key: _encode_value(item) for key, item in value.items()}
    return value
