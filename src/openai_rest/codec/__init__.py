"""JSON field-name codec and record base."""

from openai_rest.codec.naming import (
    FieldNameError,
    field_name,
    reverse_table,
    wire_name,
    wire_table,
)
from openai_rest.codec.record import Record

__all__ = [
    "FieldNameError",
    "Record",
    "field_name",
    "reverse_table",
    "wire_name",
    "wire_table",
]
