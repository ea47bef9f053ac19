"""A compact, self-describing text format for typed event data."""

from importlib.metadata import version

from ._envelope import Event, deserialize_event, serialize_event
from ._exceptions import (
    EmptyInputError,
    InvalidKeyError,
    LimitError,
    MalformedStructureError,
    MissingSeparatorError,
    NetventError,
    ParseError,
    UnknownFormError,
    ValueKindError,
)
from ._parser import parse_table, parse_value
from ._serializer import serialize_table, serialize_value
from ._table import Table, array_table, map_table, to_value
from ._types import Kind
from ._value import Value, compare_values

__version__ = version("netvent")

__all__ = [
    "EmptyInputError",
    "Event",
    "InvalidKeyError",
    "Kind",
    "LimitError",
    "MalformedStructureError",
    "MissingSeparatorError",
    "NetventError",
    "ParseError",
    "Table",
    "UnknownFormError",
    "Value",
    "ValueKindError",
    "__version__",
    "array_table",
    "compare_values",
    "deserialize_event",
    "map_table",
    "parse_table",
    "parse_value",
    "serialize_event",
    "serialize_table",
    "serialize_value",
    "to_value",
]
