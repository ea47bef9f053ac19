"""Canonical text encoding of values and tables.

The output contains no whitespace. Map keys are written in the value order,
so two tables with the same entries always serialize to the same text.
"""

from typing import TYPE_CHECKING

from ._constants import (
    ARRAY_CLOSE,
    ARRAY_OPEN,
    ELEMENT_SEPARATOR,
    FALSE_LITERAL,
    FLOAT_PRECISION,
    OBJECT_CLOSE,
    OBJECT_OPEN,
    PAIR_SEPARATOR,
    QUOTE,
    TRUE_LITERAL,
)
from ._exceptions import LimitError
from ._types import Kind

if TYPE_CHECKING:
    from ._mixin import TableMixin
    from ._value import Value

__all__ = ["serialize_table", "serialize_value"]


def serialize_value(value: "Value") -> str:
    """Serialize a value to its canonical text form.

    Floats are written with exactly one decimal digit, so more precise floats
    do not survive a round trip. Strings are quoted but not escaped.

    Args:
        value: The value to serialize.

    Returns:
        The canonical text.

    Raises:
        LimitError: If a table in the value contains itself or tables nest
            deeper than the interpreter recursion limit.
    """
    try:
        return _write_value(value, set())
    except RecursionError:
        msg = "nesting depth exceeds maximum recursion depth"
        raise LimitError(msg) from None


def serialize_table(table: "TableMixin") -> str:
    """Serialize a table to ``[a,b]`` (array mode) or ``{k=v}`` (map mode).

    Args:
        table: The table to serialize.

    Returns:
        The canonical text.

    Raises:
        LimitError: If the table contains itself or tables nest deeper than
            the interpreter recursion limit.
    """
    try:
        return _write_table(table, set())
    except RecursionError:
        msg = "nesting depth exceeds maximum recursion depth"
        raise LimitError(msg) from None


def _write_value(value: "Value", active: set[int]) -> str:
    kind = value.kind
    if kind is Kind.INT:
        return str(value.as_int())
    if kind is Kind.FLOAT:
        return f"{value.as_float():.{FLOAT_PRECISION}f}"
    if kind is Kind.BOOL:
        return TRUE_LITERAL if value.as_bool() else FALSE_LITERAL
    if kind is Kind.STRING:
        return f"{QUOTE}{value.as_string()}{QUOTE}"
    return _write_table(value.as_table(), active)


def _write_table(table: "TableMixin", active: set[int]) -> str:
    # ids of the tables currently being written, to catch aliasing cycles
    marker = id(table)
    if marker in active:
        msg = "cannot serialize a table that contains itself"
        raise LimitError(msg)
    active.add(marker)
    if table.is_array:
        body = ELEMENT_SEPARATOR.join(
            _write_value(item, active) for item in table.values()
        )
        text = f"{ARRAY_OPEN}{body}{ARRAY_CLOSE}"
    else:
        body = ELEMENT_SEPARATOR.join(
            f"{_write_value(key, active)}{PAIR_SEPARATOR}{_write_value(item, active)}"
            for key, item in table.items()
        )
        text = f"{OBJECT_OPEN}{body}{OBJECT_CLOSE}"
    active.discard(marker)
    return text
