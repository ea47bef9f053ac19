"""Type aliases and the value kind enumeration for netvent.

This module contains ONLY definitions with no dependencies on other netvent
modules. It exists to break circular imports between _value.py, _table.py,
_serializer.py and _parser.py:
- _value.py needs Kind to tag its payload
- _serializer.py dispatches on Kind without importing Value
- _table.py needs Value, and _value.py needs to recognise tables

By placing the shared names here, all modules can safely import from _types.py.
"""

from enum import IntEnum
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ._table import Table
    from ._value import Value


class Kind(IntEnum):
    """The active member of a Value.

    The numeric order of the members is the primary ordering of values:
    every int sorts before every float, every float before every bool, and
    so on.
    """

    INT = 0
    FLOAT = 1
    BOOL = 2
    STRING = 3
    TABLE = 4


Scalar: TypeAlias = "int | float | bool | str"
"""A Python payload that maps directly onto a scalar Value."""

Payload: TypeAlias = "Scalar | Value | Table"
"""Anything the Value constructor accepts."""

PlainData: TypeAlias = (
    "Payload | Mapping[object, PlainData] | list[PlainData] | tuple[PlainData, ...]"
)
"""Plain Python data that a Table can wrap, including nested containers."""
