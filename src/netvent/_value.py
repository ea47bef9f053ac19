"""The Value tagged union.

A Value holds exactly one of an int, a float, a bool, a string or a
reference to a Table. Scalars are copied with the value; a table payload is
shared by every Value that wraps it, so mutating the table through one
holder is visible through all of them.
"""

import math
import struct
from typing import TYPE_CHECKING, ClassVar, cast

from ._constants import MAX_INT, MAX_NESTING_DEPTH, MIN_INT
from ._exceptions import LimitError, ValueKindError
from ._mixin import TableMixin
from ._serializer import serialize_value
from ._types import Kind

if TYPE_CHECKING:
    from ._table import Table
    from ._types import Payload

__all__ = ["Value", "compare_values", "to_single"]


def to_single(number: float) -> float:
    """Round a float to the nearest IEEE-754 single precision value.

    Args:
        number: The float to round.

    Returns:
        The rounded value as a Python float.

    Raises:
        LimitError: If the value is NaN, infinite, or too large for single
            precision.
    """
    if not math.isfinite(number):
        msg = f"float {number!r} is not finite"
        raise LimitError(msg)
    try:
        packed = struct.pack("<f", number)
    except OverflowError as e:
        msg = f"float {number!r} is out of range for 32-bit floats"
        raise LimitError(msg) from e
    return cast("float", struct.unpack("<f", packed)[0])


class Value:
    """A single netvent value.

    ``Value()`` is the integer zero, which doubles as the format's null.
    The payload's Python type selects the kind: ``bool`` is checked before
    ``int``, another Value is copied (sharing its table, if any) and a Table
    is held by reference.

    Values are immutable and hashable. They are ordered first by kind
    (int < float < bool < string < table) and then by payload. Table values
    compare by identity, not content: two tables with identical entries are
    distinct values unless they are the same object.
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_data", "_kind")

    _data: "int | float | bool | str | TableMixin"
    _kind: Kind

    def __init__(self, data: "Payload" = 0) -> None:
        if isinstance(data, Value):
            self._kind = data._kind
            self._data = data._data
        elif isinstance(data, bool):
            self._kind = Kind.BOOL
            self._data = data
        elif isinstance(data, int):
            if not MIN_INT <= data <= MAX_INT:
                msg = f"integer {data} is out of range for 32-bit ints"
                raise LimitError(msg)
            self._kind = Kind.INT
            self._data = data
        elif isinstance(data, float):
            self._kind = Kind.FLOAT
            self._data = to_single(data)
        elif isinstance(data, str):
            self._kind = Kind.STRING
            self._data = data
        elif isinstance(data, TableMixin):
            self._kind = Kind.TABLE
            self._data = data
        else:
            msg = f"cannot build a Value from {type(data).__name__}"
            raise TypeError(msg)

    @property
    def kind(self) -> Kind:
        """The kind of payload this value holds."""
        return self._kind

    def is_int(self) -> bool:
        return self._kind is Kind.INT

    def is_float(self) -> bool:
        return self._kind is Kind.FLOAT

    def is_bool(self) -> bool:
        return self._kind is Kind.BOOL

    def is_string(self) -> bool:
        return self._kind is Kind.STRING

    def is_table(self) -> bool:
        return self._kind is Kind.TABLE

    def _sort_payload(self) -> "int | float | str":
        if self._kind is Kind.TABLE:
            return id(self._data)
        return cast("int | float | str", self._data)

    def _expect(self, kind: Kind) -> object:
        if self._kind is not kind:
            raise ValueKindError(kind.name.lower(), self._kind.name.lower())
        return self._data

    def as_int(self) -> int:
        """Return the int payload.

        Raises:
            ValueKindError: If the value is not an int.
        """
        return cast("int", self._expect(Kind.INT))

    def as_float(self) -> float:
        """Return the float payload.

        Raises:
            ValueKindError: If the value is not a float.
        """
        return cast("float", self._expect(Kind.FLOAT))

    def as_bool(self) -> bool:
        """Return the bool payload.

        Raises:
            ValueKindError: If the value is not a bool.
        """
        return cast("bool", self._expect(Kind.BOOL))

    def as_string(self) -> str:
        """Return the string payload.

        Raises:
            ValueKindError: If the value is not a string.
        """
        return cast("str", self._expect(Kind.STRING))

    def as_table(self) -> "Table":
        """Return the referenced table. Mutations are shared with all holders.

        Raises:
            ValueKindError: If the value is not a table.
        """
        return cast("Table", self._expect(Kind.TABLE))

    def serialize(self) -> str:
        """Return the canonical text form of this value."""
        return serialize_value(self)

    @classmethod
    def deserialize(
        cls, data: str, *, max_depth: "int | None" = MAX_NESTING_DEPTH
    ) -> "Value":
        """Parse a text fragment into a Value.

        Args:
            data: The fragment. It is not stripped.
            max_depth: Maximum table nesting, or None for no limit.

        Returns:
            The parsed value. Unrecognised fragments become strings.

        Raises:
            ParseError: If the fragment is empty or a table in it is malformed.
            LimitError: If tables nest deeper than max_depth.
        """
        from ._parser import parse_value

        return parse_value(data, max_depth=max_depth)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return compare_values(self, other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return compare_values(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return compare_values(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return compare_values(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return compare_values(self, other) >= 0

    def __hash__(self) -> int:
        if self._kind is Kind.TABLE:
            return hash((self._kind, id(self._data)))
        return hash((self._kind, self._data))

    def __repr__(self) -> str:
        return f"Value({self._data!r})"

    def __str__(self) -> str:
        return self.serialize()


def compare_values(a: Value, b: Value) -> int:
    """Compare two values by the netvent total order.

    Kinds are compared first. Payloads of the same kind use their natural
    order, except tables, which are ordered by object identity.

    Args:
        a: The first value.
        b: The second value.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b.
    """
    if a.kind is not b.kind:
        return -1 if a.kind < b.kind else 1
    left = a._sort_payload()
    right = b._sort_payload()
    if left == right:
        return 0
    return -1 if left < right else 1
