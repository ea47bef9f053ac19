"""Table: an ordered map or a dense array of values.

A table in map mode keeps unique Value keys and iterates them in the value
order, not insertion order. In array mode the keys are the ints 0..n-1 and
the table serializes without them.
"""

import reprlib
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, ClassVar, cast

from ._constants import MAX_NESTING_DEPTH
from ._mixin import TableMixin
from ._serializer import serialize_table
from ._value import Value

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._types import Payload, PlainData

__all__ = ["Table", "array_table", "map_table", "to_value"]


def to_value(data: "PlainData") -> Value:
    """Wrap plain Python data in a Value.

    Values are returned unchanged, tables are referenced, and dicts, lists and
    tuples are converted into new tables (recursively).

    Raises:
        TypeError: If the data has no Value representation.
        LimitError: If a number is out of range.
    """
    if isinstance(data, Value):
        return data
    if isinstance(data, TableMixin):
        return Value(data)
    if isinstance(data, (Mapping, list, tuple)):
        return Value(Table(data))
    return Value(data)


class Table(TableMixin):
    """A netvent table in map mode or array mode.

    ``Table()`` is an empty map. A mapping builds a map, a list or tuple builds
    an array with indices assigned by position, and another Table is copied
    shallowly (its mode is kept and nested tables stay shared).

    ``table[key]`` returns a stored value. In map mode an absent key is first
    inserted with ``Value()``; in array mode an absent index raises
    IndexError so that the keys stay dense.
    """

    __slots__: ClassVar[tuple[str, ...]] = (
        "_array",
        "_cached_sorted_keys",
        "_state",
    )

    _array: bool
    _cached_sorted_keys: "list[Value] | None"
    _state: "dict[Value, Value]"

    def __init__(
        self,
        data: "Mapping[object, PlainData] | Sequence[PlainData] | None" = None,
    ) -> None:
        self._state = {}
        self._array = False
        self._cached_sorted_keys = None
        if data is None:
            return
        if isinstance(data, Table):
            self._array = data.is_array
            self._state = dict(data._get_state())
        elif isinstance(data, Mapping):
            for key, item in data.items():
                self._state[to_value(key)] = to_value(item)
        elif isinstance(data, (list, tuple)):
            self._array = True
            for index, item in enumerate(data):
                self._state[Value(index)] = to_value(item)
        else:
            msg = f"cannot build a Table from {type(data).__name__}"
            raise TypeError(msg)

    def _get_state(self) -> "dict[Value, Value]":
        return self._state

    def _coerce_key(self, key: object) -> Value:
        if isinstance(key, Value):
            return key
        return Value(cast("Payload", key))

    @property
    def is_array(self) -> bool:
        """Whether the table is in array mode."""
        return self._array

    def __getitem__(self, key: object) -> Value:
        """Get the value for key, inserting ``Value()`` if a map lacks it.

        Raises:
            IndexError: If the table is an array and the index is absent.
        """
        value_key = self._coerce_key(key)
        state = self._state
        if value_key not in state:
            if self._array:
                msg = f"array index {key!r} out of range for length {len(state)}"
                raise IndexError(msg)
            state[value_key] = Value()
            self._cached_sorted_keys = None
        return state[value_key]

    def __setitem__(self, key: object, value: "PlainData") -> None:
        """Store a value.

        Arrays accept an existing index, or the current length to append.

        Raises:
            IndexError: If the assignment would leave a gap in an array.
        """
        value_key = self._coerce_key(key)
        state = self._state
        if value_key not in state:
            if self._array and value_key != Value(len(state)):
                msg = f"array index {key!r} out of range for length {len(state)}"
                raise IndexError(msg)
            self._cached_sorted_keys = None
        state[value_key] = to_value(value)

    def __delitem__(self, key: object) -> None:
        """Delete an entry from a map.

        Raises:
            KeyError: If the key does not exist.
            TypeError: If the table is an array.
        """
        if self._array:
            msg = "cannot delete from an array table"
            raise TypeError(msg)
        value_key = self._coerce_key(key)
        if value_key not in self._state:
            raise KeyError(key)
        del self._state[value_key]
        self._cached_sorted_keys = None

    def append(self, value: "PlainData") -> None:
        """Append a value to an array.

        Raises:
            TypeError: If the table is a map.
        """
        if not self._array:
            msg = "cannot append to a map table"
            raise TypeError(msg)
        self[len(self._state)] = value

    def serialize(self) -> str:
        """Return the canonical text form of this table."""
        return serialize_table(self)

    @classmethod
    def deserialize(
        cls, data: str, *, max_depth: "int | None" = MAX_NESTING_DEPTH
    ) -> "Table":
        """Parse ``[...]`` or ``{...}`` text into a Table.

        Args:
            data: The text, starting with the opening bracket.
            max_depth: Maximum table nesting, or None for no limit.

        Returns:
            The parsed table, in array mode for ``[`` and map mode for ``{``.

        Raises:
            ParseError: If the text is empty, is not a table, or is malformed.
            LimitError: If tables nest deeper than max_depth.
        """
        from ._parser import parse_table

        return parse_table(data, max_depth=max_depth)

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        return f"Table({self.get_data()!r})"


def map_table(
    mapping: "Mapping[object, PlainData] | None" = None, /, **fields: "PlainData"
) -> Table:
    """Build a map-mode table from a mapping and/or keyword fields.

    Example:
        >>> map_table({"x": 1.5}, y=2.0).serialize()
        '{"x"=1.5,"y"=2.0}'

    Raises:
        TypeError: If mapping is an array-mode table.
    """
    if isinstance(mapping, TableMixin) and mapping.is_array:
        msg = "map_table() needs a mapping, not an array table"
        raise TypeError(msg)
    table = Table(mapping if mapping is not None else {})
    table.update(fields)
    return table


def array_table(items: "Iterable[PlainData]" = ()) -> Table:
    """Build an array-mode table from any iterable, in iteration order."""
    return Table(list(items))
