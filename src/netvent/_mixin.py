"""Mixin class providing the table mapping interface.

This module provides TableMixin, an abstract base class that implements the
ordered read operations and the MutableMapping helpers of a table on top of
a small set of primitives supplied by the concrete Table class.
"""

from abc import ABC, ABCMeta, abstractmethod
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import TYPE_CHECKING, ClassVar, cast, overload

from ._exceptions import LimitError

if TYPE_CHECKING:
    from ._types import PlainData
    from ._value import Value

__all__ = ["TableMixin"]


class TableMixin(ABC):
    """Mixin providing the table interface including MutableMapping helpers.

    Subclasses must implement:
    - _get_state(): Returns the dict[Value, Value] holding the entries
    - _coerce_key(key): Converts a plain key to a Value
    - is_array: Whether the table is in array mode
    - __getitem__, __setitem__ and __delitem__

    Subclasses must also have a `_cached_sorted_keys: list[Value] | None` slot
    and reset it to None whenever a key is added or removed.
    """

    __slots__: ClassVar[tuple[str, ...]] = ()

    # Subclasses must have this as a slot attribute
    _cached_sorted_keys: "list[Value] | None"

    @abstractmethod
    def _get_state(self) -> "dict[Value, Value]":
        """Return the state dictionary to read from."""
        ...

    @abstractmethod
    def _coerce_key(self, key: object) -> "Value":
        """Convert a key to a Value.

        Raises:
            TypeError: If the key has no Value representation.
            LimitError: If a numeric key is out of range.
        """
        ...

    @property
    @abstractmethod
    def is_array(self) -> bool:
        """Whether the table is in array mode."""
        ...

    @abstractmethod
    def __getitem__(self, key: object) -> "Value": ...

    @abstractmethod
    def __setitem__(self, key: object, value: "PlainData") -> None: ...

    @abstractmethod
    def __delitem__(self, key: object) -> None: ...

    def _sorted_keys(self) -> "list[Value]":
        """Return keys sorted by the value order."""
        if self._cached_sorted_keys is None:
            self._cached_sorted_keys = sorted(self._get_state())
        return self._cached_sorted_keys

    def get_is_array(self) -> bool:
        """Report whether the table is in array mode."""
        return self.is_array

    def get_data(self) -> "list[Value] | dict[Value, Value]":
        """Return a snapshot of the table's contents.

        Returns:
            For an array, a list of the elements in index order. For a map,
            a dict of all entries in key order. The containers are new; the
            values in them are shared with the table.
        """
        if self.is_array:
            return self.values()
        state = self._get_state()
        return {k: state[k] for k in self._sorted_keys()}

    def keys(self) -> "list[Value]":
        """Get all keys in key order."""
        return list(self._sorted_keys())

    def values(self) -> "list[Value]":
        """Get all values in key order."""
        state = self._get_state()
        return [state[k] for k in self._sorted_keys()]

    def items(self) -> "list[tuple[Value, Value]]":
        """Get all key-value pairs in key order."""
        state = self._get_state()
        return [(k, state[k]) for k in self._sorted_keys()]

    def count(self) -> int:
        """Get the number of entries."""
        return len(self._get_state())

    @overload
    def get(self, key: object) -> "Value | None": ...  # pragma: no cover

    @overload
    def get(self, key: object, default: "Value") -> "Value": ...  # pragma: no cover

    def get(self, key: object, default: "Value | None" = None) -> "Value | None":
        """Get a value by key without inserting it.

        Unlike ``table[key]``, a missing key is never auto-vivified.

        Args:
            key: The key to look up.
            default: Value to return if key not found. Defaults to None.

        Returns:
            The stored value if found, otherwise the default value.
        """
        return self._get_state().get(self._coerce_key(key), default)

    def __contains__(self, key: object) -> bool:
        """Check if a key exists.

        Args:
            key: The key to check. Keys with no Value representation are
                never present.

        Returns:
            True if the key exists, False otherwise.
        """
        try:
            value_key = self._coerce_key(key)
        except (TypeError, LimitError):
            return False
        return value_key in self._get_state()

    def __iter__(self) -> "Iterator[Value]":
        """Iterate over keys in sorted order."""
        return iter(self._sorted_keys())

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._get_state())

    def pop(self, key: object, *args: "Value") -> "Value":
        """Remove and return the value for key.

        Args:
            key: The key to remove.
            *args: Optional default value if key not found.

        Returns:
            The removed value, or default if provided and key not found.

        Raises:
            KeyError: If key not found and no default provided.
            TypeError: If the table is in array mode.
        """
        if len(args) > 1:
            msg = f"pop expected at most 2 arguments, got {1 + len(args)}"
            raise TypeError(msg)
        if self.is_array:
            msg = "cannot pop from an array table"
            raise TypeError(msg)
        value_key = self._coerce_key(key)
        state = self._get_state()
        if value_key not in state:
            if args:
                return args[0]
            raise KeyError(key)
        value = state[value_key]
        del self[value_key]
        return value

    def popitem(self) -> "tuple[Value, Value]":
        """Remove and return the first (key, value) pair in key order.

        Raises:
            KeyError: If the table is empty.
            TypeError: If the table is in array mode.
        """
        if self.is_array:
            msg = "cannot pop from an array table"
            raise TypeError(msg)
        try:
            key = next(iter(self))
        except StopIteration:
            msg = "popitem(): table is empty"
            raise KeyError(msg) from None
        value = self._get_state()[key]
        del self[key]
        return key, value

    def setdefault(self, key: object, default: "PlainData" = 0) -> "Value":
        """Get the value for key, storing default first if it is absent.

        Returns:
            The existing value if found, otherwise the stored default.
        """
        value_key = self._coerce_key(key)
        state = self._get_state()
        if value_key not in state:
            self[value_key] = default
        return state[value_key]

    def update(
        self,
        other: "Mapping[object, PlainData] | Iterable[tuple[object, PlainData]] | None" = None,
        /,
        **kwargs: "PlainData",
    ) -> None:
        """Update table from mapping/iterable and/or keyword arguments.

        Args:
            other: A mapping or iterable of (key, value) pairs.
            **kwargs: Additional key=value pairs (keys become string values).
        """
        if other is not None:
            if isinstance(other, Mapping):
                mapping = cast("Mapping[object, PlainData]", other)
                for key in mapping:
                    self[key] = mapping[key]
            else:
                for key, value in other:
                    self[key] = value
        for str_key, value in kwargs.items():
            self[str_key] = value


_ = cast("ABCMeta", cast("object", MutableMapping)).register(TableMixin)
