"""Exception hierarchy for netvent.

All library errors derive from NetventError so callers can catch the whole
family with a single except clause.
"""

__all__ = [
    "EmptyInputError",
    "InvalidKeyError",
    "LimitError",
    "MalformedStructureError",
    "MissingSeparatorError",
    "NetventError",
    "ParseError",
    "UnknownFormError",
    "ValueKindError",
]


class NetventError(Exception):
    """Base class for all netvent errors."""


class ParseError(NetventError):
    """Text could not be decoded into a Value or Table."""


class EmptyInputError(ParseError):
    """An empty fragment was given to the parser."""


class MalformedStructureError(ParseError):
    """A table fragment lacks its closing bracket or its brackets do not balance."""


class MissingSeparatorError(ParseError):
    """An object entry has no '=' between key and value."""


class UnknownFormError(ParseError):
    """A fragment parsed as a table starts with neither '[' nor '{'."""


class LimitError(NetventError):
    """A numeric range or nesting limit was exceeded."""


class InvalidKeyError(NetventError):
    """An event field name cannot be written as a bare key."""


class ValueKindError(NetventError, TypeError):
    """A Value accessor was called for a kind the value does not hold.

    Attributes:
        expected: The kind the accessor reads.
        actual: The kind the value holds.
    """

    def __init__(self, expected: str, actual: str) -> None:
        self.expected: str = expected
        self.actual: str = actual
        super().__init__(f"expected {expected} value, got {actual}")
