"""Recursive-descent decoding of netvent text.

A value fragment is classified by an ordered chain of attempts: number, then
boolean literal, then quoted string, then table. A fragment that matches
none of them is kept as an unquoted string, which lets bare identifiers be
used where a string is expected.

A number must span the whole fragment. Signs other than a leading ``-``,
surrounding whitespace, exponents and trailing text are not read as a
numeric prefix, so ``+5``, `` 42``, ``12abc`` and ``1.5.3`` all stay strings.

Tables are split into elements with a single bracket depth counter that
does not tell ``[`` from ``{``. Only the outer bracket pair and a zero final
depth are checked, so interleavings such as ``[{]}`` inside a table are not
reported as mismatched. Brackets and commas inside quoted strings are
counted like any other character.
"""

import re

from ._constants import (
    ARRAY_CLOSE,
    ARRAY_OPEN,
    CLOSERS,
    ELEMENT_SEPARATOR,
    FALSE_LITERAL,
    MAX_INT,
    MAX_NESTING_DEPTH,
    MIN_INT,
    OBJECT_CLOSE,
    OPENERS,
    PAIR_SEPARATOR,
    QUOTE,
    TRUE_LITERAL,
)
from ._exceptions import (
    EmptyInputError,
    LimitError,
    MalformedStructureError,
    MissingSeparatorError,
    UnknownFormError,
)
from ._table import Table
from ._value import Value

__all__ = ["parse_table", "parse_value", "split_top_level"]

_INT_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"-?[0-9]+\.[0-9]+")

# Significant digits in the widest 32-bit int
_MAX_INT_DIGITS = len(str(MAX_INT))


def parse_value(data: str, *, max_depth: "int | None" = MAX_NESTING_DEPTH) -> Value:
    """Parse a text fragment into a Value.

    Args:
        data: The fragment. Surrounding whitespace is significant.
        max_depth: Maximum table nesting, or None for no limit.

    Returns:
        The parsed value.

    Raises:
        EmptyInputError: If the fragment is empty.
        MalformedStructureError: If a table lacks its closing bracket or its
            brackets do not balance.
        MissingSeparatorError: If an object entry has no '='.
        LimitError: If tables nest deeper than max_depth.
    """
    try:
        return _parse_value(data, 0, max_depth)
    except RecursionError:
        msg = "nesting depth exceeds maximum recursion depth"
        raise LimitError(msg) from None


def parse_table(data: str, *, max_depth: "int | None" = MAX_NESTING_DEPTH) -> Table:
    """Parse ``[...]`` or ``{...}`` text into a Table.

    Args:
        data: The text, starting with the opening bracket.
        max_depth: Maximum table nesting, or None for no limit.

    Returns:
        The parsed table.

    Raises:
        EmptyInputError: If the text is empty.
        UnknownFormError: If the text starts with neither '[' nor '{'.
        MalformedStructureError: If the closing bracket is missing or the
            brackets do not balance.
        MissingSeparatorError: If an object entry has no '='.
        LimitError: If tables nest deeper than max_depth.
    """
    try:
        return _parse_table(data, 1, max_depth)
    except RecursionError:
        msg = "nesting depth exceeds maximum recursion depth"
        raise LimitError(msg) from None


def split_top_level(content: str) -> list[str]:
    """Split the interior of a table at commas that are not nested.

    Segments are stripped of surrounding whitespace and empty segments, such
    as the one after a trailing comma, are dropped.

    Args:
        content: The text between a table's outer brackets.

    Returns:
        The non-empty segments in order.

    Raises:
        MalformedStructureError: If the brackets in content do not balance.
    """
    segments: list[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(content):
        if char in OPENERS:
            depth += 1
        elif char in CLOSERS:
            depth -= 1
        elif char == ELEMENT_SEPARATOR and depth == 0:
            segments.append(content[start:index])
            start = index + 1
    if depth != 0:
        msg = f"unbalanced brackets in {content!r}"
        raise MalformedStructureError(msg)
    segments.append(content[start:])
    stripped = (segment.strip() for segment in segments)
    return [segment for segment in stripped if segment]


def _parse_number(text: str) -> "Value | None":
    # None means "not a number"; the caller falls through to other forms
    if "." in text:
        if _FLOAT_RE.fullmatch(text) is None:
            return None
        try:
            return Value(float(text))
        except LimitError:
            return None
    if _INT_RE.fullmatch(text) is None:
        return None
    digits = text.lstrip("-").lstrip("0")
    if len(digits) > _MAX_INT_DIGITS:
        return None
    integer = int(digits or "0")
    if text.startswith("-"):
        integer = -integer
    if not MIN_INT <= integer <= MAX_INT:
        return None
    return Value(integer)


def _parse_value(text: str, depth: int, max_depth: "int | None") -> Value:
    if not text:
        msg = "cannot parse a value from empty input"
        raise EmptyInputError(msg)

    number = _parse_number(text)
    if number is not None:
        return number

    if text == TRUE_LITERAL:
        return Value(True)
    if text == FALSE_LITERAL:
        return Value(False)

    if len(text) >= 2 and text[0] == QUOTE and text[-1] == QUOTE:
        return Value(text[1:-1])

    if text[0] in OPENERS:
        return Value(_parse_table(text, depth + 1, max_depth))

    return Value(text)


def _parse_table(text: str, depth: int, max_depth: "int | None") -> Table:
    if not text:
        msg = "cannot parse a table from empty input"
        raise EmptyInputError(msg)

    opener = text[0]
    if opener not in OPENERS:
        msg = f"expected '[' or '{{' at start of table, got {opener!r}"
        raise UnknownFormError(msg)
    closer = ARRAY_CLOSE if opener == ARRAY_OPEN else OBJECT_CLOSE
    if len(text) < 2 or text[-1] != closer:
        msg = f"missing closing {closer!r} in {text!r}"
        raise MalformedStructureError(msg)

    if max_depth is not None and depth > max_depth:
        msg = f"nesting depth {depth} exceeds maximum {max_depth}"
        raise LimitError(msg)

    segments = split_top_level(text[1:-1])

    if opener == ARRAY_OPEN:
        return Table([_parse_value(segment, depth, max_depth) for segment in segments])

    table = Table()
    for segment in segments:
        key_text, separator, value_text = segment.partition(PAIR_SEPARATOR)
        if not separator:
            msg = f"missing '=' in object entry {segment!r}"
            raise MissingSeparatorError(msg)
        key_text = key_text.strip()
        value_text = value_text.strip()
        # Entries with an empty side are dropped
        if not key_text or not value_text:
            continue
        table[_parse_value(key_text, depth, max_depth)] = _parse_value(
            value_text, depth, max_depth
        )
    return table
