"""Event envelope: an event name followed by ``key value`` lines.

Example:
    "shoot"
    gun_active true
    player_name "this person"
    x 0
    y 0.1

Decoding is line oriented and permissive. ``//`` starts a comment that runs
to the end of the line, lines starting with ``#`` are comments, and lines
that do not have a space after the key are skipped. A malformed value on an
otherwise well-formed line still raises.
"""

import logging
from typing import TYPE_CHECKING, NamedTuple

from ._constants import HASH_COMMENT, LINE_COMMENT, MAX_NESTING_DEPTH
from ._exceptions import InvalidKeyError
from ._parser import parse_value
from ._table import to_value
from ._value import Value

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from ._types import PlainData

__all__ = ["Event", "deserialize_event", "serialize_event"]

logger = logging.getLogger(__name__)

_BLANKS = " \t"


class Event(NamedTuple):
    """A decoded event. Unpacks as ``name, data``."""

    name: Value
    data: dict[str, Value]


def _validate_field_name(key: str) -> None:
    if not key:
        msg = "event field name must not be empty"
        raise InvalidKeyError(msg)
    if any(char.isspace() for char in key):
        msg = f"event field name {key!r} must not contain whitespace"
        raise InvalidKeyError(msg)
    if key.startswith(HASH_COMMENT) or LINE_COMMENT in key:
        msg = f"event field name {key!r} would be read as a comment"
        raise InvalidKeyError(msg)


def serialize_event(name: "PlainData", data: "Mapping[str, PlainData]") -> str:
    """Encode an event as envelope text.

    The first line is the serialized event name. Each field follows on its
    own line as ``key value``, in sorted key order. Every line, including
    the last, ends with a newline.

    Args:
        name: The event name, usually a string.
        data: Field names mapped to values or plain Python data.

    Returns:
        The envelope text.

    Raises:
        InvalidKeyError: If a field name is empty, contains whitespace, or
            would be read back as a comment.
    """
    lines = [to_value(name).serialize()]
    for key in sorted(data):
        _validate_field_name(key)
        lines.append(f"{key} {to_value(data[key]).serialize()}")
    return "".join(f"{line}\n" for line in lines)


def _content_lines(text: str) -> "Iterator[tuple[int, str]]":
    """Yield (line number, content) with comments and blank lines removed."""
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.lstrip(_BLANKS)
        comment = line.find(LINE_COMMENT)
        if comment != -1:
            line = line[:comment]
        line = line.rstrip(_BLANKS)
        if not line or line.startswith(HASH_COMMENT):
            continue
        yield number, line


def deserialize_event(
    text: str, *, max_depth: "int | None" = MAX_NESTING_DEPTH
) -> Event:
    """Decode envelope text into an event name and its fields.

    Args:
        text: The envelope text.
        max_depth: Maximum table nesting for each value, or None for no limit.

    Returns:
        The event. The name is ``Value()`` when the text has no content
        lines. Fields are ordered by key; a repeated key keeps its last value.

    Raises:
        ParseError: If the name or a field value is malformed.
        LimitError: If a value nests tables deeper than max_depth.
    """
    lines = _content_lines(text)
    first = next(lines, None)
    if first is None:
        return Event(Value(), {})
    name = parse_value(first[1], max_depth=max_depth)

    fields: dict[str, Value] = {}
    for number, line in lines:
        key, space, rest = line.partition(" ")
        value_text = rest.strip(_BLANKS)
        if not space or not value_text:
            logger.debug("Skipping envelope line %d without a value: %r", number, line)
            continue
        fields[key] = parse_value(value_text, max_depth=max_depth)
    return Event(name, dict(sorted(fields.items())))
