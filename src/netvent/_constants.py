"""Numeric limits and textual markers of the netvent format."""

# Ints are signed 32-bit
MIN_INT: int = -(2**31)
MAX_INT: int = 2**31 - 1

# Digits after the decimal point in serialized floats
FLOAT_PRECISION: int = 1

# Default table nesting limit for the parser
MAX_NESTING_DEPTH: int = 64

TRUE_LITERAL: str = "true"
FALSE_LITERAL: str = "false"
QUOTE: str = '"'

ARRAY_OPEN: str = "["
ARRAY_CLOSE: str = "]"
OBJECT_OPEN: str = "{"
OBJECT_CLOSE: str = "}"
OPENERS: frozenset[str] = frozenset((ARRAY_OPEN, OBJECT_OPEN))
CLOSERS: frozenset[str] = frozenset((ARRAY_CLOSE, OBJECT_CLOSE))
ELEMENT_SEPARATOR: str = ","
PAIR_SEPARATOR: str = "="

# Event envelope comments
LINE_COMMENT: str = "//"
HASH_COMMENT: str = "#"
