"""orderlex - parser for comment-tolerant order record text.

An order record is an id, a quoted name, a declared count, and exactly that
many (index, quantity) data pairs, with whitespace and "#" line comments
allowed between any two tokens:

    100           # id
    "hawaiian"    # name
    2             # number of data pairs
    0 0.0
    1 1.1

Public API:
    parse_record - Parse one record (returns ParsedRecord or ParseError)
    serialize_record - Serialize a Record back to record text
    RecordParser - Configurable parser with a raising parse_strict() front end
    Record, DataPair, ParsedRecord, ParseError - Result types
    TrailingPolicy - Trailing-input policy for parse_strict()

Exceptions:
    OrderLexError - Base exception class
    RecordSyntaxError - Raised by parse_strict() on malformed input
    TrailingInputError - Raised by parse_strict() when trailing input is rejected

Submodules:
    orderlex.syntax - Cursor, parser, record model, serializer
    orderlex.diagnostics - Diagnostic codes, templates, formatter, exceptions
"""

from .diagnostics import OrderLexError, RecordSyntaxError, TrailingInputError
from .enums import TrailingPolicy
from .syntax import DataPair, ParsedRecord, ParseError, Record, RecordParser
from .syntax import parse as parse_record
from .syntax import serialize as serialize_record

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("orderlex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DataPair",
    "OrderLexError",
    "ParseError",
    "ParsedRecord",
    "Record",
    "RecordParser",
    "RecordSyntaxError",
    "TrailingInputError",
    "TrailingPolicy",
    "__version__",
    "parse_record",
    "serialize_record",
]
