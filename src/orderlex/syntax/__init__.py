"""Record syntax package.

Provides the record parser, record node definitions and serialization.

Python 3.13+.
"""

from .cursor import Cursor, ParseError, ParseResult
from .model import DataPair, ParsedRecord, Record, Span
from .parser import RecordParser
from .serializer import SerializationValidationError, serialize

__all__ = [
    "Cursor",
    "DataPair",
    "ParseError",
    "ParseResult",
    "ParsedRecord",
    "Record",
    "RecordParser",
    "SerializationValidationError",
    "Span",
    "parse",
    "serialize",
]


def parse(source: str) -> ParsedRecord | ParseError:
    """Parse one record from source.

    Convenience function for RecordParser().parse().

    Args:
        source: Record text

    Returns:
        ParsedRecord on success, ParseError (with diagnostic) on failure

    Example:
        >>> from orderlex.syntax import parse
        >>> result = parse('101 "bbq chicken" 3 0 0.0 1 1.1 2 2.2')
        >>> result.record.items[2].quantity
        2.2
    """
    parser = RecordParser()
    return parser.parse(source)
