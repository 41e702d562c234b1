"""Serialize records back to record text.

Converts Record nodes to text the parser accepts. Useful for:
- Generating fixtures
- Property-based testing (roundtrip: parse -> serialize -> parse)

Python 3.13+.
"""

import logging

from orderlex.constants import QUOTE_CHAR

from .model import DataPair, Record

__all__ = ["SerializationValidationError", "serialize"]

logger = logging.getLogger(__name__)

# Column where trailing comments start in annotated output.
_COMMENT_COLUMN = 16


class SerializationValidationError(ValueError):
    """Raised when a Record cannot be written as valid record text.

    Causes: an empty name, or a name containing the quote character.
    """


def _validate(record: Record) -> None:
    if not record.name:
        msg = f"Record {record.id}: name must not be empty"
        raise SerializationValidationError(msg)
    if QUOTE_CHAR in record.name:
        msg = f"Record {record.id}: name {record.name!r} contains {QUOTE_CHAR!r}"
        raise SerializationValidationError(msg)


def _format_pair(item: DataPair) -> str:
    # repr() gives the shortest string that round-trips through float(),
    # and "inf", "-inf" or "nan" for non-finite quantities
    return f"{item.index} {item.quantity!r}"


def _annotated(value: str, comment: str) -> str:
    return f"{value:<{_COMMENT_COLUMN}}# {comment}"


def serialize(record: Record, *, annotate: bool = False) -> str:
    """Serialize a Record to record text.

    Args:
        record: Record to serialize
        annotate: Write one token group per line with a trailing comment
            describing each line. Default is a single line.

    Returns:
        Record text. Annotated output ends with a newline so that every
        comment span is terminated.

    Raises:
        SerializationValidationError: If the record cannot be expressed

    Example:
        >>> record = Record(100, "hawaiian", 2, (DataPair(0, 0.0), DataPair(1, 1.1)))
        >>> serialize(record)
        '100 "hawaiian" 2 0 0.0 1 1.1'
    """
    _validate(record)
    name = f"{QUOTE_CHAR}{record.name}{QUOTE_CHAR}"

    if not annotate:
        parts = [str(record.id), name, str(record.declared_count)]
        parts.extend(_format_pair(item) for item in record.items)
        text = " ".join(parts)
    else:
        lines = [
            _annotated(str(record.id), "id"),
            _annotated(name, "name"),
            _annotated(str(record.declared_count), "number of data pairs"),
        ]
        lines.extend(_annotated(_format_pair(item), "index and quantity") for item in record.items)
        text = "\n".join(lines) + "\n"

    logger.debug("Serialized record %d (%d characters)", record.id, len(text))
    return text
