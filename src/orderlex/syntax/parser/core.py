"""Core record parser implementation.

This module provides the RecordParser class that turns record text into
a :class:`~orderlex.syntax.model.Record`.

Grammar:
    record        ::= WS* UINT WS* quoted-string WS* UINT (WS* pair){count}
    quoted-string ::= '"' (any-char-except '"')+ '"'
    pair          ::= UINT WS* FLOAT
    WS            ::= whitespace | '#' (any-char-except newline)* newline

Architecture:
    The parse is an ordered pipeline of fallible steps. Each step takes an
    immutable :class:`~orderlex.syntax.cursor.Cursor` and returns either a
    :class:`~orderlex.syntax.cursor.ParseResult` or a
    :class:`~orderlex.syntax.cursor.ParseError`. The first ParseError ends
    the parse: there is no backtracking and no attempt to read the input as
    some other record shape. The failing error is passed once through the
    :class:`~orderlex.syntax.parser.reporting.ErrorReporter` and returned.

    The number of data pairs is read from the input itself. The declared
    count is held in a local of the current call and drives an explicit
    count-bounded loop, so no parse state survives between calls.

Security:
    Includes a configurable input size limit.
"""

import logging

from orderlex.constants import MAX_SOURCE_SIZE
from orderlex.diagnostics import ErrorTemplate, RecordSyntaxError, TrailingInputError
from orderlex.enums import TrailingPolicy
from orderlex.syntax.cursor import Cursor, ParseError, ParseResult
from orderlex.syntax.model import DataPair, ParsedRecord, Record, Span
from orderlex.syntax.parser.primitives import read_pair, read_quoted_string, read_unsigned
from orderlex.syntax.parser.reporting import ErrorReporter
from orderlex.syntax.parser.whitespace import skip_trivia

__all__ = [
    "EXPECTED_DECLARED_COUNT",
    "EXPECTED_RECORD_ID",
    "RecordParser",
    "read_pairs",
    "read_record",
]

logger = logging.getLogger(__name__)

EXPECTED_RECORD_ID = "record id"
EXPECTED_DECLARED_COUNT = "declared count"


def read_pairs(cursor: Cursor, count: int) -> ParseResult[tuple[DataPair, ...]] | ParseError:
    """Read exactly count data pairs, skipping trivia before each.

    Args:
        cursor: Position right after the declared count
        count: Number of pairs the record declared

    Returns:
        ParseResult with the pairs in input order, or the first ParseError.
        Running out of input before count pairs yields UNEXPECTED_EOF.
    """
    items: list[DataPair] = []
    for _ in range(count):
        pair = read_pair(skip_trivia(cursor))
        if isinstance(pair, ParseError):
            return pair
        items.append(pair.value)
        cursor = pair.cursor
    return ParseResult(tuple(items), cursor)


def read_record(cursor: Cursor) -> ParseResult[Record] | ParseError:
    """Read one record starting at cursor.

    Steps, each preceded by the skipper:
        1. record id (unsigned integer)
        2. quoted name
        3. declared count (unsigned integer)
        4. exactly declared-count data pairs

    The returned cursor sits right after the last data pair. Trailing input
    is not consumed.

    Returns:
        ParseResult(Record, cursor) or the first unreported ParseError
    """
    start = skip_trivia(cursor)

    record_id = read_unsigned(start, EXPECTED_RECORD_ID)
    if isinstance(record_id, ParseError):
        return record_id

    name = read_quoted_string(skip_trivia(record_id.cursor))
    if isinstance(name, ParseError):
        return name

    count = read_unsigned(skip_trivia(name.cursor), EXPECTED_DECLARED_COUNT)
    if isinstance(count, ParseError):
        return count
    declared_count = count.value

    items = read_pairs(count.cursor, declared_count)
    if isinstance(items, ParseError):
        return items

    record = Record(
        id=record_id.value,
        name=name.value,
        declared_count=declared_count,
        items=items.value,
        span=Span(start=start.pos, end=items.cursor.pos),
    )
    return ParseResult(record, items.cursor)


class RecordParser:
    """Order record parser using the immutable cursor pattern.

    Design:
    - Every step takes a Cursor and returns ParseResult[T] | ParseError
    - First failure is fatal and reported exactly once
    - Instances hold only configuration, so one parser may be shared
      freely between threads and calls

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MiB)
    """

    __slots__ = ("_max_source_size", "_reporter")

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser with an optional size limit.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                            Set to 0 to disable the limit.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._reporter = ErrorReporter()

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    def parse(self, source: str) -> ParsedRecord | ParseError:
        """Parse one record from source.

        Args:
            source: Record text

        Returns:
            :class:`~orderlex.syntax.model.ParsedRecord` on success, with
            ``fully_consumed`` telling whether input remains, or a reported
            :class:`~orderlex.syntax.cursor.ParseError` carrying a diagnostic.

        Raises:
            ValueError: If source exceeds max_source_size

        Example:
            >>> parsed = RecordParser().parse('100 "hawaiian" 2 0 0.0 1 1.1')
            >>> parsed.record.name
            'hawaiian'
            >>> parsed.fully_consumed
            True
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in RecordParser constructor to increase limit."
            )
            raise ValueError(msg)

        result = read_record(Cursor(source, 0))

        if isinstance(result, ParseError):
            reported = self._reporter.report(result)
            logger.debug(
                "Record parse failed: %s expecting %s at position %d",
                reported.code.name,
                reported.expected,
                reported.position,
            )
            return reported

        parsed = ParsedRecord(result.value, result.cursor)
        if parsed.fully_consumed:
            logger.debug(
                "Parsed record %d with %d data pair(s)",
                parsed.record.id,
                parsed.record.declared_count,
            )
        else:
            logger.info(
                "Parsed record %d; %d character(s) of trailing input left at position %d",
                parsed.record.id,
                len(parsed.remainder),
                parsed.cursor.pos,
            )
        return parsed

    def parse_strict(
        self, source: str, *, trailing: TrailingPolicy = TrailingPolicy.ALLOW
    ) -> Record:
        """Parse one record, raising on failure.

        Args:
            source: Record text
            trailing: What to do with input left after the record

        Returns:
            The parsed Record

        Raises:
            RecordSyntaxError: If the text does not match the grammar
            TrailingInputError: If trailing input violates the policy
            ValueError: If source exceeds max_source_size or trailing is not a
                TrailingPolicy value
        """
        parsed = self.parse(source)
        if isinstance(parsed, ParseError):
            raise RecordSyntaxError(parsed.diagnostic or parsed.message)

        match TrailingPolicy(trailing):
            case TrailingPolicy.ALLOW:
                rejected = False
            case TrailingPolicy.TRIVIA:
                rejected = not parsed.only_trivia_remaining
            case TrailingPolicy.REJECT:
                rejected = not parsed.fully_consumed
        if rejected:
            span = parsed.cursor.source_span(len(source))
            raise TrailingInputError(ErrorTemplate.trailing_input(parsed.remainder, span))
        return parsed.record
