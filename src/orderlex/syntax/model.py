"""Order record node definitions.

A record is an id, a quoted name, a declared count, and exactly that many
(index, quantity) data pairs. Nodes are frozen; a Record cannot exist in
a state where its item count disagrees with its declared count.

Python 3.13+. Zero external dependencies.
"""

import math
from dataclasses import dataclass, field
from typing import TypeIs

from orderlex.diagnostics import Diagnostic, ErrorTemplate

from .cursor import Cursor

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    # Record structure
    "DataPair",
    "Record",
    # Parse outcome
    "ParsedRecord",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)

    Example:
        Source: '100 "pie" 1 0 0.0  # note'
        Record span: Span(start=0, end=17)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


# ============================================================================
# RECORD STRUCTURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class DataPair:
    """One (index, quantity) data pair: ``1 1.1``"""

    index: int
    """Unsigned item index."""

    quantity: float
    """Signed quantity."""

    def __post_init__(self) -> None:
        if self.index < 0:
            msg = f"DataPair.index must be unsigned, got {self.index}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Record:
    """A complete order record.

    Invariant:
        ``len(items) == declared_count``. Construction fails otherwise, so
        a partially filled record can never be observed. Any iterable of
        DataPair is accepted for items and stored as a tuple.

    Example:
        >>> record = Record(100, "hawaiian", 2, (DataPair(0, 0.0), DataPair(1, 1.1)))
        >>> record.items[1]
        DataPair(index=1, quantity=1.1)
        >>> Record(100, "hawaiian", 3, record.items)
        Traceback (most recent call last):
        ...
        ValueError: Record declares 3 data pair(s) but holds 2
    """

    id: int
    name: str
    declared_count: int
    items: tuple[DataPair, ...]
    span: Span | None = field(default=None, compare=False)
    """Source location. Not part of equality: the same record read from
    differently commented text compares equal."""

    def __post_init__(self) -> None:
        """Validate record invariants.

        Raises:
            ValueError: If id or declared_count is negative, or the number of
                items differs from declared_count.
        """
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))
        if self.id < 0:
            msg = f"Record.id must be unsigned, got {self.id}"
            raise ValueError(msg)
        if self.declared_count < 0:
            msg = f"Record.declared_count must be unsigned, got {self.declared_count}"
            raise ValueError(msg)
        if len(self.items) != self.declared_count:
            msg = (
                f"Record declares {self.declared_count} data pair(s) "
                f"but holds {len(self.items)}"
            )
            raise ValueError(msg)

    @property
    def total_quantity(self) -> float:
        """Sum of all data pair quantities (0.0 for an empty record)."""
        quantities = [item.quantity for item in self.items]
        if all(math.isfinite(quantity) for quantity in quantities):
            return math.fsum(quantities)
        # fsum raises on inf + -inf; plain addition gives nan
        return sum(quantities, 0.0)

    @staticmethod
    def guard(value: object) -> TypeIs["Record"]:
        """Type guard for Record."""
        return isinstance(value, Record)


# ============================================================================
# PARSE OUTCOME
# ============================================================================


@dataclass(frozen=True, slots=True)
class ParsedRecord:
    """Successful parse: the record plus where the parser stopped.

    Trailing input is never an error here. The parser reports it through
    ``fully_consumed`` and ``trailing_input`` and leaves accept/reject
    policy to the caller.
    """

    record: Record
    cursor: Cursor

    @property
    def fully_consumed(self) -> bool:
        """True if the record extends to end of input."""
        return self.cursor.is_eof

    @property
    def remainder(self) -> str:
        """Input left after the last consumed data pair."""
        return self.cursor.remainder

    @property
    def only_trivia_remaining(self) -> bool:
        """True if the remainder holds nothing but whitespace and comments.

        A final comment with no line terminator counts as trivia here.
        """
        from .parser.whitespace import only_trivia_left  # noqa: PLC0415 - circular

        return only_trivia_left(self.cursor)

    @property
    def trailing_input(self) -> Diagnostic | None:
        """TRAILING_INPUT warning, or None when fully consumed."""
        if self.fully_consumed:
            return None
        return ErrorTemplate.trailing_input(
            self.remainder, self.cursor.source_span(len(self.cursor.source))
        )

    @staticmethod
    def guard(value: object) -> TypeIs["ParsedRecord"]:
        """Type guard for ParsedRecord (narrows parse() results)."""
        return isinstance(value, ParsedRecord)
