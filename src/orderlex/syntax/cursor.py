"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (only for errors)

Line Ending Support:
    compute_line_col() counts LF only. CRLF input reports correct lines
    because the LF is still present; CR-only input reports everything on
    line 1. The skipper itself accepts LF, CR and CRLF as comment
    terminators.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from orderlex.constants import LINE_TERMINATORS, WHITESPACE_CHARS
from orderlex.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate, SourceSpan

__all__ = ["Cursor", "ParseError", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("100", 0)
        >>> cursor.current
        '1'
        >>> cursor.advance().current
        '0'
        >>> cursor.current  # Original unchanged
        '1'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.cursor_at_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    @property
    def remainder(self) -> str:
        """Unconsumed input from the current position to end of input."""
        return self.source[self.pos :]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive).

        Example:
            >>> start = Cursor('"pie" 1', 1)
            >>> start.slice_to(4)
            'pie'
        """
        return self.source[self.pos : end_pos]

    def skip_whitespace(self) -> "Cursor":
        """Skip ASCII whitespace (space, tab, LF, CR, VT, FF).

        Example:
            >>> Cursor(" \\t\\n 7", 0).skip_whitespace().pos
            4
        """
        c = self
        while not c.is_eof and c.current in WHITESPACE_CHARS:
            c = c.advance()
        return c

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise."""
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def skip_line_end(self) -> "Cursor":
        """Skip LF, CR, or CRLF line ending.

        Returns:
            New cursor advanced past the line ending, or unchanged if not at line end.
        """
        if self.is_eof:
            return self
        if self.current == "\r":
            cursor = self.advance()
            # Handle CRLF
            if not cursor.is_eof and cursor.current == "\n":
                return cursor.advance()
            return cursor
        if self.current == "\n":
            return self.advance()
        return self

    def skip_to_line_end(self) -> "Cursor":
        """Advance to the next line ending character (not consumed)."""
        cursor = self
        while not cursor.is_eof and cursor.current not in LINE_TERMINATORS:
            cursor = cursor.advance()
        return cursor

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("1\\n\\"a\\"", 3).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def source_span(self, end_pos: int | None = None) -> SourceSpan:
        """Build a SourceSpan from the current position to end_pos.

        Args:
            end_pos: End offset (exclusive). Defaults to the current position.
        """
        line, col = self.compute_line_col()
        end = self.pos if end_pos is None else end_pos
        return SourceSpan(start=self.pos, end=end, line=line, column=col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Every sub-parser has the signature:
        def read_foo(cursor: Cursor) -> ParseResult[Foo] | ParseError

    Example:
        >>> cursor = Cursor("7 1.5", 0)
        >>> result = ParseResult(7, cursor.advance())
        >>> result.value
        7
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Fatal parse failure with location and context.

    Sub-parsers build a ParseError without a diagnostic; the record parser
    hands the first one it sees to the error reporter, which returns a copy
    with the diagnostic attached.

    Attributes:
        code: UNEXPECTED_TOKEN or UNEXPECTED_EOF
        expected: Human-readable description of what was expected
        cursor: Cursor at the failure point
        diagnostic: Formatted diagnostic (set by the error reporter)

    Example:
        >>> error = ParseError.expecting("record id", Cursor("x", 0))
        >>> error.code
        <DiagnosticCode.UNEXPECTED_TOKEN: 3002>
        >>> error.format_error()
        '1:1: Expecting record id here: "x"'
    """

    code: DiagnosticCode
    expected: str
    cursor: Cursor
    diagnostic: Diagnostic | None = None

    @classmethod
    def expecting(cls, expected: str, cursor: Cursor) -> "ParseError":
        """Build the error for a token that did not match at cursor.

        The code is UNEXPECTED_EOF when the cursor sits at end of input and
        UNEXPECTED_TOKEN otherwise.
        """
        code = DiagnosticCode.UNEXPECTED_EOF if cursor.is_eof else DiagnosticCode.UNEXPECTED_TOKEN
        return cls(code=code, expected=expected, cursor=cursor)

    @property
    def position(self) -> int:
        """Character offset of the failure point."""
        return self.cursor.pos

    @property
    def end_position(self) -> int:
        """Character offset of end of input."""
        return len(self.cursor.source)

    @property
    def remainder(self) -> str:
        """Unconsumed input from the failure point to end of input."""
        return self.cursor.remainder

    @property
    def is_eof(self) -> bool:
        """True if input ended before the expected token."""
        return self.code is DiagnosticCode.UNEXPECTED_EOF

    @property
    def message(self) -> str:
        """Diagnostic message, or the canonical failure line if unreported."""
        if self.diagnostic is not None:
            return self.diagnostic.message
        return ErrorTemplate.expecting(self.expected, self.remainder)

    def format_error(self) -> str:
        """Format error with line:column.

        Example:
            >>> error = ParseError.expecting("declared count", Cursor('1 "a"\\n x', 7))
            >>> error.format_error()
            '2:2: Expecting declared count here: "x"'
        """
        line, col = self.cursor.compute_line_col()
        return f"{line}:{col}: {self.message}"

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with source context and pointer.

        Shows the problematic line and a caret pointing to the error location.

        Args:
            context_lines: Number of lines to show before/after error

        Returns:
            Multi-line formatted error with context
        """
        line, col = self.cursor.compute_line_col()
        lines = self.cursor.source.split("\n")

        result_lines = [self.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])

            if i == line:
                pointer = " " * (len(line_num_str) + col - 1) + "^"
                result_lines.append(pointer)

        return "\n".join(result_lines)
