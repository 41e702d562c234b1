"""Whitespace and comment skipping for the record parser.

The skipper runs before every token. It consumes any mix of ASCII
whitespace and comment spans:

    WS ::= whitespace | "#" (any-char-except newline)* newline

A comment span needs its line terminator. A "#" with no terminator
before end of input is left in place, so a trailing same-line comment
after the last data pair stays visible as unconsumed input.
"""

from orderlex.constants import COMMENT_MARKER
from orderlex.syntax.cursor import Cursor

__all__ = ["only_trivia_left", "skip_comment", "skip_trivia"]


def skip_comment(cursor: Cursor) -> Cursor | None:
    """Skip one comment span starting at cursor.

    Args:
        cursor: Position of the comment marker

    Returns:
        Cursor after the span's line terminator, or None if cursor is not at
        a comment marker or the span has no terminator.
    """
    body = cursor.expect(COMMENT_MARKER)
    if body is None:
        return None
    line_end = body.skip_to_line_end()
    if line_end.is_eof:
        return None
    return line_end.skip_line_end()


def skip_trivia(cursor: Cursor) -> Cursor:
    """Skip whitespace and comment spans.

    Never fails. Idempotent: skip_trivia(skip_trivia(c)) == skip_trivia(c).

    Args:
        cursor: Current position in source

    Returns:
        New cursor at the first character that is neither whitespace nor the
        start of a complete comment span (or EOF)

    Example:
        >>> skip_trivia(Cursor("  # id\\n100", 0)).pos
        7
    """
    while True:
        cursor = cursor.skip_whitespace()
        after_comment = skip_comment(cursor)
        if after_comment is None:
            return cursor
        cursor = after_comment


def only_trivia_left(cursor: Cursor) -> bool:
    """True if nothing but trivia remains from cursor to end of input.

    Unlike the skipper, this counts a final comment that runs into end of
    input without a line terminator as trivia: no token can follow it.

    Example:
        >>> only_trivia_left(Cursor("4.4  # note", 3))
        True
        >>> only_trivia_left(Cursor("4.4  extra", 3))
        False
    """
    rest = skip_trivia(cursor)
    if rest.is_eof:
        return True
    return rest.current == COMMENT_MARKER and rest.skip_to_line_end().is_eof
