"""Primitive readers for the record grammar.

Low-level readers for unsigned integers, floating-point quantities,
quoted names and data pairs. Readers do not skip leading trivia; the
record parser runs the skipper before handing them the cursor. The one
exception is read_pair, which skips between its index and quantity.

Every reader returns ParseResult[T] on success or ParseError on failure.
Errors travel in the return value; nothing is stored on the side, so
readers are safe to call from any thread.
"""

from orderlex.constants import ASCII_DIGITS, MAX_NUMBER_LENGTH, QUOTE_CHAR
from orderlex.diagnostics import DiagnosticCode
from orderlex.syntax.cursor import Cursor, ParseError, ParseResult
from orderlex.syntax.model import DataPair

from .whitespace import skip_trivia

__all__ = [
    "EXPECTED_CLOSING_QUOTE",
    "EXPECTED_PAIR_INDEX",
    "EXPECTED_PAIR_QUANTITY",
    "EXPECTED_QUOTED_STRING",
    "read_float",
    "read_pair",
    "read_quoted_string",
    "read_unsigned",
]

EXPECTED_QUOTED_STRING = "quoted string"
EXPECTED_CLOSING_QUOTE = "closing quote"
EXPECTED_PAIR_INDEX = "data pair index"
EXPECTED_PAIR_QUANTITY = "data pair quantity"

_SIGNS = ("+", "-")
_EXPONENT_MARKERS = ("e", "E")
# Longest first so "infinity" is not read as "inf" plus trailing input.
_NON_FINITE_WORDS = ("infinity", "inf", "nan")


def _skip_digits(cursor: Cursor) -> Cursor:
    while not cursor.is_eof and cursor.current in ASCII_DIGITS:
        cursor = cursor.advance()
    return cursor


def _skip_non_finite_word(cursor: Cursor) -> Cursor | None:
    for word in _NON_FINITE_WORDS:
        if cursor.source[cursor.pos : cursor.pos + len(word)].lower() == word:
            return cursor.advance(len(word))
    return None


def read_unsigned(
    cursor: Cursor, expected: str, *, max_length: int = MAX_NUMBER_LENGTH
) -> ParseResult[int] | ParseError:
    """Read an unsigned integer: [0-9]+

    No sign is accepted and no upper bound is applied beyond the literal
    length limit.

    Args:
        cursor: Position of the first digit
        expected: Description used in the error if no integer is present
        max_length: Longest accepted literal, in characters

    Returns:
        ParseResult(int, cursor after the last digit) or ParseError
    """
    end = _skip_digits(cursor)
    if end.pos == cursor.pos or end.pos - cursor.pos > max_length:
        return ParseError.expecting(expected, cursor)
    return ParseResult(int(cursor.slice_to(end.pos)), end)


def read_float(
    cursor: Cursor, expected: str, *, max_length: int = MAX_NUMBER_LENGTH
) -> ParseResult[float] | ParseError:
    """Read a signed floating-point number.

    Grammar:
        [+-]? ( [0-9]+ ("." [0-9]*)? | "." [0-9]+ ) ([eE] [+-]? [0-9]+)?
        [+-]? ( "inf" | "infinity" | "nan" )    (case-insensitive)

    An "e" not followed by a well-formed exponent is left unconsumed.

    Examples:
        0 -> 0.0
        -1.5 -> -1.5
        2. -> 2.0
        .25 -> 0.25
        1e3 -> 1000.0
        -Infinity -> -inf

    Args:
        cursor: Position of the sign or first digit
        expected: Description used in the error if no number is present
        max_length: Longest accepted literal, in characters

    Returns:
        ParseResult(float, cursor after the literal) or ParseError
    """
    start = cursor
    if cursor.peek() in _SIGNS:
        cursor = cursor.advance()

    word_end = _skip_non_finite_word(cursor)
    if word_end is not None:
        if word_end.pos - start.pos > max_length:
            return ParseError.expecting(expected, start)
        return ParseResult(float(start.slice_to(word_end.pos)), word_end)

    mantissa_start = cursor.pos
    cursor = _skip_digits(cursor)
    digit_count = cursor.pos - mantissa_start

    if cursor.peek() == ".":
        fraction_start = cursor.advance()
        after_fraction = _skip_digits(fraction_start)
        fraction_count = after_fraction.pos - fraction_start.pos
        if digit_count or fraction_count:
            cursor = after_fraction
            digit_count += fraction_count

    if digit_count == 0:
        return ParseError.expecting(expected, start)

    if cursor.peek() in _EXPONENT_MARKERS:
        exponent = cursor.advance()
        if exponent.peek() in _SIGNS:
            exponent = exponent.advance()
        exponent_end = _skip_digits(exponent)
        if exponent_end.pos > exponent.pos:
            cursor = exponent_end

    if cursor.pos - start.pos > max_length:
        return ParseError.expecting(expected, start)
    return ParseResult(float(start.slice_to(cursor.pos)), cursor)


def read_quoted_string(cursor: Cursor) -> ParseResult[str] | ParseError:
    """Read a quoted name: '"' (any-char-except '"')+ '"'

    There are no escape sequences. Everything up to the closing quote is
    content, including "#" and line terminators; comment recognition is
    suspended inside the quotes.

    Failures:
        - No opening quote: "quoted string" (UNEXPECTED_TOKEN, or
          UNEXPECTED_EOF at end of input)
        - Empty literal "": "quoted string" at the opening quote
        - No closing quote: "closing quote" (UNEXPECTED_EOF) at the opening
          quote, so the error remainder shows the unterminated literal

    Args:
        cursor: Position of the opening quote

    Returns:
        ParseResult(content, cursor after the closing quote) or ParseError
    """
    content_start = cursor.expect(QUOTE_CHAR)
    if content_start is None:
        return ParseError.expecting(EXPECTED_QUOTED_STRING, cursor)

    close = cursor.source.find(QUOTE_CHAR, content_start.pos)
    if close == -1:
        return ParseError(
            code=DiagnosticCode.UNEXPECTED_EOF,
            expected=EXPECTED_CLOSING_QUOTE,
            cursor=cursor,
        )
    if close == content_start.pos:
        return ParseError.expecting(EXPECTED_QUOTED_STRING, cursor)

    return ParseResult(content_start.slice_to(close), Cursor(cursor.source, close + 1))


def read_pair(cursor: Cursor) -> ParseResult[DataPair] | ParseError:
    """Read one data pair: UINT WS* FLOAT

    Args:
        cursor: Position of the index

    Returns:
        ParseResult(DataPair, cursor after the quantity) or ParseError
        naming the sub-value that did not match
    """
    index = read_unsigned(cursor, EXPECTED_PAIR_INDEX)
    if isinstance(index, ParseError):
        return index

    quantity = read_float(skip_trivia(index.cursor), EXPECTED_PAIR_QUANTITY)
    if isinstance(quantity, ParseError):
        return quantity

    return ParseResult(DataPair(index.value, quantity.value), quantity.cursor)
