"""Shared constants for orderlex.

Single source of truth for the record grammar's reserved characters and
the input limits applied by the parser. Parser instances accept overrides
for the limits through keyword-only constructor arguments.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Grammar characters
    "COMMENT_MARKER",
    "QUOTE_CHAR",
    "WHITESPACE_CHARS",
    "LINE_TERMINATORS",
    "ASCII_DIGITS",
    # Input limits
    "MAX_SOURCE_SIZE",
    "MAX_NUMBER_LENGTH",
]

# ============================================================================
# GRAMMAR CHARACTERS
# ============================================================================

# Starts a comment span that runs through the next line terminator.
COMMENT_MARKER: str = "#"

# Delimits the record name. Comment recognition is suspended inside.
QUOTE_CHAR: str = '"'

# ASCII whitespace: space, tab, LF, CR, VT, FF.
WHITESPACE_CHARS: frozenset[str] = frozenset(" \t\n\r\v\f")

LINE_TERMINATORS: frozenset[str] = frozenset("\n\r")

# ASCII digits only. str.isdigit() accepts Unicode digits such as "²",
# which int() rejects.
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source length in characters (10 MiB of text).
# Set max_source_size=0 on RecordParser to disable.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# Maximum characters in a single numeric literal. Keeps int()/float()
# conversion bounded (CPython refuses int() on strings over 4300 digits).
MAX_NUMBER_LENGTH: int = 1000
