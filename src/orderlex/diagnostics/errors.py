"""orderlex exception hierarchy with structured diagnostics.

The parser itself never raises on malformed input; failures are returned
as ParseError values. These exceptions back the strict API
(RecordParser.parse_strict) and serializer validation.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "OrderLexError",
    "RecordSyntaxError",
    "TrailingInputError",
]


class OrderLexError(Exception):
    """Base exception for all orderlex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize OrderLexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class RecordSyntaxError(OrderLexError):
    """Record text does not match the grammar.

    Raised by the strict API only. Carries the diagnostic produced by the
    error reporter at the first failing step.
    """


class TrailingInputError(RecordSyntaxError):
    """A record parsed but input remained that the caller chose to reject."""
