"""Error message templates.

Centralized diagnostic templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostic text is created here. Parser modules never build
    message strings themselves, which keeps wording consistent between
    the parser, the strict API, and the formatter.
    """

    @staticmethod
    def expecting(expected: str, remainder: str) -> str:
        """Render the canonical failure line.

        Args:
            expected: Description of what the parser expected
            remainder: Unconsumed input from the failure point

        Returns:
            ``Expecting <expected> here: "<remainder>"``
        """
        return f'Expecting {expected} here: "{remainder}"'

    @staticmethod
    def unexpected_token(
        expected: str, remainder: str, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Input present but did not match the expected token.

        Args:
            expected: Description of what the parser expected
            remainder: Unconsumed input from the failure point
            span: Location of the failure point

        Returns:
            Diagnostic for UNEXPECTED_TOKEN
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_TOKEN,
            message=ErrorTemplate.expecting(expected, remainder),
            span=span,
            hint=f"Check the record layout around the {expected}",
            expected=expected,
            remainder=remainder,
        )

    @staticmethod
    def unexpected_eof(
        expected: str, remainder: str = "", span: SourceSpan | None = None
    ) -> Diagnostic:
        """Input ended before the expected token.

        Args:
            expected: Description of what the parser expected
            remainder: Unconsumed input from the failure point
            span: Location of the failure point

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        if expected.startswith("data pair"):
            hint = "The record declares more data pairs than it supplies"
        elif expected == "closing quote":
            hint = "Close the quoted name with a matching '\"'"
        else:
            hint = "The record is truncated"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=ErrorTemplate.expecting(expected, remainder),
            span=span,
            hint=hint,
            expected=expected,
            remainder=remainder,
        )

    @staticmethod
    def cursor_at_eof(position: int) -> Diagnostic:
        """Cursor read past the end of input.

        Raised as EOFError by Cursor.current; parser code checks is_eof
        before reading so this only surfaces on programming errors.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=f"Unexpected EOF at position {position}",
            hint="Check is_eof before reading the current character",
        )

    @staticmethod
    def trailing_input(remainder: str, span: SourceSpan | None = None) -> Diagnostic:
        """Record parsed but input remains after the last data pair.

        Args:
            remainder: Unconsumed input after the record
            span: Location where the trailing input begins

        Returns:
            Warning diagnostic for TRAILING_INPUT
        """
        return Diagnostic(
            code=DiagnosticCode.TRAILING_INPUT,
            message=f'Input remaining after record: "{remainder}"',
            span=span,
            hint="Trailing content is not part of the record",
            remainder=remainder,
            severity="warning",
        )
