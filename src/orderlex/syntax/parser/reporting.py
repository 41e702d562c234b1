"""Diagnostic capture for failed record parses.

The record parser calls ErrorReporter.report() exactly once, with the
first ParseError any step produced. The reporter records what was
expected, where matching stopped and where input ends, and attaches a
Diagnostic whose message embeds the literal unconsumed remainder:

    Expecting <expected> here: "<remainder>"

The reporter never prints and never attempts recovery.
"""

import dataclasses

from orderlex.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate
from orderlex.syntax.cursor import ParseError

__all__ = ["ErrorReporter"]


class ErrorReporter:
    """Turns a raw ParseError into a reported one carrying a Diagnostic."""

    __slots__ = ()

    def report(self, error: ParseError) -> ParseError:
        """Attach a diagnostic to error.

        Args:
            error: First failure produced by a record parser step

        Returns:
            Copy of error with diagnostic set. An error that already carries
            a diagnostic is returned unchanged.
        """
        if error.diagnostic is not None:
            return error
        return dataclasses.replace(error, diagnostic=self.build_diagnostic(error))

    @staticmethod
    def build_diagnostic(error: ParseError) -> Diagnostic:
        """Build the diagnostic for error.

        The span runs from the failure point to end of input, so
        ``span.start`` is the failure position and ``span.end`` the input
        end; line and column locate the failure point.
        """
        span = error.cursor.source_span(error.end_position)
        if error.code is DiagnosticCode.UNEXPECTED_EOF:
            return ErrorTemplate.unexpected_eof(error.expected, error.remainder, span)
        return ErrorTemplate.unexpected_token(error.expected, error.remainder, span)
