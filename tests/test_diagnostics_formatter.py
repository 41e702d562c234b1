"""Tests for diagnostics/formatter.py: DiagnosticFormatter output styles.

Python 3.13+.
"""

from __future__ import annotations

import json

from hypothesis import event, given

from orderlex.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    SourceSpan,
)
from tests.strategies.diagnostics import diagnostic_formatters, diagnostics

_SPAN = SourceSpan(start=21, end=21, line=1, column=22)
_EOF = ErrorTemplate.unexpected_eof("data pair index", "", _SPAN)


class TestRustFormat:
    """Compiler-style multi-line output (default)."""

    def test_full_output(self) -> None:
        output = DiagnosticFormatter().format(_EOF)

        assert output.splitlines() == [
            'error[UNEXPECTED_EOF]: Expecting data pair index here: ""',
            "  --> line 1, column 22",
            "  = expected: data pair index",
            "  = help: The record declares more data pairs than it supplies",
        ]

    def test_without_optional_fields(self) -> None:
        diagnostic = Diagnostic(DiagnosticCode.UNEXPECTED_TOKEN, "bad")

        assert DiagnosticFormatter().format(diagnostic) == "error[UNEXPECTED_TOKEN]: bad"

    def test_warning_severity(self) -> None:
        output = DiagnosticFormatter().format(ErrorTemplate.trailing_input("x"))

        assert output.startswith("warning[TRAILING_INPUT]")

    def test_color_error(self) -> None:
        output = DiagnosticFormatter(color=True).format(_EOF)

        assert output.startswith("\033[1;31merror\033[0m[UNEXPECTED_EOF]")

    def test_color_warning(self) -> None:
        output = DiagnosticFormatter(color=True).format(ErrorTemplate.trailing_input("x"))

        assert output.startswith("\033[1;33mwarning\033[0m")


class TestSimpleFormat:
    def test_single_line(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(_EOF) == 'UNEXPECTED_EOF: Expecting data pair index here: ""'


class TestJsonFormat:
    def test_fields(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(_EOF))

        assert data["code"] == "UNEXPECTED_EOF"
        assert data["code_value"] == 3001
        assert data["severity"] == "error"
        assert data["line"] == 1
        assert data["column"] == 22
        assert data["start"] == data["end"] == 21
        assert data["expected"] == "data pair index"
        assert data["remainder"] == ""

    def test_no_span_keys_without_span(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(Diagnostic(DiagnosticCode.UNEXPECTED_TOKEN, "m")))

        assert "line" not in data
        assert "remainder" not in data

    def test_non_ascii_preserved(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        diagnostic = ErrorTemplate.unexpected_token("quoted string", "pizza façile")

        assert "façile" in formatter.format(diagnostic)


class TestSanitize:
    def test_long_message_truncated(self) -> None:
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=20
        )
        diagnostic = ErrorTemplate.unexpected_token("record id", "x" * 500)

        output = formatter.format(diagnostic)

        assert output == f"UNEXPECTED_TOKEN: {diagnostic.message[:20]}..."

    def test_short_message_untouched(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, sanitize=True)

        assert formatter.format(_EOF).endswith('here: ""')

    def test_disabled_by_default(self) -> None:
        diagnostic = ErrorTemplate.unexpected_token("record id", "x" * 500)

        assert "x" * 500 in DiagnosticFormatter().format(diagnostic)


class TestFormatAll:
    def test_blank_line_separated(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all([_EOF, ErrorTemplate.trailing_input("x")])

        assert output == (
            'UNEXPECTED_EOF: Expecting data pair index here: ""\n\n'
            'TRAILING_INPUT: Input remaining after record: "x"'
        )

    def test_empty(self) -> None:
        assert DiagnosticFormatter().format_all([]) == ""


class TestFormatterProperties:
    @given(formatter=diagnostic_formatters(), diagnostic=diagnostics())
    def test_code_name_always_present(
        self, formatter: DiagnosticFormatter, diagnostic: Diagnostic
    ) -> None:
        """PROPERTY: every output style names the diagnostic code."""
        event(f"format={formatter.output_format.value}")
        assert diagnostic.code.name in formatter.format(diagnostic)

    @given(diagnostic=diagnostics())
    def test_json_always_parses(self, diagnostic: Diagnostic) -> None:
        """PROPERTY: JSON output is valid JSON carrying the message."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(diagnostic))

        event(f"has_span={'line' in data}")
        assert data["message"] == diagnostic.message
