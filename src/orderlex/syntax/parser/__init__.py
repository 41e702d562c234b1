"""Order record parser module.

Module Organization:
- core.py: RecordParser class, read_record() pipeline and the counted pair loop
- primitives.py: Readers for integers, floats, quoted names and data pairs
- whitespace.py: Whitespace and comment skipping
- reporting.py: ErrorReporter attaching diagnostics to the first failure

Public API:
    RecordParser: Main parser class
    ErrorReporter: Diagnostic capture (advanced usage)
"""

from orderlex.syntax.parser.core import RecordParser
from orderlex.syntax.parser.reporting import ErrorReporter

__all__ = ["ErrorReporter", "RecordParser"]
