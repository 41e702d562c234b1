"""Hypothesis strategies for orderlex property-based testing.

Usage:
    from tests.strategies import record_sources, trivia
    from tests.strategies.diagnostics import diagnostics
"""

from .diagnostics import (
    diagnostic_codes,
    diagnostic_formatters,
    diagnostics,
    expected_descriptions,
    remainders,
    source_spans,
)
from .records import (
    comment_spans,
    data_pairs,
    quantities,
    record_names,
    record_sources,
    records,
    separators,
    trivia,
    unsigned_ints,
    whitespace_runs,
)

__all__ = [
    "comment_spans",
    "data_pairs",
    "diagnostic_codes",
    "diagnostic_formatters",
    "diagnostics",
    "expected_descriptions",
    "quantities",
    "record_names",
    "record_sources",
    "records",
    "remainders",
    "separators",
    "source_spans",
    "trivia",
    "unsigned_ints",
    "whitespace_runs",
]
