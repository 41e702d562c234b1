"""Fuzz testing infrastructure for orderlex.

This package contains:
- shadow_parser: Regex-based reference implementation for differential testing
- test_syntax_parser_property: Differential and mutation fuzzing of RecordParser

Python 3.13+.
"""
