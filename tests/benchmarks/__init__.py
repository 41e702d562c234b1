"""Performance benchmarks for orderlex.

Benchmarks use pytest-benchmark to track parser and serializer throughput
and catch performance regressions.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
