"""pytest-benchmark configuration for orderlex benchmarks.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from orderlex.syntax import DataPair, Record


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Tag benchmark JSON output with the project name."""
    output_json["project"] = "orderlex"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def bulk_record() -> Record:
    """Record with 1000 data pairs."""
    items = tuple(DataPair(i, i + 0.5) for i in range(1000))
    return Record(1, "bulk", len(items), items)
