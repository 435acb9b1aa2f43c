"""Runner subpackage (Layer 1 -- depends on fixtures)."""

from yamlmatrix.runner.counter import RunCounter, RunSummary, as_percent_of
from yamlmatrix.runner.executor import (
    Comparator,
    ParseFunction,
    ParseOutcome,
    TestRunner,
    match_output,
    try_parse,
)
from yamlmatrix.runner.results import MatrixResult

__all__ = [
    "RunCounter",
    "RunSummary",
    "as_percent_of",
    "ParseFunction",
    "Comparator",
    "ParseOutcome",
    "TestRunner",
    "match_output",
    "try_parse",
    "MatrixResult",
]
