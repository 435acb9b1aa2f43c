"""yamlmatrix: run the YAML test suite matrix against a YAML parser."""

from yamlmatrix.fixtures import (
    ExpectFailure,
    ExpectSuccess,
    Fixture,
    FixtureKind,
    LoadingError,
    load_fixtures,
)
from yamlmatrix.matrix import run_matrix
from yamlmatrix.report import MarkdownSink, NullSink, ResultSink, create_sink
from yamlmatrix.runner import MatrixResult, RunCounter, RunSummary, TestRunner

__all__ = [
    "FixtureKind",
    "ExpectFailure",
    "ExpectSuccess",
    "Fixture",
    "LoadingError",
    "load_fixtures",
    "MatrixResult",
    "RunCounter",
    "RunSummary",
    "TestRunner",
    "ResultSink",
    "NullSink",
    "MarkdownSink",
    "create_sink",
    "run_matrix",
]
