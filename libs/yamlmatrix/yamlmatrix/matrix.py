"""Run a whole test matrix and hand its output to a result sink."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from yamlmatrix.fixtures.model import Fixture
from yamlmatrix.report.sink import NullSink, ResultSink
from yamlmatrix.runner.counter import RunCounter, RunSummary
from yamlmatrix.runner.executor import Comparator, ParseFunction, TestRunner

logger = logging.getLogger("yamlmatrix")


def run_matrix(
    fixtures: Iterable[Fixture],
    *,
    parse_function: ParseFunction,
    comparator: Comparator,
    sink: ResultSink | None = None,
    counter: RunCounter | None = None,
) -> RunSummary:
    """Run every fixture and return the final summary.

    Failed results go to ``sink.on_failed_test`` in execution order, and the
    rendered summary goes to ``sink.on_run_complete`` once the last fixture
    has run.  A ``LoadingError`` raised while pulling fixtures propagates and
    ``on_run_complete`` is never called.
    """
    sink = sink if sink is not None else NullSink()
    runner = TestRunner(
        fixtures,
        parse_function=parse_function,
        comparator=comparator,
        counter=counter,
    )

    for result in runner.run_tests():
        if result.failed:
            logger.debug("%s failed: %s", result.test_id, result.failure_message)
            sink.on_failed_test(result)

    summary = runner.counter.summarize()
    sink.on_run_complete(str(summary))
    return summary
