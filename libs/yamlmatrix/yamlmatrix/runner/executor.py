"""Executor that runs fixtures against a parser under test.

Every fixture goes through the same steps:

1. Parse ``input_text`` with the parse function.
2. For an expect-failure fixture, a parse error is a pass and a parsed value
   is a failure.
3. For an expect-success fixture, a parse error is a failure.  Otherwise the
   parsed value is matched against the reference output.

Errors raised by the parse function or the comparator never escape a
fixture; they are turned into a failed ``MatrixResult``.
"""

from __future__ import annotations

import json
import logging
import traceback
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from yamlmatrix.fixtures.model import ExpectFailure, ExpectSuccess, Fixture, FixtureKind
from yamlmatrix.runner.counter import RunCounter
from yamlmatrix.runner.results import MatrixResult

logger = logging.getLogger("yamlmatrix.runner")

# Parses YAML text into a value. Must raise on invalid input.
ParseFunction = Callable[[str], Any]

# Compares a parsed value with the reference value.
Comparator = Callable[[Any, Any], bool]

REFERENCE_ERROR_PREFIX = "Failed to parse reference output. Parser failed with:"
COMPARATOR_ERROR_PREFIX = "Comparator failed with:"
UNEXPECTED_PARSE_PREFIX = "Expected test to fail but found parsed node:"


@dataclass(frozen=True)
class ParseOutcome:
    """Value or error produced by one call to the parse function."""

    value: Any = None
    error: str | None = None
    trace: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def try_parse(parse_function: ParseFunction, text: str) -> ParseOutcome:
    """Call *parse_function* on *text*, capturing any exception it raises."""
    try:
        return ParseOutcome(value=parse_function(text))
    except Exception as e:
        # An exception with no message must still read as a failure.
        return ParseOutcome(error=str(e) or type(e).__name__, trace=traceback.format_exc())


def _indent(text: str) -> str:
    return "\n".join(f"\t{line}" for line in text.split("\n"))


def match_output(
    parsed: Any,
    *,
    expected_json: str | None,
    expected_fallback: str | None,
    parse_function: ParseFunction,
    comparator: Comparator,
) -> tuple[str, str | None] | None:
    """Match *parsed* against the reference output.

    The reference is decoded from *expected_json* when present.  Otherwise
    *expected_fallback* (or an empty document) is parsed with
    *parse_function*.

    Returns:
        ``None`` when the values match, else ``(failure_message, stack_trace)``.
    """
    try:
        if expected_json is not None:
            expected = json.loads(expected_json)
        else:
            expected = parse_function(expected_fallback or "")
    except Exception as e:
        return f"{REFERENCE_ERROR_PREFIX}\n{_indent(str(e))}", traceback.format_exc()

    try:
        matched = comparator(parsed, expected)
    except Exception as e:
        return f"{COMPARATOR_ERROR_PREFIX}\n{_indent(str(e))}", traceback.format_exc()

    if not matched:
        return f"Expected: {expected}\n\nParsed: {parsed}", None
    return None


class TestRunner:
    """Runs fixtures one at a time in the current thread.

    ``counter`` is shared by reference so an orchestrator can read progress
    while the run is in flight.
    """

    # Not a pytest test class.
    __test__ = False

    def __init__(
        self,
        fixtures: Iterable[Fixture],
        *,
        parse_function: ParseFunction,
        comparator: Comparator,
        counter: RunCounter | None = None,
    ) -> None:
        self.fixtures = fixtures
        self.parse_function = parse_function
        self.comparator = comparator
        self.counter = counter if counter is not None else RunCounter()

    def run_tests(self) -> Iterator[MatrixResult]:
        """Run all fixtures lazily, yielding one result per fixture in order."""
        for fixture in self.fixtures:
            yield self.run_test(fixture)

    def run_test(self, fixture: Fixture) -> MatrixResult:
        """Run a single fixture to completion and record it in the counter.

        Raises:
            TypeError: if *fixture* is not a known fixture type.
        """
        if not isinstance(fixture, (ExpectFailure, ExpectSuccess)):
            raise TypeError(f"Unknown fixture type: {type(fixture).__name__}")

        logger.info("%s", fixture)
        outcome = try_parse(self.parse_function, fixture.input_text)

        if isinstance(fixture, ExpectFailure):
            message, trace = self._check_failure(outcome)
        else:
            message, trace = self._check_success(fixture, outcome)

        return MatrixResult(
            test_id=fixture.test_id,
            description=fixture.description,
            test_input=fixture.input_text,
            kind=fixture.kind,
            failure_message=message,
            stack_trace=trace,
        )

    def _check_failure(self, outcome: ParseOutcome) -> tuple[str, str | None]:
        self.counter.bump_total(FixtureKind.ERROR)
        if not outcome.ok:
            return "", None

        self.counter.bump_failure(FixtureKind.ERROR)
        return f"{UNEXPECTED_PARSE_PREFIX} {outcome.value}", None

    def _check_success(
        self, fixture: ExpectSuccess, outcome: ParseOutcome
    ) -> tuple[str, str | None]:
        self.counter.bump_total(FixtureKind.SUCCESS)
        if not outcome.ok:
            self.counter.bump_failure(FixtureKind.SUCCESS)
            return outcome.error, outcome.trace

        if not fixture.has_reference:
            logger.warning(
                "%s has no reference output; comparing against an empty document",
                fixture.test_id,
            )

        mismatch = match_output(
            outcome.value,
            expected_json=fixture.expected_json,
            expected_fallback=fixture.expected_fallback,
            parse_function=self.parse_function,
            comparator=self.comparator,
        )
        if mismatch is None:
            return "", None

        self.counter.bump_failure(FixtureKind.SUCCESS)
        return mismatch
