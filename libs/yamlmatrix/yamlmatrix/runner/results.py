"""Result record produced for every fixture that has been run."""

from __future__ import annotations

from dataclasses import dataclass

from yamlmatrix.fixtures.model import FixtureKind


@dataclass(frozen=True)
class MatrixResult:
    """Outcome of a single fixture run to completion.

    An empty ``failure_message`` means the fixture passed.  ``stack_trace`` is
    only set when the failure came from a caught exception.
    """

    test_id: str
    description: str
    test_input: str
    kind: FixtureKind
    failure_message: str = ""
    stack_trace: str | None = None

    @property
    def failed(self) -> bool:
        return self.failure_message != ""
