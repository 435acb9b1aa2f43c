"""Pass/fail tally for a test matrix run."""

from __future__ import annotations

from dataclasses import dataclass

from yamlmatrix.fixtures.model import FixtureKind


def as_percent_of(part: int, total: int) -> str:
    """Return *part* as a percentage of *total* with two decimals.

    A trailing ``.00`` is dropped (``"100"`` rather than ``"100.00"``) and a
    zero *total* yields ``"0"``.
    """
    if total == 0:
        return "0"
    percent = f"{part * 100 / total:.2f}"
    return percent[:-3] if percent.endswith(".00") else percent


@dataclass(frozen=True)
class RunSummary:
    """Snapshot of a run's statistics. ``str()`` renders the text report."""

    total_tests: int
    total_passed: int
    pass_rate: str
    success_kind_pass_rate: str
    success_share_of_passed: str
    error_kind_pass_rate: str
    error_share_of_passed: str

    def __str__(self) -> str:
        return (
            f"Total Tests: {self.total_tests}\n"
            "Test Summary:\n"
            f"  Total Tests Passing: {self.total_passed}\n"
            f"  Average Pass Accuracy (%): {self.pass_rate}\n"
            "\n"
            "  # Tests meant to be parsed correctly that passed\n"
            "  Success Test Ratio (%):\n"
            f"    Of Success Tests: {self.success_kind_pass_rate}\n"
            f"    Of Tests Passing: {self.success_share_of_passed}\n"
            "\n"
            "  # Tests meant to fail that failed\n"
            "  Error Test Ratio (%):\n"
            f"    Of Error Tests: {self.error_kind_pass_rate}\n"
            f"    Of Tests Passing: {self.error_share_of_passed}\n"
        )


class RunCounter:
    """Counts fixtures run and failed, split by fixture kind."""

    def __init__(self) -> None:
        self._success_total = 0
        self._error_total = 0
        self._failed_success = 0
        self._failed_error = 0

    @property
    def success_total(self) -> int:
        return self._success_total

    @property
    def error_total(self) -> int:
        return self._error_total

    @property
    def failed_success(self) -> int:
        return self._failed_success

    @property
    def failed_error(self) -> int:
        return self._failed_error

    def bump_total(self, kind: FixtureKind) -> None:
        """Count one more fixture of *kind*."""
        if kind is FixtureKind.SUCCESS:
            self._success_total += 1
        else:
            self._error_total += 1

    def bump_failure(self, kind: FixtureKind) -> None:
        """Count one more failed fixture of *kind*.

        Raises:
            ValueError: if failures would outnumber the fixtures counted.
        """
        if kind is FixtureKind.SUCCESS:
            if self._failed_success >= self._success_total:
                raise ValueError("more failed success tests than success tests")
            self._failed_success += 1
        else:
            if self._failed_error >= self._error_total:
                raise ValueError("more failed error tests than error tests")
            self._failed_error += 1

    def summarize(self) -> RunSummary:
        """Return the current summary. Safe to call at any point of a run."""
        passed_success = self._success_total - self._failed_success
        passed_error = self._error_total - self._failed_error
        total_passed = passed_success + passed_error
        total_tests = self._success_total + self._error_total

        return RunSummary(
            total_tests=total_tests,
            total_passed=total_passed,
            pass_rate=as_percent_of(total_passed, total_tests),
            success_kind_pass_rate=as_percent_of(passed_success, self._success_total),
            success_share_of_passed=as_percent_of(passed_success, total_passed),
            error_kind_pass_rate=as_percent_of(passed_error, self._error_total),
            error_share_of_passed=as_percent_of(passed_error, total_passed),
        )
