"""Result sinks that receive failed fixtures and the final run summary."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Protocol

from yamlmatrix.runner.results import MatrixResult

logger = logging.getLogger("yamlmatrix.report")

SUMMARY_FILE = "#_summary_#.yaml"
DEFAULT_OUTPUT_DIR = "failed"


class ResultSink(Protocol):
    """Receives the output of a run."""

    def on_failed_test(self, result: MatrixResult) -> None:
        """Called once per failed fixture, in execution order."""
        ...

    def on_run_complete(self, summary: str) -> None:
        """Called exactly once after every fixture has run."""
        ...


class NullSink:
    """Sink that discards everything."""

    def on_failed_test(self, result: MatrixResult) -> None:
        pass

    def on_run_complete(self, summary: str) -> None:
        pass


class MarkdownSink:
    """Sink that saves each failed fixture as ``<test_id>.md`` in a directory."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def on_failed_test(self, result: MatrixResult) -> None:
        path = self.directory / f"{result.test_id}.md"
        path.write_text(format_failed_test(result), encoding="utf-8")

    def on_run_complete(self, summary: str) -> None:
        (self.directory / SUMMARY_FILE).write_text(summary, encoding="utf-8")


def create_sink(directory: str | Path | None, *, save_failed: bool) -> ResultSink:
    """Create the sink for a run.

    Returns a ``NullSink`` unless *save_failed* is set.  Otherwise the output
    directory (``./failed`` by default) is wiped and recreated.
    """
    if not save_failed:
        return NullSink()

    out_dir = Path(directory) if directory is not None else Path.cwd() / DEFAULT_OUTPUT_DIR
    out_dir = out_dir.absolute()
    if out_dir.exists():
        shutil.rmtree(out_dir)
    out_dir.mkdir(parents=True)

    logger.info("Any failed tests will be saved at: %s", out_dir)
    return MarkdownSink(out_dir)


def format_failed_test(result: MatrixResult) -> str:
    """Render a failed result as a Markdown document."""
    sections: list[str] = [
        _section(result.test_id, result.description.rstrip(), header="#", fenced=False),
        _section("Test Input", result.test_input),
    ]
    if result.failure_message:
        sections.append(_section("Reason Test Failed", result.failure_message))
    if result.stack_trace is not None:
        sections.append(_section("Stack Trace", result.stack_trace))
    return "\n".join(sections)


def _section(title: str, content: str, *, header: str = "##", fenced: bool = True) -> str:
    body = f"```text\n{content}\n```" if fenced else content
    return f"{header} {title}\n\n{body}\n"
