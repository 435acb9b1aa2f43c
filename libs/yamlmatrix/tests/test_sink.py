"""Tests for result sinks."""

from __future__ import annotations

from pathlib import Path

from yamlmatrix.fixtures.model import FixtureKind
from yamlmatrix.report.sink import (
    SUMMARY_FILE,
    MarkdownSink,
    NullSink,
    create_sink,
    format_failed_test,
)
from yamlmatrix.runner.results import MatrixResult

MISMATCH = MatrixResult(
    test_id="2XXW",
    description="Spec Example 2.25. Unordered Sets\n",
    test_input="--- !!set\n? Mark McGwire\n",
    kind=FixtureKind.SUCCESS,
    failure_message="Expected: {'a': 1}\n\nParsed: {'a': 2}",
)

PARSE_ERROR = MatrixResult(
    test_id="9C9N",
    description="Wrong indented flow sequence",
    test_input="---\nflow: [a,\nb,\nc]\n",
    kind=FixtureKind.SUCCESS,
    failure_message="while parsing a flow sequence",
    stack_trace="Traceback (most recent call last):\n  ...",
)


class TestFormatFailedTest:
    def test_mismatch_layout(self) -> None:
        assert format_failed_test(MISMATCH) == (
            "# 2XXW\n"
            "\n"
            "Spec Example 2.25. Unordered Sets\n"
            "\n"
            "## Test Input\n"
            "\n"
            "```text\n"
            "--- !!set\n"
            "? Mark McGwire\n"
            "\n"
            "```\n"
            "\n"
            "## Reason Test Failed\n"
            "\n"
            "```text\n"
            "Expected: {'a': 1}\n"
            "\n"
            "Parsed: {'a': 2}\n"
            "```\n"
        )

    def test_stack_trace_section(self) -> None:
        text = format_failed_test(PARSE_ERROR)
        assert "## Stack Trace\n\n```text\nTraceback (most recent call last):" in text
        assert text.index("## Reason Test Failed") < text.index("## Stack Trace")

    def test_no_trace_section_without_trace(self) -> None:
        assert "Stack Trace" not in format_failed_test(MISMATCH)


class TestNullSink:
    def test_ignores_everything(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        sink = NullSink()
        sink.on_failed_test(MISMATCH)
        sink.on_run_complete("summary")
        assert list(tmp_path.iterdir()) == []


class TestMarkdownSink:
    def test_writes_failed_tests_and_summary(self, tmp_path: Path) -> None:
        sink = MarkdownSink(tmp_path)
        sink.on_failed_test(MISMATCH)
        sink.on_failed_test(PARSE_ERROR)
        sink.on_run_complete("Total Tests: 2\n")

        assert (tmp_path / "2XXW.md").read_text() == format_failed_test(MISMATCH)
        assert (tmp_path / "9C9N.md").exists()
        assert (tmp_path / SUMMARY_FILE).read_text() == "Total Tests: 2\n"


class TestCreateSink:
    def test_null_sink_when_not_saving(self, tmp_path: Path) -> None:
        out = tmp_path / "out"
        sink = create_sink(out, save_failed=False)
        assert isinstance(sink, NullSink)
        assert not out.exists()

    def test_recreates_directory(self, tmp_path: Path) -> None:
        out = tmp_path / "out"
        out.mkdir()
        (out / "stale.md").write_text("old run")
        sink = create_sink(out, save_failed=True)
        assert isinstance(sink, MarkdownSink)
        assert out.is_dir()
        assert list(out.iterdir()) == []

    def test_default_directory(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        sink = create_sink(None, save_failed=True)
        assert isinstance(sink, MarkdownSink)
        assert sink.directory == Path.cwd() / "failed"
        assert sink.directory.is_dir()
