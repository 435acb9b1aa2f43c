"""Report subpackage (Layer 2 -- consumes runner results)."""

from yamlmatrix.report.sink import (
    MarkdownSink,
    NullSink,
    ResultSink,
    create_sink,
    format_failed_test,
)

__all__ = ["ResultSink", "NullSink", "MarkdownSink", "create_sink", "format_failed_test"]
