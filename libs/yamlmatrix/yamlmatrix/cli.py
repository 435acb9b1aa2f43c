"""Command-line entry point: run the YAML test suite against PyYAML.

Usage:
    yamlmatrix [--matrix-dir DIR] [--save-failed] [--output-dir DIR]
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from yamlmatrix.config import RunnerConfig
from yamlmatrix.fetch import fetch_test_data
from yamlmatrix.fixtures.errors import LoadingError
from yamlmatrix.fixtures.loader import load_fixtures
from yamlmatrix.matrix import run_matrix
from yamlmatrix.report.sink import create_sink

logger = logging.getLogger("yamlmatrix")


def configure_logging(level_name: str) -> None:
    """Send ``yamlmatrix`` log records to stderr at *level_name*."""
    level = getattr(logging, level_name.strip().upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    # Avoid double logging when the root logger is configured too
    logger.propagate = False


def pyyaml_parse(text: str) -> Any:
    """Parse a single YAML document with PyYAML's safe loader."""
    return yaml.safe_load(text)


def equals(parsed: Any, expected: Any) -> bool:
    return parsed == expected


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yamlmatrix",
        description="Run the YAML test suite matrix against PyYAML.",
    )
    parser.add_argument("--matrix-dir", help="Directory of test fixtures (fetched if omitted)")
    parser.add_argument("--cache-dir", help="Where to fetch the test suite to")
    parser.add_argument(
        "--save-failed",
        action="store_true",
        default=None,
        help="Save every failed test as a Markdown file",
    )
    parser.add_argument("--output-dir", help="Directory for saved failures (default: ./failed)")
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    return parser


def resolve_config(args: argparse.Namespace, base: RunnerConfig) -> RunnerConfig:
    """Overlay command-line *args* on *base*."""
    overrides: dict[str, Any] = {}
    for name in ("matrix_dir", "cache_dir", "output_dir"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = Path(value)
    if args.save_failed is not None:
        overrides["save_failed"] = args.save_failed
    if args.log_level is not None:
        overrides["log_level"] = args.log_level.upper()
    return dataclasses.replace(base, **overrides)


def main(argv: list[str] | None = None) -> int:
    """Run the matrix. Returns the process exit code."""
    args = build_arg_parser().parse_args(argv)
    config = resolve_config(args, RunnerConfig.from_env())
    configure_logging(config.log_level)

    try:
        matrix_dir = config.matrix_dir or fetch_test_data(
            config.cache_dir,
            repo_url=config.repo_url,
            revision=config.revision,
        )
        sink = create_sink(config.output_dir, save_failed=config.save_failed)
        summary = run_matrix(
            load_fixtures(matrix_dir),
            parse_function=pyyaml_parse,
            comparator=equals,
            sink=sink,
        )
    except LoadingError as e:
        logger.error("%s", e)
        return 1

    print(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
