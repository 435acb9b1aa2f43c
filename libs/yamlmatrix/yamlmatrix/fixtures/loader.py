"""Loader for YAML test suite fixture directories.

The test data is a flat directory of fixture directories.  Each fixture
directory holds:

- ``in.yaml``        the YAML input (required)
- ``jsonToDartStr``  expected output as JSON (marks an expect-success case)
- ``out.yaml``       expected output as YAML (marks an expect-success case)
- ``===``            a human-readable description

A fixture with neither output file is a case that must fail to parse.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from yamlmatrix.fixtures.errors import LoadingError
from yamlmatrix.fixtures.model import (
    EMPTY_DESCRIPTION,
    ExpectFailure,
    ExpectSuccess,
    Fixture,
)

logger = logging.getLogger("yamlmatrix.fixtures")

META_FILE = "==="
JSON_OUTPUT_FILE = "jsonToDartStr"
YAML_OUTPUT_FILE = "out.yaml"
YAML_INPUT_FILE = "in.yaml"
GIT_DIR = ".git"


def load_fixtures(matrix_dir: str | Path) -> Iterator[Fixture]:
    """Load fixtures from *matrix_dir*.

    The root directory and its layout are checked before anything is
    returned, so a missing root or a stray file raises here and no fixture is
    ever produced.  Fixture directories are then read lazily, one per
    iteration step.

    Raises:
        LoadingError: if the root is missing, holds a non-directory entry, or
            (during iteration) a fixture has no ``in.yaml``.
    """
    root = Path(matrix_dir)
    if not root.is_dir():
        raise LoadingError(f'Expected a test data directory at path "{root}"')

    test_dirs: list[Path] = []
    for entry in root.iterdir():
        if entry.name == GIT_DIR:
            continue
        if not entry.is_dir():
            raise LoadingError(
                f'Found a test file. Expected a test directory at "{entry.absolute()}"'
            )
        test_dirs.append(entry)

    return _iter_fixtures(test_dirs)


def _iter_fixtures(test_dirs: list[Path]) -> Iterator[Fixture]:
    for test_dir in test_dirs:
        yield load_fixture(test_dir.name, test_dir)


def load_fixture(test_id: str, test_dir: Path) -> Fixture:
    """Classify a single fixture directory.

    *test_id* is usually the directory name, which uniquely identifies the
    fixture within the suite.
    """
    description: str | None = None
    input_text: str | None = None
    expected_json: str | None = None
    expected_fallback: str | None = None
    logs: list[str] = []
    is_error = True

    for path in test_dir.iterdir():
        if not path.is_file():
            continue

        name = path.name
        if name == JSON_OUTPUT_FILE:
            is_error = False
            expected_json = _read(path).strip()
        elif name == YAML_OUTPUT_FILE:
            is_error = False
            expected_fallback = _read(path)
        elif name == YAML_INPUT_FILE:
            input_text = _read(path)
        elif name == META_FILE:
            description = _read(path)
        else:
            logger.debug("%s: ignored file %s", test_id, name)
            logs.append(f'Ignored "{name}". Was it important?')

    if input_text is None:
        raise LoadingError(f"No yaml input found for testID: {test_id}")

    if is_error:
        return ExpectFailure(
            test_id,
            input_text,
            description=description if description is not None else EMPTY_DESCRIPTION,
            logs=tuple(logs),
        )

    return ExpectSuccess(
        test_id,
        input_text,
        description=description if description is not None else EMPTY_DESCRIPTION,
        expected_json=expected_json,
        expected_fallback=expected_fallback,
        logs=tuple(logs),
    )


def _read(path: Path) -> str:
    # Line breaks are kept byte for byte; read_text would fold CRLF and CR.
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise LoadingError(f"{path} is not valid UTF-8") from e
